from datetime import datetime, timedelta, timezone

import pytest

from xlsxcore.date import (
    fraction_of_a_day,
    julian_date_to_gregorian_time,
    time_from_excel_time,
    time_to_excel_time,
    time_to_utc_time,
)

UTC = timezone.utc


def _round_to_second(dt):
    return (dt + timedelta(microseconds=500_000)).replace(microsecond=0)


def test_fraction_of_a_day():
    assert fraction_of_a_day(0) == (0, 0, 0, 0)
    assert fraction_of_a_day(1.0 / 24.0) == (1, 0, 0, 0)


@pytest.mark.parametrize(
    "part2, expected",
    [
        (51544.0, datetime(2000, 1, 1, 0, 0, 0, tzinfo=UTC)),
        (51544.5, datetime(2000, 1, 1, 12, 0, 0, tzinfo=UTC)),
        (51544.245, datetime(2000, 1, 1, 5, 52, 48, tzinfo=UTC)),
        (51544.2456, datetime(2000, 1, 1, 5, 53, 39, 840000, tzinfo=UTC)),
        (51544.24560789123, datetime(2000, 1, 1, 5, 53, 40, 521802, tzinfo=UTC)),
        (51544.1, datetime(2000, 1, 1, 2, 24, 0, tzinfo=UTC)),
        (51544.75, datetime(2000, 1, 1, 18, 0, 0, tzinfo=UTC)),
    ],
)
def test_julian_date_to_gregorian_time(part2, expected):
    assert julian_date_to_gregorian_time(2400000.5, part2) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, datetime(1899, 12, 30, tzinfo=UTC)),
        (60, datetime(1900, 2, 28, tzinfo=UTC)),
        (61, datetime(1900, 3, 1, tzinfo=UTC)),
        (41275.0, datetime(2013, 1, 1, tzinfo=UTC)),
        (401769, datetime(3000, 1, 1, tzinfo=UTC)),
    ],
)
def test_time_from_excel_time(value, expected):
    assert time_from_excel_time(value, False) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.114583333333333, datetime(1899, 12, 30, 2, 45, tzinfo=UTC)),
        (60.1145833333333, datetime(1900, 2, 28, 2, 45, tzinfo=UTC)),
        (61.3986111111111, datetime(1900, 3, 1, 9, 34, tzinfo=UTC)),
        (37947.75, datetime(2003, 11, 22, 18, 0, tzinfo=UTC)),
        (41275.1145833333, datetime(2013, 1, 1, 2, 45, tzinfo=UTC)),
    ],
)
def test_time_from_excel_time_with_fractional_part(value, expected):
    assert _round_to_second(time_from_excel_time(value, False)) == expected


def test_time_from_excel_time_with_1904_offset():
    assert time_from_excel_time(39813.0, True) == datetime(2013, 1, 1, tzinfo=UTC)


def test_time_to_excel_time():
    assert time_to_excel_time(datetime(1899, 12, 30, tzinfo=UTC), False) == 0.0
    assert time_to_excel_time(datetime(1899, 12, 30, tzinfo=UTC), True) == -1462.0
    assert time_to_excel_time(datetime(1970, 1, 1, tzinfo=UTC), False) == 25569.0
    assert time_to_excel_time(datetime(2018, 6, 18, tzinfo=UTC), False) == 43269.0
    assert time_to_excel_time(datetime(3000, 1, 1, tzinfo=UTC), False) == 401769.0


def test_time_to_excel_time_small_value_round_trips():
    small = datetime(1899, 12, 30, 0, 0, 0, 1, tzinfo=UTC)
    excel = time_to_excel_time(small, False)
    assert excel != 0.0
    assert time_from_excel_time(excel, False) == small


def test_time_to_excel_time_naive_is_utc():
    naive = datetime(2018, 6, 18)
    assert time_to_excel_time(naive, False) == 43269.0


def test_time_to_excel_time_respects_offset():
    plus_two = timezone(timedelta(hours=2))
    t = datetime(2018, 6, 18, 2, 0, tzinfo=plus_two)
    assert time_to_excel_time(t, False) == 43269.0


def test_time_to_utc_time_keeps_wall_clock():
    t = datetime(2016, 1, 1, 12, 30, 15, 7, tzinfo=timezone(timedelta(hours=5)))
    result = time_to_utc_time(t)
    assert result == datetime(2016, 1, 1, 12, 30, 15, 7, tzinfo=UTC)
    assert result.utcoffset() == timedelta(0)