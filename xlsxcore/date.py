"""Conversion between Python datetimes and Excel's serial date numbers."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

MJD_0 = 2400000.5
MJD_JD2000 = 51544.5

SECONDS_IN_A_DAY = 86400.0
NANOS_IN_A_DAY = 86400.0 * 1e9

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Excel's 1900 system pretends 29 Feb 1900 existed; starting from
# 30 Dec 1899 makes the day counts after 1 Mar 1900 come out right.
_EXCEL_1900_EPOCH = datetime(1899, 12, 30, tzinfo=timezone.utc)
_EXCEL_1904_EPOCH = datetime(1904, 1, 1, tzinfo=timezone.utc)

_DAYS_BETWEEN_1970_AND_1900 = float((_UNIX_EPOCH - _EXCEL_1900_EPOCH).days)
_DAYS_BETWEEN_1970_AND_1904 = float((_UNIX_EPOCH - _EXCEL_1904_EPOCH).days)

_OFFSET_1900 = 15018.0
_OFFSET_1904 = 16480.0


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder matching truncating division."""
    return a - b * _tdiv(a, b)


def time_to_utc_time(t: datetime) -> datetime:
    """Return a UTC datetime with the same wall-clock fields as ``t``."""
    return t.replace(tzinfo=timezone.utc)


def _shift_julian_to_noon(days: float, fraction: float) -> tuple[float, float]:
    if -0.5 < fraction < 0.5:
        fraction += 0.5
    elif fraction >= 0.5:
        days += 1
        fraction -= 0.5
    else:
        days -= 1
        fraction += 1.5
    return days, fraction


def fraction_of_a_day(fraction: float) -> tuple[int, int, int, int]:
    """Split a fraction of a day into hours, minutes, seconds and nanoseconds.

    The result is rounded to the nearest microsecond.
    """
    c1us = 1000
    c1s = 1_000_000_000
    c1day = 24 * 60 * 60 * 1e9

    frac = int(c1day * fraction + c1us / 2)
    nanoseconds = _tdiv(_tmod(frac, c1s), c1us) * c1us
    frac = _tdiv(frac, c1s)
    seconds = _tmod(frac, 60)
    frac = _tdiv(frac, 60)
    minutes = _tmod(frac, 60)
    hours = _tdiv(frac, 60)
    return hours, minutes, seconds, nanoseconds


def _fliegel_van_flandern(jd: int) -> tuple[int, int, int]:
    """Convert a Julian day number to (day, month, year)."""
    l = jd + 68569
    n = _tdiv(4 * l, 146097)
    l = l - _tdiv(146097 * n + 3, 4)
    i = _tdiv(4000 * (l + 1), 1461001)
    l = l - _tdiv(1461 * i, 4) + 31
    j = _tdiv(80 * l, 2447)
    d = l - _tdiv(2447 * j, 80)
    l = _tdiv(j, 11)
    m = j + 2 - 12 * l
    y = 100 * (n - 49) + i + l
    return d, m, y


def julian_date_to_gregorian_time(part1: float, part2: float) -> datetime:
    """Convert a two-part Julian date into a UTC datetime."""
    part1_frac, part1_int = math.modf(part1)
    part2_frac, part2_int = math.modf(part2)
    days, fraction = _shift_julian_to_noon(
        part1_int + part2_int, part1_frac + part2_frac
    )
    day, month, year = _fliegel_van_flandern(int(days))
    hours, minutes, seconds, nanos = fraction_of_a_day(fraction)
    return datetime(year, month, day, tzinfo=timezone.utc) + timedelta(
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=_tdiv(nanos, 1000),
    )


def time_from_excel_time(excel_time: float, date1904: bool) -> datetime:
    """Convert an Excel serial date number to a UTC datetime."""
    whole_days = int(excel_time)
    # Excel uses Julian dates before 1 March 1900 and Gregorian after.
    if whole_days <= 61:
        offset = _OFFSET_1904 if date1904 else _OFFSET_1900
        return julian_date_to_gregorian_time(MJD_0, excel_time + offset)
    float_part = excel_time - whole_days
    epoch = _EXCEL_1904_EPOCH if date1904 else _EXCEL_1900_EPOCH
    nanos = int(NANOS_IN_A_DAY * float_part)
    return epoch + timedelta(days=whole_days) + timedelta(microseconds=nanos / 1000)


def time_to_excel_time(t: datetime, date1904: bool) -> float:
    """Convert a datetime to Excel's serial date number.

    Naive datetimes are taken to be in UTC.
    """
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    delta = t - _UNIX_EPOCH
    unix_seconds = delta.days * 86400 + delta.seconds
    nanos = delta.microseconds * 1000
    days_since_unix_epoch = unix_seconds / SECONDS_IN_A_DAY
    nanos_part = nanos / NANOS_IN_A_DAY
    offset = _DAYS_BETWEEN_1970_AND_1904 if date1904 else _DAYS_BETWEEN_1970_AND_1900
    return days_since_unix_epoch + offset + nanos_part