"""Spreadsheet cells: typed values, formulas and number formats."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from decimal import Decimal
from enum import IntEnum
from typing import Any, Optional

from xlsxcore.data_validation import DataValidation
from xlsxcore.date import time_from_excel_time, time_to_excel_time

MAX_NON_SCIENTIFIC_NUMBER = 1e11
MIN_NON_SCIENTIFIC_NUMBER = 1e-9

GENERAL_NUM_FMT = "general"
DEFAULT_DATE_FORMAT = "mm-dd-yy"
DEFAULT_DATE_TIME_FORMAT = "m/d/yy h:mm"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL_INT_RE = re.compile(r"[+-]?[0-9]+")


class CellType(IntEnum):
    """The storage type of a cell's value."""

    STRING = 0
    # A formula whose result is a string; formulas yielding numbers or
    # booleans are stored with those types.
    STRING_FORMULA = 1
    NUMERIC = 2
    BOOL = 3
    # Inline strings are written back as shared strings.
    INLINE = 4
    ERROR = 5
    # ISO 8601 date text; values are passed through unformatted.
    DATE = 6


def _parse_float(text: str) -> float:
    """Parse a number strictly: no surrounding blanks, no digit separators."""
    error = ValueError(f"cannot parse {text!r} as a number")
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        raise error
    unsigned = text.lstrip("+-").lower()
    try:
        if unsigned.startswith("0x"):
            if "p" not in unsigned:
                raise error
            return float.fromhex(text)
        return float(text)
    except ValueError:
        raise error from None


def _format_float(n: float) -> str:
    """Format a float in plain decimal notation with the fewest digits."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "+Inf" if n > 0 else "-Inf"
    text = format(Decimal(repr(n)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def fallback_to(
    cell_type: Optional[CellType], cell_data: str, fallback: CellType
) -> CellType:
    """Keep a numeric cell type only if the data parses as a number."""
    if cell_type == CellType.NUMERIC:
        try:
            _parse_float(cell_data)
        except ValueError:
            pass
        else:
            return cell_type
    return fallback


@dataclass
class Hyperlink:
    """A link attached to a cell."""

    display_string: str = ""
    link: str = ""
    tooltip: str = ""


@dataclass(frozen=True)
class DateTimeOptions:
    """How a datetime is stored: the zone its wall clock is taken in and its format."""

    location: tzinfo = timezone.utc
    excel_time_format: str = DEFAULT_DATE_FORMAT


DEFAULT_DATE_OPTIONS = DateTimeOptions(timezone.utc, DEFAULT_DATE_FORMAT)
DEFAULT_DATE_TIME_OPTIONS = DateTimeOptions(timezone.utc, DEFAULT_DATE_TIME_FORMAT)


@dataclass
class Cell:
    """A single cell of a row."""

    row: Any = None
    value: str = ""
    formula: str = ""
    num_fmt: str = ""
    date1904: bool = False
    hidden: bool = False
    hmerge: int = 0
    vmerge: int = 0
    cell_type: CellType = CellType.STRING
    data_validation: Optional[DataValidation] = None
    hyperlink: Hyperlink = field(default_factory=Hyperlink)

    def merge(self, hcells: int, vcells: int) -> None:
        """Merge with the given number of cells to the right and below."""
        self.hmerge = hcells
        self.vmerge = vcells

    def set_string(self, s: str) -> None:
        self.value = s
        self.formula = ""
        self.cell_type = CellType.STRING

    def set_float(self, n: float) -> None:
        self.set_value(n)

    def get_time(self, date1904: bool) -> datetime:
        """Interpret the value as an Excel serial date."""
        return time_from_excel_time(self.as_float(), date1904)

    def set_float_with_format(self, n: float, num_fmt: str) -> None:
        self.set_value(n)
        self.num_fmt = num_fmt
        self.formula = ""

    def set_format(self, num_fmt: str) -> None:
        self.num_fmt = num_fmt

    def set_date(self, t: datetime) -> None:
        self.set_date_with_options(t, DEFAULT_DATE_OPTIONS)

    def set_datetime(self, t: datetime) -> None:
        self.set_date_with_options(t, DEFAULT_DATE_TIME_OPTIONS)

    def set_date_with_options(self, t: datetime, options: DateTimeOptions) -> None:
        """Store ``t`` as its wall-clock time in ``options.location``.

        Naive datetimes are taken to be in UTC; fractions of a second are dropped.
        """
        if t.tzinfo is None:
            t = t.replace(tzinfo=timezone.utc)
        wall = t.astimezone(options.location)
        as_utc = wall.replace(tzinfo=timezone.utc, microsecond=0)
        self.set_datetime_with_format(
            time_to_excel_time(as_utc, self.date1904), options.excel_time_format
        )

    def set_datetime_with_format(self, n: float, num_fmt: str) -> None:
        self.value = _format_float(float(n))
        self.num_fmt = num_fmt
        self.formula = ""
        self.cell_type = CellType.NUMERIC

    def as_float(self) -> float:
        """Return the value as a float; raise ValueError if it is not a number."""
        return _parse_float(self.value)

    def set_int64(self, n: int) -> None:
        self.set_value(n)

    def as_int64(self) -> int:
        """Return the value parsed as a signed 64-bit decimal integer."""
        if not _DECIMAL_INT_RE.fullmatch(self.value):
            raise ValueError(f"cannot parse {self.value!r} as an integer")
        n = int(self.value)
        if not _INT64_MIN <= n <= _INT64_MAX:
            raise ValueError(f"{self.value!r} is out of range for a 64-bit integer")
        return n

    def set_int(self, n: int) -> None:
        self.set_value(n)

    def as_int(self) -> int:
        """Return the value parsed as a number and truncated to an integer."""
        f = self.as_float()
        try:
            return int(f)
        except (OverflowError, ValueError):
            raise ValueError(f"{self.value!r} has no integer value") from None

    def set_value(self, value: Any) -> None:
        """Store a value, choosing the cell type from the Python type."""
        if isinstance(value, datetime):
            self.set_datetime(value)
        elif isinstance(value, bool):
            self.set_string("true" if value else "false")
        elif isinstance(value, int):
            self.set_numeric(str(value))
        elif isinstance(value, float):
            self.set_numeric(_format_float(value))
        elif isinstance(value, str):
            self.set_string(value)
        elif isinstance(value, (bytes, bytearray)):
            self.set_string(bytes(value).decode("utf-8"))
        elif value is None:
            self.set_string("")
        else:
            self.set_string(str(value))

    def set_numeric(self, s: str) -> None:
        self.value = s
        self.num_fmt = GENERAL_NUM_FMT
        self.formula = ""
        self.cell_type = CellType.NUMERIC

    def set_bool(self, b: bool) -> None:
        self.value = "1" if b else "0"
        self.cell_type = CellType.BOOL

    def as_bool(self) -> bool:
        """Return the value's truth: "1" for booleans, non-zero for numbers, non-empty otherwise."""
        if self.cell_type == CellType.BOOL:
            return self.value == "1"
        if self.cell_type == CellType.NUMERIC:
            return self.value != "0"
        return self.value != ""

    def set_formula(self, formula: str) -> None:
        self.formula = formula
        self.cell_type = CellType.NUMERIC

    def set_string_formula(self, formula: str) -> None:
        self.formula = formula
        self.cell_type = CellType.STRING_FORMULA