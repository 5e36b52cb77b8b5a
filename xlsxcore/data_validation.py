"""Cell data validation rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

_EXCEL_2006_MAX_ROW_INDEX = 1048576 - 1

# 255 characters plus two quotes.
_FORMULA_MAX_LEN = 257
_FORMULA_LEN_ERROR = "data validation must be 0-255 characters"

_EXTERNAL_SHEET_BANG = "!"
_CELL_RANGE_CHAR = ":"
_FIXED_CELL_REF_CHAR = "$"


class DataValidationType(IntEnum):
    NONE = 1
    CUSTOM = 2
    DATE = 3
    DECIMAL = 4
    LIST = 5
    TEXT_LENGTH = 6
    TIME = 7
    WHOLE = 8

    @property
    def xml_name(self) -> str:
        return _TYPE_NAMES[self]


_TYPE_NAMES = {
    DataValidationType.NONE: "none",
    DataValidationType.CUSTOM: "custom",
    DataValidationType.DATE: "date",
    DataValidationType.DECIMAL: "decimal",
    DataValidationType.LIST: "list",
    DataValidationType.TEXT_LENGTH: "textLength",
    DataValidationType.TIME: "time",
    DataValidationType.WHOLE: "whole",
}


class DataValidationErrorStyle(IntEnum):
    STOP = 1
    WARNING = 2
    INFORMATION = 3

    @property
    def xml_name(self) -> str:
        return _ERROR_STYLE_NAMES[self]


_ERROR_STYLE_NAMES = {
    DataValidationErrorStyle.STOP: "stop",
    DataValidationErrorStyle.WARNING: "warning",
    DataValidationErrorStyle.INFORMATION: "information",
}


class DataValidationOperator(IntEnum):
    BETWEEN = 1
    EQUAL = 2
    GREATER_THAN = 3
    GREATER_THAN_OR_EQUAL = 4
    LESS_THAN = 5
    LESS_THAN_OR_EQUAL = 6
    NOT_BETWEEN = 7
    NOT_EQUAL = 8

    @property
    def xml_name(self) -> str:
        return _OPERATOR_NAMES[self]


_OPERATOR_NAMES = {
    DataValidationOperator.BETWEEN: "between",
    DataValidationOperator.EQUAL: "equal",
    DataValidationOperator.GREATER_THAN: "greaterThan",
    DataValidationOperator.GREATER_THAN_OR_EQUAL: "greaterThanOrEqual",
    DataValidationOperator.LESS_THAN: "lessThan",
    DataValidationOperator.LESS_THAN_OR_EQUAL: "lessThanOrEqual",
    DataValidationOperator.NOT_BETWEEN: "notBetween",
    DataValidationOperator.NOT_EQUAL: "notEqual",
}


def col_index_to_letters(index: int) -> str:
    """Return the column letters for a zero-based column index (0 -> "A")."""
    if index < 0:
        raise ValueError(f"column index must not be negative: {index}")
    letters = []
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters))


def row_index_to_string(index: int) -> str:
    """Return the one-based row number for a zero-based row index."""
    if index < 0:
        raise ValueError(f"row index must not be negative: {index}")
    return str(index + 1)


def cell_id_from_coords(x: int, y: int, fixed_x: bool, fixed_y: bool) -> str:
    """Build a cell reference such as "C2" or "$C$2" from zero-based coordinates."""
    col = col_index_to_letters(x)
    row = row_index_to_string(y)
    if fixed_x:
        col = _FIXED_CELL_REF_CHAR + col
    if fixed_y:
        row = _FIXED_CELL_REF_CHAR + row
    return col + row


@dataclass
class DataValidation:
    """A data validation rule applied to a range of cells."""

    sqref: str = ""
    allow_blank: bool = False
    show_input_message: bool = False
    show_error_message: bool = False
    error_style: Optional[str] = None
    error_title: Optional[str] = None
    error: Optional[str] = None
    prompt_title: Optional[str] = None
    prompt: Optional[str] = None
    type: str = ""
    operator: str = ""
    formula1: str = ""
    formula2: str = ""

    def set_error(self, style, title: Optional[str], msg: Optional[str]) -> None:
        """Show an error message of the given style when validation fails."""
        self.show_error_message = True
        self.error = msg
        self.error_title = title
        try:
            self.error_style = DataValidationErrorStyle(style).xml_name
        except ValueError:
            self.error_style = DataValidationErrorStyle.STOP.xml_name

    def set_input(self, title: Optional[str], msg: Optional[str]) -> None:
        """Show a prompt message when the cell is selected."""
        self.show_input_message = True
        self.prompt_title = title
        self.prompt = msg

    def set_drop_list(self, keys: Iterable[str]) -> None:
        """Restrict values to a fixed list of choices."""
        formula = '"' + ",".join(keys) + '"'
        if len(formula.encode("utf-8")) > _FORMULA_MAX_LEN:
            raise ValueError(_FORMULA_LEN_ERROR)
        self.formula1 = formula
        self.type = DataValidationType.LIST.xml_name

    def set_in_file_list(self, sheet: str, x1: int, y1: int, x2: int, y2: int) -> None:
        """Restrict values to those found in a range of a sheet.

        A negative ``y2`` selects to the last row of the column.
        """
        start = cell_id_from_coords(x1, y1, True, True)
        if y2 < 0:
            y2 = _EXCEL_2006_MAX_ROW_INDEX
        end = cell_id_from_coords(x2, y2, True, True)
        escaped = sheet.replace("'", "''")
        self.formula1 = (
            "'" + escaped + "'" + _EXTERNAL_SHEET_BANG + start + _CELL_RANGE_CHAR + end
        )
        self.type = DataValidationType.LIST.xml_name

    def set_range(self, f1: int, f2: int, validation_type, operator) -> None:
        """Restrict values by comparing them with one or two bounds."""
        formula1, formula2 = str(f1), str(f2)
        if operator in (
            DataValidationOperator.BETWEEN,
            DataValidationOperator.NOT_BETWEEN,
        ) and f1 > f2:
            formula1, formula2 = formula2, formula1
        self.formula1 = formula1
        self.formula2 = formula2
        self.type = _TYPE_NAMES.get(validation_type, "")
        self.operator = _OPERATOR_NAMES.get(operator, "")


def new_data_validation(
    start_row: int, start_col: int, end_row: int, end_col: int, allow_blank: bool
) -> DataValidation:
    """Create a validation covering the given zero-based cell range."""
    start_x = col_index_to_letters(start_col)
    start_y = row_index_to_string(start_row)
    end_x = col_index_to_letters(end_col)
    end_y = row_index_to_string(end_row)
    sqref = start_x + start_y
    if start_x != end_x or start_y != end_y:
        sqref += ":" + end_x + end_y
    return DataValidation(sqref=sqref, allow_blank=allow_blank)