# xlsxcore

Building blocks for XLSX spreadsheet content in plain Python, with no
third-party dependencies.

## Modules

- `xlsxcore.date`: conversion between `datetime` values and Excel's
  floating-point date serials in the 1900 and 1904 date systems
  (`time_to_excel_time`, `time_from_excel_time`), plus the helpers
  `julian_date_to_gregorian_time`, `fraction_of_a_day` and
  `time_to_utc_time`. Serials below 62 are converted through the Julian
  calendar, as Excel does before 1 March 1900. Naive datetimes are taken
  to be in UTC.
- `xlsxcore.cell`: the `Cell` dataclass and the `CellType` enum. A cell
  holds a string `value`, a `formula`, a `num_fmt` and a `cell_type`, with
  setters (`set_string`, `set_int`, `set_int64`, `set_float`,
  `set_float_with_format`, `set_numeric`, `set_bool`, `set_date`,
  `set_datetime`, `set_date_with_options`, `set_datetime_with_format`,
  `set_formula`, `set_string_formula`, `set_value`, `set_format`, `merge`)
  and readers (`as_float`, `as_int`, `as_int64`, `as_bool`, `get_time`).
  `DateTimeOptions` chooses the time zone whose wall clock is stored and the
  number format used; `Hyperlink` holds link, display text and tooltip;
  `fallback_to` keeps a numeric cell type only when the data parses as a
  number.
- `xlsxcore.col`: `Col` column definitions covering an inclusive range
  `min`..`max`, and `ColStore`, an ordered store that keeps ranges from
  overlapping by trimming, splitting or replacing earlier definitions when
  a new one is added. A store is iterable in column order and has a length.
- `xlsxcore.data_validation`: `DataValidation` rules (drop-down lists,
  lists taken from a range of a sheet, numeric and text-length ranges,
  prompts and error messages), the enums `DataValidationType`,
  `DataValidationOperator` and `DataValidationErrorStyle`, and the
  cell-reference helpers `col_index_to_letters`, `row_index_to_string` and
  `cell_id_from_coords`.

## Installation

```
pip install .
```

## Examples

Dates:

```python
from datetime import datetime, timezone
from xlsxcore.date import time_to_excel_time, time_from_excel_time

time_to_excel_time(datetime(2018, 6, 18, tzinfo=timezone.utc), False)
# 43269.0
time_from_excel_time(41275.0, False)
# datetime(2013, 1, 1, 0, 0, tzinfo=timezone.utc)
```

Cells:

```python
from xlsxcore.cell import Cell, CellType

cell = Cell()
cell.set_float(37947.75334343)
cell.value        # "37947.75334343"
cell.set_int(1024)
cell.as_int()     # 1024
cell.cell_type    # CellType.NUMERIC
cell.set_bool(True)
cell.as_bool()    # True
```

Columns:

```python
from xlsxcore.col import Col, ColStore, new_col_for_range

store = ColStore()
store.add(new_col_for_range(1, 8))
store.add(Col(min=4, max=5))
[(c.min, c.max) for c in store]   # [(1, 3), (4, 5), (6, 8)]
len(store)                        # 3
```

Data validation:

```python
from xlsxcore.data_validation import new_data_validation

rule = new_data_validation(0, 0, 0, 0, True)
rule.set_drop_list(["a1", "a2", "a3"])
rule.set_input("cell", "pick a value")
rule.formula1     # '"a1,a2,a3"'

rule.set_in_file_list("Sheet ' 2", 2, 1, 3, 10)
rule.formula1     # "'Sheet '' 2'!$C$2:$D$11"
```

Errors are raised as exceptions: `set_drop_list` raises `ValueError` when
the quoted list is longer than 257 bytes, and `as_float`, `as_int`,
`as_int64` and `get_time` raise `ValueError` when the value is not a
number of the right kind.

## What this package does not do

It does not read or write `.xlsx` files, and it has no workbooks, sheets,
rows or styles. Cells are not rendered through their number formats: the
`num_fmt` string is stored but never applied to the value. A cell's
`hyperlink` field can be filled in by hand, but nothing records it as a
sheet relationship.

## Running the tests

```
pip install .[test]
pytest
```