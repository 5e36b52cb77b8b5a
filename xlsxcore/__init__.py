"""Spreadsheet building blocks: Excel date serials, cells, column ranges and data validation."""

__version__ = "0.1.0"
__all__ = ["cell", "col", "data_validation", "date"]