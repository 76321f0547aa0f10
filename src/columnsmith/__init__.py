"""ColumnSmith - smart column matching for spreadsheet imports."""

__version__ = "0.1.0"
