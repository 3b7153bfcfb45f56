"""
Loaders sub-package for spreadsheet-reader.

Contains format-specific loaders that materialize one sheet of a
spreadsheet file into an in-memory Grid.

Design: Strategy Pattern
- base.py defines the BaseLoader ABC (protocol) and the Grid model.
- xlsx.py implements XlsxLoader for Office Open XML workbooks (openpyxl).
- xls.py implements XlsLoader for legacy BIFF workbooks (xlrd).
- delimited.py implements DelimitedLoader for CSV/TSV text (pandas).

detect.py selects the appropriate loader at runtime.
"""
