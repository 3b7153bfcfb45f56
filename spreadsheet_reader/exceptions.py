"""
Custom exception hierarchy for spreadsheet-reader.

Callers can catch a single base class (``SpreadsheetReaderError``) or
a specific failure (e.g., ``SheetIndexError`` vs ``HeaderRowError``)
without relying on generic ValueError/IndexError.

Out-of-range row access is deliberately *not* an exception:
``SpreadsheetReader.current()`` returns ``None`` when the pointer is
outside the grid.
"""


class SpreadsheetReaderError(Exception):
    """Base exception for all spreadsheet-reader errors."""


class LoadError(SpreadsheetReaderError):
    """Raised when a spreadsheet file cannot be opened or parsed.

    The underlying parser exception (openpyxl, xlrd, pandas) is chained
    as ``__cause__``.
    """


class UnsupportedFormatError(LoadError):
    """Raised when no loader handles the file's signature or extension."""


class SheetIndexError(LoadError):
    """Raised when the requested active sheet index does not exist."""


class HeaderRowError(SpreadsheetReaderError):
    """Raised when a header row number does not reference a row of the grid."""


class ConfigValidationError(SpreadsheetReaderError):
    """Raised when a reader YAML config is empty or unusable."""
