"""
Loader selection for spreadsheet-reader.

Detection algorithm:
1. Read the first 8 bytes of the file.
2. A ZIP local-file signature selects the Office Open XML loader; an
   OLE2 compound-document signature selects the legacy xls loader.
   Content wins over extension, so a mislabelled workbook still loads.
3. Otherwise fall back to the file extension (each loader declares the
   extensions it accepts).
4. Fallback: raise UnsupportedFormatError.
"""

from __future__ import annotations

import logging
from pathlib import Path

from spreadsheet_reader.exceptions import UnsupportedFormatError
from spreadsheet_reader.loaders.base import BaseLoader
from spreadsheet_reader.loaders.delimited import DelimitedLoader
from spreadsheet_reader.loaders.xls import XlsLoader
from spreadsheet_reader.loaders.xlsx import XlsxLoader

logger = logging.getLogger(__name__)

_ZIP_SIGNATURE = b"PK\x03\x04"
_OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

# Extension fallback, checked in order
_LOADERS: tuple[type[BaseLoader], ...] = (XlsxLoader, XlsLoader, DelimitedLoader)


def _read_signature(path: Path, n_bytes: int = 8) -> bytes:
    with open(path, "rb") as f:
        return f.read(n_bytes)


def detect_loader(path: str | Path) -> type[BaseLoader]:
    """Pick the loader class for a spreadsheet file.

    Args:
        path: Path to the spreadsheet file.

    Returns:
        The BaseLoader subclass that can read the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedFormatError: If neither the content signature nor the
            extension matches a known loader.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Spreadsheet file not found: {path}")

    signature = _read_signature(path)
    if signature.startswith(_ZIP_SIGNATURE):
        logger.debug("ZIP signature found in %s -> XlsxLoader", path.name)
        return XlsxLoader
    if signature.startswith(_OLE2_SIGNATURE):
        logger.debug("OLE2 signature found in %s -> XlsLoader", path.name)
        return XlsLoader

    suffix = path.suffix.lower()
    for loader_cls in _LOADERS:
        if suffix in loader_cls.extensions:
            # A binary extension without a binary signature is a corrupt file;
            # let the loader report it as a LoadError.
            logger.debug("Extension %s -> %s", suffix, loader_cls.__name__)
            return loader_cls

    raise UnsupportedFormatError(
        f"Could not detect spreadsheet format for: {path}\n"
        f"Supported extensions: "
        f"{sorted(ext for cls in _LOADERS for ext in cls.extensions)}\n"
        f"First bytes: {signature!r}"
    )
