"""
spreadsheet-reader: random-access row reader for spreadsheet files.

Public API surface:

- ``open(path, ...)`` -- **recommended entry point**. Polymorphic: accepts
  either a spreadsheet file (xlsx family, xls, csv/tsv) or a reader YAML
  config and returns a ``SpreadsheetReader``.

- ``SpreadsheetReader`` -- the countable, seekable row cursor. Can also be
  built directly from an in-memory grid (``SpreadsheetReader(rows)``).

- ``Grid`` -- the immutable, fully materialized sheet a reader wraps.
"""

from __future__ import annotations

import logging
from pathlib import Path

from spreadsheet_reader.config import LoadOptions, ReaderConfig, load_config
from spreadsheet_reader.loaders.base import Grid
from spreadsheet_reader.reader import SpreadsheetReader

__all__ = ["open", "SpreadsheetReader", "Grid", "LoadOptions", "ReaderConfig"]

logger = logging.getLogger(__name__)


def open(
    path: str | Path,
    header_row_number: int | None = None,
    active_sheet: int | None = None,
    read_only: bool | None = None,
    max_rows: int | None = None,
) -> SpreadsheetReader:
    """Single entry point: open a spreadsheet file or a reader config.

    Polymorphic behaviour based on the file extension of *path*:

    - **YAML file** (``.yaml`` / ``.yml``): Loads the ``ReaderConfig`` and
      opens its ``source.path`` with its ``options``. Keyword arguments
      that are not ``None`` override the config's options.

    - **Spreadsheet file**: Loads it directly with the given options
      (``read_only`` defaults to True).

    Args:
        path: Path to a spreadsheet or to a reader YAML config.
        header_row_number: Optional 0-based index of the header row.
        active_sheet: 0-based sheet index; ``None`` uses the active sheet.
        read_only: If False, styles are interpreted as well (slow).
        max_rows: Maximum number of sheet rows to materialize.

    Returns:
        A ``SpreadsheetReader`` positioned at pointer 0.

    Examples::

        reader = spreadsheet_reader.open("inputs/people.xlsx", header_row_number=0)
        for record in reader:
            print(record["Name"])

        # Resume an import at row 500
        record = reader.get_row(500)

        # Open from config
        reader = spreadsheet_reader.open("configs/people.yaml")
    """
    p = Path(path)
    overrides = {
        "header_row_number": header_row_number,
        "active_sheet": active_sheet,
        "read_only": read_only,
        "max_rows": max_rows,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    if p.suffix.lower() in (".yaml", ".yml"):
        logger.info("open() -- loading config from %s", p)
        config = load_config(p)
        source = Path(config.source.path)
        if not source.is_absolute():
            # Relative sources resolve against the config's directory
            source = p.parent / source
        options = config.options.model_copy(update=overrides)
        # Re-validate the merged options
        options = LoadOptions.model_validate(options.model_dump())
    else:
        source = p
        options = LoadOptions(**overrides)

    logger.info("open() -- source=%s, options=%s", source, options.model_dump())
    return SpreadsheetReader.from_file(source, **options.model_dump())
