"""
Delimited text loader (.csv / .tsv / .txt) backed by pandas.

A delimited file is treated as a workbook with exactly one sheet. Tab
is the delimiter for ``.tsv`` files and comma otherwise. Every cell is
read as a string (``dtype=str``) and empty fields become ``None``.
``read_only`` has no effect: text files carry no styles.

Row lengths may vary: a first pass with the csv module measures the
widest record, and shorter rows are padded with ``None``.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import pandas as pd

from spreadsheet_reader.config import LoadOptions
from spreadsheet_reader.exceptions import LoadError, SheetIndexError
from spreadsheet_reader.loaders.base import BaseLoader, Grid, clean_cell

logger = logging.getLogger(__name__)


def _widest_row(path: Path, sep: str, max_rows: int | None) -> int:
    """Count the fields of the widest record (up to *max_rows* records)."""
    width = 0
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        for i, record in enumerate(csv.reader(f, delimiter=sep)):
            if max_rows is not None and i >= max_rows:
                break
            width = max(width, len(record))
    return width


class DelimitedLoader(BaseLoader):
    """Loader for CSV-like text files."""

    extensions = (".csv", ".tsv", ".txt")

    def load(self, path: str | Path, options: LoadOptions) -> Grid:
        path = Path(path)
        if options.active_sheet not in (None, 0):
            raise SheetIndexError(
                f"Sheet index {options.active_sheet} out of range: "
                f"{path} is a delimited file with a single sheet"
            )
        logger.info("Loading delimited file %s (max_rows=%s)", path, options.max_rows)
        sep = "\t" if path.suffix.lower() == ".tsv" else ","

        try:
            # pandas sizes the frame from the first line; naming every
            # column up front lets later, wider rows load too.
            width = _widest_row(path, sep, options.max_rows)
            if width == 0:
                df = pd.DataFrame()
            else:
                df = pd.read_csv(
                    path,
                    header=None,
                    names=list(range(width)),
                    sep=sep,
                    encoding="utf-8-sig",
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=False,
                    nrows=options.max_rows,
                )
        except (csv.Error, pd.errors.ParserError, UnicodeDecodeError) as exc:
            raise LoadError(f"Cannot parse delimited file {path}: {exc}") from exc

        rows = [
            tuple(clean_cell(v) for v in row)
            for row in df.itertuples(index=False, name=None)
        ]

        logger.info("Materialized %d rows from %s", len(rows), path.name)
        return Grid.from_rows(rows, sheet_title=path.stem, source=str(path))
