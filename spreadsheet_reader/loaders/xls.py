"""
Legacy Excel (BIFF, .xls) loader backed by xlrd.

xlrd reports empty cells as ``""`` and dates as floating point serial
numbers; both are normalized here (``None`` and ``datetime``) so xls
grids look like the ones produced by the openpyxl loader.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import xlrd

from spreadsheet_reader.config import LoadOptions
from spreadsheet_reader.exceptions import LoadError, SheetIndexError
from spreadsheet_reader.loaders.base import BaseLoader, Grid, clean_cell

logger = logging.getLogger(__name__)


def _cell_value(cell: xlrd.sheet.Cell, datemode: int) -> Any:
    """Convert one xlrd cell to a Python scalar."""
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return None
    if cell.ctype == xlrd.XL_CELL_DATE:
        try:
            return xlrd.xldate_as_datetime(cell.value, datemode)
        except xlrd.xldate.XLDateError:
            return cell.value
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return xlrd.error_text_from_code.get(cell.value)
    return clean_cell(cell.value)


def sheet_to_rows(
    sheet: Any, datemode: int = 0, max_rows: int | None = None
) -> list[tuple[Any, ...]]:
    """Materialize the rows of an xlrd sheet, honouring an optional row cap."""
    n_rows = sheet.nrows
    if max_rows and max_rows < n_rows:
        n_rows = max_rows
    return [
        tuple(_cell_value(cell, datemode) for cell in sheet.row(i))
        for i in range(n_rows)
    ]


class XlsLoader(BaseLoader):
    """Loader for BIFF workbooks (Excel 97-2003)."""

    extensions = (".xls",)

    def load(self, path: str | Path, options: LoadOptions) -> Grid:
        path = Path(path)
        logger.info(
            "Loading xls workbook %s (read_only=%s, active_sheet=%s, max_rows=%s)",
            path, options.read_only, options.active_sheet, options.max_rows,
        )
        try:
            book = xlrd.open_workbook(
                str(path), formatting_info=not options.read_only
            )
        except (xlrd.XLRDError, xlrd.compdoc.CompDocError) as exc:
            raise LoadError(f"Cannot open xls workbook {path}: {exc}") from exc

        try:
            sheets = book.sheets()
            if options.active_sheet is None:
                # sheet_visible marks the sheet shown when the file was saved
                sheet = next((s for s in sheets if s.sheet_visible), sheets[0])
            elif options.active_sheet < len(sheets):
                sheet = sheets[options.active_sheet]
            else:
                raise SheetIndexError(
                    f"Sheet index {options.active_sheet} out of range: "
                    f"{path} has {len(sheets)} sheet(s) {book.sheet_names()}"
                )
            rows = sheet_to_rows(sheet, book.datemode, options.max_rows)
        finally:
            book.release_resources()

        logger.info("Materialized %d rows from sheet '%s'", len(rows), sheet.name)
        return Grid.from_rows(
            rows,
            highest_row=sheet.nrows,
            sheet_title=sheet.name,
            source=str(path),
        )
