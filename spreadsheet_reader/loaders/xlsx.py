"""
Office Open XML loader (.xlsx / .xlsm / .xltx / .xltm) backed by openpyxl.

``read_only=True`` opens the workbook in openpyxl's streaming read-only
mode, which skips style parsing and is markedly faster on large sheets.
``read_only=False`` loads the full workbook model including styles.

Formula cells always yield the value cached by the last application
that saved the file (``data_only=True``); formulas are never evaluated.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook

from spreadsheet_reader.config import LoadOptions
from spreadsheet_reader.exceptions import LoadError, SheetIndexError
from spreadsheet_reader.loaders.base import BaseLoader, Grid, clean_cell

logger = logging.getLogger(__name__)


class XlsxLoader(BaseLoader):
    """Loader for Office Open XML workbooks."""

    extensions = (".xlsx", ".xlsm", ".xltx", ".xltm")

    def load(self, path: str | Path, options: LoadOptions) -> Grid:
        path = Path(path)
        logger.info(
            "Loading workbook %s (read_only=%s, active_sheet=%s, max_rows=%s)",
            path, options.read_only, options.active_sheet, options.max_rows,
        )
        # Passing a file handle skips openpyxl's extension check, so the
        # content signature seen by detect_loader() decides the format.
        with open(path, "rb") as fh:
            try:
                wb = load_workbook(fh, read_only=options.read_only, data_only=True)
            except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as exc:
                raise LoadError(f"Cannot open workbook {path}: {exc}") from exc
            try:
                return self._materialize(wb, path, options)
            finally:
                wb.close()

    @staticmethod
    def _materialize(wb: Workbook, path: Path, options: LoadOptions) -> Grid:
        if options.active_sheet is None:
            ws = wb.active
            if ws is None:
                # activeTab pointing past the last sheet
                ws = wb.worksheets[0]
        elif options.active_sheet < len(wb.worksheets):
            ws = wb.worksheets[options.active_sheet]
        else:
            raise SheetIndexError(
                f"Sheet index {options.active_sheet} out of range: "
                f"{path} has {len(wb.worksheets)} sheet(s) {wb.sheetnames}"
            )

        # Unsized read-only sheets report None; the cap is then applied
        # while streaming.
        sheet_max_row = ws.max_row
        cap = None
        if options.max_rows and (
            sheet_max_row is None or options.max_rows < sheet_max_row
        ):
            cap = options.max_rows

        rows = [
            tuple(clean_cell(v) for v in row)
            for row in ws.iter_rows(max_row=cap, values_only=True)
        ]

        highest_row = len(rows)
        if cap is not None and sheet_max_row is not None:
            highest_row = sheet_max_row

        logger.info("Materialized %d rows from sheet '%s'", len(rows), ws.title)
        return Grid.from_rows(
            rows,
            highest_row=highest_row,
            sheet_title=ws.title,
            source=str(path),
        )
