"""
Shared test fixtures for spreadsheet-reader tests.

Every spreadsheet used by the tests is generated into ``tmp_path``:
xlsx workbooks with openpyxl, legacy xls workbooks with xlwt and
delimited files as plain text. No input files are checked into the
repository.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
import xlwt
from openpyxl import Workbook

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------
PEOPLE_ROWS = [
    ["Name", "Age"],
    ["Ann", "30"],
    ["Bo", "41"],
]

OTHER_ROWS = [
    ["sku", "qty"],
    ["X-1", 5],
    ["X-2", 7],
    ["X-3", 9],
]


def write_workbook(
    path: Path, sheets: dict[str, list[list]], active: int = 0
) -> Path:
    """Write a workbook with one sheet per entry of *sheets*."""
    wb = Workbook()
    wb.remove(wb.active)
    for title, rows in sheets.items():
        ws = wb.create_sheet(title)
        for row in rows:
            ws.append(row)
    wb.active = active
    wb.save(path)
    return path


def write_xls(
    path: Path, sheets: dict[str, list[list]], active: int = 0
) -> Path:
    """Write a BIFF workbook; only the *active* sheet is flagged visible."""
    book = xlwt.Workbook()
    for title, rows in sheets.items():
        ws = book.add_sheet(title)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if isinstance(value, datetime):
                    ws.write(r, c, value, xlwt.easyxf(num_format_str="YYYY-MM-DD"))
                else:
                    ws.write(r, c, value)
    book.set_active_sheet(active)
    for i in range(len(sheets)):
        book.get_sheet(i).sheet_visible = i == active
        book.get_sheet(i).selected = i == active
    book.save(str(path))
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def people_rows() -> list[list]:
    return [list(row) for row in PEOPLE_ROWS]


@pytest.fixture()
def people_xlsx(tmp_path) -> Path:
    """Two-sheet workbook; 'People' is first and active."""
    return write_workbook(
        tmp_path / "people.xlsx", {"People": PEOPLE_ROWS, "Stock": OTHER_ROWS}
    )


@pytest.fixture()
def stock_active_xlsx(tmp_path) -> Path:
    """Two-sheet workbook saved with the second sheet ('Stock') active."""
    return write_workbook(
        tmp_path / "stock.xlsx",
        {"People": PEOPLE_ROWS, "Stock": OTHER_ROWS},
        active=1,
    )


@pytest.fixture()
def people_xls(tmp_path) -> Path:
    """Two-sheet BIFF workbook; 'People' is first and active."""
    return write_xls(
        tmp_path / "people.xls", {"People": PEOPLE_ROWS, "Stock": OTHER_ROWS}
    )


@pytest.fixture()
def stock_active_xls(tmp_path) -> Path:
    """Two-sheet BIFF workbook saved with 'Stock' active."""
    return write_xls(
        tmp_path / "stock.xls",
        {"People": PEOPLE_ROWS, "Stock": OTHER_ROWS},
        active=1,
    )


@pytest.fixture()
def dated_xls(tmp_path) -> Path:
    """Single-sheet BIFF workbook with a date-formatted and an empty cell."""
    return write_xls(
        tmp_path / "dated.xls",
        {"Joins": [["Name", "Joined", "Note"], ["Ann", datetime(2024, 1, 2), ""]]},
    )


@pytest.fixture()
def people_csv(tmp_path) -> Path:
    path = tmp_path / "people.csv"
    path.write_text("Name,Age\nAnn,30\nBo,41\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (loads real workbook files)",
    )
