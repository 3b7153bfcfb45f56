"""
Row cursor over a materialized spreadsheet grid.

``SpreadsheetReader`` exposes the rows of one sheet as a countable,
seekable sequence of records. The grid is loaded once (see
``spreadsheet_reader.loaders``) and never re-read; the reader only
moves an integer pointer over it.

Record shaping:
- Without column headers, a record is the row itself as a list.
- With column headers whose length equals the row's length, a record
  is a dict of header -> cell value. Duplicate header names collapse:
  the last column wins.
- A header/row length mismatch falls back to the positional list.

Cursor protocol (mirrors a seekable iterator):
- ``rewind()`` puts the pointer on the first data row, i.e. just
  below the header row when one is designated.
- ``next()`` advances by one; ``valid()`` tells whether the pointer
  is on a row of the grid.
- ``seek(n)`` moves the pointer to *n* unconditionally. It does not
  skip the header row: seeking onto the header index returns the
  header values as a record.

Out-of-range reads do not raise: ``current()`` returns ``None`` when
``valid()`` is False.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

from spreadsheet_reader.config import LoadOptions
from spreadsheet_reader.detect import detect_loader
from spreadsheet_reader.exceptions import HeaderRowError
from spreadsheet_reader.loaders.base import Grid

logger = logging.getLogger(__name__)

Record = list[Any] | dict[Any, Any]


class SpreadsheetReader:
    """Countable, seekable cursor over the rows of a Grid.

    Args:
        grid: A ``Grid`` or any nested sequence of cell values.
        header_row_number: Optional 0-based index of the row that holds
            the column names. Validated immediately.

    Raises:
        HeaderRowError: If *header_row_number* is not a row of the grid.
    """

    def __init__(
        self,
        grid: Grid | Sequence[Sequence[Any]],
        header_row_number: int | None = None,
    ) -> None:
        self._grid = grid if isinstance(grid, Grid) else Grid.from_rows(grid)
        self._header_row_number: int | None = None
        self._column_headers: list[Any] = []
        self._pointer = 0

        if header_row_number is not None:
            self.set_header_row_number(header_row_number)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        header_row_number: int | None = None,
        active_sheet: int | None = None,
        read_only: bool = True,
        max_rows: int | None = None,
    ) -> SpreadsheetReader:
        """Load a spreadsheet file and wrap its active sheet in a reader.

        Args:
            path: Path to the spreadsheet (xlsx family, xls, csv/tsv).
            header_row_number: Optional 0-based index of the header row.
            active_sheet: 0-based sheet index; ``None`` uses the sheet
                that was active when the file was saved.
            read_only: If False, styles are interpreted as well (slow).
            max_rows: Maximum number of sheet rows to materialize.

        Raises:
            FileNotFoundError: If *path* does not exist.
            pydantic.ValidationError: If an option is out of its domain
                (e.g., a negative sheet index).
            UnsupportedFormatError: If no loader handles the file.
            LoadError: If the file cannot be parsed.
            SheetIndexError: If *active_sheet* does not exist.
            HeaderRowError: If *header_row_number* is not a row of the grid.
        """
        options = LoadOptions(
            header_row_number=header_row_number,
            active_sheet=active_sheet,
            read_only=read_only,
            max_rows=max_rows,
        )
        loader_cls = detect_loader(path)
        grid = loader_cls().load(path, options)
        return cls(grid, header_row_number=options.header_row_number)

    # -- Properties ---------------------------------------------------------

    @property
    def grid(self) -> Grid:
        """The materialized grid (immutable)."""
        return self._grid

    @property
    def header_row_number(self) -> int | None:
        return self._header_row_number

    @property
    def pointer(self) -> int:
        return self._pointer

    def __repr__(self) -> str:
        return (
            f"SpreadsheetReader(rows={len(self._grid)}, "
            f"header_row_number={self._header_row_number!r}, "
            f"pointer={self._pointer})"
        )

    # -- Header -------------------------------------------------------------

    def set_header_row_number(self, row_number: int) -> None:
        """Designate the row holding column names.

        The row's values are captured as column headers once, as-is (no
        trimming or deduplication). The header row is excluded from
        ``count()`` and skipped by ``rewind()``.

        Raises:
            HeaderRowError: If *row_number* is negative or past the last row.
        """
        if not 0 <= row_number < len(self._grid):
            raise HeaderRowError(
                f"Header row {row_number} out of range: "
                f"grid has {len(self._grid)} row(s)"
            )
        self._header_row_number = row_number
        self._column_headers = list(self._grid.rows[row_number])
        logger.debug(
            "Header row set to %d: %s", row_number, self._column_headers
        )

    def set_column_headers(self, column_headers: Sequence[Any]) -> None:
        """Supply column names without designating a header row.

        ``count()`` and ``rewind()`` are unaffected; every row stays a
        data row.
        """
        self._column_headers = list(column_headers)

    def get_column_headers(self) -> list[Any]:
        """Return a copy of the column headers (empty when none are set)."""
        return list(self._column_headers)

    # -- Counting -----------------------------------------------------------

    def count(self) -> int:
        """Number of data rows: all rows minus the header row, if any."""
        count = len(self._grid)
        if self._header_row_number is not None:
            count -= 1
        return count

    def __len__(self) -> int:
        return self.count()

    # -- Cursor -------------------------------------------------------------

    def current(self) -> Record | None:
        """Return the record under the pointer, or ``None`` if not ``valid()``."""
        if not self.valid():
            return None
        row = self._grid.rows[self._pointer]

        # Named record only when every cell has a header
        if self._column_headers and len(self._column_headers) == len(row):
            return dict(zip(self._column_headers, row))
        return list(row)

    def key(self) -> int:
        """Return the pointer (the current row index in the grid)."""
        return self._pointer

    def next(self) -> None:
        self._pointer += 1

    def rewind(self) -> None:
        """Move the pointer to the first data row (below the header row)."""
        if self._header_row_number is None:
            self._pointer = 0
        else:
            self._pointer = self._header_row_number + 1

    def seek(self, pointer: int) -> None:
        """Move the pointer to *pointer*; no bounds check, no header skip."""
        self._pointer = pointer

    def valid(self) -> bool:
        return 0 <= self._pointer < len(self._grid)

    def get_row(self, number: int) -> Record | None:
        """Seek to *number* and return its record. Leaves the pointer there."""
        self.seek(number)
        return self.current()

    def __iter__(self) -> Iterator[Record]:
        """Rewind, then yield every data row in order.

        Shares the reader's pointer: afterwards it sits one past the
        last row.
        """
        self.rewind()
        while self.valid():
            yield self.current()
            self.next()
