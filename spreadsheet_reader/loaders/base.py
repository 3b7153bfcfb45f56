"""
Base loader ABC and the Grid data model for spreadsheet-reader.

All format-specific loaders implement this interface. The contract is:
1. load() takes a file path and LoadOptions, and returns a Grid.
2. The Grid is fully materialized: every row of the selected sheet
   (up to ``max_rows``) is held in memory, empty cells as ``None``.
3. Parser failures surface as LoadError / SheetIndexError; the cursor
   never re-reads the source afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from spreadsheet_reader.config import LoadOptions


@dataclass(frozen=True)
class Grid:
    """Immutable two-dimensional table of cell values.

    Attributes:
        rows: Rows in sheet order, index origin 0. Row lengths may vary.
        highest_row: 1-based number of the highest row in the sheet,
            before any ``max_rows`` cap was applied.
        highest_column: 1-based number of the highest column.
        sheet_title: Name of the sheet the rows came from, if any.
        source: Path of the source file, if any.
    """
    rows: tuple[tuple[Any, ...], ...] = ()
    highest_row: int = 0
    highest_column: int = 0
    sheet_title: str | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        # Rows passed as lists are frozen so callers cannot mutate the grid
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Iterable[Any]],
        *,
        highest_row: int | None = None,
        sheet_title: str | None = None,
        source: str | None = None,
    ) -> Grid:
        """Build a Grid from any nested iterable of cell values."""
        frozen = tuple(tuple(row) for row in rows)
        return cls(
            rows=frozen,
            highest_row=len(frozen) if highest_row is None else highest_row,
            highest_column=max((len(r) for r in frozen), default=0),
            sheet_title=sheet_title,
            source=source,
        )

    def __len__(self) -> int:
        return len(self.rows)


def clean_cell(value: Any) -> Any:
    """Normalize the parsers' empty markers (``""``, NaN) to ``None``."""
    if value is None:
        return None
    if isinstance(value, str) and value == "":
        return None
    if isinstance(value, float) and value != value:
        return None
    return value


class BaseLoader(ABC):
    """Abstract base class for spreadsheet loaders.

    Subclasses declare the file ``extensions`` they accept (used by
    ``detect_loader()`` as a fallback when the content signature is
    inconclusive) and implement load().
    """

    extensions: tuple[str, ...] = ()

    @abstractmethod
    def load(self, path: str | Path, options: LoadOptions) -> Grid:
        """Materialize the selected sheet of a spreadsheet file.

        Args:
            path: Path to the spreadsheet file.
            options: Validated load options (active sheet, read-only
                flag, row cap). ``header_row_number`` is ignored here;
                it belongs to the cursor.

        Returns:
            A fully populated Grid.

        Raises:
            LoadError: If the file cannot be parsed.
            SheetIndexError: If ``options.active_sheet`` is out of range.
        """
