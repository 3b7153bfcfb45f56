"""
Configuration models and YAML I/O for spreadsheet-reader.

Key models:
- LoadOptions: The load-time options of a reader (header row, active
  sheet, read-only flag, row cap).
- SourceConfig: Path of the spreadsheet to read.
- ReaderConfig: Top-level config (source + options), maps 1:1 to a
  reader YAML file.

Key functions:
- load_config(path) -> ReaderConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Pydantic does the validation (non-negative indices, positive row cap)
so the loaders and the cursor can trust the values they receive.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from spreadsheet_reader.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class LoadOptions(BaseModel):
    """Options applied when a spreadsheet is materialized into a grid."""

    header_row_number: int | None = Field(
        None, ge=0, description="0-based index of the row holding column names"
    )
    active_sheet: int | None = Field(
        None, ge=0, description="0-based sheet index; None uses the active sheet"
    )
    read_only: bool = Field(
        True, description="If True, skip style/format interpretation (fast)"
    )
    max_rows: int | None = Field(
        None, ge=1, description="Maximum number of sheet rows to materialize"
    )


class SourceConfig(BaseModel):
    """Source file information."""

    path: str = Field(..., description="Path to the spreadsheet file")


class ReaderConfig(BaseModel):
    """Top-level configuration for a spreadsheet reader."""

    source: SourceConfig
    options: LoadOptions = Field(default_factory=LoadOptions)


def load_config(path: str | Path) -> ReaderConfig:
    """Load and validate a reader YAML file into a ReaderConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ReaderConfig.model_validate(raw)


def save_config(config: ReaderConfig, path: str | Path) -> None:
    """Serialize a ReaderConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# spreadsheet-reader configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
