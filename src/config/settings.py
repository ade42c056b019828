"""
Configuration settings for the table edit run.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
at construction, so a bad path or index fails at startup rather than halfway
through a run.

**Why centralized config?**
  - The file paths and cell positions the run uses are values, not constants
    baked into the orchestration code.
  - Easy to test (construct settings directly instead of reading the environment).
  - One place to change defaults.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

# Load .env from project root (no-op if the file is absent)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


DEFAULT_SOURCE_PATH = "ownership/data.csv"
DEFAULT_DESTINATION_PATH = "ownership/updated_data.csv"
DEFAULT_LOOKUP_ROW = 1
DEFAULT_LOOKUP_CELL = (2, 3)
DEFAULT_UPDATE_CELL = (2, 3)
DEFAULT_UPDATE_VALUE = "Updated Value"

CellPosition = Tuple[int, int]


def parse_cell_position(text: str, name: str = "cell position") -> CellPosition:
    """
    Parse a ``"row,col"`` string into a ``(row, col)`` tuple.

    Whitespace around either number is ignored.

    Raises:
        ValueError: If the text is not two comma-separated integers.
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(
            f"{name} must be two integers separated by a comma (e.g. '2,3'), got: {text!r}"
        )
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        raise ValueError(
            f"{name} must be two integers separated by a comma (e.g. '2,3'), got: {text!r}"
        )


def _parse_int(text: str, name: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {text}")


@dataclass(frozen=True)
class TableEditSettings:
    """
    Inputs for one load / inspect / update / write / display run.

    **Conceptual**: The run always performs the same six steps; these settings
    only say which files and which cells the steps touch. Keeping them in a
    frozen dataclass means the driver has no hidden state and tests can run it
    against any file.

    Attributes:
        source_path: File to load.
        destination_path: File the updated table is written to.
        lookup_row_index: Row printed in the row lookup step.
        lookup_cell: (row, col) printed in the cell lookup step.
        update_cell: (row, col) overwritten in the update step.
        update_value: New value for ``update_cell``.
    """
    source_path: Path = Path(DEFAULT_SOURCE_PATH)
    destination_path: Path = Path(DEFAULT_DESTINATION_PATH)
    lookup_row_index: int = DEFAULT_LOOKUP_ROW
    lookup_cell: CellPosition = DEFAULT_LOOKUP_CELL
    update_cell: CellPosition = DEFAULT_UPDATE_CELL
    update_value: str = DEFAULT_UPDATE_VALUE

    def __post_init__(self):
        """Normalize paths and validate indices."""
        for field_name in ("source_path", "destination_path"):
            value = getattr(self, field_name)
            if value is None or str(value) == "":
                raise ValueError(f"{field_name} must not be empty")
            # Frozen dataclass: bypass __setattr__ to coerce str -> Path
            object.__setattr__(self, field_name, Path(value))

        if self.lookup_row_index < 0:
            raise ValueError(
                f"lookup_row_index must be non-negative, got: {self.lookup_row_index}"
            )
        for field_name in ("lookup_cell", "update_cell"):
            position = tuple(getattr(self, field_name))
            if len(position) != 2:
                raise ValueError(
                    f"{field_name} must be a (row, col) pair, got: {position}"
                )
            if position[0] < 0 or position[1] < 0:
                raise ValueError(
                    f"{field_name} indices must be non-negative, got: {position}"
                )
            object.__setattr__(self, field_name, position)

        if self.update_value is None:
            raise ValueError("update_value must be a string, got: None")

    def with_overrides(self, **changes) -> "TableEditSettings":
        """
        Return a validated copy with the given fields replaced.

        Keys whose value is None are ignored, so CLI arguments that were not
        given can be passed straight through.
        """
        changes = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "TableEditSettings":
        """
        Load table edit settings from environment variables.

        **Environment variables** (all optional):
          - TABLE_EDIT_SOURCE_PATH: File to load. Default "ownership/data.csv".
          - TABLE_EDIT_DESTINATION_PATH: File to write.
            Default "ownership/updated_data.csv".
          - TABLE_EDIT_LOOKUP_ROW: Row index to print. Default 1.
          - TABLE_EDIT_LOOKUP_CELL: "row,col" to print. Default "2,3".
          - TABLE_EDIT_UPDATE_CELL: "row,col" to overwrite. Default "2,3".
          - TABLE_EDIT_UPDATE_VALUE: Replacement value. Default "Updated Value".

        Returns:
            TableEditSettings loaded from the environment.

        Raises:
            ValueError: If a value cannot be parsed or fails validation.
        """
        source_path = os.getenv("TABLE_EDIT_SOURCE_PATH", DEFAULT_SOURCE_PATH)
        destination_path = os.getenv("TABLE_EDIT_DESTINATION_PATH", DEFAULT_DESTINATION_PATH)
        lookup_row_str = os.getenv("TABLE_EDIT_LOOKUP_ROW", str(DEFAULT_LOOKUP_ROW))
        lookup_cell_str = os.getenv("TABLE_EDIT_LOOKUP_CELL", "%d,%d" % DEFAULT_LOOKUP_CELL)
        update_cell_str = os.getenv("TABLE_EDIT_UPDATE_CELL", "%d,%d" % DEFAULT_UPDATE_CELL)
        update_value = os.getenv("TABLE_EDIT_UPDATE_VALUE", DEFAULT_UPDATE_VALUE)

        return cls(
            source_path=source_path,
            destination_path=destination_path,
            lookup_row_index=_parse_int(lookup_row_str, "TABLE_EDIT_LOOKUP_ROW"),
            lookup_cell=parse_cell_position(lookup_cell_str, "TABLE_EDIT_LOOKUP_CELL"),
            update_cell=parse_cell_position(update_cell_str, "TABLE_EDIT_UPDATE_CELL"),
            update_value=update_value,
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the application.

    Attributes:
        table_edit: Paths and positions for the table edit run.
    """
    table_edit: TableEditSettings

    @classmethod
    def from_env(cls) -> "Settings":
        """Load global settings from environment variables."""
        return cls(table_edit=TableEditSettings.from_env())


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.
    Tests should construct ``TableEditSettings`` directly, or call
    ``reset_settings`` after changing environment variables.

    Raises:
        ValueError: If environment values fail validation.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """Reset the global settings singleton (for testing)."""
    global _default_settings
    _default_settings = None
