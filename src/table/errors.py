"""
Error classes for table loading and mutation.

**Conceptual**: The table distinguishes three kinds of outcome when something
is not where the caller expected it:
  - I/O failures (file missing, unreadable, uncreatable) are ``OSError``s and
    propagate to the caller untouched, except for failures in the middle of
    a read, which are wrapped in ``TableReadError`` so the message can name
    the line that broke.
  - Index failures on the mutation path (``update_cell``) raise a subclass of
    ``TableIndexError`` that says whether the row or the column was wrong.
  - Absence on the lookup path (``get_row``, ``get_cell``) is NOT an error:
    those methods return ``None``.

**Usage**: Catch ``TableError`` (and ``OSError``) at the entry point to print
a message and exit non-zero. Library code should let them propagate.
"""

from pathlib import Path


class TableError(Exception):
    """Base class for all table errors."""


class TableIndexError(TableError, IndexError):
    """
    Raised when ``update_cell`` is given a position outside the table.

    Attributes:
        index: The offending row or column index.
    """

    def __init__(self, message: str, index: int):
        super().__init__(message)
        self.index = index


class InvalidRowIndexError(TableIndexError):
    """The row index is outside ``[0, len(rows))``."""

    def __init__(self, index: int):
        super().__init__(f"Invalid row index: {index}", index)


class InvalidColumnIndexError(TableIndexError):
    """The row exists but the column index is outside that row."""

    def __init__(self, index: int):
        super().__init__(f"Invalid column index: {index}", index)


class TableReadError(TableError, OSError):
    """
    Raised when reading fails after the file was opened.

    Rows appended before the failing line remain in the table.

    Attributes:
        path: File being read.
        line_number: 1-based number of the line that could not be read.
    """

    def __init__(self, path: Path, line_number: int, reason: str):
        super().__init__(
            f"Failed to read {path} at line {line_number}: {reason}"
        )
        self.path = path
        self.line_number = line_number
