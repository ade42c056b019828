"""
In-memory table of comma-delimited rows.

**Conceptual**: A ``Table`` is an ordered list of rows, each row an ordered
list of string cells. It is populated from a text file where every line is
one row and every literal comma is a field separator. There is no quoting,
no escaping, no header row, and no type coercion: a cell is whatever text sat
between two commas, whitespace included.

**Contract**:
  - Rows keep file order; cells keep column order.
  - Rows may have different lengths. Nothing ties row width across the table.
  - ``load`` appends. Loading twice accumulates the rows of both files. Call
    ``clear`` first if a reload should replace the content.
  - Lookups (``get_row``, ``get_cell``) return ``None`` for positions that do
    not exist. Negative indices are never wrapped around; they do not exist.
  - ``update_cell`` raises ``InvalidRowIndexError`` or
    ``InvalidColumnIndexError`` (row checked first) and accepts any string,
    including ones containing commas. Such a value is written verbatim and
    will split into extra cells on the next load.
  - ``write`` and ``display`` emit one comma-joined line per row, each
    terminated by a newline.

Lookups hand back copies, so callers can never reach into table state.

Example:
    >>> table = Table()
    >>> table.load("ownership/data.csv")
    3
    >>> table.get_row(1)
    ['d', 'e', 'f']
    >>> table.get_cell(2, 3) is None
    True
"""

import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO

from src.table.errors import (
    InvalidColumnIndexError,
    InvalidRowIndexError,
    TableReadError,
)

Row = List[str]

DELIMITER = ","
LINE_TERMINATOR = "\n"
ENCODING = "utf-8"


def split_line(line: str) -> Row:
    """
    Split one line (terminator already removed) into cells.

    Every comma separates two cells, so an empty line is a single empty cell
    and ``"a,"`` is ``["a", ""]``.
    """
    return line.split(DELIMITER)


def join_row(row: Iterable[str]) -> str:
    """Join cells back into a line, without a terminator."""
    return DELIMITER.join(row)


def _strip_terminator(line: str) -> str:
    # "\n" ends a line; a "\r" right before it belongs to the terminator too.
    if line.endswith(LINE_TERMINATOR):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class Table:
    """
    Ordered rows of string cells with positional read/write access.

    Args:
        rows: Optional initial rows. They are copied; the table never keeps a
              reference to a caller's list.
    """

    def __init__(self, rows: Optional[Iterable[Iterable[str]]] = None):
        self._rows: List[Row] = []
        if rows is not None:
            for row in rows:
                self._rows.append([str(cell) for cell in row])

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Table(rows={len(self._rows)})"

    @property
    def rows(self) -> List[Row]:
        """Copy of every row, in order."""
        return [list(row) for row in self._rows]

    # ========================================================================
    # Loading
    # ========================================================================

    def load(self, path) -> int:
        """
        Append every line of ``path`` to the table as a row.

        **Reading rules**:
          - The file is decoded as UTF-8.
          - Only ``"\\n"`` ends a line (a ``"\\r\\n"`` pair is treated the same).
          - A final line without a terminator is still a row.
          - An empty file adds nothing.
          - Each line is split on every comma, no trimming.

        Rows already in the table are kept; the new rows go after them.

        Args:
            path: File to read.

        Returns:
            Number of rows appended by this call.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            OSError: If the file cannot be opened.
            TableReadError: If reading fails part way through. Rows read
                            before the failure stay in the table.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Table source file not found: {path}")

        appended = 0
        # Binary mode splits on b"\n" only; each line is decoded on its own
        # so a bad line does not discard the ones before it.
        with open(path, "rb") as f:
            lines = iter(f)
            while True:
                try:
                    raw = next(lines)
                    line = raw.decode(ENCODING)
                except StopIteration:
                    break
                except (UnicodeDecodeError, OSError) as e:
                    raise TableReadError(path, appended + 1, str(e)) from e
                self._rows.append(split_line(_strip_terminator(line)))
                appended += 1

        return appended

    def clear(self) -> None:
        """Remove every row."""
        self._rows.clear()

    # ========================================================================
    # Lookups
    # ========================================================================

    def get_row(self, index: int) -> Optional[Row]:
        """
        Return a copy of the row at zero-based ``index``, or ``None``.

        ``None`` means the row does not exist (``index`` is negative or not
        less than the row count). It is not an error.
        """
        if not 0 <= index < len(self._rows):
            return None
        return list(self._rows[index])

    def get_cell(self, row_index: int, col_index: int) -> Optional[str]:
        """
        Return the cell at ``(row_index, col_index)``, or ``None``.

        ``None`` when the row does not exist, or when it exists but is too
        short for ``col_index``.
        """
        if not 0 <= row_index < len(self._rows):
            return None
        row = self._rows[row_index]
        if not 0 <= col_index < len(row):
            return None
        return row[col_index]

    # ========================================================================
    # Mutation
    # ========================================================================

    def update_cell(self, row_index: int, col_index: int, value: str) -> None:
        """
        Replace the cell at ``(row_index, col_index)`` with ``value``.

        ``value`` is stored as given. A comma inside it is not escaped on
        write, so the row gains extra cells when the file is loaded again.

        Raises:
            InvalidRowIndexError: If ``row_index`` is out of bounds. Checked
                                  before the column.
            InvalidColumnIndexError: If ``col_index`` is out of bounds for
                                     that row.
        """
        if not 0 <= row_index < len(self._rows):
            raise InvalidRowIndexError(row_index)
        row = self._rows[row_index]
        if not 0 <= col_index < len(row):
            raise InvalidColumnIndexError(col_index)
        row[col_index] = value

    # ========================================================================
    # Output
    # ========================================================================

    def lines(self) -> Iterator[str]:
        """Yield each row comma-joined, without terminators."""
        for row in self._rows:
            yield join_row(row)

    def write(self, path, create_parents: bool = False) -> None:
        """
        Write every row to ``path``, one comma-joined line per row.

        The file is created or truncated. Every line, the last one included,
        ends with ``"\\n"``.

        Args:
            path: Destination file.
            create_parents: If True, create missing parent directories first.
                            Otherwise a missing directory is an error.

        Raises:
            FileNotFoundError: If the parent directory does not exist and
                               ``create_parents`` is False.
            OSError: If the file cannot be created or written.
        """
        path = Path(path)
        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding=ENCODING, newline=LINE_TERMINATOR) as f:
            for line in self.lines():
                f.write(line + LINE_TERMINATOR)

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Print every row comma-joined, one per line (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        for line in self.lines():
            print(line, file=stream)
