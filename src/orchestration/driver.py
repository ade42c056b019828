"""
Fixed load -> inspect -> update -> write -> display workflow.

**Conceptual**: The driver is the only caller of ``Table`` in a normal run.
It performs the same six steps every time, in order:
  1. Load the source file into an empty table.
  2. Print the lookup row, if it exists.
  3. Print the lookup cell, if it exists.
  4. Overwrite the update cell (an invalid position aborts the run).
  5. Write the table to the destination file.
  6. Print the whole table.

Which file and which cells are involved comes from ``TableEditSettings``.
Lookups that find nothing are skipped silently; every other failure
propagates out of ``run_table_edit`` unchanged, so the caller decides how to
report it.

**Note on the default positions**: the defaults look up and update cell
(2, 3). On a three-column file the last column index is 2, so the lookup
prints nothing and the update raises ``InvalidColumnIndexError``. That is the
table contract working as specified, not something the driver corrects.
"""

import sys
from typing import Optional, TextIO

from src.config.settings import TableEditSettings
from src.table.table import Table, join_row


def run_table_edit(
    settings: TableEditSettings,
    stream: Optional[TextIO] = None,
) -> Table:
    """
    Run the six-step table edit workflow.

    Args:
        settings: Paths and positions to use.
        stream: Where lookups and the final dump are printed (stdout by default).

    Returns:
        The updated table (already written to ``settings.destination_path``).

    Raises:
        FileNotFoundError: If the source file does not exist.
        OSError: If the source cannot be read or the destination written.
        InvalidRowIndexError: If the update row does not exist.
        InvalidColumnIndexError: If the update column does not exist in that row.
    """
    if stream is None:
        stream = sys.stdout

    # Step 1: load
    table = Table()
    table.load(settings.source_path)

    # Step 2: row lookup
    row_index = settings.lookup_row_index
    row = table.get_row(row_index)
    if row is not None:
        print(f"Row {row_index}: {join_row(row)}", file=stream)

    # Step 3: cell lookup
    cell_row, cell_col = settings.lookup_cell
    cell = table.get_cell(cell_row, cell_col)
    if cell is not None:
        print(f"Cell ({cell_row}, {cell_col}): {cell}", file=stream)

    # Step 4: update
    update_row, update_col = settings.update_cell
    table.update_cell(update_row, update_col, settings.update_value)

    # Step 5: persist
    table.write(settings.destination_path)

    # Step 6: display
    table.display(stream)

    return table
