#!/usr/bin/env python3
"""
Report the shape of a comma-delimited file without modifying it.

**Purpose**: Before pointing the table edit run at a file, check how many rows
it has and whether every row has the same number of cells. Rows are split
exactly the way the table loader splits them (every comma is a separator), so
a quoted field containing a comma shows up here as an extra cell.

**Usage**:
    From project root:
    ```bash
    python actions/inspect_table.py ownership/data.csv
    python actions/inspect_table.py ownership/data.csv --show-rows
    ```

**Exit codes**:
  - 0: file loaded and reported
  - 1: file missing or unreadable
"""

import argparse
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.table.errors import TableError
from src.table.frame import row_width_summary, table_to_dataframe
from src.table.table import Table


def describe_table(table: Table) -> dict:
    """
    Summarize row count and row widths.

    Returns:
        Dict with keys 'rows', 'min_width', 'max_width', 'ragged_rows'
        (list of row indices whose width differs from the most common width).
        Widths are None for an empty table.
    """
    widths = row_width_summary(table)
    if widths.empty:
        return {'rows': 0, 'min_width': None, 'max_width': None, 'ragged_rows': []}

    # Most common width; ties go to the widest
    common_width = widths['width'].mode().max()
    ragged = widths.loc[widths['width'] != common_width, 'row_index']
    return {
        'rows': len(widths),
        'min_width': int(widths['width'].min()),
        'max_width': int(widths['width'].max()),
        'ragged_rows': [int(i) for i in ragged],
    }


def main():
    """
    Main entrypoint for the table inspection script.

    Steps:
      1. Load the file into a Table
      2. Compute the width summary
      3. Print it (and optionally every row as a DataFrame)
    """
    parser = argparse.ArgumentParser(
        description="Report row count and row widths of a comma-delimited file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("path", type=str, help="File to inspect.")
    parser.add_argument(
        "--show-rows",
        action="store_true",
        help="Also print every row as a DataFrame (short rows padded with None).",
    )
    args = parser.parse_args()

    table = Table()
    try:
        table.load(args.path)
    except (TableError, OSError) as e:
        print(f"  ✗ {e}", file=sys.stderr)
        sys.exit(1)

    summary = describe_table(table)

    print("=" * 80)
    print(f"Table inspection: {args.path}")
    print("=" * 80)
    print(f"Rows:         {summary['rows']}")
    print(f"Min width:    {summary['min_width']}")
    print(f"Max width:    {summary['max_width']}")
    if summary['ragged_rows']:
        print(f"Ragged rows:  {summary['ragged_rows']}")
    else:
        print("Ragged rows:  none")

    if args.show_rows:
        print()
        print(table_to_dataframe(table).to_string())

    sys.exit(0)


if __name__ == "__main__":
    main()
