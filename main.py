"""
table_edit - Main entry point.

Loads a comma-delimited file, prints one row and one cell, overwrites one
cell, writes the result to a second file, then prints the whole table.

**Usage**:
    From project root:
    ```bash
    python main.py
    python main.py --source data.csv --destination out.csv --update-cell 1,2 --value X
    ```

Defaults come from environment variables / .env (see src/config/settings.py).

**Exit codes**:
  - 0: all six steps completed
  - 1: a step failed (missing file, I/O error, invalid update position)
  - 2: invalid command-line arguments or settings
"""

import argparse
import sys

from src.config.settings import get_settings, parse_cell_position
from src.orchestration.driver import run_table_edit
from src.table.errors import TableError


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser. Every option overrides one setting."""
    parser = argparse.ArgumentParser(
        description="Load a comma-delimited file, update one cell, and write it back.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="File to load (default: TABLE_EDIT_SOURCE_PATH or ownership/data.csv).",
    )
    parser.add_argument(
        "--destination",
        type=str,
        default=None,
        help="File to write (default: TABLE_EDIT_DESTINATION_PATH or ownership/updated_data.csv).",
    )
    parser.add_argument(
        "--lookup-row",
        type=int,
        default=None,
        help="Row index to print (default: 1).",
    )
    parser.add_argument(
        "--lookup-cell",
        type=parse_cell_position,
        default=None,
        metavar="ROW,COL",
        help="Cell to print (default: 2,3).",
    )
    parser.add_argument(
        "--update-cell",
        type=parse_cell_position,
        default=None,
        metavar="ROW,COL",
        help="Cell to overwrite (default: 2,3).",
    )
    parser.add_argument(
        "--value",
        type=str,
        default=None,
        help="Replacement value (default: 'Updated Value').",
    )
    return parser


def main(argv=None) -> int:
    """
    Parse arguments, run the table edit, and return the process exit code.

    Errors from the run are printed to stderr as ``Error: <message>``.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings().table_edit.with_overrides(
            source_path=args.source,
            destination_path=args.destination,
            lookup_row_index=args.lookup_row,
            lookup_cell=args.lookup_cell,
            update_cell=args.update_cell,
            update_value=args.value,
        )
    except ValueError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 2

    try:
        run_table_edit(settings)
    except (TableError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
