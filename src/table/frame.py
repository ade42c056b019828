"""
pandas views of a Table for inspection.

The table itself stays a list of string rows; these helpers only build
read-only DataFrames from it so ragged rows and widths can be inspected with
the usual pandas tooling. Nothing here writes back into the table.
"""

import pandas as pd

from src.table.table import Table


def table_to_dataframe(table: Table) -> pd.DataFrame:
    """
    Build a DataFrame with one row per table row.

    Columns are labelled ``0..max_width-1``. Rows shorter than the widest row
    are padded with ``None``, so ragged rows show up as missing values.
    Cells stay strings (dtype ``object``); nothing is coerced.

    Args:
        table: Table to convert.

    Returns:
        DataFrame of shape ``(len(table), max_width)``. An empty table gives
        an empty DataFrame with no columns.
    """
    rows = table.rows
    width = max((len(row) for row in rows), default=0)
    padded = [row + [None] * (width - len(row)) for row in rows]
    return pd.DataFrame(padded, columns=list(range(width)), dtype=object)


def row_width_summary(table: Table) -> pd.DataFrame:
    """
    Return a DataFrame with columns ``row_index`` and ``width``.

    One entry per table row, in order. Useful to spot rows that do not have
    the same number of cells as the rest.
    """
    return pd.DataFrame(
        {
            'row_index': list(range(len(table))),
            'width': [len(row) for row in table.rows],
        },
        columns=['row_index', 'width'],
    )
