"""
Tests for the table inspection action (actions/inspect_table.py).

**Purpose**: Verify describe_table reports row counts, width range, and
ragged rows, without touching the command-line wrapper.
"""

import sys
from pathlib import Path

# Add project root to path so we can import actions module
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actions.inspect_table import describe_table
from src.table.table import Table


def test_describe_table_rectangular():
    table = Table([["a", "b", "c"], ["d", "e", "f"]])

    summary = describe_table(table)

    assert summary == {'rows': 2, 'min_width': 3, 'max_width': 3, 'ragged_rows': []}


def test_describe_table_reports_ragged_rows():
    table = Table([["a", "b", "c"], ["d"], ["e", "f", "g"], ["h", "i", "j", "k"]])

    summary = describe_table(table)

    assert summary['rows'] == 4
    assert summary['min_width'] == 1
    assert summary['max_width'] == 4
    assert summary['ragged_rows'] == [1, 3]


def test_describe_table_empty():
    summary = describe_table(Table())

    assert summary == {'rows': 0, 'min_width': None, 'max_width': None, 'ragged_rows': []}


def test_describe_loaded_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b,c\nd,e\n", encoding="utf-8")
    table = Table()
    table.load(path)

    summary = describe_table(table)

    # Tie between widths 3 and 2 resolves to the wider one
    assert summary['ragged_rows'] == [1]
