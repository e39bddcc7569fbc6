#!/usr/bin/env python3
"""
Inspect a table file from the command line.

**Purpose**: Quick way to check how a .csv file is parsed: its dimensions,
the grid as the parser sees it (after comment/blank line removal and
padding), or a single row, column or cell looked up by index or by name.

**Usage**:
    From project root:
    ```bash
    python actions/inspect_table.py data/items.csv
    python actions/inspect_table.py data/items.csv --row Sword
    python actions/inspect_table.py data/items.csv --column 1
    python actions/inspect_table.py data/items.csv --cell Value Sword
    python actions/inspect_table.py data/items.csv --serialize
    ```

Selectors that look like integers are treated as indices, everything else
as names (header text for columns, column-0 text for rows).

**Exit codes**:
  - 0: success
  - 1: row/column/cell not found or out of range
  - 2: file could not be read or parsed
"""

import argparse
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.core.errors import LookupNotFound, OutOfRange, ParseFailure
from csvtable.core.table import Selector, Table
from csvtable.data.io import read_table
from csvtable.utils.logging import configure_logging


def parse_selector(value: str) -> Selector:
    """Interpret a command-line selector as an index if it is an integer."""
    try:
        return int(value)
    except ValueError:
        return value


def describe_table(table: Table) -> str:
    """Summary header printed before the table contents."""
    return f"Table '{table.name}': {table.width} columns x {table.height} rows"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print a parsed CSV table, or part of it.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("path", type=Path, help="Path to the table file.")

    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("--row", type=str, default=None, help="Row index or label.")
    selection.add_argument("--column", type=str, default=None, help="Column index or header.")
    selection.add_argument(
        "--cell",
        nargs=2,
        metavar=("COLUMN", "ROW"),
        default=None,
        help="Column and row selectors of a single cell.",
    )
    selection.add_argument(
        "--serialize",
        action="store_true",
        help="Print the table in file format instead of the display format.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entrypoint for table inspection.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        table = read_table(args.path)
    except (OSError, ValueError, ParseFailure) as e:
        print(f"ERROR: {e}")
        return 2

    try:
        if args.row is not None:
            print(", ".join(table.get_row(parse_selector(args.row))))
        elif args.column is not None:
            print("\n".join(table.get_column(parse_selector(args.column))))
        elif args.cell is not None:
            column, row = args.cell
            print(table.get_cell(parse_selector(column), parse_selector(row)))
        elif args.serialize:
            print(table.serialize())
        else:
            print(describe_table(table))
            print("-" * 80)
            print(table.to_display_string())
    except (LookupNotFound, OutOfRange) as e:
        print(f"ERROR: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
