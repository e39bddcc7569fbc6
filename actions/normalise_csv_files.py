#!/usr/bin/env python3
"""
Rewrite all table files in a directory in the canonical write format.

**Purpose**: Hand-edited .csv files drift: comment lines, blank lines, tabs,
CRLF endings, ragged rows, missing trailing commas. This script parses each
file and writes back Table.serialize(), so every file ends up padded to a
rectangle with each cell comma-terminated and quoted only where needed.

**What it does**:
  1. Scans the directory (default: CSVTABLE_DATA_DIR) for table files,
     including subdirectories.
  2. For each file:
     - Parses it into a Table
     - Serializes the table
     - Writes it back if the text changed (unless --dry-run)
  3. Prints a summary of changes (rows, columns, changed or not)

**Usage**:
    From project root:
    ```bash
    python actions/normalise_csv_files.py
    python actions/normalise_csv_files.py data/tables --dry-run
    ```

**Safety**:
  - Overwrites files in place (make a backup first if needed).
  - Comment lines and blank lines are NOT preserved; they are dropped by
    the parser. Run with --dry-run first to see which files would change.
  - Files whose rewritten form would not read back to the same table
    (e.g. a data cell starting with "//" in column 0, or a row of spaces
    only) are reported as failures and left untouched.
  - Idempotent: a second run reports no changes.
"""

import argparse
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.config.settings import get_settings
from csvtable.core.errors import ParseFailure
from csvtable.core.table import Table
from csvtable.data.io import (
    list_table_files,
    read_table_text,
    table_name_from_path,
    write_table,
)
from csvtable.utils.logging import configure_logging


def normalise_csv_file(file_path: Path, dry_run: bool = False) -> dict | None:
    """
    Normalize a single table file.

    **Process**:
      1. Read the file's text once and parse it
      2. Serialize the table and compare with the file's current text
      3. Check that the serialized text parses back to the same table
      4. Write back if different and not a dry run
      5. Return summary dict with file info

    A table whose serialized form would not read back identically (e.g. a
    data row whose first cell starts with "//", or a row of spaces only) is
    reported as a failure and the file is left untouched.

    Args:
        file_path: Path to the table file.
        dry_run: If True, only report what would be done without writing.

    Returns:
        Dict with keys 'file', 'rows', 'columns', 'changed'.
        None if the file could not be read, parsed or safely rewritten.
    """
    encoding = get_settings().encoding

    try:
        original_text = read_table_text(file_path, encoding=encoding)
        table = Table.from_text(table_name_from_path(file_path), original_text)
    except (OSError, ValueError, ParseFailure) as e:
        print(f"  ✗ Error processing {file_path}: {e}")
        return None

    serialized = table.serialize()
    if Table.from_text(table.name, serialized) != table:
        print(
            f"  ✗ Error processing {file_path}: serialized form does not read back "
            "to the same table (rows would be lost); file left untouched"
        )
        return None

    changed = serialized != original_text

    if changed and not dry_run:
        write_table(table, file_path, encoding=encoding)

    return {
        'file': str(file_path),
        'rows': table.height,
        'columns': table.width,
        'changed': changed,
    }


def main(argv: list[str] | None = None) -> int:
    """
    Main entrypoint for table normalization.

    Returns:
        Process exit code (1 if any file failed, else 0).
    """
    parser = argparse.ArgumentParser(
        description="Rewrite table files in canonical serialized format.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=None,
        help="Directory to scan. Default: CSVTABLE_DATA_DIR.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would change without writing any file.",
    )
    args = parser.parse_args(argv)
    configure_logging()

    directory = args.directory if args.directory is not None else get_settings().data_dir

    print("=" * 80)
    print("Table Normalization")
    print("=" * 80)
    print()
    print(f"Directory: {directory}")
    if args.dry_run:
        print("Mode: dry run (no files will be written)")
    print()

    files = list_table_files(directory)
    if not files:
        print("No table files found.")
        return 0

    summaries = []
    failures = 0
    for file_path in files:
        summary = normalise_csv_file(file_path, dry_run=args.dry_run)
        if summary is None:
            failures += 1
            continue
        summaries.append(summary)
        status = "changed" if summary['changed'] else "unchanged"
        print(f"  ✓ {summary['file']}: {summary['columns']}x{summary['rows']} ({status})")

    changed_count = sum(1 for s in summaries if s['changed'])
    print()
    print("=" * 80)
    print(f"Files scanned: {len(files)}")
    print(f"Files {'to change' if args.dry_run else 'changed'}: {changed_count}")
    print(f"Failures: {failures}")
    print("=" * 80)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
