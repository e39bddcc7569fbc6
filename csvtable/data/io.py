"""
Table file readers and writers.

**Conceptual**: This module is the *only* I/O boundary for table files. The
parser and the Table never touch the file system; they work on text handed
to them. Centralizing reads and writes here gives:
  - Consistent encoding handling (from settings, overridable per call).
  - Consistent naming: a table read from "items.csv" is named "items".
  - Raw line endings reach the parser untouched (newline=""), so the
    parser's own CR/CRLF normalization is what applies on every platform.

**Rule**: Code that needs a table from disk should call read_table rather
than opening files and calling Table.from_text itself.
"""

import logging
from pathlib import Path

from csvtable.config.settings import get_settings
from csvtable.core.table import Table

logger = logging.getLogger(__name__)


def table_name_from_path(path: str | Path) -> str:
    """Name a table after its file, without directory or extension."""
    return Path(path).stem


def read_table_text(path: str | Path, encoding: str | None = None) -> str:
    """
    Read the raw text of a table file, line endings untouched.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the bytes are not valid in the encoding.
    """
    if encoding is None:
        encoding = get_settings().encoding

    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def read_table(path: str | Path, encoding: str | None = None) -> Table:
    """
    Read a table file from disk.

    Args:
        path: Path to the table file.
        encoding: Text encoding. Defaults to the configured CSVTABLE_ENCODING.

    Returns:
        Table named after the file stem.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the bytes are not valid in the encoding.
        ParseFailure: If the text cannot be parsed.
    """
    path = Path(path)
    text = read_table_text(path, encoding=encoding)
    table = Table.from_text(table_name_from_path(path), text)
    logger.debug(
        f"Read table '{table.name}' from {path} ({table.width}x{table.height})"
    )
    return table


def write_table(table: Table, path: str | Path, encoding: str | None = None) -> None:
    """
    Write a table to disk in the serialized file format.

    Parent directories are created if missing. Line endings are written as
    '\\n' on every platform.

    Args:
        table: Table to write.
        path: Destination path.
        encoding: Text encoding. Defaults to the configured CSVTABLE_ENCODING.
    """
    path = Path(path)
    if encoding is None:
        encoding = get_settings().encoding

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(table.serialize())

    logger.debug(f"Wrote table '{table.name}' to {path}")


def list_table_files(directory: str | Path, suffix: str | None = None) -> list[Path]:
    """
    List table files under a directory (recursively), sorted by path.

    Args:
        directory: Directory to scan. A missing directory yields [].
        suffix: File suffix to match. Defaults to CSVTABLE_FILE_SUFFIX.
    """
    directory = Path(directory)
    if suffix is None:
        suffix = get_settings().file_suffix

    if not directory.exists():
        logger.warning(f"Table directory does not exist: {directory}")
        return []

    return sorted(p for p in directory.rglob(f"*{suffix}") if p.is_file())
