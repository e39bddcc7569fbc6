"""
Base abstractions for table importers.

**Conceptual**: An importer loads a table from a file and hands it to a
converter, which turns the untyped grid into something domain-specific (a
DataFrame, a dict of records, an application object). The split keeps the
two concerns apart:
  - TableConverter (protocol): pure "table + options -> object" logic.
  - TableImporter: reading the file, reporting failures, and the policy of
    returning None instead of raising when an import fails.

**Why a protocol for converters?**
  - Any object with a matching convert() method works, no inheritance needed.
  - Converters are trivial to fake in tests.

**Failure policy**: Parsing is deterministic, so there is nothing to retry.
TableImporter logs the failure and returns None; callers that need the
exception should use read_table and the converter directly.
"""

import logging
from pathlib import Path
from typing import Any, Generic, Mapping, Optional, Protocol, TypeVar

from csvtable.core.errors import CsvTableError
from csvtable.core.table import Table
from csvtable.data.io import read_table

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class TableConverter(Protocol[T_co]):
    """
    Protocol for turning a loaded table into a typed object.

    Implementations MUST:
      - Treat the table as read-only.
      - Raise ValueError for options they don't recognize or can't honor.
    """

    def convert(self, table: Table, options: Mapping[str, Any]) -> T_co:
        """
        Convert a table.

        Args:
            table: The loaded table.
            options: Recognized key/value settings for this converter.
                     Never None (importers pass {} when no options are given).

        Returns:
            The converted object.
        """
        ...


class TableImporter(Generic[T]):
    """
    Loads tables from files or text and converts them with a converter.

    Usage example:
        >>> importer = TableImporter(DataFrameConverter())
        >>> df = importer.import_file("data/items.csv", {"index": True})
        >>> if df is None:
        ...     print("import failed, see log")
    """

    def __init__(self, converter: TableConverter[T]):
        self.converter = converter

    def import_file(
        self,
        path: str | Path,
        options: Optional[Mapping[str, Any]] = None,
        encoding: Optional[str] = None,
    ) -> Optional[T]:
        """
        Read a table file and convert it.

        Returns:
            The converted object, or None if reading, parsing or conversion
            failed (the reason is logged at ERROR level).
        """
        try:
            table = read_table(path, encoding=encoding)
            return self.converter.convert(table, dict(options or {}))
        except (CsvTableError, OSError, ValueError) as e:
            logger.error(f"Failed to import table from {path}: {e}")
            return None

    def import_text(
        self,
        name: str,
        text: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Optional[T]:
        """
        Parse text into a table and convert it.

        Returns:
            The converted object, or None on failure (logged).
        """
        try:
            table = Table.from_text(name, text)
            return self.converter.convert(table, dict(options or {}))
        except (CsvTableError, ValueError) as e:
            logger.error(f"Failed to import table '{name}': {e}")
            return None

    @classmethod
    def run(
        cls,
        converter: TableConverter[T],
        path: str | Path,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Optional[T]:
        """One-shot import: build an importer for converter and import path."""
        return cls(converter).import_file(path, options)
