"""
csvtable: read, query and write comma-separated tables.

Exposes the core entry points at package level so callers can simply write
``from csvtable import Table``.
"""

from csvtable.core.errors import (
    CsvTableError,
    LookupNotFound,
    OutOfRange,
    ParseFailure,
)
from csvtable.core.parser import parse
from csvtable.core.table import Selector, Table

__all__ = [
    "CsvTableError",
    "LookupNotFound",
    "OutOfRange",
    "ParseFailure",
    "Selector",
    "Table",
    "parse",
]
