"""
Importers: load a table from a file and convert it into a typed object.

Conversion is pluggable through the TableConverter protocol; TableImporter
handles reading, error reporting and the "return nothing on failure" policy.
"""

from csvtable.importers.base import TableConverter, TableImporter
from csvtable.importers.converters import DataFrameConverter, RecordConverter

__all__ = [
    "DataFrameConverter",
    "RecordConverter",
    "TableConverter",
    "TableImporter",
]
