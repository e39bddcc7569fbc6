"""
Bundled table converters.

  - DataFrameConverter: table -> pandas DataFrame of strings.
  - RecordConverter: table -> {row label: {column header: value}}.

Both validate their options up front and raise ValueError for unknown keys
or wrongly typed values, so a typo in an import option fails loudly instead
of being ignored.
"""

from typing import Any, Mapping

import pandas as pd

from csvtable.core.table import Table
from csvtable.data.frames import table_to_dataframe


def _check_options(
    options: Mapping[str, Any],
    defaults: Mapping[str, bool],
    converter_name: str,
) -> dict[str, bool]:
    unknown = set(options) - set(defaults)
    if unknown:
        raise ValueError(
            f"{converter_name}: unknown options {sorted(unknown)}. "
            f"Recognized options: {sorted(defaults)}."
        )

    resolved = dict(defaults)
    for key, value in options.items():
        if not isinstance(value, bool):
            raise ValueError(
                f"{converter_name}: option '{key}' must be a bool, got: {value!r}"
            )
        resolved[key] = value
    return resolved


class DataFrameConverter:
    """
    Convert a table to a DataFrame.

    Options:
        header (bool, default True): Use row 0 as column labels.
        index (bool, default False): Use column 0 as the index.
    """

    DEFAULT_OPTIONS = {"header": True, "index": False}

    def convert(self, table: Table, options: Mapping[str, Any]) -> pd.DataFrame:
        opts = _check_options(options, self.DEFAULT_OPTIONS, "DataFrameConverter")
        return table_to_dataframe(table, header=opts["header"], index=opts["index"])


class RecordConverter:
    """
    Convert a table to a mapping of records keyed by row label.

    Row 0 supplies the field names and column 0 the record keys, so

        Name,Value,Weight
        Sword,10,3
        Shield,5,

    becomes {"Sword": {"Value": "10", "Weight": "3"},
             "Shield": {"Value": "5", "Weight": ""}}.

    The label column itself is not repeated inside each record. When a row
    label or header appears more than once, the first occurrence wins
    (matching Table's name lookups).

    Options:
        skip_empty (bool, default False): Leave out fields whose value is "".
    """

    DEFAULT_OPTIONS = {"skip_empty": False}

    def convert(self, table: Table, options: Mapping[str, Any]) -> dict[str, dict[str, str]]:
        opts = _check_options(options, self.DEFAULT_OPTIONS, "RecordConverter")

        fields = [name for name in table.column_names if table.find_column(name) != 0]
        records: dict[str, dict[str, str]] = {}

        for label in table.row_names:
            row = table.find_row(label)
            if row == 0:
                continue

            record = {}
            for field in fields:
                value = table.get_cell(field, row)
                if opts["skip_empty"] and value == "":
                    continue
                record[field] = value
            records[label] = record

        return records
