"""
Conversions between Table and pandas/numpy structures.

**Conceptual**: A Table is deliberately untyped: every cell is opaque text.
Analysis code usually wants a DataFrame instead, so this module bridges the
two without adding any type coercion of its own. Values stay strings in both
directions; converting them to numbers is the caller's job (e.g. with
pd.to_numeric on the columns it cares about).

**Header/label mapping**:
  - header=True: row 0 becomes the DataFrame's column labels.
  - index=True: column 0 becomes the DataFrame's index.
"""

import numpy as np
import pandas as pd

from csvtable.core.table import Table


def table_to_array(table: Table) -> np.ndarray:
    """
    Copy the table into a 2D object array of shape (height, width).
    """
    array = np.empty((table.height, table.width), dtype=object)
    for y, row in enumerate(table.rows()):
        array[y, :] = row
    return array


def table_to_dataframe(
    table: Table,
    header: bool = True,
    index: bool = False,
) -> pd.DataFrame:
    """
    Convert a table to a DataFrame of strings.

    Args:
        table: Source table.
        header: Use row 0 as column labels (the remaining rows become data).
        index: Use column 0 as the index (the remaining columns become data).

    Returns:
        DataFrame with dtype object. An empty table gives an empty DataFrame.

    Example:
        >>> t = Table.from_text("items", "Name,Value\\nSword,10\\n")
        >>> table_to_dataframe(t, index=True)
              Value
        Name
        Sword    10
    """
    rows = table.rows()

    columns = None
    if header and rows:
        columns = rows[0]
        rows = rows[1:]

    df = pd.DataFrame(rows, columns=columns, dtype=object)

    if index and table.width > 0:
        df = df.set_index(df.columns[0])

    return df


def table_from_dataframe(
    name: str,
    df: pd.DataFrame,
    include_header: bool = True,
    include_index: bool = False,
) -> Table:
    """
    Build a table from a DataFrame.

    Every value is converted with str(); missing values (NaN, None, NaT)
    become empty strings.

    Args:
        name: Name for the new table.
        df: Source DataFrame.
        include_header: Emit the column labels as row 0.
        include_index: Emit the index as column 0 (its name, or "", heads
                       the column when include_header is set).

    Returns:
        A new Table.
    """
    if include_index:
        df = df.reset_index()
        if df.columns[0] == "index" and include_header:
            df = df.rename(columns={"index": ""})

    width = len(df.columns)
    cells = []

    if include_header:
        cells.extend(_to_text(label) for label in df.columns)

    for record in df.itertuples(index=False, name=None):
        cells.extend(_to_text(value) for value in record)

    return Table(name, cells, width)


def _to_text(value) -> str:
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return str(value)
