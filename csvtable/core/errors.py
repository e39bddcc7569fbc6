"""
Error types raised by the parser and the table.

**Conceptual**: Every failure the core can surface falls into one of three
kinds, all sharing a common base so callers (importers, action scripts) can
catch "anything csvtable raised" with a single except clause:
  - ParseFailure: raw text could not be turned into a table.
  - OutOfRange: a numeric row/column index is outside the table.
  - LookupNotFound: a row/column name is missing from the header/label lookup.

Malformed-but-tolerable input (missing trailing comma, unbalanced quotes at
the end of a line) is never an error; the parser normalizes it silently.

**Usage**: The range and lookup errors also subclass the matching builtin
(IndexError, LookupError), so generic code that already handles those keeps
working without knowing about csvtable.
"""


class CsvTableError(Exception):
    """Base class for all csvtable errors."""
    pass


class ParseFailure(CsvTableError):
    """
    Raised when raw text cannot be turned into a table.

    No partial table is ever returned alongside this error. The original
    exception is chained (``raise ... from cause``) and also kept on
    ``cause`` for callers that want to inspect it.

    Attributes:
        table_name: Name of the table that was being built.
        cause: The underlying exception.
    """

    def __init__(self, table_name: str, cause: BaseException):
        self.table_name = table_name
        self.cause = cause
        super().__init__(
            f"CSV: could not parse table '{table_name}' due to an exception: {cause!r}"
        )


class OutOfRange(CsvTableError, IndexError):
    """Raised when a numeric row or column index is outside the table bounds."""
    pass


class LookupNotFound(CsvTableError, LookupError):
    """
    Raised when a row or column name has no entry in the corresponding lookup.

    Attributes:
        kind: "row" or "column".
        name: The name that was looked up.
    """

    def __init__(self, kind: str, name: str, table_name: str | None = None):
        self.kind = kind
        self.name = name
        ctx = f" in table '{table_name}'" if table_name is not None else ""
        super().__init__(f"CSV: could not find {kind} '{name}'{ctx}")
