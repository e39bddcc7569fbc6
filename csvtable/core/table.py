"""
The Table: an immutable rectangular grid of text cells.

**Conceptual**: A Table owns a flat, row-major list of cells and a fixed
width. Row 0 doubles as a header row and column 0 as a label column, so any
cell can be addressed by numeric index, by name, or by a mix of both:

    >>> table = Table.from_text("items", "Name,Value\\nSword,10\\nShield,5\\n")
    >>> table.get_cell("Value", "Sword")
    '10'
    >>> table.get_cell(1, 2)
    '5'

**Invariants**:
  - len(cells) == width * height at all times after construction. Short input
    is padded with "" during construction.
  - height is always derived from cells and width, never stored.
  - Name lookups are built once, when contents are set, and the first
    occurrence of a duplicate header/label wins.
  - There is no public mutation API. Accessors hand out fresh lists, never
    views into the backing storage.

**Selectors**: every accessor takes a selector that is either an int (index)
or a str (name). Resolution and bounds checks happen in one place
(_resolve_column/_resolve_row), so all accessors fail the same way:
OutOfRange for bad indices, LookupNotFound for unknown names, TypeError for
anything that is neither a str nor a (non-bool) int.
"""

from numbers import Integral
from typing import Union

from csvtable.core.errors import LookupNotFound, OutOfRange, ParseFailure
from csvtable.core.parser import QUOTE, DELIMITER, parse

Selector = Union[int, str]


class Table:
    """
    A named, read-only CSV table.

    Build one either from pre-split cells (``Table(name, cells, width)``) or
    from raw text (``Table.from_text(name, text)``).

    Attributes:
        name: Identifying label (typically the source file's stem).
        cells: Row-major tuple of all cell values.
        width: Number of columns.
        height: Number of rows (derived).
    """

    def __init__(self, name: str, cells, width: int):
        """
        Create a table from a flat cell sequence and a width.

        The cell text is never inspected, so this never fails on malformed
        content. If len(cells) is not a multiple of width, the last row is
        padded with empty strings.

        Args:
            name: Table name.
            cells: Iterable of cell strings, row-major.
            width: Number of columns (>= 0).

        Raises:
            ValueError: If width is negative, or width is 0 while cells is
                        non-empty (no rectangular layout exists).
        """
        self._name = name
        self._set_contents(list(cells), width)

    @classmethod
    def from_text(cls, name: str, text: str) -> "Table":
        """
        Parse raw text into a table.

        Args:
            name: Table name.
            text: Comma-separated text.

        Returns:
            A new Table.

        Raises:
            ParseFailure: If the text cannot be parsed. The original error is
                          chained as __cause__.
        """
        try:
            cells, width = parse(text)
            return cls(name, cells, width)
        except Exception as e:
            raise ParseFailure(name, e) from e

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def cells(self) -> tuple[str, ...]:
        return self._cells

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        if self._width == 0:
            return 0
        return len(self._cells) // self._width

    @property
    def column_names(self) -> list[str]:
        """Distinct header-row values, in column order."""
        return list(self._column_lookup)

    @property
    def row_names(self) -> list[str]:
        """Distinct label-column values, in row order."""
        return list(self._row_lookup)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def has_column(self, name: str) -> bool:
        return name in self._column_lookup

    def has_row(self, name: str) -> bool:
        return name in self._row_lookup

    def find_column(self, name: str) -> int:
        """Return the index of the first column whose header equals name."""
        try:
            return self._column_lookup[name]
        except KeyError:
            raise LookupNotFound("column", name, self._name) from None

    def find_row(self, name: str) -> int:
        """Return the index of the first row whose label equals name."""
        try:
            return self._row_lookup[name]
        except KeyError:
            raise LookupNotFound("row", name, self._name) from None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_cell(self, column: Selector, row: Selector) -> str:
        """
        Get the text of one cell.

        Args:
            column: Column index or header name.
            row: Row index or label name.

        Returns:
            The cell text.

        Raises:
            LookupNotFound: If a name has no lookup entry.
            OutOfRange: If an index is outside [0, width) / [0, height).
            TypeError: If a selector is neither a str nor a non-bool int.
        """
        x = self._resolve_column(column)
        y = self._resolve_row(row)
        return self._cells[x + y * self._width]

    def get_row(self, row: Selector) -> list[str]:
        """Return a new list with the ``width`` cells of a row."""
        y = self._resolve_row(row)
        return [self.get_cell(x, y) for x in range(self._width)]

    def get_column(self, column: Selector) -> list[str]:
        """Return a new list with the ``height`` cells of a column."""
        x = self._resolve_column(column)
        return [self.get_cell(x, y) for y in range(self.height)]

    def rows(self) -> list[list[str]]:
        """Return all rows as fresh lists."""
        return [self.get_row(y) for y in range(self.height)]

    # ------------------------------------------------------------------
    # Text output
    # ------------------------------------------------------------------

    def to_display_string(self) -> str:
        """
        Render the table for humans.

        Cells containing a comma are wrapped in quotes (embedded quotes are
        NOT doubled), columns are joined by ", " and rows by newlines. This is
        NOT the file format; use serialize() to write files.
        """
        lines = []
        for row in self.rows():
            rendered = [f'"{cell}"' if DELIMITER in cell else cell for cell in row]
            lines.append(', '.join(rendered))
        return '\n'.join(lines)

    def serialize(self) -> str:
        """
        Convert the table to text that can be safely written to a .csv file.

        **Format**:
          - Every cell is followed by a comma, including the last one in a row.
          - A cell containing ',' or '"' has its quotes doubled and is then
            wrapped in quotes.
          - Rows are joined by '\\n' (no trailing newline).

        Parsing the result gives back the same width, height and cells, as
        long as no row is made only of empty or space-only cells, no row
        label starts with "//", and no cell holds a tab or a line break.
        """
        lines = []
        for row in self.rows():
            lines.append(''.join(_escape_cell(cell) + DELIMITER for cell in row))
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Table(name={self._name!r}, width={self._width}, height={self.height})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (
            self._name == other._name
            and self._width == other._width
            and self._cells == other._cells
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _set_contents(self, cells: list[str], width: int) -> None:
        if width < 0:
            raise ValueError(f"width must be non-negative, got: {width}")
        if width == 0 and cells:
            raise ValueError(
                f"width is 0 but {len(cells)} cells were given; "
                "a table with cells needs at least one column"
            )

        # Pad the last row up to a full row
        if width > 0:
            remainder = len(cells) % width
            if remainder:
                cells = cells + [''] * (width - remainder)

        self._width = width
        self._cells = tuple(cells)

        # First occurrence wins on duplicate names
        column_lookup: dict[str, int] = {}
        if self.height > 0:
            for x in range(width):
                column_lookup.setdefault(self._cells[x], x)

        row_lookup: dict[str, int] = {}
        for y in range(self.height):
            row_lookup.setdefault(self._cells[y * width], y)

        self._column_lookup = column_lookup
        self._row_lookup = row_lookup

    def _resolve_column(self, column: Selector) -> int:
        if isinstance(column, str):
            return self.find_column(column)
        _check_index(column, "column")
        if column < 0 or column >= self._width:
            raise OutOfRange(
                f"CSV: column {column} is out of bounds for table '{self._name}' "
                f"(width {self._width})"
            )
        return column

    def _resolve_row(self, row: Selector) -> int:
        if isinstance(row, str):
            return self.find_row(row)
        _check_index(row, "row")
        if row < 0 or row >= self.height:
            raise OutOfRange(
                f"CSV: row {row} is out of bounds for table '{self._name}' "
                f"(height {self.height})"
            )
        return row


def _check_index(index, kind: str) -> None:
    # bool is an int subclass but never a meaningful index
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise TypeError(
            f"{kind} selector must be an int index or a str name, "
            f"got {type(index).__name__}: {index!r}"
        )


def _escape_cell(cell: str) -> str:
    if DELIMITER in cell or QUOTE in cell:
        return QUOTE + cell.replace(QUOTE, QUOTE + QUOTE) + QUOTE
    return cell
