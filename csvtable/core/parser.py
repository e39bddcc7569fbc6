"""
Single-pass text-to-grid parser for comma-separated tables.

**Conceptual**: This module turns one blob of raw text into a flat,
row-major list of cells plus the table width. It is a pure function with no
I/O and no shared state: every call works on its own copy of the text, so
many files can be parsed concurrently without any locking.

**Pipeline** (applied in this order):
  1. Line endings: CRLF and lone CR become LF.
  2. Tabs: every tab becomes a single space (tabs never delimit).
  3. Lines: the text is split on LF.
  4. Filtering: blank lines (nothing left once commas and spaces are removed)
     and comment lines (first two characters are "//") are dropped.
  5. Cells: each surviving line is scanned by a small state machine with one
     flag, "inside quotes" (see split_line).
  6. Rectangularization: shorter rows are right-padded with "" up to the
     widest row's cell count, which becomes the table width.
  7. Flattening: rows are concatenated in order.

**Degenerate input**: text with no surviving rows yields an empty table
(width 0, no cells) rather than an error.

**Example**:
    >>> parse('Name,Value\\nSword,10\\nShield,5\\n')
    (['Name', 'Value', 'Sword', '10', 'Shield', '5'], 2)
"""

QUOTE = '"'
DELIMITER = ','
COMMENT_PREFIX = '//'


def normalize_text(text: str) -> str:
    """Convert line endings to LF and fold tabs into single spaces."""
    text = text.replace('\r\n', '\n')
    text = text.replace('\r', '\n')
    return text.replace('\t', ' ')


def is_blank_line(line: str) -> bool:
    """True if the line holds nothing but commas and spaces."""
    return line.replace(DELIMITER, '').replace(' ', '') == ''


def is_comment_line(line: str) -> bool:
    """
    True if the line is a comment.

    Only the first two characters count; leading whitespace is not stripped,
    so "  // note" is a regular data line.
    """
    return line.startswith(COMMENT_PREFIX)


def split_line(line: str) -> list[str]:
    """
    Split one line into cells.

    **State machine** (single forward scan, cursor ``i``):
      - Outside quotes: '"' enters quote mode and is dropped; ',' closes the
        current cell; anything else is buffered.
      - Inside quotes: '""' emits one literal '"'; a lone '"' leaves quote
        mode and is dropped; anything else (commas included) is buffered.
      - End of line: a non-empty buffer becomes the final cell. An empty
        buffer adds nothing, so "a,b," gives two cells, not three.

    Quote mode left open at the end of the line is not an error; whatever was
    buffered is flushed as the last cell. State never carries over to the
    next line.

    Args:
        line: A single line, already normalized (no CR, LF or tab).

    Returns:
        List of cell strings for this line.
    """
    cells = []
    buffer = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if in_quotes:
            if ch == QUOTE:
                if i + 1 < n and line[i + 1] == QUOTE:
                    # Escaped quote
                    buffer.append(QUOTE)
                    i += 2
                    continue
                in_quotes = False
            else:
                buffer.append(ch)
        elif ch == QUOTE:
            in_quotes = True
        elif ch == DELIMITER:
            cells.append(''.join(buffer))
            buffer = []
        else:
            buffer.append(ch)
        i += 1

    if buffer:
        cells.append(''.join(buffer))

    return cells


def split_rows(text: str) -> list[list[str]]:
    """
    Normalize, split and filter text into rows of cells (before padding).

    Blank and comment lines are removed before any cell splitting happens, so
    they contribute nothing to the grid regardless of where they appear.
    """
    lines = normalize_text(text).split('\n')
    return [
        split_line(line)
        for line in lines
        if not is_blank_line(line) and not is_comment_line(line)
    ]


def rectangularize(rows: list[list[str]]) -> tuple[list[str], int]:
    """
    Pad rows to a common width and flatten them row-major.

    Args:
        rows: Rows of cells with possibly different lengths.

    Returns:
        (cells, width). With no rows this is ([], 0).
    """
    if not rows:
        return [], 0

    width = max(len(row) for row in rows)

    cells = []
    for row in rows:
        cells.extend(row)
        cells.extend([''] * (width - len(row)))

    return cells, width


def parse(text: str) -> tuple[list[str], int]:
    """
    Parse raw comma-separated text into a flat cell list and its width.

    Args:
        text: The full text of a table (e.g. the contents of a .csv file).

    Returns:
        (cells, width) where len(cells) is always a multiple of width
        (or both are empty/zero for input with no data rows).

    Raises:
        TypeError: If text is not a string. Table.from_text wraps this
                   into a ParseFailure.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected text as str, got {type(text).__name__}")

    return rectangularize(split_rows(text))
