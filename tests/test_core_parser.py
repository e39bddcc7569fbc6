"""
Tests for csvtable/core/parser.py

These tests verify the text-to-grid pipeline on small, hand-written inputs:
line-ending and tab normalization, blank/comment line filtering, the quote
state machine, and rectangularization.
"""

import pytest

from csvtable.core.parser import (
    is_blank_line,
    is_comment_line,
    normalize_text,
    parse,
    rectangularize,
    split_line,
    split_rows,
)


# ============================================================================
# Normalization and filtering
# ============================================================================

def test_normalize_text_line_endings():
    """CRLF and lone CR both become LF."""
    assert normalize_text("a\r\nb\rc\n") == "a\nb\nc\n"


def test_normalize_text_tabs_become_spaces():
    """Tabs never delimit; each becomes one space."""
    assert normalize_text("a\tb\t\tc") == "a b  c"


@pytest.mark.parametrize("line", ["", "   ", ",,,", ",, ,", " , "])
def test_is_blank_line_true(line):
    assert is_blank_line(line)


@pytest.mark.parametrize("line", ["a", " ,x", '""', "//"])
def test_is_blank_line_false(line):
    assert not is_blank_line(line)


def test_is_comment_line_only_checks_first_two_characters():
    """Leading whitespace is not trimmed before the comment check."""
    assert is_comment_line("// note")
    assert is_comment_line("//")
    assert not is_comment_line(" // note")
    assert not is_comment_line("/ / note")


# ============================================================================
# Cell splitting state machine
# ============================================================================

def test_split_line_simple():
    assert split_line("a,b,c") == ["a", "b", "c"]


def test_split_line_trailing_comma_adds_no_cell():
    """A line ending on a delimiter has no phantom final cell."""
    assert split_line("a,b,") == ["a", "b"]


def test_split_line_empty_cells_between_commas():
    assert split_line("a,,c") == ["a", "", "c"]
    assert split_line(",b") == ["", "b"]


def test_split_line_quoted_comma():
    """Commas inside quotes are literal."""
    assert split_line('A,"B,C",D') == ["A", "B,C", "D"]


def test_split_line_doubled_quote_inside_quotes():
    """Two quotes inside a quoted field emit one literal quote."""
    assert split_line('"X""Y",Z') == ['X"Y', "Z"]


def test_split_line_only_escaped_quote():
    assert split_line('""""') == ['"']


def test_split_line_quotes_mid_cell():
    """Quotes can open and close anywhere; only their content is literal."""
    assert split_line('ab"c,d"e,f') == ["abc,de", "f"]


def test_split_line_unbalanced_quote_flushes_rest():
    """Quote mode left open at end of line is not an error."""
    assert split_line('a,"b,c') == ["a", "b,c"]


def test_split_line_empty_quoted_last_cell_is_dropped():
    """An empty buffer at end of line adds nothing, even after quotes."""
    assert split_line('a,""') == ["a"]


def test_split_line_preserves_spaces():
    """Cells are not trimmed."""
    assert split_line(" a , b ") == [" a ", " b "]


# ============================================================================
# Rows, rectangularization, full parse
# ============================================================================

def test_split_rows_drops_comments_and_blanks():
    """Comment and blank lines contribute nothing, wherever they appear."""
    text = "// header comment\na,b\n,, ,\n\n// note\nc,d\n"
    assert split_rows(text) == [["a", "b"], ["c", "d"]]


def test_split_rows_quote_state_does_not_leak_across_lines():
    """Each line starts with quote mode off."""
    assert split_rows('a,"b\nc,d') == [["a", "b"], ["c", "d"]]


def test_rectangularize_pads_short_rows():
    """Rows of cell counts [3, 1, 2] give width 3 with right padding."""
    cells, width = rectangularize([["a", "b", "c"], ["d"], ["e", "f"]])
    assert width == 3
    assert cells == ["a", "b", "c", "d", "", "", "e", "f", ""]


def test_rectangularize_no_rows():
    """Zero rows is a defined empty table, not an error."""
    assert rectangularize([]) == ([], 0)


def test_parse_example():
    cells, width = parse("Name,Value\nSword,10\nShield,5\n")
    assert width == 2
    assert cells == ["Name", "Value", "Sword", "10", "Shield", "5"]


def test_parse_crlf_input():
    cells, width = parse("Name,Value\r\nSword,10\r\n")
    assert width == 2
    assert cells == ["Name", "Value", "Sword", "10"]


def test_parse_tab_is_not_a_delimiter():
    cells, width = parse("a\tb,c\n")
    assert width == 2
    assert cells == ["a b", "c"]


def test_parse_padding_widest_row_not_first():
    cells, width = parse("a\nb,c,d\ne,f\n")
    assert width == 3
    assert cells == ["a", "", "", "b", "c", "d", "e", "f", ""]


@pytest.mark.parametrize("text", ["", "\n\n", "// only a comment\n", ",,,\n  \n"])
def test_parse_no_surviving_rows(text):
    assert parse(text) == ([], 0)


def test_parse_rectangular_invariant():
    """len(cells) is always an exact multiple of width."""
    text = 'a,b\n"c,d",e,f,\ng\n// x\n,h,,\n'
    cells, width = parse(text)
    assert width == 3
    assert len(cells) % width == 0
    assert len(cells) == width * 4


def test_parse_rejects_non_text():
    with pytest.raises(TypeError):
        parse(b"a,b\n")
