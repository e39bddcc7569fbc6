"""
Tests for csvtable/data/io.py

This module tests:
  - read_table / write_table (naming, encodings, line endings).
  - Round-trip read/write correctness.
  - list_table_files discovery.
  - Error handling (missing files, unparseable content).

All tests use temporary directories (via tmp_path fixture) to avoid polluting
the real data/ directory.
"""

import pytest

from csvtable.core.table import Table
from csvtable.data.io import (
    list_table_files,
    read_table,
    read_table_text,
    table_name_from_path,
    write_table,
)


def test_table_name_from_path(tmp_path):
    assert table_name_from_path(tmp_path / "sub" / "items.csv") == "items"
    assert table_name_from_path("weapons.table.csv") == "weapons.table"


def test_read_table(tmp_path):
    """Test that a file is parsed and named after its stem."""
    path = tmp_path / "items.csv"
    path.write_text("Name,Value\nSword,10\n", encoding="utf-8")

    table = read_table(path)

    assert table.name == "items"
    assert table.get_cell("Value", "Sword") == "10"


def test_read_table_crlf_bytes(tmp_path):
    """Windows line endings on disk reach the parser and are normalized."""
    path = tmp_path / "win.csv"
    path.write_bytes(b"a,b\r\nc,d\r\n")

    table = read_table(path)

    assert table.cells == ("a", "b", "c", "d")


def test_read_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path / "missing.csv")


def test_read_table_invalid_encoding(tmp_path):
    """Bytes that don't decode surface as UnicodeDecodeError (a ValueError)."""
    path = tmp_path / "bad.csv"
    path.write_bytes(b"a,b\n\xff\xfe,c\n")

    with pytest.raises(UnicodeDecodeError):
        read_table(path)


def test_read_table_text_keeps_line_endings(tmp_path):
    path = tmp_path / "win.csv"
    path.write_bytes(b"a,b\r\nc\r")

    assert read_table_text(path) == "a,b\r\nc\r"


def test_read_table_explicit_encoding(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes("Name,Città\nx,Torino\n".encode("latin-1"))

    table = read_table(path, encoding="latin-1")

    assert table.get_cell("Città", "x") == "Torino"


def test_write_table_writes_serialized_text(tmp_path):
    table = Table("t", ["a,b", "c", "d", ""], 2)
    path = tmp_path / "out" / "t.csv"

    write_table(table, path)

    assert path.read_bytes() == b'"a,b",c,\nd,,'


def test_write_then_read_round_trip(tmp_path):
    """Test that write -> read gives back an equal table."""
    original = Table.from_text("gear", 'id,name\n1,"Sword, long"\n2,"Say ""hi"""\n')
    path = tmp_path / "gear.csv"

    write_table(original, path)
    loaded = read_table(path)

    assert loaded == original


def test_list_table_files(tmp_path):
    (tmp_path / "b.csv").write_text("x\n")
    (tmp_path / "a.csv").write_text("x\n")
    (tmp_path / "notes.txt").write_text("x\n")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "c.csv").write_text("x\n")

    files = list_table_files(tmp_path)

    assert [p.name for p in files] == ["a.csv", "b.csv", "c.csv"]


def test_list_table_files_custom_suffix(tmp_path):
    (tmp_path / "a.csv").write_text("x\n")
    (tmp_path / "b.tsv").write_text("x\n")

    assert [p.name for p in list_table_files(tmp_path, suffix=".tsv")] == ["b.tsv"]


def test_list_table_files_missing_directory(tmp_path):
    assert list_table_files(tmp_path / "nope") == []
