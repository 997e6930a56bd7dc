"""
Tests for CSV parsing and per-cell dynamic typing.

Usage:
    pytest tests/test_csv_parser.py
"""

import sys
import os

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.utils.csv_parser import (
    MISSING,
    CSVParseError,
    EmptyCSVError,
    NumberCell,
    TextCell,
    cell_text,
    coerce_cell,
    guess_delimiter,
    parse_csv,
)


# =============================================================================
# CELL TYPING
# =============================================================================

@pytest.mark.parametrize("raw, expected", [
    ("42", NumberCell(42.0)),
    (" 42 ", NumberCell(42.0)),
    ("-3.5", NumberCell(-3.5)),
    ("-.5", NumberCell(-0.5)),
    ("7.", NumberCell(7.0)),
    ("1e5", NumberCell(100000.0)),
    ("2.5E-3", NumberCell(0.0025)),
])
def test_numeric_literals_become_numbers(raw, expected):
    assert coerce_cell(raw) == expected


@pytest.mark.parametrize("raw", ["12abc", "1,000", "₹500", "true", "NaN", "+5", "  "])
def test_other_text_stays_text(raw):
    assert coerce_cell(raw) == TextCell(raw)


def test_numbers_beyond_safe_range_stay_text():
    assert coerce_cell("9007199254740993") == TextCell("9007199254740993")
    assert coerce_cell("1e400") == TextCell("1e400")


def test_empty_cells_are_missing():
    assert coerce_cell("") is MISSING
    assert coerce_cell(None) is MISSING
    assert coerce_cell(float("nan")) is MISSING


def test_cell_text():
    assert cell_text(NumberCell(7.0)) == "7"
    assert cell_text(NumberCell(1.5)) == "1.5"
    assert cell_text(TextCell(" Delhi ")) == " Delhi "
    assert cell_text(MISSING) == ""


# =============================================================================
# PARSING
# =============================================================================

def test_header_and_rows():
    table = parse_csv(b"amount,city\n100,Delhi\n,Mumbai\n")

    assert table.header == ["amount", "city"]
    assert table.rows == [
        {"amount": NumberCell(100.0), "city": TextCell("Delhi")},
        {"amount": MISSING, "city": TextCell("Mumbai")},
    ]


def test_typing_is_per_cell_not_per_column():
    table = parse_csv(b"code\n12\nA7\n")
    assert [row["code"] for row in table.rows] == [NumberCell(12.0), TextCell("A7")]


def test_blank_lines_are_skipped():
    table = parse_csv(b"a,b\n1,2\n\n3,4\n")
    assert len(table.rows) == 2


def test_quoted_fields():
    table = parse_csv(b'name,amount\n"Doe, J",5\n')
    assert table.rows[0]["name"] == TextCell("Doe, J")


def test_utf8_bom_is_stripped():
    table = parse_csv("city\nDelhi\n".encode("utf-8-sig"))
    assert table.header == ["city"]


def test_header_only_has_no_rows():
    table = parse_csv(b"amount,city\n")
    assert table.header == ["amount", "city"]
    assert table.rows == []


def test_empty_file_raises():
    with pytest.raises(EmptyCSVError):
        parse_csv(b"")


def test_undecodable_bytes_raise():
    with pytest.raises(CSVParseError):
        parse_csv(b"name,city\n\xff\xfe,\xfa\n")


# =============================================================================
# DELIMITERS AND RAGGED ROWS
# =============================================================================

@pytest.mark.parametrize("content, delimiter", [
    (b"city,amount\nDelhi,100\n", ","),
    (b"city;amount\nDelhi;100\n", ";"),
    (b"city\tamount\nDelhi\t100\n", "\t"),
    (b"city|amount\nDelhi|100\n", "|"),
])
def test_guess_delimiter(content, delimiter):
    assert guess_delimiter(content.decode()) == (delimiter, 2)


def test_guess_delimiter_single_column_falls_back_to_comma():
    assert guess_delimiter("amount\n100\n200\n") == (",", 1)


def test_guess_delimiter_ignores_separators_inside_text():
    text = "note,amount\nlate; retry,100\nok,200\n"
    assert guess_delimiter(text) == (",", 2)


def test_semicolon_file():
    table = parse_csv(b"city;amount\nDelhi;100\nPune;200\n")
    assert table.header == ["city", "amount"]
    assert table.rows[1] == {"city": TextCell("Pune"), "amount": NumberCell(200.0)}


def test_tab_file():
    table = parse_csv(b"city\tamount\nDelhi\t100\nPune\t200\n")
    assert table.header == ["city", "amount"]
    assert table.rows[0] == {"city": TextCell("Delhi"), "amount": NumberCell(100.0)}


def test_row_with_extra_fields_keeps_leading_fields():
    table = parse_csv(b"city,amount\nDelhi,100\nPune,200,extra\nDelhi,300\n")

    assert table.header == ["city", "amount"]
    assert len(table.rows) == 3
    assert table.rows[1] == {"city": TextCell("Pune"), "amount": NumberCell(200.0)}


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
