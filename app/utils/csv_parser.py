"""
CSV parsing with per-cell dynamic typing.

pandas reads the file as plain text (every cell a string) so that typing is
decided cell by cell, not column by column: a numeric-looking cell becomes a
NumberCell, an empty cell becomes MISSING and everything else stays text.
"""

import csv
import io
import re
from dataclasses import dataclass, field
from typing import Dict, List, Union

import pandas as pd


# Same literal shape a spreadsheet-style parser accepts as a number
NUMERIC_LITERAL = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")
MAX_SAFE_NUMBER = 2 ** 53
MIN_SAFE_NUMBER = -(2 ** 53)

DELIMITER_CANDIDATES = (",", "\t", "|", ";")
DELIMITER_PREVIEW_ROWS = 10


class CSVParserError(Exception):
    """Base class for everything the parser reports."""


class EmptyCSVError(CSVParserError):
    """The file has no content at all."""


class CSVParseError(CSVParserError):
    """The file could not be read as delimited text."""


@dataclass(frozen=True)
class NumberCell:
    value: float


@dataclass(frozen=True)
class TextCell:
    value: str


@dataclass(frozen=True)
class MissingCell:
    pass


MISSING = MissingCell()

Cell = Union[NumberCell, TextCell, MissingCell]
Row = Dict[str, Cell]


@dataclass
class ParsedTable:
    header: List[str] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)


def coerce_cell(raw) -> Cell:
    """
    Turn one raw cell into a typed Cell.

    Short rows are padded by pandas with NaN, which is treated like an
    empty cell.
    """
    if not isinstance(raw, str) or raw == "":
        return MISSING

    if NUMERIC_LITERAL.match(raw):
        number = float(raw)
        if MIN_SAFE_NUMBER < number < MAX_SAFE_NUMBER:
            return NumberCell(number)

    return TextCell(raw)


def guess_delimiter(text: str):
    """
    Pick the delimiter that splits the first rows into the most consistent
    number of fields (at least two per row on average).

    Returns the delimiter and the number of fields in the header row under
    it. Falls back to a comma when nothing splits the rows.
    """
    best = None
    for delimiter in DELIMITER_CANDIDATES:
        counts = []
        try:
            for record in csv.reader(io.StringIO(text), delimiter=delimiter):
                if not record or record == [""]:
                    continue
                counts.append(len(record))
                if len(counts) == DELIMITER_PREVIEW_ROWS:
                    break
        except csv.Error:
            continue
        if not counts:
            continue

        avg = sum(counts) / len(counts)
        delta = sum(abs(count - prev) for prev, count in zip(counts, counts[1:]))
        if avg <= 1.99:
            continue
        if best is None or delta < best[1] or (delta == best[1] and avg > best[2]):
            best = (delimiter, delta, avg, counts[0])

    if best is None:
        first = next((r for r in csv.reader(io.StringIO(text)) if r), [])
        return ",", len(first)
    return best[0], best[3]


def parse_csv(content: bytes) -> ParsedTable:
    """
    Parse CSV bytes into a header and dynamically typed rows.

    The delimiter is detected from the first rows. Rows with more fields
    than the header keep their leading fields and drop the rest.

    Raises EmptyCSVError for a file with no content and CSVParseError for
    anything pandas or the decoder reject.
    """
    try:
        text = content.decode("utf-8-sig")
        delimiter, width = guess_delimiter(text)
        df = pd.read_csv(
            io.StringIO(text),
            sep=delimiter,
            engine="python",
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
            index_col=False,
            on_bad_lines=lambda bad: bad[:width],
        )
    except pd.errors.EmptyDataError as e:
        raise EmptyCSVError(str(e)) from e
    except (pd.errors.ParserError, csv.Error, UnicodeDecodeError, ValueError) as e:
        raise CSVParseError(str(e)) from e

    header = [str(col) for col in df.columns]
    rows = [
        {col: coerce_cell(raw) for col, raw in zip(header, record)}
        for record in df.itertuples(index=False, name=None)
    ]

    return ParsedTable(header=header, rows=rows)


def cell_text(cell: Cell) -> str:
    """Render a cell the way it would appear as plain text."""
    if isinstance(cell, NumberCell):
        value = cell.value
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(cell, TextCell):
        return cell.value
    return ""
