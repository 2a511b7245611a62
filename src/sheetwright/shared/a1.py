from __future__ import annotations

import re

MAX_ROW = 1_048_575
MAX_COLUMN = 16_383

_A1_PATTERN = re.compile(r"^[A-Za-z]{1,3}[1-9][0-9]*$")
_A1_RANGE_PATTERN = re.compile(r"^[A-Za-z]{1,3}[1-9][0-9]*:[A-Za-z]{1,3}[1-9][0-9]*$")
_COLUMN_LABEL_PATTERN = re.compile(r"^[A-Za-z]{1,3}$")
_COLUMN_RANGE_PATTERN = re.compile(r"^[A-Za-z]{1,3}:[A-Za-z]{1,3}$")


def split_a1(value: str) -> tuple[str, int]:
    """Split A1 notation into normalized (column_label, row_number)."""
    candidate = value.strip()
    if not _A1_PATTERN.match(candidate):
        raise ValueError(f"Invalid cell reference: {value}")
    idx = 0
    for index, char in enumerate(candidate):
        if char.isdigit():
            idx = index
            break
    column = candidate[:idx].upper()
    row = int(candidate[idx:])
    return column, row


def column_label_to_index(label: str) -> int:
    """Convert Excel-style column label (A/AA) to a zero-based index."""
    normalized = label.strip().upper()
    if not _COLUMN_LABEL_PATTERN.match(normalized):
        raise ValueError(f"Invalid column label: {label}")
    index = 0
    for char in normalized:
        index = index * 26 + (ord(char) - ord("A") + 1)
    if index - 1 > MAX_COLUMN:
        raise ValueError(f"Column label out of range: {label}")
    return index - 1


def column_index_to_label(index: int) -> str:
    """Convert a zero-based column index to Excel-style column label."""
    if index < 0:
        raise ValueError("Column index must be non-negative.")
    if index > MAX_COLUMN:
        raise ValueError(f"Column index exceeds {MAX_COLUMN}: {index}")
    chunks: list[str] = []
    current = index + 1
    while current > 0:
        current -= 1
        chunks.append(chr(ord("A") + (current % 26)))
        current //= 26
    return "".join(reversed(chunks))


def parse_cell(value: str) -> tuple[int, int]:
    """Parse A1 notation into zero-based (row, column)."""
    label, row_number = split_a1(value)
    row = row_number - 1
    if row > MAX_ROW:
        raise ValueError(f"Row out of range: {value}")
    return row, column_label_to_index(label)


def parse_range(value: str) -> tuple[int, int, int, int]:
    """Parse an A1 range into zero-based (start_row, start_col, end_row, end_col).

    Corners are returned as written; ordering is validated by the range models.
    """
    candidate = value.strip()
    if not _A1_RANGE_PATTERN.match(candidate):
        raise ValueError(f"Invalid range reference: {value}")
    start, end = candidate.split(":", maxsplit=1)
    start_row, start_col = parse_cell(start)
    end_row, end_col = parse_cell(end)
    return start_row, start_col, end_row, end_col


def parse_column_range(value: str) -> tuple[int, int]:
    """Parse a column range like ``A:C`` into zero-based (first, last)."""
    candidate = value.strip()
    if not _COLUMN_RANGE_PATTERN.match(candidate):
        raise ValueError(f"Invalid column range: {value}")
    first, last = candidate.split(":", maxsplit=1)
    return column_label_to_index(first), column_label_to_index(last)


def format_cell(row: int, column: int) -> str:
    """Format zero-based coordinates as A1 notation."""
    if row < 0 or row > MAX_ROW:
        raise ValueError(f"Row out of range: {row}")
    return f"{column_index_to_label(column)}{row + 1}"
