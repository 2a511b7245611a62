"""Read written workbooks back through openpyxl."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any
import warnings

from openpyxl import load_workbook

from .coords import CellLike, coerce_cell


@contextmanager
def openpyxl_workbook(
    file_path: Path, *, data_only: bool = False, read_only: bool = False
) -> Iterator[Any]:
    """Open an openpyxl workbook and ensure it is closed.

    Args:
        file_path: Workbook path.
        data_only: Whether to read cached formula results.
        read_only: Whether to open in read-only mode.

    Yields:
        openpyxl workbook instance.
    """
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore",
            message="Unknown extension is not supported and will be removed",
            category=UserWarning,
            module="openpyxl",
        )
        wb = load_workbook(file_path, data_only=data_only, read_only=read_only)
    try:
        yield wb
    finally:
        wb.close()


def read_cell(file_path: Path, sheet: str, cell: CellLike) -> object:
    """Return the stored value of one cell.

    Formulas come back as their text; datetimes as serial numbers, since
    no date format is attached on write.
    """
    target = coerce_cell(cell)
    with openpyxl_workbook(file_path) as wb:
        if sheet not in wb.sheetnames:
            raise KeyError(f"Sheet '{sheet}' not found in {file_path}")
        return wb[sheet].cell(row=target.row + 1, column=target.column + 1).value


def read_comment(file_path: Path, sheet: str, cell: CellLike) -> str | None:
    """Return the comment text attached to one cell, if any."""
    target = coerce_cell(cell)
    with openpyxl_workbook(file_path) as wb:
        if sheet not in wb.sheetnames:
            raise KeyError(f"Sheet '{sheet}' not found in {file_path}")
        comment = wb[sheet].cell(row=target.row + 1, column=target.column + 1).comment
        return None if comment is None else str(comment.text)


def read_tables(file_path: Path, sheet: str) -> dict[str, str]:
    """Return table names mapped to their A1 references."""
    with openpyxl_workbook(file_path) as wb:
        if sheet not in wb.sheetnames:
            raise KeyError(f"Sheet '{sheet}' not found in {file_path}")
        tables = wb[sheet].tables.values()
        return {str(table.displayName): str(table.ref) for table in tables}


def read_sheet_values(file_path: Path, sheet: str) -> list[list[object]]:
    """Return every row of the used range as lists of values."""
    with openpyxl_workbook(file_path, read_only=True) as wb:
        if sheet not in wb.sheetnames:
            raise KeyError(f"Sheet '{sheet}' not found in {file_path}")
        return [list(row) for row in wb[sheet].iter_rows(values_only=True)]


__all__ = [
    "openpyxl_workbook",
    "read_cell",
    "read_comment",
    "read_sheet_values",
    "read_tables",
]
