"""Validated worksheet coordinates and inclusive ranges."""

from __future__ import annotations

from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .shared.a1 import (
    MAX_COLUMN,
    MAX_ROW,
    column_label_to_index,
    format_cell,
    parse_cell,
    parse_column_range,
    parse_range,
)


def _coerce_column(value: object) -> object:
    """Accept column letters in place of a zero-based index."""
    if isinstance(value, str):
        return column_label_to_index(value)
    return value


class Cell(BaseModel):
    """Zero-based (row, column) worksheet coordinate.

    ``column`` accepts letters (``"B"``) as well as an integer index, and the
    whole cell may be validated from A1 text or a ``(row, column)`` tuple.
    """

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, le=MAX_ROW)
    column: int = Field(ge=0, le=MAX_COLUMN)

    @model_validator(mode="before")
    @classmethod
    def _accept_shorthand(cls, data: Any) -> Any:
        if isinstance(data, str):
            row, column = parse_cell(data)
            return {"row": row, "column": column}
        if isinstance(data, tuple):
            if len(data) != 2:
                raise ValueError("Cell tuple must be (row, column).")
            return {"row": data[0], "column": data[1]}
        return data

    @field_validator("column", mode="before")
    @classmethod
    def _column_letters(cls, value: object) -> object:
        return _coerce_column(value)

    @classmethod
    def parse(cls, value: str) -> Cell:
        """Build a cell from A1 notation."""
        return cls.model_validate(value)

    def offset(self, rows: int = 0, columns: int = 0) -> Cell:
        """Return the cell shifted by the given number of rows and columns."""
        return Cell(row=self.row + rows, column=self.column + columns)

    def to_a1(self) -> str:
        return format_cell(self.row, self.column)


class CellRange(BaseModel):
    """Inclusive rectangular block of cells.

    Inverted ranges (start after end on either axis) are rejected rather
    than normalized.
    """

    model_config = ConfigDict(frozen=True)

    start_row: int = Field(ge=0, le=MAX_ROW)
    start_column: int = Field(ge=0, le=MAX_COLUMN)
    end_row: int = Field(ge=0, le=MAX_ROW)
    end_column: int = Field(ge=0, le=MAX_COLUMN)

    @model_validator(mode="before")
    @classmethod
    def _accept_a1(cls, data: Any) -> Any:
        if isinstance(data, str):
            start_row, start_column, end_row, end_column = parse_range(data)
            return {
                "start_row": start_row,
                "start_column": start_column,
                "end_row": end_row,
                "end_column": end_column,
            }
        return data

    @field_validator("start_column", "end_column", mode="before")
    @classmethod
    def _column_letters(cls, value: object) -> object:
        return _coerce_column(value)

    @model_validator(mode="after")
    def _check_order(self) -> CellRange:
        if self.start_row > self.end_row:
            raise ValueError(
                f"start_row ({self.start_row}) must not exceed end_row ({self.end_row})."
            )
        if self.start_column > self.end_column:
            raise ValueError(
                f"start_column ({self.start_column}) must not exceed "
                f"end_column ({self.end_column})."
            )
        return self

    @classmethod
    def parse(cls, value: str) -> CellRange:
        """Build a range from A1 notation such as ``A1:C3``."""
        return cls.model_validate(value)

    @classmethod
    def from_cells(cls, start: Cell, end: Cell) -> CellRange:
        return cls(
            start_row=start.row,
            start_column=start.column,
            end_row=end.row,
            end_column=end.column,
        )

    @property
    def row_count(self) -> int:
        return self.end_row - self.start_row + 1

    @property
    def column_count(self) -> int:
        return self.end_column - self.start_column + 1

    @property
    def start(self) -> Cell:
        return Cell(row=self.start_row, column=self.start_column)

    @property
    def end(self) -> Cell:
        return Cell(row=self.end_row, column=self.end_column)

    def to_a1(self) -> str:
        return f"{self.start.to_a1()}:{self.end.to_a1()}"


class ColumnRange(BaseModel):
    """Inclusive span of columns, usually written as ``A:C``."""

    model_config = ConfigDict(frozen=True)

    start_column: int = Field(ge=0, le=MAX_COLUMN)
    end_column: int = Field(ge=0, le=MAX_COLUMN)

    @model_validator(mode="before")
    @classmethod
    def _accept_literal(cls, data: Any) -> Any:
        if isinstance(data, str):
            first, last = parse_column_range(data)
            return {"start_column": first, "end_column": last}
        return data

    @field_validator("start_column", "end_column", mode="before")
    @classmethod
    def _column_letters(cls, value: object) -> object:
        return _coerce_column(value)

    @model_validator(mode="after")
    def _check_order(self) -> ColumnRange:
        if self.start_column > self.end_column:
            raise ValueError(
                f"start_column ({self.start_column}) must not exceed "
                f"end_column ({self.end_column})."
            )
        return self

    @classmethod
    def parse(cls, value: str) -> ColumnRange:
        """Build a column range from a literal such as ``A:C``."""
        return cls.model_validate(value)


CellLike: TypeAlias = "Cell | str | tuple[int, int | str]"
CellRangeLike: TypeAlias = "CellRange | str"
ColumnRangeLike: TypeAlias = "ColumnRange | str"


def coerce_cell(value: CellLike) -> Cell:
    """Validate a cell given as a model, A1 text or ``(row, column)`` tuple."""
    return value if isinstance(value, Cell) else Cell.model_validate(value)


def coerce_range(value: CellRangeLike) -> CellRange:
    """Validate a range given as a model or A1 text."""
    return value if isinstance(value, CellRange) else CellRange.model_validate(value)


def coerce_column_range(value: ColumnRangeLike) -> ColumnRange:
    """Validate a column range given as a model or ``A:C`` literal."""
    if isinstance(value, ColumnRange):
        return value
    return ColumnRange.model_validate(value)


__all__ = [
    "MAX_COLUMN",
    "MAX_ROW",
    "Cell",
    "CellLike",
    "CellRange",
    "CellRangeLike",
    "ColumnRange",
    "ColumnRangeLike",
    "coerce_cell",
    "coerce_column_range",
    "coerce_range",
]
