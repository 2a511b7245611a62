"""Typed, coordinate-addressed composition of worksheet content."""

from __future__ import annotations

from .config import LoggingConfig, WorksheetConfig, configure_logging
from .coords import MAX_COLUMN, MAX_ROW, Cell, CellRange, ColumnRange
from .engine import (
    ChartOptions,
    EngineStatus,
    ObjectPosition,
    PaperType,
    RowColOptions,
    TableColumn,
    TableOptions,
    TotalFunction,
    WorksheetEngine,
    XlsxWriterEngine,
    strerror,
)
from .errors import TableError, WriteError, WriteErrorDetail
from .values import (
    BlankValue,
    BooleanValue,
    CommentValue,
    DateTimeValue,
    FormulaValue,
    NumberValue,
    TextValue,
    UrlValue,
    Value,
    as_value,
    to_serial,
)
from .worksheet import Worksheet

__all__ = [
    "MAX_COLUMN",
    "MAX_ROW",
    "BlankValue",
    "BooleanValue",
    "Cell",
    "CellRange",
    "ChartOptions",
    "ColumnRange",
    "CommentValue",
    "DateTimeValue",
    "EngineStatus",
    "FormulaValue",
    "LoggingConfig",
    "NumberValue",
    "ObjectPosition",
    "PaperType",
    "RowColOptions",
    "TableColumn",
    "TableError",
    "TableOptions",
    "TextValue",
    "TotalFunction",
    "UrlValue",
    "Value",
    "Worksheet",
    "WorksheetConfig",
    "WorksheetEngine",
    "WriteError",
    "WriteErrorDetail",
    "XlsxWriterEngine",
    "as_value",
    "configure_logging",
    "strerror",
    "to_serial",
]
