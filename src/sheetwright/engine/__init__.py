from __future__ import annotations

from .base import EngineStatus, WorksheetEngine, strerror
from .options import (
    ChartOptions,
    ObjectPosition,
    PaperType,
    RowColOptions,
    TableColumn,
    TableOptions,
    TotalFunction,
)
from .xlsxwriter_engine import GRIDLINES_PRINT, GRIDLINES_SCREEN, XlsxWriterEngine

__all__ = [
    "GRIDLINES_PRINT",
    "GRIDLINES_SCREEN",
    "ChartOptions",
    "EngineStatus",
    "ObjectPosition",
    "PaperType",
    "RowColOptions",
    "TableColumn",
    "TableOptions",
    "TotalFunction",
    "WorksheetEngine",
    "XlsxWriterEngine",
    "strerror",
]
