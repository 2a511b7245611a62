"""Option records handed to the worksheet engine."""

from __future__ import annotations

from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TableStyleType = Literal["light", "medium", "dark"]


class TotalFunction(IntEnum):
    """Aggregate shown in a table's total row, by engine code."""

    NONE = 0
    AVERAGE = 101
    COUNT_NUMS = 102
    COUNT = 103
    MAX = 104
    MIN = 105
    STD_DEV = 107
    SUM = 109
    VAR = 110


class ObjectPosition(IntEnum):
    """How an inserted object follows the cells beneath it."""

    DEFAULT = 0
    MOVE_AND_SIZE = 1
    MOVE_DONT_SIZE = 2
    DONT_MOVE_DONT_SIZE = 3
    MOVE_AND_SIZE_AFTER = 4


class PaperType(IntEnum):
    """Printer paper sizes by engine index."""

    DEFAULT = 0
    LETTER = 1
    LETTER_SMALL = 2
    TABLOID = 3
    LEDGER = 4
    LEGAL = 5
    STATEMENT = 6
    EXECUTIVE = 7
    A3 = 8
    A4 = 9
    A4_SMALL = 10
    A5 = 11
    B4 = 12
    B5 = 13
    FOLIO = 14
    QUARTO = 15
    ENVELOPE_10 = 20
    ENVELOPE_DL = 27
    ENVELOPE_C5 = 28
    ENVELOPE_MONARCH = 37


class RowColOptions(BaseModel):
    """Hidden/outline flags for ``set_row`` and ``set_column``."""

    model_config = ConfigDict(frozen=True)

    hidden: bool = False
    level: int = Field(default=0, ge=0, le=7)
    collapsed: bool = False


class ChartOptions(BaseModel):
    """Placement options for ``insert_chart``."""

    model_config = ConfigDict(frozen=True)

    x_offset: int = 0
    y_offset: int = 0
    x_scale: float = Field(default=1.0, gt=0)
    y_scale: float = Field(default=1.0, gt=0)
    object_position: ObjectPosition = ObjectPosition.MOVE_AND_SIZE
    description: str | None = None
    decorative: bool = False


class TableColumn(BaseModel):
    """Per-column table metadata."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    header: str
    header_format: object | None = None
    total_function: TotalFunction = TotalFunction.NONE


class TableOptions(BaseModel):
    """Options record for ``add_table``."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str | None = None
    style_type: TableStyleType = "medium"
    style_type_number: int = Field(default=7, ge=1, le=28)
    total_row: bool = False
    columns: list[TableColumn] = Field(default_factory=list)


__all__ = [
    "ChartOptions",
    "ObjectPosition",
    "PaperType",
    "RowColOptions",
    "TableColumn",
    "TableOptions",
    "TableStyleType",
    "TotalFunction",
]
