from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable

from .options import ChartOptions, RowColOptions, TableOptions


class EngineStatus(IntEnum):
    """Status codes returned by engine primitives."""

    SUCCESS = 0
    RANGE_ERROR = -1
    STRING_TOO_LONG = -2
    URL_TOO_LONG = -3
    MAX_URLS_EXCEEDED = -4
    REJECTED = -100


_STATUS_MESSAGES: dict[int, str] = {
    EngineStatus.SUCCESS: "No error.",
    EngineStatus.RANGE_ERROR: "Worksheet row or column index out of range.",
    EngineStatus.STRING_TOO_LONG: "String exceeds Excel's limit of 32,767 characters.",
    EngineStatus.URL_TOO_LONG: "URL exceeds Excel's length limit.",
    EngineStatus.MAX_URLS_EXCEEDED: "Worksheet exceeds Excel's limit of 65,530 URLs.",
    EngineStatus.REJECTED: "Engine rejected the request.",
}

# Some primitives reuse the negative codes for their own failures.
_PRIMITIVE_MESSAGES: dict[tuple[str, int], str] = {
    ("add_table", EngineStatus.STRING_TOO_LONG): (
        "Table options rejected (invalid name, unknown parameter or no data row)."
    ),
    ("add_table", EngineStatus.URL_TOO_LONG): (
        "Tables are not supported in constant memory mode."
    ),
    ("insert_chart", EngineStatus.STRING_TOO_LONG): (
        "Chart is already inserted in a worksheet."
    ),
}


def strerror(code: int, primitive: str | None = None) -> str:
    """Return human-readable text for an engine status code.

    Args:
        code: Status returned by an engine primitive.
        primitive: Name of the primitive that returned it, when known.
    """
    if primitive is not None and (primitive, code) in _PRIMITIVE_MESSAGES:
        return _PRIMITIVE_MESSAGES[(primitive, code)]
    return _STATUS_MESSAGES.get(code, f"Unknown engine error ({code}).")


@runtime_checkable
class WorksheetEngine(Protocol):
    """Protocol for engine-owned worksheet adapters.

    Write and layout primitives return an integer status where ``0`` means
    success. Format and chart handles are forwarded without inspection.
    """

    last_error: str | None

    @property
    def name(self) -> str: ...

    def write_number(
        self, row: int, col: int, number: float, cell_format: object | None
    ) -> int: ...

    def write_string(
        self, row: int, col: int, string: str, cell_format: object | None
    ) -> int: ...

    def write_url(
        self, row: int, col: int, url: str, cell_format: object | None
    ) -> int: ...

    def write_blank(self, row: int, col: int, cell_format: object | None) -> int: ...

    def write_comment(self, row: int, col: int, comment: str) -> int: ...

    def write_boolean(
        self, row: int, col: int, boolean: bool, cell_format: object | None
    ) -> int: ...

    def write_formula(
        self, row: int, col: int, formula: str, cell_format: object | None
    ) -> int: ...

    def select(self) -> int: ...

    def hide(self) -> int: ...

    def activate(self) -> int: ...

    def hide_zero(self) -> int: ...

    def set_paper(self, paper_type: int) -> int: ...

    def set_column(
        self,
        first_col: int,
        last_col: int,
        width: float,
        cell_format: object | None,
        options: RowColOptions | None,
    ) -> int: ...

    def set_row(
        self,
        row: int,
        height: float,
        cell_format: object | None,
        options: RowColOptions | None,
    ) -> int: ...

    def set_default_row(self, height: float, hide_unused_rows: bool) -> int: ...

    def set_tab_color(self, color: str) -> int: ...

    def print_area(
        self, first_row: int, first_col: int, last_row: int, last_col: int
    ) -> int: ...

    def autofilter(
        self, first_row: int, first_col: int, last_row: int, last_col: int
    ) -> int: ...

    def gridlines(self, option: int) -> int: ...

    def merge_range(
        self,
        first_row: int,
        first_col: int,
        last_row: int,
        last_col: int,
        string: str,
        cell_format: object | None,
    ) -> int: ...

    def insert_chart(
        self, row: int, col: int, chart: object, options: ChartOptions | None
    ) -> int: ...

    def add_table(
        self,
        first_row: int,
        first_col: int,
        last_row: int,
        last_col: int,
        options: TableOptions,
    ) -> int: ...


__all__ = ["EngineStatus", "WorksheetEngine", "strerror"]
