from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
import xlsxwriter
from xlsxwriter.workbook import Workbook

from sheetwright.engine.options import ChartOptions, RowColOptions, TableOptions


class RecordingEngine:
    """In-memory engine that records every primitive call.

    ``statuses`` maps a primitive name to the status code it should return.
    """

    def __init__(self, name: str = "Sheet1") -> None:
        self._name = name
        self.calls: list[tuple[str, tuple[object, ...]]] = []
        self.statuses: dict[str, int] = {}
        self.last_error: str | None = None

    @property
    def name(self) -> str:
        return self._name

    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]

    def _record(self, method: str, *args: object) -> int:
        self.calls.append((method, args))
        return self.statuses.get(method, 0)

    def write_number(
        self, row: int, col: int, number: float, cell_format: object | None
    ) -> int:
        return self._record("write_number", row, col, number, cell_format)

    def write_string(
        self, row: int, col: int, string: str, cell_format: object | None
    ) -> int:
        return self._record("write_string", row, col, string, cell_format)

    def write_url(
        self, row: int, col: int, url: str, cell_format: object | None
    ) -> int:
        return self._record("write_url", row, col, url, cell_format)

    def write_blank(self, row: int, col: int, cell_format: object | None) -> int:
        return self._record("write_blank", row, col, cell_format)

    def write_comment(self, row: int, col: int, comment: str) -> int:
        return self._record("write_comment", row, col, comment)

    def write_boolean(
        self, row: int, col: int, boolean: bool, cell_format: object | None
    ) -> int:
        return self._record("write_boolean", row, col, boolean, cell_format)

    def write_formula(
        self, row: int, col: int, formula: str, cell_format: object | None
    ) -> int:
        return self._record("write_formula", row, col, formula, cell_format)

    def select(self) -> int:
        return self._record("select")

    def hide(self) -> int:
        return self._record("hide")

    def activate(self) -> int:
        return self._record("activate")

    def hide_zero(self) -> int:
        return self._record("hide_zero")

    def set_paper(self, paper_type: int) -> int:
        return self._record("set_paper", paper_type)

    def set_column(
        self,
        first_col: int,
        last_col: int,
        width: float,
        cell_format: object | None,
        options: RowColOptions | None,
    ) -> int:
        return self._record("set_column", first_col, last_col, width, cell_format, options)

    def set_row(
        self,
        row: int,
        height: float,
        cell_format: object | None,
        options: RowColOptions | None,
    ) -> int:
        return self._record("set_row", row, height, cell_format, options)

    def set_default_row(self, height: float, hide_unused_rows: bool) -> int:
        return self._record("set_default_row", height, hide_unused_rows)

    def set_tab_color(self, color: str) -> int:
        return self._record("set_tab_color", color)

    def print_area(
        self, first_row: int, first_col: int, last_row: int, last_col: int
    ) -> int:
        return self._record("print_area", first_row, first_col, last_row, last_col)

    def autofilter(
        self, first_row: int, first_col: int, last_row: int, last_col: int
    ) -> int:
        return self._record("autofilter", first_row, first_col, last_row, last_col)

    def gridlines(self, option: int) -> int:
        return self._record("gridlines", option)

    def merge_range(
        self,
        first_row: int,
        first_col: int,
        last_row: int,
        last_col: int,
        string: str,
        cell_format: object | None,
    ) -> int:
        return self._record(
            "merge_range", first_row, first_col, last_row, last_col, string, cell_format
        )

    def insert_chart(
        self, row: int, col: int, chart: object, options: ChartOptions | None
    ) -> int:
        return self._record("insert_chart", row, col, chart, options)

    def add_table(
        self,
        first_row: int,
        first_col: int,
        last_row: int,
        last_col: int,
        options: TableOptions,
    ) -> int:
        return self._record("add_table", first_row, first_col, last_row, last_col, options)


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def xlsx_path(tmp_path: Path) -> Path:
    return tmp_path / "out.xlsx"


@pytest.fixture
def workbook(xlsx_path: Path) -> Iterator[Workbook]:
    """xlsxwriter workbook that tests close explicitly before reading back."""
    wb = xlsxwriter.Workbook(str(xlsx_path))
    yield wb
    if not wb.fileclosed:
        wb.close()
