from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any
import warnings

from xlsxwriter.exceptions import XlsxWriterException
from xlsxwriter.worksheet import Worksheet as XlsxWorksheet

from .base import EngineStatus
from .options import (
    ChartOptions,
    ObjectPosition,
    RowColOptions,
    TableOptions,
    TotalFunction,
)

logger = logging.getLogger(__name__)

GRIDLINES_SCREEN = 1
GRIDLINES_PRINT = 2

_TOTAL_FUNCTION_NAMES: dict[TotalFunction, str] = {
    TotalFunction.AVERAGE: "average",
    TotalFunction.COUNT_NUMS: "count_nums",
    TotalFunction.COUNT: "count",
    TotalFunction.MAX: "max",
    TotalFunction.MIN: "min",
    TotalFunction.STD_DEV: "std_dev",
    TotalFunction.SUM: "sum",
    TotalFunction.VAR: "var",
}


class XlsxWriterEngine:
    """Worksheet engine backed by an ``xlsxwriter`` worksheet.

    The workbook owns the worksheet; this adapter only forwards calls and
    normalizes their results to integer status codes.
    """

    def __init__(self, worksheet: XlsxWorksheet) -> None:
        self._worksheet = worksheet
        self.last_error: str | None = None

    @property
    def name(self) -> str:
        return str(self._worksheet.name)

    def write_number(
        self, row: int, col: int, number: float, cell_format: object | None
    ) -> int:
        return self._call(self._worksheet.write_number, row, col, number, cell_format)

    def write_string(
        self, row: int, col: int, string: str, cell_format: object | None
    ) -> int:
        return self._call(self._worksheet.write_string, row, col, string, cell_format)

    def write_url(
        self, row: int, col: int, url: str, cell_format: object | None
    ) -> int:
        return self._call(self._worksheet.write_url, row, col, url, cell_format)

    def write_blank(self, row: int, col: int, cell_format: object | None) -> int:
        return self._call(self._worksheet.write_blank, row, col, None, cell_format)

    def write_comment(self, row: int, col: int, comment: str) -> int:
        return self._call(self._worksheet.write_comment, row, col, comment)

    def write_boolean(
        self, row: int, col: int, boolean: bool, cell_format: object | None
    ) -> int:
        return self._call(self._worksheet.write_boolean, row, col, boolean, cell_format)

    def write_formula(
        self, row: int, col: int, formula: str, cell_format: object | None
    ) -> int:
        return self._call(self._worksheet.write_formula, row, col, formula, cell_format)

    def select(self) -> int:
        return self._call(self._worksheet.select)

    def hide(self) -> int:
        return self._call(self._worksheet.hide)

    def activate(self) -> int:
        return self._call(self._worksheet.activate)

    def hide_zero(self) -> int:
        return self._call(self._worksheet.hide_zero)

    def set_paper(self, paper_type: int) -> int:
        return self._call(self._worksheet.set_paper, paper_type)

    def set_column(
        self,
        first_col: int,
        last_col: int,
        width: float,
        cell_format: object | None,
        options: RowColOptions | None,
    ) -> int:
        return self._call(
            self._worksheet.set_column,
            first_col,
            last_col,
            width,
            cell_format,
            _row_col_options(options),
        )

    def set_row(
        self,
        row: int,
        height: float,
        cell_format: object | None,
        options: RowColOptions | None,
    ) -> int:
        return self._call(
            self._worksheet.set_row, row, height, cell_format, _row_col_options(options)
        )

    def set_default_row(self, height: float, hide_unused_rows: bool) -> int:
        return self._call(self._worksheet.set_default_row, height, hide_unused_rows)

    def set_tab_color(self, color: str) -> int:
        return self._call(self._worksheet.set_tab_color, color)

    def print_area(
        self, first_row: int, first_col: int, last_row: int, last_col: int
    ) -> int:
        return self._call(
            self._worksheet.print_area, first_row, first_col, last_row, last_col
        )

    def autofilter(
        self, first_row: int, first_col: int, last_row: int, last_col: int
    ) -> int:
        return self._call(
            self._worksheet.autofilter, first_row, first_col, last_row, last_col
        )

    def gridlines(self, option: int) -> int:
        """Apply a gridline bitmask (bit 0 screen, bit 1 print)."""
        screen = bool(option & GRIDLINES_SCREEN)
        printed = bool(option & GRIDLINES_PRINT)
        if screen and printed:
            return self._call(self._worksheet.hide_gridlines, 0)
        if screen:
            return self._call(self._worksheet.hide_gridlines, 1)
        status = self._call(self._worksheet.hide_gridlines, 2)
        if printed:
            # hide_gridlines() cannot express print-only gridlines.
            self._worksheet.print_gridlines = 1
            self._worksheet.print_options_changed = True
        return status

    def merge_range(
        self,
        first_row: int,
        first_col: int,
        last_row: int,
        last_col: int,
        string: str,
        cell_format: object | None,
    ) -> int:
        return self._call(
            self._worksheet.merge_range,
            first_row,
            first_col,
            last_row,
            last_col,
            string,
            cell_format,
        )

    def insert_chart(
        self, row: int, col: int, chart: object, options: ChartOptions | None
    ) -> int:
        return self._call(
            self._worksheet.insert_chart, row, col, chart, _chart_options(options)
        )

    def add_table(
        self,
        first_row: int,
        first_col: int,
        last_row: int,
        last_col: int,
        options: TableOptions,
    ) -> int:
        return self._call(
            self._worksheet.add_table,
            first_row,
            first_col,
            last_row,
            last_col,
            _table_options(options),
        )

    def _call(self, primitive: Callable[..., Any], *args: Any) -> int:
        """Invoke a worksheet primitive and normalize its result.

        xlsxwriter reports most rejections through ``warnings.warn`` plus a
        negative return; the warning text is kept in ``last_error``.
        """
        self.last_error = None
        primitive_name = getattr(primitive, "__name__", "call")
        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always")
                result = primitive(*args)
        except XlsxWriterException as exc:
            self.last_error = str(exc) or type(exc).__name__
            logger.warning(
                "xlsxwriter rejected %s on '%s': %s",
                primitive_name,
                self.name,
                self.last_error,
            )
            return int(EngineStatus.REJECTED)
        status = (
            result
            if isinstance(result, int) and not isinstance(result, bool)
            else int(EngineStatus.SUCCESS)
        )
        messages = [str(entry.message) for entry in caught]
        if status != EngineStatus.SUCCESS and messages:
            self.last_error = "; ".join(messages)
        for message in messages:
            logger.warning(
                "xlsxwriter warned in %s on '%s': %s",
                primitive_name,
                self.name,
                message,
            )
        return status


def _row_col_options(options: RowColOptions | None) -> dict[str, Any] | None:
    if options is None:
        return None
    return {
        "hidden": options.hidden,
        "level": options.level,
        "collapsed": options.collapsed,
    }


def _chart_options(options: ChartOptions | None) -> dict[str, Any] | None:
    if options is None:
        return None
    payload: dict[str, Any] = {
        "x_offset": options.x_offset,
        "y_offset": options.y_offset,
        "x_scale": options.x_scale,
        "y_scale": options.y_scale,
        "decorative": options.decorative,
    }
    if options.object_position != ObjectPosition.DEFAULT:
        payload["object_position"] = int(options.object_position)
    if options.description is not None:
        payload["description"] = options.description
    return payload


def _table_options(options: TableOptions) -> dict[str, Any]:
    """Translate a table options record to xlsxwriter's dict form."""
    payload: dict[str, Any] = {
        "style": f"Table Style {options.style_type.capitalize()} "
        f"{options.style_type_number}",
        "total_row": options.total_row,
    }
    if options.name is not None:
        payload["name"] = options.name
    if options.columns:
        columns: list[dict[str, Any]] = []
        for column in options.columns:
            entry: dict[str, Any] = {"header": column.header}
            if column.header_format is not None:
                entry["header_format"] = column.header_format
            if column.total_function != TotalFunction.NONE:
                entry["total_function"] = _TOTAL_FUNCTION_NAMES[column.total_function]
            columns.append(entry)
        payload["columns"] = columns
    return payload


__all__ = ["GRIDLINES_PRINT", "GRIDLINES_SCREEN", "XlsxWriterEngine"]
