"""Chainable worksheet facade over an engine-owned worksheet."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
from typing import TYPE_CHECKING

from .colors import normalize_color
from .config import WorksheetConfig
from .coords import (
    MAX_COLUMN,
    Cell,
    CellLike,
    CellRangeLike,
    ColumnRangeLike,
    coerce_cell,
    coerce_column_range,
    coerce_range,
)
from .engine.base import EngineStatus, WorksheetEngine
from .engine.options import (
    ChartOptions,
    ObjectPosition,
    PaperType,
    RowColOptions,
    TotalFunction,
)
from .engine.xlsxwriter_engine import (
    GRIDLINES_PRINT,
    GRIDLINES_SCREEN,
    XlsxWriterEngine,
)
from .errors import WriteError
from .table import TableBuilder
from .values import NumberValue, Value, as_value, write_value

if TYPE_CHECKING:  # pragma: no cover - typing only
    from xlsxwriter.worksheet import Worksheet as XlsxWorksheet

logger = logging.getLogger(__name__)


class Worksheet:
    """One worksheet's content, addressed by zero-based coordinates.

    The facade holds a non-owning reference to the engine worksheet; the
    workbook that created it keeps ownership. Every operation validates its
    coordinates before calling the engine and returns ``self`` for chaining.

    Instances are not thread-safe. Serialize access to one worksheet.
    """

    def __init__(
        self, engine: WorksheetEngine, config: WorksheetConfig | None = None
    ) -> None:
        self._engine = engine
        self.config = config or WorksheetConfig()

    @classmethod
    def wrap(
        cls, worksheet: XlsxWorksheet, config: WorksheetConfig | None = None
    ) -> Worksheet:
        """Build a facade over an ``xlsxwriter`` worksheet."""
        return cls(XlsxWriterEngine(worksheet), config)

    @property
    def name(self) -> str:
        return self._engine.name

    @property
    def engine(self) -> WorksheetEngine:
        return self._engine

    # -- cell writes ---------------------------------------------------------

    def write_value(
        self, value: Value | object, cell: CellLike, cell_format: object | None = None
    ) -> Worksheet:
        """Write one value using the engine primitive for its kind.

        Args:
            value: A value model or a plain Python value (see ``as_value``).
            cell: Target cell.
            cell_format: Optional engine format handle.

        Raises:
            WriteError: If the engine rejects the write.
        """
        target = coerce_cell(cell)
        resolved = as_value(value)
        status = write_value(
            self._engine, resolved, target.row, target.column, cell_format
        )
        self._check(
            f"write_{resolved.kind}", status, row=target.row, column=target.column
        )
        return self

    def write_column(
        self,
        values: Iterable[Value | object],
        cell: CellLike,
        cell_format: object | None = None,
    ) -> Worksheet:
        """Write values downward from ``cell``, one row per element."""
        start = coerce_cell(cell)
        resolved = [as_value(value) for value in values]
        if resolved:
            start.offset(rows=len(resolved) - 1)  # last cell must be in range
        for index, value in enumerate(resolved):
            self.write_value(value, start.offset(rows=index), cell_format)
        return self

    def write_row(
        self,
        values: Iterable[Value | object],
        cell: CellLike,
        cell_format: object | None = None,
    ) -> Worksheet:
        """Write values rightward from ``cell``, one column per element."""
        start = coerce_cell(cell)
        resolved = [as_value(value) for value in values]
        if resolved:
            start.offset(columns=len(resolved) - 1)  # last cell must be in range
        for index, value in enumerate(resolved):
            self.write_value(value, start.offset(columns=index), cell_format)
        return self

    def write_numbers(
        self,
        numbers: Sequence[float],
        row: int,
        col: int = 0,
        cell_format: object | None = None,
    ) -> Worksheet:
        """Write a row of numbers without going through value dispatch.

        Raises:
            ValueError: If any element is not a finite number; nothing is
                written in that case.
        """
        start = Cell(row=row, column=col)
        checked = [NumberValue(value=number).value for number in numbers]
        if checked:
            start.offset(columns=len(checked) - 1)  # last cell must be in range
        for index, number in enumerate(checked):
            column = start.column + index
            status = self._engine.write_number(row, column, number, cell_format)
            self._check("write_number", status, row=row, column=column)
        return self

    def write_strings(
        self,
        strings: Sequence[str],
        row: int,
        col: int = 0,
        cell_format: object | None = None,
    ) -> Worksheet:
        """Write a row of strings without going through value dispatch."""
        start = Cell(row=row, column=col)
        if strings:
            start.offset(columns=len(strings) - 1)  # last cell must be in range
        for index, string in enumerate(strings):
            column = start.column + index
            status = self._engine.write_string(row, column, string, cell_format)
            self._check("write_string", status, row=row, column=column)
        return self

    # -- sheet state ---------------------------------------------------------

    def select(self) -> Worksheet:
        self._check("select", self._engine.select())
        return self

    def hide(self) -> Worksheet:
        self._check("hide", self._engine.hide())
        return self

    def activate(self) -> Worksheet:
        self._check("activate", self._engine.activate())
        return self

    def hide_zero(self) -> Worksheet:
        """Display zero values as blank cells."""
        self._check("hide_zero", self._engine.hide_zero())
        return self

    def paper(self, paper_type: PaperType | int) -> Worksheet:
        self._check("set_paper", self._engine.set_paper(int(PaperType(paper_type))))
        return self

    def tab_color(self, color: str | int) -> Worksheet:
        self._check("set_tab_color", self._engine.set_tab_color(normalize_color(color)))
        return self

    def gridlines(self, screen: bool, print_: bool = False) -> Worksheet:
        """Show or hide gridlines on screen and on the printed page."""
        option = (GRIDLINES_SCREEN if screen else 0) | (GRIDLINES_PRINT if print_ else 0)
        self._check("gridlines", self._engine.gridlines(option))
        return self

    # -- rows and columns ----------------------------------------------------

    def set_column(
        self,
        columns: ColumnRangeLike,
        width: float,
        cell_format: object | None = None,
        options: RowColOptions | None = None,
    ) -> Worksheet:
        """Set width, format and outline flags for a span of columns."""
        span = coerce_column_range(columns)
        status = self._engine.set_column(
            span.start_column, span.end_column, width, cell_format, options
        )
        self._check("set_column", status, column=span.start_column)
        return self

    def set_row(
        self,
        row: int,
        height: float,
        cell_format: object | None = None,
        options: RowColOptions | None = None,
    ) -> Worksheet:
        target = Cell(row=row, column=0)
        status = self._engine.set_row(target.row, height, cell_format, options)
        self._check("set_row", status, row=target.row)
        return self

    def hide_columns(self, start_column: int | str, width: float | None = None) -> Worksheet:
        """Hide every column from ``start_column`` to the last worksheet column."""
        first = Cell(row=0, column=start_column).column
        status = self._engine.set_column(
            first,
            MAX_COLUMN,
            self.config.hidden_column_width if width is None else width,
            None,
            RowColOptions(hidden=True),
        )
        self._check("hide_columns", status, column=first)
        return self

    def default_row_height(
        self, height: float, hide_unused_rows: bool = True
    ) -> Worksheet:
        status = self._engine.set_default_row(height, hide_unused_rows)
        self._check("set_default_row", status)
        return self

    # -- ranges --------------------------------------------------------------

    def print_area(self, cell_range: CellRangeLike) -> Worksheet:
        area = coerce_range(cell_range)
        status = self._engine.print_area(
            area.start_row, area.start_column, area.end_row, area.end_column
        )
        self._check("print_area", status, row=area.start_row, column=area.start_column)
        return self

    def autofilter(self, cell_range: CellRangeLike) -> Worksheet:
        area = coerce_range(cell_range)
        status = self._engine.autofilter(
            area.start_row, area.start_column, area.end_row, area.end_column
        )
        self._check("autofilter", status, row=area.start_row, column=area.start_column)
        return self

    def merge_range(
        self, cell_range: CellRangeLike, text: str, cell_format: object | None = None
    ) -> Worksheet:
        """Merge a rectangular block and write ``text`` into it.

        Raises:
            ValueError: If the range is a single cell.
            WriteError: If the engine rejects the merge (e.g. overlap).
        """
        area = coerce_range(cell_range)
        if area.row_count == 1 and area.column_count == 1:
            raise ValueError("merge_range requires a multi-cell range.")
        status = self._engine.merge_range(
            area.start_row,
            area.start_column,
            area.end_row,
            area.end_column,
            text,
            cell_format,
        )
        self._check("merge_range", status, row=area.start_row, column=area.start_column)
        return self

    # -- objects -------------------------------------------------------------

    def insert_chart(
        self,
        chart: object,
        position: CellLike,
        scale: tuple[float, float] | None = None,
        *,
        offset: tuple[int, int] = (0, 0),
        object_position: ObjectPosition | None = None,
        description: str | None = None,
    ) -> Worksheet:
        """Insert a chart with its top-left corner at ``position``.

        Args:
            chart: Engine chart handle.
            position: Anchor cell.
            scale: Optional ``(x, y)`` scale factors.
            offset: Pixel offset ``(x, y)`` from the anchor cell.
            object_position: Overrides the configured positioning mode.
            description: Alt text for the chart.
        """
        anchor = coerce_cell(position)
        x_scale, y_scale = scale if scale is not None else (1.0, 1.0)
        options = ChartOptions(
            x_offset=offset[0],
            y_offset=offset[1],
            x_scale=x_scale,
            y_scale=y_scale,
            object_position=(
                self.config.object_position
                if object_position is None
                else object_position
            ),
            description=description,
        )
        status = self._engine.insert_chart(anchor.row, anchor.column, chart, options)
        self._check("insert_chart", status, row=anchor.row, column=anchor.column)
        return self

    def add_table(
        self,
        cell_range: CellRangeLike,
        name: str | None = None,
        headers: Sequence[str] = (),
        formats: Sequence[object | None] = (),
        total_functions: Sequence[TotalFunction] = (),
    ) -> Worksheet:
        """Add a structured table over ``cell_range``.

        When any total function is given, a total row is added directly below
        the range, so the table ends one row lower than ``cell_range``.

        Args:
            cell_range: Header row plus data rows.
            name: Optional table name.
            headers: Column header text, left to right.
            formats: Optional header formats aligned with ``headers``.
            total_functions: Aggregates aligned with ``headers``; missing
                entries default to ``TotalFunction.NONE``.

        Raises:
            TableError: If the metadata does not fit the range or cannot be
                marshaled.
            WriteError: If the engine rejects the table.
        """
        builder = TableBuilder(
            coerce_range(cell_range),
            name=name,
            headers=headers,
            formats=formats,
            total_functions=total_functions,
            style_type=self.config.table_style_type,
            style_number=self.config.table_style_number,
        )
        with builder.marshal() as plan:
            status = self._engine.add_table(
                plan.first_row,
                plan.first_column,
                plan.last_row,
                plan.last_column,
                plan.options,
            )
            self._check(
                "add_table", status, row=plan.first_row, column=plan.first_column
            )
        return self

    def add_table_from_headers(
        self,
        cell_range: CellRangeLike,
        headers: Sequence[tuple[str, object | None]] = (),
        name: str | None = None,
    ) -> Worksheet:
        """Add a table from ``(header, format)`` pairs without a total row."""
        return self.add_table(
            cell_range,
            name=name,
            headers=[header for header, _ in headers],
            formats=[fmt for _, fmt in headers],
            total_functions=(),
        )

    # -- error policy --------------------------------------------------------

    def _check(
        self,
        operation: str,
        status: int,
        *,
        row: int | None = None,
        column: int | None = None,
    ) -> None:
        """Apply the configured error policy to an engine status."""
        if status == EngineStatus.SUCCESS:
            return
        engine_message = getattr(self._engine, "last_error", None)
        error = WriteError.from_status(
            operation,
            status,
            sheet=self.name,
            row=row,
            column=column,
            engine_message=engine_message,
        )
        if self.config.on_error == "abort":
            logger.error("%s", error.message)
            raise SystemExit(error.message) from error
        logger.warning("%s", error.message)
        raise error


__all__ = ["Worksheet"]
