from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from pydantic import ValidationError
import pytest

import sheetwright.table as table_module
from sheetwright.config import WorksheetConfig
from sheetwright.coords import MAX_COLUMN, MAX_ROW, Cell, CellRange
from sheetwright.engine.base import EngineStatus
from sheetwright.engine.options import (
    ChartOptions,
    ObjectPosition,
    PaperType,
    RowColOptions,
    TotalFunction,
)
from sheetwright.errors import TableError, WriteError
from sheetwright.marshal import BufferScope
from sheetwright.values import CommentValue, FormulaValue, NumberValue, TextValue
from sheetwright.worksheet import Worksheet

if TYPE_CHECKING:
    from conftest import RecordingEngine


def test_write_value_number_scenario(engine: RecordingEngine) -> None:
    Worksheet(engine).write_value(NumberValue(value=3.14), Cell(row=0, column=0))
    assert engine.calls == [("write_number", (0, 0, 3.14, None))]


def test_write_value_datetime_scenario(engine: RecordingEngine) -> None:
    moment = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=86400)
    Worksheet(engine).write_value(moment, Cell(row=1, column=0))
    assert engine.calls == [("write_number", (1, 0, 25570.0, None))]


def test_write_value_accepts_a1_and_plain_values(engine: RecordingEngine) -> None:
    fmt = object()
    Worksheet(engine).write_value("label", "B3", fmt).write_value(True, (0, "C"))
    assert engine.calls == [
        ("write_string", (2, 1, "label", fmt)),
        ("write_boolean", (0, 2, True, None)),
    ]


def test_write_value_rejects_invalid_cell_before_engine(engine: RecordingEngine) -> None:
    with pytest.raises(ValidationError):
        Worksheet(engine).write_value(1, (-1, 0))
    with pytest.raises(ValidationError):
        Worksheet(engine).write_value(1, (MAX_ROW + 1, 0))
    assert engine.calls == []


def test_write_row_advances_columns(engine: RecordingEngine) -> None:
    values = [1, "two", FormulaValue(value="=A1+1"), None]
    Worksheet(engine).write_row(values, Cell(row=4, column=2))
    assert engine.methods() == [
        "write_number",
        "write_string",
        "write_formula",
        "write_blank",
    ]
    positions = [args[:2] for _, args in engine.calls]
    assert positions == [(4, 2), (4, 3), (4, 4), (4, 5)]


def test_write_column_advances_rows(engine: RecordingEngine) -> None:
    Worksheet(engine).write_column(["a", "b", "c"], "D2")
    positions = [args[:2] for _, args in engine.calls]
    assert positions == [(1, 3), (2, 3), (3, 3)]


def test_write_row_validates_full_extent_first(engine: RecordingEngine) -> None:
    with pytest.raises(ValidationError):
        Worksheet(engine).write_row([1, 2, 3], Cell(row=0, column=MAX_COLUMN - 1))
    assert engine.calls == []


def test_write_row_forwards_format_to_every_cell(engine: RecordingEngine) -> None:
    fmt = object()
    Worksheet(engine).write_row([1, 2], "A1", fmt)
    assert [args[-1] for _, args in engine.calls] == [fmt, fmt]


def test_write_row_empty_is_noop(engine: RecordingEngine) -> None:
    Worksheet(engine).write_row([], "A1").write_column([], "A1")
    assert engine.calls == []


def test_write_numbers_fast_path(engine: RecordingEngine) -> None:
    Worksheet(engine).write_numbers([1, 2.5], row=3, col=1)
    assert engine.calls == [
        ("write_number", (3, 1, 1.0, None)),
        ("write_number", (3, 2, 2.5, None)),
    ]


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_write_numbers_rejects_non_finite_before_engine(
    engine: RecordingEngine, bad: float
) -> None:
    with pytest.raises(ValueError):
        Worksheet(engine).write_numbers([1.0, bad], row=0)
    assert engine.calls == []


def test_write_strings_fast_path(engine: RecordingEngine) -> None:
    Worksheet(engine).write_strings(["x", "y"], row=0)
    assert engine.calls == [
        ("write_string", (0, 0, "x", None)),
        ("write_string", (0, 1, "y", None)),
    ]


def test_write_strings_validates_extent(engine: RecordingEngine) -> None:
    with pytest.raises(ValidationError):
        Worksheet(engine).write_strings(["x", "y"], row=0, col=MAX_COLUMN)
    assert engine.calls == []


def test_engine_failure_raises_write_error(engine: RecordingEngine) -> None:
    engine.statuses["write_string"] = EngineStatus.STRING_TOO_LONG
    with pytest.raises(WriteError) as exc_info:
        Worksheet(engine).write_value(TextValue(value="x"), "C2")
    error = exc_info.value
    assert error.code == EngineStatus.STRING_TOO_LONG
    assert "32,767" in error.message
    assert error.detail.operation == "write_text"
    assert (error.detail.row, error.detail.column) == (1, 2)
    assert error.detail.sheet == "Sheet1"


def test_engine_failure_stops_row_write(engine: RecordingEngine) -> None:
    engine.statuses["write_string"] = EngineStatus.RANGE_ERROR
    with pytest.raises(WriteError):
        Worksheet(engine).write_row(["a", "b"], "A1")
    assert len(engine.calls) == 1


def test_engine_message_is_included(engine: RecordingEngine) -> None:
    engine.statuses["merge_range"] = EngineStatus.REJECTED
    engine.last_error = "Merge range 'A1:B2' overlaps"
    with pytest.raises(WriteError, match="overlaps") as exc_info:
        Worksheet(engine).merge_range("A1:B2", "x")
    assert exc_info.value.detail.engine_message == "Merge range 'A1:B2' overlaps"


def test_abort_policy_exits(engine: RecordingEngine) -> None:
    engine.statuses["write_number"] = EngineStatus.RANGE_ERROR
    sheet = Worksheet(engine, WorksheetConfig(on_error="abort"))
    with pytest.raises(SystemExit) as exc_info:
        sheet.write_value(1, "A1")
    assert "out of range" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, WriteError)


def test_comment_ignores_format(engine: RecordingEngine) -> None:
    Worksheet(engine).write_value(CommentValue(value="note"), "A1", object())
    assert engine.calls == [("write_comment", (0, 0, "note"))]


def test_sheet_state_operations(engine: RecordingEngine) -> None:
    sheet = Worksheet(engine)
    sheet.select().hide().activate().hide_zero().paper(PaperType.A4)
    assert engine.calls == [
        ("select", ()),
        ("hide", ()),
        ("activate", ()),
        ("hide_zero", ()),
        ("set_paper", (9,)),
    ]


def test_paper_rejects_unknown_type(engine: RecordingEngine) -> None:
    with pytest.raises(ValueError):
        Worksheet(engine).paper(999)


def test_tab_color_is_normalized(engine: RecordingEngine) -> None:
    Worksheet(engine).tab_color(0xFF0000).tab_color("00ff00")
    assert engine.calls == [
        ("set_tab_color", ("#FF0000",)),
        ("set_tab_color", ("#00FF00",)),
    ]
    with pytest.raises(ValueError):
        Worksheet(engine).tab_color("red")


@pytest.mark.parametrize(
    "screen, print_, option",
    [(False, False, 0), (True, False, 1), (False, True, 2), (True, True, 3)],
)
def test_gridlines_bitmask(
    engine: RecordingEngine, screen: bool, print_: bool, option: int
) -> None:
    Worksheet(engine).gridlines(screen, print_)
    assert engine.calls == [("gridlines", (option,))]


def test_set_column_and_row(engine: RecordingEngine) -> None:
    fmt = object()
    outline = RowColOptions(level=1)
    Worksheet(engine).set_column("B:D", 20, fmt).set_row(4, 30, None, outline)
    assert engine.calls == [
        ("set_column", (1, 3, 20, fmt, None)),
        ("set_row", (4, 30, None, outline)),
    ]


def test_set_row_rejects_out_of_range(engine: RecordingEngine) -> None:
    with pytest.raises(ValidationError):
        Worksheet(engine).set_row(MAX_ROW + 1, 15)
    assert engine.calls == []


def test_hide_columns_spans_to_last_column(engine: RecordingEngine) -> None:
    Worksheet(engine).hide_columns(5).hide_columns("C", width=2)
    assert engine.calls == [
        ("set_column", (5, MAX_COLUMN, 8.43, None, RowColOptions(hidden=True))),
        ("set_column", (2, MAX_COLUMN, 2, None, RowColOptions(hidden=True))),
    ]


def test_hide_columns_uses_configured_width(engine: RecordingEngine) -> None:
    Worksheet(engine, WorksheetConfig(hidden_column_width=3.0)).hide_columns(0)
    assert engine.calls[0][1][2] == 3.0


def test_default_row_height(engine: RecordingEngine) -> None:
    Worksheet(engine).default_row_height(15).default_row_height(20, False)
    assert engine.calls == [
        ("set_default_row", (15, True)),
        ("set_default_row", (20, False)),
    ]


def test_print_area_and_autofilter(engine: RecordingEngine) -> None:
    Worksheet(engine).print_area("A1:C10").autofilter(CellRange.parse("B2:D5"))
    assert engine.calls == [
        ("print_area", (0, 0, 9, 2)),
        ("autofilter", (1, 1, 4, 3)),
    ]


def test_print_area_rejects_inverted_range(engine: RecordingEngine) -> None:
    with pytest.raises(ValidationError):
        Worksheet(engine).print_area("C10:A1")
    assert engine.calls == []


def test_merge_range(engine: RecordingEngine) -> None:
    fmt = object()
    Worksheet(engine).merge_range("B2:D3", "Title", fmt)
    assert engine.calls == [("merge_range", (1, 1, 2, 3, "Title", fmt))]


def test_merge_range_rejects_single_cell(engine: RecordingEngine) -> None:
    with pytest.raises(ValueError, match="multi-cell"):
        Worksheet(engine).merge_range("A1:A1", "x")
    assert engine.calls == []


def test_insert_chart_defaults_to_move_and_size(engine: RecordingEngine) -> None:
    chart = object()
    Worksheet(engine).insert_chart(chart, "E2")
    method, args = engine.calls[0]
    assert method == "insert_chart"
    assert args[:3] == (1, 4, chart)
    assert args[3] == ChartOptions(object_position=ObjectPosition.MOVE_AND_SIZE)


def test_insert_chart_with_scale_and_override(engine: RecordingEngine) -> None:
    Worksheet(engine).insert_chart(
        object(),
        Cell(row=0, column=0),
        (2.0, 0.5),
        offset=(10, 5),
        object_position=ObjectPosition.MOVE_DONT_SIZE,
    )
    options = engine.calls[0][1][3]
    assert (options.x_scale, options.y_scale) == (2.0, 0.5)
    assert (options.x_offset, options.y_offset) == (10, 5)
    assert options.object_position == ObjectPosition.MOVE_DONT_SIZE


def test_add_table_scenario(engine: RecordingEngine) -> None:
    Worksheet(engine).add_table(
        CellRange(start_row=0, start_column=0, end_row=2, end_column=2),
        headers=["A", "B", "C"],
        total_functions=[TotalFunction.SUM],
    )
    method, args = engine.calls[0]
    assert method == "add_table"
    assert args[:4] == (0, 0, 3, 2)
    options = args[4]
    assert options.total_row is True
    assert len(options.columns) == 3
    assert options.columns[0].total_function == TotalFunction.SUM
    assert all(col.total_function == TotalFunction.NONE for col in options.columns[1:])
    assert (options.style_type, options.style_type_number) == ("medium", 7)


def test_add_table_from_headers(engine: RecordingEngine) -> None:
    bold = object()
    Worksheet(engine).add_table_from_headers(
        "A1:B5", [("Name", bold), ("Score", None)], name="Scores"
    )
    args = engine.calls[0][1]
    assert args[:4] == (0, 0, 4, 1)
    options = args[4]
    assert options.name == "Scores"
    assert options.total_row is False
    assert [col.header_format for col in options.columns] == [bold, None]


def test_add_table_uses_configured_style(engine: RecordingEngine) -> None:
    config = WorksheetConfig(table_style_type="light", table_style_number=9)
    Worksheet(engine, config).add_table("A1:A3", headers=["x"])
    options = engine.calls[0][1][4]
    assert (options.style_type, options.style_type_number) == ("light", 9)


class _TrackingScope(BufferScope):
    instances: list[BufferScope] = []

    def __init__(self) -> None:
        super().__init__()
        _TrackingScope.instances.append(self)


@pytest.mark.parametrize("status", [EngineStatus.SUCCESS, EngineStatus.RANGE_ERROR])
def test_add_table_never_leaks_buffers(
    engine: RecordingEngine, monkeypatch: pytest.MonkeyPatch, status: EngineStatus
) -> None:
    _TrackingScope.instances = []
    monkeypatch.setattr(table_module, "BufferScope", _TrackingScope)
    engine.statuses["add_table"] = status
    sheet = Worksheet(engine)
    try:
        sheet.add_table("A1:B3", name="T", headers=["a", "b"])
    except WriteError:
        assert status != EngineStatus.SUCCESS
    [scope] = _TrackingScope.instances
    assert scope.acquired == 3
    assert scope.live == 0


def test_add_table_rejects_bad_metadata_before_engine(engine: RecordingEngine) -> None:
    with pytest.raises(TableError):
        Worksheet(engine).add_table("A1:B3", headers=["a", "b", "c"])
    assert engine.calls == []


def test_name_comes_from_engine(engine: RecordingEngine) -> None:
    assert Worksheet(engine).name == "Sheet1"
