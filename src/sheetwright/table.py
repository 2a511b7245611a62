"""Marshaling of table column metadata into the engine's options record."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
import logging

from pydantic import BaseModel, ConfigDict

from .coords import MAX_ROW, CellRange
from .engine.options import TableColumn, TableOptions, TableStyleType, TotalFunction
from .errors import TableError
from .marshal import BufferScope

logger = logging.getLogger(__name__)


class TablePlan(BaseModel):
    """Engine-ready table request: options plus the final cell extent."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    first_row: int
    first_column: int
    last_row: int
    last_column: int
    options: TableOptions


class TableBuilder:
    """Collects table metadata and marshals it for a single engine call.

    Args:
        cell_range: Data range including the header row.
        name: Optional table name.
        headers: Header text, one per column from the left edge of the range.
        formats: Optional header formats aligned with ``headers``.
        total_functions: Optional aggregates aligned with ``headers``; any
            entry requests a total row below the range.
        style_type: Table style family.
        style_number: Table style number within the family.
    """

    def __init__(
        self,
        cell_range: CellRange,
        *,
        name: str | None = None,
        headers: Sequence[str] = (),
        formats: Sequence[object | None] = (),
        total_functions: Sequence[TotalFunction] = (),
        style_type: TableStyleType = "medium",
        style_number: int = 7,
    ) -> None:
        self.cell_range = cell_range
        self.name = name
        self.headers = list(headers)
        self.formats = list(formats)
        self.total_functions = [TotalFunction(func) for func in total_functions]
        self.style_type = style_type
        self.style_number = style_number
        self.scope: BufferScope | None = None
        self._validate()

    @property
    def total_row(self) -> bool:
        return bool(self.total_functions)

    def _validate(self) -> None:
        header_count = len(self.headers)
        if header_count > self.cell_range.column_count:
            raise TableError(
                f"Table has {header_count} headers but range "
                f"{self.cell_range.to_a1()} spans {self.cell_range.column_count} columns."
            )
        if len(self.formats) > header_count:
            raise TableError("Table has more header formats than headers.")
        if len(self.total_functions) > header_count:
            raise TableError("Table has more total functions than headers.")
        if self.total_row and self.cell_range.end_row + 1 > MAX_ROW:
            raise TableError("Table total row would fall below the last worksheet row.")

    @contextmanager
    def marshal(self) -> Iterator[TablePlan]:
        """Yield the engine-ready plan; buffers are released when the block exits."""
        with BufferScope() as scope:
            self.scope = scope
            try:
                plan = self._build(scope)
            except ValueError as exc:
                raise TableError(str(exc)) from exc
            yield plan

    def _build(self, scope: BufferScope) -> TablePlan:
        options = TableOptions(
            name=(
                scope.acquire_text(self.name, field="table name")
                if self.name is not None
                else None
            ),
            style_type=self.style_type,
            style_type_number=self.style_number,
            total_row=self.total_row,
        )
        for index, header in enumerate(self.headers):
            options.columns.append(
                TableColumn(
                    header=scope.acquire_text(header, field=f"header[{index}]"),
                    header_format=(
                        self.formats[index] if index < len(self.formats) else None
                    ),
                    total_function=(
                        self.total_functions[index]
                        if index < len(self.total_functions)
                        else TotalFunction.NONE
                    ),
                )
            )
        last_row = self.cell_range.end_row + (1 if self.total_row else 0)
        logger.debug(
            "table %s: %d column(s), total_row=%s",
            self.name or "<auto>",
            len(options.columns),
            options.total_row,
        )
        return TablePlan(
            first_row=self.cell_range.start_row,
            first_column=self.cell_range.start_column,
            last_row=last_row,
            last_column=self.cell_range.end_column,
            options=options,
        )


__all__ = ["TableBuilder", "TablePlan"]
