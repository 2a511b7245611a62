from __future__ import annotations

from .a1 import (
    MAX_COLUMN,
    MAX_ROW,
    column_index_to_label,
    column_label_to_index,
    format_cell,
    parse_cell,
    parse_column_range,
    parse_range,
    split_a1,
)

__all__ = [
    "MAX_COLUMN",
    "MAX_ROW",
    "column_index_to_label",
    "column_label_to_index",
    "format_cell",
    "parse_cell",
    "parse_column_range",
    "parse_range",
    "split_a1",
]
