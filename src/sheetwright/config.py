from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .engine.options import ObjectPosition, TableStyleType

ErrorPolicy = Literal["raise", "abort"]


class WorksheetConfig(BaseModel):
    """Behavior and defaults for a worksheet facade."""

    on_error: ErrorPolicy = Field(
        default="raise",
        description="'raise' surfaces WriteError; 'abort' logs and exits.",
    )
    hidden_column_width: float = Field(
        default=8.43, gt=0, description="Width applied by hide_columns()."
    )
    table_style_type: TableStyleType = Field(
        default="medium", description="Table style family."
    )
    table_style_number: int = Field(
        default=7, ge=1, le=28, description="Table style number."
    )
    object_position: ObjectPosition = Field(
        default=ObjectPosition.MOVE_AND_SIZE,
        description="Positioning mode for inserted charts.",
    )


class LoggingConfig(BaseModel):
    """Logging setup for applications embedding sheetwright."""

    level: str = Field(default="INFO", description="Logging level.")
    log_file: Path | None = Field(default=None, description="Optional log file path.")


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging.

    Args:
        config: Logging configuration.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.level.upper(),
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


__all__ = ["ErrorPolicy", "LoggingConfig", "WorksheetConfig", "configure_logging"]
