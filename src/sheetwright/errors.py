from __future__ import annotations

from pydantic import BaseModel

from .engine.base import strerror


class WriteErrorDetail(BaseModel):
    """Structured details for an engine-reported failure."""

    operation: str
    sheet: str | None = None
    row: int | None = None
    column: int | None = None
    code: int
    message: str
    engine_message: str | None = None


class WriteError(RuntimeError):
    """Engine rejected the coordinate, value, or format combination."""

    def __init__(self, detail: WriteErrorDetail) -> None:
        super().__init__(detail.message)
        self.detail = detail

    @property
    def code(self) -> int:
        return self.detail.code

    @property
    def message(self) -> str:
        return self.detail.message

    @classmethod
    def from_status(
        cls,
        operation: str,
        code: int,
        *,
        sheet: str | None = None,
        row: int | None = None,
        column: int | None = None,
        engine_message: str | None = None,
    ) -> WriteError:
        """Build a WriteError from an engine status code."""
        message = f"{operation} failed: {strerror(code, operation)}"
        if engine_message:
            message = f"{message} ({engine_message})"
        detail = WriteErrorDetail(
            operation=operation,
            sheet=sheet,
            row=row,
            column=column,
            code=code,
            message=message,
            engine_message=engine_message,
        )
        return cls(detail)


class TableError(ValueError):
    """Table metadata could not be marshaled for the engine."""


__all__ = ["TableError", "WriteError", "WriteErrorDetail"]
