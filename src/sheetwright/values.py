"""Closed set of cell values and their lowering to engine write primitives."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Annotated, Final, Literal, NoReturn, TypeAlias, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .engine.base import WorksheetEngine

logger = logging.getLogger(__name__)

ValueKind = Literal[
    "number",
    "text",
    "url",
    "blank",
    "comment",
    "boolean",
    "formula",
    "datetime",
]

SECONDS_PER_DAY: Final = 86_400
UNIX_EPOCH_SERIAL: Final = 25_569


class _ValueBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class NumberValue(_ValueBase):
    kind: Literal["number"] = "number"
    value: float = Field(allow_inf_nan=False)


class TextValue(_ValueBase):
    kind: Literal["text"] = "text"
    value: str


class UrlValue(_ValueBase):
    """Absolute URL written as a hyperlink."""

    kind: Literal["url"] = "url"
    value: str

    @field_validator("value")
    @classmethod
    def _require_absolute(cls, value: str) -> str:
        candidate = value.strip()
        if not urlsplit(candidate).scheme:
            raise ValueError(f"URL must be absolute: {value}")
        return candidate


class BlankValue(_ValueBase):
    """Empty cell; only useful together with a format."""

    kind: Literal["blank"] = "blank"


class CommentValue(_ValueBase):
    kind: Literal["comment"] = "comment"
    value: str


class BooleanValue(_ValueBase):
    kind: Literal["boolean"] = "boolean"
    value: bool


class FormulaValue(_ValueBase):
    """Formula text; the leading ``=`` is optional."""

    kind: Literal["formula"] = "formula"
    value: str

    @field_validator("value")
    @classmethod
    def _require_body(cls, value: str) -> str:
        if not value.strip().lstrip("="):
            raise ValueError("Formula must not be empty.")
        return value


class DateTimeValue(_ValueBase):
    """Point in time, written as a serial day number.

    Naive datetimes are taken as UTC.
    """

    kind: Literal["datetime"] = "datetime"
    value: datetime

    @property
    def serial(self) -> float:
        return to_serial(self.value)


Value: TypeAlias = Annotated[
    Union[
        NumberValue,
        TextValue,
        UrlValue,
        BlankValue,
        CommentValue,
        BooleanValue,
        FormulaValue,
        DateTimeValue,
    ],
    Field(discriminator="kind"),
]


def to_serial(moment: datetime) -> float:
    """Convert a datetime to the container's serial day number (1899-12-30 epoch)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.timestamp() / SECONDS_PER_DAY + UNIX_EPOCH_SERIAL


def as_value(obj: object) -> Value:
    """Coerce a plain Python object into a cell value.

    Args:
        obj: A value model, ``None``, ``bool``, ``int``, ``float``, ``str`` or
            ``datetime``. Strings always become text; formulas and URLs must
            be passed as explicit models.

    Returns:
        The matching value model.
    """
    if isinstance(obj, _ValueBase):
        return obj  # type: ignore[return-value]
    if obj is None:
        return BlankValue()
    if isinstance(obj, bool):
        return BooleanValue(value=obj)
    if isinstance(obj, (int, float)):
        return NumberValue(value=float(obj))
    if isinstance(obj, str):
        return TextValue(value=obj)
    if isinstance(obj, datetime):
        return DateTimeValue(value=obj)
    raise TypeError(f"Unsupported cell value type: {type(obj).__name__}")


def _assert_never(value: NoReturn) -> NoReturn:
    raise TypeError(f"Unsupported cell value: {value!r}")


def write_value(
    engine: WorksheetEngine,
    value: Value,
    row: int,
    col: int,
    cell_format: object | None = None,
) -> int:
    """Issue the single engine write primitive that matches ``value.kind``.

    Returns:
        The engine status code.
    """
    logger.debug("write %s at (%d, %d) on '%s'", value.kind, row, col, engine.name)
    match value:
        case NumberValue(value=number):
            return engine.write_number(row, col, number, cell_format)
        case TextValue(value=text):
            return engine.write_string(row, col, text, cell_format)
        case UrlValue(value=url):
            return engine.write_url(row, col, url, cell_format)
        case BlankValue():
            return engine.write_blank(row, col, cell_format)
        case CommentValue(value=text):
            if cell_format is not None:
                logger.debug("Ignoring format for comment at (%d, %d).", row, col)
            return engine.write_comment(row, col, text)
        case BooleanValue(value=flag):
            return engine.write_boolean(row, col, flag, cell_format)
        case FormulaValue(value=formula):
            return engine.write_formula(row, col, formula, cell_format)
        case DateTimeValue():
            return engine.write_number(row, col, value.serial, cell_format)
        case _:
            _assert_never(value)


__all__ = [
    "BlankValue",
    "BooleanValue",
    "CommentValue",
    "DateTimeValue",
    "FormulaValue",
    "NumberValue",
    "TextValue",
    "UrlValue",
    "Value",
    "ValueKind",
    "as_value",
    "to_serial",
    "write_value",
]
