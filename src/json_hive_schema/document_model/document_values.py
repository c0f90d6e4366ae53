"""Document value model entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeAlias


class UnsupportedTypeError(Exception):
    """Raised when a value is none of the recognized document value kinds."""

    def __init__(self, value: Any, location: str = "") -> None:
        self.value = value
        self.location = location
        where = f" at '{location}'" if location else ""
        super().__init__(f"Unsupported document value type{where}: {type(value).__name__}")


@dataclass(frozen=True)
class NullValue:
    """JSON null."""


@dataclass(frozen=True)
class BooleanValue:
    value: bool


@dataclass(frozen=True)
class NumberValue:
    """Numeric literal kept in the textual form it was parsed from."""

    text: str


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class ObjectValue:
    """Ordered mapping of field names to values, in declaration order."""

    fields: Mapping[str, DocumentValue]

    def get(self, key: str) -> DocumentValue | None:
        return self.fields.get(key)


@dataclass(frozen=True)
class ArrayValue:
    """Ordered sequence of values."""

    items: tuple[DocumentValue, ...]


ScalarValue: TypeAlias = NullValue | BooleanValue | NumberValue | StringValue
DocumentValue: TypeAlias = ScalarValue | ObjectValue | ArrayValue


def to_document_value(native: Any, location: str = "") -> DocumentValue:
    """Convert a parsed Python value into the document value model."""
    if native is None:
        return NullValue()
    # bool is an int subclass, check it first
    if isinstance(native, bool):
        return BooleanValue(native)
    if isinstance(native, int | float | Decimal):
        return NumberValue(_number_text(native))
    if isinstance(native, str):
        return StringValue(native)
    if isinstance(native, Mapping):
        return ObjectValue(
            {
                str(key): to_document_value(child, _child_location(location, str(key)))
                for key, child in native.items()
            }
        )
    if isinstance(native, list | tuple):
        return ArrayValue(
            tuple(
                to_document_value(child, _child_location(location, str(index)))
                for index, child in enumerate(native)
            )
        )
    raise UnsupportedTypeError(native, location)


def scalar_text(value: ScalarValue) -> str:
    """Return the textual form of a scalar as it appeared in the document."""
    match value:
        case StringValue(value=text):
            return text
        case NumberValue(text=text):
            return text
        case BooleanValue(value=flag):
            return "true" if flag else "false"
        case NullValue():
            return "null"
    raise UnsupportedTypeError(value)


def _number_text(number: int | float | Decimal) -> str:
    if isinstance(number, float):
        return repr(number)
    return str(number)


def _child_location(location: str, key: str) -> str:
    return key if not location else f"{location}/{key}"
