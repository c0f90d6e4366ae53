"""Hive type inference for document values."""

from __future__ import annotations

from collections.abc import Mapping, Set
from enum import Enum

from json_hive_schema.document_model.document_values import (
    ArrayValue,
    BooleanValue,
    DocumentValue,
    NullValue,
    NumberValue,
    ObjectValue,
    ScalarValue,
    StringValue,
    UnsupportedTypeError,
)

from .reserved_words import HIVE_RESERVED_WORDS, escape_identifier

# XML mixed element text is stored under this key and renamed after its element
CONTENT_FIELD = "content"


class EmptyArrayError(Exception):
    """Raised when an array has no element to infer its type from."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Cannot infer element type of empty array at '{location}'")


class EmptyObjectError(Exception):
    """Raised when an object has no fields to build a struct from."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Cannot infer struct fields of empty object at '{location}'")


class HiveScalarType(str, Enum):
    """Hive primitive column types inferred from scalar values."""

    STRING = "string"
    INT = "int"
    DOUBLE = "double"
    BOOLEAN = "boolean"


def classify_scalar(value: ScalarValue) -> HiveScalarType:
    """Map a scalar value to a Hive primitive type.

    Numbers are typed by their text: a decimal point means ``double``,
    anything else ``int``. Nulls fall back to ``string``.
    """
    match value:
        case StringValue():
            return HiveScalarType.STRING
        case BooleanValue():
            return HiveScalarType.BOOLEAN
        case NumberValue(text=text):
            return HiveScalarType.DOUBLE if "." in text else HiveScalarType.INT
        case _:
            return HiveScalarType.STRING


def render_type(
    value: DocumentValue,
    field_name_hint: str,
    *,
    reserved_words: Set[str] = HIVE_RESERVED_WORDS,
) -> str:
    """Render the Hive type expression of a value.

    Struct fields keep document order. Arrays are typed from their first
    element only.
    """
    return _render(value, field_name_hint, reserved_words, location=field_name_hint)


def _render(value: DocumentValue, hint: str, reserved_words: Set[str], *, location: str) -> str:
    match value:
        case ObjectValue(fields=fields):
            return _render_struct(fields, hint, reserved_words, location=location)
        case ArrayValue(items=items):
            if not items:
                raise EmptyArrayError(location)
            element_type = _render(items[0], hint, reserved_words, location=f"{location}[0]")
            return f"array<{element_type}>"
        case NullValue() | BooleanValue() | NumberValue() | StringValue():
            return classify_scalar(value).value
        case _:
            raise UnsupportedTypeError(value, location)


def _render_struct(
    fields: Mapping[str, DocumentValue],
    hint: str,
    reserved_words: Set[str],
    *,
    location: str,
) -> str:
    if not fields:
        raise EmptyObjectError(location)
    rendered_fields = []
    for key, child in fields.items():
        field_name = hint if key == CONTENT_FIELD else key
        field_type = _render(child, key, reserved_words, location=f"{location}.{key}")
        rendered_fields.append(
            f"{escape_identifier(field_name, reserved_words=reserved_words)}:{field_type}"
        )
    return f"struct<{', '.join(rendered_fields)}>"
