"""Hive type inference tests."""

from __future__ import annotations

import pytest
from json_hive_schema.document_model.document_values import (
    ArrayValue,
    BooleanValue,
    NullValue,
    NumberValue,
    ObjectValue,
    StringValue,
    to_document_value,
)
from json_hive_schema.schema_rendering.type_rendering import (
    EmptyArrayError,
    EmptyObjectError,
    HiveScalarType,
    classify_scalar,
    render_type,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (NumberValue("3"), HiveScalarType.INT),
        (NumberValue("3.0"), HiveScalarType.DOUBLE),
        (NumberValue("-12"), HiveScalarType.INT),
        (BooleanValue(True), HiveScalarType.BOOLEAN),
        (StringValue("hi"), HiveScalarType.STRING),
        (NullValue(), HiveScalarType.STRING),
    ],
)
def test_classify_scalar(value, expected: HiveScalarType) -> None:
    assert classify_scalar(value) is expected


def test_struct_fields_keep_document_order_and_quote_reserved_names() -> None:
    value = to_document_value({"zeta": 1, "date": "2024-01-01", "alpha": {"ns:code": 2.5}})

    assert render_type(value, "root") == (
        "struct<zeta:int, `date`:string, alpha:struct<ns_code:double>>"
    )


def test_content_field_is_renamed_to_field_name_hint() -> None:
    value = to_document_value({"content": "x", "lang": "en"})

    assert render_type(value, "title") == "struct<title:string, lang:string>"


def test_nested_content_field_uses_enclosing_key() -> None:
    value = to_document_value({"title": {"lang": "en", "content": "Report"}})

    assert render_type(value, "doc") == "struct<title:struct<lang:string, title:string>>"


def test_array_type_comes_from_first_element_only() -> None:
    single = to_document_value([{"a": 1}])
    mixed = to_document_value([{"a": 1}, {"b": "other", "c": [1.5]}])

    assert render_type(single, "items") == "array<struct<a:int>>"
    assert render_type(mixed, "items") == render_type(single, "items")


def test_nested_arrays_pass_hint_through() -> None:
    value = to_document_value([[{"content": "x"}]])

    assert render_type(value, "cell") == "array<array<struct<cell:string>>>"


def test_rendering_is_idempotent() -> None:
    value = to_document_value({"a": [{"b": True}], "c": None})

    assert render_type(value, "x") == render_type(value, "x")


def test_empty_array_fails_with_location() -> None:
    value = to_document_value({"outer": {"list": []}})

    with pytest.raises(EmptyArrayError) as exc_info:
        render_type(value, "doc")
    assert exc_info.value.location == "doc.outer.list"


def test_empty_object_fails() -> None:
    with pytest.raises(EmptyObjectError):
        render_type(ObjectValue({}), "doc")


def test_top_level_empty_array_fails() -> None:
    with pytest.raises(EmptyArrayError, match="'tags'"):
        render_type(ArrayValue(()), "tags")
