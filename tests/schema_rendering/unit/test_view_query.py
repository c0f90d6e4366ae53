"""Flattening view query builder tests."""

from __future__ import annotations

from json_hive_schema.document_model.document_values import to_document_value
from json_hive_schema.schema_rendering.view_query import build_query, build_select_lines


def test_scalars_and_arrays_surface_as_single_columns() -> None:
    document = to_document_value({"Status": "OK", "tags": ["a"], "score": 1.5})

    assert build_select_lines(document) == [
        "score AS score",
        "status AS status",
        "tags AS tags",
    ]


def test_objects_flatten_one_level_only() -> None:
    document = to_document_value(
        {"Order": {"Id": 1, "customer": {"name": "x"}, "lines": [{"sku": "a"}]}}
    )

    assert build_select_lines(document) == [
        "order.customer AS order_customer",
        "order.id AS order_id",
        "order.lines AS order_lines",
    ]


def test_lines_are_sorted_across_columns() -> None:
    document = to_document_value({"b": {"z": 1, "a": 2}, "a": 1, "c": 2})

    assert build_select_lines(document) == [
        "a AS a",
        "b.a AS b_a",
        "b.z AS b_z",
        "c AS c",
    ]


def test_dots_in_scalar_names_become_underscores_in_alias() -> None:
    document = to_document_value({"meta.version": 2})

    assert build_select_lines(document) == ["meta.version AS meta_version"]


def test_query_text() -> None:
    document = to_document_value({"b": 1, "a": {"x": "y"}})

    assert build_query(document, "events") == (
        "CREATE VIEW view_name AS SELECT\n"
        "\ta.x AS a_x\n"
        "\t,b AS b\n"
        "FROM events\n"
    )


def test_content_field_keeps_its_own_alias() -> None:
    document = to_document_value({"Title": {"lang": "en", "content": "Report"}})

    assert build_select_lines(document) == [
        "title.content AS title_content",
        "title.lang AS title_lang",
    ]
