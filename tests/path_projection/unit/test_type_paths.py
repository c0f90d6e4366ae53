"""Type-path parsing tests."""

from __future__ import annotations

import pytest
from json_hive_schema.path_projection.type_paths import (
    ElementFilter,
    InvalidPathError,
    parse_type_path,
    parse_type_paths,
)


def test_response_sentinel_is_case_insensitive() -> None:
    for expression in ("Response", "response", " RESPONSE "):
        type_path = parse_type_path(expression)
        assert type_path.is_whole_response
        assert type_path.column_name == "Response"


def test_plain_path_synthesizes_underscored_column_name() -> None:
    type_path = parse_type_path("/Orders/Order/")

    assert type_path.segments == ("Orders", "Order")
    assert type_path.query_path == "Orders/Order"
    assert type_path.column_name == "Orders_Order"
    assert type_path.element_filter is None


def test_filtered_path_appends_filter_value_to_column_name() -> None:
    type_path = parse_type_path("a/b@k:v")

    assert type_path.segments == ("a", "b")
    assert type_path.element_filter == ElementFilter(key="k", value="v")
    assert type_path.column_name == "a_b_v"


@pytest.mark.parametrize("expression", ["Orders", "a/b@k", "a/b@:v", "a/b@k:", "/"])
def test_malformed_paths_raise_invalid_path_error(expression: str) -> None:
    with pytest.raises(InvalidPathError):
        parse_type_path(expression)


def test_parse_type_paths_accepts_comma_separated_text() -> None:
    parsed = parse_type_paths("Response, a/b ,c/d@id:2")

    assert [item.column_name for item in parsed] == ["Response", "a_b", "c_d_2"]


def test_parse_type_paths_requires_one_path() -> None:
    with pytest.raises(InvalidPathError, match="at least one"):
        parse_type_paths(" , ")
