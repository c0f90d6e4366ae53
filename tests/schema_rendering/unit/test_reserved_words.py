"""Reserved word escaping tests."""

from __future__ import annotations

import pytest
from json_hive_schema.schema_rendering.reserved_words import (
    HIVE_RESERVED_WORDS,
    escape_identifier,
    is_reserved,
)


@pytest.mark.parametrize("name", ["date", "Order", "TIMESTAMP", "user"])
def test_reserved_names_are_backtick_quoted(name: str) -> None:
    assert escape_identifier(name) == f"`{name}`"


@pytest.mark.parametrize("name", ["customer", "dates", "orderId"])
def test_other_names_are_left_unquoted(name: str) -> None:
    assert escape_identifier(name) == name


def test_colons_become_underscores_and_case_is_optional() -> None:
    assert escape_identifier("ns:Item") == "ns_Item"
    assert escape_identifier("ns:Item", lowercase=True) == "ns_item"
    assert escape_identifier("Date", lowercase=True) == "`date`"


def test_reserved_word_set_is_immutable_and_uppercase() -> None:
    assert isinstance(HIVE_RESERVED_WORDS, frozenset)
    assert all(word == word.upper() for word in HIVE_RESERVED_WORDS)
    assert is_reserved("select")
    assert is_reserved("custom", reserved_words=frozenset({"CUSTOM"}))
