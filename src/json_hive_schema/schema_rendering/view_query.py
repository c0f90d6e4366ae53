"""Flattening view query builder."""

from __future__ import annotations

from json_hive_schema.document_model.document_values import (
    ArrayValue,
    BooleanValue,
    NullValue,
    NumberValue,
    ObjectValue,
    StringValue,
    UnsupportedTypeError,
)

from .table_ddl import join_with_leading_commas

VIEW_NAME = "view_name"


def build_select_lines(document: ObjectValue) -> list[str]:
    """Return the sorted ``column AS alias`` lines of the flattening view.

    Objects are flattened one level deep. Arrays and deeper structs are
    surfaced as a single column reference.
    """
    lines: list[str] = []
    for key, value in document.fields.items():
        column = key.lower()
        match value:
            case ObjectValue(fields=fields):
                lines.extend(
                    f"{column}.{nested.lower()} AS {column}_{nested.lower()}" for nested in fields
                )
            case ArrayValue() | NullValue() | BooleanValue() | NumberValue() | StringValue():
                lines.append(f"{column} AS {column.replace('.', '_')}")
            case _:
                raise UnsupportedTypeError(value, key)
    return sorted(lines)


def build_query(document: ObjectValue, table_name: str) -> str:
    """Build the ``CREATE VIEW ... SELECT`` statement flattening the table."""
    lines = [
        f"CREATE VIEW {VIEW_NAME} AS SELECT",
        *join_with_leading_commas(build_select_lines(document)),
        f"FROM {table_name}",
    ]
    return "\n".join(lines) + "\n"
