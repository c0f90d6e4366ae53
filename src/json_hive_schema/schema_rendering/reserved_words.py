"""Hive reserved keywords and identifier escaping."""

from __future__ import annotations

from collections.abc import Set

HIVE_RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "ALL", "ALTER", "AND", "ARRAY", "AS", "AUTHORIZATION", "BETWEEN", "BIGINT",
        "BINARY", "BOOLEAN", "BOTH", "BY", "CASE", "CAST", "CHAR", "COLUMN", "CONF",
        "CREATE", "CROSS", "CUBE", "CURRENT", "CURRENT_DATE", "CURRENT_TIMESTAMP",
        "CURSOR", "DATABASE", "DATE", "DECIMAL", "DELETE", "DESCRIBE", "DISTINCT",
        "DOUBLE", "DROP", "ELSE", "END", "EXCHANGE", "EXISTS", "EXTENDED", "EXTERNAL",
        "FALSE", "FETCH", "FLOAT", "FOLLOWING", "FOR", "FROM", "FULL", "FUNCTION",
        "GRANT", "GROUP", "GROUPING", "HAVING", "IF", "IMPORT", "IN", "INNER",
        "INSERT", "INT", "INTERSECT", "INTERVAL", "INTO", "IS", "JOIN", "LATERAL",
        "LEFT", "LESS", "LIKE", "LOCAL", "MACRO", "MAP", "MORE", "NONE", "NOT",
        "NULL", "OF", "ON", "OR", "ORDER", "OUT", "OUTER", "OVER", "PARTIALSCAN",
        "PARTITION", "PERCENT", "PRECEDING", "PRESERVE", "PROCEDURE", "RANGE",
        "READS", "REDUCE", "REGEXP", "REVOKE", "RIGHT", "RLIKE", "ROLLUP", "ROW",
        "ROWS", "SELECT", "SET", "SMALLINT", "TABLE", "TABLESAMPLE", "THEN",
        "TIMESTAMP", "TO", "TRANSFORM", "TRIGGER", "TRUE", "TRUNCATE", "UNBOUNDED",
        "UNION", "UNIQUEJOIN", "UPDATE", "USER", "USING", "VALUES", "VARCHAR",
        "WHEN", "WHERE", "WINDOW", "WITH",
    }
)  # fmt: skip


def is_reserved(name: str, reserved_words: Set[str] = HIVE_RESERVED_WORDS) -> bool:
    return name.upper() in reserved_words


def escape_identifier(
    name: str,
    *,
    lowercase: bool = False,
    reserved_words: Set[str] = HIVE_RESERVED_WORDS,
) -> str:
    """Render a field name as a Hive identifier.

    Colons (XML namespace separators) become underscores and reserved
    keywords are wrapped in backticks.
    """
    rendered = name.replace(":", "_")
    if lowercase:
        rendered = rendered.lower()
    if is_reserved(name, reserved_words):
        return f"`{rendered}`"
    return rendered
