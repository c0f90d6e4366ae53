"""Type-path expressions selecting subtrees to surface as columns."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from json_hive_schema.schema_rendering.render_models import RESPONSE_ROOT

PATH_SEPARATOR = "/"
FILTER_MARKER = "@"
FILTER_SEPARATOR = ":"


class InvalidPathError(Exception):
    """Raised for type-path expressions that cannot be parsed or resolved."""

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid type path '{expression}': {reason}")


@dataclass(frozen=True)
class ElementFilter:
    """Selects the first array element whose ``key`` field reads ``value``."""

    key: str
    value: str


@dataclass(frozen=True)
class TypePath:
    """Parsed type-path expression."""

    expression: str
    segments: tuple[str, ...] = ()
    element_filter: ElementFilter | None = None

    @property
    def is_whole_response(self) -> bool:
        return not self.segments

    @property
    def query_path(self) -> str:
        return PATH_SEPARATOR.join(self.segments)

    @property
    def column_name(self) -> str:
        """Top-level key the resolved subtree is inserted under."""
        if self.is_whole_response:
            return RESPONSE_ROOT
        name = "_".join(self.segments)
        if self.element_filter is not None:
            return f"{name}_{self.element_filter.value}"
        return name


def parse_type_path(expression: str) -> TypePath:
    """Parse ``Response``, ``a/b`` or ``a/b@key:value`` into a type path."""
    stripped = expression.strip()
    if stripped.lower() == RESPONSE_ROOT.lower():
        return TypePath(expression=stripped)
    if PATH_SEPARATOR not in stripped:
        raise InvalidPathError(
            expression, f"expected '{RESPONSE_ROOT}' or a slash-delimited path"
        )

    path_text, marker, filter_text = stripped.partition(FILTER_MARKER)
    segments = tuple(segment for segment in path_text.split(PATH_SEPARATOR) if segment)
    if not segments:
        raise InvalidPathError(expression, "path has no segments")

    element_filter = _parse_filter(expression, filter_text) if marker else None
    return TypePath(expression=stripped, segments=segments, element_filter=element_filter)


def parse_type_paths(expressions: str | Iterable[str]) -> tuple[TypePath, ...]:
    """Parse a comma-separated string or a sequence of type-path expressions."""
    if isinstance(expressions, str):
        expressions = expressions.split(",")
    parsed = tuple(parse_type_path(item) for item in expressions if item.strip())
    if not parsed:
        raise InvalidPathError("", "at least one type path is required")
    return parsed


def _parse_filter(expression: str, filter_text: str) -> ElementFilter:
    key, separator, value = filter_text.partition(FILTER_SEPARATOR)
    if not separator or not key or not value:
        raise InvalidPathError(expression, "array filter must read '@key:value'")
    return ElementFilter(key=key, value=value)
