"""Schema rendering exports."""

from .render_models import (
    KEYED_RESPONSE_ROOT,
    RESPONSE_ROOT,
    HiveTypeTag,
    SchemaContext,
    SerdeKind,
    XPathEntry,
)
from .reserved_words import HIVE_RESERVED_WORDS, escape_identifier, is_reserved
from .table_ddl import build_column_definitions, build_schema
from .type_rendering import (
    EmptyArrayError,
    EmptyObjectError,
    HiveScalarType,
    classify_scalar,
    render_type,
)
from .view_query import build_query, build_select_lines

__all__ = [
    "KEYED_RESPONSE_ROOT",
    "RESPONSE_ROOT",
    "HiveTypeTag",
    "SchemaContext",
    "SerdeKind",
    "XPathEntry",
    "HIVE_RESERVED_WORDS",
    "escape_identifier",
    "is_reserved",
    "build_column_definitions",
    "build_schema",
    "EmptyArrayError",
    "EmptyObjectError",
    "HiveScalarType",
    "classify_scalar",
    "render_type",
    "build_query",
    "build_select_lines",
]
