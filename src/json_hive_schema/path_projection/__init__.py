"""Path projection exports."""

from .path_projection import (
    KEYED_RESPONSE_DATA,
    MissingEnvelopeError,
    NoMatchError,
    build_xpath_entry,
    hive_type_tag,
    project_document,
    resolve_path,
)
from .type_paths import ElementFilter, InvalidPathError, TypePath, parse_type_path, parse_type_paths

__all__ = [
    "KEYED_RESPONSE_DATA",
    "MissingEnvelopeError",
    "NoMatchError",
    "build_xpath_entry",
    "hive_type_tag",
    "project_document",
    "resolve_path",
    "ElementFilter",
    "InvalidPathError",
    "TypePath",
    "parse_type_path",
    "parse_type_paths",
]
