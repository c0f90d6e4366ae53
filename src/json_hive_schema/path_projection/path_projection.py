"""Re-rooting of response subtrees into top-level columns."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from json_hive_schema.document_model.document_values import (
    ArrayValue,
    DocumentValue,
    ObjectValue,
    scalar_text,
)
from json_hive_schema.schema_rendering.render_models import (
    KEYED_RESPONSE_ROOT,
    RESPONSE_ROOT,
    HiveTypeTag,
    SchemaContext,
    SerdeKind,
    XPathEntry,
)

from .type_paths import ElementFilter, InvalidPathError, TypePath

logger = logging.getLogger(__name__)

KEYED_RESPONSE_DATA: tuple[str, ...] = ("TPSSourceRecord", "ApplicationData", "keyData")


class MissingEnvelopeError(Exception):
    """Raised when an expected envelope element is absent from the document."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Document is missing the expected '{path}' object")


class NoMatchError(Exception):
    """Raised when no array element satisfies a type-path filter."""

    def __init__(self, expression: str, element_filter: ElementFilter) -> None:
        self.expression = expression
        self.element_filter = element_filter
        super().__init__(
            f"No element of '{expression}' has "
            f"{element_filter.key}='{element_filter.value}'"
        )


def project_document(
    document: ObjectValue,
    type_paths: Sequence[TypePath],
    context: SchemaContext,
    *,
    keyed_response_data: Iterable[str] = KEYED_RESPONSE_DATA,
) -> ObjectValue:
    """Build the top-level object whose keys become table columns.

    The keyed response data subtrees are carried over unless the context
    skips the keyed envelope; each type path then adds one column. In XML
    mode every column also records an XPath SerDe property on the context.
    """
    if context.skip_keyed_response:
        response = _require_object(document, RESPONSE_ROOT, RESPONSE_ROOT)
        projected: dict[str, DocumentValue] = {}
    else:
        envelope = _require_object(document, KEYED_RESPONSE_ROOT, KEYED_RESPONSE_ROOT)
        response = _require_object(
            envelope, RESPONSE_ROOT, f"{KEYED_RESPONSE_ROOT}/{RESPONSE_ROOT}"
        )
        projected = {}
        for name in keyed_response_data:
            value = envelope.get(name)
            if value is None:
                logger.debug("Keyed response data '%s' not present, skipping", name)
                continue
            projected[name] = value
            _record_xpath(context, name, name, HiveTypeTag.STRUCT)

    for type_path in type_paths:
        if type_path.is_whole_response:
            projected[RESPONSE_ROOT] = response
            _record_xpath(context, RESPONSE_ROOT, RESPONSE_ROOT, HiveTypeTag.STRUCT)
            continue
        value, xpath = _select(response, type_path)
        projected[type_path.column_name] = value
        _record_xpath(context, xpath, type_path.column_name, hive_type_tag(value))
        logger.debug(
            "Type path '%s' projected as '%s'", type_path.expression, type_path.column_name
        )

    return ObjectValue(projected)


def resolve_path(root: DocumentValue, segments: Sequence[str], expression: str) -> DocumentValue:
    """Resolve path segments with JSON pointer semantics."""
    current = root
    for raw_segment in segments:
        segment = raw_segment.replace("~1", "/").replace("~0", "~")
        match current:
            case ObjectValue(fields=fields) if segment in fields:
                current = fields[segment]
            case ArrayValue(items=items) if (
                segment.isascii() and segment.isdigit() and int(segment) < len(items)
            ):
                current = items[int(segment)]
            case _:
                raise InvalidPathError(expression, f"segment '{segment}' does not resolve")
    return current


def hive_type_tag(value: DocumentValue) -> HiveTypeTag:
    match value:
        case ObjectValue():
            return HiveTypeTag.STRUCT
        case ArrayValue():
            return HiveTypeTag.ARRAY
        case _:
            return HiveTypeTag.PRIMITIVE


def build_xpath_entry(
    path: str, name: str, tag: HiveTypeTag, *, skip_keyed_response: bool
) -> XPathEntry | None:
    """Build the SerDe property mapping a column to the XPath of its element."""
    xpath = ("/" if skip_keyed_response else f"/{KEYED_RESPONSE_ROOT}/") + path
    match tag:
        case HiveTypeTag.PRIMITIVE:
            expression = f"{xpath}/text()"
        case HiveTypeTag.STRUCT:
            expression = xpath
        case HiveTypeTag.ARRAY:
            expression = f"/{xpath}"
        case _:
            return None
    return XPathEntry(property_name=name.lower(), xpath=expression)


def _select(response: ObjectValue, type_path: TypePath) -> tuple[DocumentValue, str]:
    xpath = f"{RESPONSE_ROOT}/{type_path.query_path}"
    value = resolve_path(response, type_path.segments, type_path.expression)
    element_filter = type_path.element_filter
    if element_filter is None:
        return value, xpath
    if not isinstance(value, ArrayValue):
        raise InvalidPathError(type_path.expression, "filtered path does not resolve to an array")
    for element in value.items:
        if _matches(element, element_filter):
            return element, f"{xpath}[@{element_filter.key}='{element_filter.value}']"
    raise NoMatchError(type_path.expression, element_filter)


def _matches(element: DocumentValue, element_filter: ElementFilter) -> bool:
    if not isinstance(element, ObjectValue):
        return False
    candidate = element.get(element_filter.key)
    if candidate is None or isinstance(candidate, ObjectValue | ArrayValue):
        return False
    return scalar_text(candidate) == element_filter.value


def _require_object(document: ObjectValue, key: str, path: str) -> ObjectValue:
    value = document.get(key)
    if not isinstance(value, ObjectValue):
        raise MissingEnvelopeError(path)
    return value


def _record_xpath(context: SchemaContext, path: str, name: str, tag: HiveTypeTag) -> None:
    if context.serde_kind is not SerdeKind.XML:
        return
    context.record_xpath(
        build_xpath_entry(path, name, tag, skip_keyed_response=context.skip_keyed_response)
    )
