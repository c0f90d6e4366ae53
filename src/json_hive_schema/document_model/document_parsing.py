"""Input document parsing service."""

from __future__ import annotations

import json
import logging
import re
from decimal import Decimal
from enum import Enum
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from .document_values import ObjectValue, to_document_value

logger = logging.getLogger(__name__)

XML_CONTENT_KEY = "content"

_NUMBER_PATTERN = re.compile(r"-?(?:0|[1-9]\d*)(?P<fraction>\.\d+)?(?P<exponent>[eE][+-]?\d+)?")


class ParseError(Exception):
    """Raised when the input document text cannot be parsed."""

    def __init__(self, input_format: InputFormat, detail: str) -> None:
        self.input_format = input_format
        self.detail = detail
        super().__init__(f"Invalid {input_format.value} document: {detail}")


class InputFormat(str, Enum):
    """Supported input document formats."""

    JSON = "JSON"
    XML = "XML"

    @classmethod
    def from_name(cls, name: str) -> InputFormat:
        try:
            return cls(name.strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unsupported input type: {name}") from exc


def parse_document(text: str, input_format: InputFormat) -> ObjectValue:
    """Parse document text of the given format into a top-level object value."""
    if input_format is InputFormat.XML:
        return parse_xml_document(text)
    return parse_json_document(text)


def parse_json_document(text: str) -> ObjectValue:
    """Parse JSON text, keeping the textual form of decimal numbers."""
    try:
        native = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise ParseError(InputFormat.JSON, str(exc)) from exc
    return _require_object_root(native, InputFormat.JSON)


def parse_xml_document(text: str) -> ObjectValue:
    """Parse XML text into the same value model used for JSON documents.

    Attributes become plain keys, mixed element text is stored under
    ``content`` and repeated sibling elements become arrays. Element and
    attribute text is coerced to booleans, nulls and numbers where it reads
    as one.
    """
    try:
        native = xmltodict.parse(
            text,
            attr_prefix="",
            cdata_key=XML_CONTENT_KEY,
            postprocessor=_coerce_xml_value,
        )
    except ExpatError as exc:
        raise ParseError(InputFormat.XML, str(exc)) from exc
    return _require_object_root(native, InputFormat.XML)


def coerce_xml_text(text: str) -> Any:
    """Coerce XML text into a boolean, null, number or string value."""
    stripped = text.strip()
    if not stripped:
        return ""
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None
    match = _NUMBER_PATTERN.fullmatch(stripped)
    if match is None:
        return text
    if match.group("fraction") or match.group("exponent"):
        return Decimal(stripped)
    return int(stripped)


def _coerce_xml_value(_path: Any, key: str, value: Any) -> tuple[str, Any]:
    if value is None:
        return key, ""
    if isinstance(value, str):
        return key, coerce_xml_text(value)
    return key, value


def _require_object_root(native: Any, input_format: InputFormat) -> ObjectValue:
    root = to_document_value(native)
    if not isinstance(root, ObjectValue):
        raise ParseError(input_format, "document root must be an object")
    logger.debug("Parsed %s document with top-level keys %s", input_format.value, list(root.fields))
    return root
