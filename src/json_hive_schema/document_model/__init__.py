"""Document value model exports."""

from .document_parsing import (
    InputFormat,
    ParseError,
    coerce_xml_text,
    parse_document,
    parse_json_document,
    parse_xml_document,
)
from .document_values import (
    ArrayValue,
    BooleanValue,
    DocumentValue,
    NullValue,
    NumberValue,
    ObjectValue,
    ScalarValue,
    StringValue,
    UnsupportedTypeError,
    scalar_text,
    to_document_value,
)

__all__ = [
    "ArrayValue",
    "BooleanValue",
    "DocumentValue",
    "NullValue",
    "NumberValue",
    "ObjectValue",
    "ScalarValue",
    "StringValue",
    "UnsupportedTypeError",
    "scalar_text",
    "to_document_value",
    "InputFormat",
    "ParseError",
    "coerce_xml_text",
    "parse_document",
    "parse_json_document",
    "parse_xml_document",
]
