"""Schema rendering entities."""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass, field
from enum import Enum

from .reserved_words import HIVE_RESERVED_WORDS

XPATH_PROPERTY_PREFIX = "column.xpath."

# Envelope element names wrapping the payload of a keyed response document
RESPONSE_ROOT = "Response"
KEYED_RESPONSE_ROOT = "KeyedResponse"


class SerdeKind(str, Enum):
    """Row format the generated table is read with."""

    JSON = "JSON"
    XML = "XML"


class HiveTypeTag(str, Enum):
    """Type category of a value surfaced through an XPath SerDe property."""

    PRIMITIVE = "primitive"
    STRUCT = "struct"
    ARRAY = "array"
    MAP = "map"


@dataclass(frozen=True)
class XPathEntry:
    """One XML SerDe column-to-XPath property."""

    property_name: str
    xpath: str

    def render(self) -> str:
        return f'"{XPATH_PROPERTY_PREFIX}{self.property_name}"="{self.xpath}"'


@dataclass
class SchemaContext:
    """Render state owned by one schema generation run."""

    table_name: str = "hive_table"
    serde_kind: SerdeKind = SerdeKind.JSON
    skip_keyed_response: bool = False
    reserved_words: Set[str] = HIVE_RESERVED_WORDS
    xpath_entries: list[XPathEntry] = field(default_factory=list)

    def record_xpath(self, entry: XPathEntry | None) -> None:
        if entry is not None:
            self.xpath_entries.append(entry)
