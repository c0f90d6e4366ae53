"""External table DDL builder."""

from __future__ import annotations

from collections.abc import Sequence, Set

from json_hive_schema.document_model.document_values import ObjectValue

from .render_models import (
    KEYED_RESPONSE_ROOT,
    RESPONSE_ROOT,
    SchemaContext,
    SerdeKind,
    XPathEntry,
)
from .reserved_words import HIVE_RESERVED_WORDS, escape_identifier
from .type_rendering import render_type

JSON_SERDE = "ROW FORMAT SERDE 'org.apache.hive.hcatalog.data.JsonSerDe';"
XML_SERDE = "ROW FORMAT SERDE 'com.ibm.spss.hive.serde2.xml.XmlSerDe'"
XML_INPUT_FORMAT = "com.ibm.spss.hive.serde2.xml.XmlInputFormat"
XML_OUTPUT_FORMAT = "org.apache.hadoop.hive.ql.io.IgnoreKeyTextOutputFormat"
TABLE_COMMENT = "Auto Generated Schema, Put Table description here"
PARTITION_CLAUSE = "PARTITIONED BY (CYCLE_NUMBER INT)"


def build_column_definitions(
    document: ObjectValue, reserved_words: Set[str] = HIVE_RESERVED_WORDS
) -> list[str]:
    """Return one ``name TYPE`` line per top-level key, sorted by rendered text."""
    columns = [
        f"{escape_identifier(key, lowercase=True, reserved_words=reserved_words)} "
        f"{render_type(value, key, reserved_words=reserved_words)}"
        for key, value in document.fields.items()
    ]
    return sorted(columns)


def build_schema(document: ObjectValue, context: SchemaContext) -> str:
    """Build the ``CREATE EXTERNAL TABLE`` statement for a top-level object."""
    columns = build_column_definitions(document, context.reserved_words)
    lines = [
        f"CREATE EXTERNAL TABLE {context.table_name} (",
        *join_with_leading_commas(columns),
        ")",
        f"COMMENT '{TABLE_COMMENT}'",
        PARTITION_CLAUSE,
    ]
    if context.serde_kind is SerdeKind.XML:
        lines.extend(_xml_serde_clause(context.xpath_entries, context.skip_keyed_response))
    else:
        lines.append(JSON_SERDE)
    return "\n".join(lines)


def join_with_leading_commas(lines: Sequence[str]) -> list[str]:
    """Indent lines and prefix every line but the first with a comma."""
    return [f"\t{line}" if index == 0 else f"\t,{line}" for index, line in enumerate(lines)]


def _xml_serde_clause(entries: Sequence[XPathEntry], skip_keyed_response: bool) -> list[str]:
    root_tag = RESPONSE_ROOT if skip_keyed_response else KEYED_RESPONSE_ROOT
    return [
        XML_SERDE,
        "WITH SERDEPROPERTIES (",
        *join_with_leading_commas([entry.render() for entry in entries]),
        ")",
        "STORED AS",
        f"INPUTFORMAT '{XML_INPUT_FORMAT}'",
        f"OUTPUTFORMAT '{XML_OUTPUT_FORMAT}'",
        "TBLPROPERTIES (",
        f'\t"xmlinput.start"="<{root_tag}",',
        f'\t"xmlinput.end"="</{root_tag}>"',
        ");",
    ]
