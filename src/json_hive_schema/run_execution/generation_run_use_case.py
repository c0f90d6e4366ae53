"""Schema generation use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from json_hive_schema.configuration.runtime_settings import GenerationSettings
from json_hive_schema.document_model import (
    InputFormat,
    ParseError,
    UnsupportedTypeError,
    parse_document,
)
from json_hive_schema.path_projection import (
    InvalidPathError,
    MissingEnvelopeError,
    NoMatchError,
    parse_type_paths,
    project_document,
)
from json_hive_schema.schema_rendering import (
    EmptyArrayError,
    EmptyObjectError,
    SchemaContext,
    SerdeKind,
    build_query,
    build_schema,
)

from .run_contracts import GeneratedDDL, RunOutcome, RunRequest

logger = logging.getLogger(__name__)

GENERATION_ERRORS = (
    ParseError,
    EmptyArrayError,
    EmptyObjectError,
    UnsupportedTypeError,
    InvalidPathError,
    MissingEnvelopeError,
    NoMatchError,
)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def generate_ddl(document_text: str, settings: GenerationSettings) -> GeneratedDDL:
    """Infer the table and flattening view statements for one example document."""
    context = SchemaContext(
        table_name=settings.table_name,
        serde_kind=SerdeKind.XML if settings.input_format is InputFormat.XML else SerdeKind.JSON,
        skip_keyed_response=settings.skip_keyed_response,
    )
    type_paths = parse_type_paths(settings.type_paths)
    document = parse_document(document_text, settings.input_format)
    projected = project_document(document, type_paths, context)
    logger.debug("Projected %d top-level columns for %s", len(projected.fields), context.table_name)
    return GeneratedDDL(
        schema_text=build_schema(projected, context),
        query_text=build_query(projected, context.table_name),
        column_names=tuple(projected.fields),
    )


def execute_schema_generation_run(request: RunRequest) -> RunOutcome:
    """Read the example document, generate DDL and write it to the output path.

    Nothing is written unless generation succeeds.
    """
    input_path = Path(request.input_path)
    try:
        document_text = input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise RunExecutionError(f"Input document {input_path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise RunExecutionError(f"Cannot read input document {input_path}: {exc}") from exc

    try:
        ddl = generate_ddl(document_text, request.settings)
    except GENERATION_ERRORS as exc:
        raise RunExecutionError(str(exc)) from exc

    output_path = Path(request.output_path)
    try:
        output_path.write_text(ddl.text, encoding="utf-8")
    except OSError as exc:
        raise RunExecutionError(f"Cannot write output file {output_path}: {exc}") from exc
    logger.debug("Wrote %d columns to %s", len(ddl.column_names), output_path)
    return RunOutcome(output_path=output_path.resolve(), ddl=ddl)
