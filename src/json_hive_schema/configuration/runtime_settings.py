"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from json_hive_schema.document_model.document_parsing import InputFormat

DEFAULT_TABLE_NAME = "hive_table"
DEFAULT_TYPE_PATHS: tuple[str, ...] = ("Response",)


@dataclass(frozen=True)
class GenerationSettings:
    """Options controlling one schema generation run."""

    input_format: InputFormat = InputFormat.JSON
    table_name: str = DEFAULT_TABLE_NAME
    skip_keyed_response: bool = False
    type_paths: tuple[str, ...] = DEFAULT_TYPE_PATHS

    def with_overrides(self, **overrides: Any) -> GenerationSettings:
        """Return a copy with every override that is not None applied."""
        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied)
