"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from json_hive_schema.configuration.runtime_settings import GenerationSettings


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    input_path: str
    output_path: str
    settings: GenerationSettings = field(default_factory=GenerationSettings)


@dataclass(frozen=True)
class GeneratedDDL:
    """Rendered table and view statements for one document."""

    schema_text: str
    query_text: str
    column_names: tuple[str, ...]

    @property
    def text(self) -> str:
        return f"{self.schema_text}\n{self.query_text}"


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    output_path: Path
    ddl: GeneratedDDL
