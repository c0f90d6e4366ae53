"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from json_hive_schema.document_model.document_parsing import InputFormat

from .runtime_settings import DEFAULT_TABLE_NAME, DEFAULT_TYPE_PATHS, GenerationSettings

_KNOWN_KEYS = frozenset({"input_type", "table_name", "skip_keyed_response", "type_paths"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GenerationSettings:
    """Load and validate a YAML run configuration."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file is not valid UTF-8: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    return GenerationSettings(
        input_format=_parse_input_type(parsed.get("input_type", InputFormat.JSON.value)),
        table_name=_require_non_empty_string(
            parsed.get("table_name", DEFAULT_TABLE_NAME), "table_name"
        ),
        skip_keyed_response=_require_bool(
            parsed.get("skip_keyed_response", False), "skip_keyed_response"
        ),
        type_paths=_normalize_type_paths(parsed.get("type_paths", list(DEFAULT_TYPE_PATHS))),
    )


def _parse_input_type(value: Any) -> InputFormat:
    name = _require_non_empty_string(value, "input_type")
    try:
        return InputFormat.from_name(name)
    except ValueError as exc:
        raise ConfigurationError("input_type must be JSON or XML.") from exc


def _normalize_type_paths(value: Any) -> tuple[str, ...]:
    paths: list[str] = []
    if isinstance(value, str):
        paths = [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("type_paths entries must be strings.")
            stripped = item.strip()
            if stripped:
                paths.append(stripped)
    else:
        raise ConfigurationError("type_paths must be a string or list of strings.")
    if not paths:
        raise ConfigurationError("type_paths must contain at least one path.")
    return tuple(paths)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value
