"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import DEFAULT_TABLE_NAME, DEFAULT_TYPE_PATHS, GenerationSettings

__all__ = [
    "GenerationSettings",
    "DEFAULT_TABLE_NAME",
    "DEFAULT_TYPE_PATHS",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
