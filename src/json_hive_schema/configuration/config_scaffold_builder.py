"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "hive-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Run configuration for json-hive-schema.
# Options given on the command line override the values below.

# Format of the example document: JSON or XML.
input_type: JSON

# Name of the generated external table.
table_name: hive_table

# Set to true when the document has no KeyedResponse envelope around Response.
skip_keyed_response: false

# Subtrees of the Response object surfaced as independent columns.
# "Response" types the whole response; "a/b" selects a nested element;
# "a/b@key:value" selects the first element of array a/b whose key reads value.
type_paths:
  - Response
"""


def build_placeholder_configuration() -> str:
    """Build a YAML run configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the run configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
