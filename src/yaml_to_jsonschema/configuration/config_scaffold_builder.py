"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from .loader import DEFAULT_CONFIG_FILENAME

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for yaml-to-jsonschema.
# Command-line options take precedence over every value in this file.

# YAML files or http(s) URLs to infer from, merged in the listed order.
input:
  - values.yaml

# Destination of the generated JSON Schema.
output: values.schema.json

# JSON Schema draft: 4, 6, 7, 2019 or 2020.
draft: 2020

# Spaces per indentation level (even number, at least 2).
indent: 4

# Uncomment to set additionalProperties on every object in the schema.
# additionalProperties: false

schemaRoot:
  # id: "https://example.com/values.schema.json"
  # title: "Values"
  # description: "Schema for the values file"
  # Applied to the root object only; overridden by the top-level additionalProperties.
  # additionalProperties: false
"""


def build_placeholder_configuration() -> str:
    """Build a commented configuration template."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str = DEFAULT_CONFIG_FILENAME) -> Path:
    """Write the configuration template to the requested output path.

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
