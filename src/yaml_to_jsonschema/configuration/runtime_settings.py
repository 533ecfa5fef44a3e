"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_OUTPUT_PATH = "values.schema.json"
DEFAULT_DRAFT = 2020
DEFAULT_INDENT = 4


@dataclass(frozen=True)
class SchemaRootSettings:
    """Metadata and policy applied to the root of the generated schema only."""

    id: str | None = None
    title: str | None = None
    description: str | None = None
    additional_properties: bool | None = None


@dataclass(frozen=True)
class GeneratorConfig:
    """Top-level configuration aggregate for one generation run."""

    inputs: tuple[str, ...]
    output_path: str = DEFAULT_OUTPUT_PATH
    draft: int = DEFAULT_DRAFT
    indent: int = DEFAULT_INDENT
    schema_root: SchemaRootSettings = field(default_factory=SchemaRootSettings)
    additional_properties: bool | None = None
