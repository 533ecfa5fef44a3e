"""Infer JSON Schema documents from example YAML files."""

import logging

from .configuration import ConfigurationError, GeneratorConfig, SchemaRootSettings
from .input_loading import InputError
from .schema_generation import SchemaGenerationError, generate_schema, write_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "GeneratorConfig",
    "InputError",
    "SchemaGenerationError",
    "SchemaRootSettings",
    "generate_schema",
    "write_schema",
]
