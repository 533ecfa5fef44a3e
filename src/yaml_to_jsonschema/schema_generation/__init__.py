"""Schema generation exports."""

from .generation_use_case import SchemaGenerationError, generate_schema, write_schema

__all__ = [
    "SchemaGenerationError",
    "generate_schema",
    "write_schema",
]
