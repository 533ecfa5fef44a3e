"""Configuration domain exports."""

from .config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .draft_versions import DRAFT_URLS, resolve_schema_url
from .errors import ConfigurationError
from .loader import DEFAULT_CONFIG_FILENAME, load_configuration, validate_configuration
from .runtime_settings import (
    DEFAULT_DRAFT,
    DEFAULT_INDENT,
    DEFAULT_OUTPUT_PATH,
    GeneratorConfig,
    SchemaRootSettings,
)

__all__ = [
    "GeneratorConfig",
    "SchemaRootSettings",
    "DEFAULT_DRAFT",
    "DEFAULT_INDENT",
    "DEFAULT_OUTPUT_PATH",
    "DRAFT_URLS",
    "resolve_schema_url",
    "ConfigurationError",
    "load_configuration",
    "validate_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
