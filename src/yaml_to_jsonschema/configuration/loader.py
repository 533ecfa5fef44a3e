"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .draft_versions import resolve_schema_url
from .errors import ConfigurationError
from .runtime_settings import (
    DEFAULT_DRAFT,
    DEFAULT_INDENT,
    DEFAULT_OUTPUT_PATH,
    GeneratorConfig,
    SchemaRootSettings,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".schema.yaml"

_TOP_LEVEL_KEYS = frozenset(
    {"input", "output", "draft", "indent", "additionalProperties", "schemaRoot"}
)
_SCHEMA_ROOT_KEYS = frozenset({"id", "title", "description", "additionalProperties"})


def load_configuration(
    config_path: Path | str | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> GeneratorConfig:
    """Load the configuration file, apply command-line overrides and validate the result.

    Args:
      config_path: Explicit configuration file. When omitted, `.schema.yaml` in the
        working directory is read if it exists.
      overrides: Values in configuration-file shape that take precedence over the file.
        `None` values are ignored; `schemaRoot` entries override key by key.

    Raises:
      ConfigurationError: If the file is missing, unparsable or the merged values are invalid.
    """
    raw = _read_configuration_file(config_path)
    merged = _apply_overrides(raw, overrides or {})
    configuration = _parse_configuration(merged)
    validate_configuration(configuration)
    return configuration


def validate_configuration(configuration: GeneratorConfig) -> None:
    """Check the invariants every run depends on before any input is read."""
    if not configuration.inputs:
        raise ConfigurationError("At least one input file is required.")
    indent = configuration.indent
    if isinstance(indent, bool) or not isinstance(indent, int):
        raise ConfigurationError("indent must be an integer.")
    if indent <= 0:
        raise ConfigurationError("indent must be a positive number.")
    if indent % 2 != 0:
        raise ConfigurationError("indent must be an even number.")
    resolve_schema_url(configuration.draft)


def _read_configuration_file(config_path: Path | str | None) -> Mapping[str, Any]:
    if config_path is None:
        path = Path(DEFAULT_CONFIG_FILENAME)
        if not path.exists():
            return {}
    else:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

    logger.debug("Reading configuration file %s", path)
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")
    return parsed


def _apply_overrides(raw: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(raw)
    for key, value in overrides.items():
        if key == "schemaRoot" and isinstance(value, Mapping):
            schema_root = dict(_require_mapping(raw.get("schemaRoot") or {}, "schemaRoot"))
            schema_root.update({k: v for k, v in value.items() if v is not None})
            merged["schemaRoot"] = schema_root
        elif value is not None:
            merged[key] = value
    return merged


def _parse_configuration(raw: Mapping[str, Any]) -> GeneratorConfig:
    _reject_unknown_keys(raw, _TOP_LEVEL_KEYS, "configuration")
    output = _optional_string(raw.get("output"), "output") or DEFAULT_OUTPUT_PATH
    return GeneratorConfig(
        inputs=_normalize_inputs(raw.get("input")),
        output_path=output,
        draft=_require_int(raw.get("draft", DEFAULT_DRAFT), "draft"),
        indent=_require_int(raw.get("indent", DEFAULT_INDENT), "indent"),
        schema_root=_parse_schema_root(raw.get("schemaRoot")),
        additional_properties=_optional_bool(
            raw.get("additionalProperties"), "additionalProperties"
        ),
    )


def _parse_schema_root(value: Any) -> SchemaRootSettings:
    if value is None:
        return SchemaRootSettings()
    section = _require_mapping(value, "schemaRoot")
    _reject_unknown_keys(section, _SCHEMA_ROOT_KEYS, "schemaRoot")
    return SchemaRootSettings(
        id=_optional_string(section.get("id"), "schemaRoot.id"),
        title=_optional_string(section.get("title"), "schemaRoot.title"),
        description=_optional_string(section.get("description"), "schemaRoot.description"),
        additional_properties=_optional_bool(
            section.get("additionalProperties"), "schemaRoot.additionalProperties"
        ),
    )


def _normalize_inputs(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("input entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError("input must be a string or list of strings.")


def _reject_unknown_keys(section: Mapping[str, Any], allowed: frozenset[str], label: str) -> None:
    unknown = sorted(str(key) for key in section if key not in allowed)
    if unknown:
        raise ConfigurationError(f"Unknown {label} key(s): {', '.join(unknown)}")


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
