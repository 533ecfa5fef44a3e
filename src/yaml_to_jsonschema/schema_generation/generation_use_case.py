"""Schema generation use-case service."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import yaml

from yaml_to_jsonschema.configuration import (
    GeneratorConfig,
    resolve_schema_url,
    validate_configuration,
)
from yaml_to_jsonschema.input_loading import InputError, fetch_input, load_inputs
from yaml_to_jsonschema.schema_inference import (
    CoreSchemaLoader,
    SchemaFragment,
    SchemaInferenceError,
    apply_root_additional_properties,
    infer_document,
    materialize_schema,
    merge_fragments,
    set_additional_properties,
)

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], bytes]

_TOO_DEEP = "document nests too deeply or contains a recursive alias"


class SchemaGenerationError(Exception):
    """Raised when a generated schema cannot be written."""


def generate_schema(config: GeneratorConfig, *, fetch: Fetcher = fetch_input) -> bytes:
    """Infer, merge and serialize the schema for all configured inputs.

    Inputs are processed strictly in configuration order since merge order decides
    type conflicts and property order.

    Raises:
      ConfigurationError: If the configuration is invalid. Nothing is read in that case.
      InputError: If an input cannot be fetched or is not a usable YAML document.
      SchemaMaterializationError: If the merged tree is inconsistent.
    """
    validate_configuration(config)
    schema_url = resolve_schema_url(config.draft)

    aggregate = SchemaFragment.empty_object()
    for identifier, content in load_inputs(config.inputs, fetch=fetch):
        for fragment in _infer_documents(identifier, content):
            aggregate = merge_fragments(aggregate, fragment)

    _apply_root_settings(aggregate, config)
    document = materialize_schema(aggregate, schema_url=schema_url, draft=config.draft)
    text = json.dumps(document, indent=config.indent, ensure_ascii=False)
    return (text + "\n").encode("utf-8")


def write_schema(config: GeneratorConfig, payload: bytes) -> Path:
    """Write the serialized schema to the configured output path."""
    destination = Path(config.output_path)
    try:
        destination.write_bytes(payload)
    except OSError as exc:
        raise SchemaGenerationError(f"Error writing schema to file {destination}: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(payload), destination)
    return destination.resolve()


def _infer_documents(identifier: str, content: bytes) -> Iterator[SchemaFragment]:
    try:
        roots = list(yaml.compose_all(content, Loader=CoreSchemaLoader))
    except yaml.YAMLError as exc:
        raise InputError(identifier, f"error parsing YAML: {exc}") from exc
    except RecursionError as exc:
        raise InputError(identifier, _TOO_DEEP) from exc

    for index, root in enumerate(roots):
        try:
            fragment = infer_document(root)
        except SchemaInferenceError as exc:
            raise InputError(identifier, str(exc)) from exc
        except RecursionError as exc:
            raise InputError(identifier, _TOO_DEEP) from exc
        if fragment is None:
            logger.debug("Skipping empty document %d in %s", index, identifier)
            continue
        logger.debug("Merging document %d from %s", index, identifier)
        yield fragment


def _apply_root_settings(aggregate: SchemaFragment, config: GeneratorConfig) -> None:
    root = config.schema_root
    aggregate.title = root.title
    aggregate.description = root.description
    aggregate.id = root.id
    if root.additional_properties is not None:
        apply_root_additional_properties(aggregate, root.additional_properties)
    if config.additional_properties is not None:
        set_additional_properties(aggregate, config.additional_properties)
