"""Infer schema fragments from composed YAML nodes."""

from __future__ import annotations

import yaml

from .fragment_merger import merge_fragments
from .fragment_models import SchemaFragment, SchemaType

NULL_TAG = "tag:yaml.org,2002:null"
MERGE_TAG = "tag:yaml.org,2002:merge"

_SCALAR_TYPES = {
    "tag:yaml.org,2002:str": SchemaType.STRING,
    "tag:yaml.org,2002:int": SchemaType.INTEGER,
    "tag:yaml.org,2002:float": SchemaType.NUMBER,
    "tag:yaml.org,2002:bool": SchemaType.BOOLEAN,
    NULL_TAG: SchemaType.NULL,
}


class SchemaInferenceError(Exception):
    """Raised when a YAML document cannot be mapped onto a schema."""


def infer_document(root: yaml.Node | None) -> SchemaFragment | None:
    """Infer the fragment for a document root, or None for an empty document."""
    if root is None:
        return None
    if isinstance(root, yaml.ScalarNode) and root.tag == NULL_TAG:
        return None
    if not isinstance(root, yaml.MappingNode):
        raise SchemaInferenceError(
            f"line {root.start_mark.line + 1}: document root must be a mapping"
        )
    fragment, _ = infer_node(root)
    return fragment


def infer_node(node: yaml.Node) -> tuple[SchemaFragment, bool]:
    """Infer a fragment for `node` and whether its key counts as required.

    A key is required when its value is present and not null. Arrays are described by
    their first element only; an empty array leaves `items` unset.
    """
    if isinstance(node, yaml.MappingNode):
        return _infer_mapping(node), True
    if isinstance(node, yaml.SequenceNode):
        fragment = SchemaFragment(type=SchemaType.ARRAY)
        if node.value:
            fragment.items, _ = infer_node(node.value[0])
        return fragment, True
    if isinstance(node, yaml.ScalarNode):
        # timestamps, binary and local tags have no JSON counterpart besides string
        schema_type = _SCALAR_TYPES.get(node.tag, SchemaType.STRING)
        return SchemaFragment(type=schema_type), node.tag != NULL_TAG
    raise SchemaInferenceError(f"unsupported YAML node: {node!r}")


def _infer_mapping(node: yaml.MappingNode) -> SchemaFragment:
    properties: dict[str, SchemaFragment] = {}
    required: list[str] = []
    for key_node, value_node in _mapping_pairs(node):
        if not isinstance(key_node, yaml.ScalarNode):
            raise SchemaInferenceError(
                f"line {key_node.start_mark.line + 1}: mapping keys must be scalars"
            )
        name = key_node.value
        child, is_required = infer_node(value_node)
        existing = properties.get(name)
        properties[name] = child if existing is None else merge_fragments(existing, child)
        # the last pair for a key decides, so a null override drops it from required
        if is_required and name not in required:
            required.append(name)
        elif not is_required and name in required:
            required.remove(name)
    return SchemaFragment(type=SchemaType.OBJECT, properties=properties, required=required)


def _mapping_pairs(node: yaml.MappingNode) -> list[tuple[yaml.Node, yaml.Node]]:
    """Expand `<<` merge keys; merged pairs come first so explicit keys override them."""
    merged: list[tuple[yaml.Node, yaml.Node]] = []
    explicit: list[tuple[yaml.Node, yaml.Node]] = []
    for key_node, value_node in node.value:
        if key_node.tag != MERGE_TAG:
            explicit.append((key_node, value_node))
            continue
        if isinstance(value_node, yaml.SequenceNode):
            sources = list(reversed(value_node.value))
        else:
            sources = [value_node]
        for source in sources:
            if not isinstance(source, yaml.MappingNode):
                raise SchemaInferenceError(
                    f"line {source.start_mark.line + 1}: merge key expects a mapping"
                )
            merged.extend(_mapping_pairs(source))
    return merged + explicit
