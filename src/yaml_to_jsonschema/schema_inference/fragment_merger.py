"""Fold schema fragments from several documents into one aggregate."""

from __future__ import annotations

import logging

from .fragment_models import SchemaFragment, SchemaType

logger = logging.getLogger(__name__)


def merge_fragments(base: SchemaFragment, incoming: SchemaFragment) -> SchemaFragment:
    """Merge `incoming` into `base` and return the merged fragment.

    `base` is mutated in place when both sides are objects or arrays. Any other pairing,
    including a type conflict, resolves to `incoming` (last write wins).
    """
    if base.is_empty():
        return incoming
    if base.type is not incoming.type:
        logger.debug(
            "Type conflict while merging (%s -> %s); keeping the later type",
            _type_name(base),
            _type_name(incoming),
        )
        return incoming
    if base.type is SchemaType.OBJECT:
        return _merge_objects(base, incoming)
    if base.type is SchemaType.ARRAY:
        if base.items is None or incoming.items is None:
            base.items = base.items or incoming.items
        else:
            base.items = merge_fragments(base.items, incoming.items)
        return base
    return incoming


def _merge_objects(base: SchemaFragment, incoming: SchemaFragment) -> SchemaFragment:
    properties = base.properties if base.properties is not None else {}
    for name, child in (incoming.properties or {}).items():
        existing = properties.get(name)
        properties[name] = child if existing is None else merge_fragments(existing, child)
    base.properties = properties
    base.add_required(*incoming.required)
    base.title = incoming.title or base.title
    base.description = incoming.description or base.description
    base.id = incoming.id or base.id
    if incoming.additional_properties is not None:
        base.additional_properties = incoming.additional_properties
    return base


def _type_name(fragment: SchemaFragment) -> str:
    return fragment.type.value if fragment.type is not None else "unset"
