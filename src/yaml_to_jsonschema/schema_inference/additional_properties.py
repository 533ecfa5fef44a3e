"""additionalProperties policy propagation."""

from __future__ import annotations

from .fragment_models import SchemaFragment, SchemaType


def apply_root_additional_properties(fragment: SchemaFragment, value: bool) -> None:
    """Set the policy on the root object only."""
    if fragment.type is SchemaType.OBJECT:
        fragment.additional_properties = value


def set_additional_properties(fragment: SchemaFragment, value: bool) -> None:
    """Set the policy on every object reachable through `properties` and `items`."""
    if fragment.type is SchemaType.OBJECT:
        fragment.additional_properties = value
    for child in (fragment.properties or {}).values():
        set_additional_properties(child, value)
    if fragment.items is not None:
        set_additional_properties(fragment.items, value)
