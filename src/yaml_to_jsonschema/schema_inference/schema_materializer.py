"""Convert fragment trees into JSON Schema documents."""

from __future__ import annotations

from typing import Any

from .fragment_models import SchemaFragment, SchemaType


class SchemaMaterializationError(Exception):
    """Raised when a fragment tree is internally inconsistent."""


def materialize_schema(fragment: SchemaFragment, *, schema_url: str, draft: int) -> dict[str, Any]:
    """Return the ordered JSON Schema document for the root fragment.

    Key order is `$schema`, id, `title`, `description` followed by the fragment keys.
    Draft 4 names the identifier `id`; later drafts use `$id`.
    """
    document: dict[str, Any] = {"$schema": schema_url}
    id_key = "id" if draft == 4 else "$id"
    for key, value in (
        (id_key, fragment.id),
        ("title", fragment.title),
        ("description", fragment.description),
    ):
        if value:
            document[key] = value
    document.update(fragment_to_map(fragment))
    return document


def fragment_to_map(fragment: SchemaFragment, pointer: str = "#") -> dict[str, Any]:
    """Serialize one fragment and its children, root metadata excluded."""
    if fragment.type is None:
        raise SchemaMaterializationError(f"{pointer}: fragment has no type")
    if fragment.type is not SchemaType.OBJECT and fragment.properties is not None:
        raise SchemaMaterializationError(f"{pointer}: {fragment.type.value} cannot have properties")
    if fragment.type is not SchemaType.ARRAY and fragment.items is not None:
        raise SchemaMaterializationError(f"{pointer}: {fragment.type.value} cannot have items")

    result: dict[str, Any] = {"type": fragment.type.value}
    if fragment.type is SchemaType.OBJECT:
        result.update(_object_keywords(fragment, pointer))
    elif fragment.type is SchemaType.ARRAY and fragment.items is not None:
        result["items"] = fragment_to_map(fragment.items, f"{pointer}/items")
    return result


def _object_keywords(fragment: SchemaFragment, pointer: str) -> dict[str, Any]:
    properties = fragment.properties
    if properties is None:
        raise SchemaMaterializationError(f"{pointer}: object fragment is missing its properties")
    unknown = [name for name in fragment.required if name not in properties]
    if unknown:
        raise SchemaMaterializationError(
            f"{pointer}: required names without a property: {', '.join(unknown)}"
        )

    keywords: dict[str, Any] = {}
    if properties:
        keywords["properties"] = {
            name: fragment_to_map(child, f"{pointer}/properties/{name}")
            for name, child in properties.items()
        }
    if fragment.required:
        keywords["required"] = list(fragment.required)
    if fragment.additional_properties is not None:
        keywords["additionalProperties"] = fragment.additional_properties
    return keywords
