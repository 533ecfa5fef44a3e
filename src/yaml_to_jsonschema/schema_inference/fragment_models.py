"""Schema inference entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SchemaType(str, Enum):
    """JSON Schema primitive types produced by inference."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass
class SchemaFragment:  # pylint: disable=too-many-instance-attributes
    """One node of an in-progress JSON Schema tree.

    A fragment owns its `properties` children and its `items` child. `properties` is
    only set for objects and `items` only for non-empty arrays. `additional_properties`
    stays `None` until a policy is applied, which keeps the key out of the output.
    """

    type: SchemaType | None = None
    properties: dict[str, SchemaFragment] | None = None
    items: SchemaFragment | None = None
    required: list[str] = field(default_factory=list)
    title: str | None = None
    description: str | None = None
    id: str | None = None
    additional_properties: bool | None = None

    @staticmethod
    def empty_object() -> SchemaFragment:
        return SchemaFragment(type=SchemaType.OBJECT, properties={})

    def is_empty(self) -> bool:
        """Return True for a fragment that has not absorbed any document yet."""
        if self.type is None:
            return True
        return self.type is SchemaType.OBJECT and not self.properties and not self.required

    def add_required(self, *names: str) -> None:
        """Append names to `required`, keeping first-seen order without duplicates."""
        for name in names:
            if name not in self.required:
                self.required.append(name)
