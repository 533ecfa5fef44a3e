"""Schema inference exports."""

from .additional_properties import apply_root_additional_properties, set_additional_properties
from .fragment_merger import merge_fragments
from .fragment_models import SchemaFragment, SchemaType
from .node_inferencer import SchemaInferenceError, infer_document, infer_node
from .schema_materializer import SchemaMaterializationError, fragment_to_map, materialize_schema
from .yaml_loader import CoreSchemaLoader

__all__ = [
    "CoreSchemaLoader",
    "SchemaFragment",
    "SchemaType",
    "SchemaInferenceError",
    "SchemaMaterializationError",
    "infer_document",
    "infer_node",
    "merge_fragments",
    "apply_root_additional_properties",
    "set_additional_properties",
    "fragment_to_map",
    "materialize_schema",
]
