"""Schema management exports."""

from .schema_models import IndexMappings, SchemaNodeKind
from .schema_projection import classify_node, collect_string_fields, load_index_mappings

__all__ = [
    "IndexMappings",
    "SchemaNodeKind",
    "classify_node",
    "collect_string_fields",
    "load_index_mappings",
]
