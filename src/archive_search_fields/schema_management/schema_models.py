"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from archive_search_fields.errors import ConfigurationError


class SchemaNodeKind(str, Enum):
    """Classification of one child property of a schema node."""

    STRING_LEAF = "string_leaf"
    OTHER_LEAF = "other_leaf"
    OBJECT_CONTAINER = "object_container"
    I18N_CONTAINER = "i18n_container"
    DYNAMIC_CONTAINER = "dynamic_container"


@dataclass(frozen=True)
class IndexMappings:
    """Schema roots keyed by index type."""

    schemas: Mapping[str, Mapping[str, Any]]

    @property
    def index_types(self) -> tuple[str, ...]:
        return tuple(self.schemas)

    def schema_for(self, index_type: str) -> Mapping[str, Any]:
        """Return the schema root of `index_type` or fail before any traversal."""
        try:
            return self.schemas[index_type]
        except KeyError:
            raise ConfigurationError(f"Unrecognized index type: {index_type}") from None
