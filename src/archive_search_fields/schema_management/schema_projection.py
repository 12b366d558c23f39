"""Index mapping loading and searchable field collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from archive_search_fields.errors import ConfigurationError

from .schema_models import IndexMappings, SchemaNodeKind

logger = logging.getLogger(__name__)

I18N_PROPERTY = "i18n"


def load_index_mappings(source: Path | str | Mapping[str, Any]) -> IndexMappings:
    """Build index mappings from a YAML/JSON file or an already parsed document."""
    if isinstance(source, Mapping):
        document: Any = source
    else:
        path = Path(source)
        if not path.exists():
            raise ConfigurationError(f"Index mappings file not found: {path}")
        try:
            document = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Failed to parse index mappings {path}: {exc}") from exc

    if not isinstance(document, Mapping):
        raise ConfigurationError("Index mappings root must be a mapping of index types.")

    schemas: dict[str, Mapping[str, Any]] = {}
    for index_type, entry in document.items():
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"Index mapping for '{index_type}' must be a mapping.")
        wrapped = entry.get("mappings")
        if "properties" not in entry and isinstance(wrapped, Mapping):
            entry = wrapped
        schemas[str(index_type)] = entry

    logger.debug("Loaded index mappings for %d index types", len(schemas))
    return IndexMappings(schemas=schemas)


def classify_node(name: str, node: Any) -> SchemaNodeKind:
    """Classify one child property of a schema node.

    Precedence follows the order of the checks: an ``i18n`` name wins over any
    declared type, and the mere presence of a ``dynamic`` key marks a nested
    object whose properties are not known ahead of time.
    """
    if name == I18N_PROPERTY:
        return SchemaNodeKind.I18N_CONTAINER
    if not isinstance(node, Mapping):
        return SchemaNodeKind.OTHER_LEAF
    node_type = node.get("type")
    if node_type == "object":
        return SchemaNodeKind.OBJECT_CONTAINER
    if "dynamic" in node:
        return SchemaNodeKind.DYNAMIC_CONTAINER
    include_in_all = node.get("include_in_all")
    if node_type == "string" and (include_in_all is None or include_in_all):
        return SchemaNodeKind.STRING_LEAF
    return SchemaNodeKind.OTHER_LEAF


def collect_string_fields(
    schema_root: Any, prefix: str = "", cultures: Iterable[str] = ()
) -> list[str]:
    """Return every text-searchable field path below `schema_root`.

    Fields are visited depth-first in declaration order; localized fields are
    emitted once per culture in the order the cultures are given.
    """
    culture_list = list(cultures)
    fields: list[str] = []
    _collect(schema_root, prefix=prefix, cultures=culture_list, fields=fields)
    return fields


def _collect(node: Any, *, prefix: str, cultures: list[str], fields: list[str]) -> None:
    properties = node.get("properties") if isinstance(node, Mapping) else None
    if not isinstance(properties, Mapping):
        return

    for name, child in properties.items():
        kind = classify_node(name, child)
        if kind is SchemaNodeKind.I18N_CONTAINER:
            fields.extend(_i18n_fields(child, prefix=prefix, cultures=cultures))
        elif kind in (SchemaNodeKind.OBJECT_CONTAINER, SchemaNodeKind.DYNAMIC_CONTAINER):
            _collect(child, prefix=f"{prefix}{name}.", cultures=cultures, fields=fields)
        elif kind is SchemaNodeKind.STRING_LEAF:
            fields.append(f"{prefix}{name}")


def _i18n_fields(node: Any, *, prefix: str, cultures: list[str]) -> list[str]:
    per_culture = node.get("properties") if isinstance(node, Mapping) else None
    if not isinstance(per_culture, Mapping):
        return []

    fields: list[str] = []
    for culture in cultures:
        culture_node = per_culture.get(culture)
        leaves = culture_node.get("properties") if isinstance(culture_node, Mapping) else None
        if not isinstance(leaves, Mapping):
            continue
        # i18n leaves are always searchable and never recursed into
        fields.extend(f"{prefix}{I18N_PROPERTY}.{culture}.{leaf}" for leaf in leaves)
    return fields
