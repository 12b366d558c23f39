"""Registry of hidden-element relations per description template."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from typing import Any

import yaml

from archive_search_fields.errors import ConfigurationError

TemplateRelations = Mapping[str, tuple[str, ...]]

_BUILTIN_RELATIONS_RESOURCE = "relations.yml"


@dataclass(frozen=True)
class TemplateRelationRegistry:
    """Visibility setting name -> field patterns, keyed by template identifier.

    An empty pattern tuple marks an element without an index field of its own;
    hiding it cannot remove anything from a query.
    """

    templates: Mapping[str, TemplateRelations] = field(default_factory=dict)

    @property
    def template_ids(self) -> tuple[str, ...]:
        return tuple(self.templates)

    def relations_for(self, template_id: str | None) -> TemplateRelations:
        """Return the relations of `template_id`; unknown templates have none."""
        if template_id is None:
            return {}
        return self.templates.get(template_id, {})

    def merged_with(self, other: TemplateRelationRegistry) -> TemplateRelationRegistry:
        """Return a registry where templates of `other` replace same-named ones."""
        return TemplateRelationRegistry(templates={**self.templates, **other.templates})


def parse_template_relations(
    document: Any, *, source: str = "template relations"
) -> TemplateRelationRegistry:
    """Validate a ``template -> {setting: patterns}`` document."""
    if document is None:
        return TemplateRelationRegistry()
    if not isinstance(document, Mapping):
        raise ConfigurationError(f"{source} must be a mapping of templates.")

    templates: dict[str, TemplateRelations] = {}
    for template_id, relations in document.items():
        if relations is None:
            relations = {}
        if not isinstance(relations, Mapping):
            raise ConfigurationError(f"{source}.{template_id} must be a mapping of settings.")
        templates[str(template_id)] = {
            str(name): _normalize_patterns(patterns, f"{source}.{template_id}.{name}")
            for name, patterns in relations.items()
        }
    return TemplateRelationRegistry(templates=templates)


@lru_cache(maxsize=1)
def default_relation_registry() -> TemplateRelationRegistry:
    """Return the built-in relations for the ISAD(G) and RAD templates."""
    text = (
        resources.files("archive_search_fields.visibility_filtering")
        .joinpath(_BUILTIN_RELATIONS_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return parse_template_relations(yaml.safe_load(text), source=_BUILTIN_RELATIONS_RESOURCE)


def _normalize_patterns(value: Any, label: str) -> tuple[str, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list | tuple):
        patterns = []
        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise ConfigurationError(f"{label} entries must be non-empty strings.")
            patterns.append(item.strip())
        return tuple(patterns)
    raise ConfigurationError(f"{label} must be a string or list of strings.")
