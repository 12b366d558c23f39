"""Visibility filtering exports."""

from .field_patterns import CULTURE_PLACEHOLDER, expand_i18n_field_names
from .query_contracts import QueryFields, QueryFieldsRequest
from .query_field_resolution import (
    TEMPLATE_SETTING_NAMES,
    resolve_default_template,
    resolve_query_fields,
)
from .template_relations import (
    TemplateRelationRegistry,
    TemplateRelations,
    default_relation_registry,
    parse_template_relations,
)
from .visible_fields import UNFILTERED_INDEX_TYPES, compute_hidden_fields, compute_visible_fields

__all__ = [
    "CULTURE_PLACEHOLDER",
    "QueryFields",
    "QueryFieldsRequest",
    "TEMPLATE_SETTING_NAMES",
    "TemplateRelationRegistry",
    "TemplateRelations",
    "UNFILTERED_INDEX_TYPES",
    "compute_hidden_fields",
    "compute_visible_fields",
    "default_relation_registry",
    "expand_i18n_field_names",
    "parse_template_relations",
    "resolve_default_template",
    "resolve_query_fields",
]
