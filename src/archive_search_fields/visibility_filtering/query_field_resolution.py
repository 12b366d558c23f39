"""Use case resolving the searchable fields of a full-text query."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from archive_search_fields.schema_management import IndexMappings, collect_string_fields
from archive_search_fields.settings_access import (
    DEFAULT_TEMPLATE_SCOPE,
    SettingsAccessor,
    active_cultures,
)

from .query_contracts import QueryFields, QueryFieldsRequest
from .template_relations import TemplateRelationRegistry, default_relation_registry
from .visible_fields import compute_visible_fields

logger = logging.getLogger(__name__)

# Index type -> setting name of its default template in scope `default_template`.
TEMPLATE_SETTING_NAMES: Mapping[str, str] = {"informationObject": "informationobject"}


def resolve_default_template(index_type: str, settings: SettingsAccessor) -> str | None:
    """Return the configured description template of `index_type`, if it has one."""
    setting_name = TEMPLATE_SETTING_NAMES.get(index_type)
    if setting_name is None:
        return None
    value = settings.get(setting_name, DEFAULT_TEMPLATE_SCOPE)
    if value is None:
        return None
    template_id = str(value).strip()
    return template_id or None


def resolve_query_fields(
    request: QueryFieldsRequest,
    *,
    mappings: IndexMappings,
    settings: SettingsAccessor,
    registry: TemplateRelationRegistry | None = None,
) -> QueryFields:
    """Collect the index's searchable fields and drop those hidden from the caller."""
    schema = mappings.schema_for(request.index_type)
    cultures = active_cultures(settings)
    all_fields = collect_string_fields(schema, "", cultures)

    template_id = request.template_id or resolve_default_template(request.index_type, settings)
    visible_fields = compute_visible_fields(
        all_fields,
        request.index_type,
        template_id,
        privileged=request.privileged,
        settings=settings,
        cultures=cultures,
        registry=registry or default_relation_registry(),
    )
    visible = set(visible_fields)
    hidden_fields = tuple(dict.fromkeys(name for name in all_fields if name not in visible))

    logger.debug(
        "Resolved %d/%d fields for %s", len(visible_fields), len(all_fields), request.index_type
    )
    return QueryFields(
        index_type=request.index_type,
        template_id=template_id,
        cultures=tuple(cultures),
        all_fields=tuple(all_fields),
        hidden_fields=hidden_fields,
        visible_fields=tuple(visible_fields),
    )
