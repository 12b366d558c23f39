"""Removal of hidden elements from public query field lists."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from archive_search_fields.settings_access import (
    ELEMENT_VISIBILITY_SCOPE,
    SettingsAccessor,
    active_cultures,
    is_enabled,
)

from .field_patterns import expand_i18n_field_names
from .template_relations import TemplateRelationRegistry, default_relation_registry

logger = logging.getLogger(__name__)

UNFILTERED_INDEX_TYPES = frozenset({"actor", "repository"})


def compute_hidden_fields(
    template_id: str | None,
    *,
    settings: SettingsAccessor,
    cultures: Iterable[str] | None = None,
    registry: TemplateRelationRegistry | None = None,
) -> list[str]:
    """Return the localized fields of every element hidden under `template_id`."""
    relations = (registry or default_relation_registry()).relations_for(template_id)
    if not relations:
        return []

    culture_list = list(cultures) if cultures is not None else active_cultures(settings)
    hidden: list[str] = []
    for name, value in settings.get_scope(ELEMENT_VISIBILITY_SCOPE).items():
        patterns = relations.get(name)
        if is_enabled(value) or not patterns:
            continue
        hidden.extend(expand_i18n_field_names(patterns, culture_list))
    return hidden


def compute_visible_fields(
    all_fields: Sequence[str],
    index_type: str,
    template_id: str | None,
    *,
    privileged: bool,
    settings: SettingsAccessor,
    cultures: Iterable[str] | None = None,
    registry: TemplateRelationRegistry | None = None,
) -> list[str]:
    """Return `all_fields` without the fields hidden from public users.

    Privileged callers and the actor/repository index types always get the
    full list. The remaining fields keep their relative order.
    """
    if privileged or index_type in UNFILTERED_INDEX_TYPES:
        return list(all_fields)

    hidden = set(
        compute_hidden_fields(
            template_id, settings=settings, cultures=cultures, registry=registry
        )
    )
    visible = [field_name for field_name in all_fields if field_name not in hidden]
    logger.debug(
        "Hid %d of %d fields for %s (template %s)",
        len(all_fields) - len(visible),
        len(all_fields),
        index_type,
        template_id,
    )
    return visible
