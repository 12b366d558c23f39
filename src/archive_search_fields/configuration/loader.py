"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from archive_search_fields.errors import ConfigurationError
from archive_search_fields.schema_management import IndexMappings, load_index_mappings
from archive_search_fields.settings_access import (
    DEFAULT_TEMPLATE_SCOPE,
    ELEMENT_VISIBILITY_SCOPE,
    I18N_LANGUAGES_SCOPE,
    SettingsSnapshot,
)
from archive_search_fields.visibility_filtering import (
    TemplateRelationRegistry,
    default_relation_registry,
    parse_template_relations,
)

from .runtime_settings import Configuration


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    mappings, mappings_path = _parse_mappings_section(parsed.get("mappings"), path.parent)
    settings = _parse_settings_section(parsed.get("settings"))
    relations = _parse_templates_section(parsed.get("templates"))

    return Configuration(
        path=path,
        mappings=mappings,
        mappings_path=mappings_path,
        settings=settings,
        relations=relations,
    )


def _parse_mappings_section(value: Any, base_path: Path) -> tuple[IndexMappings, Path | None]:
    if isinstance(value, str):
        value = {"path": value}
    section = _require_mapping(value, "mappings")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Mappings must not set both inline and path.")
    if inline:
        if not isinstance(inline, Mapping):
            raise ConfigurationError("mappings.inline must be a mapping of index types.")
        return load_index_mappings(inline), None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("mappings.path must be a string.")
        mappings_path = _resolve_path(base_path, path_value)
        return load_index_mappings(mappings_path), mappings_path
    raise ConfigurationError("Mappings require either inline or path.")


def _parse_settings_section(value: Any) -> SettingsSnapshot:
    if value is None:
        value = {}
    section = _require_mapping(value, "settings")

    scopes: dict[str, Mapping[str, object]] = {}
    for scope, entries in section.items():
        label = f"settings.{scope}"
        if scope == I18N_LANGUAGES_SCOPE:
            scopes[scope] = _normalize_cultures(entries, label)
        else:
            scopes[str(scope)] = _normalize_scope(entries, label)

    for scope in (I18N_LANGUAGES_SCOPE, ELEMENT_VISIBILITY_SCOPE, DEFAULT_TEMPLATE_SCOPE):
        scopes.setdefault(scope, {})
    return SettingsSnapshot.from_scopes(scopes)


def _parse_templates_section(value: Any) -> TemplateRelationRegistry:
    builtin = default_relation_registry()
    if value is None:
        return builtin
    return builtin.merged_with(parse_template_relations(value, source="templates"))


def _normalize_cultures(value: Any, label: str) -> dict[str, object]:
    if value is None:
        return {}
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, Sequence):
        items = [(item, item) for item in value]
    else:
        raise ConfigurationError(f"{label} must be a list or mapping of cultures.")

    cultures: dict[str, object] = {}
    for name, culture in items:
        culture_code = _require_non_empty_string(culture, f"{label} entries")
        if culture_code in cultures.values():
            raise ConfigurationError(f"{label} lists culture '{culture_code}' more than once.")
        cultures[str(name).strip()] = culture_code
    return cultures


def _normalize_scope(value: Any, label: str) -> dict[str, object]:
    if value is None:
        return {}
    section = _require_mapping(value, label)
    return {str(name): entry for name, entry in section.items()}


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
