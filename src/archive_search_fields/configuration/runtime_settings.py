"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from archive_search_fields.schema_management import IndexMappings
from archive_search_fields.settings_access import SettingsSnapshot
from archive_search_fields.visibility_filtering import TemplateRelationRegistry


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    mappings: IndexMappings
    mappings_path: Path | None
    settings: SettingsSnapshot
    relations: TemplateRelationRegistry
