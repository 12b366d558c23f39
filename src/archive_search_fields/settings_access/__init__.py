"""Settings access exports."""

from .settings_snapshot import (
    DEFAULT_TEMPLATE_SCOPE,
    ELEMENT_VISIBILITY_SCOPE,
    I18N_LANGUAGES_SCOPE,
    SettingsAccessor,
    SettingsSnapshot,
    active_cultures,
    is_enabled,
)

__all__ = [
    "DEFAULT_TEMPLATE_SCOPE",
    "ELEMENT_VISIBILITY_SCOPE",
    "I18N_LANGUAGES_SCOPE",
    "SettingsAccessor",
    "SettingsSnapshot",
    "active_cultures",
    "is_enabled",
]
