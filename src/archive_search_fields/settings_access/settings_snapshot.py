"""Read-only scoped settings access."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

I18N_LANGUAGES_SCOPE = "i18n_languages"
ELEMENT_VISIBILITY_SCOPE = "element_visibility"
DEFAULT_TEMPLATE_SCOPE = "default_template"


class SettingsAccessor(Protocol):
    """Scoped key/value settings lookup."""

    def get_scope(self, scope: str) -> Mapping[str, object]:
        """Return every setting of `scope` in storage order."""

    def get(self, name: str, scope: str) -> object | None:
        """Return one setting value or None when it is not stored."""


@dataclass(frozen=True)
class SettingsSnapshot:
    """Immutable in-memory settings, fetched once per invocation."""

    scopes: Mapping[str, Mapping[str, object]] = field(default_factory=dict)

    @classmethod
    def from_scopes(cls, scopes: Mapping[str, Mapping[str, object]]) -> SettingsSnapshot:
        frozen = {name: MappingProxyType(dict(values)) for name, values in scopes.items()}
        return cls(scopes=MappingProxyType(frozen))

    def get_scope(self, scope: str) -> Mapping[str, object]:
        return self.scopes.get(scope, MappingProxyType({}))

    def get(self, name: str, scope: str) -> object | None:
        return self.get_scope(scope).get(name)


def active_cultures(settings: SettingsAccessor) -> list[str]:
    """Return the enabled cultures in their configured order, without repeats."""
    cultures: list[str] = []
    for value in settings.get_scope(I18N_LANGUAGES_SCOPE).values():
        culture = str(value).strip()
        if culture and culture not in cultures:
            cultures.append(culture)
    return cultures


def is_enabled(value: object) -> bool:
    """Interpret a stored flag the way the settings store writes them ("0"/"1")."""
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)
