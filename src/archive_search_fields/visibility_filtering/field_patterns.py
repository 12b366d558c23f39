"""Culture expansion of localized field name patterns."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from archive_search_fields.settings_access import SettingsAccessor, active_cultures

CULTURE_PLACEHOLDER = "%s"


def expand_i18n_field_names(
    patterns: str | Iterable[str],
    cultures: str | Iterable[str] | None = None,
    boost: Mapping[str, float | int | str] | None = None,
    *,
    settings: SettingsAccessor | None = None,
) -> list[str]:
    """Substitute each culture into each pattern, e.g. ``i18n.%s.title`` -> ``i18n.en.title``.

    Cultures form the outer loop and patterns the inner one. Patterns listed in
    `boost` get a ``^<boost>`` suffix. Without cultures, the active cultures of
    `settings` are used when an accessor is given.
    """
    pattern_list = [patterns] if isinstance(patterns, str) else list(patterns)
    if isinstance(cultures, str):
        culture_list = [cultures]
    else:
        culture_list = list(cultures or ())
    if not culture_list and settings is not None:
        culture_list = active_cultures(settings)
    boost = boost or {}

    field_names: list[str] = []
    for culture in culture_list:
        for pattern in pattern_list:
            field_name = pattern.replace(CULTURE_PLACEHOLDER, culture)
            if pattern in boost:
                field_name = f"{field_name}^{boost[pattern]}"
            field_names.append(field_name)
    return field_names
