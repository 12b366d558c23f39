"""Settings accessor tests."""

from __future__ import annotations

import pytest
from archive_search_fields.settings_access import (
    ELEMENT_VISIBILITY_SCOPE,
    I18N_LANGUAGES_SCOPE,
    SettingsSnapshot,
    active_cultures,
    is_enabled,
)


def test_snapshot_returns_scope_values_and_missing_entries_as_none() -> None:
    settings = SettingsSnapshot.from_scopes(
        {ELEMENT_VISIBILITY_SCOPE: {"isad_notes": "0", "isad_control_status": "1"}}
    )

    assert dict(settings.get_scope(ELEMENT_VISIBILITY_SCOPE)) == {
        "isad_notes": "0",
        "isad_control_status": "1",
    }
    assert settings.get("isad_notes", ELEMENT_VISIBILITY_SCOPE) == "0"
    assert settings.get("isad_notes", "other_scope") is None
    assert dict(settings.get_scope("unknown")) == {}


def test_snapshot_scopes_are_read_only() -> None:
    source = {ELEMENT_VISIBILITY_SCOPE: {"isad_notes": "0"}}
    settings = SettingsSnapshot.from_scopes(source)
    source[ELEMENT_VISIBILITY_SCOPE]["isad_notes"] = "1"

    assert settings.get("isad_notes", ELEMENT_VISIBILITY_SCOPE) == "0"
    with pytest.raises(TypeError):
        settings.get_scope(ELEMENT_VISIBILITY_SCOPE)["isad_notes"] = "1"  # type: ignore[index]


def test_active_cultures_keep_configured_order_without_repeats() -> None:
    settings = SettingsSnapshot.from_scopes(
        {I18N_LANGUAGES_SCOPE: {"fr": "fr", "en": "en", "en_dup": "en", "blank": " "}}
    )

    assert active_cultures(settings) == ["fr", "en"]


def test_active_cultures_of_empty_settings() -> None:
    assert active_cultures(SettingsSnapshot()) == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0", False),
        ("", False),
        (" 0 ", True),
        (False, False),
        (None, False),
        (0, False),
        ("1", True),
        (True, True),
        (1, True),
        ("yes", True),
    ],
)
def test_is_enabled_follows_stored_flag_semantics(value: object, expected: bool) -> None:
    assert is_enabled(value) is expected
