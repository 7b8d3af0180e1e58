"""Tests for remembered preferences."""

import pytest

from health_tracker.services.preferences import (
    DARK_MODE_KEY,
    SELECTED_PROFILE_KEY,
    PreferencesService,
)
from tests.conftest import InMemoryStorage, UnavailableStorage


def test_selected_profile_round_trip(
    preferences: PreferencesService, storage: InMemoryStorage
) -> None:
    assert preferences.get_selected_profile() is None

    preferences.set_selected_profile("  alex ")

    assert preferences.get_selected_profile() == "alex"
    assert storage.items[SELECTED_PROFILE_KEY] == "alex"

    preferences.clear_selected_profile()
    assert preferences.get_selected_profile() is None


def test_blank_profile_is_rejected(preferences: PreferencesService) -> None:
    with pytest.raises(ValueError, match="blank"):
        preferences.set_selected_profile("   ")


def test_dark_mode_defaults_on_and_toggles(
    preferences: PreferencesService, storage: InMemoryStorage
) -> None:
    assert preferences.is_dark_mode() is True

    assert preferences.toggle_dark_mode() is False
    assert storage.items[DARK_MODE_KEY] == "false"
    assert preferences.is_dark_mode() is False

    preferences.set_dark_mode(True)
    assert preferences.is_dark_mode() is True


def test_first_visit_until_marked(preferences: PreferencesService) -> None:
    assert preferences.is_first_visit() is True

    preferences.mark_visited()

    assert preferences.is_first_visit() is False


def test_unavailable_storage_uses_defaults() -> None:
    preferences = PreferencesService(UnavailableStorage())

    preferences.set_dark_mode(False)
    preferences.clear_selected_profile()

    assert preferences.is_dark_mode() is True
    assert preferences.get_selected_profile() is None
