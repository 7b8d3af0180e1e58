"""Locally remembered profile and display preferences."""

from dataclasses import dataclass

from health_tracker.services.storage import (
    KeyValueStorage,
    read_item,
    remove_item,
    write_item,
)

SELECTED_PROFILE_KEY = "selectedUser"
DARK_MODE_KEY = "darkMode"
VISITED_KEY = "health-tracker-visited"


@dataclass
class PreferencesService:
    """Service for values stored beside, not inside, the day records."""

    storage: KeyValueStorage

    def get_selected_profile(self) -> str | None:
        """Return the remembered profile name, if any."""
        return read_item(self.storage, SELECTED_PROFILE_KEY) or None

    def set_selected_profile(self, name: str) -> None:
        """Remember a profile name."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Profile name cannot be blank")
        write_item(self.storage, SELECTED_PROFILE_KEY, cleaned)

    def clear_selected_profile(self) -> None:
        """Forget the remembered profile."""
        remove_item(self.storage, SELECTED_PROFILE_KEY)

    def is_dark_mode(self) -> bool:
        """Return the dark-mode preference, on unless turned off."""
        stored = read_item(self.storage, DARK_MODE_KEY)
        if stored is None:
            return True
        return stored == "true"

    def set_dark_mode(self, enabled: bool) -> None:
        """Persist the dark-mode preference."""
        write_item(self.storage, DARK_MODE_KEY, "true" if enabled else "false")

    def toggle_dark_mode(self) -> bool:
        """Flip the dark-mode preference and return the new value."""
        enabled = not self.is_dark_mode()
        self.set_dark_mode(enabled)
        return enabled

    def is_first_visit(self) -> bool:
        """Return True until the historical data has been seeded."""
        return read_item(self.storage, VISITED_KEY) != "true"

    def mark_visited(self) -> None:
        """Record that first-run seeding has happened."""
        write_item(self.storage, VISITED_KEY, "true")
