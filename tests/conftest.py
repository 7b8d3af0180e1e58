"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from health_tracker.config import Settings
from health_tracker.containers import AppContainer, build_container
from health_tracker.services.days import DayStore
from health_tracker.services.preferences import PreferencesService
from health_tracker.services.storage import KeyValueStorage
from health_tracker.services.transfer import TransferService


@dataclass
class InMemoryStorage(KeyValueStorage):
    """In-memory key-value storage for tests."""

    items: dict[str, str] = field(default_factory=dict)
    writes: int = 0

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes += 1
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass
class UnavailableStorage(KeyValueStorage):
    """Storage whose every operation fails, like a disabled storage area."""

    def get_item(self, key: str) -> str | None:
        raise OSError("storage unavailable")

    def set_item(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")

    def remove_item(self, key: str) -> None:
        raise OSError("storage unavailable")


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def day_store(storage: InMemoryStorage) -> DayStore:
    return DayStore(storage)


@pytest.fixture
def transfer_service(day_store: DayStore) -> TransferService:
    return TransferService(day_store)


@pytest.fixture
def preferences(storage: InMemoryStorage) -> PreferencesService:
    return PreferencesService(storage)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path, seed_on_startup=False)


@pytest.fixture
def container(settings: Settings, storage: InMemoryStorage) -> AppContainer:
    return build_container(settings, storage=storage)
