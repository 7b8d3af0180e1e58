"""Dependency container wiring for the application."""

from dataclasses import dataclass

from health_tracker.adapters.file_storage import FileKeyValueStorage
from health_tracker.config import Settings, parse_weight_people
from health_tracker.services.days import DayStore
from health_tracker.services.preferences import PreferencesService
from health_tracker.services.seed import SeedService
from health_tracker.services.storage import KeyValueStorage
from health_tracker.services.transfer import TransferService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStorage
    day_store: DayStore
    transfer_service: TransferService
    preferences_service: PreferencesService
    seed_service: SeedService


def build_container(
    settings: Settings | None = None, storage: KeyValueStorage | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_storage = storage or FileKeyValueStorage.create(
        resolved_settings.data_dir
    )
    day_store = DayStore(
        storage=resolved_storage,
        weight_people=parse_weight_people(resolved_settings.weight_people),
    )
    preferences_service = PreferencesService(resolved_storage)
    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        day_store=day_store,
        transfer_service=TransferService(day_store),
        preferences_service=preferences_service,
        seed_service=SeedService(day_store=day_store, preferences=preferences_service),
    )
