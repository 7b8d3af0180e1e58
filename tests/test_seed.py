"""Tests for first-run seeding."""

from health_tracker.services.days import DayStore
from health_tracker.services.preferences import PreferencesService
from health_tracker.services.seed import SeedService, historical_entries
from health_tracker.services.seed_data import HISTORICAL_DAYS


def _seed_service(
    day_store: DayStore, preferences: PreferencesService
) -> SeedService:
    return SeedService(day_store=day_store, preferences=preferences)


def test_first_run_inserts_every_historical_day(
    day_store: DayStore, preferences: PreferencesService
) -> None:
    service = _seed_service(day_store, preferences)

    assert service.seed_historical_data() is True

    assert day_store.list_dates() == [day.date for day in HISTORICAL_DAYS]
    assert preferences.is_first_visit() is False


def test_second_run_is_a_no_op(
    day_store: DayStore, preferences: PreferencesService
) -> None:
    service = _seed_service(day_store, preferences)
    service.seed_historical_data()
    day_store.set_observations("2026-01-13", "edited")

    assert service.seed_historical_data() is False

    assert day_store.get_day_entry("2026-01-13").observations == "edited"


def test_reseed_overwrites_historical_dates_only(
    day_store: DayStore, preferences: PreferencesService
) -> None:
    service = _seed_service(day_store, preferences)
    service.seed_historical_data()
    day_store.set_observations("2026-01-13", "edited")
    day_store.set_observations("2026-02-01", "later day")

    assert service.reseed() is True

    assert day_store.get_day_entry("2026-01-13").observations == ""
    assert day_store.get_day_entry("2026-02-01").observations == "later day"


def test_seeded_records_are_complete(
    day_store: DayStore, preferences: PreferencesService
) -> None:
    _seed_service(day_store, preferences).seed_historical_data()

    first = day_store.get_day_entry("2026-01-06")
    assert first.is_compliant is False
    assert first.meals["breakfast"].foods[0] == "1 Slice sourdough"
    assert first.meals["lunch"].foods == []
    assert first.sleep.wake_time == "10:00:00"

    workout_day = day_store.get_day_entry("2026-01-13")
    assert workout_day.is_compliant is True
    assert workout_day.workout.did_workout is True
    assert workout_day.workout.cardio_duration == "80"
    assert workout_day.water.goal == 8
    assert workout_day.weight.readings == {"lamisa": "", "raed": ""}


def test_historical_entries_follow_configured_people() -> None:
    entries = historical_entries(("alex",))

    assert len(entries) == len(HISTORICAL_DAYS)
    assert all(entry.weight.readings == {"alex": ""} for entry in entries)
