"""First-run seeding of historical day records."""

import logging
from dataclasses import dataclass, replace

from health_tracker.domain.entries import (
    DayEntry,
    SleepRecord,
    WorkoutRecord,
    empty_day_entry,
    empty_meal_entry,
)
from health_tracker.services.days import DayStore
from health_tracker.services.preferences import PreferencesService
from health_tracker.services.seed_data import HISTORICAL_DAYS, HistoricalDay

logger = logging.getLogger(__name__)


@dataclass
class SeedService:
    """Loads the historical spreadsheet days into the store."""

    day_store: DayStore
    preferences: PreferencesService

    def seed_historical_data(self, force: bool = False) -> bool:
        """Insert the historical days on first run, or always when forced.

        Returns True when records were written.
        """
        if not force and not self.preferences.is_first_visit():
            return False
        entries = historical_entries(self.day_store.weight_people)
        for entry in entries:
            self.day_store.save_day_entry(entry)
        self.preferences.mark_visited()
        logger.info("Seeded %d days of historical data", len(entries))
        return True

    def reseed(self) -> bool:
        """Re-insert the historical days regardless of the first-run flag."""
        return self.seed_historical_data(force=True)


def historical_entries(weight_people: tuple[str, ...]) -> list[DayEntry]:
    """Build day records for the historical data with fresh meal ids."""
    return [_build_entry(day, weight_people) for day in HISTORICAL_DAYS]


def _build_entry(day: HistoricalDay, weight_people: tuple[str, ...]) -> DayEntry:
    base = empty_day_entry(day.date, weight_people)
    meals = dict(base.meals)
    for slot, foods in day.foods.items():
        meals[slot] = replace(empty_meal_entry(), foods=list(foods))
    did_workout, cardio, weights = day.workout
    wake, nap, sleep = day.sleep
    return DayEntry(
        date=day.date,
        is_compliant=day.is_compliant,
        meals=meals,
        workout=WorkoutRecord(
            did_workout=did_workout, cardio_duration=cardio, weight_training=weights
        ),
        sleep=SleepRecord(wake_time=wake, nap_time=nap, sleep_time=sleep),
        water=base.water,
        weight=base.weight,
        observations=day.observations,
    )
