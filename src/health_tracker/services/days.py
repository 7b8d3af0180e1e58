"""Day record store backed by local key-value storage."""

import json
import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from health_tracker.dates import parse_date
from health_tracker.domain.entries import (
    DEFAULT_WEIGHT_PEOPLE,
    DayEntry,
    clamp_water_goal,
    empty_day_entry,
    merge_fields,
    now_ms,
)
from health_tracker.services.storage import (
    KeyValueStorage,
    read_item,
    remove_item,
    write_item,
)

STORAGE_KEY = "health-tracker-data"

logger = logging.getLogger(__name__)


def storage_key(profile: str | None, date: str) -> str:
    """Return the store key for a day, scoped to a profile when given."""
    if not profile:
        return date
    return f"{profile}-{date}"


@dataclass
class DayStore:
    """Date-keyed store of day records.

    The whole mapping lives in one JSON blob under ``STORAGE_KEY`` and is
    re-serialized on every write. Writers are last-write-wins; nothing
    coordinates two processes sharing the same storage area.
    """

    storage: KeyValueStorage
    weight_people: tuple[str, ...] = DEFAULT_WEIGHT_PEOPLE

    def get_all_entries(self) -> dict[str, object]:
        """Return the raw stored mapping, or an empty one when unreadable."""
        raw = read_item(self.storage, STORAGE_KEY)
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored day data is not valid JSON; treating as empty")
            return {}
        if not isinstance(data, dict):
            logger.warning("Stored day data is not an object; treating as empty")
            return {}
        return data

    def replace_all(self, entries: dict[str, object]) -> None:
        """Overwrite the whole stored mapping."""
        write_item(self.storage, STORAGE_KEY, json.dumps(entries))

    def clear_all(self) -> None:
        """Remove every stored day record."""
        remove_item(self.storage, STORAGE_KEY)

    def list_dates(self, profile: str | None = None) -> list[str]:
        """Return sorted dates that have a stored record for the profile."""
        dates = []
        for key in self.get_all_entries():
            date = _date_from_key(key, profile)
            if date is not None:
                dates.append(date)
        return sorted(dates)

    def get_day_entry(self, date: str, profile: str | None = None) -> DayEntry:
        """Return the record for a date, or a blank one when none is stored.

        The blank record is not persisted. Stored records are backfilled
        with defaults for any section they lack on every read.
        """
        parse_date(date)
        stored = self.get_all_entries().get(storage_key(profile, date))
        if stored is None:
            return empty_day_entry(date, self.weight_people)
        try:
            return DayEntry.from_dict(
                stored, date=date, weight_people=self.weight_people
            )
        except ValueError:
            logger.warning(
                "Stored day record is malformed; using defaults",
                extra={"date": date},
            )
            return empty_day_entry(date, self.weight_people)

    def save_day_entry(self, entry: DayEntry, profile: str | None = None) -> None:
        """Persist a record, overwriting whatever is stored for its date.

        The water goal is clamped into its allowed range before writing.
        """
        parse_date(entry.date)
        goal = clamp_water_goal(entry.water.goal)
        if goal != entry.water.goal:
            entry = replace(entry, water=replace(entry.water, goal=goal))
        entries = self.get_all_entries()
        entries[storage_key(profile, entry.date)] = entry.to_dict()
        self.replace_all(entries)

    def update_meal(
        self,
        date: str,
        slot: str,
        changes: dict[str, object],
        profile: str | None = None,
    ) -> DayEntry:
        """Merge changes into one meal slot and persist the day."""
        if "id" in changes:
            raise ValueError("Meal id cannot be changed")
        entry = self.get_day_entry(date, profile)
        stamped = {"timestamp": now_ms(), **changes}
        meal = merge_fields(entry.meal(slot), stamped)
        updated = entry.with_meal(slot, meal)
        self.save_day_entry(updated, profile)
        return updated

    def update_meal_time(
        self, date: str, slot: str, time: str, profile: str | None = None
    ) -> DayEntry:
        """Set the time of day for a meal slot."""
        return self.update_meal(date, slot, {"time": time}, profile)

    def add_food(
        self, date: str, slot: str, food: str, profile: str | None = None
    ) -> DayEntry:
        """Append a food item to a meal unless it is blank or already listed."""
        entry = self.get_day_entry(date, profile)
        foods = entry.meal(slot).foods
        cleaned = food.strip()
        if not cleaned or cleaned in foods:
            return entry
        return self.update_meal(date, slot, {"foods": [*foods, cleaned]}, profile)

    def remove_food(
        self, date: str, slot: str, index: int, profile: str | None = None
    ) -> DayEntry:
        """Remove the food item at an index; later items shift down."""
        foods = list(self.get_day_entry(date, profile).meal(slot).foods)
        if index < 0 or index >= len(foods):
            raise IndexError(f"No food at index {index}")
        del foods[index]
        return self.update_meal(date, slot, {"foods": foods}, profile)

    def update_workout(
        self, date: str, changes: dict[str, object], profile: str | None = None
    ) -> DayEntry:
        """Merge changes into the workout record and persist the day."""
        entry = self.get_day_entry(date, profile)
        updated = replace(entry, workout=merge_fields(entry.workout, changes))
        self.save_day_entry(updated, profile)
        return updated

    def update_sleep(
        self, date: str, changes: dict[str, object], profile: str | None = None
    ) -> DayEntry:
        """Merge changes into the sleep record and persist the day."""
        entry = self.get_day_entry(date, profile)
        updated = replace(entry, sleep=merge_fields(entry.sleep, changes))
        self.save_day_entry(updated, profile)
        return updated

    def update_water(
        self, date: str, changes: dict[str, object], profile: str | None = None
    ) -> DayEntry:
        """Merge changes into the water record and persist the day.

        The goal is clamped into its allowed range and intake never goes
        below zero.
        """
        bounded = dict(changes)
        if "goal" in bounded:
            bounded["goal"] = clamp_water_goal(int(bounded["goal"]))
        if "intake" in bounded:
            bounded["intake"] = max(int(bounded["intake"]), 0)
        entry = self.get_day_entry(date, profile)
        updated = replace(entry, water=merge_fields(entry.water, bounded))
        self.save_day_entry(updated, profile)
        return updated

    def add_glass(self, date: str, profile: str | None = None) -> DayEntry:
        """Log one glass of water with the current time."""
        water = self.get_day_entry(date, profile).water
        logged_at = datetime.now(tz=UTC).isoformat()
        return self.update_water(
            date,
            {"intake": water.intake + 1, "timestamps": [*water.timestamps, logged_at]},
            profile,
        )

    def remove_glass(self, date: str, profile: str | None = None) -> DayEntry:
        """Remove the most recent glass of water, if any."""
        entry = self.get_day_entry(date, profile)
        if entry.water.intake <= 0:
            return entry
        return self.update_water(
            date,
            {
                "intake": entry.water.intake - 1,
                "timestamps": entry.water.timestamps[:-1],
            },
            profile,
        )

    def set_water_goal(
        self, date: str, goal: int, profile: str | None = None
    ) -> DayEntry:
        """Set the daily water goal, clamped to the allowed range."""
        return self.update_water(date, {"goal": goal}, profile)

    def update_weight(
        self, date: str, changes: dict[str, object], profile: str | None = None
    ) -> DayEntry:
        """Merge readings for tracked people into the weight record."""
        entry = self.get_day_entry(date, profile)
        readings = entry.weight.readings
        unknown = sorted(set(changes) - set(readings))
        if unknown:
            raise ValueError(f"Unknown people: {', '.join(unknown)}")
        merged = {**readings, **{k: str(v) for k, v in changes.items()}}
        updated = replace(entry, weight=replace(entry.weight, readings=merged))
        self.save_day_entry(updated, profile)
        return updated

    def set_compliance(
        self, date: str, is_compliant: bool, profile: str | None = None
    ) -> DayEntry:
        """Mark the whole day as compliant or not."""
        updated = replace(self.get_day_entry(date, profile), is_compliant=is_compliant)
        self.save_day_entry(updated, profile)
        return updated

    def toggle_compliance(self, date: str, profile: str | None = None) -> DayEntry:
        """Flip the day's compliance flag."""
        entry = self.get_day_entry(date, profile)
        return self.set_compliance(date, not entry.is_compliant, profile)

    def set_observations(
        self, date: str, observations: str, profile: str | None = None
    ) -> DayEntry:
        """Replace the free-text observations for a day."""
        updated = replace(self.get_day_entry(date, profile), observations=observations)
        self.save_day_entry(updated, profile)
        return updated


def _date_from_key(key: str, profile: str | None) -> str | None:
    if profile:
        prefix = f"{profile}-"
        if not key.startswith(prefix):
            return None
        key = key[len(prefix) :]
    try:
        parse_date(key)
    except ValueError:
        return None
    return key
