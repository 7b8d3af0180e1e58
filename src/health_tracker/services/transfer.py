"""Export and import of the whole day-record store."""

import json
import logging
from dataclasses import dataclass
from datetime import date

from health_tracker.dates import format_date, today
from health_tracker.domain.entries import MEAL_LABELS, MEAL_SLOTS, DayEntry
from health_tracker.services.days import DayStore

EXPORT_PREFIX = "health-tracker"

logger = logging.getLogger(__name__)


@dataclass
class TransferService:
    """Serializes the store to JSON or CSV and restores it from JSON."""

    day_store: DayStore

    def export_json(self) -> str:
        """Return the whole stored mapping as pretty-printed JSON."""
        return json.dumps(self.day_store.get_all_entries(), indent=2)

    def export_csv(self) -> str:
        """Return one header row plus one row per stored day, oldest first."""
        people = self.day_store.weight_people
        rows = [",".join(_csv_header(people))]
        entries = self.day_store.get_all_entries()
        for key in sorted(entries):
            try:
                entry = DayEntry.from_dict(entries[key], weight_people=people)
            except ValueError:
                logger.warning("Skipping malformed day in CSV export", extra={"key": key})
                continue
            rows.append(",".join(_csv_row(entry, people)))
        return "\n".join(rows)

    def import_json(self, text: str) -> bool:
        """Replace the store with an exported JSON mapping.

        Records are stored normalized: missing sections are filled in and
        the water goal is clamped. Returns False and leaves the store
        untouched when the text is not valid JSON or any record does not
        have the shape of a day entry.
        """
        try:
            data = json.loads(text)
        except (TypeError, json.JSONDecodeError):
            logger.warning("Import rejected: not valid JSON")
            return False
        if not isinstance(data, dict):
            logger.warning("Import rejected: top level is not an object")
            return False
        entries: dict[str, object] = {}
        for key, value in data.items():
            try:
                entry = DayEntry.from_dict(
                    value, weight_people=self.day_store.weight_people
                )
            except ValueError:
                logger.warning("Import rejected: malformed day", extra={"key": key})
                return False
            entries[key] = entry.to_dict()
        self.day_store.replace_all(entries)
        logger.info("Imported %d day records", len(data))
        return True


def export_filename(extension: str, on: date | None = None) -> str:
    """Return the download filename for an export made on a given day.

    Defaults to today in local time.
    """
    day_key = format_date(on) if on is not None else today()
    return f"{EXPORT_PREFIX}-{day_key}.{extension}"


def _csv_header(people: tuple[str, ...]) -> list[str]:
    return [
        "Date",
        "Wake Time",
        "Nap Time",
        "Sleep Time",
        *(MEAL_LABELS[slot] for slot in MEAL_SLOTS),
        "Did you workout today?",
        "Cardio Duration",
        "Weight Training",
        "Water Intake (glasses)",
        *(f"{person.capitalize()} Weight (lbs)" for person in people),
        "Observations",
    ]


def _csv_row(entry: DayEntry, people: tuple[str, ...]) -> list[str]:
    return [
        _plain(entry.date),
        _plain(entry.sleep.wake_time),
        _plain(entry.sleep.nap_time),
        _plain(entry.sleep.sleep_time),
        *(_quoted("; ".join(entry.meals[slot].foods)) for slot in MEAL_SLOTS),
        "Yes" if entry.workout.did_workout else "No",
        _plain(entry.workout.cardio_duration or "N/A"),
        _plain(entry.workout.weight_training or "N/A"),
        str(entry.water.intake),
        *(_plain(entry.weight.readings.get(person, "")) for person in people),
        _quoted(entry.observations),
    ]


def _quoted(value: str) -> str:
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def _plain(value: str) -> str:
    if any(char in value for char in ',"\n\r'):
        return _quoted(value)
    return value
