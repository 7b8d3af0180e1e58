"""Tests for export and import of the day store."""

import csv
import io
import json
from datetime import date

from health_tracker.dates import today
from health_tracker.domain.entries import empty_day_entry
from health_tracker.services.days import STORAGE_KEY, DayStore
from health_tracker.services.transfer import TransferService, export_filename
from tests.conftest import InMemoryStorage


def _rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


def test_json_export_then_import_restores_the_store(
    day_store: DayStore, transfer_service: TransferService
) -> None:
    day_store.add_food("2026-01-06", "lunch", "rice")
    day_store.set_compliance("2026-01-07", False)
    exported = transfer_service.export_json()
    snapshot = day_store.get_all_entries()

    day_store.clear_all()
    assert transfer_service.import_json(exported) is True

    assert day_store.get_all_entries() == snapshot
    assert exported.startswith("{\n  ")


def test_import_replaces_rather_than_merges(
    day_store: DayStore, transfer_service: TransferService
) -> None:
    day_store.save_day_entry(empty_day_entry("2026-01-06"))
    payload = {"2026-01-08": empty_day_entry("2026-01-08").to_dict()}

    assert transfer_service.import_json(json.dumps(payload)) is True

    assert day_store.list_dates() == ["2026-01-08"]


def test_malformed_import_leaves_store_untouched(
    day_store: DayStore, transfer_service: TransferService, storage: InMemoryStorage
) -> None:
    day_store.set_observations("2026-01-06", "keep me")
    before = storage.items[STORAGE_KEY]

    assert transfer_service.import_json("{broken") is False
    assert transfer_service.import_json("[]") is False
    assert transfer_service.import_json(json.dumps({"2026-01-07": "nope"})) is False
    assert transfer_service.import_json(json.dumps({"2026-01-07": {}})) is False

    assert storage.items[STORAGE_KEY] == before


def test_import_accepts_records_missing_sections(
    day_store: DayStore, transfer_service: TransferService
) -> None:
    payload = {"2026-01-06": {"date": "2026-01-06", "isCompliant": False}}

    assert transfer_service.import_json(json.dumps(payload)) is True

    entry = day_store.get_day_entry("2026-01-06")
    assert entry.is_compliant is False
    assert entry.water.goal == 8


def test_csv_has_header_plus_one_row_per_day(
    day_store: DayStore, transfer_service: TransferService
) -> None:
    for day in ("2026-01-07", "2026-01-06", "2026-01-08"):
        day_store.save_day_entry(empty_day_entry(day))

    rows = _rows(transfer_service.export_csv())

    assert len(rows) == 4
    assert all(len(row) == 18 for row in rows)
    assert rows[0][0] == "Date"
    assert rows[0][-1] == "Observations"
    assert [row[0] for row in rows[1:]] == ["2026-01-06", "2026-01-07", "2026-01-08"]


def test_csv_empty_store_is_header_only(transfer_service: TransferService) -> None:
    rows = _rows(transfer_service.export_csv())

    assert len(rows) == 1
    assert rows[0][4:11] == [
        "Early Morning",
        "Breakfast",
        "Mid Morning",
        "Lunch",
        "Teatime",
        "Dinner",
        "Supper",
    ]
    assert rows[0][15:17] == ["Lamisa Weight (lbs)", "Raed Weight (lbs)"]


def test_csv_row_formats_each_column(
    day_store: DayStore, transfer_service: TransferService
) -> None:
    day_store.add_food("2026-01-06", "lunch", "Rice, daal")
    day_store.add_food("2026-01-06", "lunch", 'a "big" salad')
    day_store.update_sleep("2026-01-06", {"wake_time": "07:00"})
    day_store.update_workout(
        "2026-01-06", {"did_workout": True, "cardio_duration": "30"}
    )
    day_store.add_glass("2026-01-06")
    day_store.update_weight("2026-01-06", {"raed": "181"})
    day_store.set_observations("2026-01-06", "Felt good,\nslept well")

    text = transfer_service.export_csv()
    row = _rows(text)[1]

    assert row[1] == "07:00"
    assert row[7] == 'Rice, daal; a "big" salad'
    assert row[11:15] == ["Yes", "30", "N/A", "1"]
    assert row[15:17] == ["", "181"]
    assert row[17] == "Felt good,\nslept well"
    assert '"Rice, daal; a ""big"" salad"' in text


def test_csv_follows_configured_people() -> None:
    day_store = DayStore(InMemoryStorage(), weight_people=("alex",))
    day_store.save_day_entry(empty_day_entry("2026-01-06", ("alex",)))

    rows = _rows(TransferService(day_store).export_csv())

    assert all(len(row) == 17 for row in rows)
    assert rows[0][15] == "Alex Weight (lbs)"


def test_csv_skips_malformed_records(
    storage: InMemoryStorage, transfer_service: TransferService
) -> None:
    storage.items[STORAGE_KEY] = json.dumps(
        {
            "2026-01-06": empty_day_entry("2026-01-06").to_dict(),
            "2026-01-07": "garbage",
        }
    )

    rows = _rows(transfer_service.export_csv())

    assert [row[0] for row in rows[1:]] == ["2026-01-06"]


def test_export_filename_uses_day_key() -> None:
    assert export_filename("csv", date(2026, 1, 6)) == "health-tracker-2026-01-06.csv"


def test_export_filename_defaults_to_today() -> None:
    assert export_filename("json") == f"health-tracker-{today()}.json"


def test_import_stores_normalized_records(
    day_store: DayStore, transfer_service: TransferService, storage: InMemoryStorage
) -> None:
    payload = {
        "2026-01-06": {"date": "2026-01-06", "water": {"intake": 2, "goal": 99}}
    }

    assert transfer_service.import_json(json.dumps(payload)) is True

    stored = json.loads(storage.items[STORAGE_KEY])["2026-01-06"]
    assert stored["water"] == {"intake": 2, "goal": 20, "timestamps": []}
    assert set(stored["meals"]) == {
        "earlyMorning",
        "breakfast",
        "midMorning",
        "lunch",
        "tea",
        "dinner",
        "supper",
    }
