"""Tests for the file-backed key-value storage."""

from pathlib import Path

from health_tracker.adapters.file_storage import FileKeyValueStorage
from health_tracker.services.days import DayStore


def test_missing_key_reads_as_none(tmp_path: Path) -> None:
    storage = FileKeyValueStorage.create(tmp_path / "data")

    assert storage.get_item("health-tracker-data") is None


def test_set_get_remove(tmp_path: Path) -> None:
    storage = FileKeyValueStorage.create(tmp_path / "data")

    storage.set_item("darkMode", "false")
    storage.set_item("darkMode", "true")

    assert storage.get_item("darkMode") == "true"
    assert [path.name for path in (tmp_path / "data").iterdir()] == ["darkMode"]

    storage.remove_item("darkMode")
    storage.remove_item("darkMode")
    assert storage.get_item("darkMode") is None


def test_keys_are_escaped_into_file_names(tmp_path: Path) -> None:
    storage = FileKeyValueStorage.create(tmp_path)

    storage.set_item("a/b c", "value")

    assert (tmp_path / "a%2Fb%20c").read_text(encoding="utf-8") == "value"
    assert storage.get_item("a/b c") == "value"


def test_day_store_persists_across_instances(tmp_path: Path) -> None:
    DayStore(FileKeyValueStorage.create(tmp_path)).add_food(
        "2026-01-06", "lunch", "rice"
    )

    reopened = DayStore(FileKeyValueStorage.create(tmp_path))

    assert reopened.get_day_entry("2026-01-06").meals["lunch"].foods == ["rice"]


def test_undecodable_blob_reads_as_empty_store(tmp_path: Path) -> None:
    (tmp_path / "health-tracker-data").write_bytes(b"\xff\xfe{bad")
    day_store = DayStore(FileKeyValueStorage.create(tmp_path))

    assert day_store.get_all_entries() == {}
    assert day_store.get_day_entry("2026-01-06").meals["lunch"].foods == []

    entry = day_store.add_food("2026-01-06", "lunch", "rice")
    assert day_store.get_day_entry("2026-01-06") == entry
