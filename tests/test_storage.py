"""Storage — tests for loading, saving and initializing the backing file.

Tests cover:
    - missing file is a StorageUnavailable failure, not an empty list
    - empty file and top-level null load as empty lists
    - malformed content (bad JSON, wrong shape, bad entries, duplicate ids) fails
    - save writes status names, overwrites fully and is idempotent
    - initialize creates an empty file once and never clobbers data
    - get_records_path honours the environment override
"""

import json
from pathlib import Path

from equipment_tracker import storage
from equipment_tracker.config import RECORDS_FILE_ENV
from equipment_tracker.errors import ErrorKind, Failure
from equipment_tracker.models import Record, Status
from equipment_tracker.storage import RecordStore, get_records_path

from conftest import write_records


# ─── load ────────────────────────────────────────────────────────

def test_load_missing_file_fails(missing_store):
    result = missing_store.load()
    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.STORAGE_UNAVAILABLE


def test_load_directory_fails(tmp_path):
    result = RecordStore(tmp_path).load()
    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.STORAGE_UNAVAILABLE


def test_load_empty_file_is_empty_list(store_path):
    store_path.write_text("", encoding="utf-8")
    assert RecordStore(store_path).load() == []


def test_load_null_is_empty_list(store_path):
    store_path.write_text("null", encoding="utf-8")
    assert RecordStore(store_path).load() == []


def test_load_reads_records_in_order(seeded_store):
    assert seeded_store.load() == [
        Record(1, "Drill", Status.OPERATIONAL),
        Record(2, "Hammer", Status.DAMAGED),
    ]


def test_load_accepts_any_field_order_and_status_case(store_path):
    write_records(store_path, [{"name": "Lathe", "status": "needsmaintenance", "id": 7}])
    assert RecordStore(store_path).load() == [Record(7, "Lathe", Status.NEEDS_MAINTENANCE)]


def test_load_invalid_json_fails(store_path):
    store_path.write_text("[{", encoding="utf-8")
    result = RecordStore(store_path).load()
    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.STORAGE_UNAVAILABLE


def test_load_non_list_fails(store_path):
    store_path.write_text('{"id": 1}', encoding="utf-8")
    assert isinstance(RecordStore(store_path).load(), Failure)


def test_load_unknown_status_fails(store_path):
    write_records(store_path, [{"id": 1, "status": "Broken", "name": "Drill"}])
    result = RecordStore(store_path).load()
    assert isinstance(result, Failure)
    assert "position 0" in result.message


def test_load_numeric_status_fails(store_path):
    write_records(store_path, [{"id": 1, "status": 0, "name": "Drill"}])
    assert isinstance(RecordStore(store_path).load(), Failure)


def test_load_missing_field_fails(store_path):
    write_records(store_path, [{"id": 1, "status": "Operational"}])
    assert isinstance(RecordStore(store_path).load(), Failure)


def test_load_blank_name_fails(store_path):
    write_records(store_path, [{"id": 1, "status": "Operational", "name": "  "}])
    assert isinstance(RecordStore(store_path).load(), Failure)


def test_load_duplicate_ids_fails(store_path):
    write_records(store_path, [
        {"id": 1, "status": "Operational", "name": "Drill"},
        {"id": 1, "status": "Damaged", "name": "Hammer"},
    ])
    result = RecordStore(store_path).load()
    assert isinstance(result, Failure)
    assert "duplicate" in result.message


# ─── save ────────────────────────────────────────────────────────

def test_save_writes_status_names(store):
    assert store.save([Record(1, "Drill", Status.NEEDS_MAINTENANCE)]) is None
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data == [{"id": 1, "status": "NeedsMaintenance", "name": "Drill"}]


def test_save_overwrites_whole_file(seeded_store):
    seeded_store.save([Record(5, "Saw", Status.MISSING)])
    assert seeded_store.load() == [Record(5, "Saw", Status.MISSING)]


def test_save_leaves_no_temp_files(store):
    store.save([Record(1, "Drill", Status.OPERATIONAL)])
    assert [p.name for p in store.path.parent.iterdir()] == ["equipment.json"]


def test_save_load_is_idempotent(seeded_store):
    seeded_store.save(seeded_store.load())
    first = seeded_store.path.read_bytes()
    seeded_store.save(seeded_store.load())
    assert seeded_store.path.read_bytes() == first


def test_save_into_unwritable_location_fails(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    result = RecordStore(blocker / "equipment.json").save([])
    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.STORAGE_UNAVAILABLE


def test_save_failure_survives_temp_cleanup_error(store, monkeypatch):
    def refuse(*args, **kwargs):
        raise PermissionError("read-only")

    monkeypatch.setattr(storage.os, "replace", refuse)
    monkeypatch.setattr(storage.os, "unlink", refuse)
    result = store.save([Record(1, "Drill", Status.OPERATIONAL)])
    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.STORAGE_UNAVAILABLE
    assert store.load() == []


# ─── initialize ──────────────────────────────────────────────────

def test_initialize_creates_empty_file(missing_store):
    assert missing_store.initialize() is None
    assert missing_store.load() == []


def test_initialize_keeps_existing_records(seeded_store):
    assert seeded_store.initialize() is None
    assert len(seeded_store.load()) == 2


# ─── get_records_path ────────────────────────────────────────────

def test_get_records_path_env_override(monkeypatch, tmp_path):
    target = tmp_path / "custom.json"
    monkeypatch.setenv(RECORDS_FILE_ENV, str(target))
    assert get_records_path() == target


def test_get_records_path_default(monkeypatch):
    monkeypatch.delenv(RECORDS_FILE_ENV, raising=False)
    path = get_records_path()
    assert path.name == "equipment.json"
    assert path.parent.name == "data"
    assert path.parent.parent == Path(storage.__file__).resolve().parent.parent
