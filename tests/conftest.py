"""Root conftest — shared fixtures for backing files and stores."""

import json

import pytest

from equipment_tracker.storage import RecordStore


def write_records(path, records):
    """Helper: write raw record dicts to a backing file."""
    path.write_text(json.dumps(records), encoding="utf-8")


@pytest.fixture
def store_path(tmp_path):
    path = tmp_path / "data" / "equipment.json"
    path.parent.mkdir()
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def store(store_path):
    return RecordStore(store_path)


@pytest.fixture
def missing_store(tmp_path):
    return RecordStore(tmp_path / "nowhere" / "equipment.json")


@pytest.fixture
def seeded_store(store_path):
    write_records(store_path, [
        {"id": 1, "status": "Operational", "name": "Drill"},
        {"id": 2, "status": "Damaged", "name": "Hammer"},
    ])
    return RecordStore(store_path)
