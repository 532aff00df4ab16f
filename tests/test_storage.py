import json

import pytest

from bettery.estimate_data import BatteryChargeState, default_estimate_data
from bettery.storage import BatteryDisplay, Storage


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "storage.json"


def test_defaults_on_first_open(store_path):
    storage = Storage(store_path)
    assert storage.selected_version == "Regular"
    assert storage.last_full_timestamp == -1
    assert storage.battery_display == (
        BatteryDisplay.LEVEL | BatteryDisplay.ESTIMATE | BatteryDisplay.RUNTIME
    )
    assert storage.battery_estimate == default_estimate_data()


def test_defaults_written_to_file(store_path):
    Storage(store_path)
    records = json.loads(store_path.read_text(encoding="utf-8"))
    assert records["0"] == "Regular"
    assert records["65538"] == -1
    assert records["65539"] == 7
    assert records["65537"] == default_estimate_data().to_dict()


def test_persist_round_trip(store_path):
    storage = Storage(store_path)
    storage.selected_version = "Inverted"
    storage.last_full_timestamp = 1_700_000_000
    storage.battery_display = BatteryDisplay.LEVEL
    storage.battery_estimate.previous_state = BatteryChargeState(80, False, False)
    storage.battery_estimate.average_data[0] = 5000
    storage.persist()

    reopened = Storage(store_path)
    assert reopened.selected_version == "Inverted"
    assert reopened.last_full_timestamp == 1_700_000_000
    assert reopened.battery_display == BatteryDisplay.LEVEL
    assert reopened.battery_estimate == storage.battery_estimate


def test_context_manager_persists_on_exit(store_path):
    with Storage(store_path) as storage:
        storage.last_full_timestamp = 42
    assert Storage(store_path).last_full_timestamp == 42


def test_close_persists(store_path):
    storage = Storage(store_path)
    storage.battery_display = BatteryDisplay.ESTIMATE | BatteryDisplay.RUNTIME
    storage.close()
    assert Storage(store_path).battery_display == BatteryDisplay.ESTIMATE | BatteryDisplay.RUNTIME


def test_existing_values_kept(store_path):
    store_path.write_text(json.dumps({"0": "Custom", "65539": 1}), encoding="utf-8")
    storage = Storage(store_path)
    assert storage.selected_version == "Custom"
    assert storage.battery_display == BatteryDisplay.LEVEL
    assert storage.last_full_timestamp == -1


def test_version_truncated(store_path):
    storage = Storage(store_path)
    storage.selected_version = "v" * 100
    storage.persist()
    assert Storage(store_path).selected_version == "v" * 63


def test_corrupt_file_raises(store_path):
    store_path.write_text("not json", encoding="utf-8")
    with pytest.raises(ValueError):
        Storage(store_path)


def test_non_object_file_raises(store_path):
    store_path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        Storage(store_path)


def test_bad_estimate_record_raises(store_path):
    store_path.write_text(json.dumps({"65537": {"average_data": []}}), encoding="utf-8")
    with pytest.raises(ValueError):
        Storage(store_path)