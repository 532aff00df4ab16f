import pytest

from bettery.estimate_data import BatteryChargeState
from bettery.storage import Storage
from bettery.watchface import WatchfaceBase


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def make_base(path, counter=None, state=BatteryChargeState(70)):
    return WatchfaceBase(path, counter, lambda: True, lambda: state, lambda: 5000)


def test_start_notifies_for_each_monitor(tmp_path):
    counter = Counter()
    base = make_base(tmp_path / "s.json", counter)
    base.start()
    assert counter.calls == 2
    assert base.bluetooth.state_string == "bt ok"
    assert base.battery.state == BatteryChargeState(70)


def test_start_creates_storage_file(tmp_path):
    path = tmp_path / "s.json"
    base = make_base(path)
    base.start()
    assert path.exists()
    assert base.storage.selected_version == "Regular"


def test_stop_persists_state(tmp_path):
    path = tmp_path / "s.json"
    base = make_base(path, state=BatteryChargeState(40))
    base.start()
    base.stop()
    assert base.started is False
    assert Storage(path).battery_estimate.previous_state == BatteryChargeState(40)


def test_stop_before_start_raises(tmp_path):
    base = make_base(tmp_path / "s.json")
    with pytest.raises(RuntimeError):
        base.stop()


def test_double_start_raises(tmp_path):
    base = make_base(tmp_path / "s.json")
    base.start()
    with pytest.raises(RuntimeError):
        base.start()


def test_on_change_can_be_set_later(tmp_path):
    base = make_base(tmp_path / "s.json")
    base.start()
    counter = Counter()
    base.on_change = counter
    base.bluetooth.handle_event(False)
    assert counter.calls == 1