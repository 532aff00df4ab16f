import pytest

from bettery.estimate import BatteryEstimator
from bettery.estimate_data import BatteryChargeState
from bettery.hardware import BatteryMonitor, BluetoothMonitor
from bettery.storage import BatteryDisplay, Storage


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def storage(tmp_path):
    return Storage(tmp_path / "store.json")


def make_battery(storage, state):
    counter = Counter()
    estimator = BatteryEstimator(storage, lambda: 1000)
    monitor = BatteryMonitor(storage, estimator, lambda: state, counter)
    return monitor, counter


def test_bluetooth_start_connected():
    counter = Counter()
    monitor = BluetoothMonitor(lambda: True, counter)
    monitor.start()
    assert monitor.connected is True
    assert monitor.state_string == "bt ok"
    assert counter.calls == 1
    assert monitor.active is True


def test_bluetooth_event_disconnect():
    counter = Counter()
    monitor = BluetoothMonitor(lambda: True, counter)
    monitor.start()
    monitor.handle_event(False)
    assert monitor.state_string == "no bt"
    assert monitor.connected is False
    assert counter.calls == 2


def test_bluetooth_stop():
    monitor = BluetoothMonitor(lambda: False, Counter())
    monitor.start()
    monitor.stop()
    assert monitor.active is False


def test_battery_start_records_state(storage):
    state = BatteryChargeState(50)
    monitor, counter = make_battery(storage, state)
    monitor.start()
    assert monitor.state == state
    assert counter.calls == 1
    assert storage.battery_estimate.previous_state == state
    assert monitor.estimator.secs != -1


def test_battery_state_string_level_only(storage):
    storage.battery_display = BatteryDisplay.LEVEL
    monitor, _ = make_battery(storage, BatteryChargeState(50))
    monitor.start()
    assert monitor.state_string() == "50%"


@pytest.mark.parametrize(
    "charging, expected",
    [(True, "50% | p,c"), (False, "50% | p")],
)
def test_battery_state_string_plugged(storage, charging, expected):
    monitor, _ = make_battery(
        storage, BatteryChargeState(50, is_charging=charging, is_plugged=True)
    )
    monitor.start()
    assert monitor.state_string() == expected


def test_battery_state_string_with_estimate(storage):
    storage.battery_display = BatteryDisplay.LEVEL | BatteryDisplay.ESTIMATE
    monitor, _ = make_battery(storage, BatteryChargeState(50))
    monitor.start()
    assert monitor.state_string() == "50%" + monitor.estimator.estimate_string()
    assert monitor.state_string().startswith("50% | ")


def test_battery_state_string_hidden(storage):
    storage.battery_display = BatteryDisplay.ESTIMATE
    monitor, _ = make_battery(storage, BatteryChargeState(50))
    monitor.start()
    assert monitor.state_string() == ""


def test_battery_event_notifies(storage):
    monitor, counter = make_battery(storage, BatteryChargeState(50))
    monitor.start()
    monitor.handle_event(BatteryChargeState(40))
    assert counter.calls == 2
    assert monitor.state == BatteryChargeState(40)