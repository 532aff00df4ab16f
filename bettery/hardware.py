"""Bluetooth and battery state monitors that notify on change."""

from __future__ import annotations

from collections.abc import Callable

from .estimate import BatteryEstimator
from .estimate_data import BatteryChargeState
from .formatting import StringBuffer
from .logsupport import log_battery_state
from .storage import BatteryDisplay, Storage

HardwareChangedCallback = Callable[[], None]


class BluetoothMonitor:
    """Keeps the Bluetooth connection state and its description."""

    def __init__(
        self, peek: Callable[[], bool], callback: HardwareChangedCallback
    ) -> None:
        self._peek = peek
        self._callback = callback
        self.connected = False
        self.state_string = ""
        self.active = False

    def start(self) -> None:
        """Read the current state, report it and begin accepting events."""
        self.handle_event(bool(self._peek()))
        self.active = True

    def stop(self) -> None:
        """Stop accepting events."""
        self.active = False

    def handle_event(self, connected: bool) -> None:
        """Record a connection change and notify the callback."""
        self.connected = bool(connected)
        self.state_string = "bt ok" if self.connected else "no bt"
        self._callback()


class BatteryMonitor:
    """Keeps the battery state, feeds the estimator and describes the state."""

    def __init__(
        self,
        storage: Storage,
        estimator: BatteryEstimator,
        peek: Callable[[], BatteryChargeState],
        callback: HardwareChangedCallback,
    ) -> None:
        self.storage = storage
        self.estimator = estimator
        self._peek = peek
        self._callback = callback
        self.state: BatteryChargeState | None = None
        self.active = False

    def start(self) -> None:
        """Read the current state, report it and begin accepting events."""
        self.handle_event(self._peek())
        self.active = True

    def stop(self) -> None:
        """Stop accepting events."""
        self.active = False

    def handle_event(self, state: BatteryChargeState) -> None:
        """Record a battery change, update the estimate and notify the callback."""
        self.state = state
        log_battery_state(state)
        self.estimator.update(state)
        self._callback()

    def state_string(self) -> str:
        """Describe the charge level, power connection and estimate."""
        buffer = StringBuffer()
        state = self.state
        if state is not None and self.storage.battery_display & BatteryDisplay.LEVEL:
            buffer.append_format("%d%%", state.charge_percent)
            if state.is_plugged:
                buffer.append(" | p,c" if state.is_charging else " | p")
            else:
                buffer.append(self.estimator.estimate_string())
        return str(buffer)