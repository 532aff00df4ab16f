"""Setup and teardown of storage and hardware monitors."""

from __future__ import annotations

import os
import time
from collections.abc import Callable

from .estimate import BatteryEstimator
from .estimate_data import BatteryChargeState
from .hardware import BatteryMonitor, BluetoothMonitor
from .storage import Storage


class WatchfaceBase:
    """Owns the storage, the estimator and the hardware monitors."""

    def __init__(
        self,
        storage_path: str | os.PathLike,
        on_change: Callable[[], object] | None,
        bluetooth_peek: Callable[[], bool],
        battery_peek: Callable[[], BatteryChargeState],
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.storage_path = storage_path
        self.on_change = on_change
        self._bluetooth_peek = bluetooth_peek
        self._battery_peek = battery_peek
        self.clock = clock
        self.storage: Storage | None = None
        self.estimator: BatteryEstimator | None = None
        self.bluetooth: BluetoothMonitor | None = None
        self.battery: BatteryMonitor | None = None

    @property
    def started(self) -> bool:
        return self.storage is not None

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def start(self) -> None:
        """Open the storage and start the Bluetooth and battery monitors."""
        if self.started:
            raise RuntimeError("watchface base already started")
        self.storage = Storage(self.storage_path)
        self.estimator = BatteryEstimator(self.storage, self.clock)
        self.bluetooth = BluetoothMonitor(self._bluetooth_peek, self._notify)
        self.battery = BatteryMonitor(
            self.storage, self.estimator, self._battery_peek, self._notify
        )
        self.bluetooth.start()
        self.battery.start()

    def stop(self) -> None:
        """Stop the monitors and write the storage back."""
        if not self.started:
            raise RuntimeError("watchface base not started")
        self.battery.stop()
        self.bluetooth.stop()
        self.storage.close()
        self.storage = None