"""Settings and battery history persisted to a JSON file."""

from __future__ import annotations

import enum
import json
import os
import tempfile
from pathlib import Path

from .estimate_data import BatteryEstimateData, default_estimate_data, log_average_data
from .logsupport import LogCategory, log

_VERSION_MAXLEN = 63


class BatteryDisplay(enum.IntFlag):
    """Which battery details are shown."""

    LEVEL = 0x01
    ESTIMATE = 0x02
    RUNTIME = 0x04


class _Key(enum.IntEnum):
    SELECTED_VERSION = 0x0
    BATTERY_ESTIMATE = 0x10001
    LAST_FULL_TIMESTAMP = 0x10002
    BATTERY_DISPLAY = 0x10003

    @property
    def slot(self) -> str:
        return str(int(self))


_DEFAULTS = {
    _Key.SELECTED_VERSION: "Regular",
    _Key.BATTERY_ESTIMATE: None,  # filled from default_estimate_data()
    _Key.LAST_FULL_TIMESTAMP: -1,
    _Key.BATTERY_DISPLAY: 7,
}


class Storage:
    """Keyed persistent store; missing entries are created with defaults on open."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._records: dict[str, object] = self._load()

        created = False
        for key, default in _DEFAULTS.items():
            if key.slot not in self._records:
                if key is _Key.BATTERY_ESTIMATE:
                    default = default_estimate_data().to_dict()
                self._records[key.slot] = default
                log(LogCategory.STORAGE, f"storage_init(): init {int(key)}")
                created = True
        if created:
            self._write()

        self.selected_version: str = str(self._records[_Key.SELECTED_VERSION.slot])[
            :_VERSION_MAXLEN
        ]
        self.battery_estimate: BatteryEstimateData = BatteryEstimateData.from_dict(
            self._records[_Key.BATTERY_ESTIMATE.slot]
        )
        self.last_full_timestamp: int = int(self._records[_Key.LAST_FULL_TIMESTAMP.slot])
        self.battery_display = BatteryDisplay(int(self._records[_Key.BATTERY_DISPLAY.slot]))

        self._log_contents(LogCategory.STORAGE_SU)

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        with self.path.open(encoding="utf-8") as handle:
            records = json.load(handle)
        if not isinstance(records, dict):
            raise ValueError(f"{self.path}: storage file must hold a JSON object")
        return records

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".storage-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(self._records, handle, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _log_contents(self, category: LogCategory) -> None:
        be = self.battery_estimate
        log(category, f"storage.selectedVersion: {self.selected_version}")
        log(
            category,
            f"storage.battery_estimate.previous_state_timestamp: {be.previous_state_timestamp}",
        )
        state = be.previous_state
        log(
            category,
            f"storage.battery_estimate.previous_state.charge_percent: {state.charge_percent}",
        )
        log(
            category,
            f"storage.battery_estimate.previous_state.is_charging: {int(state.is_charging)}",
        )
        log(
            category,
            f"storage.battery_estimate.previous_state.is_plugged: {int(state.is_plugged)}",
        )
        log(
            category,
            f"storage.battery_estimate.average_data_write_head: {be.average_data_write_head}",
        )
        log_average_data(be.average_data, category)
        log(category, f"storage.last_full_timestamp: {self.last_full_timestamp}")
        log(category, f"storage.battery_display: {int(self.battery_display)}")

    def persist(self) -> None:
        """Write all values back to the file."""
        self._records[_Key.SELECTED_VERSION.slot] = self.selected_version[:_VERSION_MAXLEN]
        self._records[_Key.BATTERY_ESTIMATE.slot] = self.battery_estimate.to_dict()
        self._records[_Key.LAST_FULL_TIMESTAMP.slot] = int(self.last_full_timestamp)
        self._records[_Key.BATTERY_DISPLAY.slot] = int(self.battery_display)
        self._write()
        self._log_contents(LogCategory.STORAGE)

    def close(self) -> None:
        """Persist the values; the store needs no other teardown."""
        self.persist()

    def __enter__(self) -> Storage:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()