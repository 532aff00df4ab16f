"""Estimate of the remaining battery runtime from recorded discharge durations."""

from __future__ import annotations

import time
from collections.abc import Callable

from .estimate_data import AVERAGE_DATA_NUM, BatteryChargeState, log_average_data
from .formatting import StringBuffer
from .logsupport import LogCategory, log
from .quicksort import quicksort
from .storage import BatteryDisplay, Storage

MAX_STATE_AGE = 259200
"""A previous state older than this (three days) is not used for an estimate."""

_UINT_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


class BatteryEstimator:
    """Tracks battery drops in 10% steps and derives the remaining runtime."""

    def __init__(self, storage: Storage, clock: Callable[[], float] = time.time) -> None:
        self.storage = storage
        self._clock = clock
        self.secs = -1
        """Estimated remaining seconds, or -1 while unknown."""

    def _now(self) -> int:
        return int(self._clock())

    def _blocking_reasons(
        self, current: BatteryChargeState, previous: BatteryChargeState, now: int
    ) -> list[str]:
        reasons = []
        if current.is_charging or previous.is_charging:
            reasons.append("was or is charging")
        if current.is_plugged or previous.is_plugged:
            reasons.append("was or is plugged")
        # The drop from 100% to 90% happens quickly, so it is excluded.
        if current.charge_percent == 90:
            reasons.append("current is 90%")
        if current.charge_percent != previous.charge_percent - 10:
            reasons.append("drop is not 10%")
        if now - MAX_STATE_AGE >= self.storage.battery_estimate.previous_state_timestamp:
            reasons.append("pervious state is too old")
        return reasons

    def update(self, current: BatteryChargeState) -> int:
        """Feed a new battery state; return the new estimate in seconds."""
        storage = self.storage
        data = storage.battery_estimate
        previous = data.previous_state
        now = self._now()

        needs_persistence = False
        reasons = self._blocking_reasons(current, previous, now)
        if reasons:
            for reason in reasons:
                log(LogCategory.BATTERY, f"not updating estimate, {reason}")
        else:
            log(LogCategory.BATTERY, "pervious and current state are valid, updating average data")
            head = data.average_data_write_head + 1
            if head >= AVERAGE_DATA_NUM:
                head = 0
            data.average_data_write_head = head
            data.average_data[head] = now - data.previous_state_timestamp
            needs_persistence = True
            log(
                LogCategory.BATTERY,
                f"battery_estimate.averate_data[{head}] = {data.average_data[head]}",
            )

        if (previous.is_plugged and not previous.is_charging) and (
            not current.is_plugged and current.charge_percent == 100
        ):
            log(LogCategory.BATTERY, "recording timestamp of full charge")
            storage.last_full_timestamp = now
            needs_persistence = True
        elif current.is_plugged:
            log(LogCategory.BATTERY, "invalidating timestamp of full charge")
            storage.last_full_timestamp = -1
            needs_persistence = True

        if previous != current:
            log(LogCategory.BATTERY, "state has changed, recording new")
            data.previous_state = current
            data.previous_state_timestamp = now
            needs_persistence = True

        if needs_persistence:
            storage.persist()

        remaining = data.previous_state.charge_percent // 10

        ordered = quicksort(data.average_data)
        total = (ordered[AVERAGE_DATA_NUM // 2] * AVERAGE_DATA_NUM) & _UINT_MASK
        log_average_data(ordered, LogCategory.BATTERY)
        log(LogCategory.BATTERY, f"sum is {total}")

        if storage.last_full_timestamp != -1 and remaining <= 9:
            since_charge = now - storage.last_full_timestamp
            weight = 10 - remaining
            log(
                LogCategory.BATTERY,
                f"using time since last charge {since_charge} with weight {weight}",
            )
            average = ((total + since_charge) & _UINT_MASK) // (AVERAGE_DATA_NUM + weight)
        else:
            log(LogCategory.BATTERY, "not using last charged time")
            average = total // AVERAGE_DATA_NUM

        self.secs = _to_int32(remaining * average)
        log(LogCategory.BATTERY, f"battery_estimate_sb: {self.estimate_string()}")
        return self.secs

    def estimate_string(self) -> str:
        """Describe the estimate and the runtime since the last full charge."""
        buffer = StringBuffer()
        display = self.storage.battery_display
        if display & BatteryDisplay.ESTIMATE:
            buffer.append(" | ")
            if self.secs != -1:
                buffer.append_interval(self.secs)
            else:
                buffer.append("-")
        if display & BatteryDisplay.RUNTIME:
            buffer.append(" | ")
            if self.storage.last_full_timestamp != -1:
                buffer.append_interval(self._now() - self.storage.last_full_timestamp)
            else:
                buffer.append("-")
        return str(buffer)