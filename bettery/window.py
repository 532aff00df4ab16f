"""The watch face screen: time, date, connection and battery details."""

from __future__ import annotations

import time
from collections.abc import Callable

from .estimate_data import BatteryChargeState
from .formatting import format_interval
from .logsupport import LogCategory, log
from .watchface import WatchfaceBase

_BATTERY_LABEL_MAX = 5

_INITIAL_TEXTS = {
    "time": "00:00",
    "day": "Mon",
    "date": "2.5.2015",
    "outbound": "Text layer",
    "inbound": "Text layer",
    "bt": "Text layer",
    "battery": "Text layer",
}


def format_battery_label(state: BatteryChargeState) -> str:
    """Short battery label, cut to the five characters the screen field holds."""
    if state.is_plugged:
        text = "charging" if state.is_charging else "full"
    else:
        text = f"{state.charge_percent}%"
    return text[:_BATTERY_LABEL_MAX]


class WatchWindow:
    """Holds the texts of the screen and refreshes them from the watch state."""

    def __init__(
        self,
        base: WatchfaceBase,
        clock: Callable[[], float] = time.time,
        is_24h: bool = True,
    ) -> None:
        self.base = base
        self._clock = clock
        self.is_24h = is_24h
        self.texts: dict[str, str] = {}
        self.bt_icon: str | None = None
        self.visible = False
        self._updates_enabled = False

    def show(self) -> None:
        """Build the screen, enable updates and draw the current state."""
        self.texts = dict(_INITIAL_TEXTS)
        self.bt_icon = None
        self.visible = True
        self._updates_enabled = True
        self.update_time()

    def hide(self) -> None:
        """Remove the screen; further updates are ignored."""
        self.visible = False
        self._updates_enabled = False
        self.texts = {}
        self.bt_icon = None

    def update_time(self) -> bool:
        """Refresh every text from the clock and watch state; return whether it ran."""
        if not self._updates_enabled:
            log(LogCategory.FACEUPDATE, "update_time(): not done, not enabled")
            return False

        now = int(self._clock())
        tick_time = time.localtime(now)

        self.texts["time"] = time.strftime(
            "%H:%M" if self.is_24h else "%I:%M", tick_time
        )
        weekday = (tick_time.tm_wday + 1 - 1) % 7
        log(LogCategory.FACEUPDATE, f"update_time(): day: {weekday}")
        self.texts["date"] = time.strftime("%a, %d. %b", tick_time)

        bluetooth = self.base.bluetooth
        self.texts["bt"] = bluetooth.state_string
        self.bt_icon = "bt_active" if bluetooth.connected else "bt_passive"

        state = self.base.battery.state
        self.texts["battery"] = format_battery_label(state)

        storage = self.base.storage
        if storage.last_full_timestamp != -1:
            self.texts["outbound"] = format_interval(now - storage.last_full_timestamp)
        elif state.is_plugged:
            self.texts["outbound"] = "plugged"
        else:
            self.texts["outbound"] = "-"
        self.texts["inbound"] = format_interval(self.base.estimator.secs)
        return True

    def render(self) -> str:
        """Return the visible screen as text."""
        if not self.visible:
            raise RuntimeError("window is not shown")
        t = self.texts
        return "\n".join(
            [
                t["time"],
                t["date"],
                f"out {t['outbound']} | {t['bt']}",
                f"in {t['inbound']} | {t['battery']}",
            ]
        )