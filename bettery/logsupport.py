"""Category-filtered debug logging."""

from __future__ import annotations

import enum
import logging


class LogCategory(enum.IntFlag):
    """Bit masks selecting which parts of the program produce debug output."""

    NONE = 0x00000000
    FUNCTIONS = 0x00000001
    FACEUPDATE = 0x00000002
    BATTERY = 0x00000004
    APPSYNC = 0x00000008
    STORAGE_SU = 0x00000020
    STORAGE = 0x00000030
    ALL = 0xFFFFFFFF


ENABLED = LogCategory.NONE
"""Categories whose messages are emitted."""

_logger = logging.getLogger("bettery")


def _category_label(category: LogCategory) -> str:
    return category.name or hex(int(category))


def log(category: LogCategory | int, message: str) -> bool:
    """Emit *message* if every bit of *category* is enabled; return whether it was."""
    category = LogCategory(category)
    if (ENABLED & category) != category:
        return False
    _logger.debug("%s:%s", _category_label(category), message)
    return True


def log_battery_state(state) -> None:
    """Log the fields of a battery charge state."""
    log(LogCategory.BATTERY, f"s.charge_percent: {int(state.charge_percent)}")
    log(LogCategory.BATTERY, f"s.is_charging: {int(state.is_charging)}")
    log(LogCategory.BATTERY, f"s.is_plugged: {int(state.is_plugged)}")