"""Persistent data used to estimate the remaining battery runtime."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .formatting import format_interval
from .logsupport import LogCategory, log

AVERAGE_DATA_NUM = 11
"""Number of recorded 10%-drop durations."""

_DEFAULT_AVERAGE_DATA = (
    43052, 43082, 43112, 43142, 43172, 43202, 43232, 43262, 43292, 43322, 43352,
)


@dataclass(frozen=True)
class BatteryChargeState:
    """A snapshot of the battery: charge level and power connection."""

    charge_percent: int
    is_charging: bool = False
    is_plugged: bool = False

    def to_dict(self) -> dict:
        return {
            "charge_percent": self.charge_percent,
            "is_charging": self.is_charging,
            "is_plugged": self.is_plugged,
        }

    @classmethod
    def from_dict(cls, data: dict) -> BatteryChargeState:
        try:
            return cls(
                charge_percent=int(data["charge_percent"]),
                is_charging=bool(data["is_charging"]),
                is_plugged=bool(data["is_plugged"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid battery charge state: {data!r}") from exc


@dataclass
class BatteryEstimateData:
    """Last seen battery state plus a ring of discharge durations."""

    previous_state_timestamp: int
    previous_state: BatteryChargeState
    average_data_write_head: int
    average_data: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.average_data = [int(v) for v in self.average_data]
        if len(self.average_data) != AVERAGE_DATA_NUM:
            raise ValueError(
                f"average_data must hold {AVERAGE_DATA_NUM} values, "
                f"got {len(self.average_data)}"
            )

    def to_dict(self) -> dict:
        return {
            "previous_state_timestamp": self.previous_state_timestamp,
            "previous_state": self.previous_state.to_dict(),
            "average_data_write_head": self.average_data_write_head,
            "average_data": list(self.average_data),
        }

    @classmethod
    def from_dict(cls, data: dict) -> BatteryEstimateData:
        try:
            return cls(
                previous_state_timestamp=int(data["previous_state_timestamp"]),
                previous_state=BatteryChargeState.from_dict(data["previous_state"]),
                average_data_write_head=int(data["average_data_write_head"]),
                average_data=list(data["average_data"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid battery estimate data: {data!r}") from exc


def default_estimate_data() -> BatteryEstimateData:
    """Initial estimate data: no known previous state, roughly 12h per 10%."""
    return BatteryEstimateData(
        previous_state_timestamp=0,
        previous_state=BatteryChargeState(255, False, False),
        average_data_write_head=AVERAGE_DATA_NUM - 1,
        average_data=list(_DEFAULT_AVERAGE_DATA),
    )


def log_average_data(data: Iterable[int], category: LogCategory | int) -> None:
    """Log each duration in *data* under *category*."""
    for index, value in enumerate(data):
        log(
            category,
            f"storage.battery_estimate.averate_data[{index}]: {format_interval(value)}",
        )