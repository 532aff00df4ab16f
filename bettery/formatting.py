"""Bounded text buffer and compact time-interval formatting."""

from __future__ import annotations

MAXLEN = 80
"""Default buffer size; a buffer holds at most ``maxlen - 1`` characters."""

_UINT_MASK = 0xFFFFFFFF


def format_interval(seconds: int) -> str:
    """Render a duration in seconds as ``"Nm"``, ``"HhM"`` or ``"DdH"``.

    Seconds are dropped. The value is taken as an unsigned 32-bit quantity,
    so negative durations wrap around.
    """
    value = int(seconds) & _UINT_MASK
    total_minutes = value // 60
    minutes = total_minutes % 60
    total_hours = total_minutes // 60
    hours = total_hours % 24
    days = total_hours // 24

    if days == 0 and hours == 0:
        return f"{minutes}m"
    if days == 0:
        return f"{hours}h{minutes}"
    return f"{days}d{hours}"


class StringBuffer:
    """A text buffer that silently truncates once its capacity is reached."""

    def __init__(self, maxlen: int = MAXLEN) -> None:
        if maxlen < 1:
            raise ValueError("maxlen must be at least 1")
        self.maxlen = maxlen
        self._parts: list[str] = []
        self._length = 0

    @property
    def capacity(self) -> int:
        """Number of characters the buffer can hold."""
        return self.maxlen - 1

    @property
    def free(self) -> int:
        """Number of characters that can still be appended."""
        return self.capacity - self._length

    def clear(self) -> None:
        """Empty the buffer."""
        self._parts.clear()
        self._length = 0

    def append(self, value: str) -> None:
        """Append text, cutting it short if the buffer would overflow."""
        free = self.free
        if free <= 0:
            return
        text = str(value)[:free]
        self._parts.append(text)
        self._length += len(text)

    def append_int(self, value: int) -> None:
        """Append an integer in decimal."""
        self.append(f"{int(value)}")

    def append_format(self, fmt: str, value) -> None:
        """Append ``fmt % value``."""
        self.append(fmt % value)

    def append_interval(self, seconds: int) -> None:
        """Append a duration rendered by :func:`format_interval`."""
        self.append(format_interval(seconds))

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "".join(self._parts)