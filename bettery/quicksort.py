"""Quicksort with a middle-element pivot."""

from __future__ import annotations

from collections.abc import Iterable


def quicksort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list of *values*, partitioned around the middle element."""
    items = list(values)
    if len(items) < 2:
        return items
    pivot = items[(len(items) - 1) // 2]
    smaller = [v for v in items if v < pivot]
    equal = [v for v in items if v == pivot]
    larger = [v for v in items if v > pivot]
    return quicksort(smaller) + equal + quicksort(larger)