"""Binary search over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Iterable, Sequence


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending sequence ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def contains(values: Iterable[Any], target: Any) -> bool:
    """Sort ``values`` and report whether ``target`` occurs among them."""
    ordered = sorted(values)
    position = bisect_left(ordered, target)
    return position < len(ordered) and ordered[position] == target