"""The 0-1 knapsack problem."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the largest total value of items whose weights fit in ``capacity``.

    Each item may be taken at most once. Raises ValueError when ``weights``
    and ``values`` differ in length.
    """
    weights = tuple(weights)
    values = tuple(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        without = best(count - 1, room)
        if weight > room:
            return without
        return max(value + best(count - 1, room - weight), without)

    return best(len(weights), capacity)