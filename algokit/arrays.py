"""Array problems: sums, jumps, spans, scheduling and sparse storage."""

from __future__ import annotations

import heapq
from collections import defaultdict
from itertools import accumulate
from typing import Iterable, Sequence

_DAY_SLOTS = 2361
_LAST_MINUTE = 2359


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triple of elements that sums to zero.

    Triples come out ordered by their first, then second element.
    """
    items = sorted(nums)
    count = len(items)
    result: list[list[int]] = []
    for i in range(count - 2):
        first = items[i]
        if first > 0:
            break
        if i > 0 and first == items[i - 1]:
            continue
        low, high = i + 1, count - 1
        while low < high:
            total = first + items[low] + items[high]
            if total < 0:
                low += 1
            elif total > 0:
                high -= 1
            else:
                result.append([first, items[low], items[high]])
                high -= 1
                while low < high and items[high] == items[high + 1]:
                    high -= 1
                low += 1
                while low < high and items[low] == items[low - 1]:
                    low += 1
    return result


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first position to the last.

    ``nums[i]`` is the longest jump allowed from position ``i``.
    """
    items = list(nums)
    last = len(items) - 1
    reach = boundary = jumps = 0
    for index, step in enumerate(items[:last]):
        reach = max(reach, index + step)
        if reach >= last:
            return jumps + 1
        if index == boundary:
            boundary = reach
            jumps += 1
    return jumps


def stock_span(prices: Sequence[int]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price no higher."""
    spans: list[int] = []
    for day, price in enumerate(prices):
        span = 1
        while day - span >= 0 and price >= prices[day - span]:
            span += spans[day - span]
        spans.append(span)
    return spans


def avoid_flood(rains: Sequence[int]) -> list[int]:
    """Plan which lake to dry on each dry day so that no lake floods.

    ``rains[i]`` names the lake it rains on, or 0 for a dry day. Rain days
    get -1 in the plan, dry days the lake to dry. An empty list means a
    flood cannot be avoided.
    """
    upcoming: dict[int, list[int]] = defaultdict(list)
    for day in reversed(range(len(rains))):
        upcoming[rains[day]].append(day)

    due: list[int] = []
    plan: list[int] = []
    for day, lake in enumerate(rains):
        if lake:
            days = upcoming[lake]
            if len(days) >= 2:
                days.pop()
                heapq.heappush(due, days[-1])
            plan.append(-1)
        elif due:
            next_rain = heapq.heappop(due)
            if next_rain < day:
                return []
            plan.append(rains[next_rain])
        else:
            plan.append(1)
    return [] if due else plan


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Return the index of the furthest building reachable.

    Each climb is paid for with one ladder or with as many bricks as it is tall.
    """
    last = len(heights) - 1
    climbs: list[int] = []
    index = 0
    while len(climbs) < ladders and index < last:
        diff = heights[index + 1] - heights[index]
        if diff > 0:
            heapq.heappush(climbs, diff)
        index += 1
    while index < last:
        diff = heights[index + 1] - heights[index]
        if diff > 0:
            if climbs and climbs[0] < diff:
                bricks -= heapq.heapreplace(climbs, diff)
            else:
                bricks -= diff
        if bricks < 0:
            return index
        index += 1
    return index


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``[i, j]`` of the first pair summing to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return [seen[partner], index]
        seen[value] = index
    return []


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the number of platforms a station needs for the given trains.

    Times are 24-hour clock values from 0 to 2359; a train occupies its
    platform from arrival through departure inclusive. Raises ValueError
    on mismatched lengths or times out of range.
    """
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    deltas = [0] * _DAY_SLOTS
    for arrival, departure in zip(arrivals, departures):
        for time in (arrival, departure):
            if not 0 <= time <= _LAST_MINUTE:
                raise ValueError(f"time {time} is outside 0..{_LAST_MINUTE}")
        deltas[arrival] += 1
        deltas[departure + 1] -= 1
    occupancy = list(accumulate(deltas))
    return max([1, *occupancy[1:]])


def to_sparse(matrix: Iterable[Iterable[int]]) -> list[tuple[int, int, int]]:
    """Return the triplet form of ``matrix``.

    The first triple is ``(rows, columns, non_zero_count)``; each following
    triple is ``(row, column, value)`` for a non-zero entry in row-major
    order. Raises ValueError for ragged rows.
    """
    rows = [list(row) for row in matrix]
    columns = len(rows[0]) if rows else 0
    if any(len(row) != columns for row in rows):
        raise ValueError("every row must have the same length")
    entries = [
        (r, c, value)
        for r, row in enumerate(rows)
        for c, value in enumerate(row)
        if value != 0
    ]
    return [(len(rows), columns, len(entries)), *entries]