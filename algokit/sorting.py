"""Comparison and counting sorts, plus inversion counting.

Every sort accepts any iterable and returns a new ascending list.
"""

from __future__ import annotations

from itertools import combinations
from typing import Any, Iterable


def _sift_down(items: list, size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within ``items[:size]``."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list:
    """Sort with a binary max-heap built once and sifted down after each extraction."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _build_heap_by_sift_up(items: list, size: int) -> None:
    """Turn ``items[:size]`` into a max-heap by bubbling every node towards the root."""
    for index in range(1, size):
        node = index
        while node > 0:
            parent = (node - 1) // 2
            if items[parent] < items[node]:
                items[parent], items[node] = items[node], items[parent]
            node = parent


def heap_sort_rebuild(values: Iterable[Any]) -> list:
    """Sort by rebuilding a max-heap over the unsorted prefix before every extraction."""
    items = list(values)
    for size in range(len(items), 0, -1):
        _build_heap_by_sift_up(items, size)
        items[0], items[size - 1] = items[size - 1], items[0]
    return items


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        for left in range(unsorted_end):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort for non-negative integers.

    Raises ValueError when a value is negative or not an integer.
    """
    items = list(values)
    if not items:
        return []
    for value in items:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"counting sort needs integers, got {value!r}")
        if value < 0:
            raise ValueError(f"counting sort needs non-negative integers, got {value}")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    running = 0
    for value, count in enumerate(counts):
        running += count
        counts[value] = running
    output = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def cycle_sort(values: Iterable[Any]) -> list:
    """Sort with the minimum number of writes by rotating each permutation cycle."""
    items = list(values)

    def target_position(start: int, item: Any) -> int:
        return start + sum(1 for other in items[start + 1:] if other < item)

    for start in range(len(items) - 1):
        item = items[start]
        pos = target_position(start, item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = target_position(start, item)
            while item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    for start in range(len(items)):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """Stable insertion sort."""
    items = list(values)
    for index in range(1, len(items)):
        key = items[index]
        slot = index - 1
        while slot >= 0 and key < items[slot]:
            items[slot + 1] = items[slot]
            slot -= 1
        items[slot + 1] = key
    return items


def count_inversions(values: Iterable[Any]) -> int:
    """Count pairs ``i < j`` whose elements satisfy ``values[i] > values[j]``."""
    return sum(1 for earlier, later in combinations(list(values), 2) if earlier > later)