"""Searching in sequences and texts.

Index-returning searches give -1 when the target is absent.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any

NOT_FOUND = -1


def _binary_search_range(values: Sequence[Any], low: int, high: int, target: Any) -> int:
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` in the sorted ``values`` by repeated halving."""
    return _binary_search_range(values, 0, len(values) - 1, target)


def linear_search(values: Iterable[Any], target: Any) -> int:
    """Return the index of the first occurrence of ``target``, or -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return NOT_FOUND


def contains(values: Iterable[Any], target: Any) -> bool:
    """Return True if ``target`` occurs in ``values``."""
    return any(value == target for value in values)


def exponential_search(values: Sequence[Any], target: Any) -> int:
    """Double a bound until it passes ``target``, then binary search below it."""
    size = len(values)
    if size == 0:
        return NOT_FOUND
    if values[0] == target:
        return 0
    bound = 1
    while bound < size and values[bound] <= target:
        bound *= 2
    return _binary_search_range(values, bound // 2, min(bound, size - 1), target)


def fibonacci_search(values: Sequence[Any], target: Any) -> int:
    """Search a sorted sequence by splitting it at Fibonacci numbers."""
    size = len(values)
    if size == 0:
        return NOT_FOUND
    before_previous, previous = 0, 1
    current = before_previous + previous
    while current < size:
        before_previous, previous = previous, current
        current = before_previous + previous

    offset = -1
    while current > 1:
        index = min(offset + before_previous, size - 1)
        if values[index] < target:
            current = previous
            previous = before_previous
            before_previous = current - previous
            offset = index
        elif values[index] > target:
            current = before_previous
            previous = previous - before_previous
            before_previous = current - previous
        else:
            return index

    candidate = offset + 1
    if previous and candidate < size and values[candidate] == target:
        return candidate
    return NOT_FOUND


def interpolation_search(values: Sequence[float], target: float) -> int:
    """Search a sorted numeric sequence by estimating the target's position."""
    start, end = 0, len(values) - 1
    while start <= end and values[start] <= target <= values[end]:
        if start == end:
            return start if values[start] == target else NOT_FOUND
        spread = values[end] - values[start]
        if spread == 0:
            return start
        position = start + int((end - start) / spread * (target - values[start]))
        if values[position] == target:
            return position
        if values[position] < target:
            start = position + 1
        else:
            end = position - 1
    return NOT_FOUND


def jump_search(values: Sequence[Any], target: Any) -> int:
    """Jump ahead in blocks of sqrt(n), then scan the block linearly."""
    size = len(values)
    if size == 0:
        return NOT_FOUND
    jump = int(math.sqrt(size))
    step = jump
    previous = 0
    while values[min(step, size) - 1] < target:
        previous = step
        step += jump
        if previous >= size:
            return NOT_FOUND

    while values[previous] < target:
        previous += 1
        if previous == min(step, size):
            return NOT_FOUND

    return previous if values[previous] == target else NOT_FOUND


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest value (1-based) using quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    low, high = 0, len(items) - 1
    while True:
        pivot = _partition(items, low, high)
        rank = pivot - low
        if rank == k - 1:
            return items[pivot]
        if rank > k - 1:
            high = pivot - 1
        else:
            k -= rank + 1
            low = pivot + 1


def naive_pattern_search(pattern: str, text: str) -> list[int]:
    """Return every index in ``text`` at which ``pattern`` starts."""
    width = len(pattern)
    return [
        index
        for index in range(len(text) - width + 1)
        if text[index:index + width] == pattern
    ]