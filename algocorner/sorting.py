"""Classic sorting algorithms.

Every function takes an iterable and returns a new sorted list (or string),
leaving its input untouched.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

_TEXT_RANGE = 255


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Bubble sort that stops early once a pass makes no swaps."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
                swapped = True
        if not swapped:
            break
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort floats in the half-open range [0, 1) using one bucket per value."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def is_sorted(values: Iterable[Any]) -> bool:
    """Return True if the values are in non-decreasing order."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def bogosort(values: Iterable[T], rng: random.Random) -> list[T]:
    """Shuffle the values with ``rng`` until they happen to be sorted."""
    items = list(values)
    size = len(items)
    while not is_sorted(items):
        for i in range(size):
            _swap(items, i, rng.randrange(size))
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    running = 0
    for index, count in enumerate(counts):
        running += count
        counts[index] = running
    output: list[int] = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def counting_sort_text(text: str) -> str:
    """Sort the characters of ``text`` by code point, which must be at most 255."""
    counts = [0] * (_TEXT_RANGE + 1)
    for char in text:
        code = ord(char)
        if code > _TEXT_RANGE:
            raise ValueError(f"character {char!r} is outside the range 0-{_TEXT_RANGE}")
        counts[code] += 1
    return "".join(chr(code) * count for code, count in enumerate(counts))


def sort_012(values: Iterable[int]) -> list[int]:
    """Dutch national flag sort of a sequence made only of 0, 1 and 2."""
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        value = items[mid]
        if value == 0:
            _swap(items, low, mid)
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            _swap(items, mid, high)
            high -= 1
        else:
            raise ValueError(f"sort_012 accepts only 0, 1 and 2, got {value!r}")
    return items


def _sift_down(items: MutableSequence[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        _swap(items, root, largest)
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort with a binary max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        _swap(items, 0, end)
        _sift_down(items, end, 0)
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
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


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] < pivot:
            _swap(items, store, j)
            store += 1
    _swap(items, store, high)
    return store


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort using the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Selection sort: repeatedly move the smallest remaining value forward."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        if smallest != i:
            _swap(items, i, smallest)
    return items


def shell_sort(values: Iterable[T]) -> list[T]:
    """Shell sort with gaps halving from n/2 down to 1."""
    items = list(values)
    size = len(items)
    gap = size // 2
    while gap > 0:
        for i in range(gap, size):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items