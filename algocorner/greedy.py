"""Greedy and single-pass array problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Largest rectangle that fits under a histogram of bars of width one."""
    stack: list[int] = []
    best = 0
    i = 0
    size = len(heights)
    while i < size or stack:
        if i < size and (not stack or heights[stack[-1]] <= heights[i]):
            stack.append(i)
            i += 1
            continue
        top = stack.pop()
        width = i - stack[-1] - 1 if stack else i
        best = max(best, heights[top] * width)
    return best


def min_increment_operations(values: Iterable[int], k: int) -> int:
    """Fewest +1 increments that make some ``k`` of the values equal."""
    items = sorted(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    needed = sum(items[k - 1] - value for value in items[:k])
    best = needed
    for i in range(k, len(items)):
        needed -= items[i - 1] - items[i - k]
        needed += (k - 1) * (items[i] - items[i - 1])
        best = min(best, needed)
    return best


def maximum_toys(costs: Iterable[int], budget: int) -> int:
    """Most toys that can be bought with ``budget``, cheapest first."""
    spent = 0
    count = 0
    for cost in sorted(costs):
        if spent + cost <= budget:
            spent += cost
            count += 1
    return count


def select_activities(starts: Sequence[int], finishes: Sequence[int]) -> list[int]:
    """Indices of a largest set of non-overlapping activities.

    Activities must already be ordered by finishing time.
    """
    if len(starts) != len(finishes):
        raise ValueError("starts and finishes must have the same length")
    if not starts:
        return []
    chosen = [0]
    for index in range(1, len(starts)):
        if starts[index] >= finishes[chosen[-1]]:
            chosen.append(index)
    return chosen


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Largest sum of ``k`` consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be at least 1, got {k}")
    if len(values) < k:
        raise ValueError(f"window size {k} exceeds the {len(values)} values")
    window = sum(values[:k])
    best = window
    for i in range(k, len(values)):
        window += values[i] - values[i - k]
        best = max(best, window)
    return best


def count_pairs_with_difference(values: Iterable[int], k: int) -> int:
    """Count elements that have an earlier, smaller-by-``k`` partner in sorted order."""
    seen: set[int] = set()
    count = 0
    for value in sorted(values):
        if value - k in seen:
            count += 1
        seen.add(value)
    return count


def min_product_subset(values: Sequence[int]) -> int:
    """Smallest product of any non-empty subset of ``values``."""
    if not values:
        raise ValueError("at least one value is needed")
    if len(values) == 1:
        return values[0]
    negatives = [value for value in values if value < 0]
    positives = [value for value in values if value > 0]
    zeros = len(values) - len(negatives) - len(positives)
    if zeros == len(values) or (not negatives and zeros):
        return 0
    if not negatives:
        return min(positives)
    product = 1
    for value in negatives + positives:
        product *= value
    if len(negatives) % 2 == 0:
        product //= max(negatives)
    return product