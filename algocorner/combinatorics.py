"""Permutations, combination sums and subset sums."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache


def permutations_recursive(text: str) -> list[str]:
    """All arrangements of ``text`` by swapping, repeats included."""
    chars = list(text)
    last = len(chars) - 1
    results: list[str] = []

    def permute(left: int) -> None:
        if left == last:
            results.append("".join(chars))
            return
        for i in range(left, last + 1):
            chars[left], chars[i] = chars[i], chars[left]
            permute(left + 1)
            chars[left], chars[i] = chars[i], chars[left]

    permute(0)
    return results


def permutations_iterative(text: str) -> list[str]:
    """Distinct arrangements of ``text`` in lexicographic order."""
    chars = sorted(text)
    if len(chars) <= 1:
        return ["".join(chars)]
    results: list[str] = []
    while True:
        results.append("".join(chars))
        i = len(chars) - 1
        while chars[i - 1] >= chars[i]:
            i -= 1
            if i == 0:
                return results
        j = len(chars) - 1
        while j > i and chars[j] <= chars[i - 1]:
            j -= 1
        chars[i - 1], chars[j] = chars[j], chars[i - 1]
        chars[i:] = reversed(chars[i:])


def combination_sum(values: Iterable[int], total: int) -> list[list[int]]:
    """Every non-decreasing combination of the distinct values summing to ``total``.

    A value may be used any number of times.
    """
    candidates = sorted(set(values))
    if any(value <= 0 for value in candidates):
        raise ValueError("combination sum needs positive values")
    results: list[list[int]] = []
    chosen: list[int] = []

    def search(remaining: int, start: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        for index in range(start, len(candidates)):
            value = candidates[index]
            if remaining - value < 0:
                break
            chosen.append(value)
            search(remaining - value, index)
            chosen.pop()

    search(total, 0)
    return results


def is_subset_sum(values: Iterable[int], total: int) -> bool:
    """Return True if some subset of ``values`` adds up to ``total``."""
    items = tuple(values)

    @lru_cache(maxsize=None)
    def reachable(count: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if count == 0:
            return False
        last = items[count - 1]
        if last > remaining:
            return reachable(count - 1, remaining)
        return reachable(count - 1, remaining) or reachable(count - 1, remaining - last)

    return reachable(len(items), total)