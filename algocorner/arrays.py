"""Array and matrix helpers: rotations, products, spirals and Toeplitz storage."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from itertools import islice
from typing import Any


def rotation_count(values: Sequence[Any]) -> int:
    """Return how far a sorted sequence has been rotated.

    Every position whose value is smaller than its predecessor adds its index,
    so a rotated sorted sequence gives the index where its smallest value sits.
    """
    return sum(
        index
        for index, (previous, current) in enumerate(zip(values, values[1:]), 1)
        if current < previous
    )


def multiply_matrices(
    first: Sequence[Sequence[float]], second: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Return the matrix product of ``first`` and ``second``."""
    inner = len(second)
    if any(len(row) != inner for row in first):
        raise ValueError("columns of the first matrix must equal rows of the second")
    width = len(second[0]) if second else 0
    if any(len(row) != width for row in second):
        raise ValueError("second matrix must be rectangular")
    columns = list(zip(*second)) if second else []
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return the smallest and the largest value."""
    items = list(values)
    if not items:
        raise ValueError("min_max needs at least one value")
    return min(items), max(items)


def array_sum(values: Iterable[float]) -> float:
    """Return the sum of all values."""
    return sum(values)


def move_negatives(values: Iterable[float]) -> list[float]:
    """Return the values with every negative one moved before the positive ones.

    Values are exchanged from both ends towards the middle, so the order
    within each side is not kept.
    """
    items: MutableSequence[float] = list(values)
    low, high = 0, len(items) - 1
    while low < high:
        while low < high and items[low] < 0:
            low += 1
        while low < high and items[high] > 0:
            high -= 1
        if low < high:
            items[low], items[high] = items[high], items[low]
            low += 1
            high -= 1
    return list(items)


def _spiral_walk(matrix: Sequence[Sequence[Any]]) -> Iterator[Any]:
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while True:
        for col in range(left, right + 1):
            yield matrix[top][col]
        top += 1
        for row in range(top, bottom + 1):
            yield matrix[row][right]
        right -= 1
        for col in range(right, left - 1, -1):
            yield matrix[bottom][col]
        bottom -= 1
        for row in range(bottom, top - 1, -1):
            yield matrix[row][left]
        left += 1


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix must be rectangular")
    total = len(matrix) * width
    return list(islice(_spiral_walk(matrix), total))


class ToeplitzMatrix:
    """A square matrix with constant diagonals, stored in ``2 * size - 1`` slots.

    Rows and columns are numbered from 0. Setting one cell sets its whole
    diagonal.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._diagonals: list[Any] = [0] * (2 * size - 1)

    def _slot(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.size}x{self.size} matrix")
        if row <= col:
            return col - row
        return self.size - 1 + row - col

    def set(self, row: int, col: int, value: Any) -> None:
        """Set the diagonal through cell (``row``, ``col``) to ``value``."""
        self._diagonals[self._slot(row, col)] = value

    def get(self, row: int, col: int) -> Any:
        """Return the value at cell (``row``, ``col``)."""
        return self._diagonals[self._slot(row, col)]

    def rows(self) -> list[list[Any]]:
        """Return the full matrix as a list of rows."""
        return [[self.get(row, col) for col in range(self.size)] for row in range(self.size)]