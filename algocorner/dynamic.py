"""Dynamic programming: string distances, counting problems and optimal splits."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import lru_cache


def edit_distance(first: str, second: str) -> int:
    """Fewest insertions, deletions and substitutions turning ``first`` into ``second``."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, 1):
        current = [i]
        for j, b in enumerate(second, 1):
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + (a != b))
            )
        previous = current
    return previous[-1]


def lcs_length(first: Sequence[object], second: Sequence[object]) -> int:
    """Length of the longest common subsequence, by a table of prefix results."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, 1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def lcs_length_recursive(first: Sequence[object], second: Sequence[object]) -> int:
    """Length of the longest common subsequence by plain recursion.

    Takes exponential time; meant for short inputs only.
    """

    def solve(m: int, n: int) -> int:
        if m == 0 or n == 0:
            return 0
        if first[m - 1] == second[n - 1]:
            return 1 + solve(m - 1, n - 1)
        return max(solve(m - 1, n), solve(m, n - 1))

    return solve(len(first), len(second))


def distinct_subsequences(source: str, target: str) -> int:
    """Number of ways ``target`` can be picked out of ``source`` as a subsequence."""
    counts = [1] + [0] * len(target)
    for char in source:
        for i in reversed(range(len(target))):
            if target[i] == char:
                counts[i + 1] += counts[i]
    return counts[-1]


def _next_layer(previous: list[float], cost: Callable[[int, int], float]) -> list[float]:
    current: list[float] = [0] * len(previous)

    def compute(low: int, high: int, opt_low: int, opt_high: int) -> None:
        if low > high:
            return
        mid = (low + high) // 2
        best_value, best_k = min(
            ((previous[k - 1] if k else 0) + cost(k, mid), k)
            for k in range(opt_low, min(mid, opt_high) + 1)
        )
        current[mid] = best_value
        compute(low, mid - 1, opt_low, best_k)
        compute(mid + 1, high, best_k, opt_high)

    compute(0, len(previous) - 1, 0, len(previous) - 1)
    return current


def partition_cost(groups: int, length: int, cost: Callable[[int, int], float]) -> float:
    """Least total cost of cutting positions 0..length-1 into at most ``groups`` runs.

    ``cost(i, j)`` prices the run from ``i`` to ``j`` inclusive. Layers are
    filled with the divide-and-conquer optimisation, which assumes the best
    split point never moves left as the end of the range moves right.
    """
    if groups < 1:
        raise ValueError(f"groups must be at least 1, got {groups}")
    if length < 1:
        raise ValueError(f"length must be at least 1, got {length}")
    layer = [cost(0, i) for i in range(length)]
    for _ in range(groups - 1):
        layer = _next_layer(layer, cost)
    return layer[-1]


def binomial_coefficient(n: int, k: int) -> int:
    """C(n, k) from Pascal's rule; zero when ``k`` exceeds ``n``."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")

    @lru_cache(maxsize=None)
    def choose(top: int, bottom: int) -> int:
        if bottom > top:
            return 0
        if bottom == 0 or bottom == top:
            return 1
        return choose(top - 1, bottom - 1) + choose(top - 1, bottom)

    return choose(n, k)


def friends_pairings(n: int) -> int:
    """Ways ``n`` friends can each stay single or pair up with one other."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n <= 2:
        return n
    before, last = 1, 2
    for i in range(3, n + 1):
        before, last = last, last + (i - 1) * before
    return last


def max_gold(grid: Sequence[Sequence[int]]) -> int:
    """Most gold collected entering at any row of the first column.

    Each step moves one column right, to the same row or a neighbouring one.
    """
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("gold grid must be rectangular")
    following = [0] * rows
    for col in reversed(range(cols)):
        following = [
            grid[r][col]
            + max(following[r + dr] for dr in (-1, 0, 1) if 0 <= r + dr < rows)
            for r in range(rows)
        ]
    return max([0, *following])


def matrix_chain_order(dimensions: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dimensions[i-1]`` by ``dimensions[i]``.
    """
    if len(dimensions) < 2:
        raise ValueError("at least one matrix, so two dimensions, are needed")
    dims = tuple(dimensions)

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            cost(i, k) + cost(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return cost(1, len(dims) - 1)


def catalan(n: int) -> int:
    """The n-th Catalan number."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    values = [1]
    for m in range(1, n + 1):
        values.append(sum(values[i] * values[m - 1 - i] for i in range(m)))
    return values[n]


def pascal_triangle(n: int) -> list[list[int]]:
    """Rows 0 to ``n`` of Pascal's triangle."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    rows = [[1]]
    for _ in range(n):
        last = rows[-1]
        rows.append([1, *(a + b for a, b in zip(last, last[1:])), 1])
    return rows


def n_choose_r(n: int, r: int) -> int:
    """C(n, r) read from Pascal's triangle; zero when ``r`` exceeds ``n``."""
    if r < 0:
        raise ValueError(f"r must not be negative, got {r}")
    if r > n:
        return 0
    return pascal_triangle(n)[n][r]