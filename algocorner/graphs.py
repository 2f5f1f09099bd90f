"""Graph traversals, shortest paths and minimum spanning trees."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence


class Graph:
    """A directed graph kept as adjacency lists in insertion order."""

    def __init__(self) -> None:
        self._adjacency: defaultdict[int, list[int]] = defaultdict(list)

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge from ``source`` to ``target``."""
        self._adjacency[source].append(target)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reached from ``start`` in breadth-first order."""
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency.get(vertex, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reached from ``start`` in depth-first order."""
        visited = {start}
        order = [start]
        stack = [iter(self._adjacency.get(start, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order


def _check_square(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def reachable_from(matrix: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return, in ascending order, the vertices reachable from ``source``.

    ``matrix`` is an adjacency matrix in which a non-zero entry is an edge.
    The source itself is always reachable.
    """
    size = _check_square(matrix)
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is out of range")
    visited = [False] * size
    visited[source] = True
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for neighbour, edge in enumerate(matrix[vertex]):
            if edge and not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return [vertex for vertex, seen in enumerate(visited) if seen]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def bellman_ford(
    vertex_count: int,
    edges: Iterable[tuple[int, int, float]],
    source: int,
) -> list[float]:
    """Shortest distances from ``source``; unreachable vertices get ``math.inf``.

    ``edges`` holds directed ``(source, target, weight)`` triples.
    """
    if not 0 <= source < vertex_count:
        raise ValueError(f"source vertex {source} is out of range")
    edge_list = list(edges)
    distances = [math.inf] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        for start, end, weight in edge_list:
            if distances[start] != math.inf and distances[start] + weight < distances[end]:
                distances[end] = distances[start] + weight
    for start, end, weight in edge_list:
        if distances[start] != math.inf and distances[start] + weight < distances[end]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return distances


def prim_mst_matrix(matrix: Sequence[Sequence[float]]) -> list[tuple[int, int, float]]:
    """Minimum spanning tree of a weighted adjacency matrix, grown from vertex 0.

    A zero entry means no edge. Returns ``(from, to, weight)`` edges in the
    order they are chosen.
    """
    size = _check_square(matrix)
    if size == 0:
        return []
    selected = [False] * size
    selected[0] = True
    tree: list[tuple[int, int, float]] = []
    for _ in range(size - 1):
        best: tuple[int, int, float] | None = None
        for row in (i for i in range(size) if selected[i]):
            for col, weight in enumerate(matrix[row]):
                if not selected[col] and weight and (best is None or weight < best[2]):
                    best = (row, col, weight)
        if best is None:
            raise ValueError("graph is not connected")
        selected[best[1]] = True
        tree.append(best)
    return tree


def prim_mst(
    vertex_count: int,
    edges: Iterable[tuple[int, int, float]],
) -> list[tuple[int, int, float]]:
    """Minimum spanning tree of an undirected graph, using a priority queue.

    ``edges`` holds ``(u, v, weight)`` triples. Returns ``(parent, vertex,
    weight)`` for every vertex from 1 upward, with vertex 0 as the root.
    """
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for start, end, weight in edges:
        adjacency[start].append((end, weight))
        adjacency[end].append((start, weight))
    if vertex_count == 0:
        return []

    keys = [math.inf] * vertex_count
    parents = [-1] * vertex_count
    in_tree = [False] * vertex_count
    keys[0] = 0
    queue: list[tuple[float, int]] = [(0, 0)]
    while queue:
        _, vertex = heapq.heappop(queue)
        if in_tree[vertex]:
            continue
        in_tree[vertex] = True
        for neighbour, weight in adjacency[vertex]:
            if not in_tree[neighbour] and keys[neighbour] > weight:
                keys[neighbour] = weight
                parents[neighbour] = vertex
                heapq.heappush(queue, (weight, neighbour))

    if not all(in_tree):
        raise ValueError("graph is not connected")
    return [(parents[vertex], vertex, keys[vertex]) for vertex in range(1, vertex_count)]