"""Backtracking puzzles: knight's tour, grid and maze paths, N queens, colouring.

Path strings are built the way the walks grow them: each move is prepended,
so a path lists its moves from the last one back to the first.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def _require_positive(**sizes: int) -> None:
    for name, value in sizes.items():
        if value < 1:
            raise ValueError(f"{name} must be at least 1, got {value}")


def _square_size(grid: Sequence[Sequence[object]]) -> int:
    size = len(grid)
    if size == 0 or any(len(row) != size for row in grid):
        raise ValueError("grid must be a non-empty square")
    return size


def knights_tour(size: int) -> list[list[int]] | None:
    """Find a knight's tour starting in the top-left corner.

    Returns a board whose cells hold the move number at which the knight
    lands there, or None if backtracking finds no complete tour.
    """
    _require_positive(size=size)
    board = [[-1] * size for _ in range(size)]
    board[0][0] = 0
    total = size * size

    def extend(x: int, y: int, move: int) -> bool:
        if move == total:
            return True
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and board[nx][ny] == -1:
                board[nx][ny] = move
                if extend(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    return board if extend(0, 0, 1) else None


def count_paths(rows: int, cols: int) -> int:
    """Count the down/right paths across a ``rows`` by ``cols`` grid."""
    _require_positive(rows=rows, cols=cols)

    @lru_cache(maxsize=None)
    def count(r: int, c: int) -> int:
        if r == 1 or c == 1:
            return 1
        return count(r - 1, c) + count(r, c - 1)

    return count(rows, cols)


def grid_paths(rows: int, cols: int) -> list[str]:
    """Every path of 'D' (down) and 'R' (right) moves across the grid."""
    _require_positive(rows=rows, cols=cols)
    paths: list[str] = []

    def walk(path: str, r: int, c: int) -> None:
        if r == 1 and c == 1:
            paths.append(path)
            return
        if r > 1:
            walk("D" + path, r - 1, c)
        if c > 1:
            walk("R" + path, r, c - 1)

    walk("", rows, cols)
    return paths


def grid_paths_with_diagonal(rows: int, cols: int) -> list[str]:
    """Every path across the grid using 'd' (diagonal), 'D' and 'R' moves."""
    _require_positive(rows=rows, cols=cols)
    paths: list[str] = []

    def walk(path: str, r: int, c: int) -> None:
        if r == 1 and c == 1:
            paths.append(path)
            return
        if r > 1 and c > 1:
            walk("d" + path, r - 1, c - 1)
        if r > 1:
            walk("D" + path, r - 1, c)
        if c > 1:
            walk("R" + path, r, c - 1)

    walk("", rows, cols)
    return paths


def paths_with_obstacles(maze: Sequence[Sequence[bool]]) -> list[str]:
    """Down/right paths from the top-left to the bottom-right of a square maze.

    A false cell is blocked; the bottom-right cell counts as reached whatever
    it holds.
    """
    size = _square_size(maze)
    paths: list[str] = []

    def walk(path: str, r: int, c: int) -> None:
        if r == size - 1 and c == size - 1:
            paths.append(path)
            return
        if not maze[r][c]:
            return
        if r < size - 1:
            walk("D" + path, r + 1, c)
        if c < size - 1:
            walk("R" + path, r, c + 1)

    walk("", 0, 0)
    return paths


def paths_four_directions(maze: Sequence[Sequence[bool]]) -> list[str]:
    """Paths through a square maze that never revisit a cell.

    Moves are tried in the order 'D', 'R', 'L' (left), 'U' (up) and 'd'
    (down-right diagonal). The maze passed in is left unchanged.
    """
    size = _square_size(maze)
    open_cells = [list(map(bool, row)) for row in maze]
    paths: list[str] = []

    def walk(path: str, r: int, c: int) -> None:
        if r == size - 1 and c == size - 1:
            paths.append(path)
            return
        if not open_cells[r][c]:
            return
        open_cells[r][c] = False
        if r < size - 1:
            walk("D" + path, r + 1, c)
        if c < size - 1:
            walk("R" + path, r, c + 1)
        if c > 0:
            walk("L" + path, r, c - 1)
        if r > 0:
            walk("U" + path, r - 1, c)
        if c < size - 1 and r < size - 1:
            walk("d" + path, r + 1, c + 1)
        open_cells[r][c] = True

    walk("", 0, 0)
    return paths


def solve_rat_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a down/right route through a square maze of 1 (open) and 0 (wall).

    Returns a matrix marking the route with 1, or None if there is none.
    """
    size = _square_size(maze)
    solution = [[0] * size for _ in range(size)]

    def walk(x: int, y: int) -> bool:
        if x == size - 1 and y == size - 1 and maze[x][y] == 1:
            solution[x][y] = 1
            return True
        if not (0 <= x < size and 0 <= y < size and maze[x][y] == 1):
            return False
        if solution[x][y] == 1:
            return False
        solution[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def solve_n_queens(size: int) -> list[list[int]] | None:
    """Place ``size`` queens column by column; 1 marks a queen, None if impossible."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    board = [[0] * size for _ in range(size)]

    def is_safe(row: int, col: int) -> bool:
        if any(board[row][c] for c in range(col)):
            return False
        if any(board[r][c] for r, c in zip(range(row, -1, -1), range(col, -1, -1))):
            return False
        return not any(board[r][c] for r, c in zip(range(row, size), range(col, -1, -1)))

    def place(col: int) -> bool:
        if col >= size:
            return True
        for row in range(size):
            if is_safe(row, col):
                board[row][col] = 1
                if place(col + 1):
                    return True
                board[row][col] = 0
        return False

    return board if place(0) else None


def graph_coloring(adjacency: Sequence[Sequence[bool]], colors: int) -> list[int] | None:
    """Colour vertices with 1..``colors`` so no edge joins equal colours.

    Returns the colour of each vertex, or None if no such colouring exists.
    """
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    assigned = [0] * size

    def is_safe(vertex: int, color: int) -> bool:
        return not any(
            edge and color == other for edge, other in zip(adjacency[vertex], assigned)
        )

    def paint(vertex: int) -> bool:
        if vertex == size:
            return True
        for color in range(1, colors + 1):
            if is_safe(vertex, color):
                assigned[vertex] = color
                if paint(vertex + 1):
                    return True
                assigned[vertex] = 0
        return False

    return assigned if paint(0) else None