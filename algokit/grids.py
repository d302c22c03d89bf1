"""Traversals and searches over rectangular integer grids."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

Grid = Sequence[Sequence[int]]

WALL = -1
GATE = 0
INF = 2**31 - 1

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _neighbours(rows: int, cols: int, r: int, c: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def bfs_order(grid: Grid) -> list[int]:
    """Values of ``grid`` in breadth-first order from the top-left cell."""
    if not grid or not grid[0]:
        return []
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    order: list[int] = []
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell in visited:
            continue
        visited.add(cell)
        r, c = cell
        order.append(grid[r][c])
        queue.extend(_neighbours(rows, cols, r, c))
    return order


def dfs_order(grid: Grid) -> list[int]:
    """Values of ``grid`` in depth-first order from the top-left cell.

    Neighbours are tried up, right, down, left.
    """
    if not grid or not grid[0]:
        return []
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    order: list[int] = []
    stack: list[Iterator[tuple[int, int]]] = []

    def visit(r: int, c: int) -> None:
        visited.add((r, c))
        order.append(grid[r][c])
        stack.append(_neighbours(rows, cols, r, c))

    visit(0, 0)
    while stack:
        for cell in stack[-1]:
            if cell not in visited:
                visit(*cell)
                break
        else:
            stack.pop()
    return order


def count_islands(grid: Grid) -> int:
    """Count groups of 1 cells joined horizontally or vertically."""
    land = {(r, c) for r, row in enumerate(grid) for c, v in enumerate(row) if v == 1}
    count = 0
    while land:
        count += 1
        queue = deque([land.pop()])
        while queue:
            r, c = queue.popleft()
            for dr, dc in _DIRECTIONS:
                cell = (r + dr, c + dc)
                if cell in land:
                    land.remove(cell)
                    queue.append(cell)
    return count


def min_island_distance(grid: Grid) -> int | None:
    """Fewest water cells to cross to join two different islands.

    Returns ``None`` when the grid holds fewer than two islands.
    """
    if not grid or not grid[0]:
        return None
    rows, cols = len(grid), len(grid[0])
    owner: dict[tuple[int, int], int] = {}
    islands = 0
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] != 1 or (r, c) in owner:
                continue
            owner[(r, c)] = islands
            pending = [(r, c)]
            while pending:
                cell = pending.pop()
                for nb in _neighbours(rows, cols, *cell):
                    if grid[nb[0]][nb[1]] == 1 and nb not in owner:
                        owner[nb] = islands
                        pending.append(nb)
            islands += 1
    if islands < 2:
        return None

    distance = dict.fromkeys(owner, 0)
    queue = deque(owner)
    while queue:
        cell = queue.popleft()
        for nb in _neighbours(rows, cols, *cell):
            if nb not in owner:
                owner[nb] = owner[cell]
                distance[nb] = distance[cell] + 1
                queue.append(nb)

    return min(
        (
            distance[cell] + distance[nb]
            for cell in distance
            for nb in _neighbours(rows, cols, *cell)
            if owner[nb] != owner[cell]
        ),
        default=None,
    )


def walls_and_gates(rooms: Grid) -> list[list[int]]:
    """Return a copy of ``rooms`` with each room set to its distance to a gate.

    Walls are ``WALL``, gates ``GATE``; rooms no gate can reach keep their value.
    """
    result = [list(row) for row in rooms]
    if not result or not result[0]:
        return result
    rows, cols = len(result), len(result[0])
    queue = deque(
        (r, c) for r in range(rows) for c in range(cols) if result[r][c] == GATE
    )
    while queue:
        r, c = queue.popleft()
        step = result[r][c] + 1
        for nr, nc in _neighbours(rows, cols, r, c):
            if result[nr][nc] > step:
                result[nr][nc] = step
                queue.append((nr, nc))
    return result