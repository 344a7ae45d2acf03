"""Graph traversal drills: DFS/BFS orders, infection spread and grid ripening."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")
    neighbours: dict[int, set[int]] = {v: set() for v in range(1, n + 1)}
    for a, b in edges:
        for v in (a, b):
            if v not in neighbours:
                raise ValueError(f"vertex {v} is outside 1..{n}")
        neighbours[a].add(b)
        neighbours[b].add(a)
    return {v: sorted(ns) for v, ns in neighbours.items()}


def _check_start(adjacency: dict[int, list[int]], start: int) -> None:
    if start not in adjacency:
        raise ValueError(f"start vertex {start} is not in the graph")


def dfs_order(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Return the depth-first visiting order from start, smaller neighbours first."""
    adjacency = _adjacency(n, edges)
    _check_start(adjacency, start)
    order: list[int] = []
    visited: set[int] = set()
    stack = [start]
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        stack.extend(reversed([u for u in adjacency[vertex] if u not in visited]))
    return order


def bfs_order(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Return the breadth-first visiting order from start, smaller neighbours first."""
    adjacency = _adjacency(n, edges)
    _check_start(adjacency, start)
    order: list[int] = []
    visited = {start}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for u in adjacency[vertex]:
            if u not in visited:
                visited.add(u)
                queue.append(u)
    return order


def count_infected(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count computers reached from computer 1, not counting computer 1 itself."""
    if n < 1:
        raise ValueError(f"the network needs computer 1, got {n} computers")
    return len(bfs_order(n, edges, 1)) - 1


def days_to_ripen(grid: Sequence[Sequence[int]]) -> int:
    """Return the days until every tomato is ripe, or -1 if that never happens.

    Cells hold 1 for a ripe tomato, 0 for an unripe one and -1 for an empty cell.
    """
    rows = [list(row) for row in grid]
    height = len(rows)
    width = len(rows[0]) if rows else 0
    for row in rows:
        if len(row) != width:
            raise ValueError("all grid rows must have the same length")
        for cell in row:
            if cell not in (-1, 0, 1):
                raise ValueError(f"invalid cell value {cell!r}")

    queue = deque(
        (r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == 1
    )
    unripe = sum(cell == 0 for row in rows for cell in row)

    day = 0
    while queue:
        r, c = queue.popleft()
        day = rows[r][c]
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and rows[nr][nc] == 0:
                unripe -= 1
                rows[nr][nc] = day + 1
                queue.append((nr, nc))

    return day - 1 if unripe == 0 else -1