# src/pigquest/engine/pathing.py
# Breadth-first search over 4-connected non-wall cells.

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Sequence

from ..cells import Cell
from ..grid import RC, in_bounds

STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _passable(grid: Sequence[Sequence[Cell]], r: int, c: int) -> bool:
    return in_bounds(grid, r, c) and grid[r][c] != Cell.WALL


def _search(grid: Sequence[Sequence[Cell]], start: RC, goal: RC) -> Optional[Dict[RC, Optional[RC]]]:
    # FIFO frontier: the first time goal is dequeued its distance is minimal.
    queue: Deque[RC] = deque([start])
    parents: Dict[RC, Optional[RC]] = {start: None}
    while queue:
        r, c = queue.popleft()
        if (r, c) == goal:
            return parents
        for dr, dc in STEPS:
            nxt = (r + dr, c + dc)
            if nxt not in parents and _passable(grid, *nxt):
                parents[nxt] = (r, c)
                queue.append(nxt)
    return None


def shortest_path(grid: Sequence[Sequence[Cell]], start: RC, goal: RC) -> List[RC]:
    """Cells from start to goal inclusive, or [] when unreachable."""
    parents = _search(grid, start, goal)
    if parents is None:
        return []
    path: List[RC] = []
    node: Optional[RC] = goal
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def shortest_path_length(grid: Sequence[Sequence[Cell]], start: RC, goal: RC) -> Optional[int]:
    """Minimum number of steps from start to goal; None when unreachable."""
    path = shortest_path(grid, start, goal)
    return len(path) - 1 if path else None


def has_path(grid: Sequence[Sequence[Cell]], start: RC, goal: RC) -> bool:
    return shortest_path_length(grid, start, goal) is not None
