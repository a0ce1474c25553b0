# src/pigquest/mapgen/carve.py
# Recursive-backtracker carve on the lattice of odd coordinates.
# The DFS stack is explicit, so depth is bounded by the cell count, not by recursion.

import logging
from typing import List, Tuple

from ..cells import Cell
from ..grid import RC, Grid, filled
from ..rng import SeededRandom

log = logging.getLogger(__name__)

MIN_SIZE = 5

# Two-cell jumps: Up, Down, Left, Right. Order matters for reproducibility
# because the copy is shuffled at every visit.
JUMPS: Tuple[RC, ...] = ((-2, 0), (2, 0), (0, -2), (0, 2))


def check_size(size: int) -> None:
    if size < MIN_SIZE or size % 2 == 0:
        raise ValueError(f"maze size must be odd and >= {MIN_SIZE}, got {size}")


def in_carve_bounds(size: int, r: int, c: int) -> bool:
    # Strictly interior so the outer ring stays solid.
    return 1 <= r <= size - 2 and 1 <= c <= size - 2


def carve_maze(size: int, rng: SeededRandom) -> Grid:
    """
    Return a size x size grid that is all wall except a perfect maze
    (spanning tree) grown from (1,1). Every odd-coordinate interior cell
    ends up open; each is visited exactly once.
    """
    check_size(size)
    grid = filled(size, Cell.WALL)

    grid[1][1] = Cell.EMPTY
    stack: List[RC] = [(1, 1)]
    visits = 1

    while stack:
        r, c = stack[-1]
        jumps = rng.shuffle(list(JUMPS))

        for dr, dc in jumps:
            nr, nc = r + dr, c + dc
            if in_carve_bounds(size, nr, nc) and grid[nr][nc] == Cell.WALL:
                grid[r + dr // 2][c + dc // 2] = Cell.EMPTY
                grid[nr][nc] = Cell.EMPTY
                stack.append((nr, nc))
                visits += 1
                break
        else:
            stack.pop()  # dead end, backtrack

    log.debug("carved %dx%d maze, %d lattice cells", size, size, visits)
    return grid
