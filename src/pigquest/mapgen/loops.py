# src/pigquest/mapgen/loops.py
# Post-pass that reopens a few walls so the perfect maze gains alternate routes.

import logging

from ..cells import Cell
from ..grid import Grid
from ..rng import SeededRandom

log = logging.getLogger(__name__)

DEFAULT_PROBES = 100


def bridges_one_axis(grid: Grid, r: int, c: int) -> bool:
    """
    True when the wall at (r,c) sits between two open cells on exactly one
    axis. Both axes open would make a 4-way junction (a small room); neither
    axis open joins nothing.
    """
    has_vert = grid[r - 1][c] != Cell.WALL and grid[r + 1][c] != Cell.WALL
    has_horz = grid[r][c - 1] != Cell.WALL and grid[r][c + 1] != Cell.WALL
    return has_vert != has_horz


def add_loops(grid: Grid, count: int, rng: SeededRandom, max_probes: int = DEFAULT_PROBES) -> int:
    """
    Open up to ``count`` interior walls in place, each one closing a cycle.
    Probes are bounded by ``max_probes``; running out just leaves fewer loops.
    Returns the number of walls opened.
    """
    size = len(grid)
    added = 0
    probes = 0
    while added < count and probes < max_probes:
        probes += 1
        r = rng.range_int(1, size - 1)
        c = rng.range_int(1, size - 1)
        if grid[r][c] != Cell.WALL:
            continue
        if bridges_one_axis(grid, r, c):
            grid[r][c] = Cell.EMPTY
            added += 1

    if added < count:
        log.debug("loop injection stopped at %d/%d after %d probes", added, count, probes)
    else:
        log.debug("opened %d loop walls in %d probes", added, probes)
    return added
