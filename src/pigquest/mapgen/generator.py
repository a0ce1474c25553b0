# src/pigquest/mapgen/generator.py
# Level composer: (level, difficulty) -> fixed maze layout + caption.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..cells import Cell
from ..config import CONFIG, Difficulty, profile_for
from ..grid import RC, Grid, format_grid, parse_grid
from ..rng import SeededRandom, seed_for_level
from .carve import carve_maze
from .flavor import caption_for_level, flavor_for_level
from .loops import add_loops

log = logging.getLogger(__name__)

START: RC = (1, 1)


@dataclass(frozen=True)
class LevelLayout:
    level: int
    difficulty: Difficulty
    rows: Tuple[str, ...]
    flavor_text: str
    start: RC
    goal: RC
    loops_added: int = 0

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def caption(self) -> str:
        return caption_for_level(self.level)

    def grid(self) -> Grid:
        """A fresh mutable grid; the layout itself never changes."""
        return parse_grid(self.rows)


def grid_size_for(level: int, difficulty: Union[str, Difficulty]) -> int:
    return profile_for(difficulty).size_for(level)


def loop_count_for(difficulty: Union[str, Difficulty]) -> int:
    return profile_for(difficulty).loops


def goal_for_size(size: int) -> RC:
    return (size - 2, size - 2)


def generate_grid(
    size: int,
    seed: int,
    loops: int,
    max_probes: Optional[int] = None,
) -> Tuple[Grid, int]:
    """Carve then add loops; start/goal markers are not placed here."""
    rng = SeededRandom(seed)
    grid = carve_maze(size, rng)
    probes = CONFIG.loop_probes if max_probes is None else max_probes
    added = add_loops(grid, loops, rng, max_probes=probes)
    return grid, added


def compose_level(level: int, difficulty: Union[str, Difficulty]) -> LevelLayout:
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    difficulty = Difficulty.parse(difficulty)

    size = grid_size_for(level, difficulty)
    seed = seed_for_level(difficulty, level)
    grid, added = generate_grid(size, seed, loop_count_for(difficulty))

    # Both corners are odd lattice cells, so carving has already opened them.
    goal = goal_for_size(size)
    grid[START[0]][START[1]] = Cell.PLAYER
    grid[goal[0]][goal[1]] = Cell.GOAL

    log.debug("composed %s level %d: size=%d seed=%d loops=%d", difficulty, level, size, seed, added)
    return LevelLayout(
        level=level,
        difficulty=difficulty,
        rows=tuple(format_grid(grid)),
        flavor_text=flavor_for_level(level),
        start=START,
        goal=goal,
        loops_added=added,
    )
