# src/pigquest/engine/moves.py
# Single-step player movement on a grid snapshot.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ..cells import Cell
from ..grid import RC, Grid, clone_grid, in_bounds


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Direction":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown direction: {name!r}") from None


@dataclass(frozen=True)
class MoveResult:
    grid: Grid
    pos: RC
    reached_goal: bool
    moved: bool


def can_enter(grid: Grid, r: int, c: int) -> bool:
    return in_bounds(grid, r, c) and grid[r][c] != Cell.WALL


def apply_move(grid: Grid, pos: RC, direction: Direction) -> MoveResult:
    """
    Step the player one cell. Off-grid or into a wall is a rejected move:
    same grid object and position come back. Otherwise a new grid is
    returned and the input grid is left untouched.
    """
    dr, dc = direction.delta
    r, c = pos
    nr, nc = r + dr, c + dc
    if not can_enter(grid, nr, nc):
        return MoveResult(grid=grid, pos=pos, reached_goal=False, moved=False)

    out = clone_grid(grid)
    out[r][c] = Cell.EMPTY
    reached = out[nr][nc] == Cell.GOAL  # check before the overwrite
    out[nr][nc] = Cell.PLAYER
    return MoveResult(grid=out, pos=(nr, nc), reached_goal=reached, moved=True)
