# src/pigquest/engine/state.py
# GameState: one level of play. Owns the grid snapshot, move counter and budget,
# and notifies subscribers (sound, UI) through plain callbacks.

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Callable, DefaultDict, List, Optional, Union

from ..config import CONFIG, Difficulty
from ..errors import LevelGenerationError
from ..grid import RC, Grid, format_grid
from ..mapgen.generator import LevelLayout, compose_level
from .budget import move_budget
from .moves import Direction, apply_move
from .pathing import shortest_path_length

log = logging.getLogger(__name__)

# Event names
LEVEL_LOADED = "level_loaded"
MOVE_ACCEPTED = "move_accepted"
MOVE_REJECTED = "move_rejected"
GOAL_REACHED = "goal_reached"
BUDGET_EXHAUSTED = "budget_exhausted"
EVENTS = (LEVEL_LOADED, MOVE_ACCEPTED, MOVE_REJECTED, GOAL_REACHED, BUDGET_EXHAUSTED)

Listener = Callable[["GameState"], None]


class Status(Enum):
    PLAYING = "playing"
    WON = "won"
    GAME_OVER = "gameover"


@dataclass(frozen=True)
class PreparedLevel:
    layout: LevelLayout
    shortest: int
    budget: int


@dataclass(frozen=True)
class MoveOutcome:
    moved: bool
    reached_goal: bool
    status: Status
    moves: int


def prepare_level(level: int, difficulty: Union[str, Difficulty]) -> PreparedLevel:
    """Compose a level and derive its move budget from the shortest route."""
    layout = compose_level(level, difficulty)
    shortest = shortest_path_length(layout.grid(), layout.start, layout.goal)
    if shortest is None:
        log.warning("%s level %d has no route from %s to %s", layout.difficulty, level, layout.start, layout.goal)
        raise LevelGenerationError(layout.difficulty, level)
    return PreparedLevel(layout=layout, shortest=shortest, budget=move_budget(shortest, layout.difficulty))


class GameState:
    def __init__(
        self,
        level: int,
        difficulty: Union[str, Difficulty],
        *,
        max_levels: Optional[int] = None,
    ) -> None:
        self.difficulty = Difficulty.parse(difficulty)
        self.max_levels = CONFIG.max_levels if max_levels is None else max_levels
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)
        self.level = level
        self._load()

    # ------------- Events -------------
    def subscribe(self, event: str, listener: Listener) -> None:
        if event not in EVENTS:
            raise ValueError(f"unknown event: {event!r}")
        self._listeners[event].append(listener)

    def unsubscribe(self, event: str, listener: Listener) -> None:
        if listener in self._listeners.get(event, []):
            self._listeners[event].remove(listener)

    def _emit(self, event: str) -> None:
        for listener in list(self._listeners.get(event, [])):
            listener(self)

    # ------------- Level lifecycle -------------
    def _load(self) -> None:
        prepared = prepare_level(self.level, self.difficulty)
        self.layout: LevelLayout = prepared.layout
        self.shortest: int = prepared.shortest
        self.budget: int = prepared.budget
        self.grid: Grid = self.layout.grid()
        self.pos: RC = self.layout.start
        self.moves = 0
        self.status = Status.PLAYING
        log.info(
            "loaded %s level %d (%dx%d, shortest=%d, budget=%d)",
            self.difficulty, self.level, self.layout.size, self.layout.size, self.shortest, self.budget,
        )
        self._emit(LEVEL_LOADED)

    def retry(self) -> None:
        """Reload the current level; the maze is the same by construction."""
        self._load()

    def next_level(self) -> int:
        self.level = self.level + 1 if self.level < self.max_levels else 1
        self._load()
        return self.level

    # ------------- Play -------------
    @property
    def moves_left(self) -> int:
        return max(0, self.budget - self.moves)

    @property
    def is_last_level(self) -> bool:
        return self.level == self.max_levels

    def move(self, direction: Union[str, Direction]) -> MoveOutcome:
        if isinstance(direction, str):
            direction = Direction.parse(direction)
        if self.status is not Status.PLAYING:
            return MoveOutcome(moved=False, reached_goal=False, status=self.status, moves=self.moves)

        res = apply_move(self.grid, self.pos, direction)
        if not res.moved:
            self._emit(MOVE_REJECTED)
            return MoveOutcome(moved=False, reached_goal=False, status=self.status, moves=self.moves)

        self.grid = res.grid
        self.pos = res.pos
        self.moves += 1
        self._emit(MOVE_ACCEPTED)

        if res.reached_goal:
            self.status = Status.WON
            self._emit(GOAL_REACHED)
        elif self.moves >= self.budget:
            self.status = Status.GAME_OVER
            self._emit(BUDGET_EXHAUSTED)
        return MoveOutcome(moved=True, reached_goal=res.reached_goal, status=self.status, moves=self.moves)

    def rows(self) -> List[str]:
        return format_grid(self.grid)
