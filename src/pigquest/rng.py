import math
from dataclasses import dataclass
from typing import List, MutableSequence, TypeVar

from .config import Difficulty, profile_for

# Classic small LCG (the "9301/49297/233280" recipe). Integer state keeps the
# sequence bit-identical on every platform.
A = 9301
C = 49297
M = 233280

T = TypeVar("T")


def lcg_next(state: int) -> int:
    return (state * A + C) % M


@dataclass
class SeededRandom:
    state: int

    def __post_init__(self) -> None:
        # Python's % already folds negatives into 0..M-1
        self.state = int(self.state) % M

    def next(self) -> float:
        """Advance one step and return a float in [0, 1)."""
        self.state = lcg_next(self.state)
        return self.state / M

    def range_int(self, lo: int, hi: int) -> int:
        # floor(x*(hi-lo)+lo), not floor(x*(hi-lo))+lo: keeps golden levels stable.
        return math.floor(self.next() * (hi - lo) + lo)

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates in place, one draw per swap. Returns ``items``."""
        for i in range(len(items) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            items[i], items[j] = items[j], items[i]
        return items


def seed_for_level(difficulty: Difficulty, level: int) -> int:
    """
    Seed is a pure function of (difficulty, level):
        seed = base(difficulty) + 7*level
    with base Easy=1000, Medium=2000, Hard=3000.
    """
    return profile_for(difficulty).seed_base + level * 7


def draws(seed: int, n: int) -> List[float]:
    rng = SeededRandom(seed)
    return [rng.next() for _ in range(n)]
