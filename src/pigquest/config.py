from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        for d in cls:
            if d.value.lower() == str(value).strip().lower():
                return d
        raise ValueError(f"unknown difficulty: {value!r}")


@dataclass(frozen=True)
class DifficultyProfile:
    seed_base: int
    # (first_level, size) pairs, ascending; sizes must be odd
    size_bands: Tuple[Tuple[int, int], ...]
    loops: int
    # buffer = max(buffer_floor, floor(d * buffer_ratio) + buffer_bonus)
    buffer_ratio: float
    buffer_bonus: int
    buffer_floor: int = 0

    def size_for(self, level: int) -> int:
        size = self.size_bands[0][1]
        for first, band_size in self.size_bands:
            if level >= first:
                size = band_size
        return size


PROFILES: Dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(
        seed_base=1000,
        size_bands=((1, 7), (15, 9)),
        loops=1,
        buffer_ratio=0.5,
        buffer_bonus=5,
    ),
    Difficulty.MEDIUM: DifficultyProfile(
        seed_base=2000,
        size_bands=((1, 9), (10, 11), (20, 13)),
        loops=2,
        buffer_ratio=0.3,
        buffer_bonus=4,
    ),
    # Hard: near-zero slack, forces near-optimal routes.
    Difficulty.HARD: DifficultyProfile(
        seed_base=3000,
        size_bands=((1, 13), (6, 15), (13, 17), (21, 19)),
        loops=4,
        buffer_ratio=0.1,
        buffer_bonus=0,
        buffer_floor=2,
    ),
}


def profile_for(difficulty: Union[str, Difficulty]) -> DifficultyProfile:
    return PROFILES[Difficulty.parse(difficulty)]


@dataclass(frozen=True)
class GameConfig:
    max_levels: int = 30
    loop_probes: int = 100


# Global config (can be swapped by a launcher)
CONFIG = GameConfig()
