# Move budget = shortest route + difficulty-scaled slack.

import math
from typing import Union

from ..config import Difficulty, profile_for


def budget_buffer(shortest: int, difficulty: Union[str, Difficulty]) -> int:
    p = profile_for(difficulty)
    return max(p.buffer_floor, math.floor(shortest * p.buffer_ratio) + p.buffer_bonus)


def move_budget(shortest: int, difficulty: Union[str, Difficulty]) -> int:
    """
    Easy:   d + floor(d*0.5) + 5
    Medium: d + floor(d*0.3) + 4
    Hard:   d + max(2, floor(d*0.1))
    """
    if shortest < 0:
        raise ValueError(f"shortest path length must be >= 0, got {shortest}")
    return shortest + budget_buffer(shortest, difficulty)
