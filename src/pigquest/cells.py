# Cell symbols as they appear in grid text.

from enum import Enum


class Cell(str, Enum):
    EMPTY = "."
    WALL = "#"
    PLAYER = "P"
    GOAL = "G"


SYMBOLS = frozenset(c.value for c in Cell)


def is_open(cell: Cell) -> bool:
    # Corridor = anything that isn't wall.
    return cell != Cell.WALL
