from typing import Iterable, List, Optional, Sequence, Tuple

from .cells import Cell
from .errors import GridFormatError

# (row, col), zero-based
RC = Tuple[int, int]
Grid = List[List[Cell]]


def filled(size: int, cell: Cell = Cell.WALL) -> Grid:
    return [[cell for _ in range(size)] for _ in range(size)]


def clone_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def dims(grid: Sequence[Sequence[Cell]]) -> Tuple[int, int]:
    h = len(grid)
    w = len(grid[0]) if h else 0
    return h, w


def in_bounds(grid: Sequence[Sequence[Cell]], r: int, c: int) -> bool:
    h, w = dims(grid)
    return 0 <= r < h and 0 <= c < w


def find_cell(grid: Sequence[Sequence[Cell]], cell: Cell) -> Optional[RC]:
    for r, row in enumerate(grid):
        for c, t in enumerate(row):
            if t == cell:
                return (r, c)
    return None


def parse_grid(lines: Iterable[str]) -> Grid:
    """
    Parse grid text: one string per row, one symbol per cell
    ('.' empty, '#' wall, 'P' player, 'G' goal). Rows must be equal length.
    """
    grid: Grid = []
    for r, line in enumerate(lines):
        try:
            grid.append([Cell(ch) for ch in line])
        except ValueError as exc:
            raise GridFormatError(f"row {r}: unknown symbol in {line!r}") from exc
    if not grid or not grid[0]:
        raise GridFormatError("grid text is empty")
    width = len(grid[0])
    for r, row in enumerate(grid):
        if len(row) != width:
            raise GridFormatError(f"row {r}: expected {width} cells, got {len(row)}")
    return grid


def format_grid(grid: Sequence[Sequence[Cell]]) -> List[str]:
    return ["".join(cell.value for cell in row) for row in grid]


def read_grid_text(text: str) -> Grid:
    return parse_grid(line for line in text.splitlines() if line.strip())
