# Structural counts used to check generated grids (tree shape, loops, markers).

from typing import Sequence

from ..cells import Cell, is_open


def count_cells(grid: Sequence[Sequence[Cell]], cell: Cell) -> int:
    return sum(1 for row in grid for t in row if t == cell)


def count_open(grid: Sequence[Sequence[Cell]]) -> int:
    return sum(1 for row in grid for t in row if is_open(t))


def count_openings(grid: Sequence[Sequence[Cell]]) -> int:
    """Number of 4-adjacent open/open pairs (edges of the corridor graph)."""
    h = len(grid)
    w = len(grid[0]) if h else 0
    edges = 0
    for r in range(h):
        for c in range(w):
            if not is_open(grid[r][c]):
                continue
            if c + 1 < w and is_open(grid[r][c + 1]):
                edges += 1
            if r + 1 < h and is_open(grid[r + 1][c]):
                edges += 1
    return edges


def cycle_rank(grid: Sequence[Sequence[Cell]]) -> int:
    """
    Independent cycles in the corridor graph (edges - nodes + 1 for a single
    connected component). Zero for a perfect maze.
    """
    return count_openings(grid) - count_open(grid) + 1
