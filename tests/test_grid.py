import pytest

from pigquest.cells import Cell, is_open
from pigquest.errors import GridFormatError
from pigquest.grid import clone_grid, find_cell, format_grid, in_bounds, parse_grid, read_grid_text

ROWS = ["#####", "#P.G#", "#####"]

def test_parse_and_format_round_trip():
    g = parse_grid(ROWS)
    assert g[1][1] == Cell.PLAYER and g[1][3] == Cell.GOAL and g[0][0] == Cell.WALL
    assert format_grid(g) == ROWS

def test_read_grid_text_skips_blank_lines():
    g = read_grid_text("\n".join(ROWS) + "\n\n")
    assert format_grid(g) == ROWS

def test_parse_rejects_bad_input():
    with pytest.raises(GridFormatError):
        parse_grid(["#x#"])
    with pytest.raises(GridFormatError):
        parse_grid(["###", "##"])
    with pytest.raises(GridFormatError):
        parse_grid([])
    # still a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        parse_grid([""])

def test_find_and_bounds():
    g = parse_grid(ROWS)
    assert find_cell(g, Cell.GOAL) == (1, 3)
    assert find_cell(parse_grid(["#.#"]), Cell.PLAYER) is None
    assert in_bounds(g, 2, 4) and not in_bounds(g, 3, 0) and not in_bounds(g, 0, -1)

def test_clone_is_independent():
    g = parse_grid(ROWS)
    h = clone_grid(g)
    h[1][2] = Cell.WALL
    assert g[1][2] == Cell.EMPTY

def test_open_classification():
    assert not is_open(Cell.WALL)
    assert all(is_open(c) for c in (Cell.EMPTY, Cell.PLAYER, Cell.GOAL))
