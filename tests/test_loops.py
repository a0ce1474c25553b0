from pigquest.cells import Cell
from pigquest.grid import filled, format_grid, parse_grid
from pigquest.mapgen.carve import carve_maze
from pigquest.mapgen.generator import generate_grid
from pigquest.mapgen.loops import add_loops, bridges_one_axis
from pigquest.mapgen.metrics import count_open, cycle_rank
from pigquest.rng import SeededRandom

def test_bridge_rule():
    # vertical corridor through the wall only
    g = parse_grid(["#.#", "###", "#.#"])
    assert bridges_one_axis(g, 1, 1)
    # horizontal only
    g = parse_grid(["###", ".#.", "###"])
    assert bridges_one_axis(g, 1, 1)
    # both axes open -> would become a 4-way room
    g = parse_grid(["#.#", ".#.", "#.#"])
    assert not bridges_one_axis(g, 1, 1)
    # joins nothing
    g = parse_grid(["#.#", ".##", "###"])
    assert not bridges_one_axis(g, 1, 1)

def test_easy_level_one_gets_its_loop():
    grid, added = generate_grid(7, 1007, 1)
    assert added == 1
    assert format_grid(grid) == [
        "#######",
        "#.....#",
        "#.###.#",
        "#.....#",
        "#.#####",
        "#.....#",
        "#######",
    ]

def test_loops_only_add_open_cells_and_cycles():
    for seed in (2007, 2077, 3021, 3140):
        rng = SeededRandom(seed)
        g = carve_maze(13, rng)
        before = count_open(g)
        walls_before = {(r, c) for r, row in enumerate(g) for c, t in enumerate(row) if t == Cell.WALL}
        added = add_loops(g, 4, rng)
        assert 0 <= added <= 4
        assert count_open(g) == before + added
        # each opened wall closes at least one cycle
        assert cycle_rank(g) >= added
        walls_after = {(r, c) for r, row in enumerate(g) for c, t in enumerate(row) if t == Cell.WALL}
        assert walls_after <= walls_before
        # border untouched
        assert all(g[0][i] == Cell.WALL and g[12][i] == Cell.WALL for i in range(13))

def test_probe_cap_degrades_silently():
    g = filled(7)
    rng = SeededRandom(99)
    assert add_loops(g, 3, rng) == 0
    # 100 probes, two draws each
    ref = SeededRandom(99)
    for _ in range(200):
        ref.next()
    assert rng.state == ref.state
    assert count_open(g) == 0

def test_custom_probe_cap():
    g = filled(7)
    rng = SeededRandom(5)
    assert add_loops(g, 1, rng, max_probes=3) == 0
    ref = SeededRandom(5)
    for _ in range(6):
        ref.next()
    assert rng.state == ref.state

def test_zero_loops_requested_draws_nothing():
    rng = SeededRandom(7)
    g = carve_maze(9, rng)
    state = rng.state
    assert add_loops(g, 0, rng) == 0
    assert rng.state == state
