import pytest

from lifegrid.grid import format_map, parse_map
from lifegrid.iterate import (
    add_neighbors,
    iterate_gi_map,
    iterate_map,
    iterate_map_slow,
    iterate_map_until_static,
)

BLINKER = ".....\n.....\n.xxx.\n.....\n.....\n"
BLINKER_TURNED = ".....\n..x..\n..x..\n..x..\n.....\n"
BLOCK = "....\n.xx.\n.xx.\n....\n"
GLIDER = (
    ".x......\n..x.....\nxxx.....\n" + "........\n" * 5
)


def _run_slow(text, n):
    grid = parse_map(text)
    iterate_map_slow(grid, n)
    return format_map(grid)


def test_add_neighbors_single_cell():
    grid = parse_map("...\n.x.\n...\n")
    add_neighbors(grid)
    assert grid.rows[1][1] == 1
    around = [grid.rows[r][c] for r in range(3) for c in range(3) if (r, c) != (1, 1)]
    assert around == [2] * 8


def test_add_neighbors_saturates():
    grid = parse_map("xxx\nxxx\nxxx\n")
    add_neighbors(grid)
    assert grid.rows[1][1] == 31


def test_single_cell_dies():
    grid = parse_map("...\n.x.\n...\n")
    iterate_map_slow(grid, 1)
    assert all(value == 0 for row in grid.rows for value in row)


def test_block_is_still():
    assert _run_slow(BLOCK, 5) == format_map(parse_map(BLOCK))


def test_blinker_turns():
    assert _run_slow(BLINKER, 1) == format_map(parse_map(BLINKER_TURNED))
    assert _run_slow(BLINKER, 2) == format_map(parse_map(BLINKER))


def test_gi_step_matches_slow_step():
    grid = parse_map(GLIDER)
    iterate_gi_map(grid)
    assert format_map(grid) == _run_slow(GLIDER, 1)


@pytest.mark.parametrize("n", range(8))
def test_iterate_map_matches_slow_for_blinker(n):
    grid = parse_map(BLINKER)
    iterate_map(grid, n)
    assert format_map(grid) == _run_slow(BLINKER, n)


@pytest.mark.parametrize("n", range(12))
def test_iterate_map_matches_slow_for_glider(n):
    grid = parse_map(GLIDER)
    iterate_map(grid, n)
    assert format_map(grid) == _run_slow(GLIDER, n)


def test_iterate_map_stops_early_on_still_life():
    grid = parse_map(BLOCK)
    iterate_map(grid, 10**9)
    assert format_map(grid) == format_map(parse_map(BLOCK))


@pytest.mark.parametrize("extra", [0, 1])
def test_iterate_map_stops_early_on_blinker(extra):
    grid = parse_map(BLINKER)
    iterate_map(grid, 10**9 + extra)
    assert format_map(grid) == _run_slow(BLINKER, extra)


def test_until_static_stops_on_still_life():
    grid = parse_map(BLOCK)
    iterate_map_until_static(grid, 10**9)
    assert grid == parse_map(BLOCK)


@pytest.mark.parametrize("n", range(6))
def test_until_static_matches_slow_for_blinker(n):
    grid = parse_map(BLINKER)
    iterate_map_until_static(grid, n)
    assert format_map(grid) == _run_slow(BLINKER, n)


@pytest.mark.parametrize(
    "func", [iterate_map, iterate_map_slow, iterate_map_until_static]
)
@pytest.mark.parametrize("n", [0, -3])
def test_no_iterations_leaves_grid(func, n):
    grid = parse_map(GLIDER)
    func(grid, n)
    assert grid == parse_map(GLIDER)