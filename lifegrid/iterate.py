"""Generation stepping for the Game of Life.

Neighbours are counted in place: bits 1 to 4 of a cell form a unary
counter that saturates at four, bit 0 is the alive flag and bit 5 records
whether the cell was alive one generation earlier.
"""

from __future__ import annotations

from lifegrid.grid import ALIVE, Grid

NEIGHBOR_MASK = 30
PREVIOUS = 32

_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _next_free_neighbor(value: int) -> int:
    if value & NEIGHBOR_MASK == NEIGHBOR_MASK:
        return value
    bit = 2
    while value & bit:
        bit <<= 1
    return value | bit


def _lives(value: int) -> bool:
    # three neighbours, or alive with two
    return value & NEIGHBOR_MASK == 14 or value & (NEIGHBOR_MASK | ALIVE) == 7


def add_neighbors(grid: Grid) -> None:
    """Add the neighbour count of every live cell into the cells around it."""
    rows = grid.rows
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if not value & ALIVE:
                continue
            for dr, dc in _OFFSETS:
                r, c = i + dr, j + dc
                if 0 <= r < grid.lines and 0 <= c < grid.line_len:
                    rows[r][c] = _next_free_neighbor(rows[r][c])


def _step(grid: Grid) -> None:
    add_neighbors(grid)
    for row in grid.rows:
        row[:] = bytes(ALIVE if _lives(value) else 0 for value in row)


def _step_tracking(grid: Grid) -> bool:
    """Advance one generation; return whether it may repeat the one before last."""
    add_neighbors(grid)
    repeats = True
    for row in grid.rows:
        for j, value in enumerate(row):
            was_alive = value & ALIVE
            alive_before = value & PREVIOUS
            if _lives(value):
                if was_alive:
                    row[j] = ALIVE | PREVIOUS
                else:
                    if not alive_before:
                        repeats = False
                    row[j] = ALIVE
            else:
                if was_alive:
                    if alive_before:
                        repeats = False
                    row[j] = PREVIOUS
                else:
                    row[j] = 0
    return repeats


def iterate_map(grid: Grid, iters: int) -> None:
    """Advance the grid by iters generations, stopping early on a period-two cycle.

    When the births and deaths of a generation mirror the generation before
    last and an even number of generations remain, the result is already
    known and iteration stops.
    """
    for i in range(iters):
        if _step_tracking(grid) and (iters - i - 1) % 2 == 0:
            break


def iterate_map_slow(grid: Grid, iters: int) -> None:
    """Advance the grid by exactly iters generations."""
    for _ in range(iters):
        _step(grid)


def iterate_map_until_static(grid: Grid, iters: int) -> None:
    """Advance the grid by up to iters generations, stopping once nothing changes."""
    for _ in range(iters):
        add_neighbors(grid)
        changed = False
        for row in grid.rows:
            for j, value in enumerate(row):
                new = ALIVE if _lives(value) else 0
                if new != value & ALIVE:
                    changed = True
                row[j] = new
        if not changed:
            break


def iterate_gi_map(grid: Grid) -> None:
    """Advance the grid by a single generation."""
    _step(grid)