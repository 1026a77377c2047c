"""Cell grid for the Game of Life and its plain-text map format."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO

ALIVE = 1
ALIVE_CHARS = frozenset("xX")


class MapError(ValueError):
    """Raised when map data cannot be turned into a grid."""


@dataclass
class Grid:
    """A rectangular board of cells, one byte per cell.

    Bit 0 of a cell marks it alive; the higher bits are scratch space used
    by the iteration routines.
    """

    line_len: int
    lines: int
    rows: list[bytearray] | None = None

    def __post_init__(self) -> None:
        if self.line_len < 0 or self.lines < 0:
            raise ValueError("grid dimensions must not be negative")
        if self.rows is None:
            self.rows = [bytearray(self.line_len) for _ in range(self.lines)]
            return
        self.rows = [bytearray(row) for row in self.rows]
        if len(self.rows) != self.lines:
            raise ValueError(
                f"expected {self.lines} rows, got {len(self.rows)}"
            )
        if any(len(row) != self.line_len for row in self.rows):
            raise ValueError(f"every row must hold {self.line_len} cells")

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.lines and 0 <= col < self.line_len):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")

    def is_alive(self, row: int, col: int) -> bool:
        """Return whether the cell at (row, col) is alive."""
        self._check(row, col)
        return bool(self.rows[row][col] & ALIVE)

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Store a raw cell value at (row, col)."""
        self._check(row, col)
        self.rows[row][col] = int(value)

    def clear(self) -> None:
        """Kill every cell."""
        for row in self.rows:
            row[:] = bytes(len(row))


def parse_map(data: str | bytes) -> Grid:
    """Build a grid from map text made of 'x'/'X' (alive) and '.' (dead).

    The row width is taken from the first line and the row count from the
    total length divided by the first line's length, newline included.
    Characters other than 'x', 'X', '.' and newline take up a dead cell.
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")
    limit = len(data) - 1
    if limit < 1:
        raise MapError("map is empty")
    end = data.find("\n", 0, limit)
    first_len = end + 1 if end != -1 else limit
    grid = Grid(line_len=first_len - 1, lines=len(data) // first_len)

    chars = iter(data)
    for row in grid.rows:
        col = 0
        while col < grid.line_len:
            ch = next(chars, None)
            if ch is None:
                break
            if ch == "\n":
                continue
            if ch in ALIVE_CHARS:
                row[col] = ALIVE
            col += 1
    return grid


def load_map(path: str | Path) -> Grid:
    """Read and parse a map file."""
    return parse_map(Path(path).read_bytes())


def format_map(grid: Grid) -> str:
    """Render a grid as map text followed by a blank line."""
    body = "".join(
        "".join("x" if cell & ALIVE else "." for cell in row) + "\n"
        for row in grid.rows
    )
    return body + "\n"


def print_map(grid: Grid, file: IO[str] | None = None) -> None:
    """Write the rendered grid to a text stream, stdout by default."""
    out = sys.stdout if file is None else file
    out.write(format_map(grid))