"""Command line: read a map, run it for a number of generations, print it."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence

from lifegrid.grid import Grid, MapError, load_map, print_map
from lifegrid.iterate import iterate_map, iterate_map_slow

USAGE = "Usage: <filename> [iterations]\nERROR"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_iterations(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _run(argv: Sequence[str] | None, iterate: Callable[[Grid, int], None]) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        grid = load_map(args[0])
    except OSError as exc:
        print(f"ERROR: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except MapError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    iterate(grid, _parse_iterations(args[1]))
    print_map(grid)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run a map with early stopping on still lifes and blinkers."""
    return _run(argv, iterate_map)


def main_slow(argv: Sequence[str] | None = None) -> int:
    """Run a map for exactly the requested number of generations."""
    return _run(argv, iterate_map_slow)


if __name__ == "__main__":
    sys.exit(main())