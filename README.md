# lifegrid

Conway's Game of Life on plain-text maps. It has a batch runner that advances a map by a number of generations and prints the result, and a pygame window where you can draw and erase cells while the simulation runs.

## Map format

A map is a text file of equal-length lines:

- `x` or `X` is a live cell.
- `.` is a dead cell.
- Any other character except a newline takes up a dead cell.

The row width comes from the first line. The number of rows is the file length divided by the length of the first line, newline included.

```
.....
..x..
..x..
..x..
.....
```

## Commands

### `life`

```
life map.txt 100
```

This advances the map by exactly the given number of generations, then prints it as map text followed by a blank line. It takes exactly two arguments. Only the leading integer of the second argument is read, and text that does not start with a number counts as 0. If the arguments are wrong or the file cannot be read or parsed, it prints an error to stderr and exits with status 1.

### `life-opti`

```
life-opti map.txt 1000000
```

The arguments and output format are the same as `life`. The difference is that it keeps track of which cells were alive one generation earlier. It stops early when no cell is born or dies that was not dead or alive, respectively, two generations back, provided an even number of generations remain. Still lifes and period-two oscillators such as blinkers therefore finish quickly.

### `life-gi`

```
life-gi map.txt
```

This opens a 1440×900 window and scales the board to fill it, with a yellow border around it. The current speed appears in the top-left corner as `GPS:` (generations per second). The command takes exactly one argument.

Controls:

- **Left mouse button**: paint live cells. The simulation holds while the button is down.
- **Right mouse button**: erase cells. The simulation holds while the button is down.
- **Scroll wheel**: raise or lower the speed by one generation per second, within 1 to 100. The default is 10.
- **Space**: pause or resume.
- **R**: clear the board.
- **Esc**, or closing the window: quit.

## Library use

```python
from lifegrid.grid import parse_map, format_map
from lifegrid.iterate import iterate_map

grid = parse_map(b".....\n..x..\n..x..\n..x..\n.....\n")
iterate_map(grid, 1)
print(format_map(grid))
```

- `lifegrid.grid`:
  - `Grid` is a board of byte cells. Bit 0 marks a cell as alive. It has `is_alive`, `set_cell` and `clear`.
  - `parse_map`, `load_map`, `format_map` and `print_map` read and write the map format.
  - `MapError` is raised for empty map data.
- `lifegrid.iterate`:
  - `iterate_map_slow(grid, n)` advances exactly `n` generations.
  - `iterate_map(grid, n)` advances with the early stop described under `life-opti`.
  - `iterate_map_until_static(grid, n)` stops as soon as a generation changes nothing.
  - `iterate_gi_map(grid)` advances one generation.
  - `add_neighbors(grid)` adds neighbour counts into a grid in place.
- `lifegrid.colors`:
  - `combine_rgb` and `separate_rgb` pack and unpack `0xRRGGBB` colours.
  - `mix_colors` blends two colours.
- `lifegrid.shapes` has raster helpers: `draw_line`, `draw_circle`, `draw_rect`, `draw_rectf`, `draw_square`, `draw_quadrilateral` and `draw_trif`. Each takes a `put(x, y, color)` callback.
- `lifegrid.image.Image` is an in-memory pixel buffer with clipped `put_pixel`, plus `pixel`, `clear` and `contains`.
- `lifegrid.app.LifeApp` holds the interactive state and needs no window:
  - It handles input through `key_down`, `mouse_down`, `mouse_up` and `mouse_move`.
  - It advances the clock through `tick(now)`.
  - It renders through `render()`, with an optional `on_render` callback.
  - Quitting raises `AppExit`.
- `lifegrid.gui` connects `LifeApp` to pygame through `translate_event` and `dispatch_event`.

## What it does not do

The window has no zoom or panning, and the arrow keys are not bound to anything. The board is a fixed size taken from the map and does not wrap at the edges. The window cannot save a board back to a file.

## Installing

```
pip install .
pip install ".[test]"   # with test dependencies
```