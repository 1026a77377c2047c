"""Interactive Game of Life state: rendering, keyboard, mouse and clock."""

from __future__ import annotations

import struct
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from lifegrid.grid import ALIVE, Grid
from lifegrid.image import Image, int_to_bit
from lifegrid.iterate import iterate_gi_map
from lifegrid.shapes import draw_rect

SCREEN_X = 1440
SCREEN_Y = 900

LEFT_BUTTON = 1
RIGHT_BUTTON = 4
SCROLL_UP = 8
SCROLL_DOWN = 16

CELL_COLOR = 0xFFFFFF
BORDER_COLOR = 0xFFDD45
TEXT_COLOR = 0xFFFFFF

MIN_SPEED = 1
MAX_SPEED = 100


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Key(IntEnum):
    """Key codes understood by the application (X11 keysyms)."""

    ARROW_LEFT = 123
    ARROW_UP = 124
    ARROW_RIGHT = 125
    ARROW_DOWN = 126
    ESC = 65307
    DOT = 46
    T = 116
    R = 114
    SPACE = 32


class AppExit(Exception):
    """Raised when the application asks to terminate."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass
class MouseState:
    """Held buttons (as bit flags) and last pointer position."""

    button: int = 0
    move_x: int = 0
    move_y: int = 0
    zoom_x: int = 0
    zoom_y: int = 0
    x: int = SCREEN_X // 2
    y: int = SCREEN_Y // 2
    zoom: int = 20


@dataclass(frozen=True)
class Label:
    """A piece of text to draw at a window position."""

    x: int
    y: int
    color: int
    text: str


class LifeApp:
    """Board, view image and input state of the interactive simulation."""

    def __init__(
        self,
        grid: Grid,
        width: int = SCREEN_X,
        height: int = SCREEN_Y,
        now: float | None = None,
        on_render: Callable[[LifeApp], None] | None = None,
    ) -> None:
        self.grid = grid
        self.image = Image(width, height)
        self.mouse = MouseState(x=width // 2, y=height // 2)
        self.tick_count = 0
        self.active = True
        self.paused = False
        self.speed = 10
        self.elapsed_time = 0
        self.last_step = time.monotonic() if now is None else now
        self.on_render = on_render
        self.running = True

    def render(self) -> Image:
        """Redraw the board image and hand it to the render callback."""
        img = self.image
        img.clear()
        self.render_map()
        draw_rect(img.put_pixel, 0, 0, img.width - 1, img.height - 1, BORDER_COLOR)
        if self.on_render is not None:
            self.on_render(self)
        return img

    def render_map(self) -> None:
        """Paint live cells, each scaled up to fill its share of the image."""
        img, grid = self.image, self.grid
        x_scale = grid.line_len / img.width
        y_scale = grid.lines / img.height
        col_cells = [int(x * x_scale) for x in range(img.width - 1)]
        lit_by_row: dict[int, list[int]] = {}
        for y in range(img.height - 1):
            my = int(y * y_scale)
            if my >= grid.lines:
                continue
            lit = lit_by_row.get(my)
            if lit is None:
                row = grid.rows[my]
                lit = [
                    x for x, mx in enumerate(col_cells)
                    if mx < grid.line_len and row[mx] & ALIVE
                ]
                lit_by_row[my] = lit
            for x in lit:
                img.put_pixel(x, y, CELL_COLOR)

    def status_text(self) -> list[Label]:
        """Return the text overlay showing generations per second."""
        return [
            Label(10, 10, TEXT_COLOR, "GPS:"),
            Label(100, 10, TEXT_COLOR, str(self.speed)[:3]),
        ]

    def key_down(self, key: int) -> None:
        """React to a key press."""
        if key == Key.ESC:
            self.running = False
            raise AppExit("Exited program succesfully using ESC.", 1)
        if key == Key.SPACE:
            self.paused = not self.paused
        if key == Key.R:
            self.grid.clear()
        self.render()

    def mouse_move(self, x: int, y: int) -> None:
        """Track pointer motion, painting or erasing while a button is held."""
        m = self.mouse
        m.move_x = x - m.x
        m.move_y = y - m.y
        if m.button & RIGHT_BUTTON:
            self.hold_right_button(x, y)
            self.right_button_down(x, y)
        if m.button & LEFT_BUTTON:
            self.hold_left_button(x, y)
            self.left_button_down(x, y)
        m.x, m.y = x, y

    def mouse_down(self, button: int, x: int, y: int) -> None:
        """Handle a button press; buttons 4 and 5 are the scroll wheel."""
        bit = int_to_bit(button)
        if bit & SCROLL_UP:
            self.scroll_wheel_up(x, y)
        if bit & SCROLL_DOWN:
            self.scroll_wheel_down(x, y)
        if bit & LEFT_BUTTON:
            self.left_button_down(x, y)
        if bit & RIGHT_BUTTON:
            self.right_button_down(x, y)
        if bit < SCROLL_UP:
            self.mouse.button += bit
        self.mouse.x, self.mouse.y = x, y

    def mouse_up(self, button: int, x: int, y: int) -> None:
        """Handle a button release."""
        bit = int_to_bit(button)
        if self.mouse.button & LEFT_BUTTON:
            self.left_button_up(x, y)
        if self.mouse.button & RIGHT_BUTTON:
            self.right_button_up(x, y)
        if bit < SCROLL_UP:
            self.mouse.button -= bit
        self.mouse.x, self.mouse.y = x, y

    def set_cell_at_pixel(self, x: int, y: int, value: int) -> bool:
        """Set the cell under screen point (x, y); return whether it changed."""
        img, grid = self.image, self.grid
        x_scale = _f32(_f32(float(grid.line_len)) / _f32(float(img.width)))
        y_scale = _f32(_f32(float(grid.lines)) / _f32(float(img.height)))
        col = int(_f32(float(x - img.x0) * x_scale))
        row = int(_f32(float(y - img.y0) * y_scale))
        if grid.rows[row][col] == value:
            return False
        grid.rows[row][col] = value
        self.render()
        return True

    def hold_left_button(self, x: int, y: int) -> None:
        """Paint a live cell under the pointer."""
        if self.image.contains(x, y):
            self.set_cell_at_pixel(x, y, 1)

    def left_button_down(self, x: int, y: int) -> None:
        """Paint a live cell and suspend the simulation."""
        self.hold_left_button(x, y)
        self.active = False

    def left_button_up(self, x: int, y: int) -> None:
        """Paint a live cell and resume the simulation."""
        self.hold_left_button(x, y)
        self.active = True

    def hold_right_button(self, x: int, y: int) -> None:
        """Erase the cell under the pointer."""
        if self.image.contains(x, y):
            self.set_cell_at_pixel(x, y, 0)

    def right_button_down(self, x: int, y: int) -> None:
        """Erase a cell and suspend the simulation."""
        self.hold_right_button(x, y)
        self.active = False

    def right_button_up(self, x: int, y: int) -> None:
        """Erase a cell and resume the simulation."""
        self.hold_right_button(x, y)
        self.active = True

    def scroll_wheel_up(self, x: int, y: int) -> None:
        """Raise the speed by one generation per second, up to the maximum."""
        if self.speed < MAX_SPEED:
            self.speed += 1

    def scroll_wheel_down(self, x: int, y: int) -> None:
        """Lower the speed by one generation per second, down to the minimum."""
        if self.speed > MIN_SPEED:
            self.speed -= 1

    def tick(self, now: float | None = None) -> bool:
        """Advance a generation when its time has come; return whether it did."""
        now = time.monotonic() if now is None else now
        self.elapsed_time = int((now - self.last_step) * 1_000_000)
        stepped = False
        if (
            self.running
            and self.elapsed_time >= 1_000_000 / self.speed
            and self.active
            and not self.paused
        ):
            self.last_step = now
            iterate_gi_map(self.grid)
            self.render()
            stepped = True
        self.tick_count = 0 if self.tick_count == 1000 else self.tick_count + 1
        return stepped

    def on_destroy(self) -> None:
        """Stop the simulation after the window is closed and ask to exit."""
        self.running = False
        self.on_render = None
        raise AppExit("Exited program succesfully using [X]", 1)