"""Outline and filled 2D shapes drawn through a pixel callback.

Every function takes ``put``, a callable ``put(x, y, color)`` that plots a
single pixel.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, Sequence

from lifegrid.colors import mix_colors

PI = 3.141592

PixelFunc = Callable[[int, int, int], None]
Point = tuple[int, int]


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _downhill(put: PixelFunc, x: int, y: int, x_dest: int, y_dest: int,
              col: int, d_col: int) -> None:
    len_x = x_dest - x
    len_y = y_dest - y
    step = 1
    if len_y < 0:
        step = -1
        len_y = -len_y
    check = 2 * len_y - len_x
    start = x
    mix_col = col
    while x <= x_dest:
        if len_x:
            mix_col = mix_colors(col, d_col, (x - start) / len_x)
        put(x, y, mix_col)
        if check >= 0:
            y += step
            check += 2 * (len_y - len_x)
        else:
            check += 2 * len_y
        x += 1


def _uphill(put: PixelFunc, x: int, y: int, x_dest: int, y_dest: int,
            col: int, d_col: int) -> None:
    len_x = x_dest - x
    len_y = y_dest - y
    step = 1
    if len_x < 0:
        step = -1
        len_x = -len_x
    check = 2 * len_x - len_y
    start = y
    mix_col = col
    while y <= y_dest:
        if len_y:
            mix_col = mix_colors(col, d_col, (y - start) / len_y)
        put(x, y, mix_col)
        if check >= 0:
            x += step
            check += 2 * (len_x - len_y)
        else:
            check += 2 * len_x
        y += 1


def draw_line(put: PixelFunc, x: int, y: int, x_dest: int, y_dest: int,
              color: int, d_col: int | None = None) -> None:
    """Draw a line from (x, y) to (x_dest, y_dest), fading color into d_col."""
    if d_col is None:
        d_col = color
    if abs(y_dest - y) < abs(x_dest - x):
        if x > x_dest:
            _downhill(put, x_dest, y_dest, x, y, d_col, color)
        else:
            _downhill(put, x, y, x_dest, y_dest, color, d_col)
    else:
        if y > y_dest:
            _uphill(put, x_dest, y_dest, x, y, d_col, color)
        else:
            _uphill(put, x, y, x_dest, y_dest, color, d_col)


def draw_circle(put: PixelFunc, x: int, y: int, radius: int, color: int) -> None:
    """Draw a circle outline centred on (x, y) using eight-way symmetry."""
    limit = int(radius * math.cos(PI / 4))
    for x2 in range(limit + 1):
        y2 = int(math.sqrt(float(radius * radius) - x2 * x2))
        for px, py in (
            (x2, -y2), (y2, -x2), (y2, x2), (x2, y2),
            (-x2, y2), (-y2, x2), (-y2, -x2), (-x2, -y2),
        ):
            put(px + x, py + y, color)


def draw_rect(put: PixelFunc, x: int, y: int, width: int, height: int,
              color: int) -> None:
    """Draw the outline of the rectangle from (x, y) to (x + width, y + height)."""
    right, bottom = x + width, y + height
    draw_line(put, x, y, right, y, color, color)
    draw_line(put, right, y, right, bottom, color, color)
    draw_line(put, right, bottom, x, bottom, color, color)
    draw_line(put, x, bottom, x, y, color, color)


def draw_rectf(put: PixelFunc, x: int, y: int, width: int, height: int,
               color: int) -> None:
    """Fill the rectangle from (x, y) to (x + width, y + height) row by row."""
    for row in range(y, y + height + 1):
        draw_line(put, x, row, x + width, row, color, color)


def draw_square(put: PixelFunc, x: int, y: int, x_dest: int, y_dest: int,
                color: int) -> None:
    """Draw a square whose first side runs from (x, y) to (x_dest, y_dest)."""
    size_x = x - x_dest
    size_y = y - y_dest
    draw_line(put, x, y, x_dest, y_dest, color, color)
    draw_line(put, x_dest, y_dest, x_dest + size_y, y_dest - size_x, color, color)
    draw_line(put, x + size_y, y - size_x, x_dest + size_y, y_dest - size_x,
              color, color)
    draw_line(put, x, y, x + size_y, y - size_x, color, color)


def draw_quadrilateral(put: PixelFunc, points: Sequence[Point], color: int) -> None:
    """Draw the closed outline through four corner points in order."""
    if len(points) != 4:
        raise ValueError(f"a quadrilateral needs 4 points, got {len(points)}")
    corners = [tuple(p) for p in points]
    for (ax, ay), (bx, by) in zip(corners, corners[1:] + corners[:1]):
        draw_line(put, ax, ay, bx, by, color, color)


def _fill_bottom(put: PixelFunc, p1: Point, p2: Point, p3: Point, color: int) -> None:
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    slope1 = _f32((x2 - x1) / (y2 - y1)) if y2 != y1 else 0.0
    slope2 = _f32((x3 - x1) / (y3 - y1)) if y3 != y1 else 0.0
    cur1 = cur2 = float(x1)
    for scan in range(y1, y2 + 1):
        draw_line(put, int(cur1), scan, int(cur2), scan, color, color)
        cur1 = _f32(cur1 + slope1)
        cur2 = _f32(cur2 + slope2)


def _fill_top(put: PixelFunc, p1: Point, p2: Point, p3: Point, color: int) -> None:
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    slope1 = _f32((x3 - x1) / (y3 - y1)) if y3 != y1 else 0.0
    slope2 = _f32((x3 - x2) / (y3 - y2)) if y3 != y2 else 0.0
    cur1 = cur2 = float(x3)
    for scan in range(y3, y1, -1):
        draw_line(put, int(cur1), scan, int(cur2), scan, color, color)
        cur1 = _f32(cur1 - slope1)
        cur2 = _f32(cur2 - slope2)


def draw_trif(put: PixelFunc, p1: Point, p2: Point, p3: Point, color: int) -> None:
    """Fill the triangle with corners p1, p2 and p3 by scanlines."""
    a, b, c = sorted((tuple(p1), tuple(p2), tuple(p3)), key=lambda p: p[1])
    (x1, y1), (x2, y2), (x3, y3) = a, b, c
    if y2 == y3:
        _fill_bottom(put, a, b, c, color)
    elif y1 == y2:
        _fill_top(put, a, b, c, color)
    else:
        ratio = _f32(_f32(float(y2 - y1)) / _f32(float(y3 - y1)))
        v4 = (int(_f32(float(x1) + _f32(ratio * float(x3 - x1)))), y2)
        _fill_bottom(put, a, b, v4, color)
        _fill_top(put, b, v4, c, color)