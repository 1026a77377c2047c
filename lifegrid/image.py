"""An in-memory RGB image with clipped pixel writes."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field

_MASK = 0xFFFFFFFF


def int_to_bit(nbr: int) -> int:
    """Return the bit flag for a one-based button number: 1 -> 1, 3 -> 4."""
    if nbr < 1:
        raise ValueError(f"button number must be at least 1, got {nbr}")
    return 1 << (nbr - 1)


@dataclass
class Image:
    """A width x height block of 0xRRGGBB pixels placed at (x0, y0) on screen."""

    width: int
    height: int
    x0: int = 0
    y0: int = 0
    _pixels: array = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        self._pixels = array("I", [0]) * (self.width * self.height)

    @property
    def x1(self) -> int:
        """Screen x just past the right edge."""
        return self.x0 + self.width

    @property
    def y1(self) -> int:
        """Screen y just past the bottom edge."""
        return self.y0 + self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; writes outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y * self.width + x] = color & _MASK

    def pixel(self, x: int, y: int) -> int:
        """Return the colour stored at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Paint the whole image black."""
        self._pixels = array("I", [0]) * (self.width * self.height)

    def contains(self, x: int, y: int) -> bool:
        """Return whether the screen point lies strictly inside the image."""
        return self.x0 < x < self.x1 and self.y0 < y < self.y1