"""Packing, unpacking and blending of 0xRRGGBB colours."""

from __future__ import annotations

import struct


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def combine_rgb(red: int, green: int, blue: int) -> int:
    """Pack three channel values into one 0xRRGGBB integer."""
    return (red << 16) + (green << 8) + blue


def separate_rgb(color: int) -> tuple[int, int, int]:
    """Split a 0xRRGGBB integer into its (red, green, blue) channels."""
    return (color & 0xFF0000) >> 16, (color & 0x00FF00) >> 8, color & 0x0000FF


def _mix_channel(first: int, second: int, percent: float) -> int:
    diff = abs(first - second)
    if first <= second:
        return int(_f32(float(diff) * percent)) + first
    return int(diff * (1.0 - percent)) + second


def mix_colors(color: int, color2: int, percent: float) -> int:
    """Blend from color towards color2; percent 0 gives color, 1 gives color2."""
    if percent == 0:
        return color
    percent = _f32(percent)
    mixed = (
        _mix_channel(a, b, percent)
        for a, b in zip(separate_rgb(color), separate_rgb(color2))
    )
    return combine_rgb(*mixed)