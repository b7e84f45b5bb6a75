"""Linear RGB gradients for per-curve stroke colours."""
from __future__ import annotations

import math

from ribbon.types import ColorRGB


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def lerp_color(start: ColorRGB, end: ColorRGB, t: float) -> ColorRGB:
    """Interpolate each channel, rounding to the nearest integer (halves up)."""
    r, g, b = (
        _round_half_up(s + (e - s) * t) for s, e in zip(start, end, strict=True)
    )
    return (r, g, b)


def gradient(start: ColorRGB, end: ColorRGB, count: int) -> list[ColorRGB]:
    """Colours for indices 0..count-1 using ``i / count`` as the factor.

    The first entry is ``start``; ``end`` itself is never reached.
    """
    return [lerp_color(start, end, i / count) for i in range(count)]


def rgb_string(color: ColorRGB) -> str:
    r, g, b = color
    return f"rgb({r}, {g}, {b})"
