"""2D vector math helpers operating on Point tuples."""
from __future__ import annotations

import math

from ribbon.types import Point


def add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Point, s: float) -> Point:
    return (v[0] * s, v[1] * s)


def magnitude(v: Point) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Point, b: Point) -> float:
    return magnitude(sub(a, b))


def normalize(v: Point) -> Point:
    """Unit vector along v. The zero vector normalizes to itself."""
    mag = magnitude(v)
    if mag == 0.0:
        return (0.0, 0.0)
    return scale(v, 1.0 / mag)


def midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)
