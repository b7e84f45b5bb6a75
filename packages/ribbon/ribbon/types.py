"""Shared type aliases and value types for ribbon."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

Point = tuple[float, float]
ColorRGB = tuple[int, int, int]

FrameCallback = Callable[[float], None]


@dataclass(frozen=True, slots=True)
class ControlPointPair:
    """Control points around one waypoint.

    ``incoming`` shapes the segment ending at the waypoint, ``outgoing`` the
    segment leaving it. The first waypoint has no incoming point and the last
    has no outgoing one.
    """

    incoming: Point | None
    outgoing: Point | None


@dataclass(frozen=True, slots=True)
class CubicSegment:
    start: Point
    control1: Point
    control2: Point
    end: Point


class DriverState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"
