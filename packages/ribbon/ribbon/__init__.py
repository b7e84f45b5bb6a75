"""ribbon - Animated fans of smooth cubic curves through waypoints."""
from __future__ import annotations

from ribbon import vec
from ribbon.bezier import (
    DEFAULT_TENSION,
    bezier_curve_through,
    control_points,
    flatten,
    point_at,
    render,
    segments,
)
from ribbon.clock import FrameClock, ManualFrameClock
from ribbon.color import gradient, lerp_color, rgb_string
from ribbon.config import Anchor, AnimationConfig
from ribbon.driver import AnimationDriver, FrameState, displacement, waypoints
from ribbon.surface import DrawCommand, RecordingSurface, Surface
from ribbon.types import ColorRGB, ControlPointPair, CubicSegment, DriverState, Point

__all__ = [
    "DEFAULT_TENSION",
    "Anchor",
    "AnimationConfig",
    "AnimationDriver",
    "ColorRGB",
    "ControlPointPair",
    "CubicSegment",
    "DrawCommand",
    "DriverState",
    "FrameClock",
    "FrameState",
    "ManualFrameClock",
    "Point",
    "RecordingSurface",
    "Surface",
    "bezier_curve_through",
    "control_points",
    "displacement",
    "flatten",
    "gradient",
    "lerp_color",
    "point_at",
    "render",
    "rgb_string",
    "segments",
    "vec",
    "waypoints",
]
