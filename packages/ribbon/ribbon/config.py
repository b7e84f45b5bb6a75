"""Animation configuration dataclasses."""
from __future__ import annotations

from dataclasses import dataclass

from ribbon.types import ColorRGB, Point


@dataclass(frozen=True)
class Anchor:
    """One waypoint slot of the curve fan.

    For curve ``i`` under displacement ``k`` the waypoint is
    ``(x + k * sway, y + i * spread + k * sway)``.
    """

    x: float
    y: float
    spread: float = 0.0
    sway: float = 0.0

    def place(self, index: int, k: float) -> Point:
        return (self.x + k * self.sway, self.y + index * self.spread + k * self.sway)


DEFAULT_ANCHORS: tuple[Anchor, ...] = (
    Anchor(0.0, 0.0, spread=4.0),
    Anchor(230.0, 100.0, spread=9.0, sway=1.0),
    Anchor(500.0, 300.0, spread=9.0, sway=1.0),
    Anchor(800.0, 300.0, spread=8.0),
)


@dataclass(frozen=True)
class AnimationConfig:
    """Immutable configuration for the curve fan animation.

    Attributes:
        curve_count: Curves drawn per frame.
        amplitude: Peak displacement applied to swaying anchors.
        period: Duration of one full oscillation, in host timestamp units.
        tension: Control point pull along the tangent.
        start_color: Stroke colour of curve 0.
        end_color: Colour the gradient heads towards (never reached).
        width: Surface width in pixels.
        height: Surface height in pixels.
        line_width: Stroke width in pixels.
        background: Fill used by surfaces that clear to a solid colour.
        anchors: Waypoint slots, in traversal order.
    """

    curve_count: int = 70
    amplitude: float = 40.0
    period: float = 5000.0
    tension: float = 0.25
    start_color: ColorRGB = (38, 69, 187)
    end_color: ColorRGB = (238, 0, 53)
    width: int = 800
    height: int = 600
    line_width: int = 1
    background: ColorRGB = (255, 255, 255)
    anchors: tuple[Anchor, ...] = DEFAULT_ANCHORS

    def __post_init__(self) -> None:
        if self.curve_count <= 0:
            raise ValueError("curve_count must be positive")
        if self.period <= 0:
            raise ValueError("period must be positive")
        if self.tension < 0:
            raise ValueError("tension must not be negative")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.line_width <= 0:
            raise ValueError("line_width must be positive")
        if len(self.anchors) < 2:
            raise ValueError("at least two anchors are required")
        for name in ("start_color", "end_color", "background"):
            color = getattr(self, name)
            if len(color) != 3 or not all(0 <= c <= 255 for c in color):
                raise ValueError(f"{name} must be three channels in 0-255")
