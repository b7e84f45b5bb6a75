"""Smooth curves through waypoints as chained cubic Bezier segments.

Every interior waypoint gets a tangent estimated from its two neighbours,
``normalize(next - prev)``. The control points sit on that tangent at a
fraction (the tension) of the distance to the neighbouring waypoints, so
consecutive segments share a tangent line at every waypoint. The two path
ends have a single control point each, halfway between the endpoint and
its neighbour's facing control point.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ribbon import vec
from ribbon.types import ControlPointPair, CubicSegment, Point

if TYPE_CHECKING:
    from ribbon.surface import Surface

DEFAULT_TENSION = 0.25


def _as_points(points: Sequence[Sequence[float]]) -> list[Point]:
    return [(float(p[0]), float(p[1])) for p in points]


def control_points(
    points: Sequence[Sequence[float]], tension: float | None = DEFAULT_TENSION,
) -> list[ControlPointPair]:
    """Return one ControlPointPair per waypoint.

    A falsy tension (``0`` or ``None``) falls back to DEFAULT_TENSION.
    Sequences shorter than three points carry no control points.
    """
    tension = tension or DEFAULT_TENSION
    pts = _as_points(points)
    n = len(pts)
    if n < 3:
        return [ControlPointPair(None, None) for _ in pts]

    incoming: list[Point | None] = [None] * n
    outgoing: list[Point | None] = [None] * n

    for i in range(1, n - 1):
        prev, cur, nxt = pts[i - 1], pts[i], pts[i + 1]
        # Zero when prev and next coincide: both controls collapse onto cur.
        tangent = vec.normalize(vec.sub(nxt, prev))
        dp = vec.distance(cur, prev)
        dn = vec.distance(nxt, cur)
        incoming[i] = vec.sub(cur, vec.scale(tangent, dp * tension))
        outgoing[i] = vec.add(cur, vec.scale(tangent, dn * tension))

    outgoing[0] = vec.midpoint(pts[0], incoming[1])  # type: ignore[arg-type]
    incoming[n - 1] = vec.midpoint(pts[n - 1], outgoing[n - 2])  # type: ignore[arg-type]

    return [ControlPointPair(incoming[i], outgoing[i]) for i in range(n)]


def segments(
    points: Sequence[Sequence[float]], tension: float | None = DEFAULT_TENSION,
) -> list[CubicSegment]:
    """Return the n-1 cubic segments of the smooth path, or [] below 3 points."""
    pts = _as_points(points)
    if len(pts) < 3:
        return []
    pairs = control_points(pts, tension)
    result = []
    for i in range(len(pts) - 1):
        c1 = pairs[i].outgoing
        c2 = pairs[i + 1].incoming
        assert c1 is not None and c2 is not None
        result.append(CubicSegment(pts[i], c1, c2, pts[i + 1]))
    return result


def render(
    surface: Surface,
    points: Sequence[Sequence[float]],
    tension: float | None = DEFAULT_TENSION,
) -> None:
    """Stroke a smooth curve through ``points`` on ``surface``.

    Uses whatever stroke style and width the surface currently has and never
    clears it. Fewer than two points draw nothing; exactly two draw a
    straight line.
    """
    pts = _as_points(points)
    n = len(pts)
    if n < 2:
        return

    surface.begin_path()
    surface.move_to(*pts[0])

    if n == 2:
        surface.line_to(*pts[1])
        surface.stroke()
        return

    for seg in segments(pts, tension):
        surface.bezier_curve_to(*seg.control1, *seg.control2, *seg.end)
    surface.stroke()


bezier_curve_through = render


def point_at(segment: CubicSegment, t: float) -> Point:
    """Evaluate a cubic segment at parameter t in [0, 1]."""
    u = 1.0 - t
    b0 = u * u * u
    b1 = 3 * u * u * t
    b2 = 3 * u * t * t
    b3 = t * t * t
    x = (b0 * segment.start[0] + b1 * segment.control1[0]
         + b2 * segment.control2[0] + b3 * segment.end[0])
    y = (b0 * segment.start[1] + b1 * segment.control1[1]
         + b2 * segment.control2[1] + b3 * segment.end[1])
    return (x, y)


def flatten(segment: CubicSegment, steps: int = 24) -> list[Point]:
    """Sample ``steps + 1`` points along a segment, endpoints included."""
    if steps <= 0:
        raise ValueError("steps must be positive")
    samples = [point_at(segment, i / steps) for i in range(steps)]
    samples.append(segment.end)
    return samples
