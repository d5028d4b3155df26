from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .datastructures import Point2D
from .errors import InvalidArgumentError
from .polygon import _fmt


@dataclass(frozen=True)
class BezierSegment:
    """Cubic Bézier from the previous segment's end (or the start point) to `end`."""
    cp1: Point2D
    cp2: Point2D
    end: Point2D


def spline_segments(points: Sequence, tension: float = 1.0, close: bool = False) -> tuple[Point2D, List[BezierSegment]]:
    """
    Catmull-Rom spline through `points`, converted to cubic Bézier segments.

    Returns (start point, segments). For each span p1 -> p2 the control points are
    p1 + (p2 - p0) / 6 * tension and p2 - (p3 - p1) / 6 * tension. Open splines reuse
    the end points as their own outer neighbours; closed splines wrap around.
    """
    pts = [Point2D.of(p) for p in points]
    if not pts:
        raise InvalidArgumentError("spline needs at least one point")
    n = len(pts)
    if n == 1:
        return pts[0], []

    if close:
        spans = [(pts[(i - 1) % n], pts[i], pts[(i + 1) % n], pts[(i + 2) % n]) for i in range(n)]
    else:
        spans = [
            (pts[max(i - 1, 0)], pts[i], pts[i + 1], pts[min(i + 2, n - 1)])
            for i in range(n - 1)
        ]

    segments = []
    for p0, p1, p2, p3 in spans:
        cp1 = Point2D(p1.x + (p2.x - p0.x) / 6 * tension, p1.y + (p2.y - p0.y) / 6 * tension)
        cp2 = Point2D(p2.x - (p3.x - p1.x) / 6 * tension, p2.y - (p3.y - p1.y) / 6 * tension)
        segments.append(BezierSegment(cp1=cp1, cp2=cp2, end=p2))
    return pts[0], segments


def spline(points: Sequence, tension: float = 1.0, close: bool = False) -> str:
    """SVG path data ("M ... C ...") for a Catmull-Rom spline through the points."""
    start, segments = spline_segments(points, tension=tension, close=close)

    d = f"M{_fmt(start.x)},{_fmt(start.y)}"
    for s in segments:
        d += "C" + ",".join(_fmt(v) for v in (s.cp1.x, s.cp1.y, s.cp2.x, s.cp2.y, s.end.x, s.end.y))
    return d
