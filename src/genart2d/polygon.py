from __future__ import annotations

import math
from typing import List, Sequence

from .datastructures import Point2D
from .errors import InvalidArgumentError


def polygon(
    sides: int = 6,
    radius: float = 50.0,
    cx: float = 0.0,
    cy: float = 0.0,
    rotation: float = 0.0,
) -> List[Point2D]:
    """
    Vertices of a regular polygon (3 = triangle, 4 = square, ...), first vertex at
    angle `rotation` (radians), counter-clockwise.
    """
    if int(sides) < 1:
        raise InvalidArgumentError(f"sides must be >= 1, got {sides!r}")
    sides = int(sides)

    out = []
    for i in range(sides):
        a = i / sides * 2.0 * math.pi + rotation
        out.append(Point2D(cx + math.cos(a) * radius, cy + math.sin(a) * radius))
    return out


def star(
    points: int = 5,
    outer_radius: float = 50.0,
    inner_radius: float = 25.0,
    cx: float = 0.0,
    cy: float = 0.0,
    rotation: float = 0.0,
) -> List[Point2D]:
    """
    Star outline with `points` tips: 2*points vertices alternating outer/inner radius,
    starting with an outer tip.
    """
    if int(points) < 1:
        raise InvalidArgumentError(f"points must be >= 1, got {points!r}")
    total = int(points) * 2

    out = []
    for i in range(total):
        a = i / total * 2.0 * math.pi + rotation
        r = outer_radius if i % 2 == 0 else inner_radius
        out.append(Point2D(cx + math.cos(a) * r, cy + math.sin(a) * r))
    return out


def _fmt(v: float) -> str:
    # 10.0 -> "10", keeps paths compact
    return repr(int(v)) if float(v).is_integer() else repr(float(v))


def points_to_path(points: Sequence, close: bool = True) -> str:
    """SVG path data through the points: "M x,y L x,y ... Z"."""
    pts = [Point2D.of(p) for p in points or ()]
    if not pts:
        return ""

    d = f"M{_fmt(pts[0].x)},{_fmt(pts[0].y)}"
    if len(pts) == 1:
        return d

    for p in pts[1:]:
        d += f"L{_fmt(p.x)},{_fmt(p.y)}"
    if close:
        d += "Z"
    return d
