from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .datastructures import Point2D
from .errors import InvalidArgumentError


def as_points_array(points) -> np.ndarray:
    """
    Normalise a sequence of point-likes (Point2D, (x, y) pairs) or an (N,2) array
    into a fresh float64 (N,2) array.
    """
    if isinstance(points, np.ndarray):
        arr = np.array(points, dtype=np.float64)
        if arr.size == 0:
            return np.zeros((0, 2), dtype=np.float64)
    else:
        pts = [Point2D.of(p) for p in points]
        if not pts:
            return np.zeros((0, 2), dtype=np.float64)
        arr = np.array([[p.x, p.y] for p in pts], dtype=np.float64)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgumentError(f"points must be (N,2), got shape {arr.shape}")
    return arr


def to_points(arr: np.ndarray) -> list[Point2D]:
    return [Point2D(float(x), float(y)) for x, y in np.asarray(arr, dtype=np.float64).reshape(-1, 2)]


def dist_to_segment_squared(p, v, w) -> float:
    """
    Squared distance from p to the finite segment v-w. Use it for comparisons (no sqrt).
    """
    px, py = p
    vx, vy = v
    wx, wy = w

    l2 = (wx - vx) ** 2 + (wy - vy) ** 2
    if l2 == 0:
        return (px - vx) ** 2 + (py - vy) ** 2

    t = ((px - vx) * (wx - vx) + (py - vy) * (wy - vy)) / l2
    t = max(0.0, min(1.0, t))
    qx = vx + t * (wx - vx)
    qy = vy + t * (wy - vy)
    return (px - qx) ** 2 + (py - qy) ** 2


def dist_to_segment(p, v, w) -> float:
    return math.sqrt(dist_to_segment_squared(p, v, w))


def polygon_area(polygon) -> float:
    """
    Signed shoelace area; positive for counter-clockwise rings (y up).
    """
    P = as_points_array(polygon)
    if len(P) < 3:
        return 0.0
    x, y = P[:, 0], P[:, 1]
    xn, yn = np.roll(x, -1), np.roll(y, -1)
    return float(0.5 * np.sum(x * yn - xn * y))


def polygon_centroid(polygon) -> Point2D:
    """
    Area-weighted centroid of a simple polygon given as an open ring.

    Zero-area input (collinear or fewer than 3 vertices) falls back to the vertex mean.
    """
    P = as_points_array(polygon)
    if len(P) == 0:
        raise InvalidArgumentError("Cannot compute the centroid of an empty polygon")

    x, y = P[:, 0], P[:, 1]
    xn, yn = np.roll(x, -1), np.roll(y, -1)
    cross = x * yn - xn * y
    a2 = float(np.sum(cross))

    scale = float(np.max(np.abs(P))) or 1.0
    if len(P) < 3 or abs(a2) <= 1e-12 * scale * scale:
        m = P.mean(axis=0)
        return Point2D(float(m[0]), float(m[1]))

    cx = float(np.sum((x + xn) * cross)) / (3.0 * a2)
    cy = float(np.sum((y + yn) * cross)) / (3.0 * a2)
    return Point2D(cx, cy)


def sort_points_by_angle(center, points) -> np.ndarray:
    """
    Order points by ascending atan2 around center. Stable for equal angles.
    """
    P = as_points_array(points)
    cx, cy = center
    angles = np.arctan2(P[:, 1] - cy, P[:, 0] - cx)
    return P[np.argsort(angles, kind="stable")]


def inner_circle_radius(polygon, centroid: Optional[Point2D] = None) -> float:
    """
    Radius of the largest circle centred at the centroid that stays inside the polygon,
    taken as the minimum distance from the centroid to any edge.

    Vertices are re-ordered by angle around the centroid first, so edges are walked
    around the ring regardless of the input ordering. The closing edge is included.
    """
    P = as_points_array(polygon)
    n = len(P)
    if n < 2:
        return 0.0

    c = centroid if centroid is not None else polygon_centroid(P)
    ring = sort_points_by_angle(c, P)

    closest = math.inf
    for i in range(n):
        d = dist_to_segment(c, ring[i], ring[(i + 1) % n])
        if d < closest:
            closest = d
    return float(closest)
