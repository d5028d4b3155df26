"""
2D vector operations on Point2D values. Every function returns a new Point2D.
"""
from __future__ import annotations

import math

from .datastructures import Point2D


def create(x: float = 0.0, y: float = 0.0) -> Point2D:
    return Point2D(float(x), float(y))


def add(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(a.x + b.x, a.y + b.y)


def subtract(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(a.x - b.x, a.y - b.y)


def multiply(v: Point2D, s: float) -> Point2D:
    return Point2D(v.x * s, v.y * s)


def divide(v: Point2D, s: float) -> Point2D:
    return Point2D(v.x / s, v.y / s)


def magnitude(v: Point2D) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def magnitude_squared(v: Point2D) -> float:
    return v.x * v.x + v.y * v.y


def normalize(v: Point2D) -> Point2D:
    """Unit vector in the direction of v; the zero vector stays zero."""
    mag = magnitude(v)
    if mag == 0:
        return Point2D(0.0, 0.0)
    return Point2D(v.x / mag, v.y / mag)


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def distance_squared(a: Point2D, b: Point2D) -> float:
    dx = b.x - a.x
    dy = b.y - a.y
    return dx * dx + dy * dy


def dot(a: Point2D, b: Point2D) -> float:
    return a.x * b.x + a.y * b.y


def cross(a: Point2D, b: Point2D) -> float:
    """z component of the 3D cross product."""
    return a.x * b.y - a.y * b.x


def rotate(v: Point2D, angle: float) -> Point2D:
    c = math.cos(angle)
    s = math.sin(angle)
    return Point2D(v.x * c - v.y * s, v.x * s + v.y * c)


def rotate_around(v: Point2D, pivot: Point2D, angle: float) -> Point2D:
    return add(rotate(subtract(v, pivot), angle), pivot)


def lerp(a: Point2D, b: Point2D, t: float) -> Point2D:
    return Point2D(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def angle(v: Point2D) -> float:
    """Angle from the positive x axis, in (-pi, pi]."""
    return math.atan2(v.y, v.x)


def angle_between(a: Point2D, b: Point2D) -> float:
    """Unsigned angle in [0, pi]; 0 if either vector is zero."""
    mags = magnitude(a) * magnitude(b)
    if mags == 0:
        return 0.0
    return math.acos(min(1.0, max(-1.0, dot(a, b) / mags)))


def from_angle(angle: float, mag: float = 1.0) -> Point2D:
    return Point2D(math.cos(angle) * mag, math.sin(angle) * mag)


def perpendicular(v: Point2D) -> Point2D:
    # 90 degrees counter-clockwise
    return Point2D(-v.y, v.x)


def reflect(v: Point2D, normal: Point2D) -> Point2D:
    """Reflect v off a surface with unit normal `normal`."""
    d = 2 * dot(v, normal)
    return Point2D(v.x - d * normal.x, v.y - d * normal.y)


def limit(v: Point2D, max_mag: float) -> Point2D:
    if magnitude_squared(v) > max_mag * max_mag:
        return multiply(normalize(v), max_mag)
    return Point2D(v.x, v.y)


def set_magnitude(v: Point2D, mag: float) -> Point2D:
    return multiply(normalize(v), mag)
