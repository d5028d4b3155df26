from __future__ import annotations


def map_range(n: float, start1: float, end1: float, start2: float, end2: float) -> float:
    """Re-map n from [start1, end1] to [start2, end2] (no clamping)."""
    if start1 == end1:
        return start2
    return (n - start1) / (end1 - start1) * (end2 - start2) + start2


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)
