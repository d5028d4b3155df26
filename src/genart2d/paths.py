from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import numpy as np
from svgelements import Line, Matrix, Move, Path

from .datastructures import Point2D

CURVE_STEPS = 64


def _flatten(path: Path, steps: int = CURVE_STEPS):
    """
    Polyline approximation of an SVG path: (points (K,2), cumulative length (K,)).
    Jumps between subpaths add no length.
    """
    pts: List[List[float]] = []
    cum: List[float] = []

    for seg in path.segments():
        if isinstance(seg, Move) or seg.start is None or seg.end is None:
            continue

        ts = (0.0, 1.0) if isinstance(seg, Line) else np.linspace(0.0, 1.0, steps + 1)
        samples = [seg.point(float(t)) for t in ts]

        for k, p in enumerate(samples):
            x, y = float(p.x), float(p.y)
            if not pts:
                pts.append([x, y])
                cum.append(0.0)
                continue
            px, py = pts[-1]
            step = 0.0 if k == 0 else float(np.hypot(x - px, y - py))
            pts.append([x, y])
            cum.append(cum[-1] + step)

    return np.asarray(pts, dtype=np.float64).reshape(-1, 2), np.asarray(cum, dtype=np.float64)


def path_length(d: str) -> float:
    _, cum = _flatten(Path(d))
    return float(cum[-1]) if len(cum) else 0.0


def points_in_path(d: str, num_points: int = 10) -> List[Point2D]:
    """
    `num_points` points spread evenly by length along the SVG path data `d`.
    The first point is the path start and the last one is the path end.
    """
    if num_points < 1:
        return []

    pts, cum = _flatten(Path(d))
    if len(pts) == 0:
        return []

    if num_points == 1:
        return [Point2D(float(pts[0, 0]), float(pts[0, 1]))]

    total = float(cum[-1])
    targets = np.linspace(0.0, total, int(num_points))
    xs = np.interp(targets, cum, pts[:, 0])
    ys = np.interp(targets, cum, pts[:, 1])

    out = [Point2D(float(x), float(y)) for x, y in zip(xs[:-1], ys[:-1])]
    # ensure the last point is exactly the end of the path
    out.append(Point2D(float(pts[-1, 0]), float(pts[-1, 1])))
    return out


def create_coords_transformer(screen_ctm: Optional[Sequence[float]]) -> Callable[[object], Point2D]:
    """
    Map client (screen) coordinates into user space through the inverse of the screen
    transform matrix (a, b, c, d, e, f). With no matrix, coordinates pass through.
    """
    if screen_ctm is None:
        return Point2D.of

    inverse = ~Matrix(*[float(v) for v in screen_ctm])

    def transform(client) -> Point2D:
        p = Point2D.of(client)
        q = inverse.point_in_matrix_space((p.x, p.y))
        return Point2D(float(q.x), float(q.y))

    return transform
