from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np
import structlog

from .datastructures import Point2D
from .errors import InvalidArgumentError, require_positive
from .prng import Prng, resolve_prng

logger = structlog.get_logger()


def poisson_disc(
    width: float = 100.0,
    height: float = 100.0,
    radius: float = 10.0,
    max_attempts: int = 30,
    *,
    prng: Optional[Prng] = None,
) -> List[Point2D]:
    """
    Blue-noise point set in [0,width) x [0,height) with pairwise distance >= radius
    (Bridson's algorithm).

    Key design detail:
    - grid cells are radius/sqrt(2) wide, so a cell can hold at most one accepted point
      and a candidate only has to be checked against the 5x5 block around its cell.
    - the spawn point is drawn from the active list, never from all accepted points.
    - an active point is retired after max_attempts consecutive misses.

    Points are returned in acceptance order; the first one is the random seed point.
    Deterministic for a given prng state.
    """
    width = require_positive("width", width)
    height = require_positive("height", height)
    radius = require_positive("radius", radius)
    if int(max_attempts) < 1:
        raise InvalidArgumentError(f"max_attempts must be >= 1, got {max_attempts!r}")
    max_attempts = int(max_attempts)

    rand = resolve_prng(prng).next

    cell = radius / math.sqrt(2.0)
    gw = int(math.ceil(width / cell))
    gh = int(math.ceil(height / cell))
    grid = np.full((gh, gw), -1, dtype=np.int64)
    r2 = radius * radius

    samples: List[Tuple[float, float]] = []
    active: List[int] = []

    def valid(x: float, y: float) -> bool:
        if x < 0 or x >= width or y < 0 or y >= height:
            return False

        col = min(int(x // cell), gw - 1)
        row = min(int(y // cell), gh - 1)
        for rr in range(max(row - 2, 0), min(row + 3, gh)):
            for cc in range(max(col - 2, 0), min(col + 3, gw)):
                si = grid[rr, cc]
                if si == -1:
                    continue
                qx, qy = samples[si]
                if (qx - x) ** 2 + (qy - y) ** 2 < r2:
                    return False
        return True

    def add(x: float, y: float) -> None:
        idx = len(samples)
        samples.append((x, y))
        active.append(idx)
        grid[min(int(y // cell), gh - 1), min(int(x // cell), gw - 1)] = idx

    add(rand() * width, rand() * height)

    while active:
        slot = int(rand() * len(active))
        bx, by = samples[active[slot]]

        found = False
        for _ in range(max_attempts):
            theta = rand() * 2.0 * math.pi
            dist = radius + rand() * radius
            x = bx + math.cos(theta) * dist
            y = by + math.sin(theta) * dist
            if valid(x, y):
                add(x, y)
                found = True
                break

        if not found:
            active.pop(slot)

    logger.debug(
        "poisson_disc_done",
        width=width,
        height=height,
        radius=radius,
        points=len(samples),
    )
    return [Point2D(x, y) for x, y in samples]
