from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

import structlog
from opensimplex import OpenSimplex

from .errors import InvalidArgumentError, require_positive
from .prng import Prng, resolve_prng
from .scalar import clamp

logger = structlog.get_logger()


@dataclass(frozen=True)
class NoiseCell:
    x: float
    y: float
    width: float
    height: float
    noise_value: float  # simplex noise in [-1, 1]


@dataclass
class NoiseGrid:
    cells: List[NoiseCell]
    width: float
    height: float
    cols: int
    rows: int
    seed: int

    def lookup(self, pos) -> NoiseCell:
        """Cell under `pos` (anything with x/y); positions outside the grid are clamped."""
        col = int(math.floor(clamp(pos.x, 0, self.width - 1) / (self.width / self.cols)))
        row = int(math.floor(clamp(pos.y, 0, self.height - 1) / (self.height / self.rows)))
        col = min(max(col, 0), self.cols - 1)
        row = min(max(row, 0), self.rows - 1)
        return self.cells[col + row * self.cols]


def create_noise_grid(
    width: float = 200,
    height: float = 200,
    resolution: int = 8,
    x_inc: float = 0.01,
    y_inc: float = 0.01,
    seed: Optional[int] = None,
    *,
    prng: Optional[Prng] = None,
) -> NoiseGrid:
    """
    resolution x resolution grid of simplex noise samples, for flow fields and textures.

    Lower increments give smoother fields. The noise offset walks x_inc per column
    (restarting each row) and y_inc per row. seed=None draws one from the prng:

        grid = create_noise_grid(width=400, height=400, resolution=20)
        angle = grid.lookup(Point2D(150, 200)).noise_value * 2 * math.pi
    """
    width = require_positive("width", width)
    height = require_positive("height", height)
    if int(resolution) < 1:
        raise InvalidArgumentError(f"resolution must be >= 1, got {resolution!r}")
    resolution = int(resolution)

    if seed is None:
        seed = int(resolve_prng(prng).next() * 1000)
    simplex = OpenSimplex(seed=int(seed))

    col_size = width / resolution
    row_size = height / resolution

    cells: List[NoiseCell] = []
    y_off = 0.0
    for row in range(resolution):
        x_off = 0.0
        for col in range(resolution):
            cells.append(
                NoiseCell(
                    x=col * col_size,
                    y=row * row_size,
                    width=col_size,
                    height=row_size,
                    noise_value=float(simplex.noise2(x_off, y_off)),
                )
            )
            x_off += x_inc
        y_off += y_inc

    logger.debug("noise_grid_built", resolution=resolution, seed=int(seed))

    return NoiseGrid(cells=cells, width=width, height=height, cols=resolution, rows=resolution, seed=int(seed))
