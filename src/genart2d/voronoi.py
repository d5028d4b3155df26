from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

import numpy as np
import structlog

from .datastructures import VoronoiCell, VoronoiDiagram
from .errors import InvalidArgumentError, require_positive
from .geometry import as_points_array, inner_circle_radius, polygon_centroid, to_points
from .tessellation import ClippedVoronoi

logger = structlog.get_logger()


@dataclass
class RelaxationStep:
    iteration: int  # 1-based
    sites: np.ndarray  # (N,2) positions after this iteration
    displacement: float  # summed distance the sites moved in this iteration
    tessellation: ClippedVoronoi  # tessellation of `sites`


def iter_relaxation(
    sites,
    *,
    width: float,
    height: float,
    iterations: int,
    factor: float = 0.5,
    tessellation: Optional[ClippedVoronoi] = None,
) -> Iterator[RelaxationStep]:
    """
    Damped Lloyd relaxation: every iteration moves each site `factor` of the way toward
    the centroid of its clipped cell, then re-tessellates.

    factor=1 is classic Lloyd. Sites without a cell stay where they are. The input is
    copied, never modified.
    """
    S = as_points_array(sites)
    tess = tessellation if tessellation is not None else ClippedVoronoi.from_sites(S, width, height)

    for k in range(int(iterations)):
        moved = S.copy()
        for i in range(len(S)):
            poly = tess.cell_polygon(i)
            if poly is None:
                continue
            c = polygon_centroid(poly)
            moved[i, 0] = S[i, 0] + (c.x - S[i, 0]) * factor
            moved[i, 1] = S[i, 1] + (c.y - S[i, 1]) * factor

        displacement = float(np.linalg.norm(moved - S, axis=1).sum()) if len(S) else 0.0
        S = moved
        tess = tess.update(S)
        yield RelaxationStep(iteration=k + 1, sites=S.copy(), displacement=displacement, tessellation=tess)


def _format_cell(polygon: np.ndarray) -> VoronoiCell:
    centroid = polygon_centroid(polygon)
    return VoronoiCell(
        points=to_points(polygon),
        centroid=centroid,
        inner_circle_radius=inner_circle_radius(polygon, centroid),
        neighbors=[],
    )


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def _is_count(value) -> bool:
    # nan and inf fail isfinite before int() sees them
    return _is_finite(value) and int(value) == value and value >= 0


def build_voronoi_diagram(
    *,
    width: float = 1024,
    height: float = 1024,
    points: Sequence = (),
    relax_iterations: int = 8,
    relaxation_factor: float = 0.5,
) -> VoronoiDiagram:
    """
    Relaxed Voronoi tessellation of `points` clipped to [0,width] x [0,height].

    Returns the cells (ascending site order, sites without a cell omitted) and the final
    position of every input site, index-aligned with `points`. Cell neighbors only refer
    to cells of the returned diagram; they come from the final tessellation.
    """
    width = require_positive("width", width)
    height = require_positive("height", height)
    if not _is_count(relax_iterations):
        raise InvalidArgumentError(f"relax_iterations must be an integer >= 0, got {relax_iterations!r}")
    if not _is_finite(relaxation_factor):
        raise InvalidArgumentError(f"relaxation_factor must be finite, got {relaxation_factor!r}")

    sites = as_points_array(points)
    tess = ClippedVoronoi.from_sites(sites, width, height)

    for step in iter_relaxation(
        sites,
        width=width,
        height=height,
        iterations=int(relax_iterations),
        factor=float(relaxation_factor),
        tessellation=tess,
    ):
        sites, tess = step.sites, step.tessellation
        logger.debug("voronoi_relax_step", iteration=step.iteration, displacement=step.displacement)

    # one optional slot per site index, compacted at the end
    slots: List[Optional[VoronoiCell]] = [None] * len(sites)
    for i in range(len(sites)):
        poly = tess.cell_polygon(i)
        if poly is not None:
            slots[i] = _format_cell(poly)

    for i, cell in enumerate(slots):
        if cell is None:
            continue
        cell.neighbors = [slots[j] for j in tess.neighbors(i) if slots[j] is not None]

    cells = [c for c in slots if c is not None]
    if len(cells) < len(slots):
        logger.debug("voronoi_cells_dropped", dropped=len(slots) - len(cells))

    return VoronoiDiagram(cells=cells, points=to_points(sites))


# same operation, under the name used for cell-first workflows
build_voronoi_tessellation = build_voronoi_diagram


def site_to_centroid_distances(diagram: VoronoiDiagram) -> List[float]:
    """
    Distance between each site and its cell centroid, for diagrams where every site owns
    a cell (cells and points are then index-aligned).
    """
    if diagram.cell_count() != diagram.point_count():
        raise InvalidArgumentError("diagram has sites without cells; cells and points are not aligned")
    return [
        math.hypot(c.centroid.x - p.x, c.centroid.y - p.y)
        for c, p in zip(diagram.cells, diagram.points)
    ]
