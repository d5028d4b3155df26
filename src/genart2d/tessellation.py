from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np
import structlog
from scipy.spatial import QhullError, Voronoi
from shapely.geometry import LineString, MultiPoint, box
from shapely.geometry.polygon import orient

from .geometry import as_points_array

logger = structlog.get_logger()


def _make_reflections_2d(points: np.ndarray, bounds, include_diagonals: bool = True) -> np.ndarray:
    """
    Create mirrored ghost points around a bounding box so that sites near the border get
    their border edges from a real bisector.

    bounds: (minx, miny, maxx, maxy)
    """
    minx, miny, maxx, maxy = map(float, bounds)

    # reflect x and y around min/max
    fx = [
        lambda x: x,
        lambda x: 2 * minx - x,
        lambda x: 2 * maxx - x,
    ]
    fy = [
        lambda y: y,
        lambda y: 2 * miny - y,
        lambda y: 2 * maxy - y,
    ]

    ghosts = []
    for ix, fxi in enumerate(fx):
        for iy, fyi in enumerate(fy):
            if ix == 0 and iy == 0:
                continue
            if not include_diagonals:
                # only axis reflections (skip diagonal combinations)
                if ix != 0 and iy != 0:
                    continue

            g = np.column_stack([
                fxi(points[:, 0]),
                fyi(points[:, 1])
            ])
            ghosts.append(g)

    return np.vstack(ghosts) if ghosts else np.zeros((0, 2), dtype=np.float64)


def _sentinels(sites: np.ndarray, width: float, height: float) -> np.ndarray:
    # farther from every box point than any site, so they never own anything inside it
    cx, cy = 0.5 * width, 0.5 * height
    spread = float(np.hypot(sites[:, 0] - cx, sites[:, 1] - cy).max()) if len(sites) else 0.0
    d = 10.0 * (width + height) + 4.0 * spread
    return np.array([
        [cx - d, cy - d],
        [cx + d, cy - d],
        [cx + d, cy + d],
        [cx - d, cy + d],
    ], dtype=np.float64)


@dataclass(frozen=True, eq=False)
class ClippedVoronoi:
    """
    Voronoi diagram of a set of sites clipped to [0,width] x [0,height].

    polygons[i] is the clipped cell of site i as an (K,2) counter-clockwise open ring,
    or None when the site has no cell inside the box (outside, or duplicate of an
    earlier site). neighbor_indices[i] lists the sites sharing a clipped edge with i.
    """
    width: float
    height: float
    sites: np.ndarray
    polygons: Tuple[Optional[np.ndarray], ...]
    neighbor_indices: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_sites(cls, sites, width: float, height: float) -> "ClippedVoronoi":
        return tessellate(sites, width, height)

    def update(self, sites) -> "ClippedVoronoi":
        """Tessellation of new site positions in the same box (self is left untouched)."""
        return tessellate(sites, self.width, self.height)

    def cell_polygon(self, index: int) -> Optional[np.ndarray]:
        return self.polygons[index]

    def neighbors(self, index: int) -> Iterator[int]:
        return iter(self.neighbor_indices[index])

    def __len__(self) -> int:
        return len(self.polygons)


def tessellate(
    sites,
    width: float,
    height: float,
    *,
    reflection_diagonals: bool = True,
) -> ClippedVoronoi:
    """
    Compute the clipped Voronoi diagram of sites inside [0,width] x [0,height].

    Key design detail:
    - SciPy Voronoi produces infinite regions for hull points.
    - Sites inside the box are mirrored across its edges (ghosts) and four far sentinel
      sites are added, so every original region is finite. Ghosts of in-box sites never
      take territory inside the box from their originals, so clipping stays exact.
    - Coincident sites are collapsed before Qhull; only the first one keeps a cell.
    - We only return cells for the original sites.
    """
    S = as_points_array(sites)
    width = float(width)
    height = float(height)
    n_orig = len(S)

    if n_orig == 0:
        return ClippedVoronoi(width, height, S, (), ())

    clip = box(0.0, 0.0, width, height)

    inside = (S[:, 0] >= 0) & (S[:, 0] <= width) & (S[:, 1] >= 0) & (S[:, 1] <= height)
    ghosts = _make_reflections_2d(S[inside], (0.0, 0.0, width, height), include_diagonals=reflection_diagonals)
    all_sites = np.vstack([S, ghosts, _sentinels(S, width, height)])

    # originals come first, so return_index points at the original for any shared coordinate
    unique_sites, first_index = np.unique(all_sites, axis=0, return_index=True)

    owner = np.full(len(unique_sites), -1, dtype=np.int64)
    for u, first in enumerate(first_index):
        if first < n_orig:
            owner[u] = first

    polygons: List[Optional[np.ndarray]] = [None] * n_orig

    try:
        vor = Voronoi(unique_sites)
    except QhullError as exc:
        logger.warning("voronoi_qhull_failed", sites=n_orig, error=str(exc))
        return ClippedVoronoi(width, height, S, tuple(polygons), tuple(() for _ in range(n_orig)))

    for u in range(len(unique_sites)):
        i = owner[u]
        if i < 0:
            continue

        region_idx = vor.point_region[u]
        if region_idx < 0:
            continue
        region = vor.regions[region_idx]
        # with sentinels, regions should be finite; still guard:
        if -1 in region or len(region) < 3:
            continue

        # Voronoi cells are convex; the hull gives a valid ring whatever the vertex order
        cell = MultiPoint([tuple(p) for p in vor.vertices[region]]).convex_hull
        clipped = cell.intersection(clip)

        if clipped.is_empty:
            continue

        # handle MultiPolygon by taking largest part
        if clipped.geom_type == "MultiPolygon":
            clipped = max(clipped.geoms, key=lambda g: g.area)

        if clipped.is_empty or clipped.geom_type != "Polygon" or clipped.area <= 0:
            continue

        coords = np.array(orient(clipped, sign=1.0).exterior.coords[:-1], dtype=np.float64)
        if len(coords) < 3:
            continue

        polygons[i] = coords

    tol = 1e-9 * max(width, height)
    neighbor_sets: List[set] = [set() for _ in range(n_orig)]
    for (ua, ub), rv in zip(vor.ridge_points, vor.ridge_vertices):
        a, b = owner[ua], owner[ub]
        if a < 0 or b < 0 or -1 in rv:
            continue
        if polygons[a] is None or polygons[b] is None:
            continue

        shared = LineString(vor.vertices[rv]).intersection(clip)
        if shared.length > tol:
            neighbor_sets[a].add(int(b))
            neighbor_sets[b].add(int(a))

    return ClippedVoronoi(
        width=width,
        height=height,
        sites=S,
        polygons=tuple(polygons),
        neighbor_indices=tuple(tuple(sorted(nb)) for nb in neighbor_sets),
    )
