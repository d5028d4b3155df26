from .datastructures import Point2D, VoronoiCell, VoronoiDiagram
from .errors import Genart2dError, InvalidArgumentError
from .geometry import dist_to_segment, dist_to_segment_squared, inner_circle_radius, polygon_area, polygon_centroid
from .poisson import poisson_disc
from .prng import Prng, get_prng, seed_prng
from .random import random_bias, random_choice, random_in_range, random_int, random_snap
from .tessellation import ClippedVoronoi, tessellate
from .voronoi import build_voronoi_diagram, build_voronoi_tessellation, iter_relaxation

__all__ = [
    "Point2D",
    "VoronoiCell",
    "VoronoiDiagram",
    "Genart2dError",
    "InvalidArgumentError",
    "dist_to_segment",
    "dist_to_segment_squared",
    "inner_circle_radius",
    "polygon_area",
    "polygon_centroid",
    "poisson_disc",
    "Prng",
    "get_prng",
    "seed_prng",
    "random_bias",
    "random_choice",
    "random_in_range",
    "random_int",
    "random_snap",
    "ClippedVoronoi",
    "tessellate",
    "build_voronoi_diagram",
    "build_voronoi_tessellation",
    "iter_relaxation",
]

from . import vec2
from .log import configure_logging
from .noise_grid import NoiseCell, NoiseGrid, create_noise_grid
from .paths import create_coords_transformer, path_length, points_in_path
from .polygon import points_to_path, polygon, star
from .qt_grid import GridSpan, QtGrid, QtGridArea, create_qt_grid
from .scalar import clamp, lerp, map_range
from .spline import BezierSegment, spline, spline_segments

__all__ += [
    "vec2",
    "configure_logging",
    "NoiseCell",
    "NoiseGrid",
    "create_noise_grid",
    "create_coords_transformer",
    "path_length",
    "points_in_path",
    "points_to_path",
    "polygon",
    "star",
    "GridSpan",
    "QtGrid",
    "QtGridArea",
    "create_qt_grid",
    "clamp",
    "lerp",
    "map_range",
    "BezierSegment",
    "spline",
    "spline_segments",
]
