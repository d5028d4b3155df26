from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import structlog

from .datastructures import Point2D
from .errors import InvalidArgumentError, require_positive

logger = structlog.get_logger()


@dataclass
class _QuadNode:
    """
    Region quadtree node. A leaf splits into four quadrants once it holds more than
    max_objects points, unless it is already at max_levels.
    """
    x: float
    y: float
    width: float
    height: float
    level: int
    max_objects: int
    max_levels: int
    objects: List[Point2D] = field(default_factory=list)
    nodes: List["_QuadNode"] = field(default_factory=list)

    def _split(self) -> None:
        w = self.width / 2
        h = self.height / 2
        child = dict(level=self.level + 1, max_objects=self.max_objects, max_levels=self.max_levels)
        # top-right, top-left, bottom-left, bottom-right
        self.nodes = [
            _QuadNode(self.x + w, self.y, w, h, **child),
            _QuadNode(self.x, self.y, w, h, **child),
            _QuadNode(self.x, self.y + h, w, h, **child),
            _QuadNode(self.x + w, self.y + h, w, h, **child),
        ]

    def _quadrant(self, p: Point2D) -> int:
        east = p.x >= self.x + self.width / 2
        south = p.y >= self.y + self.height / 2
        if south:
            return 3 if east else 2
        return 0 if east else 1

    def insert(self, p: Point2D) -> None:
        if self.nodes:
            self.nodes[self._quadrant(p)].insert(p)
            return

        self.objects.append(p)
        if len(self.objects) > self.max_objects and self.level < self.max_levels:
            self._split()
            for obj in self.objects:
                self.nodes[self._quadrant(obj)].insert(obj)
            self.objects = []

    def leaves(self) -> List["_QuadNode"]:
        if not self.nodes:
            return [self]
        out: List[_QuadNode] = []
        for n in self.nodes:
            out.extend(n.leaves())
        return out


@dataclass(frozen=True)
class GridSpan:
    start: float
    end: float


@dataclass(frozen=True)
class QtGridArea:
    x: float
    y: float
    width: float
    height: float
    col: GridSpan  # in units of the finest column
    row: GridSpan


@dataclass
class QtGrid:
    width: float
    height: float
    cols: int  # columns at maximum subdivision
    rows: int
    areas: List[QtGridArea]


def create_qt_grid(
    width: float = 1024,
    height: float = 1024,
    points: Sequence = (),
    gap: float = 0,
    max_qt_objects: int = 10,
    max_qt_levels: int = 4,
) -> QtGrid:
    """
    Adaptive grid from quadtree subdivision: dense regions of `points` get small areas,
    empty regions stay large. Each leaf of the tree is one area, shrunk by `gap` on
    every side.
    """
    width = require_positive("width", width)
    height = require_positive("height", height)
    if int(max_qt_levels) < 0:
        raise InvalidArgumentError(f"max_qt_levels must be >= 0, got {max_qt_levels!r}")
    if int(max_qt_objects) < 0:
        raise InvalidArgumentError(f"max_qt_objects must be >= 0, got {max_qt_objects!r}")

    root = _QuadNode(0.0, 0.0, width, height, level=0,
                     max_objects=int(max_qt_objects), max_levels=int(max_qt_levels))
    for p in points:
        root.insert(Point2D.of(p))

    subdivisions = 2 ** int(max_qt_levels)
    col_size = width / subdivisions
    row_size = height / subdivisions

    areas = [
        QtGridArea(
            x=n.x + gap,
            y=n.y + gap,
            width=n.width - gap * 2,
            height=n.height - gap * 2,
            col=GridSpan(n.x / col_size, (n.x + n.width) / col_size),
            row=GridSpan(n.y / row_size, (n.y + n.height) / row_size),
        )
        for n in root.leaves()
    ]
    logger.debug("qt_grid_built", points=len(points), areas=len(areas))

    return QtGrid(width=width, height=height, cols=subdivisions, rows=subdivisions, areas=areas)
