from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @classmethod
    def of(cls, obj) -> "Point2D":
        """
        Accept a Point2D, an {"x", "y"} mapping, an object with x/y attributes, or an
        (x, y) pair / array row.
        """
        if isinstance(obj, Point2D):
            return obj
        if isinstance(obj, Mapping):
            if "x" not in obj or "y" not in obj:
                raise InvalidArgumentError(f"point mapping needs 'x' and 'y' keys, got {list(obj)!r}")
            return cls(float(obj["x"]), float(obj["y"]))
        if hasattr(obj, "x") and hasattr(obj, "y"):
            return cls(float(obj.x), float(obj.y))
        x, y = obj
        return cls(float(x), float(y))


@dataclass
class VoronoiCell:
    points: List[Point2D]  # convex ring, no closing duplicate
    centroid: Point2D
    inner_circle_radius: float
    # back-references to other cells of the same diagram
    neighbors: List["VoronoiCell"] = field(default_factory=list, repr=False, compare=False)


@dataclass
class VoronoiDiagram:
    cells: List[VoronoiCell]
    points: List[Point2D]  # final site positions, index-aligned with the input

    def cell_count(self) -> int:
        return len(self.cells)

    def point_count(self) -> int:
        return len(self.points)
