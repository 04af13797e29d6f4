"""
Region Model
============

A ``Region`` is a stored shape with identity (caller-chosen ``id``), a
display ``name`` and an intrinsic ``orientation`` vector (its facing).

The shape is a tagged variant (``Circle`` | ``Polygon``); each capability
below dispatches on the tag in one place. No relation policy lives here.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from geometry import kernel
from geometry.primitives import EPSILON, Point, bounding_box, polygon_centroid, polygon_signed_area
from geometry.shapes import Circle, Polygon, Shape, ShapeKind
from qsr_base.errors import DegenerateInputError


@dataclass(frozen=True)
class Region:
    """
    Immutable stored region.

    Attributes:
        id: Unique id assigned by the caller
        name: Display label, unused by relation computation
        orientation: Intrinsic facing vector (i, j)
        shape: Circle or Polygon
    """
    id: int
    name: str
    orientation: Tuple[float, float]
    shape: Shape

    def __post_init__(self):
        i, j = self.orientation
        i, j = float(i), float(j)
        if not (math.isfinite(i) and math.isfinite(j)):
            raise DegenerateInputError(f"Orientation must be finite, got {self.orientation}")
        object.__setattr__(self, 'orientation', (i, j))

    @property
    def kind(self) -> ShapeKind:
        return self.shape.kind

    def centroid(self) -> Point:
        """Circle centre, or the arithmetic mean of the polygon vertices."""
        shape = self.shape
        if shape.kind is ShapeKind.CIRCLE:
            return shape.center
        if shape.kind is ShapeKind.POLYGON:
            return polygon_centroid(shape.vertices)
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")

    def area(self) -> float:
        shape = self.shape
        if shape.kind is ShapeKind.CIRCLE:
            return math.pi * shape.radius ** 2
        if shape.kind is ShapeKind.POLYGON:
            return abs(polygon_signed_area(shape.vertices))
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")

    def bounds(self) -> Tuple[float, float, float, float]:
        """Axis-aligned bounding box (xmin, ymin, xmax, ymax)."""
        shape = self.shape
        if shape.kind is ShapeKind.CIRCLE:
            cx, cy = shape.center
            r = shape.radius
            return (cx - r, cy - r, cx + r, cy + r)
        if shape.kind is ShapeKind.POLYGON:
            return bounding_box(shape.vertices)
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")

    def contains_point(self, p: Point, eps: float = EPSILON) -> bool:
        return kernel.contains_point(self.shape, p, eps)

    def boundary_intersects(self, other: 'Region', eps: float = EPSILON) -> bool:
        return kernel.boundaries_intersect(self.shape, other.shape, eps)

    def boundary_points(self) -> List[Point]:
        return kernel.boundary_points(self.shape)

    def describe(self) -> str:
        shape = self.shape
        if shape.kind is ShapeKind.CIRCLE:
            cx, cy = shape.center
            geometry = f"circle c=({cx:g}, {cy:g}) r={shape.radius:g}"
        else:
            geometry = f"polygon n={len(shape)}"
        return f"{self.name}#{self.id} [{geometry}]"


def make_circle(x: float, y: float, radius: float, i: float, j: float,
                shape_id: int, name: str) -> Region:
    """Build a circular region; raises DegenerateInputError on bad input."""
    return Region(id=shape_id, name=name, orientation=(i, j),
                  shape=Circle(center=(x, y), radius=radius))


def make_polygon(points: Iterable[Point], i: float, j: float,
                 shape_id: int, name: str) -> Region:
    """Build a polygonal region; raises DegenerateInputError on bad input."""
    return Region(id=shape_id, name=name, orientation=(i, j),
                  shape=Polygon.from_points(points))
