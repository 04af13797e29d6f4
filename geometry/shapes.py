"""
Geometric Shapes
================

The two shape variants a region can take: ``Circle`` and ``Polygon``.

Shapes are immutable (frozen dataclasses; polygon vertices are a read-only
numpy array) and validated at construction. Invalid input raises
``DegenerateInputError`` and no shape is created.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Iterator, List, Union

import numpy as np
from shapely.geometry import LinearRing

from geometry.primitives import Point, Segment, iter_edges, polygon_signed_area
from qsr_base.errors import DegenerateInputError


# Polygons whose absolute area is at or below this are rejected as collinear
MIN_POLYGON_AREA = 1e-12


class ShapeKind(Enum):
    """Tag of the shape variant."""
    CIRCLE = "circle"
    POLYGON = "polygon"


@dataclass(frozen=True)
class Circle:
    """
    Immutable circle.

    Attributes:
        center: (x, y) centre
        radius: strictly positive radius
    """
    center: Point
    radius: float

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    def __post_init__(self):
        x, y = self.center
        x, y, radius = float(x), float(y), float(self.radius)
        if not all(math.isfinite(v) for v in (x, y, radius)):
            raise DegenerateInputError(f"Circle parameters must be finite, got center={self.center}, radius={self.radius}")
        if radius <= 0.0:
            raise DegenerateInputError(f"Circle radius must be positive, got {self.radius}")
        object.__setattr__(self, 'center', (x, y))
        object.__setattr__(self, 'radius', radius)


@dataclass(frozen=True, eq=False)
class Polygon:
    """
    Immutable simple polygon.

    Vertex k is joined to vertex (k + 1) mod n. Simplicity (no
    self-intersection) is the caller's responsibility; ``is_simple`` offers a
    best-effort check.

    Attributes:
        vertices: Nx2 float array, N >= 3, read-only
    """
    vertices: np.ndarray

    kind: ClassVar[ShapeKind] = ShapeKind.POLYGON

    def __post_init__(self):
        try:
            vertices = np.array(self.vertices, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise DegenerateInputError(f"Polygon vertices must be numeric (x, y) pairs: {e}") from e

        if vertices.ndim != 2 or vertices.shape[1] != 2:
            raise DegenerateInputError(f"Polygon vertices must be Nx2, got shape {vertices.shape}")
        if len(vertices) < 3:
            raise DegenerateInputError(f"Polygon must have at least 3 vertices, got {len(vertices)}")
        if not np.all(np.isfinite(vertices)):
            raise DegenerateInputError("Polygon vertices must be finite")
        if abs(polygon_signed_area(vertices)) <= MIN_POLYGON_AREA:
            raise DegenerateInputError("Polygon has zero area (collinear vertices)")

        vertices.flags.writeable = False
        object.__setattr__(self, 'vertices', vertices)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> 'Polygon':
        try:
            points = list(points)
        except TypeError as e:
            raise DegenerateInputError(f"Polygon vertices must be an iterable of points: {e}") from e
        return cls(points)

    def points(self) -> List[Point]:
        return [(float(x), float(y)) for x, y in self.vertices]

    def edges(self) -> Iterator[Segment]:
        return iter_edges(self.vertices)

    def is_simple(self) -> bool:
        """Best-effort check that the boundary does not cross itself."""
        return bool(LinearRing(self.vertices).is_simple)

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        return f"Polygon({self.points()})"


Shape = Union[Circle, Polygon]
