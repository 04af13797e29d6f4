"""
Geometry Kernel
===============

Shape-level predicates over the ``Circle`` / ``Polygon`` variants.

Every function here is pure and total over well-formed shapes. Dispatch on
the shape variant is exhaustive: an unrecognised shape raises ``TypeError``.
"""

from enum import Enum
from typing import List

import numpy as np

from geometry.primitives import (
    EPSILON,
    Point,
    bounding_box,
    boxes_overlap,
    distance,
    point_in_polygon,
    point_segment_distance,
    segments_intersect,
)
from geometry.shapes import Circle, Polygon, Shape, ShapeKind


class CircleRelation(Enum):
    """How circle 1 stands to circle 2."""
    EQUAL = "equal"
    INSIDE = "inside"        # c1 within c2
    CONTAINS = "contains"    # c2 within c1
    DISJOINT = "disjoint"
    OVERLAP = "overlap"


def circle_circle_relation(c1: Circle, c2: Circle, eps: float = EPSILON) -> CircleRelation:
    """
    Classify two circles by centre distance and radii.

    Comparisons are non-strict, so external tangency counts as DISJOINT and
    internal tangency as INSIDE / CONTAINS.
    """
    d = distance(c1.center, c2.center)
    r1 = c1.radius
    r2 = c2.radius

    if d <= eps and abs(r1 - r2) <= eps:
        return CircleRelation.EQUAL
    if d + r1 <= r2 + eps:
        return CircleRelation.INSIDE
    if d + r2 <= r1 + eps:
        return CircleRelation.CONTAINS
    if d >= r1 + r2 - eps:
        return CircleRelation.DISJOINT
    return CircleRelation.OVERLAP


def point_in_circle(p: Point, circle: Circle, eps: float = EPSILON) -> bool:
    """Closed disk membership."""
    return distance(p, circle.center) <= circle.radius + eps


def circle_intersects_polygon_boundary(circle: Circle, polygon: Polygon, eps: float = EPSILON) -> bool:
    """
    Check whether the circle's boundary meets any polygon edge.

    An edge meets the circle when its closest point is within the radius and
    its farthest endpoint is at or beyond it. Edges lying wholly inside or
    wholly outside the disk do not count.
    """
    center = circle.center
    radius = circle.radius
    for a, b in polygon.edges():
        near = point_segment_distance(center, a, b)
        if near > radius + eps:
            continue
        far = max(distance(center, a), distance(center, b))
        if far >= radius - eps:
            return True
    return False


def polygons_boundary_intersect(p1: Polygon, p2: Polygon, eps: float = EPSILON) -> bool:
    """Check whether any edge of p1 crosses or touches any edge of p2."""
    if not boxes_overlap(bounding_box(p1.vertices), bounding_box(p2.vertices), eps):
        return False
    edges2 = list(p2.edges())
    for e1 in p1.edges():
        for e2 in edges2:
            if segments_intersect(e1, e2, eps):
                return True
    return False


def boundaries_intersect(a: Shape, b: Shape, eps: float = EPSILON) -> bool:
    """Variant-dispatched boundary contact test."""
    if a.kind is ShapeKind.CIRCLE and b.kind is ShapeKind.CIRCLE:
        relation = circle_circle_relation(a, b, eps)
        if relation is CircleRelation.EQUAL:
            return True
        d = distance(a.center, b.center)
        return abs(a.radius - b.radius) - eps <= d <= a.radius + b.radius + eps
    if a.kind is ShapeKind.CIRCLE and b.kind is ShapeKind.POLYGON:
        return circle_intersects_polygon_boundary(a, b, eps)
    if a.kind is ShapeKind.POLYGON and b.kind is ShapeKind.CIRCLE:
        return circle_intersects_polygon_boundary(b, a, eps)
    if a.kind is ShapeKind.POLYGON and b.kind is ShapeKind.POLYGON:
        return polygons_boundary_intersect(a, b, eps)
    raise TypeError(f"Unsupported shape pair: {type(a).__name__}, {type(b).__name__}")


def contains_point(shape: Shape, p: Point, eps: float = EPSILON) -> bool:
    """Closed containment (boundary counts as inside)."""
    if shape.kind is ShapeKind.CIRCLE:
        return point_in_circle(p, shape, eps)
    if shape.kind is ShapeKind.POLYGON:
        return point_in_polygon(p, shape.vertices, eps)
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def boundary_points(shape: Shape) -> List[Point]:
    """
    Sample points used to test containment of a shape.

    Polygons contribute their vertices; circles contribute their centre and
    the four axis-aligned extreme points of their boundary.
    """
    if shape.kind is ShapeKind.CIRCLE:
        cx, cy = shape.center
        r = shape.radius
        return [(cx, cy), (cx + r, cy), (cx, cy + r), (cx - r, cy), (cx, cy - r)]
    if shape.kind is ShapeKind.POLYGON:
        return shape.points()
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def contains_all_vertices(outer: Shape, inner: Shape, eps: float = EPSILON) -> bool:
    """Check that every sample point of ``inner`` lies inside or on ``outer``."""
    return all(contains_point(outer, p, eps) for p in boundary_points(inner))


def _same_cycle(a: np.ndarray, b: np.ndarray, eps: float) -> bool:
    """Vertex sequences describe the same closed boundary up to rotation/reversal."""
    if a.shape != b.shape:
        return False
    n = len(a)
    for candidate in (b, b[::-1]):
        for shift in range(n):
            if np.all(np.abs(np.roll(candidate, shift, axis=0) - a) <= eps):
                return True
    return False


def shapes_equal(a: Shape, b: Shape, eps: float = EPSILON) -> bool:
    """Identical geometry: same variant and same defining parameters within eps."""
    if a.kind is not b.kind:
        return False
    if a.kind is ShapeKind.CIRCLE:
        return circle_circle_relation(a, b, eps) is CircleRelation.EQUAL
    if a.kind is ShapeKind.POLYGON:
        return _same_cycle(a.vertices, b.vertices, eps)
    raise TypeError(f"Unsupported shape: {type(a).__name__}")
