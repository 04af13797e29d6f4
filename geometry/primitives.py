"""
Geometric Primitives
====================

Leaf-level predicates over points, segments and vertex arrays. No shape
imports; everything here works on plain ``(x, y)`` tuples and Nx2 numpy
arrays.

All predicates take an absolute tolerance ``eps`` so that values within
``eps`` of zero count as zero (collinear, on the boundary, touching).
"""

import math
from typing import Iterator, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

EPSILON = 1e-9


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(q[0] - p[0], q[1] - p[1])


def cross(o: Point, a: Point, b: Point) -> float:
    """Z component of (a - o) x (b - o)."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def orientation(a: Point, b: Point, c: Point, eps: float = EPSILON) -> int:
    """
    Orientation of the ordered triple (a, b, c).

    Returns:
        1: counter-clockwise turn
        -1: clockwise turn
        0: collinear (within eps)
    """
    value = cross(a, b, c)
    if value > eps:
        return 1
    if value < -eps:
        return -1
    return 0


def point_segment_distance(p: Point, a: Point, b: Point) -> float:
    """Distance from p to the closest point of segment ab."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return distance(p, a)
    t = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(p, (a[0] + t * dx, a[1] + t * dy))


def point_on_segment(p: Point, a: Point, b: Point, eps: float = EPSILON) -> bool:
    return point_segment_distance(p, a, b) <= eps


def _within_box(p: Point, a: Point, b: Point, eps: float) -> bool:
    return (min(a[0], b[0]) - eps <= p[0] <= max(a[0], b[0]) + eps
            and min(a[1], b[1]) - eps <= p[1] <= max(a[1], b[1]) + eps)


def segments_intersect(s1: Segment, s2: Segment, eps: float = EPSILON) -> bool:
    """
    Check whether two closed segments cross or touch.

    Uses the orientation-sign test; collinear overlaps and endpoint contact
    count as intersections.
    """
    a, b = s1
    c, d = s2

    o1 = orientation(a, b, c, eps)
    o2 = orientation(a, b, d, eps)
    o3 = orientation(c, d, a, eps)
    o4 = orientation(c, d, b, eps)

    if o1 * o2 < 0 and o3 * o4 < 0:
        return True

    # Collinear / touching cases
    if o1 == 0 and _within_box(c, a, b, eps):
        return True
    if o2 == 0 and _within_box(d, a, b, eps):
        return True
    if o3 == 0 and _within_box(a, c, d, eps):
        return True
    if o4 == 0 and _within_box(b, c, d, eps):
        return True

    return False


def iter_edges(vertices: np.ndarray) -> Iterator[Segment]:
    """Yield the closed boundary edges (v[k], v[k+1 mod n])."""
    n = len(vertices)
    for k in range(n):
        a = vertices[k]
        b = vertices[(k + 1) % n]
        yield (float(a[0]), float(a[1])), (float(b[0]), float(b[1]))


def point_on_polygon_boundary(p: Point, vertices: np.ndarray, eps: float = EPSILON) -> bool:
    return any(point_on_segment(p, a, b, eps) for a, b in iter_edges(vertices))


def point_in_polygon(p: Point, vertices: np.ndarray, eps: float = EPSILON) -> bool:
    """
    Closed point-in-polygon test.

    Points on the boundary are inside. Interior points are found by casting
    a ray towards +x and counting edge crossings (even-odd rule).
    """
    if point_on_polygon_boundary(p, vertices, eps):
        return True

    px, py = p
    inside = False
    for (x1, y1), (x2, y2) in iter_edges(vertices):
        # Half-open rule on y avoids double counting shared vertices
        if (y1 > py) != (y2 > py):
            x_cross = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
            if x_cross > px:
                inside = not inside
    return inside


def polygon_signed_area(vertices: np.ndarray) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW."""
    x = vertices[:, 0]
    y = vertices[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_centroid(vertices: np.ndarray) -> Point:
    """Arithmetic mean of the vertices."""
    mean = np.mean(vertices, axis=0)
    return (float(mean[0]), float(mean[1]))


def bounding_box(vertices: np.ndarray) -> Tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax)."""
    mins = np.min(vertices, axis=0)
    maxs = np.max(vertices, axis=0)
    return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


def boxes_overlap(a: Sequence[float], b: Sequence[float], eps: float = EPSILON) -> bool:
    """Check if two (xmin, ymin, xmax, ymax) boxes intersect (closed)."""
    return not (a[2] < b[0] - eps or b[2] < a[0] - eps
                or a[3] < b[1] - eps or b[3] < a[1] - eps)


def vector_length(v: Point) -> float:
    return math.hypot(v[0], v[1])


def vector_angle(v: Point) -> float:
    """Angle of v in degrees, CCW from +x, in (-180, 180]."""
    return math.degrees(math.atan2(v[1], v[0]))


def rotate_vector(v: Point, angle_deg: float) -> Point:
    """Rotate v counter-clockwise by angle_deg."""
    theta = math.radians(angle_deg)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return (v[0] * cos_t - v[1] * sin_t, v[0] * sin_t + v[1] * cos_t)
