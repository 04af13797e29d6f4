"""
Geometry Layer

Pure geometric shapes and exact predicates used by the relation engine.

Includes:
- Primitives over points, segments and vertex arrays
- Circle / Polygon shape variants
- Shape-level predicates (containment, boundary contact, equality)
- The Region model (identity, orientation, derived summaries)
"""

from .shapes import Circle, Polygon, Shape, ShapeKind
from .kernel import (
    CircleRelation,
    circle_circle_relation,
    circle_intersects_polygon_boundary,
    polygons_boundary_intersect,
    contains_all_vertices,
)
from .regions import Region, make_circle, make_polygon

__all__ = [
    'Circle',
    'Polygon',
    'Shape',
    'ShapeKind',
    'CircleRelation',
    'circle_circle_relation',
    'circle_intersects_polygon_boundary',
    'polygons_boundary_intersect',
    'contains_all_vertices',
    'Region',
    'make_circle',
    'make_polygon',
]
