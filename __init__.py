"""
SRS: Spatial Reasoning System

A qualitative spatial reasoning engine over 2D regions (circles and
polygons). Regions are registered under caller-chosen ids and queried in
pairs for their topological relation (RCC-5: DR, PO, EQ, PP, PPI) and their
relative compass direction, globally or in a region's own frame.

Key Features:
- Exact geometric predicates with a configurable tolerance
- RCC-5 topology between circles and polygons in any combination
- 8-sector cardinal and allocentric direction
- Path-consistency sweep over the computed relations

Example:
    from srs import SpatialReasoningSystem, TwoObjectQueryType

    srs = SpatialReasoningSystem()
    srs.insert_circle(0, 0, 1, 1, 0, shape_id=1, name="a")
    srs.insert_circle(10, 0, 1, 1, 0, shape_id=2, name="b")
    srs.two_object_query(TwoObjectQueryType.ORIENTATION, 1, 2)  # 2 (E)
"""

__version__ = "1.0.0"
__author__ = "SRS Project"

from .srs import (
    SpatialReasoningSystem,
    TwoObjectQueryType,
    query_to_string,
    create_example_scene,
)

__all__ = [
    'SpatialReasoningSystem',
    'TwoObjectQueryType',
    'query_to_string',
    'create_example_scene',
]
