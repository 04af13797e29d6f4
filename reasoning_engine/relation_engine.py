"""
Relation Engine

Computes qualitative relations between two regions:

1. Topological: the RCC-5 relation one region bears to another.
2. Directional: the compass sector of one region's centroid as seen from
   another's, either in the global frame or in the observer's own frame
   (allocentric orientation).

Relation policy lives here; the geometry layer only answers exact
predicates.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from geometry import kernel
from geometry.kernel import CircleRelation
from geometry.primitives import EPSILON, Point, rotate_vector, vector_angle, vector_length
from geometry.regions import Region
from geometry.shapes import ShapeKind
from qsr_base.direction import UNDEFINED_DIRECTION, sector_for_angle
from qsr_base.rcc5 import RCC5Relation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopologyFacts:
    """
    Boolean facts the topological decision table is evaluated on.

    Attributes:
        identical: Same variant and same parameters within epsilon
        boundaries_touch: Boundaries cross or touch (circle pairs report
            tangency as separation or containment instead)
        first_inside_second: First region lies inside the second, no contact
        second_inside_first: Second region lies inside the first, no contact
    """
    identical: bool
    boundaries_touch: bool
    first_inside_second: bool
    second_inside_first: bool


# Circle pairs are classified in closed form; tangency folds into DR or PP/PPI
_CIRCLE_FACTS = {
    CircleRelation.EQUAL: TopologyFacts(True, True, False, False),
    CircleRelation.INSIDE: TopologyFacts(False, False, True, False),
    CircleRelation.CONTAINS: TopologyFacts(False, False, False, True),
    CircleRelation.DISJOINT: TopologyFacts(False, False, False, False),
    CircleRelation.OVERLAP: TopologyFacts(False, True, False, False),
}


class RelationEngine:
    """
    Stateless relation calculator over pairs of regions.

    Args:
        epsilon: Absolute tolerance for geometric predicates
        undefined_direction: Code returned when a direction is undefined
        boundary_tolerance_deg: Bearings this close to a sector boundary
            count as lying on it
    """

    def __init__(self, epsilon: float = EPSILON,
                 undefined_direction: int = UNDEFINED_DIRECTION,
                 boundary_tolerance_deg: float = 1e-9):
        self.epsilon = epsilon
        self.undefined_direction = undefined_direction
        self.boundary_tolerance_deg = boundary_tolerance_deg

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------

    def facts(self, first: Region, second: Region) -> TopologyFacts:
        """Evaluate the boundary and containment facts for a region pair."""
        eps = self.epsilon
        a = first.shape
        b = second.shape

        if a.kind is ShapeKind.CIRCLE and b.kind is ShapeKind.CIRCLE:
            return _CIRCLE_FACTS[kernel.circle_circle_relation(a, b, eps)]

        identical = kernel.shapes_equal(a, b, eps)
        touch = kernel.boundaries_intersect(a, b, eps)
        if touch:
            return TopologyFacts(identical, True, False, False)

        return TopologyFacts(
            identical=identical,
            boundaries_touch=False,
            first_inside_second=kernel.contains_all_vertices(b, a, eps),
            second_inside_first=kernel.contains_all_vertices(a, b, eps),
        )

    def relation(self, first: Region, second: Region) -> RCC5Relation:
        """
        The RCC-5 relation ``first`` bears to ``second``.

        ``PP`` means first is a proper part of second, ``PPI`` means second
        is a proper part of first. Decision order: EQ, PP, PPI, PO, DR.
        """
        facts = self.facts(first, second)
        if facts.identical:
            return RCC5Relation.EQ
        if facts.first_inside_second:
            return RCC5Relation.PP
        if facts.second_inside_first:
            return RCC5Relation.PPI
        if facts.boundaries_touch:
            return RCC5Relation.PO
        return RCC5Relation.DR

    def holds(self, relation: RCC5Relation, first: Region, second: Region) -> bool:
        return self.relation(first, second) is relation

    # ------------------------------------------------------------------
    # Direction
    # ------------------------------------------------------------------

    def _offset(self, reference: Region, primary: Region) -> Optional[Point]:
        rx, ry = reference.centroid()
        px, py = primary.centroid()
        offset = (px - rx, py - ry)
        if vector_length(offset) <= self.epsilon:
            return None
        return offset

    def direction(self, reference: Region, primary: Region) -> int:
        """
        Compass sector of ``primary`` seen from ``reference`` in the global frame.

        Returns the sector code (0-7), or the undefined code when the
        centroids coincide.
        """
        offset = self._offset(reference, primary)
        if offset is None:
            logger.debug("Coincident centroids for %d -> %d", reference.id, primary.id)
            return self.undefined_direction
        return int(sector_for_angle(vector_angle(offset), self.boundary_tolerance_deg))

    def allocentric_direction(self, reference: Region, primary: Region) -> int:
        """
        Compass sector of ``primary`` in ``reference``'s intrinsic frame.

        The centroid offset is rotated by minus the angle of the reference's
        orientation vector before quantisation, so the reference's facing
        maps to E (0 degrees). A zero orientation vector has no frame and
        yields the undefined code.
        """
        offset = self._offset(reference, primary)
        if offset is None:
            return self.undefined_direction
        if vector_length(reference.orientation) <= self.epsilon:
            logger.debug("Region %d has no orientation", reference.id)
            return self.undefined_direction

        local = rotate_vector(offset, -vector_angle(reference.orientation))
        return int(sector_for_angle(vector_angle(local), self.boundary_tolerance_deg))
