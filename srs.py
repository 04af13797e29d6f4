"""
SRS: Spatial Reasoning System

Main entry point for the spatial reasoning engine.

This module provides a unified interface for:
1. Registering circular and polygonal regions under caller-chosen ids
2. Answering two-object queries (RCC-5 topology, global and allocentric
   compass direction) with integer-encoded results
3. Diagnostic sweeps over every stored pair

Usage:
    from srs import SpatialReasoningSystem, TwoObjectQueryType

    srs = SpatialReasoningSystem()
    srs.insert_circle(0, 0, 10, 1, 0, shape_id=1, name="room")
    srs.insert_circle(1, 1, 1, 1, 0, shape_id=2, name="table")

    # Is the table a proper part of the room?
    srs.two_object_query(TwoObjectQueryType.RCC_PP, 1, 2)   # -> 1

    # Where is the table, seen from the room?
    srs.two_object_query(TwoObjectQueryType.ORIENTATION, 1, 2)  # -> 1 (NE)

References:
- Randell, Cui & Cohn (1992) - A Spatial Logic based on Regions and Connection
- Frank (1991) - Qualitative Spatial Reasoning about Cardinal Directions
"""

import sys
import os
import logging
from enum import IntEnum
from typing import Dict, Iterable, List, Optional, TextIO, Tuple, Union

# Add project root to path for imports
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)

from config import SRSGlobalConfig
from geometry.primitives import Point
from geometry.regions import Region, make_circle, make_polygon
from geometry.shapes import ShapeKind
from qsr_base.direction import direction_to_string
from qsr_base.errors import DegenerateInputError, DuplicateIdError
from qsr_base.rcc5 import RCC5Relation, ConstraintNetwork, relation_set
from reasoning_engine.path_consistency import ConsistencyResult, PathConsistencyChecker
from reasoning_engine.region_store import RegionStore
from reasoning_engine.relation_engine import RelationEngine
from visualization.canvas import Canvas, HeadlessCanvas

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


class TwoObjectQueryType(IntEnum):
    """Query codes accepted by ``two_object_query``."""
    RCC_DR = 0
    RCC_PO = 1
    RCC_EQ = 2
    RCC_PP = 3
    RCC_PPI = 4
    ORIENTATION = 5
    ALLOCENTRIC_ORIENTATION = 6

    @property
    def is_topological(self) -> bool:
        return self in _QUERY_RELATIONS


_QUERY_RELATIONS: Dict[TwoObjectQueryType, RCC5Relation] = {
    TwoObjectQueryType.RCC_DR: RCC5Relation.DR,
    TwoObjectQueryType.RCC_PO: RCC5Relation.PO,
    TwoObjectQueryType.RCC_EQ: RCC5Relation.EQ,
    TwoObjectQueryType.RCC_PP: RCC5Relation.PP,
    TwoObjectQueryType.RCC_PPI: RCC5Relation.PPI,
}


def query_to_string(query_type: Union[int, TwoObjectQueryType]) -> str:
    """Human-readable label for a query code, e.g. ``"RCC_DR"``."""
    try:
        return TwoObjectQueryType(query_type).name
    except ValueError:
        return "UNKNOWN_QUERY"


class SpatialReasoningSystem:
    """
    Main SRS class.

    Owns the region store and answers two-object queries against it. Not
    thread-safe: concurrent callers must serialise access.

    Args:
        config: Configuration options (uses defaults if None)
        canvas: Visualization collaborator notified on insert/remove
            (headless if None)
    """

    def __init__(self, config: Optional[SRSGlobalConfig] = None,
                 canvas: Optional[Canvas] = None):
        self.config = config or SRSGlobalConfig()
        self.canvas = canvas if canvas is not None else HeadlessCanvas()

        self.store = RegionStore()
        self.engine = RelationEngine(
            epsilon=self.config.geometry.epsilon,
            undefined_direction=self.config.direction.undefined_sector_code,
            boundary_tolerance_deg=self.config.direction.boundary_tolerance_deg,
        )
        self.pc_checker = PathConsistencyChecker(
            max_iterations=self.config.reasoning.max_iterations
        )

    # ------------------------------------------------------------------
    # Scene management
    # ------------------------------------------------------------------

    def init_canvas(self, width: Optional[float] = None, height: Optional[float] = None,
                    scale: Optional[float] = None) -> None:
        """
        Configure the visualization surface. Holds no geometric state.

        Omitted arguments fall back to the configured canvas defaults.
        """
        defaults = self.config.canvas
        self.canvas.configure(
            width if width is not None else defaults.width,
            height if height is not None else defaults.height,
            scale if scale is not None else defaults.scale,
        )

    def insert_circle(self, x: float, y: float, radius: float,
                      i: float, j: float, shape_id: int, name: str) -> None:
        """
        Add a circular region.

        Raises:
            DuplicateIdError: shape_id is already stored
            DegenerateInputError: radius is not positive and finite
        """
        self._check_free(shape_id)
        self._insert(make_circle(x, y, radius, i, j, shape_id, name))

    def insert_polygon(self, points: Iterable[Point], i: float, j: float,
                       shape_id: int, name: str) -> None:
        """
        Add a polygonal region. Vertex order defines the edges.

        Raises:
            DuplicateIdError: shape_id is already stored
            DegenerateInputError: fewer than 3 vertices or zero area, or a
                self-intersecting boundary when configured to reject those
        """
        self._check_free(shape_id)
        region = make_polygon(points, i, j, shape_id, name)
        if not region.shape.is_simple():
            if self.config.store.reject_self_intersecting:
                raise DegenerateInputError(f"Polygon {shape_id} ({name}) is self-intersecting")
            logger.warning("Polygon %d (%s) is self-intersecting; relations may be unreliable",
                           shape_id, name)
        self._insert(region)

    def _check_free(self, shape_id: int) -> None:
        # Id clashes are reported before any geometry validation
        if shape_id in self.store:
            raise DuplicateIdError(shape_id)

    def _insert(self, region: Region) -> None:
        self.store.insert(region)
        try:
            self.canvas.draw(region)
        except Exception:
            # Keep the store unchanged when the canvas rejects the region
            self.store.remove(region.id)
            raise

    def remove_shape(self, shape_id: int) -> None:
        """
        Delete a region and erase it from the canvas.

        Raises:
            UnknownShapeError: shape_id is not stored
        """
        self.store.remove(shape_id)
        self.canvas.erase(shape_id)

    def get_shape(self, shape_id: int) -> Region:
        return self.store.get(shape_id)

    @property
    def shape_ids(self) -> List[int]:
        return self.store.ids

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self.store

    def __len__(self) -> int:
        return len(self.store)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def relation_between(self, reference_id: int, primary_id: int) -> RCC5Relation:
        """
        The RCC-5 relation the primary bears to the reference.

        ``PP`` means the primary is a proper part of the reference.
        """
        reference = self.store.get(reference_id)
        primary = self.store.get(primary_id)
        return self.engine.relation(primary, reference)

    def direction_between(self, reference_id: int, primary_id: int,
                          allocentric: bool = False) -> int:
        """Sector code of the primary seen from the reference."""
        reference = self.store.get(reference_id)
        primary = self.store.get(primary_id)
        if allocentric:
            return self.engine.allocentric_direction(reference, primary)
        return self.engine.direction(reference, primary)

    def two_object_query(self, query_type: Union[int, TwoObjectQueryType],
                         reference_id: int, primary_id: int) -> int:
        """
        Answer a two-object query.

        For RCC query types the answer is 1 if the primary stands in that
        relation to the reference and 0 otherwise. For ORIENTATION and
        ALLOCENTRIC_ORIENTATION the answer is the sector code (0-7) or the
        configured undefined code.

        Raises:
            UnknownShapeError: either id is not stored
            ValueError: query_type is not a known query code
        """
        try:
            query = TwoObjectQueryType(query_type)
        except ValueError:
            raise ValueError(f"Unknown query type: {query_type!r}") from None

        if query.is_topological:
            relation = self.relation_between(reference_id, primary_id)
            result = int(relation is _QUERY_RELATIONS[query])
        else:
            result = self.direction_between(
                reference_id, primary_id,
                allocentric=query is TwoObjectQueryType.ALLOCENTRIC_ORIENTATION,
            )

        logger.debug("%s(%d, %d) -> %d", query.name, reference_id, primary_id, result)
        return result

    def print_all_relative_orientations(self, out: Optional[TextIO] = None) -> None:
        """Write the ORIENTATION answer for every ordered pair of stored regions."""
        out = out if out is not None else sys.stdout
        for reference, primary in self.store.ordered_pairs():
            code = self.engine.direction(reference, primary)
            print(f"{primary.name}({primary.id}) is {direction_to_string(code)} "
                  f"of {reference.name}({reference.id})", file=out)

    # ------------------------------------------------------------------
    # Scene-wide diagnostics
    # ------------------------------------------------------------------

    def relation_network(self) -> ConstraintNetwork:
        """RCC-5 network with the computed relation for every stored pair."""
        network = ConstraintNetwork()
        network.add_variables(*self.store.ids)
        for first, second in self.store.ordered_pairs():
            if first.id < second.id:
                network.add_constraint(first.id, second.id,
                                       relation_set(self.engine.relation(first, second)))
        return network

    def check_consistency(self) -> ConsistencyResult:
        """Path-consistency sweep over the computed relation network."""
        result = self.pc_checker.check(self.relation_network())
        if not result.is_consistent():
            logger.warning("Computed relations are not path consistent: %s", result.conflict)
        return result

    def summary(self) -> Dict[str, int]:
        """Count of stored regions per shape kind."""
        counts = {kind.value: 0 for kind in ShapeKind}
        for region in self.store:
            counts[region.kind.value] += 1
        return counts


def create_example_scene(canvas: Optional[Canvas] = None) -> SpatialReasoningSystem:
    """Create a small example scene for demonstration."""
    srs = SpatialReasoningSystem(canvas=canvas)
    srs.init_canvas(200, 200, 2.0)

    srs.insert_polygon([(-50, -50), (50, -50), (50, 50), (-50, 50)], 1, 0, 1, "room")
    srs.insert_circle(0, 0, 10, 0, 1, 2, "table")
    srs.insert_circle(3, 2, 2, 1, 0, 3, "cup")
    srs.insert_polygon([(40, 30), (70, 30), (70, 45), (40, 45)], 1, 0, 4, "rug")
    srs.insert_circle(0, 30, 5, -1, 0, 5, "robot")

    return srs


def _pairs(srs: SpatialReasoningSystem) -> List[Tuple[int, int]]:
    ids = srs.shape_ids
    return [(a, b) for a in ids for b in ids if a != b]


def main():
    """Main demonstration of SRS capabilities."""
    config = SRSGlobalConfig()
    logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("SRS: Spatial Reasoning System")
    print("=" * 60)

    srs = create_example_scene()
    print(f"\nScene: {srs.summary()}")

    print("\n1. Topological Relations")
    print("-" * 40)
    for reference_id, primary_id in _pairs(srs):
        relation = srs.relation_between(reference_id, primary_id)
        reference = srs.get_shape(reference_id)
        primary = srs.get_shape(primary_id)
        print(f"  {primary.name} {relation} {reference.name}")

    print("\n2. Relative Orientations")
    print("-" * 40)
    srs.print_all_relative_orientations()

    print("\n3. Allocentric Orientation (robot's own frame)")
    print("-" * 40)
    for shape_id in srs.shape_ids:
        if shape_id == 5:
            continue
        code = srs.two_object_query(TwoObjectQueryType.ALLOCENTRIC_ORIENTATION, 5, shape_id)
        print(f"  {srs.get_shape(shape_id).name}: {direction_to_string(code)}")

    print("\n4. Consistency Check")
    print("-" * 40)
    result = srs.check_consistency()
    print(f"  Status: {result.status.value}")

    print("\n" + "=" * 60)
    print("SRS Demonstration Complete")
    print("=" * 60)


if __name__ == "__main__":
    main()
