"""
Unit tests for the relation engine (topology and direction).
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math
import unittest
from itertools import product

from geometry.regions import make_circle, make_polygon
from qsr_base.direction import CardinalDirection, UNDEFINED_DIRECTION
from qsr_base.rcc5 import RCC5Relation, COMPOSITION_TABLE
from reasoning_engine.relation_engine import RelationEngine


def square(x0, y0, x1, y1):
    return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]


def build_regions():
    """A mixed scene covering every RCC-5 relation."""
    return {
        'big_circle': make_circle(0, 0, 10, 1, 0, 1, "big_circle"),
        'small_circle': make_circle(1, 1, 1, 1, 0, 2, "small_circle"),
        'far_circle': make_circle(100, 0, 1, 1, 0, 3, "far_circle"),
        'overlap_circle': make_circle(9, 0, 3, 1, 0, 4, "overlap_circle"),
        'square': make_polygon(square(-3, -3, 3, 3), 1, 0, 5, "square"),
        'big_square': make_polygon(square(-20, -20, 20, 20), 1, 0, 6, "big_square"),
        'crossing_square': make_polygon(square(8, -1, 14, 1), 1, 0, 7, "crossing_square"),
        'triangle': make_polygon([(50, 50), (60, 50), (55, 60)], 1, 0, 8, "triangle"),
        'square_copy': make_polygon([(3, 3), (-3, 3), (-3, -3), (3, -3)], 1, 0, 9, "square_copy"),
    }


class TestTopology(unittest.TestCase):

    def setUp(self):
        self.engine = RelationEngine()
        self.r = build_regions()

    def relation(self, a, b):
        return self.engine.relation(self.r[a], self.r[b])

    def test_containment_scenario(self):
        """A (r=10) contains B (r=1): A PPI B and B PP A."""
        self.assertIs(self.relation('big_circle', 'small_circle'), RCC5Relation.PPI)
        self.assertIs(self.relation('small_circle', 'big_circle'), RCC5Relation.PP)

    def test_disjoint_scenario(self):
        a = make_circle(0, 0, 1, 1, 0, 1, "a")
        b = make_circle(100, 0, 1, 1, 0, 2, "b")
        self.assertIs(self.engine.relation(a, b), RCC5Relation.DR)

    def test_circle_overlap(self):
        self.assertIs(self.relation('big_circle', 'overlap_circle'), RCC5Relation.PO)

    def test_equal_circles(self):
        a = make_circle(2, 3, 4, 1, 0, 1, "a")
        b = make_circle(2, 3, 4, 0, 1, 2, "b")
        self.assertIs(self.engine.relation(a, b), RCC5Relation.EQ)

    def test_polygon_inside_circle(self):
        self.assertIs(self.relation('square', 'big_circle'), RCC5Relation.PP)
        self.assertIs(self.relation('big_circle', 'square'), RCC5Relation.PPI)

    def test_circle_inside_polygon(self):
        self.assertIs(self.relation('big_circle', 'big_square'), RCC5Relation.PP)
        self.assertIs(self.relation('small_circle', 'square'), RCC5Relation.PP)

    def test_polygon_crossing_circle(self):
        self.assertIs(self.relation('crossing_square', 'big_circle'), RCC5Relation.PO)

    def test_polygon_far_from_circle(self):
        self.assertIs(self.relation('triangle', 'big_circle'), RCC5Relation.DR)

    def test_polygon_inside_polygon(self):
        self.assertIs(self.relation('square', 'big_square'), RCC5Relation.PP)
        self.assertIs(self.relation('big_square', 'square'), RCC5Relation.PPI)

    def test_polygons_equal_up_to_vertex_order(self):
        self.assertIs(self.relation('square', 'square_copy'), RCC5Relation.EQ)

    def test_circle_never_equals_polygon(self):
        self.assertIsNot(self.relation('square', 'small_circle'), RCC5Relation.EQ)

    def test_polygons_sharing_an_edge_overlap(self):
        left = make_polygon(square(0, 0, 2, 2), 1, 0, 1, "left")
        right = make_polygon(square(2, 0, 4, 2), 1, 0, 2, "right")
        self.assertIs(self.engine.relation(left, right), RCC5Relation.PO)

    def test_external_circle_tangency_is_disjoint(self):
        a = make_circle(0, 0, 1, 1, 0, 1, "a")
        b = make_circle(2, 0, 1, 1, 0, 2, "b")
        self.assertIs(self.engine.relation(a, b), RCC5Relation.DR)

    def test_internal_circle_tangency_is_proper_part(self):
        inner = make_circle(1, 0, 1, 1, 0, 1, "inner")
        outer = make_circle(0, 0, 2, 1, 0, 2, "outer")
        self.assertIs(self.engine.relation(inner, outer), RCC5Relation.PP)

    def test_facts(self):
        facts = self.engine.facts(self.r['square'], self.r['big_circle'])
        self.assertFalse(facts.boundaries_touch)
        self.assertTrue(facts.first_inside_second)
        self.assertFalse(facts.second_inside_first)
        self.assertFalse(facts.identical)

        crossing = self.engine.facts(self.r['crossing_square'], self.r['big_circle'])
        self.assertTrue(crossing.boundaries_touch)
        self.assertFalse(crossing.first_inside_second)

    def test_facts_for_tangent_circles_match_relation(self):
        inner = make_circle(1, 0, 1, 1, 0, 1, "inner")
        outer = make_circle(0, 0, 2, 1, 0, 2, "outer")
        facts = self.engine.facts(inner, outer)
        self.assertFalse(facts.boundaries_touch)
        self.assertTrue(facts.first_inside_second)

        left = make_circle(0, 0, 1, 1, 0, 3, "left")
        right = make_circle(2, 0, 1, 1, 0, 4, "right")
        facts = self.engine.facts(left, right)
        self.assertFalse(facts.boundaries_touch)
        self.assertFalse(facts.first_inside_second or facts.second_inside_first)


class TestTopologyProperties(unittest.TestCase):
    """Properties over every pair of a mixed scene."""

    def setUp(self):
        self.engine = RelationEngine()
        self.regions = list(build_regions().values())

    def pairs(self):
        return product(self.regions, self.regions)

    def test_eq_is_symmetric(self):
        for a, b in self.pairs():
            forward = self.engine.relation(a, b) is RCC5Relation.EQ
            backward = self.engine.relation(b, a) is RCC5Relation.EQ
            self.assertEqual(forward, backward, f"{a.name}, {b.name}")

    def test_pp_ppi_duality(self):
        for a, b in self.pairs():
            self.assertEqual(self.engine.relation(a, b),
                             self.engine.relation(b, a).inverse(),
                             f"{a.name}, {b.name}")

    def test_exactly_one_relation_holds(self):
        for a, b in self.pairs():
            holding = [rel for rel in RCC5Relation if self.engine.holds(rel, a, b)]
            self.assertEqual(len(holding), 1, f"{a.name}, {b.name}")

    def test_facts_decide_relation(self):
        for a, b in self.pairs():
            facts = self.engine.facts(a, b)
            relation = self.engine.relation(a, b)
            self.assertEqual(facts.identical, relation is RCC5Relation.EQ, f"{a.name}, {b.name}")
            if relation is RCC5Relation.PP:
                self.assertTrue(facts.first_inside_second)
            if relation is RCC5Relation.PPI:
                self.assertTrue(facts.second_inside_first)
            if relation is RCC5Relation.DR:
                self.assertFalse(facts.boundaries_touch)

    def test_region_equals_itself(self):
        for a in self.regions:
            self.assertIs(self.engine.relation(a, a), RCC5Relation.EQ)

    def test_containment_excludes_boundary_contact(self):
        for a, b in self.pairs():
            if self.engine.relation(a, b) in (RCC5Relation.PP, RCC5Relation.PPI) \
                    and a.kind is not b.kind:
                self.assertFalse(self.engine.facts(a, b).boundaries_touch, f"{a.name}, {b.name}")

    def test_triples_respect_composition(self):
        for a, b, c in product(self.regions, repeat=3):
            rab = self.engine.relation(a, b)
            rbc = self.engine.relation(b, c)
            rac = self.engine.relation(a, c)
            self.assertIn(rac, COMPOSITION_TABLE.compose(rab, rbc),
                          f"{a.name}, {b.name}, {c.name}")


class TestDirection(unittest.TestCase):

    def setUp(self):
        self.engine = RelationEngine()
        self.a = make_circle(0, 0, 1, 1, 0, 1, "A")
        self.b = make_circle(10, 0, 1, 1, 0, 2, "B")

    def test_orientation_opposite(self):
        self.assertEqual(self.engine.direction(self.a, self.b), CardinalDirection.E)
        self.assertEqual(self.engine.direction(self.b, self.a), CardinalDirection.W)

    def test_diagonal(self):
        c = make_circle(10, 10, 1, 1, 0, 3, "C")
        self.assertEqual(self.engine.direction(self.a, c), CardinalDirection.NE)
        self.assertEqual(self.engine.direction(c, self.a), CardinalDirection.SW)

    def test_north_and_south(self):
        c = make_polygon(square(-1, 20, 1, 22), 1, 0, 3, "C")
        self.assertEqual(self.engine.direction(self.a, c), CardinalDirection.N)
        self.assertEqual(self.engine.direction(c, self.a), CardinalDirection.S)

    def test_coincident_centroids_are_undefined(self):
        ring = make_polygon(square(-5, -5, 5, 5), 1, 0, 3, "ring")
        self.assertEqual(self.engine.direction(self.a, ring), UNDEFINED_DIRECTION)

    def test_custom_undefined_code(self):
        engine = RelationEngine(undefined_direction=99)
        twin = make_circle(0, 0, 5, 1, 0, 3, "twin")
        self.assertEqual(engine.direction(self.a, twin), 99)
        self.assertEqual(engine.allocentric_direction(self.a, twin), 99)

    def test_boundary_tie_breaks_to_lower_code(self):
        # Bearing on the N/NE boundary, off by float rounding only
        engine = RelationEngine(boundary_tolerance_deg=1e-6)
        angle = math.radians(67.5)
        c = make_circle(100 * math.cos(angle), 100 * math.sin(angle), 1, 1, 0, 3, "C")
        self.assertEqual(engine.direction(self.a, c), CardinalDirection.N)


class TestAllocentricDirection(unittest.TestCase):

    def setUp(self):
        self.engine = RelationEngine()
        self.b = make_circle(10, 0, 1, 1, 0, 2, "B")

    def test_facing_east_matches_global(self):
        a = make_circle(0, 0, 1, 1, 0, 1, "A")
        self.assertEqual(self.engine.allocentric_direction(a, self.b),
                         self.engine.direction(a, self.b))

    def test_facing_north_rotates_by_minus_90(self):
        a = make_circle(0, 0, 1, 0, 1, 1, "A")
        self.assertEqual(self.engine.direction(a, self.b), CardinalDirection.E)
        self.assertEqual(self.engine.allocentric_direction(a, self.b), CardinalDirection.S)

    def test_facing_west(self):
        a = make_circle(0, 0, 1, -1, 0, 1, "A")
        self.assertEqual(self.engine.allocentric_direction(a, self.b), CardinalDirection.W)

    def test_orientation_magnitude_is_irrelevant(self):
        unit = make_circle(0, 0, 1, 0, 1, 1, "A")
        long = make_circle(0, 0, 1, 0, 25, 1, "A")
        self.assertEqual(self.engine.allocentric_direction(unit, self.b),
                         self.engine.allocentric_direction(long, self.b))

    def test_zero_orientation_is_undefined(self):
        a = make_circle(0, 0, 1, 0, 0, 1, "A")
        self.assertEqual(self.engine.allocentric_direction(a, self.b), UNDEFINED_DIRECTION)
        self.assertEqual(self.engine.direction(a, self.b), CardinalDirection.E)


if __name__ == '__main__':
    unittest.main()
