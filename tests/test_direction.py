"""
Unit tests for the cardinal direction calculus.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from qsr_base.direction import (
    CardinalDirection,
    UNDEFINED_DIRECTION,
    direction_to_string,
    normalize_angle,
    sector_for_angle,
)


class TestCardinalDirection(unittest.TestCase):

    def test_codes(self):
        self.assertEqual([int(d) for d in CardinalDirection], list(range(8)))
        self.assertEqual(CardinalDirection.N, 0)
        self.assertEqual(CardinalDirection.NW, 7)

    def test_opposite(self):
        self.assertEqual(CardinalDirection.E.opposite(), CardinalDirection.W)
        self.assertEqual(CardinalDirection.NE.opposite(), CardinalDirection.SW)
        for d in CardinalDirection:
            self.assertEqual(d.opposite().opposite(), d)

    def test_center_angles(self):
        self.assertEqual(CardinalDirection.E.center_angle, 0.0)
        self.assertEqual(CardinalDirection.N.center_angle, 90.0)
        self.assertEqual(CardinalDirection.S.center_angle, 270.0)


class TestSectorForAngle(unittest.TestCase):

    def test_sector_centres(self):
        for d in CardinalDirection:
            self.assertEqual(sector_for_angle(d.center_angle), d)

    def test_inside_sectors(self):
        self.assertEqual(sector_for_angle(10.0), CardinalDirection.E)
        self.assertEqual(sector_for_angle(-10.0), CardinalDirection.E)
        self.assertEqual(sector_for_angle(30.0), CardinalDirection.NE)
        self.assertEqual(sector_for_angle(100.0), CardinalDirection.N)
        self.assertEqual(sector_for_angle(200.0), CardinalDirection.W)
        self.assertEqual(sector_for_angle(210.0), CardinalDirection.SW)
        self.assertEqual(sector_for_angle(-90.0), CardinalDirection.S)
        self.assertEqual(sector_for_angle(337.0), CardinalDirection.SE)
        self.assertEqual(sector_for_angle(338.0), CardinalDirection.E)

    def test_boundary_ties_pick_lower_code(self):
        # E(2) / NE(1)
        self.assertEqual(sector_for_angle(22.5), CardinalDirection.NE)
        # NE(1) / N(0)
        self.assertEqual(sector_for_angle(67.5), CardinalDirection.N)
        # N(0) / NW(7)
        self.assertEqual(sector_for_angle(112.5), CardinalDirection.N)
        # W(6) / SW(5)
        self.assertEqual(sector_for_angle(202.5), CardinalDirection.SW)
        # SE(3) / E(2)
        self.assertEqual(sector_for_angle(337.5), CardinalDirection.E)
        self.assertEqual(sector_for_angle(-22.5), CardinalDirection.E)

    def test_normalize_angle(self):
        self.assertEqual(normalize_angle(360.0), 0.0)
        self.assertEqual(normalize_angle(-90.0), 270.0)
        self.assertEqual(normalize_angle(725.0), 5.0)


class TestDirectionToString(unittest.TestCase):

    def test_labels(self):
        self.assertEqual(direction_to_string(2), "E")
        self.assertEqual(direction_to_string(CardinalDirection.SW), "SW")

    def test_undefined(self):
        self.assertEqual(direction_to_string(UNDEFINED_DIRECTION), "UNDEFINED")
        self.assertEqual(direction_to_string(99), "UNDEFINED")


if __name__ == '__main__':
    unittest.main()
