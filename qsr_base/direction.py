"""
Cardinal Direction Calculus

Qualitative 8-sector compass directions. A continuous bearing (degrees,
counter-clockwise from the positive x-axis) is quantised into one of eight
45 degree sectors centred on the compass points, so that E is centred on
0 degrees, N on 90, W on 180 and S on 270.

Sector boundaries lie at odd multiples of 22.5 degrees. A bearing that falls
exactly on a boundary resolves to the neighbouring sector with the lower
enumeration value.
"""

import math
from enum import IntEnum
from typing import Dict, Union


class CardinalDirection(IntEnum):
    """The 8 compass sectors, encoded as the integers 0-7."""
    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7

    def __str__(self) -> str:
        return self.name

    def opposite(self) -> 'CardinalDirection':
        """Return the sector pointing the other way."""
        return CardinalDirection((self.value + 4) % 8)

    @property
    def center_angle(self) -> float:
        """Bearing of the sector centre in degrees, CCW from +x."""
        return _CENTER_ANGLES[self]


# Sector code returned when the direction between two regions is undefined
UNDEFINED_DIRECTION = -1

SECTOR_WIDTH = 45.0

# Sectors in counter-clockwise order starting from the +x axis
_CCW_ORDER = (
    CardinalDirection.E,
    CardinalDirection.NE,
    CardinalDirection.N,
    CardinalDirection.NW,
    CardinalDirection.W,
    CardinalDirection.SW,
    CardinalDirection.S,
    CardinalDirection.SE,
)

_CENTER_ANGLES: Dict[CardinalDirection, float] = {
    sector: index * SECTOR_WIDTH for index, sector in enumerate(_CCW_ORDER)
}


def normalize_angle(angle_deg: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = math.fmod(angle_deg, 360.0)
    if wrapped < 0.0:
        wrapped += 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


def sector_for_angle(angle_deg: float, tolerance_deg: float = 1e-9) -> CardinalDirection:
    """
    Quantise a bearing into a compass sector.

    Args:
        angle_deg: Bearing in degrees, CCW from +x (any range)
        tolerance_deg: Distance from a sector boundary under which the
            bearing counts as lying exactly on it

    Returns:
        The CardinalDirection whose sector contains the bearing
    """
    position = normalize_angle(angle_deg) / SECTOR_WIDTH
    lower = math.floor(position)
    fraction = position - lower
    below = _CCW_ORDER[lower % 8]
    above = _CCW_ORDER[(lower + 1) % 8]

    if abs(fraction - 0.5) * SECTOR_WIDTH <= tolerance_deg:
        return min(below, above)
    if fraction < 0.5:
        return below
    return above


def direction_to_string(code: Union[int, CardinalDirection]) -> str:
    """Label for a sector code, including the undefined sentinel."""
    try:
        return CardinalDirection(code).name
    except ValueError:
        return "UNDEFINED"
