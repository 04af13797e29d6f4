"""
QSR Base Module - Qualitative Spatial Reasoning Foundation

This module provides the qualitative calculi the relation engine answers in.

Includes:
- RCC-5: Region Connection Calculus (5 base relations)
- Composition table and constraint networks for consistency checking
- 8-sector cardinal directions
- The error taxonomy shared by all layers
"""

from .rcc5 import (
    RCC5Relation,
    RelationSet,
    relation_set,
    UNIVERSAL,
    EMPTY,
    RCC5CompositionTable,
    COMPOSITION_TABLE,
    ConstraintNetwork,
)
from .direction import (
    CardinalDirection,
    UNDEFINED_DIRECTION,
    sector_for_angle,
    direction_to_string,
)
from .errors import (
    SRSError,
    DuplicateIdError,
    UnknownShapeError,
    DegenerateInputError,
)

__all__ = [
    'RCC5Relation',
    'RelationSet',
    'relation_set',
    'UNIVERSAL',
    'EMPTY',
    'RCC5CompositionTable',
    'COMPOSITION_TABLE',
    'ConstraintNetwork',
    'CardinalDirection',
    'UNDEFINED_DIRECTION',
    'sector_for_angle',
    'direction_to_string',
    'SRSError',
    'DuplicateIdError',
    'UnknownShapeError',
    'DegenerateInputError',
]
