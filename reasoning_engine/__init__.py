"""
Reasoning Engine Module

Region storage and relation computation for the spatial reasoning system.

Includes:
- Region store (id -> region, uniqueness and existence checks)
- Relation engine (RCC-5 topology, global and allocentric direction)
- Path consistency over computed RCC-5 networks
"""

from .region_store import RegionStore
from .relation_engine import RelationEngine, TopologyFacts
from .path_consistency import (
    PathConsistencyChecker,
    ConsistencyResult,
    ConsistencyStatus,
)

__all__ = [
    'RegionStore',
    'RelationEngine',
    'TopologyFacts',
    'PathConsistencyChecker',
    'ConsistencyResult',
    'ConsistencyStatus',
]
