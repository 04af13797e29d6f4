"""
Region Store

Mapping from shape id to ``Region``. The store exclusively owns its regions;
the id is the only handle callers hold, so a removed region can never be
reached again.
"""

import logging
from itertools import permutations
from typing import Dict, Iterator, List, Tuple

from geometry.regions import Region
from qsr_base.errors import DuplicateIdError, UnknownShapeError

logger = logging.getLogger(__name__)


class RegionStore:
    """
    Id-keyed region registry.

    Insertion is atomic: either the region becomes visible to every later
    lookup or the store is left unchanged.
    """

    def __init__(self):
        self._regions: Dict[int, Region] = {}

    def insert(self, region: Region) -> None:
        """Store a region; raises DuplicateIdError if its id is taken."""
        if region.id in self._regions:
            raise DuplicateIdError(region.id)
        self._regions[region.id] = region
        logger.debug("Stored %s", region.describe())

    def remove(self, shape_id: int) -> Region:
        """Remove and return a region; raises UnknownShapeError if absent."""
        try:
            region = self._regions.pop(shape_id)
        except KeyError:
            raise UnknownShapeError(shape_id) from None
        logger.debug("Removed %s", region.describe())
        return region

    def get(self, shape_id: int) -> Region:
        """Resolve an id; raises UnknownShapeError if absent."""
        try:
            return self._regions[shape_id]
        except KeyError:
            raise UnknownShapeError(shape_id) from None

    @property
    def ids(self) -> List[int]:
        """Stored ids in ascending order."""
        return sorted(self._regions)

    def ordered_pairs(self) -> Iterator[Tuple[Region, Region]]:
        """All ordered pairs of distinct regions, by ascending id."""
        regions = [self._regions[i] for i in self.ids]
        return permutations(regions, 2)

    def clear(self) -> None:
        self._regions.clear()

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._regions

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter([self._regions[i] for i in self.ids])
