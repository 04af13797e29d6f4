"""
Canvas Collaborators
====================

The reasoning system reports inserts and removals to a canvas so an
external renderer can mirror the scene. A canvas is side-effect only: it is
never consulted for query results.

Design:
- Passed explicitly to the system (no module-level canvas)
- ``HeadlessCanvas`` is the default and only logs
- ``RecordingCanvas`` keeps an in-memory history for inspection
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Tuple

from geometry.regions import Region

logger = logging.getLogger(__name__)


class Canvas(Protocol):
    """Protocol for visualization surfaces (interface)."""

    def configure(self, width: float, height: float, scale: float) -> None:
        """Set the drawing surface size and world-to-pixel scale."""
        ...

    def draw(self, region: Region) -> None:
        """Render a newly inserted region."""
        ...

    def erase(self, region_id: int) -> None:
        """Remove a region's rendering."""
        ...


class HeadlessCanvas:
    """No-op canvas used when nothing is rendering."""

    def configure(self, width: float, height: float, scale: float) -> None:
        logger.debug("Headless canvas configured: %gx%g scale=%g", width, height, scale)

    def draw(self, region: Region) -> None:
        logger.debug("Headless draw: %s", region.describe())

    def erase(self, region_id: int) -> None:
        logger.debug("Headless erase: %d", region_id)


@dataclass
class RecordingCanvas:
    """
    Canvas that records every call.

    Attributes:
        size: (width, height, scale) from the last configure, if any
        visible: Regions currently drawn, by id
        history: Ordered log of ("configure" | "draw" | "erase", detail)
    """
    size: Optional[Tuple[float, float, float]] = None
    visible: Dict[int, Region] = field(default_factory=dict)
    history: List[Tuple[str, object]] = field(default_factory=list)

    def configure(self, width: float, height: float, scale: float) -> None:
        self.size = (width, height, scale)
        self.history.append(("configure", self.size))

    def draw(self, region: Region) -> None:
        self.visible[region.id] = region
        self.history.append(("draw", region.id))

    def erase(self, region_id: int) -> None:
        self.visible.pop(region_id, None)
        self.history.append(("erase", region_id))
