"""
SRS Configuration Module

Centralized configuration for the spatial reasoning system.
"""

import json
from dataclasses import MISSING, dataclass, field, fields, asdict
from typing import Dict, Any


@dataclass
class GeometryConfig:
    """Geometric predicate configuration."""
    # Absolute tolerance for equality, collinearity and boundary contact
    epsilon: float = 1e-9


@dataclass
class DirectionConfig:
    """Directional relation configuration."""
    # Returned when centroids coincide or a reference has no orientation
    undefined_sector_code: int = -1
    # Bearings this close (degrees) to a sector boundary count as on it
    boundary_tolerance_deg: float = 1e-9

    def __post_init__(self):
        if 0 <= self.undefined_sector_code <= 7:
            raise ValueError(
                f"undefined_sector_code must lie outside 0-7, got {self.undefined_sector_code}"
            )


@dataclass
class StoreConfig:
    """Region store configuration."""
    # Reject polygons whose boundary crosses itself instead of warning
    reject_self_intersecting: bool = False


@dataclass
class CanvasConfig:
    """Default visualization surface."""
    width: float = 800.0
    height: float = 600.0
    scale: float = 1.0


@dataclass
class ReasoningConfig:
    """Scene consistency checking configuration."""
    max_iterations: int = 10000


@dataclass
class SRSGlobalConfig:
    """Global SRS configuration."""
    geometry: GeometryConfig = field(default_factory=GeometryConfig)
    direction: DirectionConfig = field(default_factory=DirectionConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    reasoning: ReasoningConfig = field(default_factory=ReasoningConfig)

    # Logging
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SRSGlobalConfig':
        """Build a config from a dictionary; missing keys keep their defaults."""
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown config sections: {sorted(unknown)}")
        sections = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            section_type = f.default_factory if f.default_factory is not MISSING else None
            if isinstance(value, dict) and section_type is not None:
                known = {sf.name for sf in fields(section_type)}
                unknown = set(value) - known
                if unknown:
                    raise ValueError(f"Unknown keys in '{f.name}' config: {sorted(unknown)}")
                sections[f.name] = section_type(**value)
            else:
                sections[f.name] = value
        return cls(**sections)

    def save(self, filepath: str):
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'SRSGlobalConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)


# Default global configuration instance
DEFAULT_CONFIG = SRSGlobalConfig()
