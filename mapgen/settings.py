from __future__ import annotations

"""Configuration dataclass for map generation."""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple


class MapSize(Enum):
    DUEL = "duel"
    TINY = "tiny"
    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"
    HUGE = "huge"


# Size preset -> (width, height) in tiles
MAP_DIMENSIONS: Dict[MapSize, Tuple[int, int]] = {
    MapSize.DUEL: (48, 32),
    MapSize.TINY: (56, 36),
    MapSize.SMALL: (68, 44),
    MapSize.STANDARD: (80, 52),
    MapSize.LARGE: (104, 64),
    MapSize.HUGE: (128, 80),
}

DEFAULT_SEED = 42


@dataclass(frozen=True)
class MapConfig:
    """
    Immutable generation settings. The seed determines the whole run; use
    ``with_seed`` to get a re-seeded copy.

    Thresholds are compared against normalized elevation in [0, 1] and are
    expected to satisfy ``ocean_threshold < hill_threshold < mountain_threshold``.
    """

    size: MapSize = MapSize.STANDARD
    seed: int = DEFAULT_SEED
    land_coverage: float = 0.4
    ocean_threshold: float = 0.35
    hill_threshold: float = 0.55
    mountain_threshold: float = 0.75

    def __post_init__(self):
        if not isinstance(self.size, MapSize):
            raise TypeError(f"size must be a MapSize, not {type(self.size)}")
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise TypeError(f"seed must be an int, not {type(self.seed)}")
        for name in ("land_coverage", "ocean_threshold", "hill_threshold", "mountain_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if not self.ocean_threshold < self.hill_threshold < self.mountain_threshold:
            logging.warning(
                f"Thresholds out of order (ocean={self.ocean_threshold}, "
                f"hill={self.hill_threshold}, mountain={self.mountain_threshold}); "
                "terrain bands will be degenerate"
            )

    # Size presets --------------------------------------------------------
    @classmethod
    def duel(cls, seed: Optional[int] = None) -> "MapConfig":
        return cls._preset(MapSize.DUEL, seed)

    @classmethod
    def tiny(cls, seed: Optional[int] = None) -> "MapConfig":
        return cls._preset(MapSize.TINY, seed)

    @classmethod
    def small(cls, seed: Optional[int] = None) -> "MapConfig":
        return cls._preset(MapSize.SMALL, seed)

    @classmethod
    def standard(cls, seed: Optional[int] = None) -> "MapConfig":
        return cls._preset(MapSize.STANDARD, seed)

    @classmethod
    def large(cls, seed: Optional[int] = None) -> "MapConfig":
        return cls._preset(MapSize.LARGE, seed)

    @classmethod
    def huge(cls, seed: Optional[int] = None) -> "MapConfig":
        return cls._preset(MapSize.HUGE, seed)

    @classmethod
    def _preset(cls, size: MapSize, seed: Optional[int]) -> "MapConfig":
        return cls(size=size, seed=DEFAULT_SEED if seed is None else seed)

    def with_seed(self, seed: int) -> "MapConfig":
        """Return a copy of this configuration with a different seed."""
        return replace(self, seed=seed)

    @property
    def dimensions(self) -> Tuple[int, int]:
        """(width, height) of the tile grid."""
        return MAP_DIMENSIONS[self.size]

    @property
    def width(self) -> int:
        return self.dimensions[0]

    @property
    def height(self) -> int:
        return self.dimensions[1]

    @property
    def total_tiles(self) -> int:
        width, height = self.dimensions
        return width * height


__all__ = ["DEFAULT_SEED", "MAP_DIMENSIONS", "MapConfig", "MapSize"]
