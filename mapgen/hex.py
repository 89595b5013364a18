from __future__ import annotations

"""
Tile position and the immutable tile record emitted by the map generator.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from .features import Feature
from .resource_types import ResourceType
from .terrain import Terrain

Coordinate = Tuple[int, int]


@dataclass(frozen=True, order=True)
class TilePosition:
    """Axial (q, r) hex coordinate."""

    q: int
    r: int

    @property
    def coord(self) -> Coordinate:
        return (self.q, self.r)

    def key(self) -> str:
        """String key, e.g. ``"3,7"``, for lookups keyed by text."""
        return f"{self.q},{self.r}"

    def __repr__(self) -> str:
        return f"TilePosition({self.q}, {self.r})"


@dataclass(frozen=True)
class GeneratedTile:
    """
    One classified map tile.

    Attributes:
      position: Axial coordinate of the tile.
      terrain: Base terrain, fixed at generation.
      feature: Optional environmental feature (forest, jungle, ...).
      resource: Optional natural resource.
    """

    position: TilePosition
    terrain: Terrain
    feature: Optional[Feature] = None
    resource: Optional[ResourceType] = None

    def __post_init__(self):
        if not isinstance(self.position, TilePosition):
            raise TypeError(f"position must be a TilePosition, not {type(self.position)}")
        if not isinstance(self.terrain, Terrain):
            raise TypeError(f"terrain must be a Terrain, not {type(self.terrain)}")
        if self.feature is not None and not isinstance(self.feature, Feature):
            raise TypeError(f"feature must be a Feature or None, not {type(self.feature)}")
        if self.resource is not None and not isinstance(self.resource, ResourceType):
            raise TypeError(f"resource must be a ResourceType or None, not {type(self.resource)}")

    @property
    def coord(self) -> Coordinate:
        return self.position.coord

    def __repr__(self) -> str:
        base = f"GeneratedTile(coord={self.coord}, terrain={self.terrain.value}"
        if self.feature is not None:
            base += f", feature={self.feature.value}"
        if self.resource is not None:
            base += f", resource={self.resource.value}"
        return base + ")"

    def to_dict(self) -> Dict[str, Union[str, int, None]]:
        """Flat dict view used by tests and debug output."""
        return {
            "q": self.position.q,
            "r": self.position.r,
            "terrain": self.terrain.value,
            "feature": self.feature.value if self.feature else None,
            "resource": self.resource.value if self.resource else None,
        }


__all__ = ["Coordinate", "GeneratedTile", "TilePosition"]
