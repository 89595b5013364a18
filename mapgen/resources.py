from __future__ import annotations

"""Resource placement rules and the per-tile resource roll."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .features import Feature
from .resource_types import ResourceType
from .terrain import Terrain


@dataclass(frozen=True)
class ResourcePlacement:
    """
    Where a resource may spawn and how likely it is.

    ``valid_features`` may contain ``None``, meaning the resource can appear on
    a tile without any feature.
    """

    valid_terrains: Tuple[Terrain, ...]
    valid_features: Tuple[Optional[Feature], ...]
    spawn_chance: float

    def __post_init__(self):
        if not 0.0 < self.spawn_chance <= 1.0:
            raise ValueError(f"spawn_chance must be in (0, 1], got {self.spawn_chance}")


_HILLS = (
    Terrain.GRASSLAND_HILL,
    Terrain.PLAINS_HILL,
    Terrain.DESERT_HILL,
    Terrain.TUNDRA_HILL,
    Terrain.SNOW_HILL,
)
_TEMPERATE = (
    Terrain.GRASSLAND,
    Terrain.GRASSLAND_HILL,
    Terrain.PLAINS,
    Terrain.PLAINS_HILL,
)
_QUARRY = (
    Terrain.GRASSLAND,
    Terrain.GRASSLAND_HILL,
    Terrain.PLAINS,
    Terrain.PLAINS_HILL,
    Terrain.DESERT,
    Terrain.DESERT_HILL,
    Terrain.TUNDRA,
)

# Resource -> placement rule. Iteration order follows ResourceType declaration
# order (bonus, strategic, luxury) and place_resource depends on it.
RESOURCE_PLACEMENT: Dict[ResourceType, ResourcePlacement] = {
    # Bonus
    ResourceType.CATTLE: ResourcePlacement((Terrain.GRASSLAND,), (None,), 0.08),
    ResourceType.SHEEP: ResourcePlacement(_TEMPERATE + (Terrain.DESERT_HILL,), (None,), 0.08),
    ResourceType.FISH: ResourcePlacement(
        (Terrain.COAST, Terrain.OCEAN, Terrain.LAKE), (None,), 0.1
    ),
    ResourceType.STONE: ResourcePlacement(_QUARRY, (None,), 0.05),
    ResourceType.WHEAT: ResourcePlacement((Terrain.PLAINS,), (None, Feature.FLOODPLAINS), 0.1),
    ResourceType.BANANAS: ResourcePlacement((Terrain.GRASSLAND,), (Feature.JUNGLE,), 0.15),
    ResourceType.DEER: ResourcePlacement(
        (Terrain.TUNDRA, Terrain.TUNDRA_HILL), (None, Feature.FOREST), 0.12
    ),
    # Strategic
    ResourceType.HORSES: ResourcePlacement(
        (Terrain.GRASSLAND, Terrain.PLAINS, Terrain.TUNDRA), (None,), 0.04
    ),
    ResourceType.IRON: ResourcePlacement(_HILLS, (None, Feature.FOREST), 0.03),
    ResourceType.COAL: ResourcePlacement(
        (Terrain.GRASSLAND_HILL, Terrain.PLAINS_HILL),
        (None, Feature.FOREST, Feature.JUNGLE),
        0.03,
    ),
    ResourceType.OIL: ResourcePlacement(
        (Terrain.DESERT, Terrain.TUNDRA, Terrain.SNOW, Terrain.COAST, Terrain.OCEAN),
        (None, Feature.MARSH),
        0.02,
    ),
    ResourceType.ALUMINUM: ResourcePlacement(
        (Terrain.PLAINS, Terrain.PLAINS_HILL, Terrain.DESERT, Terrain.DESERT_HILL, Terrain.TUNDRA),
        (None,),
        0.02,
    ),
    ResourceType.URANIUM: ResourcePlacement(
        _HILLS, (None, Feature.FOREST, Feature.JUNGLE, Feature.MARSH), 0.01
    ),
    # Luxury
    ResourceType.CITRUS: ResourcePlacement(
        (Terrain.GRASSLAND, Terrain.PLAINS), (None, Feature.JUNGLE), 0.03
    ),
    ResourceType.COTTON: ResourcePlacement(
        (Terrain.GRASSLAND, Terrain.PLAINS, Terrain.DESERT), (None, Feature.FLOODPLAINS), 0.03
    ),
    ResourceType.COPPER: ResourcePlacement(_HILLS[:-1], (None,), 0.03),
    ResourceType.GOLD: ResourcePlacement(
        (
            Terrain.GRASSLAND_HILL,
            Terrain.PLAINS_HILL,
            Terrain.DESERT_HILL,
            Terrain.GRASSLAND,
            Terrain.PLAINS,
            Terrain.DESERT,
        ),
        (None,),
        0.02,
    ),
    ResourceType.CRAB: ResourcePlacement((Terrain.COAST,), (None,), 0.06),
    ResourceType.WHALES: ResourcePlacement((Terrain.COAST, Terrain.OCEAN), (None,), 0.04),
    ResourceType.TURTLES: ResourcePlacement((Terrain.COAST,), (None,), 0.04),
    ResourceType.OLIVES: ResourcePlacement(_TEMPERATE, (None,), 0.03),
    ResourceType.WINE: ResourcePlacement(_TEMPERATE, (None,), 0.03),
    ResourceType.SILK: ResourcePlacement((Terrain.GRASSLAND,), (Feature.FOREST,), 0.04),
    ResourceType.SPICES: ResourcePlacement(
        (Terrain.GRASSLAND, Terrain.PLAINS), (Feature.JUNGLE,), 0.05
    ),
    ResourceType.GEMS: ResourcePlacement(
        _HILLS[:-1] + (Terrain.GRASSLAND,), (None, Feature.JUNGLE), 0.02
    ),
    ResourceType.MARBLE: ResourcePlacement(_QUARRY, (None,), 0.03),
    ResourceType.IVORY: ResourcePlacement((Terrain.PLAINS,), (None,), 0.03),
}


def can_place_resource(
    resource: ResourceType, terrain: Terrain, feature: Optional[Feature]
) -> bool:
    """
    Check whether ``resource`` may appear on a tile with ``terrain`` and ``feature``.

    The terrain must be listed in the rule. A tile without a feature needs
    ``None`` in the rule's feature list; a tile with a feature needs that
    exact feature listed.
    """
    rule = RESOURCE_PLACEMENT[resource]
    if terrain not in rule.valid_terrains:
        return False
    return feature in rule.valid_features


def place_resource(rng, terrain: Terrain, feature: Optional[Feature]) -> Optional[ResourceType]:
    """
    Roll for at most one resource on a tile.

    Compatible resources are tried in declaration order, each with one
    independent draw from ``rng`` against its spawn chance. The first success
    wins, so earlier resources are favored when several could occupy the same
    tile. Incompatible resources consume no draw.
    """
    for resource, rule in RESOURCE_PLACEMENT.items():
        if not can_place_resource(resource, terrain, feature):
            continue
        if rng.random() < rule.spawn_chance:
            return resource
    return None


__all__ = [
    "RESOURCE_PLACEMENT",
    "ResourcePlacement",
    "can_place_resource",
    "place_resource",
]
