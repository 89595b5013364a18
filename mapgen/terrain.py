from __future__ import annotations

"""Terrain enumeration and its per-terrain data table."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet

# Movement cost used for terrain that land units cannot enter.
IMPASSABLE_COST = 9999


class Terrain(Enum):
    # Flat terrain
    GRASSLAND = "grassland"
    PLAINS = "plains"
    DESERT = "desert"
    TUNDRA = "tundra"
    SNOW = "snow"

    # Hill variants
    GRASSLAND_HILL = "grassland_hill"
    PLAINS_HILL = "plains_hill"
    DESERT_HILL = "desert_hill"
    TUNDRA_HILL = "tundra_hill"
    SNOW_HILL = "snow_hill"

    # Special terrain
    MOUNTAIN = "mountain"

    # Water terrain
    COAST = "coast"
    OCEAN = "ocean"
    LAKE = "lake"


@dataclass(frozen=True)
class TerrainData:
    food: int
    production: int
    gold: int
    movement_cost: int
    is_water: bool = False
    is_hill: bool = False
    is_passable: bool = True


_HILL = TerrainData(food=0, production=2, gold=0, movement_cost=2, is_hill=True)

TERRAIN_DATA: Dict[Terrain, TerrainData] = {
    Terrain.GRASSLAND: TerrainData(food=2, production=0, gold=0, movement_cost=1),
    Terrain.PLAINS: TerrainData(food=1, production=1, gold=0, movement_cost=1),
    Terrain.DESERT: TerrainData(food=0, production=0, gold=0, movement_cost=1),
    Terrain.TUNDRA: TerrainData(food=1, production=0, gold=0, movement_cost=1),
    Terrain.SNOW: TerrainData(food=0, production=0, gold=0, movement_cost=1),
    Terrain.GRASSLAND_HILL: _HILL,
    Terrain.PLAINS_HILL: _HILL,
    Terrain.DESERT_HILL: _HILL,
    Terrain.TUNDRA_HILL: _HILL,
    Terrain.SNOW_HILL: _HILL,
    Terrain.MOUNTAIN: TerrainData(
        food=0, production=0, gold=0, movement_cost=IMPASSABLE_COST, is_passable=False
    ),
    Terrain.COAST: TerrainData(
        food=1, production=0, gold=0, movement_cost=IMPASSABLE_COST, is_water=True, is_passable=False
    ),
    Terrain.OCEAN: TerrainData(
        food=1, production=0, gold=0, movement_cost=IMPASSABLE_COST, is_water=True, is_passable=False
    ),
    Terrain.LAKE: TerrainData(
        food=2, production=0, gold=0, movement_cost=IMPASSABLE_COST, is_water=True, is_passable=False
    ),
}

FLAT_LAND: FrozenSet[Terrain] = frozenset(
    {Terrain.GRASSLAND, Terrain.PLAINS, Terrain.DESERT, Terrain.TUNDRA, Terrain.SNOW}
)

_HILL_VARIANTS: Dict[Terrain, Terrain] = {
    Terrain.GRASSLAND: Terrain.GRASSLAND_HILL,
    Terrain.PLAINS: Terrain.PLAINS_HILL,
    Terrain.DESERT: Terrain.DESERT_HILL,
    Terrain.TUNDRA: Terrain.TUNDRA_HILL,
    Terrain.SNOW: Terrain.SNOW_HILL,
}


def terrain_data(terrain: Terrain) -> TerrainData:
    return TERRAIN_DATA[terrain]


def is_flat_land(terrain: Terrain) -> bool:
    return terrain in FLAT_LAND


def is_hill(terrain: Terrain) -> bool:
    return TERRAIN_DATA[terrain].is_hill


def is_water(terrain: Terrain) -> bool:
    return TERRAIN_DATA[terrain].is_water


def is_passable(terrain: Terrain) -> bool:
    return TERRAIN_DATA[terrain].is_passable


def hill_variant(terrain: Terrain) -> Terrain:
    """
    Return the hill version of a flat biome. Raises ValueError for terrain
    that has no hill variant (water, mountain, or an existing hill).
    """
    try:
        return _HILL_VARIANTS[terrain]
    except KeyError:
        raise ValueError(f"{terrain.name} has no hill variant") from None


__all__ = [
    "FLAT_LAND",
    "IMPASSABLE_COST",
    "TERRAIN_DATA",
    "Terrain",
    "TerrainData",
    "hill_variant",
    "is_flat_land",
    "is_hill",
    "is_passable",
    "is_water",
    "terrain_data",
]
