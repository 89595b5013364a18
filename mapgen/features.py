from __future__ import annotations

"""Tile feature enumeration (forest, jungle, ...) and its data table."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .terrain import Terrain


class Feature(Enum):
    FOREST = "forest"
    JUNGLE = "jungle"
    MARSH = "marsh"
    FLOODPLAINS = "floodplains"
    OASIS = "oasis"
    ICE = "ice"


@dataclass(frozen=True)
class FeatureData:
    """
    Yield and movement modifiers applied on top of the tile's terrain.

    Modifiers are additive and may be negative; ``valid_terrains`` lists
    every terrain the feature may legally appear on.
    """

    food_modifier: int
    production_modifier: int
    gold_modifier: int
    movement_modifier: int
    valid_terrains: Tuple[Terrain, ...]


FEATURE_DATA: Dict[Feature, FeatureData] = {
    Feature.FOREST: FeatureData(
        food_modifier=0,
        production_modifier=1,
        gold_modifier=0,
        movement_modifier=1,
        valid_terrains=(
            Terrain.GRASSLAND,
            Terrain.PLAINS,
            Terrain.TUNDRA,
            Terrain.GRASSLAND_HILL,
            Terrain.PLAINS_HILL,
            Terrain.TUNDRA_HILL,
        ),
    ),
    Feature.JUNGLE: FeatureData(
        food_modifier=0,
        production_modifier=-1,
        gold_modifier=0,
        movement_modifier=1,
        valid_terrains=(
            Terrain.GRASSLAND,
            Terrain.PLAINS,
            Terrain.GRASSLAND_HILL,
            Terrain.PLAINS_HILL,
        ),
    ),
    Feature.MARSH: FeatureData(
        food_modifier=-1,
        production_modifier=0,
        gold_modifier=0,
        movement_modifier=1,
        valid_terrains=(Terrain.GRASSLAND,),
    ),
    Feature.FLOODPLAINS: FeatureData(
        food_modifier=2,
        production_modifier=0,
        gold_modifier=0,
        movement_modifier=0,
        valid_terrains=(Terrain.DESERT,),
    ),
    Feature.OASIS: FeatureData(
        food_modifier=3,
        production_modifier=0,
        gold_modifier=1,
        movement_modifier=0,
        valid_terrains=(Terrain.DESERT,),
    ),
    Feature.ICE: FeatureData(
        food_modifier=0,
        production_modifier=0,
        gold_modifier=0,
        movement_modifier=0,
        valid_terrains=(Terrain.COAST, Terrain.OCEAN),
    ),
}


def feature_data(feature: Feature) -> FeatureData:
    return FEATURE_DATA[feature]


def can_place_feature(feature: Feature, terrain: Terrain) -> bool:
    """True if ``terrain`` is in the feature's valid terrain list."""
    return terrain in FEATURE_DATA[feature].valid_terrains


def all_features() -> List[Feature]:
    return list(Feature)


__all__ = [
    "FEATURE_DATA",
    "Feature",
    "FeatureData",
    "all_features",
    "can_place_feature",
    "feature_data",
]
