from __future__ import annotations

from .features import FEATURE_DATA, Feature, FeatureData, can_place_feature
from .generation import (
    PerlinNoise,
    classify_terrain,
    normalize_field,
    place_feature,
    synthesize_fields,
)
from .hex import Coordinate, GeneratedTile, TilePosition
from .resource_types import (
    BONUS_RESOURCES,
    LUXURY_RESOURCES,
    RESOURCE_DATA,
    STRATEGIC_RESOURCES,
    ResourceCategory,
    ResourceData,
    ResourceType,
)
from .resources import RESOURCE_PLACEMENT, ResourcePlacement, can_place_resource, place_resource
from .rng import SeededRandom
from .settings import MAP_DIMENSIONS, MapConfig, MapSize
from .terrain import TERRAIN_DATA, Terrain, TerrainData
from .world import InvalidCoordinateError, MapGenerator, World, generate
from .yields import TileYields, ZERO_YIELDS, calculate_improved_yields, calculate_yields

__all__ = [
    "BONUS_RESOURCES",
    "Coordinate",
    "FEATURE_DATA",
    "Feature",
    "FeatureData",
    "GeneratedTile",
    "InvalidCoordinateError",
    "LUXURY_RESOURCES",
    "MAP_DIMENSIONS",
    "MapConfig",
    "MapGenerator",
    "MapSize",
    "PerlinNoise",
    "RESOURCE_DATA",
    "RESOURCE_PLACEMENT",
    "ResourceCategory",
    "ResourceData",
    "ResourcePlacement",
    "ResourceType",
    "STRATEGIC_RESOURCES",
    "SeededRandom",
    "TERRAIN_DATA",
    "Terrain",
    "TerrainData",
    "TilePosition",
    "TileYields",
    "World",
    "ZERO_YIELDS",
    "calculate_improved_yields",
    "calculate_yields",
    "can_place_feature",
    "can_place_resource",
    "classify_terrain",
    "generate",
    "normalize_field",
    "place_feature",
    "place_resource",
    "synthesize_fields",
]
