from __future__ import annotations

"""Tile yield vector and the terrain + feature + resource yield calculator."""

import math
from dataclasses import dataclass
from typing import Optional

from .features import FEATURE_DATA, Feature
from .resource_types import RESOURCE_DATA, ResourceType
from .terrain import TERRAIN_DATA, Terrain


@dataclass(frozen=True)
class TileYields:
    food: int = 0
    production: int = 0
    gold: int = 0
    # Carried for forward compatibility; always 0 from the calculator.
    science: int = 0
    culture: int = 0
    faith: int = 0

    @property
    def total(self) -> int:
        return total_yields(self)


ZERO_YIELDS = TileYields()


def _compose(
    terrain: Terrain,
    feature: Optional[Feature],
    resource: Optional[ResourceType],
    improved: bool,
) -> TileYields:
    terrain_info = TERRAIN_DATA[terrain]
    food = terrain_info.food
    production = terrain_info.production
    gold = terrain_info.gold

    if feature is not None:
        feature_info = FEATURE_DATA[feature]
        food += feature_info.food_modifier
        production += feature_info.production_modifier
        gold += feature_info.gold_modifier

    if resource is not None:
        resource_info = RESOURCE_DATA[resource]
        if improved:
            food += resource_info.improved_food
            production += resource_info.improved_production
            gold += resource_info.improved_gold
        else:
            food += resource_info.food
            production += resource_info.production
            gold += resource_info.gold

    return TileYields(
        food=max(0, food),
        production=max(0, production),
        gold=max(0, gold),
    )


def calculate_yields(
    terrain: Terrain,
    feature: Optional[Feature] = None,
    resource: Optional[ResourceType] = None,
) -> TileYields:
    """
    Yields of an unimproved tile: terrain base, plus feature modifiers, plus
    the resource's base bonus. Each component is clamped to zero.
    """
    return _compose(terrain, feature, resource, improved=False)


def calculate_improved_yields(
    terrain: Terrain,
    feature: Optional[Feature] = None,
    resource: Optional[ResourceType] = None,
) -> TileYields:
    """Same as calculate_yields but using the resource's improved bonus."""
    return _compose(terrain, feature, resource, improved=True)


def total_yields(yields: TileYields) -> int:
    return (
        yields.food
        + yields.production
        + yields.gold
        + yields.science
        + yields.culture
        + yields.faith
    )


def add_yields(a: TileYields, b: TileYields) -> TileYields:
    return TileYields(
        food=a.food + b.food,
        production=a.production + b.production,
        gold=a.gold + b.gold,
        science=a.science + b.science,
        culture=a.culture + b.culture,
        faith=a.faith + b.faith,
    )


def subtract_yields(a: TileYields, b: TileYields) -> TileYields:
    return TileYields(
        food=a.food - b.food,
        production=a.production - b.production,
        gold=a.gold - b.gold,
        science=a.science - b.science,
        culture=a.culture - b.culture,
        faith=a.faith - b.faith,
    )


def multiply_yields(yields: TileYields, factor: float) -> TileYields:
    """Scale every component by ``factor``, rounding down to whole yields."""
    return TileYields(
        food=math.floor(yields.food * factor),
        production=math.floor(yields.production * factor),
        gold=math.floor(yields.gold * factor),
        science=math.floor(yields.science * factor),
        culture=math.floor(yields.culture * factor),
        faith=math.floor(yields.faith * factor),
    )


__all__ = [
    "TileYields",
    "ZERO_YIELDS",
    "add_yields",
    "calculate_improved_yields",
    "calculate_yields",
    "multiply_yields",
    "subtract_yields",
    "total_yields",
]
