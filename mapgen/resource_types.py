# coding: utf-8
from __future__ import annotations

"""Resource type enumeration, categories and yield bonuses."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List


class ResourceCategory(Enum):
    BONUS = "bonus"
    STRATEGIC = "strategic"
    LUXURY = "luxury"


class ResourceType(Enum):
    """
    Natural resources that can appear on a tile.

    Declaration order is part of the contract: resource placement walks the
    members in this order and the first successful roll wins.
    """

    # Bonus
    CATTLE = "cattle"
    SHEEP = "sheep"
    FISH = "fish"
    STONE = "stone"
    WHEAT = "wheat"
    BANANAS = "bananas"
    DEER = "deer"
    # Strategic
    HORSES = "horses"
    IRON = "iron"
    COAL = "coal"
    OIL = "oil"
    ALUMINUM = "aluminum"
    URANIUM = "uranium"
    # Luxury
    CITRUS = "citrus"
    COTTON = "cotton"
    COPPER = "copper"
    GOLD = "gold"
    CRAB = "crab"
    WHALES = "whales"
    TURTLES = "turtles"
    OLIVES = "olives"
    WINE = "wine"
    SILK = "silk"
    SPICES = "spices"
    GEMS = "gems"
    MARBLE = "marble"
    IVORY = "ivory"


@dataclass(frozen=True)
class ResourceData:
    category: ResourceCategory
    food: int = 0
    production: int = 0
    gold: int = 0
    improved_food: int = 0
    improved_production: int = 0
    improved_gold: int = 0


def _production(category: ResourceCategory) -> ResourceData:
    # +1 production, +2 once improved
    return ResourceData(category, production=1, improved_production=2)


def _food(category: ResourceCategory) -> ResourceData:
    # +1 food, +2 once improved
    return ResourceData(category, food=1, improved_food=2)


_B = ResourceCategory.BONUS
_S = ResourceCategory.STRATEGIC
_L = ResourceCategory.LUXURY

RESOURCE_DATA: Dict[ResourceType, ResourceData] = {
    ResourceType.CATTLE: _production(_B),
    ResourceType.SHEEP: _production(_B),
    ResourceType.FISH: _food(_B),
    ResourceType.STONE: _production(_B),
    ResourceType.WHEAT: _food(_B),
    ResourceType.BANANAS: _food(_B),
    ResourceType.DEER: _food(_B),
    ResourceType.HORSES: _production(_S),
    ResourceType.IRON: _production(_S),
    ResourceType.COAL: _production(_S),
    ResourceType.OIL: _production(_S),
    ResourceType.ALUMINUM: _production(_S),
    ResourceType.URANIUM: _production(_S),
    ResourceType.CITRUS: ResourceData(_L, food=1, gold=1, improved_food=1, improved_gold=2),
    ResourceType.COTTON: ResourceData(_L, gold=2, improved_gold=3),
    ResourceType.COPPER: ResourceData(_L, gold=2, improved_production=1, improved_gold=2),
    ResourceType.GOLD: ResourceData(_L, gold=2, improved_gold=2),
    ResourceType.CRAB: _food(_L),
    ResourceType.WHALES: ResourceData(_L, food=1, gold=1, improved_food=2, improved_gold=1),
    ResourceType.TURTLES: ResourceData(_L, food=1, gold=1, improved_food=2, improved_gold=1),
    ResourceType.OLIVES: ResourceData(
        _L, production=1, gold=1, improved_production=1, improved_gold=2
    ),
    ResourceType.WINE: ResourceData(_L, gold=2, improved_gold=3),
    ResourceType.SILK: ResourceData(_L, gold=2, improved_gold=3),
    ResourceType.SPICES: ResourceData(_L, gold=2, improved_gold=3),
    ResourceType.GEMS: ResourceData(_L, gold=3, improved_gold=3),
    ResourceType.MARBLE: ResourceData(
        _L, production=1, gold=1, improved_production=2, improved_gold=1
    ),
    ResourceType.IVORY: ResourceData(
        _L, production=1, gold=1, improved_production=2, improved_gold=1
    ),
}


def resource_data(resource: ResourceType) -> ResourceData:
    return RESOURCE_DATA[resource]


def resources_by_category(category: ResourceCategory) -> List[ResourceType]:
    """Resources of ``category`` in declaration order."""
    return [r for r in ResourceType if RESOURCE_DATA[r].category is category]


def all_resources() -> List[ResourceType]:
    return list(ResourceType)


BONUS_RESOURCES: FrozenSet[ResourceType] = frozenset(resources_by_category(_B))
STRATEGIC_RESOURCES: FrozenSet[ResourceType] = frozenset(resources_by_category(_S))
LUXURY_RESOURCES: FrozenSet[ResourceType] = frozenset(resources_by_category(_L))


def is_bonus(resource: ResourceType) -> bool:
    return resource in BONUS_RESOURCES


def is_strategic(resource: ResourceType) -> bool:
    return resource in STRATEGIC_RESOURCES


def is_luxury(resource: ResourceType) -> bool:
    return resource in LUXURY_RESOURCES


__all__ = [
    "BONUS_RESOURCES",
    "LUXURY_RESOURCES",
    "RESOURCE_DATA",
    "ResourceCategory",
    "ResourceData",
    "ResourceType",
    "STRATEGIC_RESOURCES",
    "all_resources",
    "is_bonus",
    "is_luxury",
    "is_strategic",
    "resource_data",
    "resources_by_category",
]
