import pytest

from mapgen.terrain import (
    IMPASSABLE_COST,
    TERRAIN_DATA,
    Terrain,
    hill_variant,
    is_flat_land,
    is_hill,
    is_passable,
    is_water,
)


def test_every_terrain_has_data():
    assert set(TERRAIN_DATA) == set(Terrain)
    assert len(Terrain) == 14


@pytest.mark.parametrize("terrain", [Terrain.COAST, Terrain.OCEAN, Terrain.LAKE])
def test_water_terrain_is_impassable(terrain):
    data = TERRAIN_DATA[terrain]
    assert is_water(terrain)
    assert not is_passable(terrain)
    assert data.movement_cost == IMPASSABLE_COST


def test_mountain_is_impassable_land():
    assert not is_water(Terrain.MOUNTAIN)
    assert not is_passable(Terrain.MOUNTAIN)
    assert not is_hill(Terrain.MOUNTAIN)
    assert TERRAIN_DATA[Terrain.MOUNTAIN].movement_cost == IMPASSABLE_COST


def test_base_yields():
    grass = TERRAIN_DATA[Terrain.GRASSLAND]
    plains = TERRAIN_DATA[Terrain.PLAINS]
    lake = TERRAIN_DATA[Terrain.LAKE]
    assert (grass.food, grass.production, grass.gold) == (2, 0, 0)
    assert (plains.food, plains.production, plains.gold) == (1, 1, 0)
    assert lake.food == 2


@pytest.mark.parametrize(
    "flat, hill",
    [
        (Terrain.GRASSLAND, Terrain.GRASSLAND_HILL),
        (Terrain.PLAINS, Terrain.PLAINS_HILL),
        (Terrain.DESERT, Terrain.DESERT_HILL),
        (Terrain.TUNDRA, Terrain.TUNDRA_HILL),
        (Terrain.SNOW, Terrain.SNOW_HILL),
    ],
)
def test_hill_variants(flat, hill):
    assert is_flat_land(flat)
    assert not is_hill(flat)
    assert hill_variant(flat) is hill
    assert is_hill(hill)
    assert is_passable(hill)
    data = TERRAIN_DATA[hill]
    assert (data.food, data.production, data.movement_cost) == (0, 2, 2)


@pytest.mark.parametrize("terrain", [Terrain.OCEAN, Terrain.MOUNTAIN, Terrain.PLAINS_HILL])
def test_hill_variant_rejects_non_flat_terrain(terrain):
    with pytest.raises(ValueError):
        hill_variant(terrain)
