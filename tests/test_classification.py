import logging

import pytest

from mapgen.generation import classify_terrain
from mapgen.settings import MapConfig
from mapgen.terrain import Terrain

DEFAULT = MapConfig()


@pytest.mark.parametrize(
    "elevation, temperature, expected",
    [
        (0.1, 0.5, Terrain.OCEAN),
        (0.3, 0.5, Terrain.COAST),
        (0.85, 0.5, Terrain.MOUNTAIN),
        (0.5, 0.1, Terrain.SNOW),
        (0.65, 0.1, Terrain.SNOW_HILL),
        (0.5, 0.2, Terrain.TUNDRA),
        (0.6, 0.2, Terrain.TUNDRA_HILL),
        (0.5, 0.4, Terrain.GRASSLAND),
        (0.6, 0.4, Terrain.GRASSLAND_HILL),
        (0.5, 0.6, Terrain.PLAINS),
        (0.6, 0.6, Terrain.PLAINS_HILL),
        (0.5, 0.9, Terrain.DESERT),
        (0.6, 0.9, Terrain.DESERT_HILL),
    ],
)
def test_classify(elevation, temperature, expected):
    assert classify_terrain(elevation, temperature, DEFAULT) is expected


def test_band_edges():
    # Bands are half-open: a value equal to the upper bound falls into the next band
    assert classify_terrain(0.5, 0.15, DEFAULT) is Terrain.TUNDRA
    assert classify_terrain(0.5, 0.80, DEFAULT) is Terrain.DESERT
    # Exactly at a threshold is not past it
    assert classify_terrain(0.35, 0.5, DEFAULT) is Terrain.PLAINS
    assert classify_terrain(0.55, 0.5, DEFAULT) is Terrain.PLAINS
    assert classify_terrain(0.75, 0.5, DEFAULT) is Terrain.PLAINS_HILL
    assert classify_terrain(0.22, 0.5, DEFAULT) is Terrain.COAST


def test_custom_thresholds():
    config = MapConfig(ocean_threshold=0.1, hill_threshold=0.2, mountain_threshold=0.3)
    assert classify_terrain(0.08, 0.5, config) is Terrain.COAST
    assert classify_terrain(0.05, 0.5, config) is Terrain.OCEAN
    assert classify_terrain(0.25, 0.5, config) is Terrain.PLAINS_HILL
    assert classify_terrain(0.35, 0.5, config) is Terrain.MOUNTAIN


def test_classify_never_emits_lake():
    for e in range(21):
        for t in range(21):
            assert classify_terrain(e / 20, t / 20, DEFAULT) is not Terrain.LAKE


def test_degenerate_thresholds_still_classify(caplog):
    with caplog.at_level(logging.WARNING):
        config = MapConfig(ocean_threshold=0.8, hill_threshold=0.5, mountain_threshold=0.3)
    for e in range(11):
        for t in range(11):
            assert isinstance(classify_terrain(e / 10, t / 10, config), Terrain)
