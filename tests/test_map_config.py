import dataclasses
import logging

import pytest

from mapgen.settings import MAP_DIMENSIONS, MapConfig, MapSize


def test_defaults():
    config = MapConfig()
    assert config.size is MapSize.STANDARD
    assert config.seed == 42
    assert config.land_coverage == 0.4
    assert (config.ocean_threshold, config.hill_threshold, config.mountain_threshold) == (
        0.35,
        0.55,
        0.75,
    )


@pytest.mark.parametrize(
    "factory, size, dims",
    [
        (MapConfig.duel, MapSize.DUEL, (48, 32)),
        (MapConfig.tiny, MapSize.TINY, (56, 36)),
        (MapConfig.small, MapSize.SMALL, (68, 44)),
        (MapConfig.standard, MapSize.STANDARD, (80, 52)),
        (MapConfig.large, MapSize.LARGE, (104, 64)),
        (MapConfig.huge, MapSize.HUGE, (128, 80)),
    ],
)
def test_size_presets(factory, size, dims):
    config = factory(7)
    assert config.size is size
    assert config.seed == 7
    assert config.dimensions == dims == MAP_DIMENSIONS[size]
    assert (config.width, config.height) == dims
    assert config.total_tiles == dims[0] * dims[1]


def test_preset_default_seed():
    assert MapConfig.duel().seed == 42


def test_with_seed_returns_new_value():
    config = MapConfig.duel(1)
    reseeded = config.with_seed(2)
    assert reseeded.seed == 2
    assert config.seed == 1
    assert reseeded.size is config.size
    assert reseeded.ocean_threshold == config.ocean_threshold


def test_config_is_immutable():
    config = MapConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.seed = 3


def test_negative_and_zero_seeds_allowed():
    assert MapConfig(seed=0).seed == 0
    assert MapConfig(seed=-17).seed == -17


@pytest.mark.parametrize("field", ["land_coverage", "ocean_threshold", "hill_threshold", "mountain_threshold"])
def test_out_of_range_values_rejected(field):
    with pytest.raises(ValueError):
        MapConfig(**{field: 1.5})
    with pytest.raises(ValueError):
        MapConfig(**{field: -0.1})


def test_bad_types_rejected():
    with pytest.raises(TypeError):
        MapConfig(size="duel")
    with pytest.raises(TypeError):
        MapConfig(seed=1.5)
    with pytest.raises(TypeError):
        MapConfig(seed=True)


def test_threshold_order_violation_is_logged(caplog):
    with caplog.at_level(logging.WARNING):
        config = MapConfig(ocean_threshold=0.6, hill_threshold=0.5, mountain_threshold=0.9)
    assert config.ocean_threshold == 0.6
    assert "out of order" in caplog.text
