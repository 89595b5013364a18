import pytest

from mapgen.generation import (
    PerlinNoise,
    edge_falloff,
    fractal_noise,
    normalize_field,
    synthesize_fields,
)
from mapgen.rng import SeededRandom


def _flatten(field):
    return [v for column in field for v in column]


def test_noise_is_deterministic_and_bounded():
    a = PerlinNoise(5)
    b = PerlinNoise(5)
    for i in range(40):
        x, y = i * 0.37, i * 0.11
        assert a(x, y) == b(x, y)
        assert 0.0 <= a(x, y) <= 1.0
        assert -1.0 <= a.signed(x, y) <= 1.0


def test_noise_differs_between_seeds():
    a = PerlinNoise(1)
    b = PerlinNoise(2)
    samples = [(i * 0.43, i * 0.29) for i in range(1, 30)]
    assert any(a(x, y) != b(x, y) for x, y in samples)


def test_fractal_noise_sums_octaves():
    noise = PerlinNoise(3)
    one = fractal_noise(noise, 10, 10, 1, 0.05)
    assert one == noise(10 * 0.05, 10 * 0.05)
    six = fractal_noise(noise, 10, 10, 6, 0.05)
    # amplitudes 1 + 1/2 + ... + 1/32
    assert 0.0 <= six <= 1.96875


def test_normalize_field():
    field = [[-1.0, 0.0, 1.0], [0.5, -0.5, 2.0]]
    normalize_field(field)
    values = _flatten(field)
    assert min(values) == pytest.approx(0.0)
    assert max(values) == pytest.approx(1.0)
    assert field[0][1] == pytest.approx(1.0 / 3.0)


def test_normalize_flat_field_is_left_alone():
    field = [[5.0, 5.0], [5.0, 5.0]]
    normalize_field(field)
    assert field == [[5.0, 5.0], [5.0, 5.0]]


def test_edge_falloff():
    assert edge_falloff(24, 16, 48, 32) == pytest.approx(1.0)
    assert edge_falloff(0, 16, 48, 32) == pytest.approx(0.0)
    assert edge_falloff(24, 0, 48, 32) == pytest.approx(0.0)
    assert edge_falloff(0, 0, 48, 32) == 0.0
    assert 0.0 < edge_falloff(12, 8, 48, 32) < 1.0


@pytest.fixture(scope="module")
def fields():
    return synthesize_fields(48, 32, SeededRandom(11))


def test_field_shapes_and_ranges(fields):
    for field in fields:
        assert len(field) == 48
        assert all(len(column) == 32 for column in field)
        for v in _flatten(field):
            assert 0.0 <= v <= 1.0


def test_elevation_is_lowest_at_the_border(fields):
    elevation, _, _ = fields
    assert min(_flatten(elevation)) == pytest.approx(0.0)
    assert max(_flatten(elevation)) == pytest.approx(1.0)
    for y in range(32):
        assert elevation[0][y] == pytest.approx(0.0)
    for x in range(48):
        assert elevation[x][0] == pytest.approx(0.0)
    center = elevation[24][16]
    assert center > 0.1, f"Center elevation should rise above the border, got {center}"


def test_temperature_follows_latitude(fields):
    _, temperature, _ = fields
    for x in range(48):
        assert temperature[x][0] <= 0.2 + 1e-9
        assert temperature[x][16] >= 0.8 - 1e-9


def test_moisture_is_normalized(fields):
    _, _, moisture = fields
    values = _flatten(moisture)
    assert min(values) == pytest.approx(0.0)
    assert max(values) == pytest.approx(1.0)


def test_each_field_gets_its_own_noise_seed():
    calls = []

    class RecordingRandom:
        def derive_seed(self):
            calls.append(len(calls))
            return 1000 + len(calls)

        def random(self):
            raise AssertionError("field synthesis must not draw floats")

    synthesize_fields(4, 4, RecordingRandom())
    assert len(calls) == 3


def test_same_seed_same_fields():
    a = synthesize_fields(20, 12, SeededRandom(3))
    b = synthesize_fields(20, 12, SeededRandom(3))
    assert a == b
