from __future__ import annotations

"""Scalar field synthesis with Perlin noise, terrain classification and feature placement."""

import math
from typing import Dict, List, Optional, Tuple

from .features import Feature, can_place_feature
from .rng import _stable_hash
from .settings import MapConfig
from .terrain import Terrain, hill_variant, is_hill

# Type aliases
# field[x][y] holds the value for tile (q=x, r=y)
Field = List[List[float]]

# Elevation: fractal noise shaped by an edge falloff
ELEVATION_OCTAVES = 6
ELEVATION_FREQUENCY = 0.02
# Temperature: latitude gradient plus a little noise
TEMPERATURE_FREQUENCY = 0.05
TEMPERATURE_NOISE_AMPLITUDE = 0.2
# Moisture: fractal noise
MOISTURE_OCTAVES = 4
MOISTURE_FREQUENCY = 0.03

PERSISTENCE = 0.5
LACUNARITY = 2.0

# Below this range a field is treated as flat and left unnormalized
NORMALIZE_EPSILON = 1e-4

# Temperature bands, checked in order: (upper bound, flat biome)
TEMPERATURE_BANDS: Tuple[Tuple[float, Terrain], ...] = (
    (0.15, Terrain.SNOW),
    (0.30, Terrain.TUNDRA),
    (0.50, Terrain.GRASSLAND),
    (0.80, Terrain.PLAINS),
)
HOTTEST_BIOME = Terrain.DESERT

# Terrain that never carries a feature
FEATURELESS_TERRAIN = frozenset(
    {
        Terrain.OCEAN,
        Terrain.COAST,
        Terrain.LAKE,
        Terrain.MOUNTAIN,
        Terrain.SNOW,
        Terrain.SNOW_HILL,
    }
)

OASIS_CHANCE = 0.05
MARSH_CHANCE = 0.2
JUNGLE_CHANCE = 0.5
FOREST_CHANCE = 0.4


# ─────────────────────────────────────────────────────────────────────────────
# == NOISE ==

def _fade(t: float) -> float:
    """Fade function for Perlin noise interpolation."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b by t."""
    return a + t * (b - a)


class PerlinNoise:
    """
    Seeded 2D gradient noise.

    Lattice gradients are unit vectors whose angle comes from a stable hash of
    (ix, iy, seed), so the same seed always yields the same noise surface.
    """

    __slots__ = ("seed", "_gradients")

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._gradients: Dict[Tuple[int, int], Tuple[float, float]] = {}

    def _grad(self, ix: int, iy: int) -> Tuple[float, float]:
        key = (ix, iy)
        grad = self._gradients.get(key)
        if grad is None:
            angle = _stable_hash(ix, iy, self.seed) / 2.0**64 * 2.0 * math.pi
            grad = (math.cos(angle), math.sin(angle))
            self._gradients[key] = grad
        return grad

    def _dot_grid_gradient(self, ix: int, iy: int, x: float, y: float) -> float:
        gx, gy = self._grad(ix, iy)
        return gx * (x - ix) + gy * (y - iy)

    def signed(self, x: float, y: float) -> float:
        """Single-octave noise at (x, y) in [-1, 1]."""
        x0 = math.floor(x)
        y0 = math.floor(y)
        x1 = x0 + 1
        y1 = y0 + 1

        sx = _fade(x - x0)
        sy = _fade(y - y0)

        n00 = self._dot_grid_gradient(x0, y0, x, y)
        n10 = self._dot_grid_gradient(x1, y0, x, y)
        n01 = self._dot_grid_gradient(x0, y1, x, y)
        n11 = self._dot_grid_gradient(x1, y1, x, y)

        ix0 = _lerp(n00, n10, sx)
        ix1 = _lerp(n01, n11, sx)
        # Unit gradients bound the raw value by sqrt(2)/2
        value = _lerp(ix0, ix1, sy) * math.sqrt(2.0)
        return max(-1.0, min(1.0, value))

    def __call__(self, x: float, y: float) -> float:
        """Single-octave noise at (x, y) shifted to [0, 1]."""
        return (self.signed(x, y) + 1.0) / 2.0


def fractal_noise(
    noise: PerlinNoise,
    x: float,
    y: float,
    octaves: int,
    frequency: float,
    persistence: float = PERSISTENCE,
    lacunarity: float = LACUNARITY,
) -> float:
    """
    Sum ``octaves`` layers of [0, 1] noise at (x, y). Each octave doubles the
    frequency and halves the amplitude (with the default lacunarity and
    persistence). The sum is not rescaled.
    """
    total = 0.0
    amplitude = 1.0
    for _ in range(octaves):
        total += noise(x * frequency, y * frequency) * amplitude
        amplitude *= persistence
        frequency *= lacunarity
    return total


# ─────────────────────────────────────────────────────────────────────────────
# == SCALAR FIELDS ==

def _empty_field(width: int, height: int) -> Field:
    return [[0.0] * height for _ in range(width)]


def normalize_field(field: Field) -> None:
    """
    Rescale ``field`` in place to [0, 1] using its min and max.
    A flat field (range below NORMALIZE_EPSILON) is left unchanged.
    """
    values = [v for column in field for v in column]
    if not values:
        return
    lo = min(values)
    hi = max(values)
    span = hi - lo
    if span <= NORMALIZE_EPSILON:
        return
    for column in field:
        for y, v in enumerate(column):
            column[y] = (v - lo) / span


def edge_falloff(x: int, y: int, width: int, height: int) -> float:
    """
    Radial factor that is 1 at the map center and 0 at (and beyond) the edges.
    """
    edge_x = abs(x / width - 0.5) * 2.0
    edge_y = abs(y / height - 0.5) * 2.0
    return 1.0 - min(1.0, math.sqrt(edge_x**2 + edge_y**2))


def elevation_field(width: int, height: int, noise: PerlinNoise) -> Field:
    """Fractal elevation scaled by the edge falloff, normalized to [0, 1]."""
    field = _empty_field(width, height)
    for x in range(width):
        column = field[x]
        for y in range(height):
            h = fractal_noise(noise, x, y, ELEVATION_OCTAVES, ELEVATION_FREQUENCY)
            column[y] = h * edge_falloff(x, y, width, height)
    normalize_field(field)
    return field


def temperature_field(width: int, height: int, noise: PerlinNoise) -> Field:
    """
    Latitude gradient (1 at the middle row, falling to 0 at the top and bottom)
    plus low-frequency noise, clamped to [0, 1].
    """
    field = _empty_field(width, height)
    for x in range(width):
        column = field[x]
        for y in range(height):
            latitude = abs(y / height - 0.5) * 2.0
            variation = (
                noise.signed(x * TEMPERATURE_FREQUENCY, y * TEMPERATURE_FREQUENCY)
                * TEMPERATURE_NOISE_AMPLITUDE
            )
            column[y] = max(0.0, min(1.0, 1.0 - latitude + variation))
    return field


def moisture_field(width: int, height: int, noise: PerlinNoise) -> Field:
    """Fractal moisture normalized to [0, 1]."""
    field = _empty_field(width, height)
    for x in range(width):
        column = field[x]
        for y in range(height):
            column[y] = fractal_noise(noise, x, y, MOISTURE_OCTAVES, MOISTURE_FREQUENCY)
    normalize_field(field)
    return field


def synthesize_fields(width: int, height: int, rng) -> Tuple[Field, Field, Field]:
    """
    Build the elevation, temperature and moisture fields for one run.

    Each field gets its own noise function seeded from ``rng`` (three draws,
    in that order), so the fields are uncorrelated apart from latitude.
    """
    elevation_noise = PerlinNoise(rng.derive_seed())
    temperature_noise = PerlinNoise(rng.derive_seed())
    moisture_noise = PerlinNoise(rng.derive_seed())
    return (
        elevation_field(width, height, elevation_noise),
        temperature_field(width, height, temperature_noise),
        moisture_field(width, height, moisture_noise),
    )


# ─────────────────────────────────────────────────────────────────────────────
# == TERRAIN & FEATURES ==

def classify_terrain(elevation: float, temperature: float, config: MapConfig) -> Terrain:
    """
    Map an (elevation, temperature) pair to a terrain.

    Order of checks:
      1. elevation < ocean * 0.6 → ocean; elevation < ocean → coast
      2. elevation > mountain → mountain
      3. temperature band picks the biome; elevation > hill picks its hill variant
    """
    if elevation < config.ocean_threshold:
        if elevation < config.ocean_threshold * 0.6:
            return Terrain.OCEAN
        return Terrain.COAST
    if elevation > config.mountain_threshold:
        return Terrain.MOUNTAIN

    hill = elevation > config.hill_threshold
    biome = HOTTEST_BIOME
    for upper, band_biome in TEMPERATURE_BANDS:
        if temperature < upper:
            biome = band_biome
            break
    return hill_variant(biome) if hill else biome


def place_feature(rng, terrain: Terrain, temperature: float, moisture: float) -> Optional[Feature]:
    """
    Roll for at most one feature on a tile.

    Rules are tried as oasis, marsh, jungle, forest. A rule draws from ``rng``
    only when its gate passes. Marsh, jungle and forest roll before the
    valid-terrain check, so a roll is spent even where the feature cannot grow.
    """
    if terrain in FEATURELESS_TERRAIN:
        return None

    if terrain is Terrain.DESERT and moisture > 0.4 and rng.random() < OASIS_CHANCE:
        return Feature.OASIS

    if (
        not is_hill(terrain)
        and moisture > 0.7
        and rng.random() < MARSH_CHANCE
        and can_place_feature(Feature.MARSH, terrain)
    ):
        return Feature.MARSH

    if (
        temperature > 0.7
        and moisture > 0.6
        and rng.random() < JUNGLE_CHANCE
        and can_place_feature(Feature.JUNGLE, terrain)
    ):
        return Feature.JUNGLE

    if (
        temperature < 0.6
        and moisture > 0.5
        and rng.random() < FOREST_CHANCE
        and can_place_feature(Feature.FOREST, terrain)
    ):
        return Feature.FOREST

    return None


__all__ = [
    "FEATURELESS_TERRAIN",
    "Field",
    "PerlinNoise",
    "TEMPERATURE_BANDS",
    "classify_terrain",
    "edge_falloff",
    "elevation_field",
    "fractal_noise",
    "moisture_field",
    "normalize_field",
    "place_feature",
    "synthesize_fields",
    "temperature_field",
]
