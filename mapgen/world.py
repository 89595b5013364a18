from __future__ import annotations

"""
world.py

Map generation orchestrator and a coordinate-keyed view of the generated map.

- `MapGenerator` owns one deterministic random source per run, synthesizes the
  elevation / temperature / moisture fields once, then classifies every tile
  in q-major, r-minor order (terrain, then feature, then resource).
- `World` wraps one generation run and answers lookups by (q, r).
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .generation import classify_terrain, place_feature, synthesize_fields
from .hex import Coordinate, GeneratedTile, TilePosition
from .resources import place_resource
from .rng import SeededRandom
from .settings import MapConfig
from .terrain import Terrain, is_water
from .yields import TileYields, calculate_improved_yields, calculate_yields


class InvalidCoordinateError(ValueError):
    """Raised when a provided coordinate is not a valid (int, int) pair."""


def _check_coordinate(q: Any, r: Any) -> None:
    for value in (q, r):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidCoordinateError(f"Coordinate must be a pair of ints, got ({q!r}, {r!r})")


# ─────────────────────────────────────────────────────────────────────────────
# == GENERATOR ==

class MapGenerator:
    """
    Turns a MapConfig into an ordered list of GeneratedTile.

    Each call to ``generate`` builds a fresh SeededRandom from the config seed,
    so repeated calls with the same config return identical tiles and no
    random state leaks between runs. ``rng`` may be injected to drive the
    run from another source (anything with ``random()`` and ``derive_seed()``).
    """

    def __init__(self, config: MapConfig, rng: Optional[Any] = None) -> None:
        self.config = config
        self._rng = rng

    def generate(self) -> List[GeneratedTile]:
        config = self.config
        width, height = config.dimensions
        rng = self._rng if self._rng is not None else SeededRandom(config.seed)

        logging.debug(f"Generating {width}x{height} map with seed {config.seed}")
        elevation, temperature, moisture = synthesize_fields(width, height, rng)

        tiles: List[GeneratedTile] = []
        for q in range(width):
            for r in range(height):
                terrain = classify_terrain(elevation[q][r], temperature[q][r], config)
                feature = place_feature(rng, terrain, temperature[q][r], moisture[q][r])
                resource = place_resource(rng, terrain, feature)
                tiles.append(GeneratedTile(TilePosition(q, r), terrain, feature, resource))

        _log_summary(tiles, config)
        return tiles


def generate(config: MapConfig) -> List[GeneratedTile]:
    """Generate every tile for ``config``; see MapGenerator."""
    return MapGenerator(config).generate()


def _land_fraction(tiles: Iterable[GeneratedTile]) -> float:
    total = 0
    land = 0
    for tile in tiles:
        total += 1
        if not is_water(tile.terrain):
            land += 1
    return land / total if total else 0.0


def _log_summary(tiles: List[GeneratedTile], config: MapConfig) -> None:
    land = _land_fraction(tiles)
    resources = sum(1 for t in tiles if t.resource is not None)
    features = sum(1 for t in tiles if t.feature is not None)
    logging.info(
        f"Generated {len(tiles)} tiles (seed {config.seed}): land {land:.0%} "
        f"(target {config.land_coverage:.0%}), {features} features, {resources} resources"
    )


# ─────────────────────────────────────────────────────────────────────────────
# == WORLD VIEW ==

class World:
    """
    Generated map indexed by coordinate.

    Lookups outside the grid return ``None`` rather than raising; malformed
    coordinates raise InvalidCoordinateError.
    """

    __slots__ = ("config", "_tiles", "_index")

    def __init__(
        self,
        config: Optional[MapConfig] = None,
        *,
        tiles: Optional[List[GeneratedTile]] = None,
    ) -> None:
        """
        Args:
            config (MapConfig, optional): Generation settings. Defaults to MapConfig()
                when the map is generated here; required when ``tiles`` is given.
            tiles (list, optional): Pre-generated tiles; when omitted the map is
                generated from ``config``.
        """
        if tiles is not None and config is None:
            raise ValueError("config is required when passing pre-generated tiles")
        self.config: MapConfig = config if config is not None else MapConfig()
        self._tiles: List[GeneratedTile] = tiles if tiles is not None else generate(self.config)
        self._index: Dict[Coordinate, GeneratedTile] = {}
        for tile in self._tiles:
            if tile.coord in self._index:
                raise ValueError(f"Duplicate tile at {tile.coord}")
            self._index[tile.coord] = tile

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[GeneratedTile]:
        return iter(self._tiles)

    def __contains__(self, coord: Coordinate) -> bool:
        if not isinstance(coord, tuple) or len(coord) != 2:
            raise InvalidCoordinateError(f"Coordinate must be a (q, r) pair, got {coord!r}")
        q, r = coord
        _check_coordinate(q, r)
        return (q, r) in self._index

    def get(self, q: int, r: int) -> Optional[GeneratedTile]:
        """
        Retrieve the tile at (q, r), or None if no such coordinate was generated.

        Raises:
            InvalidCoordinateError: if q or r is not an int.
        """
        _check_coordinate(q, r)
        return self._index.get((q, r))

    def all_tiles(self) -> List[GeneratedTile]:
        """All tiles in generation order (q outer, r inner)."""
        return list(self._tiles)

    def yields_at(self, q: int, r: int, *, improved: bool = False) -> Optional[TileYields]:
        """Yields of the tile at (q, r), or None if the coordinate is unknown."""
        tile = self.get(q, r)
        if tile is None:
            return None
        calc = calculate_improved_yields if improved else calculate_yields
        return calc(tile.terrain, tile.feature, tile.resource)

    def terrain_counts(self) -> Dict[Terrain, int]:
        return dict(Counter(tile.terrain for tile in self._tiles))

    def land_fraction(self) -> float:
        """Share of tiles that are not water."""
        return _land_fraction(self._tiles)

    def __repr__(self) -> str:
        return f"World({self.width}x{self.height}, seed={self.config.seed}, tiles={len(self)})"


__all__ = ["InvalidCoordinateError", "MapGenerator", "World", "generate"]
