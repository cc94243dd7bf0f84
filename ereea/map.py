"""The planet map: terrain, resources and the science base."""

from __future__ import annotations

import random
from typing import Optional

from .perlin import Perlin
from .tile import MapTile, Resource, ResourceType, Tile, TileKind

TERRAIN_SCALE = 6.0
RESOURCE_SCALE = 2.0
RESOURCE_PROBABILITY = 0.1
THRESHOLD = 0.3
RESOURCE_SIZE = 10


class Map:
    """A rectangular grid of tiles generated from a seed."""

    def __init__(
        self,
        width: int,
        height: int,
        seed: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width < 3 or height < 3:
            raise ValueError("a map needs at least 3x3 tiles to hold a base")
        self.width = width
        self.height = height
        self.seed = seed
        self.base_position: tuple[int, int] = (0, 0)
        self.grid: list[MapTile] = [
            MapTile(x, y, Tile.empty()) for y in range(height) for x in range(width)
        ]
        rng = rng if rng is not None else random.Random()
        noise = Perlin(seed)
        self._generate_terrain(noise)
        self._place_resources(noise, rng)
        self._place_science_base(rng)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return y * self.width + x

    def _positions(self):
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def get(self, x: int, y: int) -> MapTile:
        return self.grid[self._index(x, y)]

    def set(self, map_tile: MapTile) -> None:
        self.grid[self._index(map_tile.x, map_tile.y)] = map_tile

    def _generate_terrain(self, noise: Perlin) -> None:
        for x, y in self._positions():
            if noise.get(x / TERRAIN_SCALE, y / TERRAIN_SCALE) > THRESHOLD:
                self.set(MapTile(x, y, Tile.terrain()))

    def _place_resources(self, noise: Perlin, rng: random.Random) -> None:
        for x, y in self._positions():
            if self.get(x, y).tile.kind is not TileKind.EMPTY:
                continue
            if noise.get(x / RESOURCE_SCALE, y / RESOURCE_SCALE) <= THRESHOLD:
                continue
            if rng.random() < RESOURCE_PROBABILITY:
                resource_type = ResourceType.ENERGY
            elif rng.random() < RESOURCE_PROBABILITY:
                resource_type = ResourceType.MINERAL
            else:
                continue
            self.set(MapTile(x, y, Tile.of_resource(Resource(RESOURCE_SIZE, resource_type))))

    def _is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y).tile.kind is TileKind.EMPTY

    def _place_science_base(self, rng: random.Random) -> None:
        candidates = [
            (x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if all(
                self._is_empty(cx, cy)
                for cx, cy in ((x, y), (x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
            )
        ]
        if not candidates:
            raise ValueError("no room on the map for the science base")
        x, y = rng.choice(candidates)
        self.set(MapTile(x, y, Tile.base()))
        self.base_position = (x, y)

    def is_valid(self, x: int, y: int) -> bool:
        """True when (x, y) lies on the map and is free to move onto."""
        return 0 <= x < self.width and 0 <= y < self.height and self._is_empty(x, y)