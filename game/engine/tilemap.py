"""Randomly seeded tile grid the world is built on."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Tuple


class TileType(IntEnum):
    GRASS = 0
    STONE = 1
    WATER = 2
    TREE = 3


@dataclass(frozen=True)
class TileDefinition:
    """Static description of a single tile type."""

    template: str
    solid: bool = False


TILESET: dict[TileType, TileDefinition] = {
    TileType.GRASS: TileDefinition("grass", solid=False),
    TileType.STONE: TileDefinition("stone", solid=False),
    TileType.WATER: TileDefinition("water", solid=True),
    TileType.TREE: TileDefinition("tree", solid=True),
}


class Grid:
    """Fixed-size 2D array of tile types indexed as ``[y][x]``."""

    def __init__(self, width: int, height: int, fill: TileType = TileType.GRASS) -> None:
        if width < 3 or height < 3:
            raise ValueError("Grid must be at least 3x3 to have an interior")
        self.width = width
        self.height = height
        self._cells: List[List[TileType]] = [[fill for _ in range(width)] for _ in range(height)]

    # ---------------------------------------------------------------- queries
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Optional[TileType]:
        if not self.in_bounds(x, y):
            return None
        return self._cells[y][x]

    def definition_at(self, x: int, y: int) -> Optional[TileDefinition]:
        tile = self.tile_at(x, y)
        return TILESET[tile] if tile is not None else None

    def is_solid(self, x: int, y: int) -> bool:
        definition = self.definition_at(x, y)
        return definition is None or definition.solid

    def is_border(self, x: int, y: int) -> bool:
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def pixel_size(self, tile_size: int) -> Tuple[int, int]:
        return self.width * tile_size, self.height * tile_size

    def cells(self) -> Iterator[Tuple[int, int, TileType]]:
        for y, row in enumerate(self._cells):
            for x, tile in enumerate(row):
                yield x, y, tile

    # ------------------------------------------------------------- generation
    def set_tile(self, x: int, y: int, tile: TileType) -> None:
        self._cells[y][x] = tile

    def clear(self, coords: Iterable[Tuple[int, int]]) -> None:
        """Force every listed ``(row, col)`` to grass.

        Out-of-range entries are skipped and the water border is left intact.
        """

        for row, col in coords:
            if self.in_bounds(col, row) and not self.is_border(col, row):
                self._cells[row][col] = TileType.GRASS


def generate_grid(
    width: int,
    height: int,
    seed: int | None = None,
    clearings: Iterable[Tuple[int, int]] = (),
    tree_chance: float = 0.1,
    stone_chance: float = 0.05,
) -> Grid:
    """Build a water-bordered grid with scattered trees and stones.

    Stone is rolled independently after the tree roll, so it only lands on
    cells the tree roll skipped. ``clearings`` are applied last and always win.
    """

    rng = random.Random(seed)
    grid = Grid(width, height)
    for y in range(height):
        for x in range(width):
            if grid.is_border(x, y):
                tile = TileType.WATER
            elif rng.random() < tree_chance:
                tile = TileType.TREE
            elif rng.random() < stone_chance:
                tile = TileType.STONE
            else:
                tile = TileType.GRASS
            grid.set_tile(x, y, tile)

    grid.clear(clearings)
    return grid
