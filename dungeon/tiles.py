"""Tile grid storage shared by every generation stage."""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Tuple

from config import tuning


class Tile(NamedTuple):
    id: int
    tileset: str = tuning.TILESET_MAP_ID


class TileGrid:
    """Row-major ``width x height`` array of tiles; ``None`` marks an empty cell."""

    def __init__(self, width: int, height: int, tileset: str = tuning.TILESET_MAP_ID) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.tileset = tileset
        self.data: List[Optional[Tile]] = [None] * (width * height)

    @classmethod
    def from_rows(cls, rows: List[List[int]], tileset: str = tuning.TILESET_MAP_ID) -> "TileGrid":
        grid = cls(len(rows[0]), len(rows), tileset)
        for y, row in enumerate(rows):
            if len(row) != grid.width:
                raise ValueError("all rows must have the same width")
            for x, tile_id in enumerate(row):
                grid.set(x, y, tile_id)
        return grid

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def get(self, x: int, y: int) -> Optional[Tile]:
        return self.data[self.index(x, y)]

    def tile_id(self, x: int, y: int) -> Optional[int]:
        tile = self.data[self.index(x, y)]
        return None if tile is None else tile.id

    def set(self, x: int, y: int, tile_id: int) -> None:
        self.data[self.index(x, y)] = Tile(tile_id, self.tileset)

    def fill(self, tile_id: int) -> None:
        tile = Tile(tile_id, self.tileset)
        self.data = [tile] * (self.width * self.height)

    def fill_rect(self, x: int, y: int, width: int, height: int, tile_id: int) -> None:
        tile = Tile(tile_id, self.tileset)
        for py in range(y, y + height):
            for px in range(x, x + width):
                self.data[self.index(px, py)] = tile

    def copy(self) -> "TileGrid":
        clone = TileGrid(self.width, self.height, self.tileset)
        clone.data = list(self.data)
        return clone

    def restore(self, other: "TileGrid") -> None:
        """Overwrite this grid's cells with ``other``'s (same size)."""
        if (other.width, other.height) != (self.width, self.height):
            raise ValueError("cannot restore from a grid of a different size")
        self.data = list(other.data)

    def cells(self) -> Iterator[Tuple[int, int, Optional[Tile]]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.data[y * self.width + x]

    def count(self, tile_id: int) -> int:
        return sum(1 for tile in self.data if tile is not None and tile.id == tile_id)

    def snapshot(self) -> List[List[Optional[int]]]:
        """Tile ids as nested rows, convenient for comparisons and dumps."""
        return [
            [self.tile_id(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return (self.width, self.height, self.data) == (other.width, other.height, other.data)

    def __repr__(self) -> str:
        return f"TileGrid({self.width}x{self.height}, tileset={self.tileset!r})"
