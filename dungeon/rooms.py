"""Room placement and corridor carving on a wall-filled grid."""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, NamedTuple, Optional, Tuple

from config import tuning
from dungeon.config import MapGenConfig
from dungeon.errors import RoomPlacementError
from dungeon.tiles import TileGrid


class Room(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def overlaps(self, other: "Room") -> bool:
        # Edges are inclusive: rooms that touch count as overlapping.
        return (
            self.x <= other.x + other.width
            and self.x + self.width >= other.x
            and self.y <= other.y + other.height
            and self.y + self.height >= other.y
        )

    def cells(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y, self.y + self.height):
            for x in range(self.x, self.x + self.width):
                yield x, y


def carve_room(grid: TileGrid, room: Room, tile_id: int = tuning.GROUND_01_TILE_ID) -> None:
    grid.fill_rect(room.x, room.y, room.width, room.height, tile_id)


def _carve_clamped(grid: TileGrid, x0: int, x1: int, y0: int, y1: int, tile_id: int) -> None:
    """Carve the inclusive box, never touching the outer border."""
    x0 = max(1, x0)
    x1 = min(grid.width - 2, x1)
    y0 = max(1, y0)
    y1 = min(grid.height - 2, y1)
    for y in range(y0, y1 + 1):
        for x in range(x0, x1 + 1):
            grid.set(x, y, tile_id)


def carve_horizontal_corridor(
    grid: TileGrid,
    src_x: int,
    dest_x: int,
    y: int,
    padding: Optional[int] = None,
    tile_id: int = tuning.GROUND_01_TILE_ID,
) -> None:
    if padding is None:
        padding = tuning.HORIZONTAL_CORRIDOR_PADDING
    src_x, dest_x = min(src_x, dest_x), max(src_x, dest_x)
    _carve_clamped(grid, src_x - padding, dest_x + padding, y - padding, y + padding, tile_id)


def carve_vertical_corridor(
    grid: TileGrid,
    x: int,
    src_y: int,
    dest_y: int,
    padding: Optional[int] = None,
    tile_id: int = tuning.GROUND_01_TILE_ID,
) -> None:
    if padding is None:
        padding = tuning.VERTICAL_CORRIDOR_PADDING
    src_y, dest_y = min(src_y, dest_y), max(src_y, dest_y)
    _carve_clamped(grid, x - padding, x + padding, src_y - padding, dest_y + padding, tile_id)


def connect_rooms(grid: TileGrid, previous: Room, room: Room, config: MapGenConfig) -> None:
    """Carve an L corridor: along the previous center row, then down the new center column."""
    last_x, last_y = previous.center
    room_x, room_y = room.center
    carve_horizontal_corridor(grid, last_x, room_x, last_y, config.horizontal_padding)
    carve_vertical_corridor(grid, room_x, last_y, room_y, config.vertical_padding)


def place_rooms(grid: TileGrid, config: MapGenConfig, rng: random.Random) -> List[Room]:
    """Try ``max_room_count`` random rooms; overlapping candidates are dropped, not retried."""
    min_w, min_h = config.min_room_size
    max_w, max_h = config.max_room_size
    rooms: List[Room] = []
    rejected = 0
    for _ in range(config.max_room_count):
        width = min(rng.randint(min_w, max_w), grid.width - 2)
        height = min(rng.randint(min_h, max_h), grid.height - 2)
        x = rng.randint(1, grid.width - width - 1)
        y = rng.randint(1, grid.height - height - 1)
        room = Room(x, y, width, height)
        if any(room.overlaps(prior) for prior in rooms):
            rejected += 1
            continue
        carve_room(grid, room)
        if rooms:
            connect_rooms(grid, rooms[-1], room, config)
        rooms.append(room)
    logging.debug("Placed %d rooms (%d rejected for overlap)", len(rooms), rejected)
    return rooms


def generate_rooms(
    size: Tuple[int, int], config: MapGenConfig, rng: random.Random
) -> Tuple[TileGrid, List[Room]]:
    """Allocate a wall-filled grid and carve rooms plus corridors into it."""
    width, height = size
    grid = TileGrid(width, height, config.tileset)
    grid.fill(tuning.WALL_01_TILE_ID)
    rooms = place_rooms(grid, config, rng)
    if len(rooms) < config.min_room_count:
        raise RoomPlacementError(config.min_room_count, len(rooms))
    return grid, rooms
