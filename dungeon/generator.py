"""Procedural dungeon layout generation: rooms, wall detail, doors and filler."""

from __future__ import annotations

import logging
import random
import time
from typing import List, NamedTuple, Optional, Tuple

from dungeon.config import MapGenConfig
from dungeon.details import apply_wall_details
from dungeon.doors import Position, place_doors
from dungeon.filler import apply_default_fillers
from dungeon.rooms import Room, generate_rooms
from dungeon.tiles import TileGrid


class GenerationResult(NamedTuple):
    grid: TileGrid
    rooms: List[Room]
    guard_doors: List[Position]
    exit_door: Position
    seed: int


def wall_clock_seed() -> int:
    return time.time_ns() & 0x7FFFFFFF


class MapGenerator:
    """Turns a grid size and a seed into a finished layout.

    Holds configuration only; every ``generate`` call works on its own grid
    and random stream, so results for the same seed are identical.
    """

    def __init__(self, size: Tuple[int, int], config: Optional[MapGenConfig] = None) -> None:
        self.size = size
        self.config = config or MapGenConfig()
        self.config.validate(size)

    def generate(self, seed: Optional[int] = None) -> GenerationResult:
        if seed is None:
            seed = wall_clock_seed()
        rng = random.Random(seed)
        config = self.config
        logging.debug("Generating %dx%d layout with seed %d", self.size[0], self.size[1], seed)

        grid, rooms = generate_rooms(self.size, config, rng)
        apply_wall_details(grid, config.detail_max_passes)
        guard_doors, exit_door = place_doors(grid, len(rooms), config, rng)
        apply_default_fillers(grid, config.filler_probability, rng)

        return GenerationResult(grid, rooms, guard_doors, exit_door, seed)


def generate(
    size: Tuple[int, int],
    config: Optional[MapGenConfig] = None,
    seed: Optional[int] = None,
) -> GenerationResult:
    return MapGenerator(size, config).generate(seed)
