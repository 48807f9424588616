"""Guard door placement on detailed facades and exit door promotion."""

from __future__ import annotations

import logging
import random
from typing import List, Set, Tuple

from config import tuning
from dungeon.config import MapGenConfig
from dungeon.errors import InsufficientDoorCandidatesError
from dungeon.tiles import TileGrid

Position = Tuple[int, int]

DOOR_WIDTH = tuning.DOOR_WIDTH

# Exit footprint, top row then the row beneath it
EXIT_DOOR_PATTERN = (
    (
        tuning.MONSTER_PIPE_CLOSED_TILE_ID,
        tuning.DOOR_LEFT_CLOSED_TILE_ID,
        tuning.DOOR_RIGHT_CLOSED_TILE_ID,
        tuning.MONSTER_PIPE_CLOSED_TILE_ID,
    ),
    (
        tuning.POOL_EMPTY_TILE_ID,
        tuning.STAIRS_LEFT_TILE_ID,
        tuning.STAIRS_RIGHT_TILE_ID,
        tuning.POOL_EMPTY_TILE_ID,
    ),
)


def is_door_candidate(grid: TileGrid, x: int, y: int, clearance: int) -> bool:
    """True if (x, y) starts a 4-wide run of center facade with ground beneath it.

    The checked region is ``DOOR_WIDTH`` columns by ``clearance`` rows with the
    facade run as its top row; the remaining rows must be plain ground.
    """
    if x < 0 or y < 0 or x + DOOR_WIDTH > grid.width or y + clearance > grid.height:
        return False
    for cx in range(x, x + DOOR_WIDTH):
        if grid.tile_id(cx, y) != tuning.FACADE_CENTER_TILE_ID:
            return False
        for cy in range(y + 1, y + clearance):
            if grid.tile_id(cx, cy) != tuning.GROUND_01_TILE_ID:
                return False
    return True


def find_door_candidates(grid: TileGrid, clearance: int) -> List[Position]:
    return [
        (x, y)
        for x in range(grid.width)
        for y in range(grid.height)
        if is_door_candidate(grid, x, y, clearance)
    ]


def door_footprint(pos: Position) -> Set[Position]:
    x, y = pos
    return {(x + dx, y) for dx in range(DOOR_WIDTH)}


def _footprint_free(pos: Position, doors: List[Position]) -> bool:
    footprint = door_footprint(pos)
    return all(footprint.isdisjoint(door_footprint(door)) for door in doors)


def place_guard_doors(
    grid: TileGrid, count: int, clearance: int, rng: random.Random
) -> List[Position]:
    """Place up to ``count`` open doors at random candidates; may return fewer."""
    candidates = find_door_candidates(grid, clearance)
    doors: List[Position] = []
    while len(doors) < count and candidates:
        pos = candidates.pop(rng.randrange(len(candidates)))
        # Placed doors rewrite facade cells, so earlier candidates can go stale.
        if not is_door_candidate(grid, pos[0], pos[1], clearance):
            continue
        if not _footprint_free(pos, doors):
            continue
        x, y = pos
        grid.set(x + 1, y, tuning.DOOR_LEFT_OPEN_TILE_ID)
        grid.set(x + 2, y, tuning.DOOR_RIGHT_OPEN_TILE_ID)
        doors.append(pos)
    return doors


def rewrite_exit_door(grid: TileGrid, pos: Position) -> None:
    x, y = pos
    for dy, row in enumerate(EXIT_DOOR_PATTERN):
        for dx, tile_id in enumerate(row):
            grid.set(x + dx, y + dy, tile_id)


def place_doors(
    grid: TileGrid, room_count: int, config: MapGenConfig, rng: random.Random
) -> Tuple[List[Position], Position]:
    """Give every room a door, then promote one of them to the exit.

    Every attempt starts again from the grid as it was on entry. Raises
    InsufficientDoorCandidatesError when all ``config.door_attempts`` fall short.
    """
    if room_count < 1:
        raise ValueError("at least one room is needed to place an exit door")
    pristine = grid.copy()
    doors: List[Position] = []
    for attempt in range(1, config.door_attempts + 1):
        if attempt > 1:
            grid.restore(pristine)
        doors = place_guard_doors(grid, room_count, config.door_clearance, rng)
        if len(doors) == room_count:
            break
        logging.warning(
            "Door placement attempt %d/%d placed %d of %d doors",
            attempt,
            config.door_attempts,
            len(doors),
            room_count,
        )
    else:
        grid.restore(pristine)
        raise InsufficientDoorCandidatesError(room_count, len(doors), config.door_attempts)

    exit_door = doors.pop(rng.randrange(len(doors)))
    rewrite_exit_door(grid, exit_door)
    logging.debug("Placed %d guard doors, exit at %s", len(doors), exit_door)
    return doors, exit_door
