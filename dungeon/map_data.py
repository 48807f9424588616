"""Helpers for building a playable level, its solid-tile cache, and preview surfaces."""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

import pygame

from config import settings, tuning
from dungeon.config import MapGenConfig
from dungeon.errors import InsufficientDoorCandidatesError, RoomPlacementError
from dungeon.generator import GenerationResult, MapGenerator, wall_clock_seed
from dungeon.tiles import TileGrid


class Level(NamedTuple):
    result: GenerationResult
    solid_cells: set[tuple[int, int]]


def build_solid_cache(grid: TileGrid) -> set[tuple[int, int]]:
    """Cells that get a static collider, one per solid tile."""
    return {
        (x, y)
        for x, y, tile in grid.cells()
        if tile is not None and tile.id in tuning.SOLID_TILE_IDS
    }


def build_level(
    seed: Optional[int] = None,
    size: tuple[int, int] = (settings.MAP_WIDTH, settings.MAP_HEIGHT),
    config: Optional[MapGenConfig] = None,
    regen_attempts: int = tuning.LEVEL_REGEN_ATTEMPTS,
) -> Level:
    """Generate a level, moving on to the next seed when a layout cannot host its doors."""
    generator = MapGenerator(size, config)
    if seed is None:
        seed = wall_clock_seed()
    last_error: Exception | None = None
    for attempt in range(regen_attempts):
        try:
            result = generator.generate(seed + attempt)
        except (InsufficientDoorCandidatesError, RoomPlacementError) as exc:
            logging.warning("Seed %d rejected: %s", seed + attempt, exc)
            last_error = exc
            continue
        logging.info(
            "Built level with seed %d: %d rooms, %d guard doors",
            result.seed,
            len(result.rooms),
            len(result.guard_doors),
        )
        return Level(result, build_solid_cache(result.grid))
    raise last_error or ValueError("regen_attempts must be at least 1")


def tile_color(tile_id: Optional[int]) -> tuple[int, int, int]:
    colors = settings.PREVIEW_COLORS
    if tile_id is None:
        return colors["empty"]
    if tile_id in tuning.GROUND_TILE_IDS:
        return colors["ground"]
    if tile_id in tuning.FACADE_TILE_IDS:
        return colors["facade"]
    if tile_id in (tuning.DOOR_LEFT_OPEN_TILE_ID, tuning.DOOR_RIGHT_OPEN_TILE_ID):
        return colors["door_open"]
    if tile_id in (tuning.DOOR_LEFT_CLOSED_TILE_ID, tuning.DOOR_RIGHT_CLOSED_TILE_ID):
        return colors["door_closed"]
    if tile_id in tuning.WALL_TILE_IDS:
        return colors["wall"]
    return colors["exit"]


def build_preview_surface(grid: TileGrid, scale: int = settings.PREVIEW_SCALE) -> pygame.Surface:
    """Pre-render a flat-colored overview of the grid, ``scale`` pixels per tile."""
    surface = pygame.Surface((grid.width * scale, grid.height * scale))
    for x, y, tile in grid.cells():
        color = tile_color(None if tile is None else tile.id)
        surface.fill(color, pygame.Rect(x * scale, y * scale, scale, scale))
    return surface
