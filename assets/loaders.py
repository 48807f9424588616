"""Asset loading helpers (tileset sheet)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pygame

from assets.paths import TILESET_TEXTURE_PATH
from config import tuning
from dungeon.map_data import tile_color


def _fallback_tiles(tile_ids: Iterable[int], size: int) -> dict[int, pygame.Surface]:
    tiles = {}
    for tile_id in tile_ids:
        surface = pygame.Surface((size, size))
        surface.fill(tile_color(tile_id))
        tiles[tile_id] = surface
    return tiles


def load_tileset(path: str | Path | None = None, tile_size: int = tuning.TILESET_TILE_SIZE) -> dict[int, pygame.Surface]:
    """Slice the packed tileset into one surface per tile id, falling back to flat colors if missing."""
    target_path = Path(path or TILESET_TEXTURE_PATH)
    try:
        sheet = pygame.image.load(target_path.as_posix())
    except FileNotFoundError:
        logging.warning("Tileset not found at %s, using flat colored tiles", target_path)
        return _fallback_tiles(range(_sheet_capacity()), tile_size)
    if pygame.display.get_surface() is not None:
        sheet = sheet.convert_alpha()

    columns = sheet.get_width() // tile_size
    rows = sheet.get_height() // tile_size
    tiles = {}
    for row in range(rows):
        for col in range(columns):
            rect = pygame.Rect(col * tile_size, row * tile_size, tile_size, tile_size)
            tiles[row * columns + col] = sheet.subsurface(rect).copy()
    if columns != tuning.TILESET_COLUMNS:
        logging.warning(
            "Tileset at %s has %d columns, tile ids assume %d", target_path, columns, tuning.TILESET_COLUMNS
        )
    return tiles


def _sheet_capacity() -> int:
    ids = (
        tuning.WALL_TILE_IDS
        | tuning.GROUND_TILE_IDS
        | tuning.FACADE_TILE_IDS
        | tuning.DOOR_TILE_IDS
        | {tuning.MONSTER_PIPE_CLOSED_TILE_ID, tuning.STAIRS_LEFT_TILE_ID, tuning.STAIRS_RIGHT_TILE_ID, tuning.POOL_EMPTY_TILE_ID}
    )
    return max(ids) + 1
