"""Cosmetic tile variation."""

from __future__ import annotations

import random

from config import tuning
from dungeon.tiles import TileGrid


def apply_filler(
    grid: TileGrid, src_tile: int, dst_tile: int, probability: float, rng: random.Random
) -> int:
    """Swap interior ``src_tile`` cells for ``dst_tile`` with the given probability each."""
    count = 0
    for x in range(1, grid.width - 1):
        for y in range(1, grid.height - 1):
            if grid.tile_id(x, y) != src_tile:
                continue
            if rng.random() >= probability:
                continue
            grid.set(x, y, dst_tile)
            count += 1
    return count


def apply_default_fillers(grid: TileGrid, probability: float, rng: random.Random) -> int:
    facade_probability = min(1.0, probability * tuning.FACADE_FILLER_MULTIPLIER)
    passes = (
        (tuning.WALL_01_TILE_ID, tuning.WALL_02_TILE_ID, probability),
        (tuning.WALL_01_TILE_ID, tuning.WALL_03_TILE_ID, probability),
        (tuning.GROUND_01_TILE_ID, tuning.GROUND_02_TILE_ID, probability),
        (tuning.GROUND_01_TILE_ID, tuning.GROUND_03_TILE_ID, probability),
        (tuning.FACADE_CENTER_TILE_ID, tuning.FACADE_CENTER_02_TILE_ID, facade_probability),
    )
    return sum(apply_filler(grid, src, dst, prob, rng) for src, dst, prob in passes)
