import random

from config import tuning
from dungeon.filler import apply_default_fillers, apply_filler
from dungeon.tiles import TileGrid

G = tuning.GROUND_01_TILE_ID
W = tuning.WALL_01_TILE_ID
F = tuning.FACADE_CENTER_TILE_ID


def wall_grid(width=5, height=5):
    grid = TileGrid(width, height)
    grid.fill(W)
    return grid


def test_zero_probability_changes_nothing():
    grid = wall_grid()
    before = grid.copy()
    assert apply_filler(grid, W, tuning.WALL_02_TILE_ID, 0.0, random.Random(0)) == 0
    assert grid == before


def test_full_probability_swaps_interior_only():
    grid = wall_grid()
    count = apply_filler(grid, W, tuning.WALL_02_TILE_ID, 1.0, random.Random(0))
    assert count == 9
    for x, y, tile in grid.cells():
        expected = W if grid.is_border(x, y) else tuning.WALL_02_TILE_ID
        assert tile.id == expected


def test_only_source_tiles_are_touched():
    grid = wall_grid()
    grid.set(2, 2, G)
    apply_filler(grid, W, tuning.WALL_03_TILE_ID, 1.0, random.Random(0))
    assert grid.tile_id(2, 2) == G
    assert grid.count(tuning.WALL_03_TILE_ID) == 8


def test_default_fillers_full_probability():
    grid = wall_grid(6, 5)
    grid.fill_rect(1, 2, 4, 2, G)
    grid.fill_rect(1, 1, 4, 1, F)
    count = apply_default_fillers(grid, 1.0, random.Random(0))
    # interior: 4 facade, 8 ground, no wall left in the interior
    assert count == 12
    assert grid.count(F) == 0
    assert grid.count(tuning.FACADE_CENTER_02_TILE_ID) == 4
    assert grid.count(tuning.GROUND_02_TILE_ID) == 8
    assert grid.count(tuning.GROUND_03_TILE_ID) == 0


def test_facade_variation_is_boosted():
    grid = wall_grid(8, 4)
    grid.fill_rect(1, 1, 6, 1, F)
    grid.fill_rect(1, 2, 6, 1, G)
    apply_default_fillers(grid, 0.1, random.Random(3))
    assert grid.count(F) == 0
    assert grid.count(tuning.FACADE_CENTER_02_TILE_ID) == 6


def test_filler_is_deterministic_per_seed():
    grid_a, grid_b = wall_grid(20, 20), wall_grid(20, 20)
    apply_default_fillers(grid_a, 0.3, random.Random(9))
    apply_default_fillers(grid_b, 0.3, random.Random(9))
    assert grid_a == grid_b
