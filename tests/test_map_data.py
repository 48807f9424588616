import pytest

from config import settings, tuning
from dungeon.config import MapGenConfig
from dungeon.errors import InsufficientDoorCandidatesError
from dungeon.map_data import Level, build_level, build_preview_surface, build_solid_cache, tile_color
from dungeon.tiles import TileGrid

G = tuning.GROUND_01_TILE_ID
W = tuning.WALL_01_TILE_ID


def test_solid_cache_covers_walls_and_closed_doors():
    grid = TileGrid.from_rows(
        [
            [W, tuning.WALL_UP_TILE_ID, W],
            [tuning.FACADE_CENTER_TILE_ID, G, tuning.DOOR_LEFT_OPEN_TILE_ID],
            [tuning.DOOR_LEFT_CLOSED_TILE_ID, tuning.MONSTER_PIPE_CLOSED_TILE_ID, tuning.STAIRS_LEFT_TILE_ID],
        ]
    )
    assert build_solid_cache(grid) == {(0, 0), (1, 0), (2, 0), (0, 2), (1, 2)}


def test_build_level_matches_its_solid_cache():
    level = build_level(seed=1234, regen_attempts=20)
    assert isinstance(level, Level)
    grid = level.result.grid
    assert (grid.width, grid.height) == (settings.MAP_WIDTH, settings.MAP_HEIGHT)
    assert level.solid_cells == build_solid_cache(grid)
    assert level.result.seed >= 1234


def test_build_level_is_repeatable():
    first = build_level(seed=99, regen_attempts=20)
    second = build_level(seed=99, regen_attempts=20)
    assert first.result.seed == second.result.seed
    assert first.result.grid == second.result.grid


def test_build_level_gives_up_after_its_attempts():
    config = MapGenConfig(
        min_room_size=(5, 5), max_room_size=(5, 5), max_room_count=1, door_clearance=9, door_attempts=1
    )
    with pytest.raises(InsufficientDoorCandidatesError):
        build_level(seed=0, size=(10, 10), config=config, regen_attempts=2)


def test_build_level_needs_an_attempt():
    with pytest.raises(ValueError):
        build_level(seed=0, regen_attempts=0)


def test_tile_colors_by_class():
    colors = settings.PREVIEW_COLORS
    assert tile_color(None) == colors["empty"]
    assert tile_color(tuning.GROUND_03_TILE_ID) == colors["ground"]
    assert tile_color(tuning.WALL_OUTER_DR_ID) == colors["wall"]
    assert tile_color(tuning.FACADE_LEFT_TILE_ID) == colors["facade"]
    assert tile_color(tuning.DOOR_RIGHT_OPEN_TILE_ID) == colors["door_open"]
    assert tile_color(tuning.DOOR_RIGHT_CLOSED_TILE_ID) == colors["door_closed"]
    assert tile_color(tuning.STAIRS_RIGHT_TILE_ID) == colors["exit"]


def test_preview_surface_size_and_colors():
    grid = TileGrid.from_rows([[W, W, W], [W, G, W]])
    surface = build_preview_surface(grid, scale=4)
    assert surface.get_size() == (12, 8)
    assert tuple(surface.get_at((5, 5)))[:3] == settings.PREVIEW_COLORS["ground"]
    assert tuple(surface.get_at((0, 0)))[:3] == settings.PREVIEW_COLORS["wall"]
