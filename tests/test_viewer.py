import pygame
import pytest

import main
from config import settings
from game_core.game import Viewer


@pytest.fixture
def viewer(headless_pygame):
    return Viewer(seed=5)


def test_viewer_loads_a_level(viewer):
    grid = viewer.level.result.grid
    assert viewer.map_surface.get_size() == (grid.width * settings.TILE_PIXELS, grid.height * settings.TILE_PIXELS)
    assert viewer.spawns.player is not None
    assert len(viewer.spawns.guards) == len(viewer.level.result.rooms) - 1
    viewer.draw()


def test_close_key_traps_every_guard_and_opens_exit(viewer):
    guards = len(viewer.doors.guard_doors)
    assert viewer.handle_key(pygame.K_c)
    assert viewer.doors.trapped == guards
    assert all(not door.is_open for door in viewer.doors.guard_doors)
    assert viewer.doors.exit_door.is_open


def test_open_key_opens_exit(viewer):
    assert viewer.handle_key(pygame.K_o)
    assert viewer.doors.exit_door.is_open


def test_regenerate_key_builds_a_new_level(viewer):
    before = viewer.level
    assert viewer.handle_key(pygame.K_r)
    assert viewer.level is not before


def test_escape_quits(viewer):
    assert not viewer.handle_key(pygame.K_ESCAPE)


def test_cli_arguments():
    args = main.parse_args(["--seed", "12", "--width", "40", "--height", "30"])
    assert (args.seed, args.width, args.height) == (12, 40, 30)
    defaults = main.parse_args([])
    assert defaults.seed is None
    assert (defaults.width, defaults.height) == (settings.MAP_WIDTH, settings.MAP_HEIGHT)
