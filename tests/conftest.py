import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from dungeon.config import MapGenConfig
from dungeon.errors import InsufficientDoorCandidatesError, RoomPlacementError
from dungeon.generator import MapGenerator

# One 5x5 room in a 10x10 grid, no filler: every stage is deterministic enough to assert on
SINGLE_ROOM_CONFIG = MapGenConfig(
    min_room_size=(5, 5),
    max_room_size=(5, 5),
    max_room_count=1,
    filler_probability=0.0,
)


@pytest.fixture
def single_room_config():
    return SINGLE_ROOM_CONFIG


@pytest.fixture
def generated_results():
    """Successful default-sized layouts for a spread of seeds."""

    def _collect(count=5, size=(64, 48), config=None, seeds=range(200)):
        generator = MapGenerator(size, config)
        results = []
        for seed in seeds:
            try:
                results.append(generator.generate(seed))
            except (InsufficientDoorCandidatesError, RoomPlacementError):
                continue
            if len(results) == count:
                break
        assert results, "no seed produced a layout"
        return results

    return _collect


@pytest.fixture
def headless_pygame():
    import pygame

    pygame.init()
    yield pygame
    pygame.quit()
