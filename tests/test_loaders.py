import logging

import pygame

from assets.loaders import load_tileset
from config import settings, tuning


def test_missing_tileset_falls_back_to_flat_tiles(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        tiles = load_tileset(tmp_path / "missing.png")
    assert "Tileset not found" in caplog.text
    assert tuning.GROUND_01_TILE_ID in tiles
    assert tuning.FACADE_CENTER_02_TILE_ID in tiles
    ground = tiles[tuning.GROUND_01_TILE_ID]
    assert ground.get_size() == (tuning.TILESET_TILE_SIZE, tuning.TILESET_TILE_SIZE)
    assert tuple(ground.get_at((0, 0)))[:3] == settings.PREVIEW_COLORS["ground"]


def test_sheet_is_sliced_row_major(tmp_path):
    sheet = pygame.Surface((32, 32))
    sheet.fill((255, 0, 0), pygame.Rect(16, 0, 16, 16))
    sheet.fill((0, 0, 255), pygame.Rect(0, 16, 16, 16))
    path = tmp_path / "sheet.bmp"
    pygame.image.save(sheet, str(path))

    tiles = load_tileset(path)
    assert sorted(tiles) == [0, 1, 2, 3]
    assert tuple(tiles[1].get_at((4, 4)))[:3] == (255, 0, 0)
    assert tuple(tiles[2].get_at((4, 4)))[:3] == (0, 0, 255)
    assert tiles[3].get_size() == (16, 16)
