"""Utilities for locating asset files."""

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
ASSETS_DIR = BASE_DIR / "materials"

TILESET_TEXTURE_PATH = ASSETS_DIR / "kenney_tiny-dungeon" / "Tilemap" / "tilemap_packed.png"
