"""High-level viewer loop for generated layouts."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import pygame

from assets.loaders import load_tileset
from config import settings
from dungeon.config import MapGenConfig
from dungeon.generator import wall_clock_seed
from dungeon.map_data import Level, build_level, build_preview_surface
from dungeon.tiles import TileGrid
from systems import spawner
from systems.doors import DoorState
from ui import hud


class Viewer:
    def __init__(
        self,
        seed: Optional[int] = None,
        size: Tuple[int, int] = (settings.MAP_WIDTH, settings.MAP_HEIGHT),
        config: Optional[MapGenConfig] = None,
    ) -> None:
        logging.basicConfig(level=logging.INFO, format=settings.LOG_FORMAT)

        pygame.init()
        self.screen = pygame.display.set_mode((settings.WIDTH, settings.HEIGHT))
        pygame.display.set_caption("Stonehold")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, settings.TEXT_FONT_SIZE)

        self.size = size
        self.config = config
        self.tiles = self._scale_tiles(load_tileset())

        self.level: Level
        self.doors: DoorState
        self.spawns: spawner.SpawnPlan
        self.map_surface: pygame.Surface
        self.preview_surface: pygame.Surface
        self.load_level(seed)

    @staticmethod
    def _scale_tiles(tiles: dict[int, pygame.Surface]) -> dict[int, pygame.Surface]:
        target = (settings.TILE_PIXELS, settings.TILE_PIXELS)
        return {
            tile_id: surface if surface.get_size() == target else pygame.transform.scale(surface, target)
            for tile_id, surface in tiles.items()
        }

    def load_level(self, seed: Optional[int] = None) -> None:
        self.level = build_level(seed, self.size, self.config)
        result = self.level.result
        self.doors = DoorState.from_result(result)
        self.spawns = spawner.plan_spawns(result.rooms)
        self.redraw_map()

    def redraw_map(self) -> None:
        grid = self.level.result.grid
        self.map_surface = self.render_grid(grid)
        self.preview_surface = build_preview_surface(grid)

    def render_grid(self, grid: TileGrid) -> pygame.Surface:
        size = settings.TILE_PIXELS
        surface = pygame.Surface((grid.width * size, grid.height * size))
        surface.fill(settings.BG_COLOR)
        for x, y, tile in grid.cells():
            if tile is None:
                continue
            texture = self.tiles.get(tile.id)
            if texture is None:
                logging.warning("No texture for tile id %d at (%d, %d)", tile.id, x, y)
                continue
            surface.blit(texture, (x * size, y * size))
        return surface

    def close_all_guard_doors(self) -> int:
        trapped = 0
        for door in self.doors.guard_doors:
            x, y = door.position
            if self.doors.register_guard((x + 1.0, y + 0.5)):
                trapped += 1
        return trapped

    def open_exit(self) -> None:
        if not self.doors.exit_door.is_open:
            self.doors.exit_door.open(self.doors.grid)
            logging.info("Exit forced open at %s", self.doors.exit_door.position)

    def handle_key(self, key: int) -> bool:
        """Apply a key press; returns False when the viewer should quit."""
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_r:
            self.load_level(wall_clock_seed())
        elif key == pygame.K_c:
            if self.close_all_guard_doors():
                self.redraw_map()
        elif key == pygame.K_o:
            self.open_exit()
            self.redraw_map()
        return True

    def draw(self) -> None:
        self.screen.fill(settings.BG_COLOR)
        self.screen.blit(self.map_surface, (0, 0))
        hud.draw_spawn_markers(self.screen, self.spawns.player, self.spawns.guards)

        preview_rect = self.preview_surface.get_rect()
        preview_rect.topright = (settings.WIDTH - 20, 20)
        self.screen.blit(self.preview_surface, preview_rect)

        hud.draw_status_panel(self.screen, self.font, hud.level_status_lines(self.level.result, self.doors))

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self.handle_key(event.key)

            self.draw()
            pygame.display.flip()
            self.clock.tick(settings.TARGET_FPS)

        pygame.quit()
