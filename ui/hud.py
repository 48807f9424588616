"""HUD rendering helpers (level info panel, spawn markers)."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import pygame

from config import settings
from dungeon.generator import GenerationResult
from systems.doors import DoorState


def level_status_lines(result: GenerationResult, doors: DoorState) -> List[str]:
    exit_state = "open" if doors.exit_door.is_open else "closed"
    return [
        f"Seed: {result.seed}",
        f"Rooms: {len(result.rooms)}",
        f"Guard doors: {len(doors.guard_doors)}",
        f"Trapped: {doors.trapped}/{doors.traps_required}",
        f"Exit: {exit_state}",
    ]


def draw_status_panel(surface: pygame.Surface, font: pygame.font.Font, lines: Sequence[str]) -> None:
    margin = 20
    padding = 8
    line_height = font.get_linesize()
    rendered = [font.render(line, True, settings.TEXT_COLOR) for line in lines]
    width = max((text.get_width() for text in rendered), default=0) + padding * 2
    height = line_height * len(rendered) + padding * 2
    panel_rect = pygame.Rect(margin, margin, width, height)
    pygame.draw.rect(surface, (50, 50, 60), panel_rect, border_radius=6)
    pygame.draw.rect(surface, (120, 120, 140), panel_rect, 2, border_radius=6)
    for index, text in enumerate(rendered):
        surface.blit(text, (margin + padding, margin + padding + index * line_height))


def draw_spawn_markers(
    surface: pygame.Surface,
    player: Tuple[float, float],
    guards: Sequence[Tuple[float, float]],
    tile_pixels: int = settings.TILE_PIXELS,
) -> None:
    radius = max(2, tile_pixels // 3)
    for gx, gy in guards:
        pygame.draw.circle(surface, (200, 70, 70), (int(gx * tile_pixels), int(gy * tile_pixels)), radius)
    px, py = player
    pygame.draw.circle(surface, (90, 200, 90), (int(px * tile_pixels), int(py * tile_pixels)), radius)
