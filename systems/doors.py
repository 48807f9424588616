"""Runtime state for guard doors (traps) and the level exit."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from config import tuning
from dungeon.generator import GenerationResult
from dungeon.tiles import TileGrid


class GuardDoor:
    """An open jail cell; a guard walking into it shuts it."""

    def __init__(self, position: Tuple[int, int], is_open: bool = True) -> None:
        self.position = position
        self.is_open = is_open

    def trigger_contains(self, px: float, py: float) -> bool:
        # Trigger spans the two door tiles' width starting at the footprint's left edge.
        x, y = self.position
        return x <= px < x + 2 and y <= py < y + 1

    def _write(self, grid: TileGrid, left_id: int, right_id: int) -> None:
        x, y = self.position
        grid.set(x + 1, y, left_id)
        grid.set(x + 2, y, right_id)

    def close(self, grid: TileGrid) -> None:
        self.is_open = False
        self._write(grid, tuning.DOOR_LEFT_CLOSED_TILE_ID, tuning.DOOR_RIGHT_CLOSED_TILE_ID)


class ExitDoor(GuardDoor):
    """Closed until enough guards are trapped; the player leaves through it."""

    def __init__(self, position: Tuple[int, int], is_open: bool = False) -> None:
        super().__init__(position, is_open)

    def open(self, grid: TileGrid) -> None:
        self.is_open = True
        self._write(grid, tuning.DOOR_LEFT_OPEN_TILE_ID, tuning.DOOR_RIGHT_OPEN_TILE_ID)


class DoorState:
    def __init__(
        self,
        grid: TileGrid,
        guard_doors: List[GuardDoor],
        exit_door: ExitDoor,
        traps_required: Optional[int] = None,
    ) -> None:
        self.grid = grid
        self.guard_doors = guard_doors
        self.exit_door = exit_door
        self.traps_required = len(guard_doors) if traps_required is None else traps_required
        self.trapped = 0
        if self.traps_required <= 0:
            self.exit_door.open(grid)

    @classmethod
    def from_result(cls, result: GenerationResult, traps_required: Optional[int] = None) -> "DoorState":
        return cls(
            result.grid,
            [GuardDoor(pos) for pos in result.guard_doors],
            ExitDoor(result.exit_door),
            traps_required,
        )

    def register_guard(self, guard_pos: Tuple[float, float]) -> bool:
        """Shut the open door the guard stepped into; returns True if the guard got trapped."""
        for door in self.guard_doors:
            if door.is_open and door.trigger_contains(*guard_pos):
                door.close(self.grid)
                self.trapped += 1
                logging.info("Guard trapped at %s (%d/%d)", door.position, self.trapped, self.traps_required)
                if self.trapped >= self.traps_required and not self.exit_door.is_open:
                    self.exit_door.open(self.grid)
                    logging.info("Exit opened at %s", self.exit_door.position)
                return True
        return False

    def player_escaped(self, player_pos: Tuple[float, float]) -> bool:
        return self.exit_door.is_open and self.exit_door.trigger_contains(*player_pos)
