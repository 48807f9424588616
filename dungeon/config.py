"""Generator configuration with defaults from ``config.tuning``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from config import tuning
from dungeon.errors import MapConfigError


@dataclass(frozen=True)
class MapGenConfig:
    min_room_size: Tuple[int, int] = tuning.MIN_ROOM_SIZE
    max_room_size: Tuple[int, int] = tuning.MAX_ROOM_SIZE
    max_room_count: int = tuning.MAX_ROOM_COUNT
    min_room_count: int = tuning.MIN_ROOM_COUNT
    # None keeps the per-direction defaults below
    corridor_padding: Optional[int] = tuning.CORRIDOR_PADDING
    door_clearance: int = tuning.DOOR_CLEARANCE
    door_attempts: int = tuning.DOOR_PLACEMENT_ATTEMPTS
    filler_probability: float = tuning.TILE_FILLER_PROB
    detail_max_passes: int = tuning.DETAIL_MAX_PASSES
    tileset: str = tuning.TILESET_MAP_ID

    @property
    def horizontal_padding(self) -> int:
        if self.corridor_padding is None:
            return tuning.HORIZONTAL_CORRIDOR_PADDING
        return self.corridor_padding

    @property
    def vertical_padding(self) -> int:
        if self.corridor_padding is None:
            return tuning.VERTICAL_CORRIDOR_PADDING
        return self.corridor_padding

    def validate(self, size: Tuple[int, int]) -> None:
        """Raise MapConfigError if this configuration cannot fill ``size``."""
        width, height = size
        if width <= 0 or height <= 0:
            raise MapConfigError(f"grid size must be positive, got {width}x{height}")
        min_w, min_h = self.min_room_size
        max_w, max_h = self.max_room_size
        if min_w < 1 or min_h < 1:
            raise MapConfigError(f"min_room_size must be at least 1x1, got {min_w}x{min_h}")
        if min_w > max_w or min_h > max_h:
            raise MapConfigError(
                f"min_room_size {self.min_room_size} exceeds max_room_size {self.max_room_size}"
            )
        # one wall cell on each side of the room
        if min_w > width - 2 or min_h > height - 2:
            raise MapConfigError(
                f"min_room_size {min_w}x{min_h} does not fit a {width}x{height} grid with its border"
            )
        if self.max_room_count < 1:
            raise MapConfigError("max_room_count must be at least 1")
        if not 1 <= self.min_room_count <= self.max_room_count:
            raise MapConfigError(
                f"min_room_count must be within 1..{self.max_room_count}, got {self.min_room_count}"
            )
        if self.corridor_padding is not None and self.corridor_padding < 0:
            raise MapConfigError("corridor_padding cannot be negative")
        # the exit footprint takes the ground row under the facade
        if self.door_clearance < 2:
            raise MapConfigError("door_clearance must be at least 2")
        if self.door_attempts < 1:
            raise MapConfigError("door_attempts must be at least 1")
        if not 0.0 <= self.filler_probability <= 1.0:
            raise MapConfigError(
                f"filler_probability must be within [0, 1], got {self.filler_probability}"
            )
        if self.detail_max_passes < 1:
            raise MapConfigError("detail_max_passes must be at least 1")
