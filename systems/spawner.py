"""Character spawn planning from the generated room list."""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from dungeon.rooms import Room


class SpawnPlan(NamedTuple):
    player: Tuple[float, float]
    guards: List[Tuple[float, float]]


def room_spawn_point(room: Room) -> Tuple[float, float]:
    """World position at the middle of the room's center tile."""
    cx, cy = room.center
    return cx + 0.5, cy + 0.5


def plan_spawns(rooms: Sequence[Room]) -> SpawnPlan:
    """Player starts in the first placed room, one guard waits in every other room."""
    if not rooms:
        raise ValueError("cannot plan spawns without rooms")
    player = room_spawn_point(rooms[0])
    guards = [room_spawn_point(room) for room in rooms[1:]]
    return SpawnPlan(player, guards)
