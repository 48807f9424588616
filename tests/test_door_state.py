from config import tuning
from dungeon.generator import MapGenerator
from dungeon.tiles import TileGrid
from systems.doors import DoorState, ExitDoor, GuardDoor

G = tuning.GROUND_01_TILE_ID
OPEN_L, OPEN_R = tuning.DOOR_LEFT_OPEN_TILE_ID, tuning.DOOR_RIGHT_OPEN_TILE_ID
CLOSED_L, CLOSED_R = tuning.DOOR_LEFT_CLOSED_TILE_ID, tuning.DOOR_RIGHT_CLOSED_TILE_ID


def make_state(traps_required=None):
    grid = TileGrid(20, 10)
    grid.fill(G)
    guards = [GuardDoor((1, 2)), GuardDoor((8, 2))]
    for door in guards:
        x, y = door.position
        grid.set(x + 1, y, OPEN_L)
        grid.set(x + 2, y, OPEN_R)
    exit_door = ExitDoor((14, 5))
    grid.set(15, 5, CLOSED_L)
    grid.set(16, 5, CLOSED_R)
    return DoorState(grid, guards, exit_door, traps_required), grid


def test_trigger_covers_two_tiles_from_the_footprint_start():
    door = GuardDoor((4, 3))
    assert door.trigger_contains(4.0, 3.0)
    assert door.trigger_contains(5.9, 3.9)
    assert not door.trigger_contains(6.0, 3.5)
    assert not door.trigger_contains(3.9, 3.5)
    assert not door.trigger_contains(5.0, 4.0)


def test_guard_closes_the_door_it_enters():
    state, grid = make_state()
    assert state.register_guard((2.0, 2.5))
    assert state.trapped == 1
    assert not state.guard_doors[0].is_open
    assert (grid.tile_id(2, 2), grid.tile_id(3, 2)) == (CLOSED_L, CLOSED_R)
    assert state.guard_doors[1].is_open
    assert not state.exit_door.is_open


def test_guard_elsewhere_or_at_closed_door_is_ignored():
    state, _ = make_state()
    assert not state.register_guard((12.0, 7.0))
    state.register_guard((2.0, 2.5))
    assert not state.register_guard((2.0, 2.5))
    assert state.trapped == 1


def test_exit_opens_once_every_guard_is_trapped():
    state, grid = make_state()
    state.register_guard((1.5, 2.5))
    assert not state.exit_door.is_open
    state.register_guard((9.5, 2.5))
    assert state.exit_door.is_open
    assert (grid.tile_id(15, 5), grid.tile_id(16, 5)) == (OPEN_L, OPEN_R)


def test_lower_threshold_opens_exit_early():
    state, _ = make_state(traps_required=1)
    state.register_guard((9.5, 2.5))
    assert state.exit_door.is_open


def test_zero_threshold_starts_with_open_exit():
    state, grid = make_state(traps_required=0)
    assert state.exit_door.is_open
    assert grid.tile_id(15, 5) == OPEN_L


def test_player_escapes_only_through_open_exit():
    state, _ = make_state()
    assert not state.player_escaped((15.0, 5.5))
    state.exit_door.open(state.grid)
    assert state.player_escaped((15.0, 5.5))
    assert not state.player_escaped((2.0, 2.5))


def test_single_room_level_exit_is_open_from_the_start(single_room_config):
    result = MapGenerator((10, 10), single_room_config).generate(seed=4)
    state = DoorState.from_result(result)
    assert state.guard_doors == []
    assert state.exit_door.position == result.exit_door
    assert state.exit_door.is_open
