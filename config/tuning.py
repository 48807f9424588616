"""Dungeon generation tuning: tile ids, tile classes and generator defaults."""

# Tileset reference stored on every generated tile
TILESET_MAP_ID = "tiny_dungeon"
TILESET_COLUMNS = 12
TILESET_TILE_SIZE = 16

# Ground variants
GROUND_01_TILE_ID = 48
GROUND_02_TILE_ID = 49
GROUND_03_TILE_ID = 50

# Generic wall variants
WALL_01_TILE_ID = 40
WALL_02_TILE_ID = 41
WALL_03_TILE_ID = 42

# Wall edges
WALL_UP_TILE_ID = 2
WALL_DOWN_TILE_ID = 26
WALL_LEFT_TILE_ID = 13
WALL_RIGHT_TILE_ID = 15

# Wall corners
WALL_INNER_UL_ID = 0
WALL_INNER_UR_ID = 3
WALL_INNER_DL_ID = 24
WALL_INNER_DR_ID = 27
WALL_OUTER_UL_ID = 5
WALL_OUTER_UR_ID = 7
WALL_OUTER_DL_ID = 29
WALL_OUTER_DR_ID = 31

# Wall fronts (drawn on the floor row beneath a wall)
FACADE_LEFT_TILE_ID = 37
FACADE_CENTER_TILE_ID = 38
FACADE_RIGHT_TILE_ID = 39
FACADE_CENTER_02_TILE_ID = 57

# Doors and exit decoration
DOOR_LEFT_OPEN_TILE_ID = 45
DOOR_RIGHT_OPEN_TILE_ID = 46
DOOR_LEFT_CLOSED_TILE_ID = 33
DOOR_RIGHT_CLOSED_TILE_ID = 34
MONSTER_PIPE_CLOSED_TILE_ID = 21
STAIRS_LEFT_TILE_ID = 54
STAIRS_RIGHT_TILE_ID = 55
POOL_EMPTY_TILE_ID = 56

GROUND_TILE_IDS = frozenset({GROUND_01_TILE_ID, GROUND_02_TILE_ID, GROUND_03_TILE_ID})

# Everything the corner rules treat as "wall"
WALL_TILE_IDS = frozenset(
    {
        WALL_01_TILE_ID,
        WALL_02_TILE_ID,
        WALL_03_TILE_ID,
        WALL_UP_TILE_ID,
        WALL_DOWN_TILE_ID,
        WALL_LEFT_TILE_ID,
        WALL_RIGHT_TILE_ID,
        WALL_INNER_UL_ID,
        WALL_INNER_UR_ID,
        WALL_INNER_DL_ID,
        WALL_INNER_DR_ID,
        WALL_OUTER_UL_ID,
        WALL_OUTER_UR_ID,
        WALL_OUTER_DL_ID,
        WALL_OUTER_DR_ID,
    }
)

FACADE_TILE_IDS = frozenset(
    {FACADE_LEFT_TILE_ID, FACADE_CENTER_TILE_ID, FACADE_RIGHT_TILE_ID, FACADE_CENTER_02_TILE_ID}
)

DOOR_TILE_IDS = frozenset(
    {
        DOOR_LEFT_OPEN_TILE_ID,
        DOOR_RIGHT_OPEN_TILE_ID,
        DOOR_LEFT_CLOSED_TILE_ID,
        DOOR_RIGHT_CLOSED_TILE_ID,
    }
)

# Tiles that get a static collider. Facades are wall fronts drawn on walkable floor.
SOLID_TILE_IDS = WALL_TILE_IDS | {
    DOOR_LEFT_CLOSED_TILE_ID,
    DOOR_RIGHT_CLOSED_TILE_ID,
    MONSTER_PIPE_CLOSED_TILE_ID,
}

# Room placement (width, height)
MIN_ROOM_SIZE = (8, 6)
MAX_ROOM_SIZE = (14, 10)
MAX_ROOM_COUNT = 8
MIN_ROOM_COUNT = 1

# None keeps the per-direction defaults (horizontal 0, vertical 1)
CORRIDOR_PADDING = None
HORIZONTAL_CORRIDOR_PADDING = 0
VERTICAL_CORRIDOR_PADDING = 1

# Door placement
DOOR_WIDTH = 4
DOOR_CLEARANCE = 3
DOOR_PLACEMENT_ATTEMPTS = 10

# Decoration
TILE_FILLER_PROB = 0.05
FACADE_FILLER_MULTIPLIER = 10.0

# Wall cleanup must settle within this many full scans
DETAIL_MAX_PASSES = 64

# Fresh seeds tried by build_level before giving up
LEVEL_REGEN_ATTEMPTS = 5
