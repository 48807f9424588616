"""Screen, color, and runtime constants for the layout viewer."""

WIDTH = 1024
HEIGHT = 768

BG_COLOR = (22, 22, 28)
TEXT_COLOR = (235, 235, 235)

TEXT_FONT_SIZE = 24

TARGET_FPS = 30

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# Default generated map size in tiles (the map asset's declared layer size)
MAP_WIDTH = 64
MAP_HEIGHT = 48

# Pixels per tile on screen; the tileset is scaled up from its native size
TILE_PIXELS = 16

# Preview surface settings
PREVIEW_SCALE = 4  # pixels per tile in the preview texture
PREVIEW_COLORS = {
    "ground": (54, 48, 58),
    "wall": (70, 82, 102),
    "facade": (100, 115, 140),
    "door_open": (90, 200, 90),
    "door_closed": (200, 70, 70),
    "exit": (230, 200, 80),
    "empty": (0, 0, 0),
}
