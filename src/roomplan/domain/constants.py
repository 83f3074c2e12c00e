"""Constants for the 2D plan coordinate space and room shapes."""

# Canvas units per metre on the 2D plan
CANVAS_SCALE: float = 80.0

# Inset from the canvas origin to the room's top-left corner, in canvas units
CANVAS_PAD: float = 40.0

# Room dimension limits in metres (enforced at the configuration boundary)
MIN_ROOM_DIMENSION: float = 1.0
MAX_ROOM_DIMENSION: float = 20.0

# L-shape proportions: the main bar takes the full width and this share of
# the length, the wing takes this share of the width and the rest of the length
L_SHAPE_MAIN_LENGTH_RATIO: float = 0.6
L_SHAPE_WING_WIDTH_RATIO: float = 0.5

# Minimum number of vertices for a usable custom polygon
MIN_POLYGON_POINTS: int = 3

DEFAULT_WALL_COLOR: str = "#F5F5DC"
DEFAULT_FLOOR_COLOR: str = "#D2B48C"

# Vertical height (metres) used by the 3D scene for types without one
DEFAULT_VERTICAL_HEIGHT: float = 0.6
DEFAULT_WALL_HEIGHT: float = 2.8
