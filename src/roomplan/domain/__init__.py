"""Domain layer - room geometry and placement rules."""

from .constants import CANVAS_PAD, CANVAS_SCALE
from .entities import (
    CUSTOM_MODEL_TYPE,
    FurnitureItem,
    FurnitureTemplate,
    LayoutSnapshot,
    Room,
    normalize_rotation,
)
from .services import (
    GridSnap,
    PlacementClamp,
    RoomGeometry,
    SceneMapper,
    bounding_half_extents,
    item_half_extents,
    snap,
)
from .value_objects import HalfExtents, Point2D, Polygon, Rect, RoomShape

__all__ = [
    "CANVAS_PAD",
    "CANVAS_SCALE",
    "CUSTOM_MODEL_TYPE",
    "FurnitureItem",
    "FurnitureTemplate",
    "GridSnap",
    "HalfExtents",
    "LayoutSnapshot",
    "PlacementClamp",
    "Point2D",
    "Polygon",
    "Rect",
    "Room",
    "RoomGeometry",
    "RoomShape",
    "SceneMapper",
    "bounding_half_extents",
    "item_half_extents",
    "normalize_rotation",
    "snap",
]
