"""Domain services for room geometry and furniture placement."""

from .bounding_extent import bounding_half_extents, item_half_extents
from .grid_snap import GridSnap, snap
from .placement_clamp import PlacementClamp
from .room_geometry import FloorRegion, RoomGeometry
from .scene_mapper import FloorSlab, Scene, SceneMapper, ScenePlacement

__all__ = [
    "FloorRegion",
    "FloorSlab",
    "GridSnap",
    "PlacementClamp",
    "RoomGeometry",
    "Scene",
    "SceneMapper",
    "ScenePlacement",
    "bounding_half_extents",
    "item_half_extents",
    "snap",
]
