"""Maps the 2D plan onto a 3D scene description.

The 3D scene uses metres with its origin at the room's top-left corner, the
plan's x axis as scene x, the plan's y axis as scene z and y pointing up.
Only plain data is produced; drawing is left to the rendering layer.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..constants import DEFAULT_VERTICAL_HEIGHT, DEFAULT_WALL_HEIGHT
from ..entities import FurnitureItem, Room
from ..value_objects import Polygon, Rect
from .room_geometry import RoomGeometry

__all__ = ["FloorSlab", "Scene", "ScenePlacement", "SceneMapper"]


@dataclass(frozen=True)
class ScenePlacement:
    """A furniture box in scene coordinates.

    Attributes:
        id: Furniture item id.
        type: Furniture type.
        x: Centre along scene x (metres).
        y: Centre height above the floor (metres).
        z: Centre along scene z (metres).
        rotation_y: Yaw about the up axis in radians.
        width: Box size along its local x.
        height: Vertical box size.
        depth: Box size along its local z.
        color: Presentation colour, passed through.
        model_url: Custom mesh location, passed through.
    """

    id: str
    type: str
    x: float
    y: float
    z: float
    rotation_y: float
    width: float
    height: float
    depth: float
    color: str | None = None
    model_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "position": [self.x, self.y, self.z],
            "rotationY": self.rotation_y,
            "size": [self.width, self.height, self.depth],
            "color": self.color,
            "modelUrl": self.model_url,
        }


@dataclass(frozen=True)
class FloorSlab:
    """A rectangular floor piece in metres, anchored at its min corner."""

    x: float
    z: float
    width: float
    depth: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": [self.x + self.width / 2, 0.0, self.z + self.depth / 2],
            "size": [self.width, self.depth],
        }


@dataclass(frozen=True)
class Scene:
    """Everything the 3D view needs for one layout."""

    width: float
    length: float
    wall_height: float
    wall_color: str
    floor_color: str
    slabs: tuple[FloorSlab, ...]
    outline: tuple[tuple[float, float], ...]
    items: tuple[ScenePlacement, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "room": {
                "width": self.width,
                "length": self.length,
                "wallHeight": self.wall_height,
                "wallColor": self.wall_color,
                "floorColor": self.floor_color,
            },
            "floor": [slab.to_dict() for slab in self.slabs],
            "outline": [list(point) for point in self.outline],
            "furniture": [item.to_dict() for item in self.items],
        }


class SceneMapper:
    """Converts plan coordinates and items into scene coordinates.

    Attributes:
        geometry: Source of scale, pad and floor regions.
        type_heights: Vertical height in metres per furniture type.
        default_height: Vertical height for types not in ``type_heights``.
        wall_height: Height of the room's walls in metres.
    """

    def __init__(
        self,
        geometry: RoomGeometry | None = None,
        type_heights: Mapping[str, float] | None = None,
        default_height: float = DEFAULT_VERTICAL_HEIGHT,
        wall_height: float = DEFAULT_WALL_HEIGHT,
    ) -> None:
        self.geometry = geometry or RoomGeometry()
        self.type_heights = dict(type_heights or {})
        self.default_height = default_height
        self.wall_height = wall_height

    def canvas_to_metres(self, value: float) -> float:
        """Plan coordinate to scene coordinate (removes the pad)."""
        return (value - self.geometry.pad) / self.geometry.scale

    def metres_to_canvas(self, value: float) -> float:
        """Scene coordinate back to plan coordinate."""
        return value * self.geometry.scale + self.geometry.pad

    def rotation_to_yaw(self, degrees: float) -> float:
        """Plan rotation (clockwise on screen) to a yaw about the up axis."""
        return -math.radians(degrees)

    def map_item(self, item: FurnitureItem) -> ScenePlacement:
        height = self.type_heights.get(item.type, self.default_height) * item.scale
        return ScenePlacement(
            id=item.id,
            type=item.type,
            x=self.canvas_to_metres(item.x),
            y=height / 2,
            z=self.canvas_to_metres(item.y),
            rotation_y=self.rotation_to_yaw(item.rotation),
            width=item.width * item.scale,
            height=height,
            depth=item.height * item.scale,
            color=item.color,
            model_url=item.model_url,
        )

    def floor_slabs(self, room: Room) -> list[FloorSlab]:
        slabs = []
        for region in self.geometry.floor_regions(room):
            rect = region.bounds if isinstance(region, Polygon) else region
            slabs.append(self._rect_to_slab(rect))
        return slabs

    def build_scene(self, room: Room, furniture: Iterable[FurnitureItem]) -> Scene:
        outline = tuple(
            (self.canvas_to_metres(p.x), self.canvas_to_metres(p.y))
            for p in self.geometry.outline(room)
        )
        return Scene(
            width=room.width,
            length=room.length,
            wall_height=self.wall_height,
            wall_color=room.wall_color,
            floor_color=room.floor_color,
            slabs=tuple(self.floor_slabs(room)),
            outline=outline,
            items=tuple(self.map_item(item) for item in furniture),
        )

    def _rect_to_slab(self, rect: Rect) -> FloorSlab:
        scale = self.geometry.scale
        return FloorSlab(
            x=self.canvas_to_metres(rect.left),
            z=self.canvas_to_metres(rect.top),
            width=rect.width / scale,
            depth=rect.height / scale,
        )
