"""Domain entities: rooms, furniture and layout snapshots."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any

from .constants import (
    CANVAS_SCALE,
    DEFAULT_FLOOR_COLOR,
    DEFAULT_WALL_COLOR,
    MIN_POLYGON_POINTS,
)
from .value_objects import Point2D, Polygon, RoomShape

CUSTOM_MODEL_TYPE = "Custom Model"


def normalize_rotation(degrees: float) -> float:
    """Map any angle in degrees onto [0, 360)."""
    result = degrees % 360.0
    # -1e-18 % 360 rounds to 360.0
    return 0.0 if result >= 360.0 else result


@dataclass(frozen=True)
class Room:
    """A room's floor configuration.

    Width and length are metres. The custom polygon is in canvas units and is
    only consulted when ``shape`` is ``RoomShape.CUSTOM``.

    Attributes:
        width: Extent along the plan's x axis in metres.
        length: Extent along the plan's y axis in metres.
        shape: Which floor outline is authoritative.
        wall_color: Opaque presentation value.
        floor_color: Opaque presentation value.
        custom_polygon: Vertices of a user-drawn outline, if any.
    """

    width: float
    length: float
    shape: RoomShape = RoomShape.RECTANGLE
    wall_color: str = DEFAULT_WALL_COLOR
    floor_color: str = DEFAULT_FLOOR_COLOR
    custom_polygon: tuple[Point2D, ...] | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.length <= 0:
            raise ValueError("Room width and length must be positive")
        if not isinstance(self.shape, RoomShape):
            object.__setattr__(self, "shape", RoomShape(self.shape))
        if self.custom_polygon is not None:
            points = tuple(
                p if isinstance(p, Point2D) else Point2D(float(p[0]), float(p[1]))
                for p in self.custom_polygon
            )
            object.__setattr__(self, "custom_polygon", points)

    @property
    def width_units(self) -> float:
        """Width in canvas units."""
        return self.width * CANVAS_SCALE

    @property
    def length_units(self) -> float:
        """Length in canvas units."""
        return self.length * CANVAS_SCALE

    @property
    def is_custom(self) -> bool:
        return self.shape == RoomShape.CUSTOM

    @property
    def polygon(self) -> Polygon | None:
        """The custom outline, or None while it has fewer than three points."""
        if not self.is_custom or self.custom_polygon is None:
            return None
        if len(self.custom_polygon) < MIN_POLYGON_POINTS:
            return None
        return Polygon(self.custom_polygon)

    @property
    def is_degenerate(self) -> bool:
        """True for a custom room whose outline is not yet defined."""
        return self.is_custom and self.polygon is None

    def with_changes(self, **changes: Any) -> "Room":
        """Return a replacement room; rooms are never edited in place."""
        return replace(self, **changes)


@dataclass(frozen=True)
class FurnitureTemplate:
    """What the editor supplies when adding an item.

    Sizes are nominal footprint metres; ``height`` is the plan depth.
    """

    type: str
    width: float
    height: float
    color: str | None = None
    material: str | None = None
    model_url: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Furniture footprint must be non-negative")


@dataclass
class FurnitureItem:
    """A placed piece of furniture.

    ``x`` and ``y`` are the centre of the footprint in canvas units.
    ``extras`` carries cosmetic fields the geometry never reads.
    """

    id: str
    type: str
    width: float
    height: float
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    scale: float = 1.0
    color: str | None = None
    material: str | None = None
    model_url: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Furniture footprint must be non-negative")
        if self.scale <= 0:
            raise ValueError("Furniture scale must be positive")

    @property
    def center(self) -> Point2D:
        return Point2D(self.x, self.y)

    @property
    def is_custom_model(self) -> bool:
        return self.type == CUSTOM_MODEL_TYPE

    def copy(self) -> "FurnitureItem":
        """Independent value copy, extras included."""
        return replace(self, extras=copy.deepcopy(self.extras))


@dataclass(frozen=True)
class LayoutSnapshot:
    """Room plus a fully copied furniture list, as saved and loaded."""

    room: Room
    furniture: tuple[FurnitureItem, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "furniture", tuple(item.copy() for item in self.furniture)
        )
