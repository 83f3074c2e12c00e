"""Room floor geometry on the 2D plan.

This module answers where a room's floor is for every supported shape:
- Rectangle/Square: one rectangle inset by the canvas pad
- L-Shape: a full-width main bar over a half-width wing
- Custom: the user-drawn polygon, with no implicit padding
"""

from __future__ import annotations

import math

from ..constants import (
    CANVAS_PAD,
    CANVAS_SCALE,
    L_SHAPE_MAIN_LENGTH_RATIO,
    L_SHAPE_WING_WIDTH_RATIO,
)
from ..entities import Room
from ..value_objects import Point2D, Polygon, Rect, RoomShape

__all__ = ["RoomGeometry", "FloorRegion"]

FloorRegion = Rect | Polygon


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


class RoomGeometry:
    """Containment and region queries for a room's floor.

    The L-shape's region membership is decided by a single vertical
    comparison against the bottom of the main bar, not by a polygon test.
    Placement clamping is built on that behaviour.

    Attributes:
        scale: Canvas units per metre.
        pad: Offset of the room's top-left corner from the canvas origin.
    """

    def __init__(self, scale: float = CANVAS_SCALE, pad: float = CANVAS_PAD) -> None:
        self.scale = scale
        self.pad = pad

    def floor_rect(self, room: Room) -> Rect:
        """The full width x length rectangle, whatever the shape."""
        return Rect(self.pad, self.pad, room.width * self.scale, room.length * self.scale)

    def l_shape_rects(self, room: Room) -> tuple[Rect, Rect]:
        """Main bar and wing of an L-shaped room.

        Both share the room's top-left origin on x; the wing hangs below the
        main bar. Sizes are rounded to whole canvas units.

        Returns:
            Tuple of (main_bar, wing).
        """
        full_w = room.width * self.scale
        full_h = room.length * self.scale
        main_h = _round_half_up(full_h * L_SHAPE_MAIN_LENGTH_RATIO)
        wing_w = _round_half_up(full_w * L_SHAPE_WING_WIDTH_RATIO)
        main = Rect(self.pad, self.pad, full_w, main_h)
        wing = Rect(self.pad, self.pad + main_h, wing_w, full_h - main_h)
        return main, wing

    def floor_regions(self, room: Room) -> list[FloorRegion]:
        """Rectangles (or the single polygon) making up the floor.

        A custom room without a usable polygon has no regions.
        """
        if room.shape == RoomShape.L_SHAPE:
            return list(self.l_shape_rects(room))
        if room.shape == RoomShape.CUSTOM:
            polygon = room.polygon
            return [polygon] if polygon is not None else []
        return [self.floor_rect(room)]

    def contains_point(self, room: Room, x: float, y: float) -> bool:
        """Check whether a point lies on the floor.

        A custom room whose outline is not yet defined places no constraint,
        so every point is accepted.
        """
        if room.shape == RoomShape.CUSTOM:
            polygon = room.polygon
            return polygon.contains_point(x, y) if polygon is not None else True
        return any(
            region.contains_point(x, y) for region in self.floor_regions(room)
        )

    def region_for(self, room: Room, x: float, y: float) -> Rect | None:
        """Select the rectangle that bounds a point's placement.

        For an L-shape, points below the main bar's bottom edge belong to the
        wing and all others to the main bar; x is not consulted. For a custom
        room this is the polygon's bounding rectangle, or None when the
        polygon is not yet defined.
        """
        if room.shape == RoomShape.L_SHAPE:
            main, wing = self.l_shape_rects(room)
            return wing if y > main.bottom else main
        if room.shape == RoomShape.CUSTOM:
            polygon = room.polygon
            return polygon.bounds if polygon is not None else None
        return self.floor_rect(room)

    def centroid(self, room: Room) -> Point2D:
        """Centre of the width x length rectangle, for every shape."""
        return self.floor_rect(room).center

    def outline(self, room: Room) -> list[Point2D]:
        """Closed outline of the floor, clockwise from the top-left corner."""
        if room.shape == RoomShape.L_SHAPE:
            main, wing = self.l_shape_rects(room)
            return [
                Point2D(main.left, main.top),
                Point2D(main.right, main.top),
                Point2D(main.right, main.bottom),
                Point2D(wing.right, wing.top),
                Point2D(wing.right, wing.bottom),
                Point2D(wing.left, wing.bottom),
            ]
        if room.shape == RoomShape.CUSTOM:
            polygon = room.polygon
            return list(polygon.points) if polygon is not None else []
        return list(self.floor_rect(room).corners())

    def floor_area(self, room: Room) -> float:
        """Floor area in square canvas units."""
        points = self.outline(room)
        if len(points) < 3:
            return 0.0
        return Polygon(tuple(points)).area

    def floor_area_m2(self, room: Room) -> float:
        return self.floor_area(room) / (self.scale * self.scale)

    def polygon_centroid(self, room: Room) -> Point2D:
        """Area centroid of the floor outline.

        Falls back to the rectangle centroid when there is no outline.
        """
        points = self.outline(room)
        if len(points) < 3:
            return self.centroid(room)
        return Polygon(tuple(points)).centroid
