"""Keeps furniture inside the room's floor.

Clamping works on the item's rotated, scaled axis-aligned bounding box and
returns a corrected centre. Nothing here mutates the item.
"""

from __future__ import annotations

import math

from ..entities import FurnitureItem, Room
from ..value_objects import HalfExtents, Point2D, Polygon, Rect
from .bounding_extent import item_half_extents
from .room_geometry import RoomGeometry

__all__ = ["PlacementClamp"]


def _clamp_axis(value: float, low: float, high: float, half: float) -> float:
    """Clamp a centre coordinate so [value - half, value + half] fits [low, high].

    When the span is too small for the item, the centre of the span wins.
    """
    if high - low < 2 * half:
        return (low + high) / 2
    return max(low + half, min(value, high - half))


def _orientation(p: tuple[float, float], q: tuple[float, float], r: tuple[float, float]) -> float:
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def _segments_cross(
    a: tuple[float, float],
    b: tuple[float, float],
    c: tuple[float, float],
    d: tuple[float, float],
) -> bool:
    """True when segments ab and cd cross at a point interior to both.

    Touching and collinear overlap do not count, so a box resting flush
    against a wall still fits.
    """
    d1 = _orientation(c, d, a)
    d2 = _orientation(c, d, b)
    d3 = _orientation(a, b, c)
    d4 = _orientation(a, b, d)
    return d1 * d2 < 0 and d3 * d4 < 0


class PlacementClamp:
    """Computes legal item centres for a room.

    Rectangle, square and L-shaped rooms clamp each axis independently
    against one rectangle. For the L-shape the rectangle is chosen from the
    bottom edge of the item's bounding box: below the main bar means the wing.

    Custom polygon rooms use this policy:
    1. Outline not yet defined (fewer than three points): identity.
    2. Bounding box already inside the polygon: identity.
    3. Otherwise clamp to the polygon's bounding rectangle; keep that if it fits.
    4. Otherwise bisect along the segment from the polygon's area centroid to
       the point from step 3 and return the fitting point closest to it.
    5. If the box does not fit even at the centroid, return the centroid.

    "Fits" means every bounding-box corner is inside the polygon, no polygon
    vertex lies strictly inside the box and no polygon edge crosses a box
    edge (so a thin slit cutting through the box is caught).

    Attributes:
        geometry: Room geometry used for region selection.
        bisection_steps: Iterations for the polygon fallback search.
    """

    def __init__(
        self, geometry: RoomGeometry | None = None, bisection_steps: int = 40
    ) -> None:
        self.geometry = geometry or RoomGeometry()
        self.bisection_steps = bisection_steps

    def clamp(self, item: FurnitureItem, cx: float, cy: float, room: Room) -> Point2D:
        """Return the nearest legal centre for ``item`` at candidate (cx, cy).

        Args:
            item: The item being placed; only size, scale and rotation are read.
            cx: Candidate centre x in canvas units.
            cy: Candidate centre y in canvas units.
            room: The room to stay inside.

        Returns:
            Corrected centre point.
        """
        extents = item_half_extents(item, self.geometry.scale)
        if room.is_custom:
            polygon = room.polygon
            if polygon is None:
                return Point2D(cx, cy)
            return self._clamp_to_polygon(polygon, cx, cy, extents)

        region = self.region_for_box(room, cx, cy, extents)
        return self._clamp_to_rect(region, cx, cy, extents)

    def region_for_box(
        self, room: Room, cx: float, cy: float, extents: HalfExtents
    ) -> Rect:
        """Rectangle an item centred at (cx, cy) is clamped against."""
        region = self.geometry.region_for(room, cx, cy + extents.half_height)
        if region is None:
            # Only a custom room without an outline has no region
            return self.geometry.floor_rect(room)
        return region

    def is_contained(self, item: FurnitureItem, room: Room) -> bool:
        """Check whether the item's bounding box lies on the floor where it is."""
        extents = item_half_extents(item, self.geometry.scale)
        if room.is_custom:
            polygon = room.polygon
            if polygon is None:
                return True
            return self._box_fits(polygon, item.x, item.y, extents)
        region = self.region_for_box(room, item.x, item.y, extents)
        return region.contains_box(item.x, item.y, extents)

    def footprint_corners(
        self, item: FurnitureItem, cx: float | None = None, cy: float | None = None
    ) -> list[Point2D]:
        """Corners of the item's rotated footprint (not its bounding box)."""
        cx = item.x if cx is None else cx
        cy = item.y if cy is None else cy
        hw = item.width * self.geometry.scale * item.scale / 2
        hh = item.height * self.geometry.scale * item.scale / 2
        theta = math.radians(item.rotation)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        corners = []
        for dx, dy in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)):
            corners.append(
                Point2D(cx + dx * cos_t - dy * sin_t, cy + dx * sin_t + dy * cos_t)
            )
        return corners

    def _clamp_to_rect(
        self, region: Rect, cx: float, cy: float, extents: HalfExtents
    ) -> Point2D:
        return Point2D(
            _clamp_axis(cx, region.left, region.right, extents.half_width),
            _clamp_axis(cy, region.top, region.bottom, extents.half_height),
        )

    def _clamp_to_polygon(
        self, polygon: Polygon, cx: float, cy: float, extents: HalfExtents
    ) -> Point2D:
        if self._box_fits(polygon, cx, cy, extents):
            return Point2D(cx, cy)

        target = self._clamp_to_rect(polygon.bounds, cx, cy, extents)
        if self._box_fits(polygon, target.x, target.y, extents):
            return target

        anchor = polygon.centroid
        if not self._box_fits(polygon, anchor.x, anchor.y, extents):
            return anchor

        low, high = 0.0, 1.0
        for _ in range(self.bisection_steps):
            mid = (low + high) / 2
            x = anchor.x + (target.x - anchor.x) * mid
            y = anchor.y + (target.y - anchor.y) * mid
            if self._box_fits(polygon, x, y, extents):
                low = mid
            else:
                high = mid
        return Point2D(
            anchor.x + (target.x - anchor.x) * low,
            anchor.y + (target.y - anchor.y) * low,
        )

    @staticmethod
    def _box_fits(
        polygon: Polygon, cx: float, cy: float, extents: HalfExtents
    ) -> bool:
        left = cx - extents.half_width
        right = cx + extents.half_width
        top = cy - extents.half_height
        bottom = cy + extents.half_height
        for x, y in ((left, top), (right, top), (right, bottom), (left, bottom)):
            if not polygon.contains_point(x, y):
                return False
        if any(left < p.x < right and top < p.y < bottom for p in polygon.points):
            return False
        box_edges = (
            ((left, top), (right, top)),
            ((right, top), (right, bottom)),
            ((right, bottom), (left, bottom)),
            ((left, bottom), (left, top)),
        )
        n = len(polygon.points)
        for i in range(n):
            a = polygon.points[i]
            b = polygon.points[(i + 1) % n]
            for p, q in box_edges:
                if _segments_cross((a.x, a.y), (b.x, b.y), p, q):
                    return False
        return True
