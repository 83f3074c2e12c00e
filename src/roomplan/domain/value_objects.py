"""Immutable value types for the 2D layout geometry.

All coordinates are canvas units (80 per metre) with the y axis pointing
down the plan, so ``top`` is the smaller y value of a rectangle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RoomShape(str, Enum):
    """Floor shapes a room can take."""

    RECTANGLE = "Rectangle"
    SQUARE = "Square"
    L_SHAPE = "L-Shape"
    CUSTOM = "Custom"

    @classmethod
    def _missing_(cls, value: object) -> "RoomShape | None":
        # Accept "LShape", "l-shape", "custom" and similar spellings
        if isinstance(value, str):
            key = value.replace("-", "").replace("_", "").replace(" ", "").lower()
            for member in cls:
                if member.value.replace("-", "").lower() == key:
                    return member
        return None


@dataclass(frozen=True)
class Point2D:
    """2D point on the plan. Negative values are valid (off-canvas drags)."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class HalfExtents:
    """Half width and half height of an axis-aligned bounding box."""

    half_width: float
    half_height: float

    def __post_init__(self) -> None:
        if self.half_width < 0 or self.half_height < 0:
            raise ValueError("Half extents must be non-negative")

    @property
    def width(self) -> float:
        return self.half_width * 2

    @property
    def height(self) -> float:
        return self.half_height * 2


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner.

    Attributes:
        left: Smallest x coordinate.
        top: Smallest y coordinate.
        width: Extent along x.
        height: Extent along y.
    """

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle size must be non-negative")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point2D:
        return Point2D(self.left + self.width / 2, self.top + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains_point(self, x: float, y: float) -> bool:
        """Inclusive containment test."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def contains_box(
        self, cx: float, cy: float, extents: HalfExtents, tolerance: float = 1e-9
    ) -> bool:
        """Check whether a box centred at (cx, cy) lies inside this rectangle."""
        return (
            cx - extents.half_width >= self.left - tolerance
            and cx + extents.half_width <= self.right + tolerance
            and cy - extents.half_height >= self.top - tolerance
            and cy + extents.half_height <= self.bottom + tolerance
        )

    def corners(self) -> tuple[Point2D, Point2D, Point2D, Point2D]:
        """Corners in clockwise order starting at the top-left."""
        return (
            Point2D(self.left, self.top),
            Point2D(self.right, self.top),
            Point2D(self.right, self.bottom),
            Point2D(self.left, self.bottom),
        )


@dataclass(frozen=True)
class Polygon:
    """Simple polygon given by its ordered vertices (closing edge implied)."""

    points: tuple[Point2D, ...]

    @property
    def is_usable(self) -> bool:
        return len(self.points) >= 3

    @property
    def signed_area(self) -> float:
        """Shoelace area; the sign depends on the winding order."""
        total = 0.0
        n = len(self.points)
        for i in range(n):
            a = self.points[i]
            b = self.points[(i + 1) % n]
            total += a.x * b.y - b.x * a.y
        return total / 2

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def bounds(self) -> Rect:
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    @property
    def centroid(self) -> Point2D:
        """Area centroid, or the vertex mean for a zero-area polygon."""
        n = len(self.points)
        signed = self.signed_area
        if abs(signed) < 1e-12:
            return Point2D(
                sum(p.x for p in self.points) / n,
                sum(p.y for p in self.points) / n,
            )
        cx = 0.0
        cy = 0.0
        for i in range(n):
            a = self.points[i]
            b = self.points[(i + 1) % n]
            cross = a.x * b.y - b.x * a.y
            cx += (a.x + b.x) * cross
            cy += (a.y + b.y) * cross
        factor = 1 / (6 * signed)
        return Point2D(cx * factor, cy * factor)

    def contains_point(self, x: float, y: float) -> bool:
        """Even-odd ray casting test.

        Points exactly on an edge may be reported either way.
        """
        inside = False
        n = len(self.points)
        j = n - 1
        for i in range(n):
            pi = self.points[i]
            pj = self.points[j]
            if (pi.y > y) != (pj.y > y):
                x_cross = (pj.x - pi.x) * (y - pi.y) / (pj.y - pi.y) + pi.x
                if x < x_cross:
                    inside = not inside
            j = i
        return inside
