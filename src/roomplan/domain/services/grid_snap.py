"""Grid quantisation for candidate positions.

Snapping happens before clamping: a snapped point that is then clamped always
stays inside the room, while a clamped point that is then snapped may not.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..value_objects import Point2D

__all__ = ["GridSnap", "snap"]


def snap(value: float, resolution: float) -> float:
    """Round a coordinate to the nearest multiple of ``resolution``.

    Halves round up (towards +inf). A non-positive resolution disables
    snapping and returns the value unchanged.
    """
    if resolution <= 0:
        return value
    return math.floor(value / resolution + 0.5) * resolution


@dataclass(frozen=True)
class GridSnap:
    """Snapping configuration for the plan.

    Attributes:
        resolution: Grid spacing in canvas units.
        enabled: When False, points pass through untouched.
    """

    resolution: float = 20.0
    enabled: bool = True

    def snap_point(self, x: float, y: float) -> Point2D:
        if not self.enabled:
            return Point2D(x, y)
        return Point2D(snap(x, self.resolution), snap(y, self.resolution))
