"""Axis-aligned extents of rotated, scaled footprints."""

from __future__ import annotations

import math

from ..constants import CANVAS_SCALE
from ..entities import FurnitureItem
from ..value_objects import HalfExtents

__all__ = ["bounding_half_extents", "item_half_extents"]


def bounding_half_extents(
    width: float,
    height: float,
    scale: float = 1.0,
    rotation: float = 0.0,
    units_per_metre: float = CANVAS_SCALE,
) -> HalfExtents:
    """Half extents of the smallest axis-aligned box around a rotated rectangle.

    Args:
        width: Unscaled footprint width in metres.
        height: Unscaled footprint depth in metres.
        scale: Uniform size multiplier.
        rotation: Rotation in degrees; any value, including negatives.
        units_per_metre: Output units per metre (canvas units by default).

    Returns:
        HalfExtents in output units, centred on the origin.
    """
    iw = width * units_per_metre * scale
    ih = height * units_per_metre * scale
    theta = math.radians(rotation)
    cos_t = abs(math.cos(theta))
    sin_t = abs(math.sin(theta))
    return HalfExtents(
        half_width=(cos_t * iw + sin_t * ih) / 2,
        half_height=(sin_t * iw + cos_t * ih) / 2,
    )


def item_half_extents(
    item: FurnitureItem, units_per_metre: float = CANVAS_SCALE
) -> HalfExtents:
    """Half extents of a placed item at its current rotation and scale."""
    return bounding_half_extents(
        item.width, item.height, item.scale, item.rotation, units_per_metre
    )
