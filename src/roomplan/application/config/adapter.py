"""Conversion between design configuration models and domain objects.

This is the only place that knows both the camelCase wire format and the
domain entities; everything else works with one or the other.
"""

from __future__ import annotations

from typing import Any

from roomplan.application.config.schema import (
    DesignConfiguration,
    EditorSettings,
    FurnitureConfig,
    RoomConfig,
)
from roomplan.domain import (
    FurnitureItem,
    GridSnap,
    LayoutSnapshot,
    Point2D,
    Room,
)


def config_to_room(config: RoomConfig) -> Room:
    polygon = None
    if config.custom_polygon is not None:
        polygon = tuple(Point2D(p.x, p.y) for p in config.custom_polygon)
    return Room(
        width=config.width,
        length=config.length,
        shape=config.shape,
        wall_color=config.wall_color,
        floor_color=config.floor_color,
        custom_polygon=polygon,
    )


def config_to_item(config: FurnitureConfig) -> FurnitureItem:
    return FurnitureItem(
        id=config.id,
        type=config.type,
        width=config.width,
        height=config.height,
        x=config.x,
        y=config.y,
        rotation=config.rotation,
        scale=config.scale,
        color=config.color,
        material=config.material,
        model_url=config.model_url,
        extras=dict(config.model_extra or {}),
    )


def config_to_snapshot(config: DesignConfiguration) -> LayoutSnapshot:
    """Convert a validated design document into a layout snapshot."""
    return LayoutSnapshot(
        room=config_to_room(config.room),
        furniture=tuple(config_to_item(item) for item in config.furniture),
    )


def settings_to_snapper(settings: EditorSettings) -> GridSnap | None:
    """Grid snapper for the settings, or None when snapping is off."""
    if not settings.snap_enabled:
        return None
    return GridSnap(resolution=settings.grid_size)


def room_to_dict(room: Room) -> dict[str, Any]:
    data: dict[str, Any] = {
        "width": room.width,
        "length": room.length,
        "shape": room.shape.value,
        "floorColor": room.floor_color,
        "wallColor": room.wall_color,
    }
    if room.custom_polygon is not None:
        data["customPolygon"] = [{"x": p.x, "y": p.y} for p in room.custom_polygon]
    return data


def item_to_dict(item: FurnitureItem) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": item.id,
        "type": item.type,
        "width": item.width,
        "height": item.height,
        "x": item.x,
        "y": item.y,
        "rotation": item.rotation,
        "scale": item.scale,
        "color": item.color,
    }
    if item.material is not None:
        data["material"] = item.material
    if item.model_url is not None:
        data["modelUrl"] = item.model_url
    for key, value in item.extras.items():
        data.setdefault(key, value)
    return data


def snapshot_to_dict(snapshot: LayoutSnapshot) -> dict[str, Any]:
    """Serialise a snapshot to the ``{room, furniture}`` wire format."""
    return {
        "room": room_to_dict(snapshot.room),
        "furniture": [item_to_dict(item) for item in snapshot.furniture],
    }
