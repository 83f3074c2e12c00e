"""Pydantic models for design documents and editor settings.

Field aliases follow the camelCase wire format exchanged with persistence
and rendering (``wallColor``, ``customPolygon``, ``modelUrl``); snake_case
names are accepted as well.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from roomplan.domain.constants import (
    DEFAULT_FLOOR_COLOR,
    DEFAULT_WALL_COLOR,
    MAX_ROOM_DIMENSION,
    MIN_ROOM_DIMENSION,
)
from roomplan.domain.value_objects import RoomShape

# Version 1.0: room, furniture and optional library metadata
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PointConfig(BaseModel):
    """A polygon vertex in canvas units, given as {x, y} or [x, y]."""

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("Polygon points must have exactly two coordinates")
            return {"x": data[0], "y": data[1]}
        return data


class RoomConfig(BaseModel):
    """Room configuration.

    Attributes:
        width: Room width in metres, 1 to 20.
        length: Room length in metres, 1 to 20.
        shape: Floor shape.
        wall_color: Wall colour (not interpreted).
        floor_color: Floor colour (not interpreted).
        custom_polygon: Outline for custom rooms in canvas units.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    width: float = Field(ge=MIN_ROOM_DIMENSION, le=MAX_ROOM_DIMENSION)
    length: float = Field(ge=MIN_ROOM_DIMENSION, le=MAX_ROOM_DIMENSION)
    shape: RoomShape = RoomShape.RECTANGLE
    wall_color: str = Field(default=DEFAULT_WALL_COLOR, alias="wallColor")
    floor_color: str = Field(default=DEFAULT_FLOOR_COLOR, alias="floorColor")
    custom_polygon: list[PointConfig] | None = Field(
        default=None, alias="customPolygon"
    )


class FurnitureConfig(BaseModel):
    """A placed furniture record.

    Unknown keys are cosmetic and pass through untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    type: str = Field(min_length=1)
    width: float = Field(ge=0, description="Footprint width in metres")
    height: float = Field(ge=0, description="Footprint depth in metres")
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    scale: float = Field(default=1.0, gt=0)
    color: str | None = None
    material: str | None = None
    model_url: str | None = Field(default=None, alias="modelUrl")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        # Older records use numeric timestamps as ids
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class DesignConfiguration(BaseModel):
    """Root model of a design document.

    Attributes:
        schema_version: Document version.
        id: Library id, when the document came from a design library.
        name: Design name, when saved.
        created_at: ISO timestamp of the last save.
        room: Room configuration.
        furniture: Placed furniture, in insertion order.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    schema_version: str = Field(default="1.0", alias="schemaVersion")
    id: str | None = None
    name: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    room: RoomConfig
    furniture: list[FurnitureConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def check_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version {value!r} (supported: {supported})")
        return value

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def check_unique_ids(self) -> "DesignConfiguration":
        seen: set[str] = set()
        for item in self.furniture:
            if item.id in seen:
                raise ValueError(f"Duplicate furniture id: {item.id}")
            seen.add(item.id)
        return self


class EditorSettings(BaseModel):
    """Interactive editor options.

    Attributes:
        snap_enabled: Snap candidate positions to the grid before clamping.
        grid_size: Grid spacing in canvas units (20 = 0.25 m).
    """

    model_config = ConfigDict(extra="forbid")

    snap_enabled: bool = False
    grid_size: float = Field(default=20.0, gt=0)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "EditorSettings":
        """Build settings from ROOMPLAN_SNAP and ROOMPLAN_GRID_SIZE."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if "ROOMPLAN_SNAP" in env:
            values["snap_enabled"] = env["ROOMPLAN_SNAP"].strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )
        if "ROOMPLAN_GRID_SIZE" in env:
            values["grid_size"] = env["ROOMPLAN_GRID_SIZE"]
        return cls.model_validate(values)
