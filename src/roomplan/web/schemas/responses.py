"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class SessionSchema(BaseModel):
    """State of an editing session.

    ``room`` and ``furniture`` use the camelCase design document format.
    """

    session_id: str = Field(..., description="Session id")
    room: dict[str, Any] = Field(..., description="Room configuration")
    furniture: list[dict[str, Any]] = Field(
        default_factory=list, description="Placed items in insertion order"
    )
    selected_id: str | None = Field(default=None, description="Focused item id")
    can_undo: bool = Field(..., description="Whether undo would change anything")
    can_redo: bool = Field(..., description="Whether redo would change anything")
    floor_area_m2: float = Field(..., description="Floor area in square metres")


class FurnitureSchema(BaseModel):
    """A single placed item."""

    item: dict[str, Any] = Field(..., description="Item in design document format")
    contained: bool = Field(..., description="Whether the item lies on the floor")


class PlacementSchema(BaseModel):
    """Outcome of a placement."""

    applied: bool = Field(..., description="False when the item id is unknown")
    x: float | None = Field(default=None, description="Final centre x")
    y: float | None = Field(default=None, description="Final centre y")


class HistoryActionSchema(BaseModel):
    """Outcome of undo or redo."""

    changed: bool = Field(..., description="Whether the furniture changed")
    session: SessionSchema = Field(..., description="Session state afterwards")


class DesignSummarySchema(BaseModel):
    """A design in the library listing."""

    id: str = Field(..., description="Design id")
    name: str = Field(..., description="Design name")
    created_at: str = Field(..., description="ISO timestamp of the last save")
    item_count: int = Field(..., description="Number of placed items")


class DesignListSchema(BaseModel):
    """Response for listing designs."""

    designs: list[DesignSummarySchema] = Field(default_factory=list)


class CatalogEntrySchema(BaseModel):
    """A furniture type offered by the editor."""

    type: str = Field(..., description="Furniture type")
    width: float = Field(..., description="Footprint width in metres")
    height: float = Field(..., description="Footprint depth in metres")
    default_color: str = Field(..., description="Colour for new items")
    vertical_height: float = Field(..., description="Height above floor in metres")


class CatalogSchema(BaseModel):
    """Response for listing the catalog."""

    entries: list[CatalogEntrySchema] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional details")
