"""Pydantic schemas for the REST API."""

from roomplan.web.schemas.requests import (
    AddFurnitureRequest,
    CreateSessionRequest,
    PlaceFurnitureRequest,
    SaveDesignRequest,
    SelectRequest,
    SetRoomRequest,
    UpdateFurnitureRequest,
)
from roomplan.web.schemas.responses import (
    CatalogEntrySchema,
    CatalogSchema,
    DesignListSchema,
    DesignSummarySchema,
    ErrorResponseSchema,
    FurnitureSchema,
    HistoryActionSchema,
    PlacementSchema,
    SessionSchema,
)

__all__ = [
    # Requests
    "AddFurnitureRequest",
    "CreateSessionRequest",
    "PlaceFurnitureRequest",
    "SaveDesignRequest",
    "SelectRequest",
    "SetRoomRequest",
    "UpdateFurnitureRequest",
    # Responses
    "CatalogEntrySchema",
    "CatalogSchema",
    "DesignListSchema",
    "DesignSummarySchema",
    "ErrorResponseSchema",
    "FurnitureSchema",
    "HistoryActionSchema",
    "PlacementSchema",
    "SessionSchema",
]
