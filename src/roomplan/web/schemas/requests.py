"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from roomplan.application.config.schema import EditorSettings


class CreateSessionRequest(BaseModel):
    """Request for opening an editing session.

    Exactly one of ``room``, ``design`` or ``design_id`` must be given.
    """

    room: dict[str, Any] | None = Field(
        default=None, description="Room configuration (width, length, shape, ...)"
    )
    design: dict[str, Any] | None = Field(
        default=None, description="Full design document with room and furniture"
    )
    design_id: str | None = Field(
        default=None, description="Id of a design in the library"
    )
    settings: EditorSettings | None = Field(
        default=None, description="Editor settings; server defaults when omitted"
    )

    @model_validator(mode="after")
    def check_single_source(self) -> "CreateSessionRequest":
        given = [v for v in (self.room, self.design, self.design_id) if v is not None]
        if len(given) != 1:
            raise ValueError("Give exactly one of room, design or design_id")
        return self


class AddFurnitureRequest(BaseModel):
    """Request for adding an item.

    With only ``type`` the catalog entry of that name is used. Giving both
    ``width`` and ``height`` adds an arbitrary item (e.g. a custom model).
    """

    type: str = Field(..., min_length=1, description="Furniture type")
    width: float | None = Field(default=None, ge=0, description="Width in metres")
    height: float | None = Field(default=None, ge=0, description="Depth in metres")
    color: str | None = Field(default=None, description="Colour override")
    material: str | None = Field(default=None, description="Material name")
    model_url: str | None = Field(default=None, description="Custom mesh location")

    @model_validator(mode="after")
    def check_size(self) -> "AddFurnitureRequest":
        if (self.width is None) != (self.height is None):
            raise ValueError("Give both width and height, or neither")
        return self


class UpdateFurnitureRequest(BaseModel):
    """Field changes merged into an item without a history entry.

    Only the fields sent are applied. Unknown keys are kept as cosmetic
    extras on the item. Geometry fields may not be null; colour, material
    and model location may be cleared with null.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str | None = Field(default=None, min_length=1, description="Furniture type")
    x: float | None = Field(default=None, description="Centre x in canvas units")
    y: float | None = Field(default=None, description="Centre y in canvas units")
    width: float | None = Field(default=None, ge=0, description="Width in metres")
    height: float | None = Field(default=None, ge=0, description="Depth in metres")
    rotation: float | None = Field(default=None, description="Rotation in degrees")
    scale: float | None = Field(default=None, gt=0, description="Size multiplier")
    color: str | None = Field(default=None, description="Colour")
    material: str | None = Field(default=None, description="Material name")
    model_url: str | None = Field(
        default=None, alias="modelUrl", description="Custom mesh location"
    )

    @model_validator(mode="after")
    def check_required_not_null(self) -> "UpdateFurnitureRequest":
        for name in ("type", "x", "y", "width", "height", "rotation", "scale"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self

    def to_changes(self) -> dict[str, Any]:
        """Sent fields keyed by item attribute name, extras included."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class PlaceFurnitureRequest(BaseModel):
    """Request for moving an item to a candidate centre."""

    x: float = Field(..., description="Candidate centre x in canvas units")
    y: float = Field(..., description="Candidate centre y in canvas units")


class SelectRequest(BaseModel):
    """Request for changing the selection."""

    item_id: str | None = Field(default=None, description="Item to focus, or null")


class SetRoomRequest(BaseModel):
    """Request for replacing a session's room."""

    room: dict[str, Any] = Field(..., description="Room configuration")


class SaveDesignRequest(BaseModel):
    """Request for saving a design to the library.

    Exactly one of ``session_id`` or ``design`` must be given.
    """

    name: str = Field(..., min_length=1, description="Design name")
    session_id: str | None = Field(default=None, description="Session to save")
    design: dict[str, Any] | None = Field(
        default=None, description="Design document to save"
    )

    @model_validator(mode="after")
    def check_single_source(self) -> "SaveDesignRequest":
        if (self.session_id is None) == (self.design is None):
            raise ValueError("Give exactly one of session_id or design")
        return self
