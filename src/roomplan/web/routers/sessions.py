"""Editing session endpoints.

A session mirrors one open editor: transient updates and placements change
the furniture without touching history; ``/commit`` checkpoints a finished
gesture. Adding and deleting commit on their own.
"""

from dataclasses import replace
from typing import Any

from fastapi import APIRouter, Response

from roomplan.application.config import (
    config_to_room,
    config_to_snapshot,
    item_to_dict,
    load_design_from_dict,
    room_to_dict,
)
from roomplan.application.factory import ServiceFactory
from roomplan.application.session import LayoutSession
from roomplan.domain import FurnitureTemplate, Room
from roomplan.web.dependencies import (
    CatalogDep,
    DesignLibraryDep,
    ServiceFactoryDep,
    SessionRegistryDep,
)
from roomplan.web.schemas.requests import (
    AddFurnitureRequest,
    CreateSessionRequest,
    PlaceFurnitureRequest,
    SelectRequest,
    SetRoomRequest,
    UpdateFurnitureRequest,
)
from roomplan.web.schemas.responses import (
    FurnitureSchema,
    HistoryActionSchema,
    PlacementSchema,
    SessionSchema,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _room_from_dict(data: dict[str, Any]) -> Room:
    # Validate through the document schema so errors carry "room.*" paths
    return config_to_room(load_design_from_dict({"room": data}).room)


def _session_schema(
    session_id: str, session: LayoutSession, factory: ServiceFactory
) -> SessionSchema:
    return SessionSchema(
        session_id=session_id,
        room=room_to_dict(session.room),
        furniture=[item_to_dict(item) for item in session.furniture],
        selected_id=session.selected_id,
        can_undo=session.can_undo(),
        can_redo=session.can_redo(),
        floor_area_m2=factory.get_geometry().floor_area_m2(session.room),
    )


@router.post("", response_model=SessionSchema, status_code=201)
async def create_session(
    request: CreateSessionRequest,
    factory: ServiceFactoryDep,
    registry: SessionRegistryDep,
    library: DesignLibraryDep,
) -> SessionSchema:
    """Open a session on a room, a design document or a saved design.

    Raises:
        ConfigError: If the room or design fails validation.
        DesignNotFoundError: If ``design_id`` is not in the library.
    """
    if request.room is not None:
        session = factory.create_session(
            room=_room_from_dict(request.room), settings=request.settings
        )
    else:
        if request.design is not None:
            snapshot = config_to_snapshot(load_design_from_dict(request.design))
        else:
            snapshot = library.get(request.design_id).snapshot
        session = factory.create_session(snapshot=snapshot, settings=request.settings)
    session_id = registry.add(session)
    return _session_schema(session_id, session, factory)


@router.get("/{session_id}", response_model=SessionSchema)
async def get_session(
    session_id: str, factory: ServiceFactoryDep, registry: SessionRegistryDep
) -> SessionSchema:
    """Get a session's room, furniture, selection and history flags."""
    return _session_schema(session_id, registry.get(session_id), factory)


@router.delete("/{session_id}", status_code=204)
async def close_session(session_id: str, registry: SessionRegistryDep) -> Response:
    """Close a session and discard its history."""
    registry.remove(session_id)
    return Response(status_code=204)


@router.put("/{session_id}/room", response_model=SessionSchema)
async def set_room(
    session_id: str,
    request: SetRoomRequest,
    factory: ServiceFactoryDep,
    registry: SessionRegistryDep,
) -> SessionSchema:
    """Replace the room. Furniture and history are kept."""
    session = registry.get(session_id)
    session.set_room(_room_from_dict(request.room))
    return _session_schema(session_id, session, factory)


@router.post("/{session_id}/furniture", response_model=FurnitureSchema, status_code=201)
async def add_furniture(
    session_id: str,
    request: AddFurnitureRequest,
    registry: SessionRegistryDep,
    catalog: CatalogDep,
) -> FurnitureSchema:
    """Add an item at the room centre, select it and commit.

    Raises:
        CatalogItemNotFoundError: If only a type is given and it is not in
            the catalog.
    """
    session = registry.get(session_id)
    overrides = {
        key: value
        for key, value in (
            ("color", request.color),
            ("material", request.material),
            ("model_url", request.model_url),
        )
        if value is not None
    }
    if request.width is None:
        template = replace(catalog.get(request.type).to_template(), **overrides)
    else:
        template = FurnitureTemplate(
            type=request.type, width=request.width, height=request.height, **overrides
        )
    item = session.add_furniture(template)
    return FurnitureSchema(
        item=item_to_dict(item), contained=session.clamp.is_contained(item, session.room)
    )


@router.patch("/{session_id}/furniture/{item_id}", response_model=SessionSchema)
async def update_furniture(
    session_id: str,
    item_id: str,
    factory: ServiceFactoryDep,
    registry: SessionRegistryDep,
    request: UpdateFurnitureRequest,
) -> SessionSchema:
    """Merge field changes into an item without a history entry.

    Unknown item ids are ignored. ``modelUrl`` and ``model_url`` are both
    accepted.
    """
    session = registry.get(session_id)
    session.update_furniture(item_id, request.to_changes())
    return _session_schema(session_id, session, factory)


@router.post("/{session_id}/furniture/{item_id}/place", response_model=PlacementSchema)
async def place_furniture(
    session_id: str,
    item_id: str,
    request: PlaceFurnitureRequest,
    registry: SessionRegistryDep,
) -> PlacementSchema:
    """Move an item to a snapped and clamped centre without a history entry."""
    result = registry.get(session_id).place_furniture(item_id, request.x, request.y)
    if result is None:
        return PlacementSchema(applied=False)
    return PlacementSchema(applied=True, x=result.x, y=result.y)


@router.delete("/{session_id}/furniture/{item_id}", response_model=SessionSchema)
async def delete_furniture(
    session_id: str,
    item_id: str,
    factory: ServiceFactoryDep,
    registry: SessionRegistryDep,
) -> SessionSchema:
    """Remove an item and commit. Unknown item ids are ignored."""
    session = registry.get(session_id)
    session.delete_furniture(item_id)
    return _session_schema(session_id, session, factory)


@router.post("/{session_id}/select", response_model=SessionSchema)
async def select_furniture(
    session_id: str,
    request: SelectRequest,
    factory: ServiceFactoryDep,
    registry: SessionRegistryDep,
) -> SessionSchema:
    """Focus an item or clear the focus."""
    session = registry.get(session_id)
    session.select(request.item_id)
    return _session_schema(session_id, session, factory)


@router.post("/{session_id}/commit", response_model=SessionSchema)
async def commit_history(
    session_id: str, factory: ServiceFactoryDep, registry: SessionRegistryDep
) -> SessionSchema:
    """Checkpoint the current furniture as one undoable step."""
    session = registry.get(session_id)
    session.commit_history()
    return _session_schema(session_id, session, factory)


@router.post("/{session_id}/undo", response_model=HistoryActionSchema)
async def undo(
    session_id: str, factory: ServiceFactoryDep, registry: SessionRegistryDep
) -> HistoryActionSchema:
    """Step back one history entry."""
    session = registry.get(session_id)
    changed = session.undo()
    return HistoryActionSchema(
        changed=changed, session=_session_schema(session_id, session, factory)
    )


@router.post("/{session_id}/redo", response_model=HistoryActionSchema)
async def redo(
    session_id: str, factory: ServiceFactoryDep, registry: SessionRegistryDep
) -> HistoryActionSchema:
    """Step forward one history entry."""
    session = registry.get(session_id)
    changed = session.redo()
    return HistoryActionSchema(
        changed=changed, session=_session_schema(session_id, session, factory)
    )


@router.get("/{session_id}/scene")
async def get_scene(
    session_id: str, factory: ServiceFactoryDep, registry: SessionRegistryDep
) -> dict[str, Any]:
    """3D scene description of the session's current layout."""
    session = registry.get(session_id)
    scene = factory.get_scene_mapper().build_scene(session.room, session.furniture)
    return scene.to_dict()
