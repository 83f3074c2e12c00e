"""Design library endpoints."""

from typing import Any

from fastapi import APIRouter, Response

from roomplan.application.config import config_to_snapshot, load_design_from_dict
from roomplan.web.dependencies import DesignLibraryDep, SessionRegistryDep
from roomplan.web.schemas.requests import SaveDesignRequest
from roomplan.web.schemas.responses import DesignListSchema, DesignSummarySchema

router = APIRouter(prefix="/designs", tags=["designs"])


@router.get("", response_model=DesignListSchema)
async def list_designs(library: DesignLibraryDep) -> DesignListSchema:
    """List saved designs, newest first."""
    return DesignListSchema(
        designs=[
            DesignSummarySchema(
                id=record.id,
                name=record.name,
                created_at=record.created_at,
                item_count=record.item_count,
            )
            for record in library.list_designs()
        ]
    )


@router.post("", status_code=201)
async def save_design(
    request: SaveDesignRequest,
    library: DesignLibraryDep,
    registry: SessionRegistryDep,
) -> dict[str, Any]:
    """Save an open session or a design document under a name.

    Saving under an existing name replaces that design and keeps its id.

    Raises:
        SessionNotFoundError: If ``session_id`` is unknown.
        ConfigError: If ``design`` is not a valid design document.
    """
    if request.session_id is not None:
        snapshot = registry.get(request.session_id).snapshot_for_save()
    else:
        snapshot = config_to_snapshot(load_design_from_dict(request.design))
    return library.save(request.name, snapshot).to_dict()


@router.get("/{design_id}")
async def get_design(design_id: str, library: DesignLibraryDep) -> dict[str, Any]:
    """Get a saved design in design document format.

    Raises:
        DesignNotFoundError: If the design does not exist.
    """
    return library.get(design_id).to_dict()


@router.delete("/{design_id}", status_code=204)
async def delete_design(design_id: str, library: DesignLibraryDep) -> Response:
    """Delete a saved design.

    Raises:
        DesignNotFoundError: If the design does not exist.
    """
    library.delete(design_id)
    return Response(status_code=204)
