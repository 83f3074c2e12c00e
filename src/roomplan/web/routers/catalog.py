"""Furniture catalog endpoints."""

from fastapi import APIRouter

from roomplan.web.dependencies import CatalogDep
from roomplan.web.schemas.responses import CatalogEntrySchema, CatalogSchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogSchema)
async def list_catalog(catalog: CatalogDep) -> CatalogSchema:
    """List the furniture types offered by the editor."""
    entries = [
        CatalogEntrySchema(
            type=entry.type,
            width=entry.width,
            height=entry.height,
            default_color=entry.default_color,
            vertical_height=entry.vertical_height,
        )
        for entry in catalog.list_entries()
    ]
    return CatalogSchema(entries=entries)
