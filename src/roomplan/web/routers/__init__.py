"""API routers for the REST API."""

from roomplan.web.routers.catalog import router as catalog_router
from roomplan.web.routers.designs import router as designs_router
from roomplan.web.routers.sessions import router as sessions_router

__all__ = [
    "catalog_router",
    "designs_router",
    "sessions_router",
]
