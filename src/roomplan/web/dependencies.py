"""FastAPI dependency injection for layout services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from roomplan.application.catalog import FurnitureCatalog
from roomplan.application.factory import ServiceFactory, get_factory
from roomplan.application.library import DesignLibrary
from roomplan.web.registry import SessionRegistry


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


@lru_cache(maxsize=1)
def get_session_registry() -> SessionRegistry:
    """Get the process-wide session registry."""
    return SessionRegistry()


def get_design_library(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> DesignLibrary:
    """Dependency for DesignLibrary."""
    return factory.get_design_library()


def get_catalog(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> FurnitureCatalog:
    """Dependency for FurnitureCatalog."""
    return factory.get_catalog()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
SessionRegistryDep = Annotated[SessionRegistry, Depends(get_session_registry)]
DesignLibraryDep = Annotated[DesignLibrary, Depends(get_design_library)]
CatalogDep = Annotated[FurnitureCatalog, Depends(get_catalog)]
