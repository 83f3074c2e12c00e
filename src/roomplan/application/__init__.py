"""Application layer - editing sessions and their collaborators."""

from .catalog import CatalogEntry, CatalogItemNotFoundError, FurnitureCatalog
from .factory import ServiceFactory, get_factory
from .furniture_store import FurnitureStore
from .history import HistoryManager
from .library import DesignLibrary, DesignNotFoundError, DesignRecord
from .session import LayoutSession

__all__ = [
    "CatalogEntry",
    "CatalogItemNotFoundError",
    "DesignLibrary",
    "DesignNotFoundError",
    "DesignRecord",
    "FurnitureCatalog",
    "FurnitureStore",
    "HistoryManager",
    "LayoutSession",
    "ServiceFactory",
    "get_factory",
]
