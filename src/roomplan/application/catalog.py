"""Built-in furniture catalog.

This module provides the FurnitureCatalog: the library of furniture types the
editor offers, with nominal footprints, default colours and the vertical
heights used by the 3D scene.
"""

from __future__ import annotations

from dataclasses import dataclass

from roomplan.domain import FurnitureTemplate


class CatalogItemNotFoundError(Exception):
    """Raised when a requested furniture type is not in the catalog."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Furniture type not found: {type_name}")


@dataclass(frozen=True)
class CatalogEntry:
    """A furniture type offered by the editor.

    Attributes:
        type: Display name and furniture type.
        width: Footprint width in metres.
        height: Footprint depth in metres.
        default_color: Colour given to new items of this type.
        vertical_height: Height above the floor in metres (3D only).
    """

    type: str
    width: float
    height: float
    default_color: str
    vertical_height: float

    def to_template(self) -> FurnitureTemplate:
        return FurnitureTemplate(
            type=self.type,
            width=self.width,
            height=self.height,
            color=self.default_color,
        )


FURNITURE_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry("Chair", 0.6, 0.6, "#8B7355", 0.9),
    CatalogEntry("Dining Table", 1.6, 0.9, "#6B4C2A", 0.75),
    CatalogEntry("Sofa", 2.0, 0.9, "#708090", 0.85),
    CatalogEntry("Bed", 2.0, 1.6, "#DEB887", 0.55),
    CatalogEntry("Side Table", 0.5, 0.5, "#A0785A", 0.55),
    CatalogEntry("Wardrobe", 1.8, 0.6, "#5C4033", 1.85),
    CatalogEntry("Desk", 1.2, 0.6, "#8B8B6B", 0.75),
    CatalogEntry("Bookshelf", 1.0, 0.3, "#7B6B3A", 1.8),
)


class FurnitureCatalog:
    """Lookup over the furniture catalog.

    Example:
        catalog = FurnitureCatalog()
        chair = catalog.get("Chair")
        template = chair.to_template()
    """

    def __init__(self, entries: tuple[CatalogEntry, ...] = FURNITURE_CATALOG) -> None:
        self._entries = {entry.type: entry for entry in entries}

    def list_entries(self) -> list[CatalogEntry]:
        return list(self._entries.values())

    def get(self, type_name: str) -> CatalogEntry:
        """Get a catalog entry by type name.

        Raises:
            CatalogItemNotFoundError: If the type is not in the catalog.
        """
        try:
            return self._entries[type_name]
        except KeyError:
            raise CatalogItemNotFoundError(type_name) from None

    def exists(self, type_name: str) -> bool:
        return type_name in self._entries

    def type_heights(self) -> dict[str, float]:
        """Vertical height per type, for the scene mapper."""
        return {name: entry.vertical_height for name, entry in self._entries.items()}
