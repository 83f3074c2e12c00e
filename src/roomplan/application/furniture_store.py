"""The live collection of placed furniture."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import fields, replace
from typing import Any

from roomplan.domain import (
    FurnitureItem,
    FurnitureTemplate,
    GridSnap,
    PlacementClamp,
    Point2D,
    Room,
    normalize_rotation,
)

logger = logging.getLogger(__name__)

# Fields an update may change; "id" is fixed for the item's lifetime
UPDATABLE_FIELDS: frozenset[str] = frozenset(
    f.name for f in fields(FurnitureItem) if f.name not in ("id", "extras")
)


def _new_id() -> str:
    return uuid.uuid4().hex


class FurnitureStore:
    """Owns the furniture list and its CRUD operations.

    Items keep insertion order. Lookups by an unknown id are no-ops so that
    optimistic updates from an interactive drag never fail. Reads hand out
    copies; the only way to change an item is through this store.

    Attributes:
        clamp: Placement rules applied by ``apply_placement``.
        snapper: Optional grid snapping applied before clamping.
    """

    def __init__(
        self,
        clamp: PlacementClamp | None = None,
        snapper: GridSnap | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.clamp = clamp or PlacementClamp()
        self.snapper = snapper
        self._id_factory = id_factory or _new_id
        self._items: list[FurnitureItem] = []
        self._issued_ids: set[str] = set()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[FurnitureItem]:
        return iter(self.items)

    def __contains__(self, item_id: object) -> bool:
        return self._find(item_id) is not None

    @property
    def items(self) -> list[FurnitureItem]:
        """Copies of the items in insertion order."""
        return [item.copy() for item in self._items]

    def get(self, item_id: str) -> FurnitureItem | None:
        item = self._find(item_id)
        return item.copy() if item is not None else None

    def add(self, template: FurnitureTemplate, room: Room) -> FurnitureItem:
        """Create an item from a template at the room's rectangle centroid.

        The centroid ignores L-shape and custom outlines. The new item gets a
        fresh id, rotation 0 and scale 1.

        Returns:
            A copy of the new item.
        """
        centre = self.clamp.geometry.centroid(room)
        item = FurnitureItem(
            id=self._next_id(),
            type=template.type,
            width=template.width,
            height=template.height,
            x=centre.x,
            y=centre.y,
            rotation=0.0,
            scale=1.0,
            color=template.color,
            material=template.material,
            model_url=template.model_url,
            extras=dict(template.extras),
        )
        self._items.append(item)
        logger.debug(f"Added {item.type} {item.id} at ({item.x}, {item.y})")
        return item.copy()

    def update(self, item_id: str, changes: Mapping[str, Any]) -> None:
        """Merge field changes into an item; unknown ids are ignored.

        Keys outside the item's own fields are kept as cosmetic extras.
        Rotation is normalised to [0, 360).

        Raises:
            ValueError: If the merged values are impossible (e.g. scale <= 0).
        """
        index = self._index_of(item_id)
        if index is None:
            logger.debug(f"Ignoring update for unknown item {item_id}")
            return
        current = self._items[index]
        known = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        extras = {
            k: v for k, v in changes.items() if k not in UPDATABLE_FIELDS and k != "id"
        }
        if "rotation" in known:
            known["rotation"] = normalize_rotation(float(known["rotation"]))
        merged_extras = {**current.extras, **extras}
        self._items[index] = replace(current, extras=merged_extras, **known)

    def remove(self, item_id: str) -> None:
        """Delete an item; unknown ids are ignored."""
        index = self._index_of(item_id)
        if index is None:
            return
        removed = self._items.pop(index)
        logger.debug(f"Removed {removed.type} {removed.id}")

    def apply_placement(
        self, item_id: str, x: float, y: float, room: Room
    ) -> Point2D | None:
        """Snap (if enabled), clamp and store a candidate centre.

        Returns:
            The final centre, or None when the id is unknown.
        """
        item = self._find(item_id)
        if item is None:
            return None
        candidate = Point2D(x, y)
        if self.snapper is not None:
            candidate = self.snapper.snap_point(x, y)
        final = self.clamp.clamp(item, candidate.x, candidate.y, room)
        self.update(item_id, {"x": final.x, "y": final.y})
        logger.debug(f"Placed {item_id}: requested ({x}, {y}) -> ({final.x}, {final.y})")
        return final

    def snapshot(self) -> tuple[FurnitureItem, ...]:
        """Independent copies of every item, in order."""
        return tuple(item.copy() for item in self._items)

    def restore(self, items: Iterable[FurnitureItem]) -> None:
        """Replace the collection with copies of ``items``."""
        self._items = [item.copy() for item in items]
        self._issued_ids.update(item.id for item in self._items)

    def _next_id(self) -> str:
        while True:
            candidate = self._id_factory()
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def _index_of(self, item_id: object) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _find(self, item_id: object) -> FurnitureItem | None:
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None
