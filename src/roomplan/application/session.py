"""Editing session facade.

A LayoutSession bundles one room, one furniture collection, one history and
the current selection. The UI holds a session for as long as the editor is
open and drives it through the commands below; nothing here is global.

Gesture model:
    Idle -> dragging (update_furniture / place_furniture, no commit)
         -> Idle (commit_history on release)
Adding and deleting are single actions and commit immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from roomplan.application.catalog import FurnitureCatalog
from roomplan.application.config.adapter import settings_to_snapper
from roomplan.application.config.schema import EditorSettings
from roomplan.application.furniture_store import FurnitureStore
from roomplan.application.history import HistoryManager
from roomplan.domain import (
    FurnitureItem,
    FurnitureTemplate,
    LayoutSnapshot,
    PlacementClamp,
    Point2D,
    Room,
)

logger = logging.getLogger(__name__)


class LayoutSession:
    """Commands and queries for one editing session.

    The furniture list is the observable state; the history is internal and
    only changes through ``commit_history``, ``add_furniture``,
    ``delete_furniture`` and ``load_design``.
    """

    def __init__(
        self,
        room: Room,
        settings: EditorSettings | None = None,
        clamp: PlacementClamp | None = None,
        catalog: FurnitureCatalog | None = None,
        store: FurnitureStore | None = None,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.catalog = catalog or FurnitureCatalog()
        self._room = room
        self._store = store or FurnitureStore(
            clamp=clamp, snapper=settings_to_snapper(self.settings)
        )
        self._history = HistoryManager(self._store.snapshot())
        self._selected_id: str | None = None

    # -- queries ---------------------------------------------------------

    @property
    def room(self) -> Room:
        return self._room

    @property
    def furniture(self) -> list[FurnitureItem]:
        return self._store.items

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected_item(self) -> FurnitureItem | None:
        if self._selected_id is None:
            return None
        return self._store.get(self._selected_id)

    @property
    def clamp(self) -> PlacementClamp:
        return self._store.clamp

    def get_furniture(self, item_id: str) -> FurnitureItem | None:
        return self._store.get(item_id)

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def snapshot_for_save(self) -> LayoutSnapshot:
        """Current room and furniture, copied, for the persistence layer."""
        return LayoutSnapshot(room=self._room, furniture=self._store.snapshot())

    # -- commands --------------------------------------------------------

    def add_furniture(self, template: FurnitureTemplate | str) -> FurnitureItem:
        """Add an item at the room centroid, select it and commit.

        Args:
            template: A template, or the name of a catalog type.

        Raises:
            CatalogItemNotFoundError: If a type name is not in the catalog.
        """
        if isinstance(template, str):
            template = self.catalog.get(template).to_template()
        item = self._store.add(template, self._room)
        self._selected_id = item.id
        self.commit_history()
        return item

    def update_furniture(
        self,
        item_id: str,
        changes: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> None:
        """Transient field update; no history entry. Unknown ids are ignored."""
        merged = {**(changes or {}), **fields}
        self._store.update(item_id, merged)

    def place_furniture(self, item_id: str, x: float, y: float) -> Point2D | None:
        """Transient move to a snapped and clamped centre.

        Returns:
            The centre actually applied, or None for an unknown id.
        """
        return self._store.apply_placement(item_id, x, y, self._room)

    def commit_history(self) -> None:
        """Checkpoint the current furniture as one undoable step."""
        self._history.commit(self._store.snapshot())

    def delete_furniture(self, item_id: str) -> None:
        """Remove an item and commit. Unknown ids are ignored entirely."""
        if item_id not in self._store:
            return
        self._store.remove(item_id)
        if self._selected_id == item_id:
            self._selected_id = None
        self.commit_history()

    def select(self, item_id: str | None) -> None:
        """Focus an item, or clear focus with None. Unknown ids are ignored."""
        if item_id is None or item_id in self._store:
            self._selected_id = item_id

    def undo(self) -> bool:
        """Restore the previous entry and clear selection.

        Returns:
            True if anything changed.
        """
        snapshot = self._history.undo()
        if snapshot is None:
            return False
        self._store.restore(snapshot)
        self._selected_id = None
        return True

    def redo(self) -> bool:
        """Restore the next entry and clear selection.

        Returns:
            True if anything changed.
        """
        snapshot = self._history.redo()
        if snapshot is None:
            return False
        self._store.restore(snapshot)
        self._selected_id = None
        return True

    def set_room(self, room: Room) -> None:
        """Replace the room wholesale. Furniture and history are kept."""
        self._room = room
        logger.debug(f"Room replaced: {room.shape.value} {room.width}m x {room.length}m")

    def load_design(self, snapshot: LayoutSnapshot) -> None:
        """Replace room, furniture and history with a saved design.

        The previous design's history is discarded.
        """
        self._room = snapshot.room
        self._store.restore(snapshot.furniture)
        self._history.reset(self._store.snapshot())
        self._selected_id = None
        logger.debug(f"Loaded design with {len(snapshot.furniture)} items")
