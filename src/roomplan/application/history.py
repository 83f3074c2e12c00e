"""Linear undo/redo history of furniture snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from roomplan.domain import FurnitureItem

logger = logging.getLogger(__name__)

Snapshot = tuple[FurnitureItem, ...]


def _freeze(items: Iterable[FurnitureItem]) -> Snapshot:
    return tuple(item.copy() for item in items)


class HistoryManager:
    """Undo/redo stack with a cursor.

    Entries after the cursor are redo entries and are discarded by the next
    commit. Every entry is an independent copy; nothing handed in or out
    aliases a stored entry. Navigating past either end is a no-op.

    Commits are meant to happen once per finished gesture (end of a drag,
    end of a slider change), not on every intermediate position.
    """

    def __init__(self, initial: Iterable[FurnitureItem] = ()) -> None:
        self._entries: list[Snapshot] = [_freeze(initial)]
        self._index = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        """Position of the current entry."""
        return self._index

    @property
    def current(self) -> Snapshot:
        return _freeze(self._entries[self._index])

    def commit(self, snapshot: Iterable[FurnitureItem]) -> None:
        """Record a new state, dropping any redo entries."""
        del self._entries[self._index + 1 :]
        self._entries.append(_freeze(snapshot))
        self._index = len(self._entries) - 1
        logger.debug(f"History commit: entry {self._index} of {len(self._entries)}")

    def undo(self) -> Snapshot | None:
        """Step back one entry and return it, or None at the first entry."""
        if not self.can_undo():
            return None
        self._index -= 1
        logger.debug(f"Undo to entry {self._index}")
        return self.current

    def redo(self) -> Snapshot | None:
        """Step forward one entry and return it, or None at the last entry."""
        if not self.can_redo():
            return None
        self._index += 1
        logger.debug(f"Redo to entry {self._index}")
        return self.current

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def reset(self, snapshot: Iterable[FurnitureItem] = ()) -> None:
        """Replace the whole history with a single entry.

        Used when a different design is loaded; earlier edits are not
        reachable afterwards.
        """
        self._entries = [_freeze(snapshot)]
        self._index = 0
        logger.debug("History reset")
