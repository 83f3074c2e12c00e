"""File-backed library of saved designs.

Each design is one JSON document in the library directory, named after its
id. Saving under an existing name overwrites that design in place.
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from roomplan.application.config.adapter import config_to_snapshot, snapshot_to_dict
from roomplan.application.config.loader import ConfigError, load_design
from roomplan.domain import LayoutSnapshot

logger = logging.getLogger(__name__)


class DesignNotFoundError(Exception):
    """Raised when a design id is not in the library."""

    def __init__(self, design_id: str) -> None:
        self.design_id = design_id
        super().__init__(f"Design not found: {design_id}")


@dataclass(frozen=True)
class DesignRecord:
    """A saved design.

    Attributes:
        id: Library id.
        name: User-facing name, unique within the library.
        created_at: ISO timestamp of the last save.
        snapshot: Room and furniture.
    """

    id: str
    name: str
    created_at: str
    snapshot: LayoutSnapshot

    @property
    def item_count(self) -> int:
        return len(self.snapshot.furniture)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            **snapshot_to_dict(self.snapshot),
        }


class DesignLibrary:
    """Save, list, load and delete designs in a directory.

    Example:
        library = DesignLibrary(Path("~/.roomplan/designs").expanduser())
        record = library.save("Living room", session.snapshot_for_save())
        session.load_design(library.get(record.id).snapshot)
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def save(self, name: str, snapshot: LayoutSnapshot) -> DesignRecord:
        """Store a design, replacing any design with the same name."""
        existing = self._find_by_name(name)
        record = DesignRecord(
            id=existing.id if existing is not None else uuid.uuid4().hex,
            name=name,
            created_at=datetime.now(timezone.utc).isoformat(),
            snapshot=snapshot,
        )
        self.root.mkdir(parents=True, exist_ok=True)
        path = self._path_for(record.id)
        # Write to a temp file first so a failed write never truncates a design
        temp_path = path.with_suffix(".tmp")
        try:
            temp_path.write_text(json.dumps(record.to_dict(), indent=2), encoding="utf-8")
            temp_path.replace(path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        action = "Updated" if existing is not None else "Saved"
        logger.info(f"{action} design '{name}' ({record.id})")
        return record

    def list_designs(self) -> list[DesignRecord]:
        """All readable designs, most recently saved first.

        Files that fail to load are logged and skipped.
        """
        records = []
        if not self.root.is_dir():
            return records
        for path in sorted(self.root.glob("*.json")):
            try:
                records.append(self._read(path))
            except ConfigError as e:
                logger.warning(f"Skipping unreadable design file {path}: {e.error_type}")
        records.sort(key=lambda r: r.created_at, reverse=True)
        return records

    def get(self, design_id: str) -> DesignRecord:
        """Load one design.

        Raises:
            DesignNotFoundError: If no design has this id.
            ConfigError: If the stored file is corrupt.
        """
        path = self._path_for(design_id)
        if not path.is_file():
            raise DesignNotFoundError(design_id)
        return self._read(path)

    def delete(self, design_id: str) -> None:
        """Remove a design.

        Raises:
            DesignNotFoundError: If no design has this id.
        """
        path = self._path_for(design_id)
        if not path.is_file():
            raise DesignNotFoundError(design_id)
        path.unlink()
        logger.info(f"Deleted design {design_id}")

    def exists(self, design_id: str) -> bool:
        return self._path_for(design_id).is_file()

    def _find_by_name(self, name: str) -> DesignRecord | None:
        for record in self.list_designs():
            if record.name == name:
                return record
        return None

    def _path_for(self, design_id: str) -> Path:
        # Ids are used as file names; keep lookups inside the library
        if not design_id or "/" in design_id or "\\" in design_id or design_id.startswith("."):
            raise DesignNotFoundError(design_id)
        return self.root / f"{design_id}.json"

    def _read(self, path: Path) -> DesignRecord:
        # The file name is the id that get and delete resolve
        config = load_design(path)
        if config.id and config.id != path.stem:
            logger.warning(
                f"Design file {path.name} carries id {config.id!r}; using {path.stem!r}"
            )
        return DesignRecord(
            id=path.stem,
            name=config.name or path.stem,
            created_at=config.created_at or "",
            snapshot=config_to_snapshot(config),
        )
