"""Service factory for dependency injection."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from roomplan.application.catalog import FurnitureCatalog
from roomplan.application.config.schema import EditorSettings
from roomplan.application.library import DesignLibrary
from roomplan.application.session import LayoutSession
from roomplan.domain import LayoutSnapshot, PlacementClamp, Room, RoomGeometry, SceneMapper

DEFAULT_LIBRARY_DIR = Path("~/.roomplan/designs")


@dataclass
class ServiceFactory:
    """Creates and caches the stateless services; creates fresh sessions.

    Geometry, clamping, the catalog and the scene mapper hold no per-session
    state and are shared. Every call to ``create_session`` returns a new,
    independent LayoutSession.

    Attributes:
        settings: Editor settings applied to new sessions.
        library_dir: Directory of the design library.
    """

    settings: EditorSettings = field(default_factory=EditorSettings.from_env)
    library_dir: Path | None = None

    _geometry: RoomGeometry | None = field(default=None, init=False, repr=False)
    _clamp: PlacementClamp | None = field(default=None, init=False, repr=False)
    _catalog: FurnitureCatalog | None = field(default=None, init=False, repr=False)
    _scene_mapper: SceneMapper | None = field(default=None, init=False, repr=False)
    _library: DesignLibrary | None = field(default=None, init=False, repr=False)

    def get_geometry(self) -> RoomGeometry:
        if self._geometry is None:
            self._geometry = RoomGeometry()
        return self._geometry

    def get_placement_clamp(self) -> PlacementClamp:
        if self._clamp is None:
            self._clamp = PlacementClamp(self.get_geometry())
        return self._clamp

    def get_catalog(self) -> FurnitureCatalog:
        if self._catalog is None:
            self._catalog = FurnitureCatalog()
        return self._catalog

    def get_scene_mapper(self) -> SceneMapper:
        if self._scene_mapper is None:
            self._scene_mapper = SceneMapper(
                self.get_geometry(), type_heights=self.get_catalog().type_heights()
            )
        return self._scene_mapper

    def get_design_library(self) -> DesignLibrary:
        """Library rooted at ``library_dir``, ROOMPLAN_LIBRARY_DIR, or ~/.roomplan/designs."""
        if self._library is None:
            root = self.library_dir
            if root is None:
                root = Path(os.environ.get("ROOMPLAN_LIBRARY_DIR", DEFAULT_LIBRARY_DIR))
            self._library = DesignLibrary(root.expanduser())
        return self._library

    def create_session(
        self,
        room: Room | None = None,
        snapshot: LayoutSnapshot | None = None,
        settings: EditorSettings | None = None,
    ) -> LayoutSession:
        """Open a session on a room, or on a saved design.

        Raises:
            ValueError: If neither a room nor a snapshot is given.
        """
        if room is None and snapshot is None:
            raise ValueError("A session needs a room or a design snapshot")
        session = LayoutSession(
            room=room if room is not None else snapshot.room,
            settings=settings or self.settings,
            clamp=self.get_placement_clamp(),
            catalog=self.get_catalog(),
        )
        if snapshot is not None:
            session.load_design(snapshot)
        return session


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory
