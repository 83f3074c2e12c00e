"""Pytest configuration and shared fixtures for room layout tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from roomplan.application.catalog import FurnitureCatalog
from roomplan.application.config import EditorSettings
from roomplan.application.session import LayoutSession
from roomplan.domain import (
    FurnitureItem,
    PlacementClamp,
    Point2D,
    Room,
    RoomGeometry,
    RoomShape,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that drive the CLI or REST API")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Geometry fixtures
# =============================================================================


@pytest.fixture
def geometry() -> RoomGeometry:
    return RoomGeometry()


@pytest.fixture
def clamp(geometry: RoomGeometry) -> PlacementClamp:
    return PlacementClamp(geometry)


@pytest.fixture
def rect_room() -> Room:
    """4m x 3m rectangle: floor spans x 40..360, y 40..280."""
    return Room(width=4, length=3, shape=RoomShape.RECTANGLE)


@pytest.fixture
def l_room() -> Room:
    """6m x 5m L-shape: main bar y 40..280, wing x 40..280, y 280..440."""
    return Room(width=6, length=5, shape=RoomShape.L_SHAPE)


@pytest.fixture
def square_polygon_room() -> Room:
    """Custom room whose outline is a 400 x 400 square at the origin."""
    return Room(
        width=5,
        length=5,
        shape=RoomShape.CUSTOM,
        custom_polygon=(
            Point2D(0, 0),
            Point2D(400, 0),
            Point2D(400, 400),
            Point2D(0, 400),
        ),
    )


@pytest.fixture
def make_item() -> Callable[..., FurnitureItem]:
    """Factory for furniture items; defaults to a 0.6m chair at the origin."""

    def _make(**overrides: Any) -> FurnitureItem:
        values: dict[str, Any] = {
            "id": "item-1",
            "type": "Chair",
            "width": 0.6,
            "height": 0.6,
        }
        values.update(overrides)
        return FurnitureItem(**values)

    return _make


# =============================================================================
# Session fixtures
# =============================================================================


@pytest.fixture
def session(rect_room: Room) -> LayoutSession:
    """Session on the 4m x 3m rectangle with snapping off."""
    return LayoutSession(
        room=rect_room, settings=EditorSettings(snap_enabled=False), catalog=FurnitureCatalog()
    )


# =============================================================================
# Design document fixtures
# =============================================================================


@pytest.fixture
def design_data() -> dict[str, Any]:
    """A valid design document with one chair inside the room."""
    return {
        "room": {
            "width": 4,
            "length": 3,
            "shape": "Rectangle",
            "floorColor": "#D2B48C",
            "wallColor": "#F5F5DC",
        },
        "furniture": [
            {
                "id": "chair-1",
                "type": "Chair",
                "width": 0.6,
                "height": 0.6,
                "x": 200,
                "y": 160,
                "rotation": 0,
                "scale": 1,
                "color": "#8B7355",
            }
        ],
    }


@pytest.fixture
def write_design(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write a design document (or raw text) to a file in tmp_path."""

    def _write(data: Any, name: str = "design.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
