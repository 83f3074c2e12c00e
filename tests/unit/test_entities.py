"""Unit tests for rooms, furniture items and layout snapshots."""

import pytest

from roomplan.domain.entities import (
    FurnitureItem,
    FurnitureTemplate,
    LayoutSnapshot,
    Room,
    normalize_rotation,
)
from roomplan.domain.value_objects import Point2D, RoomShape


class TestRoom:
    """Tests for Room."""

    def test_defaults(self) -> None:
        room = Room(width=4, length=3)
        assert room.shape == RoomShape.RECTANGLE
        assert room.width_units == 320
        assert room.length_units == 240
        assert room.polygon is None

    @pytest.mark.parametrize("width,length", [(0, 3), (4, 0), (-1, 3)])
    def test_non_positive_dimensions_rejected(self, width: float, length: float) -> None:
        with pytest.raises(ValueError, match="positive"):
            Room(width=width, length=length)

    def test_shape_coerced_from_string(self) -> None:
        assert Room(width=4, length=3, shape="LShape").shape == RoomShape.L_SHAPE

    def test_polygon_points_coerced_from_pairs(self) -> None:
        room = Room(
            width=4, length=3, shape=RoomShape.CUSTOM, custom_polygon=[(0, 0), (10, 0), (0, 10)]
        )
        assert room.custom_polygon == (Point2D(0, 0), Point2D(10, 0), Point2D(0, 10))
        assert room.polygon is not None

    def test_custom_with_two_points_is_degenerate(self) -> None:
        room = Room(width=4, length=3, shape=RoomShape.CUSTOM, custom_polygon=[(0, 0), (1, 1)])
        assert room.is_degenerate
        assert room.polygon is None

    def test_polygon_ignored_for_non_custom_shapes(self) -> None:
        room = Room(width=4, length=3, custom_polygon=[(0, 0), (10, 0), (0, 10)])
        assert room.polygon is None
        assert not room.is_degenerate

    def test_with_changes_returns_new_room(self) -> None:
        room = Room(width=4, length=3)
        bigger = room.with_changes(width=6)
        assert bigger.width == 6
        assert room.width == 4


class TestFurnitureItem:
    """Tests for FurnitureItem."""

    def test_zero_size_allowed(self) -> None:
        item = FurnitureItem(id="a", type="Rug", width=0, height=0)
        assert item.width == 0

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            FurnitureItem(id="a", type="Chair", width=-0.1, height=0.6)

    def test_non_positive_scale_rejected(self) -> None:
        with pytest.raises(ValueError):
            FurnitureItem(id="a", type="Chair", width=0.6, height=0.6, scale=0)

    def test_copy_is_independent(self) -> None:
        item = FurnitureItem(id="a", type="Chair", width=0.6, height=0.6, extras={"tags": ["x"]})
        clone = item.copy()
        clone.x = 99
        clone.extras["tags"].append("y")
        assert item.x == 0
        assert item.extras == {"tags": ["x"]}

    def test_custom_model_flag(self) -> None:
        item = FurnitureItem(id="a", type="Custom Model", width=1, height=1)
        assert item.is_custom_model
        assert item.center == Point2D(0, 0)


class TestFurnitureTemplate:
    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            FurnitureTemplate(type="Chair", width=0.6, height=-1)


class TestLayoutSnapshot:
    def test_snapshot_copies_items(self) -> None:
        item = FurnitureItem(id="a", type="Chair", width=0.6, height=0.6)
        snapshot = LayoutSnapshot(room=Room(width=4, length=3), furniture=(item,))
        item.x = 500
        assert snapshot.furniture[0].x == 0
        assert snapshot.furniture[0] is not item


class TestNormalizeRotation:
    @pytest.mark.parametrize(
        "degrees,expected", [(0, 0), (360, 0), (450, 90), (-90, 270), (720.5, 0.5)]
    )
    def test_wraps_into_range(self, degrees: float, expected: float) -> None:
        assert normalize_rotation(degrees) == pytest.approx(expected)
