"""Unit tests for the 2D to 3D scene mapping."""

import math

import pytest

from roomplan.application.catalog import FurnitureCatalog
from roomplan.domain import FurnitureItem, Room, RoomGeometry, SceneMapper
from roomplan.domain.services.scene_mapper import FloorSlab


@pytest.fixture
def mapper(geometry: RoomGeometry) -> SceneMapper:
    return SceneMapper(geometry, type_heights=FurnitureCatalog().type_heights())


class TestCoordinateConversion:
    def test_canvas_to_metres_removes_pad(self, mapper: SceneMapper) -> None:
        assert mapper.canvas_to_metres(40) == 0
        assert mapper.canvas_to_metres(200) == pytest.approx(2.0)

    def test_round_trip(self, mapper: SceneMapper) -> None:
        assert mapper.metres_to_canvas(mapper.canvas_to_metres(123.5)) == pytest.approx(123.5)

    def test_rotation_to_yaw_is_negated(self, mapper: SceneMapper) -> None:
        assert mapper.rotation_to_yaw(90) == pytest.approx(-math.pi / 2)
        assert mapper.rotation_to_yaw(0) == 0


class TestMapItem:
    """Tests for SceneMapper.map_item."""

    def test_catalog_item(self, mapper: SceneMapper) -> None:
        chair = FurnitureItem(
            id="c", type="Chair", width=0.6, height=0.6, x=200, y=160, color="#8B7355"
        )
        placement = mapper.map_item(chair)
        assert placement.x == pytest.approx(2.0)
        assert placement.z == pytest.approx(1.5)
        assert placement.height == pytest.approx(0.9)
        assert placement.y == pytest.approx(0.45)
        assert placement.depth == pytest.approx(0.6)
        assert placement.color == "#8B7355"

    def test_unknown_type_uses_default_height_and_scale(self, mapper: SceneMapper) -> None:
        lamp = FurnitureItem(id="l", type="Lamp", width=0.3, height=0.4, scale=2, rotation=45)
        placement = mapper.map_item(lamp)
        assert placement.height == pytest.approx(1.2)
        assert placement.y == pytest.approx(0.6)
        assert placement.width == pytest.approx(0.6)
        assert placement.depth == pytest.approx(0.8)
        assert placement.rotation_y == pytest.approx(-math.pi / 4)

    def test_to_dict(self, mapper: SceneMapper) -> None:
        item = FurnitureItem(
            id="m", type="Custom Model", width=1, height=1, x=40, y=40, model_url="blob:abc"
        )
        data = mapper.map_item(item).to_dict()
        assert data["position"] == [0.0, pytest.approx(0.3), 0.0]
        assert data["size"] == [1, pytest.approx(0.6), 1]
        assert data["modelUrl"] == "blob:abc"


class TestBuildScene:
    def test_rectangle_has_one_slab(self, mapper: SceneMapper, rect_room: Room) -> None:
        assert mapper.floor_slabs(rect_room) == [FloorSlab(0, 0, 4, 3)]

    def test_l_shape_has_two_slabs(self, mapper: SceneMapper, l_room: Room) -> None:
        assert mapper.floor_slabs(l_room) == [FloorSlab(0, 0, 6, 3), FloorSlab(0, 3, 3, 2)]

    def test_scene_dict(self, mapper: SceneMapper, rect_room: Room) -> None:
        chair = FurnitureItem(id="c", type="Chair", width=0.6, height=0.6, x=200, y=160)
        data = mapper.build_scene(rect_room, [chair]).to_dict()
        assert data["room"]["width"] == 4
        assert data["room"]["wallHeight"] == pytest.approx(2.8)
        assert data["floor"][0]["position"] == [2.0, 0.0, 1.5]
        assert data["outline"] == [[0.0, 0.0], [4.0, 0.0], [4.0, 3.0], [0.0, 3.0]]
        assert [item["id"] for item in data["furniture"]] == ["c"]
