"""Unit tests for PlacementClamp.

These tests verify:
- Per-axis clamping for rectangular rooms, with rotation and scale
- Centring of items larger than their region
- L-shape region selection by the bottom edge of the bounding box
- The custom polygon policy and the undefined-outline identity
- Snap-then-clamp ordering
"""

from collections.abc import Callable
from dataclasses import replace

import pytest

from roomplan.domain import (
    FurnitureItem,
    GridSnap,
    PlacementClamp,
    Point2D,
    Rect,
    Room,
    RoomShape,
    item_half_extents,
)

ItemFactory = Callable[..., FurnitureItem]


def _box_inside(region: Rect, item: FurnitureItem, point: Point2D) -> bool:
    return region.contains_box(point.x, point.y, item_half_extents(item), tolerance=1e-6)


class TestRectangleClamp:
    """Clamping inside a 4m x 3m rectangle (x 40..360, y 40..280)."""

    def test_valid_centre_unchanged(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        assert clamp.clamp(make_item(), 200, 160, rect_room) == Point2D(200, 160)

    def test_left_wall(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        """A chair dragged past the left wall stops with its edge on the wall."""
        result = clamp.clamp(make_item(), 0, 160, rect_room)
        assert result.x == pytest.approx(64)
        assert result.y == pytest.approx(160)

    def test_every_wall(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        assert clamp.clamp(make_item(), 1000, 1000, rect_room) == Point2D(336, 256)
        assert clamp.clamp(make_item(), -1000, -1000, rect_room) == Point2D(64, 64)

    def test_rotated_sofa_uses_swapped_extents(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        """A sofa at 90 degrees is limited by its depth against the side walls."""
        sofa = make_item(type="Sofa", width=2.0, height=0.9, rotation=90)
        result = clamp.clamp(sofa, 1000, 160, rect_room)
        assert result.x == pytest.approx(360 - 36)
        assert result.y == pytest.approx(160)

    def test_scale_grows_extents(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        result = clamp.clamp(make_item(scale=2), 0, 160, rect_room)
        assert result.x == pytest.approx(88)

    def test_does_not_mutate_item(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        item = make_item(x=5, y=5)
        clamp.clamp(item, 0, 0, rect_room)
        assert (item.x, item.y) == (5, 5)

    def test_oversized_item_centred_on_that_axis(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        wide = make_item(width=5.0, height=0.6)
        result = clamp.clamp(wide, 0, 0, rect_room)
        assert result.x == pytest.approx(200)
        assert result.y == pytest.approx(64)

    def test_oversized_both_axes(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        huge = make_item(width=10, height=10)
        assert clamp.clamp(huge, -50, 900, rect_room) == Point2D(200, 160)

    def test_zero_size_item(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        dot = make_item(width=0, height=0)
        assert clamp.clamp(dot, 0, 500, rect_room) == Point2D(40, 280)


class TestClampProperties:
    """Properties that hold for every candidate."""

    CANDIDATES = [(-500, -500), (0, 160), (200, 160), (359, 41), (1e6, -1e6), (123.4, 567.8)]
    ROTATIONS = [0, 15, 45, 90, 133, 270, -30]

    @pytest.mark.parametrize("rotation", ROTATIONS)
    def test_result_always_inside_region(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory, rotation: float
    ) -> None:
        item = make_item(type="Desk", width=1.2, height=0.6, rotation=rotation)
        region = clamp.geometry.floor_rect(rect_room)
        for cx, cy in self.CANDIDATES:
            assert _box_inside(region, item, clamp.clamp(item, cx, cy, rect_room))

    @pytest.mark.parametrize("rotation", ROTATIONS)
    def test_clamp_is_idempotent(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory, rotation: float
    ) -> None:
        item = make_item(type="Desk", width=1.2, height=0.6, rotation=rotation)
        for cx, cy in self.CANDIDATES:
            once = clamp.clamp(item, cx, cy, rect_room)
            twice = clamp.clamp(item, once.x, once.y, rect_room)
            assert twice.x == pytest.approx(once.x)
            assert twice.y == pytest.approx(once.y)

    @pytest.mark.parametrize("rotation", ROTATIONS)
    def test_full_turn_gives_same_result(
        self, clamp: PlacementClamp, l_room: Room, make_item: ItemFactory, rotation: float
    ) -> None:
        item = make_item(type="Desk", width=1.2, height=0.6, rotation=rotation)
        turned = replace(item, rotation=rotation + 360)
        for cx, cy in self.CANDIDATES:
            a = clamp.clamp(item, cx, cy, l_room)
            b = clamp.clamp(turned, cx, cy, l_room)
            assert a.x == pytest.approx(b.x)
            assert a.y == pytest.approx(b.y)


class TestSnapOrdering:
    """Snapping must happen before clamping."""

    def test_snap_then_clamp_stays_inside(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        item = make_item()
        snapped = GridSnap(resolution=20).snap_point(0, 160)
        result = clamp.clamp(item, snapped.x, snapped.y, rect_room)
        assert _box_inside(clamp.geometry.floor_rect(rect_room), item, result)

    def test_clamp_then_snap_can_escape(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        item = make_item()
        clamped = clamp.clamp(item, 0, 160, rect_room)
        result = GridSnap(resolution=20).snap_point(clamped.x, clamped.y)
        assert result.x == 60
        assert not _box_inside(clamp.geometry.floor_rect(rect_room), item, result)


class TestLShapeClamp:
    """Clamping in a 6m x 5m L (main y 40..280, wing x 40..280 y 280..440)."""

    def test_past_main_bar_clamps_into_wing(
        self, clamp: PlacementClamp, l_room: Room, make_item: ItemFactory
    ) -> None:
        result = clamp.clamp(make_item(), 999, 350, l_room)
        assert result.x == pytest.approx(40 + 6 * 80 * 0.5 - 24)
        assert result.y == pytest.approx(350)

    def test_main_bar_spans_full_width(
        self, clamp: PlacementClamp, l_room: Room, make_item: ItemFactory
    ) -> None:
        assert clamp.clamp(make_item(), 999, 100, l_room) == Point2D(496, 100)

    def test_region_chosen_by_bottom_edge(
        self, clamp: PlacementClamp, l_room: Room, make_item: ItemFactory
    ) -> None:
        """A chair whose box crosses the main bar's bottom is clamped into the wing."""
        result = clamp.clamp(make_item(), 100, 270, l_room)
        assert result == Point2D(100, 304)

    def test_region_for_box(self, clamp: PlacementClamp, l_room: Room, make_item: ItemFactory) -> None:
        extents = item_half_extents(make_item())
        assert clamp.region_for_box(l_room, 100, 250, extents) == Rect(40, 40, 480, 240)
        assert clamp.region_for_box(l_room, 100, 260, extents) == Rect(40, 280, 240, 160)


class TestCustomClamp:
    """Custom polygon policy."""

    def test_degenerate_outline_is_identity(
        self, clamp: PlacementClamp, make_item: ItemFactory
    ) -> None:
        room = Room(width=4, length=3, shape=RoomShape.CUSTOM, custom_polygon=[(0, 0), (9, 9)])
        assert clamp.clamp(make_item(), -500, 9000, room) == Point2D(-500, 9000)

    def test_inside_is_identity(
        self, clamp: PlacementClamp, square_polygon_room: Room, make_item: ItemFactory
    ) -> None:
        assert clamp.clamp(make_item(), 200, 200, square_polygon_room) == Point2D(200, 200)

    def test_pulled_back_from_left(
        self, clamp: PlacementClamp, square_polygon_room: Room, make_item: ItemFactory
    ) -> None:
        result = clamp.clamp(make_item(), -100, 200, square_polygon_room)
        assert result.x == pytest.approx(24, abs=0.01)
        assert result.y == pytest.approx(200)
        assert clamp.is_contained(make_item(x=result.x, y=result.y), square_polygon_room)

    def test_pulled_back_from_right(
        self, clamp: PlacementClamp, square_polygon_room: Room, make_item: ItemFactory
    ) -> None:
        result = clamp.clamp(make_item(), 900, 200, square_polygon_room)
        assert result.x == pytest.approx(376, abs=0.01)
        assert clamp.is_contained(make_item(x=result.x, y=result.y), square_polygon_room)

    def test_concave_notch(self, clamp: PlacementClamp, make_item: ItemFactory) -> None:
        """A candidate in the notch of an L outline is moved onto the floor."""
        room = Room(
            width=5,
            length=5,
            shape=RoomShape.CUSTOM,
            custom_polygon=[(0, 0), (400, 0), (400, 200), (200, 200), (200, 400), (0, 400)],
        )
        result = clamp.clamp(make_item(), 300, 300, room)
        assert clamp.is_contained(make_item(x=result.x, y=result.y), room)
        assert result.x > 400 / 2.4

    def test_thin_slit_through_box_is_not_contained(
        self, clamp: PlacementClamp, make_item: ItemFactory
    ) -> None:
        """A wall sliver crossing the box fails even with every corner inside."""
        room = Room(
            width=5,
            length=5,
            shape=RoomShape.CUSTOM,
            custom_polygon=[
                (0, 0),
                (190, 0),
                (200, 300),
                (210, 0),
                (400, 0),
                (400, 400),
                (0, 400),
            ],
        )
        assert not clamp.is_contained(make_item(x=200, y=200), room)
        assert clamp.clamp(make_item(), 200, 200, room) != Point2D(200, 200)
        assert clamp.is_contained(make_item(x=100, y=200), room)

    def test_flush_against_wall_is_contained(
        self, clamp: PlacementClamp, square_polygon_room: Room, make_item: ItemFactory
    ) -> None:
        assert clamp.is_contained(make_item(x=24, y=200), square_polygon_room)

    def test_item_too_big_returns_centroid(
        self, clamp: PlacementClamp, square_polygon_room: Room, make_item: ItemFactory
    ) -> None:
        result = clamp.clamp(make_item(width=8, height=8), 0, 0, square_polygon_room)
        assert result.x == pytest.approx(200)
        assert result.y == pytest.approx(200)


class TestContainmentHelpers:
    def test_is_contained(
        self, clamp: PlacementClamp, rect_room: Room, make_item: ItemFactory
    ) -> None:
        assert clamp.is_contained(make_item(x=200, y=160), rect_room)
        assert not clamp.is_contained(make_item(x=50, y=160), rect_room)

    def test_degenerate_custom_always_contained(
        self, clamp: PlacementClamp, make_item: ItemFactory
    ) -> None:
        room = Room(width=4, length=3, shape=RoomShape.CUSTOM)
        assert clamp.is_contained(make_item(x=-999, y=-999), room)

    def test_footprint_corners_unrotated(
        self, clamp: PlacementClamp, make_item: ItemFactory
    ) -> None:
        corners = clamp.footprint_corners(make_item(x=100, y=100))
        assert [(c.x, c.y) for c in corners] == [(76, 76), (124, 76), (124, 124), (76, 124)]

    def test_footprint_corners_quarter_turn(
        self, clamp: PlacementClamp, make_item: ItemFactory
    ) -> None:
        sofa = make_item(width=2.0, height=0.9, rotation=90)
        corners = clamp.footprint_corners(sofa, 0, 0)
        xs = sorted(c.x for c in corners)
        ys = sorted(c.y for c in corners)
        assert xs[0] == pytest.approx(-36)
        assert xs[-1] == pytest.approx(36)
        assert ys[0] == pytest.approx(-80)
        assert ys[-1] == pytest.approx(80)
