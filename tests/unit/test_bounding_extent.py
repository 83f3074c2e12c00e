"""Unit tests for rotated bounding-box extents."""

import math

import pytest

from roomplan.domain import FurnitureItem, bounding_half_extents, item_half_extents


class TestBoundingHalfExtents:
    """Tests for bounding_half_extents."""

    def test_unrotated_chair(self) -> None:
        extents = bounding_half_extents(0.6, 0.6)
        assert extents.half_width == pytest.approx(24)
        assert extents.half_height == pytest.approx(24)

    @pytest.mark.parametrize("rotation", [0, 180, -180, 360])
    def test_half_turns_keep_axes(self, rotation: float) -> None:
        extents = bounding_half_extents(2.0, 0.9, rotation=rotation)
        assert extents.half_width == pytest.approx(80)
        assert extents.half_height == pytest.approx(36)

    @pytest.mark.parametrize("rotation", [90, 270, -90])
    def test_quarter_turns_swap_axes(self, rotation: float) -> None:
        """A sofa rotated 90 degrees is 36 wide and 80 tall."""
        extents = bounding_half_extents(2.0, 0.9, rotation=rotation)
        assert extents.half_width == pytest.approx(36)
        assert extents.half_height == pytest.approx(80)

    def test_diagonal_is_largest(self) -> None:
        extents = bounding_half_extents(1.0, 1.0, rotation=45)
        assert extents.half_width == pytest.approx(80 * math.sqrt(2) / 2)
        assert extents.half_height == pytest.approx(extents.half_width)

    @pytest.mark.parametrize("rotation", [10, 30, 60, 80, 135, 200, 315])
    def test_bounded_between_axis_aligned_and_diagonal(self, rotation: float) -> None:
        extents = bounding_half_extents(2.0, 0.9, rotation=rotation)
        diagonal = math.hypot(160, 72) / 2
        assert 36 - 1e-9 <= extents.half_width <= diagonal + 1e-9
        assert 36 - 1e-9 <= extents.half_height <= diagonal + 1e-9

    def test_scale_multiplies(self) -> None:
        extents = bounding_half_extents(0.6, 0.6, scale=2)
        assert extents.half_width == pytest.approx(48)

    def test_zero_size(self) -> None:
        extents = bounding_half_extents(0, 0, rotation=33)
        assert extents.half_width == 0
        assert extents.half_height == 0

    def test_custom_units(self) -> None:
        extents = bounding_half_extents(2.0, 1.0, units_per_metre=1)
        assert extents.half_width == pytest.approx(1.0)
        assert extents.half_height == pytest.approx(0.5)


class TestItemHalfExtents:
    def test_uses_item_rotation_and_scale(self) -> None:
        item = FurnitureItem(id="s", type="Sofa", width=2.0, height=0.9, rotation=90, scale=0.5)
        extents = item_half_extents(item)
        assert extents.half_width == pytest.approx(18)
        assert extents.half_height == pytest.approx(40)
