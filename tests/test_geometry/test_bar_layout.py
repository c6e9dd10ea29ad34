"""
Tests for bar rectangle layout.

Tests cover:
- Band division and bar thickness
- Baseline placement with negative values (vertical and horizontal)
- Corner radius clamping
- Value label anchors
"""
import math
import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from chartgeom.geometry.bar_layout import (
    effective_radius,
    layout_bars,
    transpose,
    value_label_anchor,
)
from chartgeom.models.data_types import DataPoint


# ==================== TestBands ====================

class TestBands:
    """Equal bands along the categorical axis."""

    def test_band_and_thickness(self, abc_points):
        layout = layout_bars(abc_points, width=300, height=200)
        assert layout.band_size == pytest.approx(100)
        assert layout.thickness == pytest.approx(80)
        assert [b.x for b in layout.bars] == pytest.approx([10, 110, 210])
        assert all(b.width == pytest.approx(80) for b in layout.bars)

    def test_bars_centered_in_band(self, abc_points):
        layout = layout_bars(abc_points, width=300, height=200)
        for bar in layout.bars:
            assert bar.center[0] == pytest.approx(layout.band_center(bar.index))

    def test_no_gap(self, abc_points):
        layout = layout_bars(abc_points, width=300, height=200, gap_fraction=0)
        assert layout.thickness == pytest.approx(100)
        assert layout.bars[1].x == pytest.approx(100)

    def test_bars_keep_input_order(self, abc_points):
        layout = layout_bars(abc_points, width=300, height=200)
        assert [b.label for b in layout.bars] == ["A", "B", "C"]
        assert [b.index for b in layout.bars] == [0, 1, 2]

    def test_empty_input(self):
        layout = layout_bars([], width=300, height=200)
        assert layout.bars == ()
        assert layout.band_size == 0


# ==================== TestVerticalBaseline ====================

class TestVerticalBaseline:
    """Domain (-15, 25) over a 400px tall plot."""

    def test_scale_domain(self, signed_points):
        layout = layout_bars(signed_points, width=200, height=400)
        assert layout.value_scale.domain == (-15, 25)
        assert layout.baseline == pytest.approx(250)

    def test_negative_bar_hangs_below_baseline(self, signed_points):
        jan = layout_bars(signed_points, width=200, height=400).bars[0]
        assert jan.is_negative
        assert jan.y == pytest.approx(250)
        assert jan.height == pytest.approx(100)

    def test_positive_bar_rises_from_baseline(self, signed_points):
        feb = layout_bars(signed_points, width=200, height=400).bars[1]
        assert feb.y == pytest.approx(50)
        assert feb.height == pytest.approx(200)
        assert feb.y + feb.height == pytest.approx(250)

    def test_heights_are_never_negative(self, signed_points):
        for bar in layout_bars(signed_points, width=200, height=400).bars:
            assert bar.height >= 0

    def test_all_positive_baseline_at_bottom(self, abc_points):
        layout = layout_bars(abc_points, width=300, height=200)
        assert layout.value_scale.domain_min == 0
        assert layout.baseline == pytest.approx(200)

    def test_without_nice(self, signed_points):
        layout = layout_bars(signed_points, width=200, height=400, nice=False)
        assert layout.value_scale.domain == pytest.approx((-11, 22))

    def test_all_zero_values(self, zero_points):
        layout = layout_bars(zero_points, width=200, height=400)
        for bar in layout.bars:
            assert bar.height == 0
            assert not math.isnan(bar.y)

    def test_non_finite_value_drawn_as_zero(self):
        layout = layout_bars([DataPoint("x", float("nan")), DataPoint("y", 10)], 200, 400)
        assert layout.bars[0].value == 0
        assert layout.bars[0].height == 0


# ==================== TestHorizontal ====================

class TestHorizontal:
    """Value axis along x, bands along y."""

    def test_baseline_and_extents(self, signed_points):
        layout = layout_bars(signed_points, width=400, height=200, horizontal=True)
        assert layout.baseline == pytest.approx(150)
        jan, feb = layout.bars
        assert (jan.x, jan.width) == pytest.approx((50, 100))
        assert (feb.x, feb.width) == pytest.approx((150, 200))

    def test_bands_along_y(self, signed_points):
        layout = layout_bars(signed_points, width=400, height=200, horizontal=True)
        assert [b.y for b in layout.bars] == pytest.approx([10, 110])
        assert all(b.height == pytest.approx(80) for b in layout.bars)

    def test_transpose(self):
        assert transpose(1, 2, 3, 4, horizontal=False) == (1, 2, 3, 4)
        assert transpose(1, 2, 3, 4, horizontal=True) == (2, 1, 4, 3)


# ==================== TestRadius ====================

class TestRadius:

    def test_requested_radius_kept(self, abc_points):
        layout = layout_bars(abc_points, width=300, height=200, border_radius=4)
        assert all(b.radius == 4 for b in layout.bars)

    def test_radius_clamped_to_half_thickness(self):
        points = [DataPoint(str(i), i + 1) for i in range(100)]
        layout = layout_bars(points, width=600, height=400, border_radius=4)
        assert layout.thickness == pytest.approx(4.8)
        assert layout.bars[0].radius == pytest.approx(2.4)

    @pytest.mark.parametrize("requested,thickness,expected", [
        (4, 20, 4),
        (30, 20, 10),
        (-3, 20, 0),
        (None, 20, 0),
    ])
    def test_effective_radius(self, requested, thickness, expected):
        assert effective_radius(requested, thickness) == expected


# ==================== TestValueLabelAnchor ====================

class TestValueLabelAnchor:

    def test_vertical(self, signed_points):
        layout = layout_bars(signed_points, width=200, height=400)
        jan, feb = layout.bars
        assert value_label_anchor(feb, layout) == pytest.approx((150, 45))
        assert value_label_anchor(jan, layout) == pytest.approx((50, 355))

    def test_horizontal(self, signed_points):
        layout = layout_bars(signed_points, width=400, height=200, horizontal=True)
        jan, feb = layout.bars
        assert value_label_anchor(feb, layout) == pytest.approx((355, 150))
        assert value_label_anchor(jan, layout) == pytest.approx((45, 50))

    def test_custom_offset(self, signed_points):
        layout = layout_bars(signed_points, width=200, height=400)
        assert value_label_anchor(layout.bars[1], layout, offset=12)[1] == pytest.approx(38)
