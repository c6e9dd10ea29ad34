"""
Tests for label formatting, palette colors and legend entries.
"""
import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from chartgeom.config.layout_config import DEFAULT_LAYOUT
from chartgeom.models.data_types import DataPoint, Series
from chartgeom.rendering.labels import (
    LabelFormatter,
    LegendBuilder,
    palette_color,
    resolve_color,
)


# ==================== TestPercentage ====================

class TestPercentage:

    @pytest.mark.parametrize("value,total,expected", [
        (30, 100, "30.0%"),
        (1, 3, "33.3%"),
        (2, 3, "66.7%"),
        (100, 100, "100.0%"),
        (0, 100, "0.0%"),
    ])
    def test_one_decimal(self, value, total, expected):
        assert LabelFormatter.percentage(value, total) == expected

    def test_zero_total(self):
        assert LabelFormatter.percentage(5, 0) == "0.0%"

    def test_non_finite_inputs(self):
        assert LabelFormatter.percentage(float("nan"), 10) == "0.0%"
        assert LabelFormatter.percentage(5, float("inf")) == "0.0%"

    def test_precomputed_percent(self):
        assert LabelFormatter.percent(50) == "50.0%"
        assert LabelFormatter.percent(100 / 3) == "33.3%"
        assert LabelFormatter.percent(float("nan")) == "0.0%"


# ==================== TestValueText ====================

class TestValueText:

    @pytest.mark.parametrize("value,expected", [
        (30, "30"),
        (30.0, "30"),
        (-10, "-10"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        ("1.2k", "1.2k"),
        (True, "True"),
    ])
    def test_value(self, value, expected):
        assert LabelFormatter.value(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (0.1 + 0.2, "0.3"),
        (-0.0, "0"),
        (1e-12, "0"),
        (25.0, "25"),
        (-15.0, "-15"),
        (0.25, "0.25"),
    ])
    def test_tick(self, value, expected):
        assert LabelFormatter.tick(value) == expected


# ==================== TestPalette ====================

class TestPalette:

    def test_palette_color_cycles(self):
        n = len(DEFAULT_LAYOUT.PALETTE)
        assert palette_color(0) == DEFAULT_LAYOUT.PALETTE[0]
        assert palette_color(n + 2) == DEFAULT_LAYOUT.PALETTE[2]

    def test_custom_palette(self):
        assert palette_color(3, ("#111111", "#222222")) == "#222222"

    def test_resolve_color_prefers_explicit(self):
        assert resolve_color("#ABCDEF", 0) == "#ABCDEF"
        assert resolve_color(None, 1) == DEFAULT_LAYOUT.PALETTE[1]


# ==================== TestLegendBuilder ====================

class TestLegendBuilder:

    def test_one_entry_per_point_in_order(self, abc_points):
        legend = LegendBuilder().for_points(abc_points)
        assert [e.label for e in legend] == ["A", "B", "C"]
        assert [e.index for e in legend] == [0, 1, 2]

    def test_values_without_percentages(self, abc_points):
        legend = LegendBuilder().for_points(abc_points)
        assert [e.display_text for e in legend] == ["30", "50", "20"]
        assert all(e.percentage is None for e in legend)

    def test_percentages(self, abc_points):
        legend = LegendBuilder().for_points(abc_points, show_percentages=True)
        assert [e.display_text for e in legend] == ["30.0%", "50.0%", "20.0%"]
        assert legend[0].value_text == "30"

    def test_precomputed_percentages_win(self, abc_points):
        legend = LegendBuilder().for_points(
            abc_points, show_percentages=True, total=0, percentages=[10, 20, 70]
        )
        assert [e.percentage for e in legend] == ["10.0%", "20.0%", "70.0%"]

    def test_percentages_zero_total(self, zero_points):
        legend = LegendBuilder().for_points(zero_points, show_percentages=True, total=0)
        assert [e.percentage for e in legend] == ["0.0%", "0.0%"]

    def test_negative_value_gets_zero_percent(self):
        points = [DataPoint("neg", -5), DataPoint("pos", 5)]
        legend = LegendBuilder().for_points(points, show_percentages=True)
        assert legend[0].percentage == "0.0%"
        assert legend[1].percentage == "100.0%"

    def test_colors(self, colored_points):
        legend = LegendBuilder().for_points(colored_points)
        assert legend[0].color == DEFAULT_LAYOUT.PALETTE[0]
        assert legend[1].color == "#123456"

    def test_fallback_color_before_palette(self, colored_points):
        legend = LegendBuilder().for_points(colored_points, fallback_color="#000000")
        assert [e.color for e in legend] == ["#000000", "#123456", "#000000"]

    def test_for_series(self, two_series):
        legend = LegendBuilder().for_series(two_series)
        assert [e.label for e in legend] == ["Visits", "Signups"]
        assert [e.color for e in legend] == list(DEFAULT_LAYOUT.PALETTE[:2])
        assert legend[0].value is None

    def test_series_color_override(self):
        legend = LegendBuilder().for_series([Series("s", ((0, 1),), color="#ff0000")])
        assert legend[0].color == "#ff0000"

    def test_empty(self):
        assert LegendBuilder().for_points([]) == []
