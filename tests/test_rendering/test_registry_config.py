"""
Tests for chart options, the renderer registry and shared axis helpers.
"""
import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from chartgeom.config.chart_config import (
    BarChartConfig,
    ChartEngineError,
    InvalidCurveTypeError,
    InvalidOptionError,
    LineChartConfig,
    PieChartConfig,
    plot_margins,
)
from chartgeom.geometry.scale_mapper import Scale
from chartgeom.rendering import DEFAULT_REGISTRY, ChartRegistry, render_chart
from chartgeom.rendering.axes import PlotArea, axis_titles, grid_lines, numeric_axis
from chartgeom.rendering.pie_chart import PieChartRenderer


# ==================== TestChartConfig ====================

class TestChartConfig:

    def test_defaults(self):
        assert (PieChartConfig().width, PieChartConfig().height) == (400, 400)
        bar = BarChartConfig()
        assert (bar.width, bar.height, bar.border_radius) == (600, 400, 4)
        assert bar.show_grid and not bar.show_values and not bar.horizontal
        line = LineChartConfig()
        assert line.curve_type == "monotone"
        assert line.show_dots and not line.area_fill

    def test_from_options_camel_and_snake(self):
        cfg = BarChartConfig.from_options({"showValues": True, "border_radius": 0})
        assert cfg.show_values is True
        assert cfg.border_radius == 0

    def test_unknown_option(self):
        with pytest.raises(InvalidOptionError):
            PieChartConfig.from_options({"explode": True})

    @pytest.mark.parametrize("width", [-1, "wide", True, None, float("nan"), float("inf")])
    def test_invalid_size(self, width):
        with pytest.raises(InvalidOptionError):
            BarChartConfig(width=width)

    def test_invalid_curve_type(self):
        with pytest.raises(InvalidCurveTypeError):
            LineChartConfig(curve_type="basis")

    def test_errors_share_base_class(self):
        assert issubclass(InvalidOptionError, ChartEngineError)
        assert issubclass(InvalidCurveTypeError, ChartEngineError)

    def test_with_overrides_copies(self):
        base = PieChartConfig()
        donut = base.with_overrides(inner_radius=50)
        assert donut.inner_radius == 50
        assert base.inner_radius == 0
        assert base.with_overrides() is base

    def test_resolved_radii(self):
        cfg = PieChartConfig(width=300, height=500)
        assert cfg.resolved_outer_radius == 130
        assert PieChartConfig(inner_radius=999).resolved_inner_radius == 180
        assert PieChartConfig(inner_radius=-5).resolved_inner_radius == 0

    def test_tiny_pie_radius_not_negative(self):
        assert PieChartConfig(width=10, height=10).resolved_outer_radius == 0

    @pytest.mark.parametrize("radius", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_radii_become_zero(self, radius):
        assert PieChartConfig(outer_radius=radius).resolved_outer_radius == 0
        assert PieChartConfig(inner_radius=radius).resolved_inner_radius == 0

    def test_non_numeric_radius(self):
        with pytest.raises(InvalidOptionError):
            PieChartConfig(outer_radius="big").resolved_outer_radius

    def test_plot_margins(self):
        assert plot_margins() == {"top": 20, "right": 30, "bottom": 50, "left": 60}
        assert plot_margins(horizontal=True)["left"] == 100


# ==================== TestRegistry ====================

class TestRegistry:

    def test_chart_types(self):
        assert DEFAULT_REGISTRY.chart_types == ["bar", "line", "pie"]

    def test_render_chart(self, abc_dicts):
        scene = render_chart("pie", abc_dicts, {"showPercentages": True})
        assert scene.chart_type == "pie"
        assert scene.legend[0].display_text == "30.0%"

    def test_unknown_chart_type(self, abc_dicts):
        with pytest.raises(InvalidOptionError):
            render_chart("radar", abc_dicts)

    def test_custom_registry(self, abc_points):
        registry = ChartRegistry()
        registry.register("donut", lambda cfg: PieChartRenderer(cfg or {"innerRadius": 60}))
        assert registry.chart_types == ["donut"]
        scene = registry.render("donut", abc_points)
        assert len(scene.shapes("slice")) == 3

    def test_renderer_name(self):
        assert PieChartRenderer().get_name() == "PieChartRenderer"

    def test_bad_config_type(self):
        with pytest.raises(InvalidOptionError):
            PieChartRenderer(config=42)

    def test_config_of_wrong_chart(self, abc_points):
        with pytest.raises(InvalidOptionError):
            PieChartRenderer(config=BarChartConfig())


# ==================== TestAxes ====================

class TestAxes:

    def test_plot_area(self):
        area = PlotArea.for_size(600, 400)
        assert (area.left, area.top, area.width, area.height) == (60, 20, 510, 330)
        assert (area.right, area.bottom) == (570, 350)

    def test_plot_area_horizontal(self):
        area = PlotArea.for_size(600, 400, horizontal=True)
        assert (area.left, area.width) == (100, 470)

    def test_plot_area_clamped(self):
        area = PlotArea.for_size(50, 40)
        assert area.width == 0
        assert area.height == 0

    def test_horizontal_grid_lines(self):
        area = PlotArea.for_size(600, 400)
        lines = grid_lines(Scale(0, 50, 330, 0), area, along_x=False, tick_count=5)
        assert len(lines) == 6
        first = lines[0].commands
        assert first[0].coordinates == (60, 350)
        assert first[1].coordinates == (570, 350)

    def test_vertical_grid_lines(self):
        area = PlotArea.for_size(600, 400)
        lines = grid_lines(Scale(0, 1, 0, 510), area, along_x=True, tick_count=2)
        assert [ln.commands[0].coordinates[0] for ln in lines] == pytest.approx([60, 315, 570])

    def test_numeric_axis_labels(self):
        area = PlotArea.for_size(600, 400)
        shapes = numeric_axis(Scale(0, 50, 330, 0), area, along_x=False, tick_count=5)
        assert shapes[0].role == "axis"
        labels = shapes[1:]
        assert [t.text for t in labels] == ["0", "10", "20", "30", "40", "50"]
        assert all(t.anchor == "end" and t.x == 51 for t in labels)

    def test_axis_titles(self):
        area = PlotArea.for_size(600, 400)
        assert axis_titles(area, None, None) == []
        x_title, y_title = axis_titles(area, "x", "y")
        assert (x_title.x, x_title.y) == (315, 390)
        assert (y_title.x, y_title.rotation) == (15, -90)
