# chartgeom/rendering/line_chart.py
"""
Multi-series line chart façade.
"""

from typing import Any, List

from ..config.chart_config import InvalidDatasetError, LineChartConfig
from ..config.layout_config import DEFAULT_LAYOUT
from ..geometry.curve_interpolator import area_path, interpolate
from ..geometry.scale_mapper import Scale
from ..models.data_types import CircleShape, PathShape, Scene, Series
from .axes import PlotArea, axis_titles, grid_lines, numeric_axis
from .base import ChartRenderer
from .labels import LegendBuilder, resolve_color


class LineChartRenderer(ChartRenderer):
    """
    Renders Series lists as lines sharing one x scale and one y scale.

    The x scale spans the extent of all x values; the y scale spans
    ``[min(0, min_y), max_y]`` with headroom, rounded to tick values.
    Draw order: grid lines, then per series area fill, line and dots, then
    axes and axis titles.
    The legend has one entry per series, so a single series still gets a
    legend unless show_legend is False.
    """

    chart_type = "line"
    config_class = LineChartConfig

    def _coerce_item(self, item: Any) -> Series:
        if isinstance(item, Series):
            return item
        if isinstance(item, dict):
            return Series.from_dict(item)
        raise InvalidDatasetError(f"Line data items must be Series or dict, got {type(item).__name__}")

    def _scales(self, series: List[Series], area: PlotArea):
        xs = [p.x for s in series for p in s.data]
        ys = [p.y for s in series for p in s.data]
        x_scale = Scale.from_values(xs, 0.0, area.width, include_zero=False)
        y_scale = Scale.from_values(
            ys, area.height, 0.0,
            include_zero=True,
            headroom=DEFAULT_LAYOUT.VALUE_HEADROOM,
            nice=True,
            tick_count=DEFAULT_LAYOUT.TICK_COUNT,
        )
        return x_scale, y_scale

    def _build(self, items: List[Series], config: LineChartConfig) -> Scene:
        area = PlotArea.for_size(config.width, config.height)
        x_scale, y_scale = self._scales(items, area)
        baseline = area.top + y_scale.map(0.0)

        primitives: list = []
        if config.show_grid:
            primitives += grid_lines(y_scale, area, along_x=False)
            primitives += grid_lines(x_scale, area, along_x=True)

        for i, series in enumerate(items):
            color = resolve_color(series.color, i, self.palette)
            px = x_scale.map_many(p.x for p in series.data) + area.left
            py = y_scale.map_many(p.y for p in series.data) + area.top
            points = list(zip(px.tolist(), py.tolist()))

            if config.area_fill:
                fill = area_path(points, config.curve_type, baseline)
                if fill:
                    primitives.append(
                        PathShape(
                            commands=fill,
                            role="area",
                            fill=color,
                            fill_opacity=DEFAULT_LAYOUT.AREA_FILL_OPACITY,
                        )
                    )

            stroke = interpolate(points, config.curve_type)
            if stroke:
                primitives.append(
                    PathShape(
                        commands=stroke,
                        role="line",
                        stroke=color,
                        stroke_width=DEFAULT_LAYOUT.LINE_STROKE_WIDTH,
                    )
                )

            if config.show_dots:
                primitives += [
                    CircleShape(
                        cx, cy, DEFAULT_LAYOUT.DOT_RADIUS,
                        role="dot",
                        fill=DEFAULT_LAYOUT.DOT_FILL_COLOR,
                        stroke=color,
                        stroke_width=DEFAULT_LAYOUT.DOT_STROKE_WIDTH,
                    )
                    for cx, cy in points
                ]

        if config.show_axes:
            primitives += numeric_axis(x_scale, area, along_x=True)
            primitives += numeric_axis(y_scale, area, along_x=False)
        primitives += axis_titles(area, config.x_axis_label, config.y_axis_label)

        legend = LegendBuilder(self.palette).for_series(items) if config.show_legend else []

        return Scene(
            chart_type=self.chart_type,
            width=config.width,
            height=config.height,
            primitives=tuple(primitives),
            legend=tuple(legend),
        )


def render_line(data, config=None, **overrides) -> Scene:
    """Shortcut for ``LineChartRenderer().render(...)``."""
    return LineChartRenderer().render(data, config, **overrides)
