# chartgeom/rendering/bar_chart.py
"""
Vertical and horizontal bar chart façade.
"""

from typing import Any, List

from ..config.chart_config import BarChartConfig, InvalidDatasetError
from ..geometry.bar_layout import layout_bars, value_label_anchor
from ..models.data_types import DataPoint, RectShape, Scene, TextLabel
from .axes import PlotArea, axis_titles, category_axis, grid_lines, numeric_axis
from .base import ChartRenderer
from .labels import LabelFormatter, LegendBuilder, palette_color


class BarChartRenderer(ChartRenderer):
    """
    Renders DataPoint lists as bars sharing one value scale.

    Draw order: grid lines, bars, value labels, axes, axis titles.
    """

    chart_type = "bar"
    config_class = BarChartConfig

    def _coerce_item(self, item: Any) -> DataPoint:
        if isinstance(item, DataPoint):
            return item
        if isinstance(item, dict):
            return DataPoint.from_dict(item)
        raise InvalidDatasetError(f"Bar data items must be DataPoint or dict, got {type(item).__name__}")

    def _bar_color(self, point: DataPoint, index: int, config: BarChartConfig) -> str:
        return point.color or config.color or palette_color(index, self.palette)

    def _build(self, items: List[DataPoint], config: BarChartConfig) -> Scene:
        area = PlotArea.for_size(config.width, config.height, config.horizontal)
        layout = layout_bars(
            items,
            area.width,
            area.height,
            horizontal=config.horizontal,
            border_radius=config.border_radius,
        )
        # Value axis runs along x for horizontal bars
        values_along_x = config.horizontal

        primitives: list = []
        if config.show_grid:
            primitives += grid_lines(layout.value_scale, area, along_x=values_along_x)

        for bar, point in zip(layout.bars, items):
            primitives.append(
                RectShape(
                    x=area.left + bar.x,
                    y=area.top + bar.y,
                    width=bar.width,
                    height=bar.height,
                    role="bar",
                    rx=bar.radius,
                    fill=self._bar_color(point, bar.index, config),
                )
            )

        if config.show_values:
            for bar, point in zip(layout.bars, items):
                x, y = value_label_anchor(bar, layout)
                if config.horizontal:
                    anchor, baseline = ("end" if bar.is_negative else "start"), "middle"
                else:
                    anchor, baseline = "middle", ("hanging" if bar.is_negative else "alphabetic")
                primitives.append(
                    TextLabel(
                        area.left + x,
                        area.top + y,
                        LabelFormatter.value(point.value),
                        role="value-label",
                        anchor=anchor,
                        baseline=baseline,
                    )
                )

        if config.show_axes:
            primitives += numeric_axis(layout.value_scale, area, along_x=values_along_x)
            primitives += category_axis(
                [p.label for p in items], layout.band_size, area, along_x=not values_along_x
            )
        primitives += axis_titles(area, config.x_axis_label, config.y_axis_label)

        legend = []
        if config.show_legend:
            legend = LegendBuilder(self.palette).for_points(items, fallback_color=config.color)

        return Scene(
            chart_type=self.chart_type,
            width=config.width,
            height=config.height,
            primitives=tuple(primitives),
            legend=tuple(legend),
        )


def render_bar(data, config=None, **overrides) -> Scene:
    """Shortcut for ``BarChartRenderer().render(...)``."""
    return BarChartRenderer().render(data, config, **overrides)
