# chartgeom/rendering/pie_chart.py
"""
Pie and donut chart façade.
"""

from typing import Any, List

from ..config.chart_config import InvalidDatasetError, PieChartConfig
from ..config.layout_config import DEFAULT_LAYOUT
from ..geometry.arc_geometry import compute_arcs, slice_centroid, slice_path
from ..models.data_types import DataPoint, PathShape, Scene, TextLabel
from .base import ChartRenderer
from .labels import LabelFormatter, LegendBuilder


class PieChartRenderer(ChartRenderer):
    """
    Renders DataPoint lists as pie (inner_radius == 0) or donut slices.

    Slices start at 12 o'clock and run clockwise in input order. The pie is
    centered in the scene.
    """

    chart_type = "pie"
    config_class = PieChartConfig

    def _coerce_item(self, item: Any) -> DataPoint:
        if isinstance(item, DataPoint):
            return item
        if isinstance(item, dict):
            return DataPoint.from_dict(item)
        raise InvalidDatasetError(f"Pie data items must be DataPoint or dict, got {type(item).__name__}")

    def _build(self, items: List[DataPoint], config: PieChartConfig) -> Scene:
        center = (config.width / 2, config.height / 2)
        outer = config.resolved_outer_radius
        inner = config.resolved_inner_radius
        arcs = compute_arcs(items, palette=self.palette)

        slices = []
        labels = []
        for arc in arcs.slices:
            commands = slice_path(arc, outer, inner, center)
            if not commands:
                continue
            slices.append(
                PathShape(
                    commands=commands,
                    role="slice",
                    fill=arc.color,
                    stroke=DEFAULT_LAYOUT.SLICE_STROKE_COLOR,
                    stroke_width=DEFAULT_LAYOUT.SLICE_STROKE_WIDTH,
                )
            )
            if config.show_labels:
                if inner > 0:
                    x, y = slice_centroid(arc, outer, center, inner_radius=inner)
                else:
                    x, y = slice_centroid(arc, outer * DEFAULT_LAYOUT.LABEL_RADIUS_RATIO, center)
                text = (
                    LabelFormatter.percent(arc.percentage)
                    if config.show_percentages else arc.label
                )
                labels.append(TextLabel(x, y, text, role="slice-label"))

        legend = []
        if config.show_legend:
            legend = LegendBuilder(self.palette).for_points(
                items,
                show_percentages=config.show_percentages,
                total=arcs.total,
                percentages=[arc.percentage for arc in arcs.slices] or None,
            )

        if arcs.is_empty:
            self.logger.info(f"{self.get_name()}: zero total, scene has no slices")

        return Scene(
            chart_type=self.chart_type,
            width=config.width,
            height=config.height,
            primitives=tuple(slices + labels),
            legend=tuple(legend),
        )


def render_pie(data, config=None, **overrides) -> Scene:
    """Shortcut for ``PieChartRenderer().render(...)``."""
    return PieChartRenderer().render(data, config, **overrides)
