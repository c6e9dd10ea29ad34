"""Rendering package for chartgeom.

This package contains the chart façades that assemble geometry, labels and
legends into scenes, plus the chart-type registry.
"""
from typing import Any, Mapping, Optional, Sequence

from ..models.data_types import Scene
from .base import ChartRenderer, ChartRegistry
from .pie_chart import PieChartRenderer, render_pie
from .bar_chart import BarChartRenderer, render_bar
from .line_chart import LineChartRenderer, render_line
from .labels import LabelFormatter, LegendBuilder, palette_color, resolve_color


DEFAULT_REGISTRY = ChartRegistry()
DEFAULT_REGISTRY.register(PieChartRenderer.chart_type, PieChartRenderer)
DEFAULT_REGISTRY.register(BarChartRenderer.chart_type, BarChartRenderer)
DEFAULT_REGISTRY.register(LineChartRenderer.chart_type, LineChartRenderer)


def render_chart(chart_type: str, data: Sequence[Any],
                 options: Optional[Mapping[str, Any]] = None) -> Scene:
    """Render ``data`` with the renderer registered for ``chart_type``."""
    return DEFAULT_REGISTRY.render(chart_type, data, options)


__all__ = [
    "ChartRenderer",
    "ChartRegistry",
    "DEFAULT_REGISTRY",
    "PieChartRenderer",
    "BarChartRenderer",
    "LineChartRenderer",
    "render_pie",
    "render_bar",
    "render_line",
    "render_chart",
    "LabelFormatter",
    "LegendBuilder",
    "palette_color",
    "resolve_color",
]
