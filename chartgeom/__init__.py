"""chartgeom - geometry engine for pie, bar and line charts.

Turns datasets into immutable scenes of paths, rectangles, circles and
text labels, ready for SVG, raster or figure output.
"""
from .models import DataPoint, Series, SeriesPoint, Scene
from .rendering import (
    PieChartRenderer,
    BarChartRenderer,
    LineChartRenderer,
    render_pie,
    render_bar,
    render_line,
    render_chart,
)

__version__ = "0.1.0"

__all__ = [
    "DataPoint",
    "Series",
    "SeriesPoint",
    "Scene",
    "PieChartRenderer",
    "BarChartRenderer",
    "LineChartRenderer",
    "render_pie",
    "render_bar",
    "render_line",
    "render_chart",
]
