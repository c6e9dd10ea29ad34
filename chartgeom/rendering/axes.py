# chartgeom/rendering/axes.py
"""
Axis artifacts for cartesian charts: grid lines, axis lines, tick labels and
axis titles. All coordinates are absolute scene pixels.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config.chart_config import plot_margins
from ..config.layout_config import DEFAULT_LAYOUT
from ..geometry.scale_mapper import Scale
from ..models.data_types import PathCommand, PathShape, TextLabel
from .labels import LabelFormatter


@dataclass(frozen=True)
class PlotArea:
    """Inner plot rectangle after margins."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @classmethod
    def for_size(cls, width: float, height: float, horizontal: bool = False) -> "PlotArea":
        m = plot_margins(horizontal)
        return cls(
            left=m["left"],
            top=m["top"],
            width=max(0.0, width - m["left"] - m["right"]),
            height=max(0.0, height - m["top"] - m["bottom"]),
        )


def _segment(x0: float, y0: float, x1: float, y1: float, role: str,
             color: str = DEFAULT_LAYOUT.GRID_COLOR) -> PathShape:
    return PathShape(
        commands=(PathCommand("M", (x0, y0)), PathCommand("L", (x1, y1))),
        role=role,
        stroke=color,
        stroke_width=DEFAULT_LAYOUT.GRID_STROKE_WIDTH,
    )


def grid_lines(scale: Scale, area: PlotArea, along_x: bool,
               tick_count: int = DEFAULT_LAYOUT.TICK_COUNT) -> List[PathShape]:
    """
    One grid line per tick of ``scale``.

    ``along_x`` means the scale runs horizontally, so its grid lines are
    vertical.
    """
    lines = []
    for t in scale.ticks(tick_count):
        pos = scale.map(t)
        if along_x:
            lines.append(_segment(area.left + pos, area.top, area.left + pos, area.bottom, "grid"))
        else:
            lines.append(_segment(area.left, area.top + pos, area.right, area.top + pos, "grid"))
    return lines


def numeric_axis(scale: Scale, area: PlotArea, along_x: bool,
                 tick_count: int = DEFAULT_LAYOUT.TICK_COUNT) -> list:
    """Axis line plus one tick label per tick."""
    offset = DEFAULT_LAYOUT.TICK_LABEL_OFFSET
    if along_x:
        shapes = [_segment(area.left, area.bottom, area.right, area.bottom, "axis", "currentColor")]
    else:
        shapes = [_segment(area.left, area.top, area.left, area.bottom, "axis", "currentColor")]
    for t in scale.ticks(tick_count):
        pos = scale.map(t)
        text = LabelFormatter.tick(t)
        if along_x:
            shapes.append(TextLabel(area.left + pos, area.bottom + offset, text,
                                    role="tick-label", anchor="middle", baseline="hanging"))
        else:
            shapes.append(TextLabel(area.left - offset, area.top + pos, text,
                                    role="tick-label", anchor="end"))
    return shapes


def category_axis(labels: Sequence[str], band_size: float, area: PlotArea, along_x: bool) -> list:
    """Axis line plus one label at the center of each band."""
    offset = DEFAULT_LAYOUT.TICK_LABEL_OFFSET
    if along_x:
        shapes = [_segment(area.left, area.bottom, area.right, area.bottom, "axis", "currentColor")]
    else:
        shapes = [_segment(area.left, area.top, area.left, area.bottom, "axis", "currentColor")]
    for i, label in enumerate(labels):
        mid = (i + 0.5) * band_size
        if along_x:
            shapes.append(TextLabel(area.left + mid, area.bottom + offset, label,
                                    role="tick-label", anchor="middle", baseline="hanging"))
        else:
            shapes.append(TextLabel(area.left - offset, area.top + mid, label,
                                    role="tick-label", anchor="end"))
    return shapes


def axis_titles(area: PlotArea, x_label: Optional[str], y_label: Optional[str]) -> List[TextLabel]:
    titles = []
    if x_label:
        titles.append(TextLabel(area.left + area.width / 2,
                                area.bottom + DEFAULT_LAYOUT.X_AXIS_LABEL_OFFSET,
                                x_label, role="axis-label"))
    if y_label:
        titles.append(TextLabel(area.left - DEFAULT_LAYOUT.Y_AXIS_LABEL_OFFSET,
                                area.top + area.height / 2,
                                y_label, role="axis-label", rotation=-90.0))
    return titles
