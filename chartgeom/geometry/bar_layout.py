# chartgeom/geometry/bar_layout.py
"""
Bar rectangle layout for vertical and horizontal bar charts.

All math happens in "band space": a position along the categorical axis and
a span along the value axis. A single transposition turns band space into
x/y rectangles, so the two orientations share every computation.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..config.layout_config import DEFAULT_LAYOUT
from ..models.data_types import DataPoint
from .numeric import finite_array, finite_or_zero
from .scale_mapper import Scale


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarRect:
    """One laid-out bar in plot-area coordinates."""

    index: int
    label: str
    value: float
    x: float
    y: float
    width: float
    height: float
    radius: float
    color: Optional[str] = None

    @property
    def is_negative(self) -> bool:
        return self.value < 0

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class BarLayout:
    """Bars plus the shared value scale and band metrics."""

    bars: Tuple[BarRect, ...]
    value_scale: Scale
    baseline: float  # Pixel position of value 0 along the value axis
    band_size: float
    thickness: float
    horizontal: bool = False

    def band_center(self, index: int) -> float:
        """Center of band ``index`` along the categorical axis."""
        return (index + 0.5) * self.band_size


def effective_radius(requested: float, thickness: float) -> float:
    """Corner radius clamped to [0, thickness / 2]."""
    return max(0.0, min(finite_or_zero(requested), thickness / 2))


def transpose(band_pos: float, value_pos: float, band_len: float, value_len: float,
              horizontal: bool) -> Tuple[float, float, float, float]:
    """Band-space rectangle -> (x, y, width, height)."""
    if horizontal:
        return (value_pos, band_pos, value_len, band_len)
    return (band_pos, value_pos, band_len, value_len)


def layout_bars(
    points: Sequence[DataPoint],
    width: float,
    height: float,
    horizontal: bool = False,
    border_radius: float = 4,
    gap_fraction: float = DEFAULT_LAYOUT.BAR_GAP_FRACTION,
    headroom: float = DEFAULT_LAYOUT.VALUE_HEADROOM,
    nice: bool = True,
    tick_count: int = DEFAULT_LAYOUT.TICK_COUNT,
) -> BarLayout:
    """
    Lay out one bar per data point inside a ``width`` x ``height`` plot area.

    The categorical axis is split into N equal bands; each bar fills
    ``1 - gap_fraction`` of its band, centered. The value axis uses one scale
    whose domain covers ``[min(0, min_value), max_value]``, so negative values
    extend from the zero baseline in the opposite direction.

    Args:
        points: Data points in draw order
        width, height: Plot area size in pixels
        horizontal: Bars grow along x instead of y
        border_radius: Requested corner radius
        gap_fraction: Empty share of each band
        headroom: Factor applied to the extreme values before rounding
        nice: Round the value domain outward to tick values

    Returns:
        BarLayout; its ``bars`` tuple is empty when ``points`` is
    """
    band_extent = height if horizontal else width
    value_extent = width if horizontal else height
    # Vertical bars grow upward: domain_min sits at the bottom edge
    range_min, range_max = (0.0, value_extent) if horizontal else (value_extent, 0.0)

    values = finite_array((p.value for p in points), context="bar values")
    scale = Scale.from_values(
        values, range_min, range_max,
        include_zero=True, headroom=headroom, nice=nice, tick_count=tick_count,
    )
    baseline = scale.map(0.0)

    n = len(points)
    band = band_extent / n if n else 0.0
    gap_fraction = min(max(gap_fraction, 0.0), 1.0)
    thickness = band * (1 - gap_fraction)
    offset = (band - thickness) / 2
    radius = effective_radius(border_radius, thickness)

    bars = []
    for i, p in enumerate(points):
        end = scale.map(values[i])
        lo, hi = min(baseline, end), max(baseline, end)
        x, y, w, h = transpose(i * band + offset, lo, thickness, hi - lo, horizontal)
        bars.append(
            BarRect(
                index=i,
                label=p.label,
                value=float(values[i]),
                x=x, y=y, width=w, height=h,
                radius=radius,
                color=p.color,
            )
        )

    logger.debug(
        f"Laid out {n} {'horizontal' if horizontal else 'vertical'} bars: "
        f"band={band:.2f}, thickness={thickness:.2f}, radius={radius:.2f}, baseline={baseline:.2f}"
    )
    return BarLayout(
        bars=tuple(bars),
        value_scale=scale,
        baseline=baseline,
        band_size=band,
        thickness=thickness,
        horizontal=horizontal,
    )


def value_label_anchor(bar: BarRect, layout: BarLayout,
                       offset: float = DEFAULT_LAYOUT.VALUE_LABEL_OFFSET) -> Tuple[float, float]:
    """
    Anchor just past the outer end of a bar.

    Positive bars get the label beyond their far end (above / right),
    negative bars beyond their near end (below / left).
    """
    band_mid = layout.band_center(bar.index)
    if layout.horizontal:
        tip = bar.x if bar.is_negative else bar.x + bar.width
        value_pos = tip - offset if bar.is_negative else tip + offset
    else:
        tip = bar.y + bar.height if bar.is_negative else bar.y
        value_pos = tip + offset if bar.is_negative else tip - offset
    x, y, _, _ = transpose(band_mid, value_pos, 0.0, 0.0, layout.horizontal)
    return (x, y)
