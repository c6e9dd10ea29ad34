# chartgeom/rendering/labels.py
"""
Legend entries, palette colors and label text.
"""

import logging
from typing import Any, List, Optional, Sequence

from ..config.layout_config import DEFAULT_LAYOUT
from ..geometry.numeric import finite_or_zero
from ..models.data_types import DataPoint, LegendEntry, Series


logger = logging.getLogger(__name__)


def palette_color(index: int, palette: Sequence[str] = DEFAULT_LAYOUT.PALETTE) -> str:
    """Deterministic fallback color for position ``index`` (cycles)."""
    return palette[index % len(palette)]


def resolve_color(explicit: Optional[str], index: int,
                  palette: Sequence[str] = DEFAULT_LAYOUT.PALETTE) -> str:
    """Explicit color if given, otherwise the palette color for ``index``."""
    return explicit or palette_color(index, palette)


class LabelFormatter:
    """Formats numbers for labels. Output never depends on the locale."""

    @staticmethod
    def percentage(value: Any, total: Any) -> str:
        """
        Share of ``total`` with exactly one decimal place.

        >>> LabelFormatter.percentage(1, 3)
        '33.3%'
        """
        v, t = finite_or_zero(value), finite_or_zero(total)
        return LabelFormatter.percent(v / t * 100 if t else 0.0)

    @staticmethod
    def percent(pct: Any) -> str:
        """An already computed percentage, e.g. 30 -> '30.0%'."""
        return f"{finite_or_zero(pct):.1f}%"

    @staticmethod
    def value(value: Any) -> str:
        """
        Caller's value as text, without reformatting.

        Strings pass through; integral numbers print without a trailing
        ``.0``; other floats use their shortest round-trip form.
        """
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return repr(value) if isinstance(value, float) else str(value)

    @staticmethod
    def tick(value: float) -> str:
        """Axis tick text; strips float noise such as 0.30000000000000004."""
        rounded = round(value, 10)
        if rounded == 0:
            rounded = 0.0
        return LabelFormatter.value(rounded)


class LegendBuilder:
    """Builds one legend entry per point or series, in input order."""

    def __init__(self, palette: Sequence[str] = DEFAULT_LAYOUT.PALETTE):
        self.palette = tuple(palette)

    def for_points(
        self,
        points: Sequence[DataPoint],
        show_percentages: bool = False,
        total: Optional[float] = None,
        fallback_color: Optional[str] = None,
        percentages: Optional[Sequence[float]] = None,
    ) -> List[LegendEntry]:
        """
        Entries for pie slices or bars.

        Args:
            points: Data points in draw order
            show_percentages: Add "30.0%" style text computed against ``total``
            total: Denominator for percentages (sum of non-negative values
                when omitted)
            fallback_color: Color for points without one, before the palette
            percentages: Precomputed share per point; takes precedence over
                ``total``
        """
        if show_percentages and total is None:
            total = sum(max(0.0, finite_or_zero(p.value)) for p in points)
        entries = []
        for i, p in enumerate(points):
            entries.append(
                LegendEntry(
                    index=i,
                    label=p.label,
                    color=p.color or fallback_color or palette_color(i, self.palette),
                    value=finite_or_zero(p.value),
                    value_text=LabelFormatter.value(p.value),
                    percentage=self._percentage_text(p, i, total, percentages)
                    if show_percentages else None,
                )
            )
        logger.debug(f"Built {len(entries)} legend entries")
        return entries

    @staticmethod
    def _percentage_text(point: DataPoint, index: int, total, percentages) -> str:
        if percentages is not None and index < len(percentages):
            return LabelFormatter.percent(percentages[index])
        return LabelFormatter.percentage(max(0.0, finite_or_zero(point.value)), total)

    def for_series(self, series: Sequence[Series]) -> List[LegendEntry]:
        """Entries for line series (name and color only)."""
        return [
            LegendEntry(index=i, label=s.name, color=resolve_color(s.color, i, self.palette))
            for i, s in enumerate(series)
        ]
