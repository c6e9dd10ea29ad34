# chartgeom/geometry/arc_geometry.py
"""
Pie and donut slice geometry.

Angles are in degrees, measured clockwise from 12 o'clock. Slices follow
input order; the first slice always starts at 0 and the last one ends at
exactly 360 whenever the total is positive.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config.layout_config import DEFAULT_LAYOUT
from ..models.data_types import ArcSlice, DataPoint, PathCommand
from .numeric import finite_array


logger = logging.getLogger(__name__)

FULL_CIRCLE = 360.0
MAX_FLOAT = float(np.finfo(np.float64).max)


@dataclass(frozen=True)
class ArcLayout:
    """Slices of one pie plus the total they were computed from."""

    slices: Tuple[ArcSlice, ...]
    total: float

    @property
    def is_empty(self) -> bool:
        """True when there was nothing to divide (no points or zero total)."""
        return not self.slices


def compute_arcs(
    points: Sequence[DataPoint],
    palette: Sequence[str] = DEFAULT_LAYOUT.PALETTE,
) -> ArcLayout:
    """
    Compute start/end angles and percentages for each data point.

    Negative and non-finite values contribute no sweep. A zero total yields
    an empty layout rather than NaN angles. The total saturates at the
    largest float; sweeps and percentages stay proportional regardless.

    Args:
        points: Data points in draw order
        palette: Fallback colors, indexed by point position

    Returns:
        ArcLayout with one slice per point (empty when total is 0)
    """
    values = finite_array((p.value for p in points), context="pie values")
    if values.size and (values < 0).any():
        logger.warning(f"Ignoring {int((values < 0).sum())} negative pie values")
        values = np.clip(values, 0.0, None)

    peak = float(values.max()) if values.size else 0.0
    if peak <= 0:
        logger.info("Pie total is zero, emitting no slices")
        return ArcLayout(slices=(), total=0.0)

    # Relative to the largest value so the sum stays finite
    relative = values / peak
    shares = relative / relative.sum()
    with np.errstate(over="ignore"):
        total = float(values.sum())
    if not math.isfinite(total):
        logger.warning("Pie total overflows, capping at the largest float")
        total = MAX_FLOAT

    ends = np.cumsum(shares * FULL_CIRCLE)
    ends[-1] = FULL_CIRCLE
    starts = np.concatenate(([0.0], ends[:-1]))

    slices = []
    for i, p in enumerate(points):
        slices.append(
            ArcSlice(
                index=i,
                label=p.label,
                value=float(values[i]),
                start_angle=float(starts[i]),
                end_angle=float(ends[i]),
                percentage=float(shares[i] * 100),
                color=p.color or palette[i % len(palette)],
            )
        )
    logger.debug(f"Computed {len(slices)} slices, total={total}")
    return ArcLayout(slices=tuple(slices), total=total)


# ==================== PATH CONSTRUCTION ====================


def polar_point(
    angle_deg: float, radius: float, center: Tuple[float, float] = (0.0, 0.0)
) -> Tuple[float, float]:
    """Point at ``angle_deg`` (clockwise from 12 o'clock) on a circle."""
    a = math.radians(angle_deg)
    return (center[0] + radius * math.sin(a), center[1] - radius * math.cos(a))


def _arc_segments(
    start_deg: float,
    end_deg: float,
    radius: float,
    center: Tuple[float, float],
    max_segment: float,
) -> List[PathCommand]:
    """
    Cubic Bezier commands approximating the arc from start to end.

    Works in either direction; the pen is assumed to sit at the start point.
    """
    delta = end_deg - start_deg
    if radius <= 0 or delta == 0:
        return []
    n = max(1, math.ceil(abs(delta) / max_segment - 1e-9))
    step = math.radians(delta / n)
    k = 4.0 / 3.0 * math.tan(step / 4)
    commands = []
    a0 = math.radians(start_deg)
    for _ in range(n):
        a1 = a0 + step
        x0, y0 = center[0] + radius * math.sin(a0), center[1] - radius * math.cos(a0)
        x3, y3 = center[0] + radius * math.sin(a1), center[1] - radius * math.cos(a1)
        # Tangent direction of (sin a, -cos a) is (cos a, sin a)
        c1 = (x0 + k * radius * math.cos(a0), y0 + k * radius * math.sin(a0))
        c2 = (x3 - k * radius * math.cos(a1), y3 - k * radius * math.sin(a1))
        commands.append(PathCommand("C", (c1[0], c1[1], c2[0], c2[1], x3, y3)))
        a0 = a1
    return commands


def arc_path(
    start_angle: float,
    end_angle: float,
    outer_radius: float,
    inner_radius: float = 0.0,
    center: Tuple[float, float] = (0.0, 0.0),
    max_segment: float = DEFAULT_LAYOUT.MAX_ARC_SEGMENT_DEGREES,
) -> Tuple[PathCommand, ...]:
    """
    Closed path for one slice.

    Pie: outer start -> arc -> outer end -> center -> close.
    Donut: outer start -> arc -> outer end -> inner end -> reverse arc ->
    inner start -> close.
    A zero sweep or zero outer radius yields an empty path.
    """
    if end_angle <= start_angle or outer_radius <= 0:
        return ()
    inner_radius = min(max(0.0, inner_radius), outer_radius)

    commands = [PathCommand("M", polar_point(start_angle, outer_radius, center))]
    commands += _arc_segments(start_angle, end_angle, outer_radius, center, max_segment)
    if inner_radius > 0:
        commands.append(PathCommand("L", polar_point(end_angle, inner_radius, center)))
        commands += _arc_segments(end_angle, start_angle, inner_radius, center, max_segment)
    else:
        commands.append(PathCommand("L", center))
    commands.append(PathCommand("Z"))
    return tuple(commands)


def slice_path(
    arc: ArcSlice,
    outer_radius: float,
    inner_radius: float = 0.0,
    center: Tuple[float, float] = (0.0, 0.0),
) -> Tuple[PathCommand, ...]:
    return arc_path(arc.start_angle, arc.end_angle, outer_radius, inner_radius, center)


def slice_centroid(
    arc: ArcSlice,
    radius: float,
    center: Tuple[float, float] = (0.0, 0.0),
    inner_radius: Optional[float] = None,
) -> Tuple[float, float]:
    """
    Label anchor on the slice's bisector.

    With ``inner_radius`` the anchor sits midway between the two radii,
    otherwise at ``radius``.
    """
    r = radius if inner_radius is None else (radius + inner_radius) / 2
    return polar_point(arc.mid_angle, r, center)
