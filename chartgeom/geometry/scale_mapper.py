# chartgeom/geometry/scale_mapper.py
"""
Linear scales mapping a numeric data domain onto a pixel range.

Shared by the bar and line layouts. Also provides "nice" tick generation
(steps of 1, 2 or 5 times a power of ten) for axes and grid lines.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from .numeric import finite_or_zero, finite_array


logger = logging.getLogger(__name__)

MAX_FLOAT = float(np.finfo(np.float64).max)

# Thresholds for picking a 10, 5 or 2 step factor
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


# ==================== TICK MATH ====================


def tick_increment(start: float, stop: float, count: int) -> float:
    """
    Step between ticks for roughly ``count`` ticks over [start, stop].

    Positive results are the step itself. Steps below 1 are returned as the
    negated inverse (-10 means a step of 0.1) so callers can divide by an
    integer and avoid accumulating float error. Returns 0 when no step exists.
    """
    if count <= 0:
        return 0.0
    step = (stop - start) / count
    if not math.isfinite(step) or step <= 0:
        return 0.0
    power = math.floor(math.log10(step))
    error = step / (10 ** power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return float(factor * 10 ** power)
    return -float(10 ** -power) / factor


def nice_ticks(start: float, stop: float, count: int = 10) -> List[float]:
    """Evenly spaced round values within [start, stop], ascending."""
    if count <= 0:
        return []
    if start == stop:
        return [float(start)]
    if stop < start:
        start, stop = stop, start
    inc = tick_increment(start, stop, count)
    if inc == 0:
        return []
    if inc > 0:
        i1, i2 = round(start / inc), round(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
        return [float(i * inc) for i in range(i1, i2 + 1)]
    inv = -inc
    i1, i2 = round(start * inv), round(stop * inv)
    if i1 / inv < start:
        i1 += 1
    if i2 / inv > stop:
        i2 -= 1
    return [float(i / inv) for i in range(i1, i2 + 1)]


def nice_domain(start: float, stop: float, count: int = 10) -> Tuple[float, float]:
    """Extend [start, stop] outward so both ends land on tick values."""
    prestep = None
    for _ in range(10):
        step = tick_increment(start, stop, count)
        if step == prestep:
            break
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        elif step < 0:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        else:
            break
        prestep = step
    return float(start), float(stop)


# ==================== SCALE ====================


@dataclass(frozen=True)
class Scale:
    """
    Linear mapping from [domain_min, domain_max] onto [range_min, range_max].

    ``range_min`` is the pixel position of ``domain_min``; it may be
    numerically larger than ``range_max`` (screen y grows downward). When
    ``domain_min == domain_max`` the scale is degenerate and every value maps
    to ``range_min``.
    """

    domain_min: float
    domain_max: float
    range_min: float = 0.0
    range_max: float = 1.0

    def __post_init__(self):
        d0, d1 = finite_or_zero(self.domain_min), finite_or_zero(self.domain_max)
        r0, r1 = finite_or_zero(self.range_min), finite_or_zero(self.range_max)
        if d1 < d0:
            # Keep the value -> pixel mapping while restoring domain order
            d0, d1, r0, r1 = d1, d0, r1, r0
        object.__setattr__(self, "domain_min", d0)
        object.__setattr__(self, "domain_max", d1)
        object.__setattr__(self, "range_min", r0)
        object.__setattr__(self, "range_max", r1)

    @property
    def is_degenerate(self) -> bool:
        return self.domain_max == self.domain_min

    @property
    def domain(self) -> Tuple[float, float]:
        return (self.domain_min, self.domain_max)

    @property
    def range(self) -> Tuple[float, float]:
        return (self.range_min, self.range_max)

    def map(self, value) -> float:
        return map_value(value, self)

    def map_many(self, values: Iterable) -> np.ndarray:
        """Vectorised :meth:`map`."""
        arr = finite_array(values)
        if self.is_degenerate:
            return np.full(arr.shape, self.range_min, dtype=np.float64)
        return self.range_min + _fraction(arr, self) * (self.range_max - self.range_min)

    def invert(self, position) -> float:
        return invert(position, self)

    def ticks(self, count: int = 10) -> List[float]:
        return nice_ticks(self.domain_min, self.domain_max, count)

    def nice(self, count: int = 10) -> "Scale":
        """Copy of this scale with the domain extended to round values."""
        lo, hi = nice_domain(self.domain_min, self.domain_max, count)
        if not (math.isfinite(lo) and math.isfinite(hi)):
            return self
        return Scale(lo, hi, self.range_min, self.range_max)

    def with_range(self, range_min: float, range_max: float) -> "Scale":
        return Scale(self.domain_min, self.domain_max, range_min, range_max)

    @classmethod
    def from_values(
        cls,
        values: Iterable,
        range_min: float,
        range_max: float,
        include_zero: bool = True,
        headroom: float = 1.0,
        nice: bool = False,
        tick_count: int = 10,
    ) -> "Scale":
        """
        Scale covering the extent of ``values``.

        Args:
            include_zero: Extend the domain to contain 0 (bar baselines)
            headroom: Multiply positive max / negative min by this factor
            nice: Round the domain outward to tick values
        """
        arr = finite_array(values)
        if arr.size == 0:
            lo = hi = 0.0
        else:
            lo, hi = float(arr.min()), float(arr.max())
        if include_zero:
            lo, hi = min(0.0, lo), max(0.0, hi)
        # Headroom saturates at the largest float instead of overflowing
        if hi > 0:
            hi = min(hi * headroom, MAX_FLOAT)
        if lo < 0:
            lo = max(lo * headroom, -MAX_FLOAT)
        scale = cls(lo, hi, range_min, range_max)
        if nice:
            scale = scale.nice(tick_count)
        logger.debug(f"Scale domain [{scale.domain_min}, {scale.domain_max}] -> range {scale.range}")
        return scale


def _fraction(v, scale: Scale):
    """Position of ``v`` within the domain, 0 at domain_min and 1 at domain_max."""
    span = scale.domain_max - scale.domain_min
    if math.isfinite(span):
        return (v - scale.domain_min) / span
    # Domain wider than the float range; halve both sides
    return (v / 2 - scale.domain_min / 2) / (scale.domain_max / 2 - scale.domain_min / 2)


def map_value(value, scale: Scale) -> float:
    """
    Map a data value to a pixel position.

    Non-finite values are treated as 0. A degenerate scale returns
    ``range_min`` instead of dividing by zero.
    """
    v = finite_or_zero(value)
    if scale.is_degenerate:
        return scale.range_min
    return scale.range_min + _fraction(v, scale) * (scale.range_max - scale.range_min)


def invert(position, scale: Scale) -> float:
    """Pixel position back to a data value (``domain_min`` when degenerate)."""
    p = finite_or_zero(position)
    if scale.is_degenerate or scale.range_max == scale.range_min:
        return scale.domain_min
    t = (p - scale.range_min) / (scale.range_max - scale.range_min)
    return scale.domain_min + t * (scale.domain_max - scale.domain_min)
