# chartgeom/geometry/curve_interpolator.py
"""
Line interpolation for ordered (x, y) pixel points.

Three modes:
- linear:   straight segments
- step:     horizontal then vertical segments (staircase)
- monotone: cubic Bezier segments that never overshoot the data in y

Points are used in the order given; nothing is sorted.
"""

import logging
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

from ..config.chart_config import CURVE_TYPES, InvalidCurveTypeError
from ..models.data_types import PathCommand
from .numeric import finite_array


logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def _as_arrays(points: Sequence[Point]) -> Tuple[np.ndarray, np.ndarray]:
    if not len(points):
        return np.empty(0), np.empty(0)
    xs = finite_array((p[0] for p in points), context="x coordinates")
    ys = finite_array((p[1] for p in points), context="y coordinates")
    return xs, ys


# ==================== MODES ====================


def _linear(xs: np.ndarray, ys: np.ndarray) -> List[PathCommand]:
    commands = [PathCommand("M", (xs[0], ys[0]))]
    commands += [PathCommand("L", (x, y)) for x, y in zip(xs[1:], ys[1:])]
    return commands


def _step(xs: np.ndarray, ys: np.ndarray) -> List[PathCommand]:
    commands = [PathCommand("M", (xs[0], ys[0]))]
    for i in range(1, len(xs)):
        commands.append(PathCommand("L", (xs[i], ys[i - 1])))
        commands.append(PathCommand("L", (xs[i], ys[i])))
    return commands


def monotone_tangents(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """
    Per-point tangents (dy/dx) for monotone cubic interpolation.

    Interior tangents are bounded by the neighbouring secant slopes and are
    zero at local extrema, where the two secants differ in sign. End tangents
    use the one-sided estimate ``(3 * secant - neighbour tangent) / 2``.
    Segments with zero width get a zero secant.
    """
    n = len(xs)
    h = np.diff(xs)
    dy = np.diff(ys)
    with np.errstate(divide="ignore", invalid="ignore"):
        secants = np.where(h != 0, dy / np.where(h != 0, h, 1.0), 0.0)

    t = np.zeros(n, dtype=np.float64)
    if n < 3:
        t[:] = secants[0] if n == 2 else 0.0
        return t

    s0, s1 = secants[:-1], secants[1:]
    h0, h1 = h[:-1], h[1:]
    span = h0 + h1
    with np.errstate(divide="ignore", invalid="ignore"):
        p = np.where(span != 0, (s0 * h1 + s1 * h0) / np.where(span != 0, span, 1.0), 0.0)
    bound = np.minimum(np.minimum(np.abs(s0), np.abs(s1)), 0.5 * np.abs(p))
    t[1:-1] = (np.sign(s0) + np.sign(s1)) * bound

    t[0] = (3 * secants[0] - t[1]) / 2 if h[0] != 0 else t[1]
    t[-1] = (3 * secants[-1] - t[-2]) / 2 if h[-1] != 0 else t[-2]
    return t


def _monotone(xs: np.ndarray, ys: np.ndarray) -> List[PathCommand]:
    if len(xs) == 2:
        # No neighbour to bound a tangent against
        return _linear(xs, ys)
    t = monotone_tangents(xs, ys)
    commands = [PathCommand("M", (xs[0], ys[0]))]
    for i in range(len(xs) - 1):
        dx = (xs[i + 1] - xs[i]) / 3
        commands.append(
            PathCommand(
                "C",
                (
                    xs[i] + dx, ys[i] + dx * t[i],
                    xs[i + 1] - dx, ys[i + 1] - dx * t[i + 1],
                    xs[i + 1], ys[i + 1],
                ),
            )
        )
    return commands


_MODES: Dict[str, Callable[[np.ndarray, np.ndarray], List[PathCommand]]] = {
    "linear": _linear,
    "step": _step,
    "monotone": _monotone,
}


# ==================== PUBLIC API ====================


def interpolate(points: Sequence[Point], curve_type: str = "monotone") -> Tuple[PathCommand, ...]:
    """
    Stroke path through ``points``.

    Args:
        points: Ordered (x, y) pixel coordinates
        curve_type: "linear", "monotone" or "step"

    Returns:
        Path commands; empty for fewer than two points

    Raises:
        InvalidCurveTypeError: If curve_type is not a known mode
    """
    if curve_type not in CURVE_TYPES:
        raise InvalidCurveTypeError(f"curve_type must be one of {CURVE_TYPES}, got {curve_type!r}")
    if len(points) < 2:
        return ()
    xs, ys = _as_arrays(points)
    commands = _MODES[curve_type](xs, ys)
    logger.debug(f"Interpolated {len(points)} points as {curve_type}: {len(commands)} commands")
    return tuple(commands)


def area_path(
    points: Sequence[Point], curve_type: str = "monotone", baseline: float = 0.0
) -> Tuple[PathCommand, ...]:
    """
    Fillable region between the curve and a horizontal baseline.

    The curve part is identical to :func:`interpolate`; the path then drops
    to ``baseline`` under the last point, runs back under the first point
    and closes.
    """
    stroke = interpolate(points, curve_type)
    if not stroke:
        return ()
    x_first = stroke[0].coordinates[0]
    x_last = stroke[-1].end_point[0]
    return stroke + (
        PathCommand("L", (x_last, baseline)),
        PathCommand("L", (x_first, baseline)),
        PathCommand("Z"),
    )
