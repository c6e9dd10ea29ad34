"""
Numeric coercion helpers.

Non-finite input (NaN, +/-Infinity, unparsable values) is treated as 0 so it
never reaches sums, scales or coordinates.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable

import numpy as np


logger = logging.getLogger(__name__)


def is_finite_number(x: Any) -> bool:
    try:
        return math.isfinite(float(x))
    except (TypeError, ValueError):
        return False


def finite_or_zero(x: Any) -> float:
    """Return ``x`` as a float, or 0.0 when it is not a finite number."""
    return float(x) if is_finite_number(x) else 0.0


def finite_array(values: Iterable[Any], context: str = "values") -> np.ndarray:
    """
    Convert values to a float64 array with non-finite entries replaced by 0.

    Logs a warning naming ``context`` when anything had to be replaced.
    """
    values = list(values)
    replaced = sum(1 for v in values if not is_finite_number(v))
    if replaced:
        logger.warning(f"Treating {replaced} non-finite {context} as 0")
    return np.array([finite_or_zero(v) for v in values], dtype=np.float64)
