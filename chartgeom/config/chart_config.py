# chartgeom/config/chart_config.py
"""
Per-chart option dataclasses and the engine's exception hierarchy.
"""
import math
import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .layout_config import DEFAULT_LAYOUT


# ==================== CUSTOM EXCEPTIONS ====================

class ChartEngineError(Exception):
    """Base exception for chart engine failures"""
    pass


class InvalidDatasetError(ChartEngineError, TypeError):
    """Raised when the dataset is not a sequence (a programming error)"""
    pass


class InvalidCurveTypeError(ChartEngineError, ValueError):
    """Raised for an unknown line interpolation mode"""
    pass


class InvalidOptionError(ChartEngineError, ValueError):
    """Raised for unknown chart types, option names or option values"""
    pass


class ExportError(ChartEngineError):
    """Raised when a scene cannot be exported to an image or figure"""
    pass


CURVE_TYPES = ("linear", "monotone", "step")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(name: str) -> str:
    """showPercentages -> show_percentages"""
    return _CAMEL_RE.sub("_", name).lower()


# ==================== CONFIGURATION CLASSES ====================

class _OptionsMixin:
    """Shared constructors for the chart option dataclasses."""

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None):
        """
        Build a config from a mapping of options.

        Keys may be snake_case (``show_legend``) or camelCase
        (``showLegend``). Unknown keys raise InvalidOptionError.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _snake_case(key)
            if name not in known:
                raise InvalidOptionError(f"Unknown option for {cls.__name__}: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def with_overrides(self, **overrides):
        """Copy of this config with some options replaced."""
        if not overrides:
            return self
        return type(self).from_options({**self.to_dict(), **overrides})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _check_size(width: Any, height: Any) -> None:
    for name, v in (("width", width), ("height", height)):
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v) or v < 0:
            raise InvalidOptionError(f"{name} must be a finite non-negative number, got {v!r}")


def _radius(v: Any) -> float:
    """Radius option as a float; negative or non-finite values become 0."""
    try:
        r = float(v or 0)
    except (TypeError, ValueError):
        raise InvalidOptionError(f"radius must be a number, got {v!r}")
    return r if math.isfinite(r) and r > 0 else 0.0


@dataclass(frozen=True)
class PieChartConfig(_OptionsMixin):
    """
    Options for pie and donut charts.

    Attributes:
        width, height: Scene size in pixels
        inner_radius: 0 for a pie, > 0 for a donut
        outer_radius: Defaults to min(width, height) / 2 - PIE_PADDING
        show_labels: Emit one text label per slice
        show_legend: Emit legend entries
        show_percentages: Label slices and legend with "30.0%" style text
    """

    width: float = 400
    height: float = 400
    inner_radius: float = 0
    outer_radius: Optional[float] = None
    show_labels: bool = True
    show_legend: bool = True
    show_percentages: bool = False

    def __post_init__(self):
        _check_size(self.width, self.height)

    @property
    def resolved_outer_radius(self) -> float:
        if self.outer_radius is not None:
            return _radius(self.outer_radius)
        return max(0.0, min(self.width, self.height) / 2 - DEFAULT_LAYOUT.PIE_PADDING)

    @property
    def resolved_inner_radius(self) -> float:
        """Inner radius clamped to [0, outer radius]."""
        return min(_radius(self.inner_radius), self.resolved_outer_radius)


@dataclass(frozen=True)
class BarChartConfig(_OptionsMixin):
    """
    Options for bar charts.

    Attributes:
        horizontal: Bars grow left-to-right instead of bottom-to-top
        border_radius: Requested corner radius (clamped to half the thickness)
        color: Fill for points without their own color; None cycles the palette
    """

    width: float = 600
    height: float = 400
    horizontal: bool = False
    border_radius: float = 4
    show_grid: bool = True
    show_axes: bool = True
    show_values: bool = False
    show_legend: bool = False
    x_axis_label: Optional[str] = None
    y_axis_label: Optional[str] = None
    color: Optional[str] = DEFAULT_LAYOUT.DEFAULT_BAR_COLOR

    def __post_init__(self):
        _check_size(self.width, self.height)


@dataclass(frozen=True)
class LineChartConfig(_OptionsMixin):
    """
    Options for line charts.

    Attributes:
        curve_type: "linear", "monotone" or "step"
        area_fill: Add a translucent fill between each line and the baseline
        show_dots: Mark every data point with a circle
    """

    width: float = 600
    height: float = 400
    curve_type: str = "monotone"
    area_fill: bool = False
    show_grid: bool = True
    show_axes: bool = True
    show_legend: bool = True
    show_dots: bool = True
    x_axis_label: Optional[str] = None
    y_axis_label: Optional[str] = None

    def __post_init__(self):
        _check_size(self.width, self.height)
        if self.curve_type not in CURVE_TYPES:
            raise InvalidCurveTypeError(
                f"curve_type must be one of {CURVE_TYPES}, got {self.curve_type!r}"
            )


def plot_margins(horizontal: bool = False) -> Dict[str, int]:
    """Margins around the plot area of bar and line charts."""
    return {
        "top": DEFAULT_LAYOUT.MARGIN_TOP,
        "right": DEFAULT_LAYOUT.MARGIN_RIGHT,
        "bottom": DEFAULT_LAYOUT.MARGIN_BOTTOM,
        "left": DEFAULT_LAYOUT.MARGIN_LEFT_HORIZONTAL if horizontal else DEFAULT_LAYOUT.MARGIN_LEFT,
    }
