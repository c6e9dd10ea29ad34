"""Configuration module for chartgeom."""

from .layout_config import ChartLayoutConfig, DEFAULT_LAYOUT
from .chart_config import (
    PieChartConfig,
    BarChartConfig,
    LineChartConfig,
    CURVE_TYPES,
    ChartEngineError,
    InvalidDatasetError,
    InvalidCurveTypeError,
    InvalidOptionError,
    ExportError,
)

__all__ = [
    "ChartLayoutConfig",
    "DEFAULT_LAYOUT",
    "PieChartConfig",
    "BarChartConfig",
    "LineChartConfig",
    "CURVE_TYPES",
    "ChartEngineError",
    "InvalidDatasetError",
    "InvalidCurveTypeError",
    "InvalidOptionError",
    "ExportError",
]
