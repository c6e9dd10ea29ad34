"""
Layout configuration for chart rendering.

Centralizes all magic numbers used when laying out pie, bar and line charts.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ChartLayoutConfig:
    """
    Layout constants shared by the chart renderers.

    Pixel values unless the name says RATIO or FRACTION.
    """

    # ==================== Plot Margins ====================
    # Room reserved around the plot area for axes and axis labels
    MARGIN_TOP: int = 20
    MARGIN_RIGHT: int = 30
    MARGIN_BOTTOM: int = 50
    MARGIN_LEFT: int = 60
    MARGIN_LEFT_HORIZONTAL: int = 100  # Category names sit left of horizontal bars

    # ==================== Pie / Donut ====================
    PIE_PADDING: int = 20  # outer radius = min(width, height) / 2 - padding
    LABEL_RADIUS_RATIO: float = 0.6  # Slice labels sit at 60% of the outer radius
    SLICE_STROKE_WIDTH: float = 2.0
    SLICE_STROKE_COLOR: str = "#FFFFFF"
    MAX_ARC_SEGMENT_DEGREES: float = 90.0  # One cubic Bezier per quarter turn at most

    # ==================== Bars ====================
    BAR_GAP_FRACTION: float = 0.2  # Share of each band left empty between bars
    VALUE_LABEL_OFFSET: int = 5  # Distance of a value label from the bar end

    # ==================== Value Scale ====================
    VALUE_HEADROOM: float = 1.1  # Extend data extremes by 10%
    TICK_COUNT: int = 10

    # ==================== Lines ====================
    LINE_STROKE_WIDTH: float = 2.5
    AREA_FILL_OPACITY: float = 0.1
    DOT_RADIUS: float = 4.0
    DOT_STROKE_WIDTH: float = 2.0
    DOT_FILL_COLOR: str = "#FFFFFF"

    # ==================== Axes ====================
    GRID_STROKE_WIDTH: float = 1.0
    TICK_LABEL_OFFSET: int = 9  # Distance of tick labels from the axis line
    X_AXIS_LABEL_OFFSET: int = 40  # Below the plot area
    Y_AXIS_LABEL_OFFSET: int = 45  # Left of the plot area

    # ==================== Colors ====================
    DEFAULT_BAR_COLOR: str = "#6C5CE7"
    GRID_COLOR: str = "#DFE6E9"
    PALETTE: tuple = (
        "#6C5CE7",  # purple
        "#00B894",  # green
        "#E17055",  # orange
        "#0984E3",  # blue
        "#FDCB6E",  # yellow
        "#A29BFE",  # lavender
        "#55EFC4",  # mint
        "#FAB1A0",  # peach
    )


# Default configuration instance
DEFAULT_LAYOUT = ChartLayoutConfig()
