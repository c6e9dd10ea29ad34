"""Models package for chartgeom.

This package contains the immutable value objects exchanged between the
geometry components, the renderers and the presentation layer.
"""
from .data_types import (
    DataPoint,
    SeriesPoint,
    Series,
    ArcSlice,
    PathCommand,
    PathShape,
    RectShape,
    CircleShape,
    TextLabel,
    LegendEntry,
    Scene,
    path_data,
)

__all__ = [
    # Datasets
    "DataPoint",
    "SeriesPoint",
    "Series",
    # Geometry
    "ArcSlice",
    "PathCommand",
    "path_data",
    # Scene
    "PathShape",
    "RectShape",
    "CircleShape",
    "TextLabel",
    "LegendEntry",
    "Scene",
]
