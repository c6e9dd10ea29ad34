"""Geometry package for chartgeom.

Pure functions turning datasets into scales, arcs, curves and bar rectangles.
"""
from .scale_mapper import Scale, map_value, invert, nice_ticks, nice_domain, tick_increment
from .arc_geometry import ArcLayout, compute_arcs, arc_path, slice_path, slice_centroid, polar_point
from .curve_interpolator import interpolate, area_path, monotone_tangents
from .bar_layout import BarLayout, BarRect, layout_bars, effective_radius, value_label_anchor

__all__ = [
    "Scale",
    "map_value",
    "invert",
    "nice_ticks",
    "nice_domain",
    "tick_increment",
    "ArcLayout",
    "compute_arcs",
    "arc_path",
    "slice_path",
    "slice_centroid",
    "polar_point",
    "interpolate",
    "area_path",
    "monotone_tangents",
    "BarLayout",
    "BarRect",
    "layout_bars",
    "effective_radius",
    "value_label_anchor",
]
