"""Export package for chartgeom.

Scene serialization plus raster (OpenCV) and figure (matplotlib) previews.
"""

__all__ = [
    "serialize",
    "raster",
    "figure",
]
