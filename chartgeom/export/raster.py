# chartgeom/export/raster.py
"""
Raster preview of a scene using OpenCV.

Produces RGB numpy images with shape (H, W, 3). Bezier segments are
flattened to polylines; text is drawn with OpenCV's Hershey font and is
never rotated.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import cv2
import numpy as np

from ..config.chart_config import ExportError
from ..models.data_types import (
    CircleShape,
    PathCommand,
    PathShape,
    RectShape,
    Scene,
    TextLabel,
)


logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

DEFAULT_INK: RGB = (45, 52, 54)
CURVE_STEPS = 16
FONT = cv2.FONT_HERSHEY_SIMPLEX
FONT_SCALE = 0.4


def parse_color(color: Optional[str], default: Optional[RGB] = None) -> Optional[RGB]:
    """``"#RRGGBB"`` or ``"#RGB"`` -> (r, g, b); anything else -> ``default``."""
    if not color or not color.startswith("#"):
        return default
    hexpart = color[1:]
    if len(hexpart) == 3:
        hexpart = "".join(c * 2 for c in hexpart)
    if len(hexpart) != 6:
        return default
    try:
        return tuple(int(hexpart[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return default


# ==================== FLATTENING ====================


def _cubic(p0, p1, p2, p3, steps: int) -> np.ndarray:
    t = np.linspace(0.0, 1.0, steps + 1)[1:, None]
    u = 1.0 - t
    return (u ** 3) * p0 + 3 * (u ** 2) * t * p1 + 3 * u * (t ** 2) * p2 + (t ** 3) * p3


def flatten_path(commands: Sequence[PathCommand],
                 steps: int = CURVE_STEPS) -> List[Tuple[np.ndarray, bool]]:
    """
    Convert path commands to polylines.

    Returns:
        List of (points (N, 2) float array, closed) per subpath
    """
    subpaths: List[Tuple[np.ndarray, bool]] = []
    current: List[np.ndarray] = []

    def flush(closed: bool):
        if current:
            subpaths.append((np.vstack(current), closed))
        current.clear()

    for cmd in commands:
        c = np.asarray(cmd.coordinates, dtype=np.float64)
        if cmd.kind == "M":
            flush(False)
            current.append(c.reshape(1, 2))
        elif cmd.kind == "L":
            current.append(c.reshape(1, 2))
        elif cmd.kind == "C":
            p0 = current[-1][-1] if current else c[4:6]
            current.append(_cubic(p0, c[0:2], c[2:4], c[4:6], steps))
        elif cmd.kind == "Z":
            flush(True)
    flush(False)
    return subpaths


def rounded_rect_points(x: float, y: float, w: float, h: float, r: float,
                        steps: int = 6) -> np.ndarray:
    """Polygon outline of a rectangle with circular corners of radius ``r``."""
    r = max(0.0, min(r, w / 2, h / 2))
    if r == 0:
        return np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=np.float64)
    pts = []
    corners = [
        (x + w - r, y + r, -90.0),   # top-right
        (x + w - r, y + h - r, 0.0),  # bottom-right
        (x + r, y + h - r, 90.0),    # bottom-left
        (x + r, y + r, 180.0),       # top-left
    ]
    for cx, cy, a0 in corners:
        for a in np.radians(np.linspace(a0, a0 + 90.0, steps + 1)):
            pts.append((cx + r * np.cos(a), cy + r * np.sin(a)))
    return np.asarray(pts, dtype=np.float64)


# ==================== DRAWING ====================


def _int_pts(pts: np.ndarray) -> np.ndarray:
    return np.round(pts).astype(np.int32).reshape(-1, 1, 2)


def _fill(img: np.ndarray, polys: List[np.ndarray], color: RGB, opacity: float) -> None:
    if opacity >= 1.0:
        cv2.fillPoly(img, [_int_pts(p) for p in polys], color, lineType=cv2.LINE_AA)
        return
    overlay = img.copy()
    cv2.fillPoly(overlay, [_int_pts(p) for p in polys], color, lineType=cv2.LINE_AA)
    cv2.addWeighted(overlay, opacity, img, 1.0 - opacity, 0, dst=img)


def _draw_path(img: np.ndarray, shape: PathShape) -> None:
    subpaths = flatten_path(shape.commands)
    fill = parse_color(shape.fill)
    if fill is not None:
        polys = [pts for pts, _ in subpaths if len(pts) >= 3]
        if polys:
            _fill(img, polys, fill, shape.fill_opacity)
    stroke = parse_color(shape.stroke, DEFAULT_INK if shape.stroke else None)
    if stroke is not None and shape.stroke_width > 0:
        thickness = max(1, int(round(shape.stroke_width)))
        for pts, closed in subpaths:
            cv2.polylines(img, [_int_pts(pts)], closed, stroke, thickness, lineType=cv2.LINE_AA)


def _draw_rect(img: np.ndarray, shape: RectShape) -> None:
    color = parse_color(shape.fill, DEFAULT_INK)
    if shape.width <= 0 or shape.height <= 0:
        return
    pts = rounded_rect_points(shape.x, shape.y, shape.width, shape.height, shape.rx)
    _fill(img, [pts], color, 1.0)


def _draw_circle(img: np.ndarray, shape: CircleShape) -> None:
    center = (int(round(shape.cx)), int(round(shape.cy)))
    radius = max(1, int(round(shape.r)))
    fill = parse_color(shape.fill)
    if fill is not None:
        cv2.circle(img, center, radius, fill, -1, lineType=cv2.LINE_AA)
    stroke = parse_color(shape.stroke)
    if stroke is not None and shape.stroke_width > 0:
        cv2.circle(img, center, radius, stroke, max(1, int(round(shape.stroke_width))),
                   lineType=cv2.LINE_AA)


def _draw_text(img: np.ndarray, label: TextLabel) -> None:
    (tw, th), _ = cv2.getTextSize(label.text, FONT, FONT_SCALE, 1)
    x = label.x
    if label.anchor == "middle":
        x -= tw / 2
    elif label.anchor == "end":
        x -= tw
    y = label.y
    if label.baseline == "middle":
        y += th / 2
    elif label.baseline == "hanging":
        y += th
    cv2.putText(img, label.text, (int(round(x)), int(round(y))), FONT, FONT_SCALE,
                DEFAULT_INK, 1, cv2.LINE_AA)


_DRAWERS = {
    PathShape: _draw_path,
    RectShape: _draw_rect,
    CircleShape: _draw_circle,
    TextLabel: _draw_text,
}


def rasterize_scene(scene: Scene, background: RGB = (255, 255, 255)) -> np.ndarray:
    """
    Draw every primitive of ``scene`` in order onto a new RGB image.

    Returns:
        uint8 array of shape (ceil(height), ceil(width), 3)

    Raises:
        ExportError: If OpenCV fails while drawing
    """
    h, w = int(np.ceil(scene.height)), int(np.ceil(scene.width))
    img = np.empty((h, w, 3), dtype=np.uint8)
    img[:] = background
    try:
        for shape in scene.primitives:
            _DRAWERS[type(shape)](img, shape)
    except cv2.error as e:
        raise ExportError(f"OpenCV error while rasterizing scene: {e}") from e
    logger.debug(f"Rasterized {len(scene.primitives)} primitives into {w}x{h} image")
    return img


def save_png(scene: Scene, path: Union[str, Path], background: RGB = (255, 255, 255)) -> Path:
    """
    Rasterize and write a PNG.

    Raises:
        ExportError: If rasterizing or writing fails
    """
    path = Path(path)
    img = rasterize_scene(scene, background)
    if img.size == 0:
        raise ExportError(f"Cannot write an empty {scene.width}x{scene.height} image")
    bgr = cv2.cvtColor(img, cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(str(path), bgr):
        raise ExportError(f"Failed to write image: {path}")
    return path
