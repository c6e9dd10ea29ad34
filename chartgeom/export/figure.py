# chartgeom/export/figure.py
"""
matplotlib preview of a scene.

Scene coordinates are used directly: the axes span [0, width] x [0, height]
with y growing downward, so paths map 1:1 onto matplotlib Path codes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from matplotlib.patches import Circle, FancyBboxPatch, Patch, PathPatch, Rectangle
from matplotlib.path import Path as MplPath

from ..config.chart_config import ExportError
from ..models.data_types import CircleShape, PathShape, RectShape, Scene, TextLabel


logger = logging.getLogger(__name__)

DEFAULT_INK = "#2D3436"

_HA = {"start": "left", "middle": "center", "end": "right"}
_VA = {"middle": "center", "hanging": "top", "alphabetic": "baseline"}


def _color(c, alpha: float = 1.0):
    """Scene color -> matplotlib color; non-literal tokens fall back to ink."""
    if c is None:
        return "none"
    if not c.startswith("#"):
        c = DEFAULT_INK
    return to_rgba(c, alpha)


def to_mpl_path(shape: PathShape) -> MplPath:
    """Translate M/L/C/Z commands into a matplotlib Path."""
    vertices, codes = [], []
    start = (0.0, 0.0)
    for cmd in shape.commands:
        c = cmd.coordinates
        if cmd.kind == "M":
            start = (c[0], c[1])
            vertices.append(start)
            codes.append(MplPath.MOVETO)
        elif cmd.kind == "L":
            vertices.append((c[0], c[1]))
            codes.append(MplPath.LINETO)
        elif cmd.kind == "C":
            vertices += [(c[0], c[1]), (c[2], c[3]), (c[4], c[5])]
            codes += [MplPath.CURVE4] * 3
        elif cmd.kind == "Z":
            vertices.append(start)
            codes.append(MplPath.CLOSEPOLY)
    return MplPath(np.asarray(vertices, dtype=np.float64).reshape(-1, 2), codes)


def scene_to_figure(scene: Scene, dpi: int = 100) -> Figure:
    """
    Build a matplotlib Figure for ``scene``.

    Legend entries, when present, become a figure legend of color patches.
    """
    fig = Figure(figsize=(max(scene.width, 1) / dpi, max(scene.height, 1) / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, max(scene.width, 1))
    ax.set_ylim(max(scene.height, 1), 0)
    ax.set_axis_off()
    # Scene stroke widths are pixels; matplotlib wants points
    px = 72.0 / dpi

    for z, shape in enumerate(scene.primitives):
        if isinstance(shape, PathShape):
            if not shape.commands:
                continue
            ax.add_patch(PathPatch(
                to_mpl_path(shape),
                facecolor=_color(shape.fill, shape.fill_opacity),
                edgecolor=_color(shape.stroke),
                linewidth=shape.stroke_width * px,
                zorder=z,
            ))
        elif isinstance(shape, RectShape):
            if shape.rx > 0:
                patch = FancyBboxPatch(
                    (shape.x, shape.y), shape.width, shape.height,
                    boxstyle=f"round,pad=0,rounding_size={shape.rx}",
                    facecolor=_color(shape.fill or DEFAULT_INK), edgecolor="none", zorder=z,
                )
            else:
                patch = Rectangle(
                    (shape.x, shape.y), shape.width, shape.height,
                    facecolor=_color(shape.fill or DEFAULT_INK), edgecolor="none", zorder=z,
                )
            ax.add_patch(patch)
        elif isinstance(shape, CircleShape):
            ax.add_patch(Circle(
                (shape.cx, shape.cy), shape.r,
                facecolor=_color(shape.fill), edgecolor=_color(shape.stroke),
                linewidth=shape.stroke_width * px, zorder=z,
            ))
        elif isinstance(shape, TextLabel):
            ax.text(
                shape.x, shape.y, shape.text,
                ha=_HA.get(shape.anchor, "center"),
                va=_VA.get(shape.baseline, "center"),
                rotation=-shape.rotation,
                fontsize=8,
                color=DEFAULT_INK,
                zorder=z,
            )

    if scene.legend:
        handles = [
            Patch(color=entry.color,
                  label=entry.label if entry.display_text is None
                  else f"{entry.label}  {entry.display_text}")
            for entry in scene.legend
        ]
        ax.legend(handles=handles, loc="upper right", fontsize=7, frameon=False)

    logger.debug(f"Built figure with {len(scene.primitives)} primitives")
    return fig


def save_figure(scene: Scene, path: Union[str, Path], dpi: int = 100) -> Path:
    """
    Render the scene with matplotlib and save it (format from the suffix).

    Raises:
        ExportError: If matplotlib cannot write the file
    """
    path = Path(path)
    fig = scene_to_figure(scene, dpi=dpi)
    try:
        fig.savefig(path, dpi=dpi)
    except (OSError, ValueError) as exc:
        raise ExportError(f"Failed to save figure '{path}': {exc}") from exc
    return path
