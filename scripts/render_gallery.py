"""
Sample chart gallery for chartgeom.

Usage (from the project root):
    python -m scripts.render_gallery [--out data/gallery]

Renders a fixed set of pie, donut, bar and line scenes and saves each one as:
- Raster preview:  <name>.png        (OpenCV)
- Figure preview:  <name>_mpl.png    (matplotlib)
- Scene JSON:      <name>.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from chartgeom.export.figure import save_figure
from chartgeom.export.raster import save_png
from chartgeom.export.serialize import write_scene_json
from chartgeom.rendering import render_chart


GALLERY_DIR = PROJECT_ROOT / "data" / "gallery"

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]

MARKET_SHARE = [
    {"label": "Product A", "value": 30},
    {"label": "Product B", "value": 50},
    {"label": "Product C", "value": 20},
]

PROFIT = [{"label": m, "value": v} for m, v in zip(MONTHS, [-10, 20, 35, 15, -5, 40])]

TRAFFIC = [
    {"name": "Visits", "data": [{"x": i, "y": y} for i, y in enumerate([120, 180, 150, 220, 260, 240])]},
    {"name": "Signups", "data": [{"x": i, "y": y} for i, y in enumerate([20, 35, 30, 60, 55, 80])]},
]

CASES: List[Tuple[str, str, List[Dict[str, Any]], Dict[str, Any]]] = [
    ("pie_percentages", "pie", MARKET_SHARE, {"showPercentages": True}),
    ("donut", "pie", MARKET_SHARE, {"innerRadius": 80}),
    ("bar_vertical", "bar", PROFIT, {"showValues": True, "yAxisLabel": "Profit ($k)"}),
    ("bar_horizontal", "bar", PROFIT, {"horizontal": True, "color": None}),
    ("line_monotone", "line", TRAFFIC, {"areaFill": True}),
    ("line_step", "line", TRAFFIC, {"curveType": "step", "showDots": False}),
]


def main() -> int:
    parser = argparse.ArgumentParser(description="Render the sample chart gallery")
    parser.add_argument("--out", type=str, default=str(GALLERY_DIR), help="Output directory")
    args = parser.parse_args()

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    for name, chart_type, data, options in CASES:
        scene = render_chart(chart_type, data, options)
        save_png(scene, out_dir / f"{name}.png")
        save_figure(scene, out_dir / f"{name}_mpl.png")
        write_scene_json(scene, out_dir / f"{name}.json")
        print(f"{name}: {len(scene.primitives)} primitives, {len(scene.legend)} legend entries")

    print(f"Gallery written to: {out_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
