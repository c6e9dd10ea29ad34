"""
chartgeom - Chart Scene Builder

Turn a JSON dataset into a chart scene (paths, rects, circles, text, legend).

Usage:
    python main.py <dataset.json> --chart pie|bar|line [--output scene.json]
                   [--png preview.png] [--option key=value ...]

Examples:
    python main.py sales.json --chart pie --option showPercentages=true
    python main.py sales.json --chart bar -o scene.json --png bars.png
    python main.py series.json --chart line --option curveType=step
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

from chartgeom.config.chart_config import ChartEngineError
from chartgeom.export.serialize import scene_to_json
from chartgeom.rendering import DEFAULT_REGISTRY, render_chart


def parse_option(text: str) -> Tuple[str, Any]:
    """``key=value`` -> (key, value); value is JSON when it parses, else a string."""
    if "=" not in text:
        raise argparse.ArgumentTypeError(f"Option must look like key=value, got {text!r}")
    key, raw = text.split("=", 1)
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key.strip(), value


def load_dataset(path: Path) -> Tuple[List[Any], Dict[str, Any]]:
    """
    Read a dataset file.

    Accepts a JSON list of items, or an object with "data" and optional
    "options" keys.
    """
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        return payload.get("data", []), dict(payload.get("options", {}))
    return payload, {}


def main() -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Build chart scenes from JSON datasets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py data.json --chart pie                      # Print scene JSON to stdout
  python main.py data.json --chart bar -o scene.json        # Save to file
  python main.py data.json --chart line --png preview.png   # Also write a PNG preview
        """
    )
    parser.add_argument(
        "dataset",
        type=str,
        help="Path to dataset JSON (list of items or {\"data\": [...], \"options\": {...}})"
    )
    parser.add_argument(
        "--chart",
        type=str,
        choices=DEFAULT_REGISTRY.chart_types,
        required=True,
        help="Chart type"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output scene JSON file path (default: print to stdout)"
    )
    parser.add_argument(
        "--png",
        type=str,
        default=None,
        help="Also write a raster preview to this PNG path"
    )
    parser.add_argument(
        "--option",
        type=parse_option,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Chart option, e.g. showLegend=false or width=800 (repeatable)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate input file exists
    dataset_path = Path(args.dataset)
    if not dataset_path.exists():
        print(f"Error: Dataset not found: {args.dataset}", file=sys.stderr)
        return 1

    try:
        data, options = load_dataset(dataset_path)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: Failed to read dataset: {e}", file=sys.stderr)
        return 1
    options.update(dict(args.option))

    # Build scene
    try:
        scene = render_chart(args.chart, data, options)
    except ChartEngineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_json = scene_to_json(scene)

    if args.png:
        # Imported lazily so plain JSON output does not need OpenCV
        from chartgeom.export.raster import save_png
        try:
            save_png(scene, args.png)
        except ChartEngineError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    # Write to file or stdout
    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(output_json, encoding="utf-8")
            print(f"Scene saved to: {args.output}")
        except IOError as e:
            print(f"Error: Failed to write output file: {e}", file=sys.stderr)
            return 1
    else:
        print(output_json)

    return 0


if __name__ == "__main__":
    sys.exit(main())
