#!/usr/bin/env python3
"""
Benchmarking script for the chart renderers.

Renders random datasets of increasing size, times each render and checks
the geometry invariants on every scene.

Usage:
    python scripts/benchmark.py [--sizes 10 100 1000] [--repeat N] [--output results.csv]

Example:
    python scripts/benchmark.py --repeat 20 --verbose
    python scripts/benchmark.py --output benchmark_results.csv
"""
import argparse
import csv
import math
import random
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from chartgeom.geometry.arc_geometry import compute_arcs
from chartgeom.models.data_types import DataPoint, Series
from chartgeom.rendering import render_bar, render_line, render_pie


@dataclass
class BenchmarkResult:
    """Result for one chart type at one dataset size."""
    chart_type: str
    size: int
    repeat: int
    success: bool = False
    error_message: Optional[str] = None

    # Timing
    mean_ms: float = 0.0
    best_ms: float = 0.0

    # Output
    primitive_count: int = 0
    invariants_ok: bool = False


@dataclass
class BenchmarkSummary:
    """Summary statistics for a benchmark run."""
    results: List[BenchmarkResult] = field(default_factory=list)

    @property
    def all_ok(self) -> bool:
        return all(r.success and r.invariants_ok for r in self.results)


# ==================== DATASETS ====================

def random_points(n: int, rng: random.Random, allow_negative: bool = False) -> List[DataPoint]:
    low = -100.0 if allow_negative else 0.0
    return [DataPoint(label=f"Item {i + 1}", value=rng.uniform(low, 100.0)) for i in range(n)]


def random_series(n: int, rng: random.Random, count: int = 3) -> List[Series]:
    series = []
    for s in range(count):
        y = 50.0
        data = []
        for i in range(n):
            y = max(0.0, y + rng.uniform(-10.0, 10.0))
            data.append((float(i), y))
        series.append(Series(name=f"Series {s + 1}", data=tuple(data)))
    return series


# ==================== INVARIANTS ====================

def check_pie(points: List[DataPoint]) -> bool:
    layout = compute_arcs(points)
    if layout.is_empty:
        return True
    return math.isclose(sum(s.sweep for s in layout.slices), 360.0, abs_tol=1e-6)


def check_finite(scene) -> bool:
    for shape in scene.primitives:
        coords = getattr(shape, "commands", None)
        if coords is not None:
            if not all(math.isfinite(c) for cmd in coords for c in cmd.coordinates):
                return False
    return True


# ==================== RUNNER ====================

def run_case(chart_type: str, size: int, repeat: int, rng: random.Random) -> BenchmarkResult:
    result = BenchmarkResult(chart_type=chart_type, size=size, repeat=repeat)
    makers: Dict[str, Callable] = {
        "pie": lambda: random_points(size, rng),
        "bar": lambda: random_points(size, rng, allow_negative=True),
        "line": lambda: random_series(size, rng),
    }
    renderers = {"pie": render_pie, "bar": render_bar, "line": render_line}

    data = makers[chart_type]()
    timings = []
    try:
        scene = None
        for _ in range(repeat):
            start = time.perf_counter()
            scene = renderers[chart_type](data)
            timings.append((time.perf_counter() - start) * 1000)
        result.success = True
        result.primitive_count = len(scene.primitives)
        result.invariants_ok = check_finite(scene) and (chart_type != "pie" or check_pie(data))
    except Exception as e:
        result.error_message = str(e)
        return result

    result.mean_ms = sum(timings) / len(timings)
    result.best_ms = min(timings)
    return result


def print_summary(summary: BenchmarkSummary) -> None:
    print("=" * 64)
    print(f"{'chart':<8}{'size':>8}{'mean ms':>12}{'best ms':>12}{'shapes':>10}{'ok':>8}")
    print("-" * 64)
    for r in summary.results:
        ok = "yes" if r.success and r.invariants_ok else "NO"
        print(f"{r.chart_type:<8}{r.size:>8}{r.mean_ms:>12.3f}{r.best_ms:>12.3f}"
              f"{r.primitive_count:>10}{ok:>8}")
        if r.error_message:
            print(f"    error: {r.error_message}")
    print("=" * 64)


def save_csv(summary: BenchmarkSummary, path: Path) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["chart_type", "size", "repeat", "success", "mean_ms", "best_ms",
                         "primitive_count", "invariants_ok", "error"])
        for r in summary.results:
            writer.writerow([r.chart_type, r.size, r.repeat, r.success, f"{r.mean_ms:.4f}",
                             f"{r.best_ms:.4f}", r.primitive_count, r.invariants_ok,
                             r.error_message or ""])


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark chart renderers")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 100, 1000],
                        help="Dataset sizes to render (default: 10 100 1000)")
    parser.add_argument("--repeat", type=int, default=10, help="Renders per case (default: 10)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--output", type=str, default=None, help="Save results to CSV")
    parser.add_argument("--verbose", action="store_true", help="Print each case as it finishes")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    summary = BenchmarkSummary()
    for chart_type in ("pie", "bar", "line"):
        for size in args.sizes:
            result = run_case(chart_type, size, max(1, args.repeat), rng)
            summary.results.append(result)
            if args.verbose:
                print(f"{chart_type} n={size}: {result.mean_ms:.3f} ms")

    print_summary(summary)
    if args.output:
        save_csv(summary, Path(args.output))
        print(f"Results saved to: {args.output}")
    return 0 if summary.all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
