"""
Pytest fixtures for chartgeom tests.

Provides:
- Categorical datasets for pie and bar charts (including the reference
  30/50/20 pie and the negative-value bar dataset)
- Line series datasets
- Helpers for sampling Bezier path commands
- A finiteness check over every number in a scene
"""
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from chartgeom.models.data_types import DataPoint, Series


# ==================== CATEGORICAL FIXTURES ====================

@pytest.fixture
def abc_points():
    """Three slices summing to 100: 30 / 50 / 20."""
    return [
        DataPoint(label="A", value=30),
        DataPoint(label="B", value=50),
        DataPoint(label="C", value=20),
    ]


@pytest.fixture
def abc_dicts():
    """Same dataset as ``abc_points`` in its dict form."""
    return [
        {"label": "A", "value": 30},
        {"label": "B", "value": 50},
        {"label": "C", "value": 20},
    ]


@pytest.fixture
def signed_points():
    """One negative and one positive bar."""
    return [
        DataPoint(label="Jan", value=-10),
        DataPoint(label="Feb", value=20),
    ]


@pytest.fixture
def zero_points():
    """Values that sum to zero."""
    return [DataPoint(label="A", value=0), DataPoint(label="B", value=0)]


@pytest.fixture
def colored_points():
    """Second point carries its own color."""
    return [
        DataPoint(label="A", value=1),
        DataPoint(label="B", value=1, color="#123456"),
        DataPoint(label="C", value=1),
    ]


# ==================== LINE FIXTURES ====================

@pytest.fixture
def two_series():
    """Two series of four points over x = 0..3."""
    return [
        Series(name="Visits", data=((0, 10), (1, 30), (2, 20), (3, 40))),
        Series(name="Signups", data=((0, 5), (1, 8), (2, 12), (3, 9))),
    ]


@pytest.fixture
def zigzag_points():
    """Pixel points alternating up and down."""
    return [(0.0, 0.0), (10.0, 10.0), (20.0, 0.0), (30.0, 10.0), (40.0, 5.0)]


# ==================== HELPERS ====================

def sample_cubic(p0, p1, p2, p3, n: int = 50) -> np.ndarray:
    """Evaluate a cubic Bezier at n + 1 evenly spaced t values."""
    t = np.linspace(0.0, 1.0, n + 1)[:, None]
    u = 1.0 - t
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in (p0, p1, p2, p3))
    return (u ** 3) * p0 + 3 * (u ** 2) * t * p1 + 3 * u * (t ** 2) * p2 + (t ** 3) * p3


def sample_commands(commands, n: int = 50):
    """
    Yield (start, end, samples) for every C command of a path.

    ``start`` is the pen position before the command.
    """
    pen = None
    for cmd in commands:
        c = cmd.coordinates
        if cmd.kind == "C":
            yield pen, (c[4], c[5]), sample_cubic(pen, c[0:2], c[2:4], c[4:6], n)
        if c:
            pen = (c[-2], c[-1])


@pytest.fixture
def bezier_samples():
    return sample_commands


def scene_numbers(scene):
    """Every coordinate and size carried by a scene's primitives."""
    numbers = [scene.width, scene.height]
    for p in scene.primitives:
        for cmd in getattr(p, "commands", ()):
            numbers.extend(cmd.coordinates)
        for name in ("x", "y", "width", "height", "rx", "cx", "cy", "r"):
            if hasattr(p, name):
                numbers.append(getattr(p, name))
    return numbers


@pytest.fixture
def all_finite():
    """Assert that a scene holds no NaN or infinite numbers."""
    def check(scene):
        numbers = scene_numbers(scene)
        assert numbers
        assert all(np.isfinite(n) for n in numbers)
    return check
