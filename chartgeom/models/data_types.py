"""
Data types for the chart geometry engine.

Provides immutable dataclasses for:
- DataPoint / SeriesPoint / Series: caller-supplied datasets
- ArcSlice: one pie/donut slice (derived per render)
- PathCommand: one path-data command (M, L, C, Z)
- PathShape / RectShape / CircleShape / TextLabel: drawable primitives
- LegendEntry: one legend row
- Scene: final output handed to the presentation layer
"""

from dataclasses import dataclass, asdict
from typing import Tuple, List, Optional, Any, Dict, Iterable


@dataclass(frozen=True)
class DataPoint:
    """Single categorical data point (pie slice or bar)."""

    label: str
    value: float
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        d = {"label": self.label, "value": self.value}
        if self.color is not None:
            d["color"] = self.color
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DataPoint":
        """Create from dictionary."""
        return cls(label=str(d.get("label", "")), value=d.get("value", 0), color=d.get("color"))


@dataclass(frozen=True)
class SeriesPoint:
    """Single (x, y) point of a line series."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def coerce(cls, p: Any) -> "SeriesPoint":
        """Accept a SeriesPoint, an {"x", "y"} mapping or an (x, y) pair."""
        if isinstance(p, SeriesPoint):
            return p
        if isinstance(p, dict):
            return cls(x=p.get("x", 0), y=p.get("y", 0))
        x, y = p
        return cls(x=x, y=y)


@dataclass(frozen=True)
class Series:
    """Named line series; order of series is draw and legend order."""

    name: str
    data: Tuple[SeriesPoint, ...] = ()
    color: Optional[str] = None

    def __post_init__(self):
        # Frozen, so normalise through object.__setattr__
        object.__setattr__(self, "data", tuple(SeriesPoint.coerce(p) for p in self.data))

    def to_dict(self) -> Dict[str, Any]:
        d = {"name": self.name, "data": [{"x": p.x, "y": p.y} for p in self.data]}
        if self.color is not None:
            d["color"] = self.color
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Series":
        """Create from dictionary."""
        return cls(name=str(d.get("name", "")), data=tuple(d.get("data", ())), color=d.get("color"))


@dataclass(frozen=True)
class ArcSlice:
    """One pie/donut slice. Angles are degrees, 0 = 12 o'clock, clockwise."""

    index: int
    label: str
    value: float
    start_angle: float
    end_angle: float
    percentage: float
    color: str

    @property
    def sweep(self) -> float:
        """Angular extent in degrees."""
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


# ==================== PATHS ====================

PATH_KINDS = ("M", "L", "C", "Z")


@dataclass(frozen=True)
class PathCommand:
    """Single path command; coordinates are flat (x, y, ...) pixel values."""

    kind: str
    coordinates: Tuple[float, ...] = ()

    def __post_init__(self):
        if self.kind not in PATH_KINDS:
            raise ValueError(f"Unknown path command kind: {self.kind!r}")
        object.__setattr__(self, "coordinates", tuple(float(c) for c in self.coordinates))

    @property
    def end_point(self) -> Optional[Tuple[float, float]]:
        """Pen position after this command (None for Z)."""
        if not self.coordinates:
            return None
        return (self.coordinates[-2], self.coordinates[-1])


def _fmt(n: float) -> str:
    text = f"{n:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def path_data(commands: Iterable[PathCommand]) -> str:
    """Render commands as SVG path-data text, e.g. ``"M0,0L10,5Z"``."""
    parts = []
    for cmd in commands:
        coords = cmd.coordinates
        pairs = [f"{_fmt(coords[i])},{_fmt(coords[i + 1])}" for i in range(0, len(coords), 2)]
        parts.append(cmd.kind + ",".join(pairs))
    return "".join(parts)


# ==================== DRAWABLE PRIMITIVES ====================


@dataclass(frozen=True)
class PathShape:
    """Filled and/or stroked path."""

    commands: Tuple[PathCommand, ...]
    role: str = "path"
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    fill_opacity: float = 1.0

    @property
    def d(self) -> str:
        """SVG path data."""
        return path_data(self.commands)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "path",
            "role": self.role,
            "d": self.d,
            "fill": self.fill,
            "stroke": self.stroke,
            "stroke_width": self.stroke_width,
            "fill_opacity": self.fill_opacity,
        }


@dataclass(frozen=True)
class RectShape:
    """Axis-aligned rectangle with rounded corners (rx == ry)."""

    x: float
    y: float
    width: float
    height: float
    role: str = "rect"
    rx: float = 0.0
    fill: Optional[str] = None

    @property
    def x2(self) -> float:
        """Right edge x coordinate."""
        return self.x + self.width

    @property
    def y2(self) -> float:
        """Bottom edge y coordinate."""
        return self.y + self.height

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["type"] = "rect"
        return d


@dataclass(frozen=True)
class CircleShape:
    """Circle, used for line-chart dots."""

    cx: float
    cy: float
    r: float
    role: str = "circle"
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["type"] = "circle"
        return d


@dataclass(frozen=True)
class TextLabel:
    """Text anchored at (x, y). ``rotation`` is degrees about the anchor."""

    x: float
    y: float
    text: str
    role: str = "text"
    anchor: str = "middle"
    baseline: str = "middle"
    rotation: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["type"] = "text"
        return d


Primitive = Any  # PathShape | RectShape | CircleShape | TextLabel


@dataclass(frozen=True)
class LegendEntry:
    """One legend row: swatch color, name and display value."""

    index: int
    label: str
    color: str
    value: Optional[float] = None
    value_text: Optional[str] = None
    percentage: Optional[str] = None

    @property
    def display_text(self) -> Optional[str]:
        """Percentage when requested, otherwise the caller's value."""
        return self.percentage if self.percentage is not None else self.value_text

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Scene:
    """Ordered drawable primitives plus legend metadata."""

    chart_type: str
    width: float
    height: float
    primitives: Tuple[Primitive, ...] = ()
    legend: Tuple[LegendEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.primitives and not self.legend

    def shapes(self, role: str) -> List[Primitive]:
        """Primitives tagged with ``role``, in draw order."""
        return [p for p in self.primitives if p.role == role]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (main output format)."""
        return {
            "chart_type": self.chart_type,
            "width": self.width,
            "height": self.height,
            "primitives": [p.to_dict() for p in self.primitives],
            "legend": [e.to_dict() for e in self.legend],
        }

    @classmethod
    def empty(cls, chart_type: str, width: float, height: float) -> "Scene":
        return cls(chart_type=chart_type, width=width, height=height)
