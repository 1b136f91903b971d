"""
LoopScore Types.
Central definition of Data Contracts to prevent circular imports.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

# --- GEOMETRY TYPES ---
@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

# One gesture's filtered samples, in drawing order. Tuples keep snapshots immutable.
Stroke = Tuple[Point2D, ...]

# --- RENDERING TYPES ---
class SegmentKind(Enum):
    LINE = auto()       # First two points: straight connection
    QUADRATIC = auto()  # Rolling midpoint-to-midpoint Bezier

@dataclass(frozen=True)
class CurveSegment:
    kind: SegmentKind
    start: Point2D
    end: Point2D
    control: Optional[Point2D] = None
    width: float = 6.0
    hue: float = 0.0
    index: int = 0  # Stroke length when the segment was emitted

    @property
    def anchor(self) -> Point2D:
        """The point the curve bends through (the start for straight lines)."""
        return self.control if self.control is not None else self.start

# --- SCORING TYPES ---
@dataclass(frozen=True)
class ScoreBreakdown:
    regularity: float
    closure: float
    point_count: float
    composite: float
    score: int
    avg_radius: float
    center: Point2D
