"""
LoopScore Core Interfaces.
Defines the abstract contract between the pure core and any 2D drawing backend.
"""

from abc import ABC, abstractmethod
from typing import Iterable
from loopscore.config import CONFIG
from loopscore.core.types import CurveSegment, Point2D, Stroke

class ISegmentRenderer(ABC):
    """
    Abstract Protocol for Stroke Rendering.
    Consumes the CurveSegment stream; never touches the scoring math.
    """

    # --- SURFACE BOUNDS (px) ---
    # Controllers hit-test pointer events against these. Override per instance.
    width: int = CONFIG["CANVAS_WIDTH"]
    height: int = CONFIG["CANVAS_HEIGHT"]

    @abstractmethod
    def draw_segment(self, segment: CurveSegment) -> None: pass
    @abstractmethod
    def draw_particle(self, point: Point2D, hue: float) -> None: pass
    @abstractmethod
    def clear(self) -> None: pass
    @abstractmethod
    def redraw(self, history: Iterable[Stroke]) -> None: pass
