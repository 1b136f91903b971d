"""
LoopScore Stroke Sampler (The Anchor).
Filters pointer jitter and derives the rolling smooth curve for the renderer.
"""
import math
from typing import Iterator, Optional
from loopscore.config import CONFIG
from loopscore.core.types import CurveSegment, Point2D, SegmentKind, Stroke

def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)

def midpoint(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(a.x + (b.x - a.x) * 0.5, a.y + (b.y - a.y) * 0.5)

class StrokeSampler:
    def __init__(self, jitter_threshold=None):
        """A falsy threshold (None or 0) falls back to CONFIG["JITTER_THRESHOLD"]."""
        self.thresh = jitter_threshold or CONFIG["JITTER_THRESHOLD"]

    def reset(self, seed: Point2D) -> Stroke:
        return (seed,)

    def append(self, stroke: Stroke, candidate: Point2D) -> Stroke:
        """
        Accepts `candidate` only if it moved at least `thresh` px from the
        last accepted point. A rejected sample returns the very same stroke.
        """
        if not stroke:
            return (candidate,)

        if distance(stroke[-1], candidate) < self.thresh:
            return stroke

        return stroke + (candidate,)

    def smooth_segment(self, stroke: Stroke) -> Optional[CurveSegment]:
        """
        Rolling midpoint smoothing (Catmull-Rom-like).
        Each new point bends the curve through its predecessor:
        mid(p1, p2) -> [control p2] -> mid(p2, p3).
        """
        n = len(stroke)

        if n >= 3:
            p1, p2, p3 = stroke[-3], stroke[-2], stroke[-1]
            return CurveSegment(
                kind=SegmentKind.QUADRATIC,
                start=midpoint(p1, p2),
                control=p2,
                end=midpoint(p2, p3),
                width=self.line_width(distance(p2, p3)),
                hue=self.hue_at(n),
                index=n,
            )

        if n == 2:
            return CurveSegment(
                kind=SegmentKind.LINE,
                start=stroke[0],
                end=stroke[1],
                width=CONFIG["STARTER_LINE_WIDTH"],
                hue=0.0,
                index=n,
            )

        return None

    def iter_segments(self, stroke: Stroke) -> Iterator[CurveSegment]:
        """Replays the segments incremental drawing emitted for `stroke`."""
        for n in range(2, len(stroke) + 1):
            yield self.smooth_segment(stroke[:n])

    # --- VISUAL PARAMETERS (Renderer only) ---
    def line_width(self, step: float) -> float:
        """Fast strokes (long steps) draw thinner lines."""
        speed = min(step, CONFIG["LINE_SPEED_CAP"])
        return max(CONFIG["LINE_WIDTH_MIN"], CONFIG["LINE_WIDTH_MAX"] - speed * CONFIG["LINE_SPEED_SCALE"])

    def hue_at(self, point_count: int) -> float:
        progress = point_count / CONFIG["HUE_PERIOD_POINTS"]
        return (progress * 360) % 360
