"""
LoopScore Session Management.
Gesture lifecycle (start -> move* -> end) and the caller-owned drawing state.
"""
import logging
from typing import List, Optional, Tuple
from loopscore.core.sampler import StrokeSampler
from loopscore.core.scorer import CircleScorer
from loopscore.core.types import CurveSegment, Point2D, ScoreBreakdown, Stroke

_SAMPLER = StrokeSampler()
_SCORER = CircleScorer()

# --- FUNCTIONAL CORE (value in, value out) ---
def on_gesture_start(point: Point2D) -> Stroke:
    return _SAMPLER.reset(point)

def on_gesture_move(stroke: Stroke, point: Point2D) -> Tuple[Stroke, Optional[CurveSegment]]:
    """The segment is None when `point` was rejected as jitter."""
    updated = _SAMPLER.append(stroke, point)
    if updated is stroke:
        return stroke, None
    return updated, _SAMPLER.smooth_segment(updated)

def on_gesture_end(stroke: Stroke) -> Tuple[Stroke, Optional[int]]:
    return stroke, _SCORER.score(stroke)


class DrawingSession:
    def __init__(self, sampler: Optional[StrokeSampler] = None, scorer: Optional[CircleScorer] = None):
        self.sampler = sampler or _SAMPLER
        self.scorer = scorer or _SCORER

        # --- ACTIVE GESTURE ---
        self.is_drawing = False
        self.active_stroke: Stroke = ()

        # --- RESULTS ---
        self.history: List[Stroke] = []
        self.last_score: Optional[int] = None
        self.last_breakdown: Optional[ScoreBreakdown] = None
        self.best_score = 0

    @property
    def point_count(self) -> int:
        return len(self.active_stroke)

    def start_gesture(self, point: Point2D) -> Stroke:
        self.is_drawing = True
        self.last_score = None
        self.last_breakdown = None
        self.active_stroke = self.sampler.reset(point)
        return self.active_stroke

    def move_gesture(self, point: Point2D) -> Optional[CurveSegment]:
        if not self.is_drawing:
            return None

        updated = self.sampler.append(self.active_stroke, point)
        if updated is self.active_stroke:
            return None

        self.active_stroke = updated
        return self.sampler.smooth_segment(updated)

    def end_gesture(self) -> Optional[int]:
        """Pointer-up and pointer-leave both land here. Short strokes are dropped, not scored."""
        if not self.is_drawing:
            return None
        self.is_drawing = False

        stroke = self.active_stroke
        result = self.scorer.breakdown(stroke)
        if result is None:
            logging.debug(f"Gesture discarded: {len(stroke)} points < {self.scorer.min_points}")
            return None

        self.history.append(stroke)
        self.last_breakdown = result
        self.last_score = result.score
        if result.score > self.best_score:
            self.best_score = result.score
            logging.info(f"🏆 New best score: {result.score}")

        logging.info(
            f"Scored {result.score} ({len(stroke)} pts | regularity {result.regularity:.1f}, "
            f"closure {result.closure:.1f}, count {result.point_count:.1f})"
        )
        return result.score

    def clear(self):
        """Start over. The best score survives."""
        self.is_drawing = False
        self.active_stroke = ()
        self.history.clear()
        self.last_score = None
        self.last_breakdown = None
