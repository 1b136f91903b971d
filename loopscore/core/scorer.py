"""
LoopScore Circle Scorer (The Judge).
====================================

Turns one finished stroke into a 1-100 "how circular is this" score.

The composite blends three heuristics:
1. **Regularity:** How constant the distance to the centroid is.
   Radius dispersion is penalized relative to the circle's own size.
2. **Closure:** How close the end point lands to the start point.
3. **Point Count:** Sampling density. Too sparse or too dense loses points.

The weights (0.5 / 0.3 / 0.2) and the 50-200 point band are empirical.
They are kept as-is for score parity, not re-derived.
"""
import math
import numpy as np
from typing import Optional, Sequence
from loopscore.config import CONFIG
from loopscore.core.types import Point2D, ScoreBreakdown, Stroke

class CircleScorer:
    """
    Pure, deterministic scorer. Same stroke in, same score out.

    Attributes:
        min_points (int): Strokes shorter than this are not scored (None).
        weights (tuple): (regularity, closure, point_count) blend weights.

    Falsy overrides (None, 0, empty tuple) fall back to CONFIG.
    """
    def __init__(self, min_points=None, weights=None):
        self.min_points = min_points or CONFIG["MIN_SCORE_POINTS"]
        self.weights = weights or (
            CONFIG["WEIGHT_REGULARITY"],
            CONFIG["WEIGHT_CLOSURE"],
            CONFIG["WEIGHT_POINT_COUNT"],
        )

    def score(self, stroke: Stroke) -> Optional[int]:
        """Returns the integer score, or None if the stroke is too short."""
        result = self.breakdown(stroke)
        return result.score if result is not None else None

    def breakdown(self, stroke: Sequence[Point2D]) -> Optional[ScoreBreakdown]:
        """
        Full scoring pass with every sub-score exposed.

        Returns:
            ScoreBreakdown, or None when len(stroke) < min_points.
        """
        n = len(stroke)
        if n < self.min_points:
            return None

        pts = np.array([(p.x, p.y) for p in stroke], dtype=np.float64)

        # 1. Centroid
        center = pts.mean(axis=0)

        # 2-3. Radii & mean radius (vectorized Euclidean distance)
        radii = np.linalg.norm(pts - center, axis=1)
        avg_radius = float(radii.mean())
        center_pt = Point2D(float(center[0]), float(center[1]))

        # Degenerate: every sample on the same spot. Ratios below would be 0/0.
        if avg_radius <= CONFIG["DEGENERATE_RADIUS"]:
            floor = CONFIG["SCORE_MIN"]
            return ScoreBreakdown(0.0, 0.0, self.point_count_score(n), float(floor), floor, 0.0, center_pt)

        # 4. Dispersion (population standard deviation)
        std_dev = float(np.sqrt(np.mean((radii - avg_radius) ** 2)))

        # 5. Regularity
        regularity = max(0.0, 100 - (std_dev / avg_radius) * CONFIG["REGULARITY_PENALTY"])

        # 6-7. Closure (first vs last point only)
        gap = float(np.linalg.norm(pts[-1] - pts[0]))
        closure = max(0.0, 100 - (gap / avg_radius) * CONFIG["CLOSURE_PENALTY"])

        # 8. Point count
        count_score = self.point_count_score(n)

        # 9. Composite
        w_reg, w_close, w_count = self.weights
        composite = regularity * w_reg + closure * w_close + count_score * w_count

        # 10. Clamp & round
        return ScoreBreakdown(
            regularity=regularity,
            closure=closure,
            point_count=count_score,
            composite=composite,
            score=self.finalize(composite),
            avg_radius=avg_radius,
            center=center_pt,
        )

    def point_count_score(self, n: int) -> float:
        """Flat 100 inside the open (50, 200) band, linear penalty around 100 outside it."""
        if CONFIG["POINT_BAND_LOW"] < n < CONFIG["POINT_BAND_HIGH"]:
            return 100.0
        return max(0.0, 100 - abs(n - CONFIG["POINT_TARGET"]) * CONFIG["POINT_PENALTY"])

    def finalize(self, composite: float) -> int:
        clamped = max(CONFIG["SCORE_MIN"], min(CONFIG["SCORE_MAX"], composite))
        # Round half up (round() would send 48.5 to 48)
        return int(math.floor(clamped + 0.5))
