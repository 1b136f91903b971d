import math
import unittest
import numpy as np
from loopscore.core.scorer import CircleScorer
from loopscore.core.types import Point2D

def circle_points(n, radius=100.0, cx=400.0, cy=250.0, closed=False, sweep=2 * math.pi):
    """`closed` repeats the start angle as the final sample."""
    angles = np.linspace(0.0, sweep, n, endpoint=closed)
    return tuple(Point2D(float(cx + radius * np.cos(a)), float(cy + radius * np.sin(a))) for a in angles)

def square_loop():
    """Corners plus edge thirds of a 100px square, walked once around (12 samples)."""
    s = 100.0 / 3.0
    coords = [(0, 0), (s, 0), (2 * s, 0), (100, 0), (100, s), (100, 2 * s),
              (100, 100), (2 * s, 100), (s, 100), (0, 100), (0, 2 * s), (0, s)]
    return tuple(Point2D(float(x), float(y)) for x, y in coords)

class TestCircleScorer(unittest.TestCase):
    def setUp(self):
        self.scorer = CircleScorer()

    def test_perfect_circle_regularity(self):
        """Evenly spaced points on one radius have zero radius dispersion."""
        result = self.scorer.breakdown(circle_points(100))
        self.assertAlmostEqual(result.regularity, 100.0, places=6)
        self.assertAlmostEqual(result.avg_radius, 100.0, places=6)
        self.assertEqual(result.point_count, 100.0)

    def test_closed_perfect_circle_scores_high(self):
        """A circle that ends exactly where it started scores at least 99."""
        score = self.scorer.score(circle_points(100, closed=True))
        self.assertGreaterEqual(score, 99)
        self.assertLessEqual(score, 100)

    def test_short_stroke_is_absent(self):
        """Fewer than 10 points is not scored (None, never 0)."""
        self.assertIsNone(self.scorer.score(circle_points(9)))
        self.assertIsNone(self.scorer.score(()))
        self.assertIsNotNone(self.scorer.score(circle_points(10)))

    def test_coincident_points_floor_at_one(self):
        """All samples on one spot: minimum score, no NaN/Infinity."""
        same = tuple(Point2D(50.0, 50.0) for _ in range(12))
        self.assertEqual(self.scorer.score(same), 1)

        result = self.scorer.breakdown(same)
        self.assertFalse(math.isnan(result.composite))
        self.assertEqual(result.regularity, 0.0)
        self.assertEqual(result.closure, 0.0)

    def test_near_coincident_float_points_floor_at_one(self):
        """Float round-off in the centroid must not dodge the degenerate guard."""
        same = tuple(Point2D(0.1, 0.7) for _ in range(30))
        self.assertEqual(self.scorer.score(same), 1)

    def test_random_strokes_stay_in_range(self):
        """Output range invariant over randomized point sets."""
        rng = np.random.default_rng(1234)
        for _ in range(200):
            n = int(rng.integers(10, 400))
            coords = rng.uniform(0.0, 800.0, size=(n, 2))
            stroke = tuple(Point2D(float(x), float(y)) for x, y in coords)
            score = self.scorer.score(stroke)
            self.assertIsInstance(score, int)
            self.assertGreaterEqual(score, 1)
            self.assertLessEqual(score, 100)

    def test_square_has_poor_regularity(self):
        """
        Corners sit further from the centroid than edge points.

        Corners are 70.71px out, edge thirds 52.70px: mean 58.71, stddev 8.49,
        so regularity = 100 - 8.49 / 58.71 * 200 = 71.1. A square can never reach
        the 50/70.7 spread needed for < 60 (corners alone give 100), hence < 75.
        Composite: 0.5 * 71.08 + 0.3 * 43.22 + 0.2 * 0 = 48.5.
        """
        result = self.scorer.breakdown(square_loop())
        self.assertLess(result.regularity, 75.0)
        self.assertLess(result.score, 60)
        self.assertLess(result.score, self.scorer.score(circle_points(100, closed=True)))

    def test_flat_ellipse_regularity_below_60(self):
        angles = np.linspace(0.0, 2 * math.pi, 100, endpoint=False)
        stroke = tuple(Point2D(float(200 * np.cos(a)), float(50 * np.sin(a))) for a in angles)
        self.assertLess(self.scorer.breakdown(stroke).regularity, 60.0)

    def test_open_arc_loses_closure(self):
        """Semicircle: ends ~200px apart -> closure 0, composite drags below 55."""
        arc = circle_points(200, sweep=math.pi, closed=True)
        result = self.scorer.breakdown(arc)
        self.assertEqual(result.closure, 0.0)
        self.assertLess(result.score, 55)

    def test_point_count_band(self):
        """Flat 100 strictly inside (50, 200); linear penalty around 100 outside."""
        self.assertEqual(self.scorer.point_count_score(51), 100.0)
        self.assertEqual(self.scorer.point_count_score(199), 100.0)
        self.assertEqual(self.scorer.point_count_score(50), 0.0)
        self.assertEqual(self.scorer.point_count_score(200), 0.0)
        self.assertEqual(self.scorer.point_count_score(10), 0.0)

    def test_finalize_clamps_and_rounds_half_up(self):
        self.assertEqual(self.scorer.finalize(48.5), 49)
        self.assertEqual(self.scorer.finalize(48.49), 48)
        self.assertEqual(self.scorer.finalize(0.2), 1)
        self.assertEqual(self.scorer.finalize(-5.0), 1)
        self.assertEqual(self.scorer.finalize(150.0), 100)

    def test_composite_weights(self):
        """0.5 * regularity + 0.3 * closure + 0.2 * point count."""
        result = self.scorer.breakdown(square_loop())
        expected = 0.5 * result.regularity + 0.3 * result.closure + 0.2 * result.point_count
        self.assertAlmostEqual(result.composite, expected)

    def test_deterministic(self):
        """Same stroke, same score, every time."""
        rng = np.random.default_rng(7)
        noisy = tuple(Point2D(p.x + float(rng.normal(0, 4)), p.y + float(rng.normal(0, 4)))
                      for p in circle_points(80))
        self.assertEqual(self.scorer.score(noisy), self.scorer.score(noisy))
        self.assertEqual(self.scorer.breakdown(noisy), self.scorer.breakdown(noisy))

    def test_reversal_does_not_change_score(self):
        """Only first/last matter for closure; direction of travel is irrelevant."""
        stroke = square_loop()
        self.assertEqual(self.scorer.score(stroke), self.scorer.score(stroke[::-1]))

    def test_zero_overrides_fall_back_to_config(self):
        """Falsy overrides keep the configured floor and weights."""
        scorer = CircleScorer(min_points=0, weights=())
        self.assertEqual(scorer.min_points, 10)
        self.assertEqual(scorer.weights, (0.5, 0.3, 0.2))

    def test_custom_min_points(self):
        scorer = CircleScorer(min_points=20)
        self.assertIsNone(scorer.score(circle_points(19)))

if __name__ == '__main__':
    unittest.main()
