import math
import unittest
import cv2
from loopscore.config import CONFIG
from loopscore.control.controller import CanvasController
from loopscore.core.interfaces import ISegmentRenderer
from loopscore.core.session import DrawingSession

# Records calls instead of painting pixels
class MockRenderer(ISegmentRenderer):
    def __init__(self, width=800, height=500):
        self.width, self.height = width, height
        self.segments = []
        self.cleared = 0

    def draw_segment(self, segment): self.segments.append(segment)
    def draw_particle(self, point, hue): pass
    def clear(self): self.cleared += 1
    def redraw(self, history): pass

# Implements only the abstract methods; bounds come from the contract
class BareRenderer(ISegmentRenderer):
    def draw_segment(self, segment): pass
    def draw_particle(self, point, hue): pass
    def clear(self): pass
    def redraw(self, history): pass

def circle_path(n=100, radius=100, cx=400, cy=250):
    return [(cx + radius * math.cos(2 * math.pi * i / (n - 1)),
             cy + radius * math.sin(2 * math.pi * i / (n - 1))) for i in range(n)]

class TestCanvasController(unittest.TestCase):
    def setUp(self):
        self.renderer = MockRenderer()
        self.ctrl = CanvasController(DrawingSession(), self.renderer)

    def _drag(self, path, release=True):
        x0, y0 = path[0]
        self.ctrl.on_mouse(cv2.EVENT_LBUTTONDOWN, x0, y0, 0)
        for x, y in path[1:]:
            self.ctrl.on_mouse(cv2.EVENT_MOUSEMOVE, x, y, cv2.EVENT_FLAG_LBUTTON)
        if release:
            self.ctrl.on_mouse(cv2.EVENT_LBUTTONUP, *path[-1], 0)

    def test_drag_scores_circle(self):
        """Down -> moves -> up produces segments and a score."""
        self._drag(circle_path())
        self.assertFalse(self.ctrl.session.is_drawing)
        self.assertGreaterEqual(self.ctrl.session.last_score, 99)
        self.assertEqual(len(self.renderer.segments), 99)

    def test_hover_without_button_is_ignored(self):
        self.ctrl.on_mouse(cv2.EVENT_MOUSEMOVE, 100, 100, 0)
        self.assertEqual(self.renderer.segments, [])
        self.assertEqual(self.ctrl.session.active_stroke, ())

    def test_leaving_canvas_ends_gesture(self):
        """Pointer-leave finalizes and scores exactly like a release."""
        self._drag(circle_path(), release=False)
        self.assertTrue(self.ctrl.session.is_drawing)

        self.ctrl.on_mouse(cv2.EVENT_MOUSEMOVE, 900, 250, cv2.EVENT_FLAG_LBUTTON)
        self.assertFalse(self.ctrl.session.is_drawing)
        self.assertGreaterEqual(self.ctrl.session.last_score, 99)

        # Release outside after the leave is a no-op
        self.assertIsNone(self.ctrl.finish())

    def test_short_drag_not_scored(self):
        self._drag([(10, 10), (20, 10), (30, 10)])
        self.assertIsNone(self.ctrl.session.last_score)
        self.assertEqual(len(self.renderer.segments), 2)

    def test_press_outside_canvas_ignored(self):
        self.ctrl.on_mouse(cv2.EVENT_LBUTTONDOWN, -5, 10, 0)
        self.assertFalse(self.ctrl.session.is_drawing)

    def test_minimal_renderer_uses_contract_bounds(self):
        """A renderer with only the abstract methods still gets hit-tested."""
        ctrl = CanvasController(DrawingSession(), BareRenderer())
        ctrl.on_mouse(cv2.EVENT_LBUTTONDOWN, 10, 10, 0)
        self.assertTrue(ctrl.session.is_drawing)

        # Default bounds are the configured canvas size
        ctrl.on_mouse(cv2.EVENT_MOUSEMOVE, CONFIG["CANVAS_WIDTH"] + 5, 10, cv2.EVENT_FLAG_LBUTTON)
        self.assertFalse(ctrl.session.is_drawing)

    def test_restart_clears_everything_but_best(self):
        self._drag(circle_path())
        best = self.ctrl.session.best_score
        self.ctrl.restart()
        self.assertEqual(self.renderer.cleared, 1)
        self.assertEqual(self.ctrl.session.history, [])
        self.assertEqual(self.ctrl.session.best_score, best)

if __name__ == '__main__':
    unittest.main()
