"""
LoopScore Controller.
Acts as the nervous system: OpenCV mouse events -> gesture lifecycle -> renderer.
"""

import cv2
import logging
from typing import Optional
from loopscore.core.session import DrawingSession
from loopscore.core.types import Point2D
from loopscore.core.interfaces import ISegmentRenderer
from loopscore.ui.hud import CanvasRenderer

class CanvasController:
    def __init__(self, session: Optional[DrawingSession] = None, renderer: Optional[ISegmentRenderer] = None):
        self.session = session or DrawingSession()
        self.renderer = renderer or CanvasRenderer()

    def _inside(self, x, y) -> bool:
        return 0 <= x < self.renderer.width and 0 <= y < self.renderer.height

    def on_mouse(self, event, x, y, flags, param=None):
        """cv2.setMouseCallback handler. Window pixels are canvas pixels."""
        if event == cv2.EVENT_LBUTTONDOWN:
            if self._inside(x, y):
                self.begin(Point2D(float(x), float(y)))

        elif event == cv2.EVENT_MOUSEMOVE:
            if not self.session.is_drawing:
                return
            # Leaving the surface ends the gesture exactly like a release
            if not self._inside(x, y):
                self.finish()
                return
            self.track(Point2D(float(x), float(y)))

        elif event == cv2.EVENT_LBUTTONUP:
            self.finish()

    def begin(self, point: Point2D):
        self.session.start_gesture(point)

    def track(self, point: Point2D):
        segment = self.session.move_gesture(point)
        if segment is not None:
            self.renderer.draw_segment(segment)

    def finish(self) -> Optional[int]:
        if not self.session.is_drawing:
            return None
        score = self.session.end_gesture()
        if score is None:
            logging.info(f"Too short to score ({self.session.point_count} points)")
        return score

    def restart(self):
        self.session.clear()
        self.renderer.clear()
