"""
LoopScore HUD.
Glow-styled canvas renderer (segment stream consumer) and score overlays.
"""

import cv2
import numpy as np
from typing import Iterable, Optional, Tuple
from loopscore.config import CONFIG, GRADE_BANDS
from loopscore.core.interfaces import ISegmentRenderer
from loopscore.core.sampler import StrokeSampler
from loopscore.core.types import CurveSegment, Point2D, SegmentKind, Stroke

def hsl_to_bgr(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """CSS-style hsl() -> OpenCV BGR. OpenCV's 8-bit HLS stores hue as 0-179."""
    hls = np.uint8([[[int(round((hue % 360) / 2)) % 180,
                      int(round(lightness * 255)),
                      int(round(saturation * 255))]]])
    b, g, r = cv2.cvtColor(hls, cv2.COLOR_HLS2BGR)[0, 0]
    return int(b), int(g), int(r)

def tessellate(segment: CurveSegment, steps: int) -> np.ndarray:
    """Samples the segment into an (N, 2) float polyline."""
    p0 = np.array([segment.start.x, segment.start.y])
    p2 = np.array([segment.end.x, segment.end.y])
    if segment.kind == SegmentKind.LINE or segment.control is None:
        return np.vstack([p0, p2])

    p1 = np.array([segment.control.x, segment.control.y])
    t = np.linspace(0.0, 1.0, steps + 1)[:, None]
    return (1 - t) ** 2 * p0 + 2 * (1 - t) * t * p1 + t ** 2 * p2

def grade_for(score: int):
    """Returns (label, BGR colour, message) for a score."""
    for floor, label, color, message in GRADE_BANDS:
        if score >= floor:
            return label, color, message
    return GRADE_BANDS[-1][1:]


class CanvasRenderer(ISegmentRenderer):
    """
    Persistent drawing surface. Strokes accumulate on `canvas` until cleared.

    Attributes:
        canvas (np.ndarray): HxWx3 uint8 BGR buffer.
        rng (np.random.Generator): Drives particle sparks only.
    """
    def __init__(self, width=None, height=None, rng: Optional[np.random.Generator] = None,
                 sampler: Optional[StrokeSampler] = None):
        self.width = width or CONFIG["CANVAS_WIDTH"]
        self.height = height or CONFIG["CANVAS_HEIGHT"]
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sampler = sampler or StrokeSampler()
        self.canvas = self._blank()

    def _blank(self) -> np.ndarray:
        return np.full((self.height, self.width, 3), CONFIG["CANVAS_BACKGROUND"], dtype=np.uint8)

    # --- COMPOSITING ---
    def _roi(self, pts: np.ndarray, margin: float):
        x0 = max(int(np.floor(pts[:, 0].min() - margin)), 0)
        y0 = max(int(np.floor(pts[:, 1].min() - margin)), 0)
        x1 = min(int(np.ceil(pts[:, 0].max() + margin)) + 1, self.width)
        y1 = min(int(np.ceil(pts[:, 1].max() + margin)) + 1, self.height)
        if x0 >= x1 or y0 >= y1:
            return None
        return x0, y0, x1, y1

    def _screen(self, roi, layer: np.ndarray, alpha: float):
        """'screen' composite of `layer` onto the canvas region: 1 - (1-a)(1-b)."""
        x0, y0, x1, y1 = roi
        base = self.canvas[y0:y1, x0:x1].astype(np.float32) / 255.0
        top = layer.astype(np.float32) / 255.0 * alpha
        self.canvas[y0:y1, x0:x1] = np.clip(np.rint((1 - (1 - base) * (1 - top)) * 255.0), 0, 255).astype(np.uint8)

    def _glow(self, layer: np.ndarray, blur: float) -> np.ndarray:
        """Shadow-blur halo: the shape plus its Gaussian-blurred copy."""
        halo = cv2.GaussianBlur(layer, (0, 0), sigmaX=max(blur / 2.0, 0.5))
        return cv2.add(layer, halo)

    # --- SEGMENTS ---
    def _paint(self, segment: CurveSegment):
        pts = tessellate(segment, CONFIG["CURVE_STEPS"])
        glow_w = segment.width + CONFIG["GLOW_EXTRA_WIDTH"]
        roi = self._roi(pts, glow_w + CONFIG["GLOW_BLUR"] * 1.5)
        if roi is None:
            return
        x0, y0, x1, y1 = roi
        local = np.round(pts - (x0, y0)).astype(np.int32)

        base_color = hsl_to_bgr(segment.hue, CONFIG["COLOR_SATURATION"], CONFIG["COLOR_LIGHTNESS"])

        # 1. Outer glow (wide, translucent, screen-blended)
        layer = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.uint8)
        cv2.polylines(layer, [local], False, base_color, max(int(round(glow_w)), 1), cv2.LINE_AA)
        self._screen(roi, self._glow(layer, CONFIG["GLOW_BLUR"]), CONFIG["GLOW_ALPHA"])

        # 2. Main line halo
        layer[:] = 0
        thickness = max(int(round(segment.width)), 1)
        cv2.polylines(layer, [local], False, base_color, thickness, cv2.LINE_AA)
        self._screen(roi, cv2.GaussianBlur(layer, (0, 0), sigmaX=CONFIG["LINE_BLUR"] / 2.0), 1.0)

        # 3. Main line with a hue gradient along the segment
        span = CONFIG["HUE_GRADIENT_SPAN"] if segment.kind == SegmentKind.QUADRATIC else 0
        px = np.round(pts).astype(np.int32)
        steps = len(px) - 1
        for i in range(steps):
            hue = segment.hue + span * (i / max(steps - 1, 1))
            color = hsl_to_bgr(hue, CONFIG["COLOR_SATURATION"], CONFIG["COLOR_LIGHTNESS"])
            cv2.line(self.canvas, (int(px[i, 0]), int(px[i, 1])), (int(px[i + 1, 0]), int(px[i + 1, 1])),
                     color, thickness, cv2.LINE_AA)

    def draw_segment(self, segment: CurveSegment) -> None:
        self._paint(segment)
        # Sparks are decoration only; keep them rare
        if segment.kind == SegmentKind.QUADRATIC and self.rng.random() < CONFIG["PARTICLE_CHANCE"]:
            self.draw_particle(segment.anchor, segment.hue)

    def draw_particle(self, point: Point2D, hue: float) -> None:
        size = self.rng.random() * 3 + 1
        ox, oy = (self.rng.random(2) - 0.5) * CONFIG["PARTICLE_SPREAD"]
        color = hsl_to_bgr(hue + self.rng.random() * 60 - 30, 0.8, 0.7)
        alpha = self.rng.random() * 0.8 + 0.2

        center = np.array([[point.x + ox, point.y + oy]])
        roi = self._roi(center, size + 8)
        if roi is None:
            return
        x0, y0, x1, y1 = roi
        layer = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.uint8)
        cx, cy = int(round(center[0, 0] - x0)), int(round(center[0, 1] - y0))
        cv2.circle(layer, (cx, cy), max(int(round(size)), 1), color, -1, cv2.LINE_AA)
        self._screen(roi, self._glow(layer, 5), alpha)

    def clear(self) -> None:
        self.canvas = self._blank()

    def redraw(self, history: Iterable[Stroke]) -> None:
        """Repaints finished strokes from scratch. No sparks on replay."""
        self.clear()
        for stroke in history:
            for segment in self.sampler.iter_segments(stroke):
                self._paint(segment)

    def resize(self, width: int, height: int, history: Iterable[Stroke]) -> None:
        self.width, self.height = width, height
        self.redraw(history)


class HUD:
    def __init__(self):
        # --- THEME COLORS (BGR) ---
        self.C_TEXT   = (235, 235, 235)
        self.C_MUTED  = (150, 150, 150)
        self.C_GOLD   = (0, 200, 255)    # Best score trophy
        self.C_DARK   = (20, 20, 20)     # Backgrounds
        self.C_PANEL  = (255, 255, 255)

    def _draw_glass_panel(self, img, x, y, w, h, color, alpha=0.6):
        """Tinted translucent card, clipped to the frame instead of dropped."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, img.shape[1]), min(y + h, img.shape[0])
        if x0 >= x1 or y0 >= y1:
            return

        region = img[y0:y1, x0:x1]
        img[y0:y1, x0:x1] = cv2.addWeighted(region, 1 - alpha, np.full_like(region, color), alpha, 0)
        cv2.rectangle(img, (x0, y0), (x1 - 1, y1 - 1), color, 1)

    def _centered_text(self, img, text, cy, scale, color, thickness=1):
        (tw, _), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)
        cv2.putText(img, text, ((img.shape[1] - tw) // 2, cy),
                    cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness, cv2.LINE_AA)

    def render(self, frame, session):
        h, w, _ = frame.shape

        # 1. STATUS BAR (Best score + key help)
        self._draw_glass_panel(frame, 10, 10, 260, 36, self.C_DARK, 0.5)
        if session.best_score > 0:
            cv2.putText(frame, f"BEST: {session.best_score}", (20, 34),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, self.C_GOLD, 2, cv2.LINE_AA)
        cv2.putText(frame, "R: RESTART  ESC: EXIT", (120, 33),
                    cv2.FONT_HERSHEY_PLAIN, 1.0, self.C_MUTED, 1, cv2.LINE_AA)

        # 2. HINT (Empty canvas)
        if not session.is_drawing and not session.active_stroke and not session.history:
            self._centered_text(frame, "Click and drag to draw a glowing circle", h // 2, 0.7, self.C_MUTED)

        # 3. LIVE COUNTER
        if session.is_drawing:
            cv2.putText(frame, f"{session.point_count} PTS", (w - 110, 34),
                        cv2.FONT_HERSHEY_PLAIN, 1.2, self.C_MUTED, 1, cv2.LINE_AA)

        # 4. SCORE CARD
        if session.last_score is not None:
            self.draw_score(frame, session.last_score, session.point_count)

    def draw_score(self, frame, score: int, point_count: int):
        h, w, _ = frame.shape
        label, color, message = grade_for(score)

        pw, ph = 360, 110
        px, py = (w - pw) // 2, h - ph - 20
        self._draw_glass_panel(frame, px, py, pw, ph, self.C_DARK, 0.75)

        cv2.putText(frame, f"{score}", (px + 20, py + 62),
                    cv2.FONT_HERSHEY_DUPLEX, 1.8, self.C_TEXT, 2, cv2.LINE_AA)

        # Grade badge
        (tw, th), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX, 0.5, 1)
        cv2.rectangle(frame, (px + 20, py + 75), (px + 30 + tw, py + 85 + th), color, -1)
        cv2.putText(frame, label, (px + 25, py + 80 + th),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, self.C_PANEL, 1, cv2.LINE_AA)

        cv2.putText(frame, f"POINTS: {point_count}", (px + 140, py + 40),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, self.C_MUTED, 1, cv2.LINE_AA)
        cv2.putText(frame, message, (px + 140, py + 70),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.45, self.C_TEXT, 1, cv2.LINE_AA)
