import cv2
import sys
import os
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from loopscore.config import CONFIG
from loopscore.core.sampler import StrokeSampler
from loopscore.core.scorer import CircleScorer
from loopscore.core.types import Point2D

W, H = 900, 600

def synth_loop(n_points, sweep_deg, aspect, noise, seed=7):
    """Ellipse-ish loop around the window center, with radial noise."""
    rng = np.random.default_rng(seed)
    t = np.linspace(0.0, np.radians(sweep_deg), n_points)
    rx = 180.0
    ry = rx * aspect
    r_noise = 1.0 + rng.normal(0.0, noise / 100.0, n_points)
    xs = W / 2 + rx * np.cos(t) * r_noise
    ys = H / 2 + ry * np.sin(t) * r_noise
    return [Point2D(float(x), float(y)) for x, y in zip(xs, ys)]

def run_lab():
    print("⭕ SCORER LAB (Layer 3)")
    print("   -> Shape a synthetic loop and watch the sub-scores react.")
    print("   -> Grey = Raw Samples | Green = Accepted by Sampler")
    print("   -> Press 'S' to dump scoring config, 'ESC' to exit.")

    cv2.namedWindow("Scorer Lab", cv2.WINDOW_NORMAL)
    cv2.resizeWindow("Scorer Lab", W, H)

    def nothing(x): pass

    # Sliders
    cv2.createTrackbar("POINTS", "Scorer Lab", 100, 400, nothing)
    cv2.createTrackbar("SWEEP (deg)", "Scorer Lab", 360, 360, nothing)
    cv2.createTrackbar("ASPECT (%)", "Scorer Lab", 100, 100, nothing)
    cv2.createTrackbar("NOISE (%)", "Scorer Lab", 0, 30, nothing)

    sampler = StrokeSampler()
    scorer = CircleScorer()

    while True:
        n = max(cv2.getTrackbarPos("POINTS", "Scorer Lab"), 2)
        sweep = cv2.getTrackbarPos("SWEEP (deg)", "Scorer Lab")
        aspect = max(cv2.getTrackbarPos("ASPECT (%)", "Scorer Lab"), 1) / 100.0
        noise = cv2.getTrackbarPos("NOISE (%)", "Scorer Lab")

        raw = synth_loop(n, sweep, aspect, noise)
        stroke = sampler.reset(raw[0])
        for p in raw[1:]:
            stroke = sampler.append(stroke, p)

        frame = np.full((H, W, 3), CONFIG["CANVAS_BACKGROUND"], dtype=np.uint8)
        for p in raw:
            cv2.circle(frame, (int(p.x), int(p.y)), 2, (80, 80, 80), -1)
        pts = np.array([(p.x, p.y) for p in stroke], dtype=np.int32)
        cv2.polylines(frame, [pts], False, (0, 255, 0), 2, cv2.LINE_AA)

        result = scorer.breakdown(stroke)
        if result is None:
            cv2.putText(frame, f"TOO SHORT: {len(stroke)} < {scorer.min_points}", (20, 40), 1, 1.4, (0, 0, 255), 1)
        else:
            c = (int(result.center.x), int(result.center.y))
            cv2.circle(frame, c, int(result.avg_radius), (255, 0, 255), 1) # Mean-radius ring
            cv2.drawMarker(frame, c, (255, 0, 255), cv2.MARKER_CROSS, 12, 1)

            lines = [
                f"SCORE: {result.score}",
                f"REGULARITY: {result.regularity:.1f}",
                f"CLOSURE: {result.closure:.1f}",
                f"POINT COUNT: {result.point_count:.1f}  ({len(stroke)} kept / {len(raw)} raw)",
            ]
            for i, text in enumerate(lines):
                cv2.putText(frame, text, (20, 40 + i * 28), 1, 1.4, (255, 255, 255), 1)

        cv2.imshow("Scorer Lab", frame)
        k = cv2.waitKey(30)
        if k == 27: break
        if k == ord('s'):
            print("\n" + "="*40)
            print("💾 CONFIG VALUES (SCORING):")
            for key in ("JITTER_THRESHOLD", "MIN_SCORE_POINTS", "WEIGHT_REGULARITY",
                        "WEIGHT_CLOSURE", "WEIGHT_POINT_COUNT", "POINT_BAND_LOW", "POINT_BAND_HIGH"):
                print(f'    "{key}": {CONFIG[key]},')
            print("="*40 + "\n")

    cv2.destroyAllWindows()

if __name__ == "__main__":
    run_lab()
