"""
LoopScore - Main Entry Point.
=============================

Draw a circle with the mouse, get a 1-100 score.

This module wires the layers together:
1. The Canvas (CanvasRenderer) that keeps every glowing stroke.
2. The Controller that turns mouse events into gestures.
3. The Session that samples, scores and remembers the best result.
4. The HUD that overlays scores and hints on every frame.

Usage:
    $ python -m loopscore.main
    $ loopscore
"""
import cv2
import logging

from loopscore.config import CONFIG
from loopscore.control.controller import CanvasController
from loopscore.ui.hud import HUD

def main():
    """
    Main Event Loop.
    """
    # 1. Boot Sequence
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(message)s")
    print("⭕ LOOPSCORE: ONLINE")
    print("   -> Click & drag to draw a circle")
    print("   -> Press 'R' to Restart")
    print("   -> Press 'ESC' to Exit")

    # 2. Initialize Subsystems
    controller = CanvasController()
    hud = HUD()
    window_name = CONFIG["WINDOW_NAME"]
    cv2.namedWindow(window_name, cv2.WINDOW_AUTOSIZE)
    cv2.setMouseCallback(window_name, controller.on_mouse)

    try:
        while True:
            # Strokes live on the canvas; overlays go on a throwaway copy
            frame = controller.renderer.canvas.copy()
            hud.render(frame, controller.session)
            cv2.imshow(window_name, frame)

            # Input Handling
            k = cv2.waitKey(CONFIG["FRAME_DELAY_MS"]) & 0xFF
            if k == 27: break # ESC
            elif k in (ord('r'), ord('R')): controller.restart()

            # Window closed with the title-bar button
            if cv2.getWindowProperty(window_name, cv2.WND_PROP_VISIBLE) < 1: break

    finally:
        cv2.destroyAllWindows()
        print(f"🔴 LOOPSCORE OFFLINE (best: {controller.session.best_score})")

if __name__ == "__main__":
    main()
