"""
LoopScore Configuration Management.
===================================

This module defines every tunable constant of the LoopScore drawing game.
The parameters are organized into the same "Layer Cake" model as the rest
of the system: input signal -> smoothing & visuals -> scoring -> canvas & HUD.

! WARNING !
The scoring weights and the point-count band are empirically tuned.
Changing them changes every score a player has ever seen (no score parity).
"""

# --- MASTER CONFIGURATION ---
CONFIG = {
    # =========================================================
    # LAYER 1: INPUT SIGNAL (The Sampler)
    # =========================================================
    "JITTER_THRESHOLD": 3.0,        # Samples closer than this (px) to the last point are dropped

    # =========================================================
    # LAYER 2: SMOOTHING & VISUALS (Rendering only, never scored)
    # =========================================================
    "LINE_WIDTH_MAX": 10.0,         # Width when the pointer is slow
    "LINE_WIDTH_MIN": 3.0,          # Width floor when the pointer is fast
    "LINE_SPEED_CAP": 20.0,         # Segment lengths above this (px) are treated as 20
    "LINE_SPEED_SCALE": 0.2,        # Width lost per px of segment length
    "STARTER_LINE_WIDTH": 6.0,      # Width of the first straight segment
    "HUE_PERIOD_POINTS": 200,       # Points for one full trip around the colour wheel
    "HUE_GRADIENT_SPAN": 40,        # Hue shift along a single segment
    "GLOW_EXTRA_WIDTH": 6,          # Outer glow is this much wider than the line
    "GLOW_ALPHA": 0.4,              # Outer glow opacity
    "GLOW_BLUR": 20,                # Outer glow blur (maps to Gaussian kernel)
    "LINE_BLUR": 12,                # Main line halo blur
    "COLOR_SATURATION": 0.85,
    "COLOR_LIGHTNESS": 0.65,
    "PARTICLE_CHANCE": 0.15,        # Probability of a spark per smoothed segment
    "PARTICLE_SPREAD": 10.0,        # Max particle offset (px) around the anchor
    "CURVE_STEPS": 16,              # Polyline resolution of one Bezier segment

    # =========================================================
    # LAYER 3: SCORING (The Judge)
    # =========================================================
    "MIN_SCORE_POINTS": 10,         # Fewer points cannot characterize a loop
    "DEGENERATE_RADIUS": 1e-9,      # Mean radius at/below this scores the floor
    "REGULARITY_PENALTY": 200.0,    # Score lost per unit of (stddev / mean radius)
    "CLOSURE_PENALTY": 100.0,       # Score lost per unit of (gap / mean radius)
    "POINT_BAND_LOW": 50,           # Exclusive lower edge of the "sweet spot"
    "POINT_BAND_HIGH": 200,         # Exclusive upper edge of the "sweet spot"
    "POINT_TARGET": 100,            # Outside the band, penalty is centered here
    "POINT_PENALTY": 2.0,           # Score lost per point away from the target
    "WEIGHT_REGULARITY": 0.5,
    "WEIGHT_CLOSURE": 0.3,
    "WEIGHT_POINT_COUNT": 0.2,
    "SCORE_MIN": 1,
    "SCORE_MAX": 100,

    # =========================================================
    # LAYER 4: CANVAS & HUD
    # =========================================================
    "CANVAS_WIDTH": 800,
    "CANVAS_HEIGHT": 500,
    "CANVAS_BACKGROUND": (10, 10, 10),  # BGR of #0a0a0a
    "WINDOW_NAME": "LoopScore",
    "FRAME_DELAY_MS": 15,           # cv2.waitKey delay (~60 FPS)
    "LOG_LEVEL": "INFO",
}

# Score -> (label, BGR colour, message). First band whose floor is reached wins.
GRADE_BANDS = [
    (90, "PERFECT", (94, 197, 34), "Wow! Almost a perfect circle!"),
    (80, "EXCELLENT", (246, 130, 59), "Great circle!"),
    (70, "GOOD", (8, 179, 234), "Nice try!"),
    (60, "PASS", (22, 115, 249), "Needs a bit more practice"),
    (0, "KEEP PRACTICING", (68, 68, 239), "Keep going, you can do better!"),
]
