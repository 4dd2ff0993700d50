from __future__ import annotations

import os as _os

# ── window ────────────────────────────────────────────────────────────────────
WIDTH  = 1280
HEIGHT = 720
FPS    = 60
TITLE  = "Sniper vs Goalkeeper"

# ── palette ───────────────────────────────────────────────────────────────────
BLACK      = (0,   0,   0)
WHITE      = (255, 255, 255)
BG         = (10,  40,  22)    # pitch green, used when background.png is missing

ORANGE      = (255, 150, 20)   # role buttons
ORANGE_DARK = (150, 80,  10)
GOLD        = (255, 200, 80)

TEXT_MAIN  = (255, 255, 255)
TEXT_DIM   = (170, 190, 175)
OUTLINE    = (0,   0,   0)     # text outline, readable on any background

# ── card faces (fallback when the kind image is missing) ─────────────────────
CARD_BONUS   = (40,  150, 70)
CARD_PENALTY = (190, 45,  45)
CARD_NEUTRAL = (110, 110, 130)
CARD_BORDER  = (0,   0,   0)

# ── layout ────────────────────────────────────────────────────────────────────
BTN_W      = 320
BTN_H      = 64
BTN_RADIUS = 8

CARD_W      = 256              # 2:3 aspect
CARD_H      = 384
CARD_PAD    = 22
CARD_RADIUS = 12
COLUMN_GAP  = 120              # horizontal gap between the two columns

# ── assets ────────────────────────────────────────────────────────────────────
ASSETS_DIR = _os.path.join(_os.path.dirname(__file__), "assets")
FONT_PATH  = _os.path.join(ASSETS_DIR, "fonts", "PressStart2P.ttf")
BACKGROUND_PATH = _os.path.join(ASSETS_DIR, "background.png")
CARD_IMAGE_FILES = {
    "bonus":   "bonus.png",
    "penalty": "penalty.png",
    "neutral": "neutral.png",
}
