from __future__ import annotations

import math
import os
import sys
from typing import Optional

import pygame

os.environ.setdefault('SDL_VIDEO_WINDOW_POS', '100,100')

from ..core.round_engine import RoundEngine
from .constants import WIDTH, HEIGHT, FPS, TITLE, BG, FONT_PATH, BACKGROUND_PATH
from .game_screen import GameScreen
from .start_screen import StartScreen
from . import audio


def load_fonts() -> dict:
    pygame.font.init()
    def f(size: int) -> pygame.font.Font:
        try:
            return pygame.font.Font(FONT_PATH, size)
        except FileNotFoundError:
            print(f"[warn] font not found at {FONT_PATH}, using fallback")
            return pygame.font.Font(None, size * 2)
    return {"title": f(36), "btn": f(16), "body": f(11), "small": f(10)}


def _make_vignette() -> pygame.Surface:
    surf   = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    cx, cy = WIDTH // 2, HEIGHT // 2
    max_r  = int(math.hypot(cx, cy))
    for i in range(24, 0, -1):
        ratio = i / 24
        alpha = int((ratio ** 1.6) * 160)
        pygame.draw.circle(surf, (0, 0, 0, alpha), (cx, cy), int(max_r * ratio))
    return surf


def load_background() -> pygame.Surface:
    """background.png scaled to the window, or a plain fill with a vignette."""
    if os.path.exists(BACKGROUND_PATH):
        try:
            img = pygame.image.load(BACKGROUND_PATH).convert()
            return pygame.transform.smoothscale(img, (WIDTH, HEIGHT))
        except pygame.error as e:
            print(f"[warn] background load failed: {e}")
    else:
        print(f"[warn] background not found: {BACKGROUND_PATH}")
    surf = pygame.Surface((WIDTH, HEIGHT))
    surf.fill(BG)
    surf.blit(_make_vignette(), (0, 0))
    return surf


def run(seed: Optional[int] = None, verbose: bool = False) -> None:
    pygame.init()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    audio.init()

    fonts      = load_fonts()
    background = load_background()
    engine     = RoundEngine(seed=seed, verbose=verbose)
    start      = StartScreen(screen, fonts, background)
    game       = GameScreen(screen, fonts, engine, background)
    current    = "start"

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_F11:
                    pygame.display.toggle_fullscreen()
                    continue
                if event.key == pygame.K_m:
                    audio.toggle_sfx()
                    continue

            if current == "start":
                if start.handle_event(event) == "start":
                    # every START is a brand new game
                    engine.start()
                    game = GameScreen(screen, fonts, engine, background)
                    current = "game"

            elif current == "game":
                if game.handle_event(event) == "back":
                    current = "start"

        if current == "start":
            start.update()
            start.draw()
        else:
            game.update()
            game.draw()

        pygame.display.flip()
