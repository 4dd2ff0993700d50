from __future__ import annotations

import os
import pygame

from .constants import ASSETS_DIR

_SOUNDS_DIR = os.path.join(ASSETS_DIR, "sounds")

SFX_VOL = 0.8

# ── Sound effect filenames ────────────────────────────────────────────────────
_SFX_FILES = {
    "menu_click": "menu_click.wav",
    "card_draw":  "card_draw.wav",
    "game_over":  "game_over.wav",
}

# ── State ─────────────────────────────────────────────────────────────────────
_sounds      : dict[str, pygame.mixer.Sound] = {}
_sfx_enabled = True


def init() -> None:
    """Call once after pygame.init(). Missing files are reported, not fatal."""
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
    except pygame.error as e:
        print(f"[audio] mixer unavailable: {e}")
        return

    for key, filename in _SFX_FILES.items():
        path = os.path.join(_SOUNDS_DIR, filename)
        if os.path.exists(path):
            try:
                snd = pygame.mixer.Sound(path)
                snd.set_volume(SFX_VOL)
                _sounds[key] = snd
            except pygame.error as e:
                print(f"[audio] failed to load sfx '{key}': {e}")
        else:
            print(f"[audio] sfx not found: {path}")


def play(key: str) -> None:
    if not _sfx_enabled:
        return
    snd = _sounds.get(key)
    if snd:
        snd.play()


def toggle_sfx() -> bool:
    global _sfx_enabled
    _sfx_enabled = not _sfx_enabled
    return _sfx_enabled
