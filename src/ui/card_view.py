from __future__ import annotations

import os
import pygame

from ..core.card import CardEntry, CardKind
from .constants import (
    ASSETS_DIR, CARD_IMAGE_FILES,
    CARD_W, CARD_H, CARD_PAD, CARD_RADIUS, CARD_BORDER,
    CARD_BONUS, CARD_PENALTY, CARD_NEUTRAL, TEXT_MAIN, GOLD,
)
from .widgets import render_outlined

_FALLBACK_COLOURS = {
    CardKind.BONUS:   CARD_BONUS,
    CardKind.PENALTY: CARD_PENALTY,
    CardKind.NEUTRAL: CARD_NEUTRAL,
}

_face_cache: dict[CardKind, pygame.Surface | None] = {}


def _load_face(kind: CardKind) -> pygame.Surface | None:
    if kind in _face_cache:
        return _face_cache[kind]
    path = os.path.join(ASSETS_DIR, CARD_IMAGE_FILES[kind.value])
    face = None
    if os.path.exists(path):
        try:
            img  = pygame.image.load(path)
            face = pygame.transform.smoothscale(img.convert_alpha(), (CARD_W, CARD_H))
        except pygame.error as e:
            print(f"[warn] card image load failed: {e}")
    else:
        print(f"[warn] card image not found: {path}")
    _face_cache[kind] = face
    return face


def wrap_text(font: pygame.font.Font, text: str, max_width: int) -> list[str]:
    """Greedy word wrap. A single word wider than max_width gets its own line."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and font.size(candidate)[0] > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def card_lines(card: CardEntry, font: pygame.font.Font) -> tuple[list[str], list[str]]:
    """Wrapped (title, effect) lines for a card face. Title is empty without a colon."""
    width = CARD_W - CARD_PAD * 2
    title = wrap_text(font, card.title, width) if card.title else []
    return title, wrap_text(font, card.effect, width)


def render_card(card: CardEntry, font: pygame.font.Font) -> pygame.Surface:
    """
    Draw a CardEntry as a card face.

    Each kind has its own face image (bonus.png / penalty.png / neutral.png
    in ui/assets); a missing image falls back to a flat colour. The title
    sits at the top in gold, the effect is centred below it.
    """
    surf = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
    face = _load_face(card.kind)
    if face is not None:
        surf.blit(face, (0, 0))
    else:
        pygame.draw.rect(surf, _FALLBACK_COLOURS[card.kind], surf.get_rect(),
                         border_radius=CARD_RADIUS)
    pygame.draw.rect(surf, CARD_BORDER, surf.get_rect(),
                     width=3, border_radius=CARD_RADIUS)

    title_lines, effect_lines = card_lines(card, font)
    line_h = font.get_linesize()

    y = CARD_PAD
    for line in title_lines:
        label = render_outlined(font, line, GOLD)
        surf.blit(label, (CARD_W // 2 - label.get_width() // 2, y))
        y += line_h

    top = y + line_h if title_lines else 0
    y   = max(top, (top + CARD_H) // 2 - (line_h * len(effect_lines)) // 2)
    for line in effect_lines:
        label = render_outlined(font, line, TEXT_MAIN)
        surf.blit(label, (CARD_W // 2 - label.get_width() // 2, y))
        y += line_h
    return surf


def clear_cache() -> None:
    _face_cache.clear()
