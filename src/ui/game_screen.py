from __future__ import annotations

import pygame
from ..core.card import Role
from ..core.round_engine import Phase, RoundEngine
from . import audio
from .card_view import render_card
from .constants import (
    WIDTH, BTN_W, BTN_H, CARD_W, CARD_H, COLUMN_GAP, GOLD,
)
from .widgets import Button, next_button, render_outlined, role_button

_ROLE_LABELS = {
    Role.SNIPER:     "SNIPER",
    Role.GOALKEEPER: "GOALKEEPER",
}

_TOP_Y    = 150                                 # top of role buttons / cards
_BOTTOM_Y = _TOP_Y + CARD_H + 30                # next-round button / message


def column_x(role: Role) -> int:
    """Horizontal centre of the role's column."""
    offset = (CARD_W + COLUMN_GAP) // 2
    return WIDTH // 2 - offset if role is Role.SNIPER else WIDTH // 2 + offset


class GameScreen:
    """
    One round at a time: a button per role until that role has drawn, then
    the drawn card. Every action goes through the RoundEngine; the screen
    only reads its state.
    Returns from handle_event: 'back' | None
    """

    def __init__(self, screen: pygame.Surface, fonts: dict,
                 engine: RoundEngine, background: pygame.Surface) -> None:
        self.screen      = screen
        self.fonts       = fonts
        self.engine      = engine
        self._background = background
        self._card_surfs: dict[Role, pygame.Surface] = {}

        self._role_btns = {
            role: role_button(column_x(role), _TOP_Y + CARD_H // 2 - BTN_H // 2,
                              label, fonts["btn"])
            for role, label in _ROLE_LABELS.items()
        }
        self._next_btn  = next_button(WIDTH // 2, _BOTTOM_Y, "NEXT ROUND", fonts["btn"])
        self._again_btn = Button(WIDTH // 2, _BOTTOM_Y + 50, "PLAY AGAIN",
                                 w=BTN_W - 40, h=BTN_H - 12, font=fonts["btn"])
        self._sync_buttons()

    # ── state sync ───────────────────────────────────────────────────────────

    def _sync_buttons(self) -> None:
        e = self.engine
        in_progress = e.phase is Phase.IN_PROGRESS
        for role, btn in self._role_btns.items():
            btn.visible = in_progress and e.pick_for(role) is None
        self._next_btn.visible  = in_progress and e.both_picked() and not e.is_last_round()
        self._again_btn.visible = e.phase is Phase.COMPLETED

    def _card_surface(self, role: Role) -> pygame.Surface | None:
        card = self.engine.pick_for(role)
        if card is None:
            self._card_surfs.pop(role, None)
            return None
        cached = self._card_surfs.get(role)
        if cached is None:
            cached = render_card(card, self.fonts["body"])
            self._card_surfs[role] = cached
        return cached

    # ── events ───────────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> str | None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return "back"

        for role, btn in self._role_btns.items():
            if btn.handle_event(event):
                if self.engine.draw_for(role) is not None:
                    audio.play("card_draw")
                self._after_action()
                return None

        if self._next_btn.handle_event(event):
            if self.engine.advance_round():
                self._card_surfs.clear()
            self._after_action()
        elif self._again_btn.handle_event(event):
            self.engine.start()
            self._card_surfs.clear()
            self._after_action()
        return None

    def _after_action(self) -> None:
        e = self.engine
        # the last round has no NEXT ROUND button; it ends once both have drawn
        if e.phase is Phase.IN_PROGRESS and e.both_picked() and e.is_last_round():
            e.advance_round()
            audio.play("game_over")
        self._sync_buttons()

    # ── frame ────────────────────────────────────────────────────────────────

    def update(self) -> None:
        mouse = pygame.mouse.get_pos()
        for btn in self._role_btns.values():
            btn.update(mouse)
        self._next_btn.update(mouse)
        self._again_btn.update(mouse)

    def draw(self, surf: pygame.Surface | None = None) -> None:
        surf = surf or self.screen
        surf.blit(self._background, (0, 0))

        label = render_outlined(self.fonts["title"], f"ROUND {self.engine.round_number}")
        surf.blit(label, (WIDTH // 2 - label.get_width() // 2, 50))

        for role, btn in self._role_btns.items():
            card_surf = self._card_surface(role)
            if card_surf is not None:
                surf.blit(card_surf, (column_x(role) - CARD_W // 2, _TOP_Y))
            btn.draw(surf)

        self._next_btn.draw(surf)

        if self.engine.phase is Phase.COMPLETED:
            msg = render_outlined(self.fonts["btn"], "ALL ROUNDS COMPLETED!", GOLD)
            surf.blit(msg, (WIDTH // 2 - msg.get_width() // 2, _BOTTOM_Y))
            self._again_btn.draw(surf)
