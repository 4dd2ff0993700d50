from __future__ import annotations

import pygame
from .constants import WIDTH, HEIGHT, BTN_H, TEXT_DIM
from .widgets import Button, render_outlined


class StartScreen:
    """
    Title screen with a single START button.
    Returns: 'start' | None
    """

    def __init__(self, screen: pygame.Surface, fonts: dict,
                 background: pygame.Surface) -> None:
        self.screen      = screen
        self.fonts       = fonts
        self._background = background
        self._start_btn  = Button(WIDTH // 2, HEIGHT // 2 - BTN_H // 2 + 40,
                                  "START", font=fonts["btn"])

    def handle_event(self, event: pygame.event.Event) -> str | None:
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE):
            return "start"
        if self._start_btn.handle_event(event):
            return "start"
        return None

    def update(self) -> None:
        self._start_btn.update(pygame.mouse.get_pos())

    def draw(self, surf: pygame.Surface | None = None) -> None:
        surf = surf or self.screen
        surf.blit(self._background, (0, 0))

        title = render_outlined(self.fonts["title"], "SNIPER vs GOALKEEPER")
        surf.blit(title, (WIDTH // 2 - title.get_width() // 2, HEIGHT // 4))

        hint = render_outlined(self.fonts["small"], "F11 fullscreen   M sound", TEXT_DIM)
        surf.blit(hint, (WIDTH // 2 - hint.get_width() // 2, HEIGHT - 48))

        self._start_btn.draw(surf)
