from __future__ import annotations

import pygame
from .constants import (
    WHITE, BLACK, ORANGE, ORANGE_DARK, GOLD, OUTLINE,
    TEXT_MAIN, BTN_W, BTN_H, BTN_RADIUS,
)
from . import audio


def render_outlined(font: pygame.font.Font, text: str,
                    colour: tuple = TEXT_MAIN) -> pygame.Surface:
    """Render text with a 1px black outline so it reads on any background."""
    base    = font.render(text, True, colour)
    outline = font.render(text, True, OUTLINE)
    w, h    = base.get_width() + 2, base.get_height() + 2
    surf    = pygame.Surface((w, h), pygame.SRCALPHA)
    for dx, dy in ((0, 0), (2, 0), (0, 2), (2, 2)):
        surf.blit(outline, (dx, dy))
    surf.blit(base, (1, 1))
    return surf


class Button:
    """
    Clickable rounded rectangle. Hidden buttons neither draw nor react.
    `border` is the outline colour; role buttons use a thick orange one.
    """

    def __init__(
        self,
        x: int, y: int,
        text: str,
        w: int = BTN_W,
        h: int = BTN_H,
        font: pygame.font.Font | None = None,
        border: tuple = BLACK,
        border_width: int = 3,
    ) -> None:
        self.rect    = pygame.Rect(0, 0, w, h)
        self.rect.centerx = x
        self.rect.y  = y
        self.text    = text
        self.font    = font
        self.border  = border
        self.border_width = border_width
        self.hovered = False
        self.visible = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.visible:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                audio.play("menu_click")
                return True
        return False

    def update(self, mouse_pos: tuple) -> None:
        self.hovered = self.visible and self.rect.collidepoint(mouse_pos)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return

        fill = GOLD if self.hovered else WHITE
        pygame.draw.rect(surface, fill, self.rect, border_radius=BTN_RADIUS)
        pygame.draw.rect(surface, self.border, self.rect,
                         width=self.border_width, border_radius=BTN_RADIUS)

        if self.font:
            label = self.font.render(self.text, True, BLACK)
            surface.blit(label, (self.rect.centerx - label.get_width()  // 2,
                                 self.rect.centery - label.get_height() // 2))


def role_button(x: int, y: int, text: str, font: pygame.font.Font | None) -> Button:
    return Button(x, y, text, font=font, border=ORANGE, border_width=12)


def next_button(x: int, y: int, text: str, font: pygame.font.Font | None) -> Button:
    return Button(x, y, text, w=BTN_W - 40, h=BTN_H - 12, font=font,
                  border=ORANGE_DARK)
