"""
Small pygame widgets: a clickable button and a one-line text box.
"""

from __future__ import annotations

import pygame

from connect_four.ui.layout import (
    BACKSPACE,
    COL_PLACEHOLDER,
    COL_TEXT,
    Color,
    Rect,
    apply_key,
)


class Button:
    __slots__ = ("rect", "text", "font", "bg", "fg", "outline")

    def __init__(
        self,
        rect: Rect,
        text: str,
        font: pygame.font.Font,
        *,
        bg: Color,
        fg: Color = COL_TEXT,
        outline: int = 2,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.fg = fg
        self.outline = outline

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.bg, self.rect)
        if self.outline:
            pygame.draw.rect(surf, COL_TEXT, self.rect, width=self.outline)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


class TextBox:
    """Name field: click to focus, type to edit, placeholder while empty."""

    def __init__(self, rect: Rect, font: pygame.font.Font, placeholder: str = "Enter your name"):
        self.rect = pygame.Rect(rect)
        self.font = font
        self.placeholder = placeholder
        self.text = ""
        self.active = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.active = self.rect.collidepoint(event.pos)
        elif event.type == pygame.KEYDOWN and self.active:
            char = BACKSPACE if event.key == pygame.K_BACKSPACE else event.unicode
            self.text = apply_key(self.text, char)

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, (255, 255, 255), self.rect)
        pygame.draw.rect(surf, COL_TEXT, self.rect, width=2 if self.active else 1)

        if self.text or self.active:
            lbl = self.font.render(self.text, True, COL_TEXT)
        else:
            lbl = self.font.render(self.placeholder, True, COL_PLACEHOLDER)
        surf.blit(lbl, (self.rect.x + 10, self.rect.centery - lbl.get_height() // 2))
