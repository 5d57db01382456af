"""Pygame presenter: name entry screen and match screen.

The app only translates input into session calls and draws whatever
GameState the session reports; it holds no game rules of its own.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
import pygame

from connect_four.core.types import Cell
from connect_four.games.game_state import GameState
from connect_four.games.session import GameSession
from connect_four.ui.layout import (
    BUTTON_LABELS,
    COL_BACKGROUND,
    COL_BOARD,
    COL_HIGHLIGHT,
    COL_POPUP,
    COL_TEXT,
    COL_WARNING,
    DISC_COLORS,
    NAME_BOX_RECTS,
    NAME_LABEL_POS,
    POPUP_SIZE,
    START_BUTTON_RECT,
    Intent,
    board_rect,
    button_rects,
    cell_rect,
    column_at,
    disc_center,
    disc_radius,
    intent_at,
    parse_names,
)
from connect_four.ui.widgets import Button, TextBox
from connect_four.utils.config import Config

TITLE = "Connect 4 Game"

_BUTTON_COLORS = {
    Intent.RESTART: (100, 220, 120),
    Intent.NEW_PLAYERS: (240, 200, 90),
    Intent.QUIT: (220, 100, 100),
}


class PygameApp:
    def __init__(self, config: Config) -> None:
        self.config = config

        pygame.init()
        self._surf = pygame.display.set_mode(POPUP_SIZE)
        pygame.display.set_caption(TITLE)
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Arial", 36)
        self._f_status = pygame.font.SysFont("Arial", 24)
        self._f_body = pygame.font.SysFont("Arial", 20)
        self._f_small = pygame.font.SysFont("Arial", 16)

    # -------------------------------------------------------------------------
    # Name entry
    # -------------------------------------------------------------------------

    def prompt_names(self) -> Optional[Tuple[str, str]]:
        """Show the name popup; None if the window was closed."""
        self._surf = pygame.display.set_mode(POPUP_SIZE)
        boxes = [TextBox(rect, self._f_body) for rect in NAME_BOX_RECTS]
        start = Button(START_BUTTON_RECT, "Start Game", self._f_body, bg=COL_BOARD, fg=(255, 255, 255), outline=0)

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
                for box in boxes:
                    box.handle_event(event)

                submitted = (
                    (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and start.hit(event.pos))
                    or (event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN)
                )
                if submitted:
                    names = parse_names([box.text for box in boxes])
                    if names is not None:
                        return names

            self._draw_popup(boxes, start)
            pygame.display.flip()
            self._clock.tick(self.config.display.fps)

    def _draw_popup(self, boxes: List[TextBox], start: Button) -> None:
        self._surf.fill(COL_POPUP)
        title = self._f_title.render(TITLE, True, COL_TEXT)
        self._surf.blit(title, title.get_rect(center=(POPUP_SIZE[0] // 2, 60)))

        for i, (box, pos) in enumerate(zip(boxes, NAME_LABEL_POS), start=1):
            self._surf.blit(self._f_body.render(f"Player {i}", True, COL_TEXT), pos)
            box.draw(self._surf)
        start.draw(self._surf)

    # -------------------------------------------------------------------------
    # Match
    # -------------------------------------------------------------------------

    def run_match(self, session: GameSession) -> Intent:
        """
        Play matches on `session` until the players quit or want new names.

        Restart is handled here with session.reset(); the other intents
        are returned to the caller.
        """
        board_cfg, display = session.config, self.config.display
        self._surf = pygame.display.set_mode(display.window_size(board_cfg))
        area = board_rect(board_cfg, display)
        buttons = {
            intent: Button(rect, BUTTON_LABELS[intent], self._f_body, bg=_BUTTON_COLORS[intent])
            for intent, rect in button_rects(board_cfg, display).items()
        }

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return Intent.QUIT

                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if not session.is_over():
                        x, y = event.pos
                        col = column_at(x, display.cell_size, board_cfg.cols)
                        if col is not None and y < area[1] + area[3]:
                            session.submit_move(col)
                        continue

                    intent = intent_at(event.pos, board_cfg, display)
                    if intent is Intent.RESTART:
                        session.reset()
                    elif intent is not None:
                        return intent

                elif event.type == pygame.KEYDOWN and not session.is_over():
                    # Number keys 1-9 drop into that column
                    if len(event.unicode) == 1 and event.unicode in "123456789":
                        session.submit_move(int(event.unicode) - 1)

            self._draw_match(session, session.get_state(), buttons)
            pygame.display.flip()
            self._clock.tick(display.fps)

    def _draw_match(self, session: GameSession, state: GameState, buttons: dict) -> None:
        display = self.config.display
        self._surf.fill(COL_BACKGROUND)

        hover = None
        if not state.is_over:
            x, _ = pygame.mouse.get_pos()
            hover = column_at(x, display.cell_size, session.config.cols)

        radius = disc_radius(display)
        for (r, c), value in np.ndenumerate(state.board):
            pygame.draw.rect(self._surf, COL_BOARD, cell_rect(r, c, display))
            pygame.draw.circle(self._surf, DISC_COLORS[Cell(int(value))], disc_center(r, c, display), radius)

        if hover is not None:
            cx, _ = disc_center(0, hover, display)
            color = DISC_COLORS[state.current_player]
            pygame.draw.circle(self._surf, color, (cx, display.header_height // 2 + 20), radius // 2)

        for r, c in state.winning_line or ():
            pygame.draw.circle(self._surf, COL_HIGHLIGHT, disc_center(r, c, display), radius, width=4)

        status = self._f_status.render(state.status, True, COL_TEXT)
        self._surf.blit(status, (16, 16))

        if session.record_failed:
            note = self._f_small.render("Results could not be saved", True, COL_WARNING)
            self._surf.blit(note, (16, 48))

        if state.is_over:
            for button in buttons.values():
                button.draw(self._surf)

    def close(self) -> None:
        pygame.quit()

