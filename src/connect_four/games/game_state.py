"""
GameState - read-only snapshot of a session for presenters.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from connect_four.core.types import Cell, Phase


class GameState:
    """
    Lightweight snapshot handed to the presenter after every move.

    `board` is a copy of the session grid with the write flag cleared, so
    renderers cannot mutate the live board by accident.
    """
    __slots__ = ('board', 'current_player', 'phase', 'winner', 'winning_line', 'status')

    def __init__(
        self,
        board: np.ndarray,
        current_player: Cell,
        phase: Phase = Phase.IN_PROGRESS,
        winner: Optional[Cell] = None,
        winning_line: Optional[List[Tuple[int, int]]] = None,
        status: str = "",
    ):
        self.board = board
        self.current_player = current_player
        self.phase = phase
        self.winner = winner
        self.winning_line = winning_line
        self.status = status

    @property
    def is_over(self) -> bool:
        return self.phase is not Phase.IN_PROGRESS

    def copy(self) -> "GameState":
        line = list(self.winning_line) if self.winning_line is not None else None
        return GameState(
            self.board.copy(), self.current_player, self.phase, self.winner, line, self.status
        )
