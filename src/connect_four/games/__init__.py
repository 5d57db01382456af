"""
Games module - the Connect Four engine.
"""

from connect_four.games.board import Board
from connect_four.games.game_state import GameState
from connect_four.games.game_rules import has_four_in_a_row, winning_line, winner, is_draw
from connect_four.games.moves import drop
from connect_four.games.session import GameSession

__all__ = [
    "Board",
    "GameState",
    "GameSession",
    "drop",
    "has_four_in_a_row",
    "winning_line",
    "winner",
    "is_draw",
]
