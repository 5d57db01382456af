"""
Connect Four - two-player game engine with a pygame board and SQLite results.

Quick Start:
    from connect_four import GameSession, open_recorder

    with open_recorder("results.db") as recorder:
        session = GameSession("Ada", "Grace", recorder=recorder)
        session.submit_move(3)
        print(session.status_text)

Modules:
    core    - Cell/Phase/DropResult types and errors
    games   - Board, gravity drops, win detection, GameSession
    memory  - Results recorders (SQLite, null)
    ui      - pygame presenter
    api     - Name entry → session → match loop
"""

from connect_four.core import Cell, Phase, DropResult, MatchRecord
from connect_four.games import Board, GameSession, GameState
from connect_four.memory import ResultsMemory, NullRecorder, open_recorder
from connect_four.utils.config import BoardConfig, Config

__version__ = "1.0.0"

__all__ = [
    # Engine
    "Board",
    "GameSession",
    "GameState",
    # Types
    "Cell",
    "Phase",
    "DropResult",
    "MatchRecord",
    # Persistence
    "ResultsMemory",
    "NullRecorder",
    "open_recorder",
    # Config
    "BoardConfig",
    "Config",
]
