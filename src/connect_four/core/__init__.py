"""
Core module - fundamental types and errors.

This module provides the building blocks used throughout the game.
"""

from connect_four.core.types import (
    Cell,
    Phase,
    DropStatus,
    RejectReason,
    DropResult,
    Player,
    MatchRecord,
    PLAYERS,
    DRAW_OUTCOME,
    MAX_NAME_LENGTH,
    validate_name,
)
from connect_four.core.errors import (
    ConnectFourError,
    OutOfRange,
    InvalidPlayerName,
    RecorderError,
)

__all__ = [
    # Types
    "Cell",
    "Phase",
    "DropStatus",
    "RejectReason",
    "DropResult",
    "Player",
    "MatchRecord",
    # Constants
    "PLAYERS",
    "DRAW_OUTCOME",
    "MAX_NAME_LENGTH",
    # Functions
    "validate_name",
    # Errors
    "ConnectFourError",
    "OutOfRange",
    "InvalidPlayerName",
    "RecorderError",
]
