"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the game:
- Cell: contents of a single board position (also the player identifier)
- Phase: game phase reported by a GameSession
- DropResult: outcome of dropping a disc into a column
- Player / MatchRecord: identities and finished-match records
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional

from connect_four.core.errors import InvalidPlayerName

MAX_NAME_LENGTH = 15

# Outcome marker written instead of a winner name when the board fills up
DRAW_OUTCOME = "Draw"


class Cell(IntEnum):
    """
    Board cell value, stored as int8:
        0 = empty
        1 = player A's disc
        2 = player B's disc
    """
    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = 2

    def other(self) -> "Cell":
        """Return the opposing player."""
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell(3 - self.value)  # Toggle 1↔2


PLAYERS = (Cell.PLAYER_A, Cell.PLAYER_B)


class Phase(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


class DropStatus(Enum):
    PLACED = auto()
    REJECTED = auto()


class RejectReason(Enum):
    OUT_OF_RANGE = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class DropResult:
    """
    Outcome of a single drop.

    A placed result carries the exact row written so callers can re-check
    just that row; a rejected result carries the reason and no row.
    """
    status: DropStatus
    col: Optional[int] = None
    row: Optional[int] = None
    reason: Optional[RejectReason] = None

    @classmethod
    def placed(cls, row: int, col: int) -> "DropResult":
        return cls(DropStatus.PLACED, col=col, row=row)

    @classmethod
    def rejected(cls, reason: RejectReason, col: Optional[int] = None) -> "DropResult":
        return cls(DropStatus.REJECTED, col=col, reason=reason)

    @property
    def accepted(self) -> bool:
        return self.status is DropStatus.PLACED


def validate_name(name: str) -> str:
    """
    Normalize and validate a player name.

    Surrounding whitespace is stripped; the remainder must be 1-15
    printable ASCII characters.
    """
    if not isinstance(name, str):
        raise InvalidPlayerName(f"Player name must be a string, got {type(name).__name__}")

    cleaned = name.strip()
    if not cleaned:
        raise InvalidPlayerName("Player name must not be empty")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise InvalidPlayerName(
            f"Player name '{cleaned}' is longer than {MAX_NAME_LENGTH} characters"
        )
    if any(not 32 <= ord(ch) < 127 for ch in cleaned):
        raise InvalidPlayerName(f"Player name '{cleaned}' contains unprintable characters")
    return cleaned


@dataclass(frozen=True)
class Player:
    """A named player bound to one disc colour for a whole match."""
    name: str
    cell: Cell

    def __post_init__(self) -> None:
        if self.cell is Cell.EMPTY:
            raise ValueError("A player cannot own the EMPTY cell")
        # Frozen dataclass: bypass __setattr__ to store the normalized name
        object.__setattr__(self, "name", validate_name(self.name))


@dataclass(frozen=True)
class MatchRecord:
    """A completed match, handed once to the results recorder."""
    player1: str
    player2: str
    outcome: str  # winner name or DRAW_OUTCOME

    @property
    def is_draw(self) -> bool:
        return self.outcome == DRAW_OUTCOME
