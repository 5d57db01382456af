"""
Exception hierarchy for the game engine and its collaborators.

Illegal moves are not exceptions: they come back as rejected DropResults.
These errors cover programming mistakes and persistence problems.
"""


class ConnectFourError(Exception):
    """Base class for all connect_four errors."""


class OutOfRange(ConnectFourError, IndexError):
    """A board coordinate lies outside the grid."""

    def __init__(self, row: int | None, col: int | None, rows: int, cols: int):
        self.row = row
        self.col = col
        where = f"column {col}" if row is None else f"cell ({row},{col})"
        super().__init__(f"{where} is outside a {rows}x{cols} board")


class InvalidPlayerName(ConnectFourError, ValueError):
    """A player name is empty, too long, or contains unprintable characters."""


class RecorderError(ConnectFourError):
    """A results recorder failed to read or write its store."""
