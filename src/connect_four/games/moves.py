"""
Move resolution - gravity drop of a disc into a column.

drop() is the only code that writes disc values into a Board. Illegal
columns are ordinary input and come back as rejected results; the board
is never partially modified.
"""

from __future__ import annotations

import numbers

import numpy as np

from connect_four.core.types import Cell, DropResult, PLAYERS, RejectReason
from connect_four.games.board import Board


def lowest_empty_row(board: Board, col: int) -> int | None:
    """Return the highest row index that is empty in `col`, or None if full."""
    empty = np.flatnonzero(board.grid[:, col] == Cell.EMPTY)
    if empty.size == 0:
        return None
    return int(empty[-1])


def drop(board: Board, col: int, player: Cell) -> DropResult:
    """
    Drop `player`'s disc into `col`.

    Returns:
        DropResult.placed(row, col) with the row written, or a rejected
        result (OUT_OF_RANGE / COLUMN_FULL) with the board untouched.
    """
    if player not in PLAYERS:
        raise ValueError(f"Cannot drop a disc for {player!r}")

    if isinstance(col, bool) or not isinstance(col, numbers.Integral):
        return DropResult.rejected(RejectReason.OUT_OF_RANGE)

    c = int(col)
    if not 0 <= c < board.cols:
        return DropResult.rejected(RejectReason.OUT_OF_RANGE, col=c)

    row = lowest_empty_row(board, c)
    if row is None:
        return DropResult.rejected(RejectReason.COLUMN_FULL, col=c)

    board.grid[row, c] = player
    return DropResult.placed(row, c)
