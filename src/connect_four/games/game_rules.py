"""
NumPy win and draw detection for Connect Four boards.

A run is CONNECT_N consecutive cells along one of four directions:
horizontal, vertical, diagonal down-right and diagonal up-right. Each
direction is scanned in one shot by AND-ing shifted boolean masks, so a
full board scan costs four small array passes.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from connect_four.core.types import Cell, PLAYERS
from connect_four.games.board import Board
from connect_four.utils.config import CONNECT_N

Coord = Tuple[int, int]  # (row, col)

# (d_row, d_col) for each line orientation
DIRECTIONS: Tuple[Coord, ...] = (
    (0, 1),   # horizontal
    (1, 0),   # vertical
    (1, 1),   # diagonal down-right
    (-1, 1),  # diagonal up-right
)


def _run_starts(mask: np.ndarray, dr: int, dc: int, n: int) -> Tuple[np.ndarray, int, int]:
    """
    Boolean array marking every start cell of an n-long all-True run.

    Returns (starts, row_offset, col_offset): starts[i, j] refers to board
    cell (i + row_offset, j + col_offset).
    """
    rows, cols = mask.shape
    span_r, span_c = dr * (n - 1), dc * (n - 1)
    r0, r1 = max(0, -span_r), rows - max(0, span_r)
    c0, c1 = max(0, -span_c), cols - max(0, span_c)

    if r1 <= r0 or c1 <= c0:
        return np.zeros((0, 0), dtype=bool), r0, c0

    starts = np.ones((r1 - r0, c1 - c0), dtype=bool)
    for i in range(n):
        starts &= mask[r0 + dr * i:r1 + dr * i, c0 + dc * i:c1 + dc * i]
    return starts, r0, c0


def winning_line(board: Board, player: Cell, n: int = CONNECT_N) -> Optional[List[Coord]]:
    """Return the cells of the first n-in-a-row owned by `player`, or None."""
    mask = board.grid == player
    for dr, dc in DIRECTIONS:
        starts, r0, c0 = _run_starts(mask, dr, dc, n)
        hits = np.argwhere(starts)
        if hits.size:
            r, c = int(hits[0][0]) + r0, int(hits[0][1]) + c0
            return [(r + dr * i, c + dc * i) for i in range(n)]
    return None


def has_four_in_a_row(board: Board, player: Cell, n: int = CONNECT_N) -> bool:
    """True if `player` owns n consecutive cells in any orientation."""
    mask = board.grid == player
    return any(
        bool(_run_starts(mask, dr, dc, n)[0].any()) for dr, dc in DIRECTIONS
    )


def winner(board: Board, n: int = CONNECT_N) -> Optional[Cell]:
    """Return the first player found with a run, or None."""
    for player in PLAYERS:
        if has_four_in_a_row(board, player, n):
            return player
    return None


def is_draw(board: Board, n: int = CONNECT_N) -> bool:
    """Full board and nobody has a run."""
    return board.is_full() and winner(board, n) is None
