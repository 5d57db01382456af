"""
Board - fixed-size Connect Four grid.

Uses an int8 array (see Cell):
    row 0        = top
    row rows - 1 = bottom

Discs always rest on the bottom row or on another disc, so every column
is a contiguous run of occupied cells growing upward from the bottom.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

from connect_four.core.errors import OutOfRange
from connect_four.core.types import Cell
from connect_four.utils.config import BoardConfig

# Display strings for each cell value
CELL_STRINGS = {Cell.EMPTY: ".", Cell.PLAYER_A: "X", Cell.PLAYER_B: "O"}


class Board:
    """Connect Four grid; cell contents are written only by moves.drop()."""

    __slots__ = ("config", "grid")

    def __init__(self, config: BoardConfig | None = None):
        self.config = config or BoardConfig()
        self.grid = np.zeros(self.config.shape, dtype=np.int8)

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self.cols:
            raise OutOfRange(None, col, self.rows, self.cols)

    def cell_at(self, row: int, col: int) -> Cell:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfRange(row, col, self.rows, self.cols)
        return Cell(int(self.grid[row, col]))

    def column_height(self, col: int) -> int:
        """Number of discs in a column (0..rows)."""
        self._check_col(col)
        return int(np.count_nonzero(self.grid[:, col]))

    def is_full(self) -> bool:
        """True when the top row is occupied (enough, given gravity)."""
        return not np.any(self.grid[0] == Cell.EMPTY)

    def valid_columns(self) -> List[int]:
        """Columns that can still accept a disc."""
        return [int(c) for c in np.flatnonzero(self.grid[0] == Cell.EMPTY)]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (row, col, cell) for every position, top-left first."""
        for (r, c), value in np.ndenumerate(self.grid):
            yield r, c, Cell(int(value))

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the grid for presenters."""
        view = self.grid.copy()
        view.setflags(write=False)
        return view

    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b.config = self.config
        b.grid = self.grid.copy()
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.config == other.config and np.array_equal(self.grid, other.grid)

    def __str__(self) -> str:
        lines = [" ".join(CELL_STRINGS[Cell(int(v))] for v in row) for row in self.grid]
        lines.append(" ".join(str(c % 10) for c in range(self.cols)))
        return "\n".join(lines)
