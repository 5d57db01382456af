"""
Configuration: board dimensions, display geometry, and run settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from connect_four.core.types import Cell


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).parent.parent  # src/connect_four/
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_DB_PATH = DATA_DIR / "connect_four.db"


# ---------------------------------------------------------------------------
# Game constants
# ---------------------------------------------------------------------------

ROWS = 6
COLS = 7
CONNECT_N = 4

CELL_SIZE = 90
HEADER_HEIGHT = 80
FOOTER_HEIGHT = 160
FPS = 60


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BoardConfig:
    """Immutable board dimensions shared by Board and GameSession."""
    rows: int = ROWS
    cols: int = COLS

    def __post_init__(self) -> None:
        for attr in ("rows", "cols"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{attr} must be a positive integer, got {value!r}")

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)


@dataclass(frozen=True)
class DisplayConfig:
    """Pixel geometry of the game window."""
    cell_size: int = CELL_SIZE
    header_height: int = HEADER_HEIGHT
    footer_height: int = FOOTER_HEIGHT
    fps: int = FPS

    def __post_init__(self) -> None:
        if self.cell_size < 20:
            raise ValueError(f"cell_size must be at least 20 pixels, got {self.cell_size}")

    def window_size(self, board: BoardConfig) -> Tuple[int, int]:
        width = board.cols * self.cell_size
        height = board.rows * self.cell_size + self.header_height + self.footer_height
        return width, height


class Config:
    """Run configuration with sensible defaults."""

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        cell_size: int = CELL_SIZE,
        db_path: str | Path = DEFAULT_DB_PATH,
        record_results: bool = True,
        first_player: Cell = Cell.PLAYER_A,
    ):
        self.board = BoardConfig(rows, cols)
        self.display = DisplayConfig(cell_size=cell_size)
        self.db_path = Path(db_path)
        self.record_results = record_results

        if first_player not in (Cell.PLAYER_A, Cell.PLAYER_B):
            raise ValueError(f"first_player must be PLAYER_A or PLAYER_B, got {first_player!r}")
        self.first_player = Cell(first_player)


# Default configuration
DEFAULT_CONFIG = Config()
