"""
Window geometry, palette, and input mapping for the pygame presenter.

Everything here is plain arithmetic on tuples so it can be used (and
tested) without opening a display.
"""

from __future__ import annotations

import enum
from typing import Dict, List, Optional, Tuple

from connect_four.core.types import Cell, MAX_NAME_LENGTH, validate_name
from connect_four.utils.config import BoardConfig, DisplayConfig

Rect = Tuple[int, int, int, int]  # (x, y, w, h)
Color = Tuple[int, int, int]

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
COL_BACKGROUND = (220, 230, 255)
COL_BOARD = (30, 144, 255)
COL_HOLE = (230, 230, 230)
COL_TEXT = (0, 0, 0)
COL_PLACEHOLDER = (150, 150, 150)
COL_POPUP = (190, 220, 255)
COL_HIGHLIGHT = (255, 255, 255)
COL_WARNING = (170, 40, 40)

DISC_COLORS: Dict[Cell, Color] = {
    Cell.EMPTY: COL_HOLE,
    Cell.PLAYER_A: (220, 30, 30),
    Cell.PLAYER_B: (240, 210, 0),
}

# ---------------------------------------------------------------------------
# Name-entry popup
# ---------------------------------------------------------------------------
POPUP_SIZE = (600, 400)
NAME_BOX_RECTS: Tuple[Rect, Rect] = ((250, 145, 280, 36), (250, 205, 280, 36))
NAME_LABEL_POS = ((130, 150), (130, 210))
START_BUTTON_RECT: Rect = (225, 290, 150, 45)

BACKSPACE = "\b"

# ---------------------------------------------------------------------------
# Match screen
# ---------------------------------------------------------------------------
BUTTON_SIZE = (180, 56)
BUTTON_GAP = 20
CELL_PADDING = 6
DISC_INSET = 12


class Intent(enum.Enum):
    """What the players asked for once a match is over."""
    RESTART = "restart"
    NEW_PLAYERS = "new_players"
    QUIT = "quit"


BUTTON_LABELS = {
    Intent.RESTART: "Restart",
    Intent.NEW_PLAYERS: "New Players",
    Intent.QUIT: "Quit Game",
}


def point_in_rect(pos: Tuple[int, int], rect: Rect) -> bool:
    x, y = pos
    rx, ry, rw, rh = rect
    return rx <= x < rx + rw and ry <= y < ry + rh


def board_rect(board: BoardConfig, display: DisplayConfig) -> Rect:
    return (0, display.header_height, board.cols * display.cell_size, board.rows * display.cell_size)


def column_at(x: int, cell_size: int, cols: int) -> Optional[int]:
    """Map a pointer x-coordinate to a column index, None if off the board."""
    if x < 0:
        return None
    col = x // cell_size
    return col if col < cols else None


def cell_rect(row: int, col: int, display: DisplayConfig) -> Rect:
    """Blue square behind one hole."""
    size = display.cell_size
    return (
        col * size + CELL_PADDING,
        row * size + display.header_height + CELL_PADDING,
        size - 2 * CELL_PADDING,
        size - 2 * CELL_PADDING,
    )


def disc_center(row: int, col: int, display: DisplayConfig) -> Tuple[int, int]:
    half = display.cell_size // 2
    return col * display.cell_size + half, row * display.cell_size + display.header_height + half


def disc_radius(display: DisplayConfig) -> int:
    return display.cell_size // 2 - DISC_INSET


def button_rects(board: BoardConfig, display: DisplayConfig) -> Dict[Intent, Rect]:
    """End-of-match buttons, centred in a row inside the footer."""
    width, height = display.window_size(board)
    count = len(BUTTON_LABELS)
    w = min(BUTTON_SIZE[0], (width - (count + 1) * BUTTON_GAP) // count)
    h = BUTTON_SIZE[1]
    total = count * w + (count - 1) * BUTTON_GAP
    x = (width - total) // 2
    y = height - display.footer_height // 2 - h // 2

    rects = {}
    for i, intent in enumerate(BUTTON_LABELS):
        rects[intent] = (x + i * (w + BUTTON_GAP), y, w, h)
    return rects


def intent_at(pos: Tuple[int, int], board: BoardConfig, display: DisplayConfig) -> Optional[Intent]:
    for intent, rect in button_rects(board, display).items():
        if point_in_rect(pos, rect):
            return intent
    return None


def apply_key(text: str, char: str, max_length: int = MAX_NAME_LENGTH) -> str:
    """
    Edit a name field with one typed character.

    Backspace removes the last character; printable ASCII is appended
    until the field reaches `max_length`; anything else is ignored.
    """
    if char == BACKSPACE:
        return text[:-1]
    if len(char) == 1 and 32 <= ord(char) < 127 and len(text) < max_length:
        return text + char
    return text


def parse_names(raw: List[str]) -> Optional[Tuple[str, str]]:
    """Validated (player 1, player 2) names, or None if either is unusable."""
    try:
        first, second = (validate_name(name) for name in raw)
    except ValueError:  # InvalidPlayerName, or not exactly two names
        return None
    return first, second
