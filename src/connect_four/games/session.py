"""
GameSession - turn order and game-phase state machine.

    IN_PROGRESS ──win──▶ WON(player)
         │
         └──board full──▶ DRAW

Terminal phases accept no further moves until reset(). Win detection runs
before the full-board check, so a last-cell move that completes a run is
a win, not a draw.

Results are pushed to a ResultsRecorder when a match ends. Recorder
failures are logged and flagged on the session but never change the
game state.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, TYPE_CHECKING

from connect_four.core.types import (
    Cell,
    DRAW_OUTCOME,
    DropResult,
    MatchRecord,
    Phase,
    Player,
    RejectReason,
)
from connect_four.games.board import Board
from connect_four.games.game_rules import has_four_in_a_row, winning_line
from connect_four.games.game_state import GameState
from connect_four.games.moves import drop
from connect_four.utils.config import BoardConfig

if TYPE_CHECKING:
    from connect_four.memory.recorder import ResultsRecorder

logger = logging.getLogger(__name__)


class GameSession:
    """One pair of players, one board, any number of consecutive matches."""

    def __init__(
        self,
        player1: str,
        player2: str,
        config: BoardConfig | None = None,
        recorder: Optional["ResultsRecorder"] = None,
        first_player: Cell = Cell.PLAYER_A,
    ):
        if first_player not in (Cell.PLAYER_A, Cell.PLAYER_B):
            raise ValueError(f"first_player must be PLAYER_A or PLAYER_B, got {first_player!r}")

        self.config = config or BoardConfig()
        self.recorder = recorder
        self.first_player = Cell(first_player)
        self._players = {
            Cell.PLAYER_A: Player(player1, Cell.PLAYER_A),
            Cell.PLAYER_B: Player(player2, Cell.PLAYER_B),
        }
        self.record_failed = False

        self._init_match()

        # Same name on both sides registers once
        for name in dict.fromkeys(p.name for p in self._players.values()):
            self._notify("ensure_player", name)

    def _init_match(self) -> None:
        self._board = Board(self.config)
        self._current = self.first_player
        self._phase = Phase.IN_PROGRESS
        self._winner: Optional[Cell] = None
        self._last_match: Optional[MatchRecord] = None
        self._move_count = 0

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Cell:
        return self._current

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def winner(self) -> Optional[Cell]:
        return self._winner

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players[Cell.PLAYER_A], self._players[Cell.PLAYER_B]

    @property
    def last_match(self) -> Optional[MatchRecord]:
        """Record of the match that just ended, None while in progress."""
        return self._last_match

    @property
    def move_count(self) -> int:
        return self._move_count

    def name_of(self, player: Cell) -> str:
        return self._players[player].name

    @property
    def current_name(self) -> str:
        return self.name_of(self._current)

    @property
    def winner_name(self) -> Optional[str]:
        return self.name_of(self._winner) if self._winner is not None else None

    def is_over(self) -> bool:
        return self._phase is not Phase.IN_PROGRESS

    @property
    def status_text(self) -> str:
        if self._phase is Phase.WON:
            return f"{self.winner_name} Wins!"
        if self._phase is Phase.DRAW:
            return "It's a Draw!"
        return f"{self.current_name}'s Turn"

    def get_state(self) -> GameState:
        line = winning_line(self._board, self._winner) if self._winner is not None else None
        return GameState(
            self._board.snapshot(),
            self._current,
            self._phase,
            self._winner,
            line,
            self.status_text,
        )

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def submit_move(self, col: int) -> DropResult:
        """
        Drop the current player's disc into `col`.

        Moves after the match has ended are ignored and reported as
        GAME_OVER rejections. Rejected moves leave the turn unchanged.
        """
        if self.is_over():
            logger.debug("Ignoring move %r: match already over", col)
            return DropResult.rejected(RejectReason.GAME_OVER)

        player = self._current
        result = drop(self._board, col, player)
        if not result.accepted:
            logger.debug("Rejected move %r for %s: %s", col, self.current_name, result.reason.name)
            return result

        self._move_count += 1
        logger.debug("%s dropped into column %d (row %d)", self.current_name, result.col, result.row)

        if has_four_in_a_row(self._board, player):
            self._phase = Phase.WON
            self._winner = player
            self._finish(self.name_of(player))
        elif self._board.is_full():
            self._phase = Phase.DRAW
            self._finish(DRAW_OUTCOME)
        else:
            self._current = player.other()

        return result

    def reset(self) -> None:
        """Start a new match with the same two players."""
        self._init_match()
        self.record_failed = False
        logger.debug("Session reset; %s moves first", self.current_name)

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def _finish(self, outcome: str) -> None:
        p1, p2 = (p.name for p in self.players)
        self._last_match = MatchRecord(p1, p2, outcome)
        logger.info("Match over: %s vs %s -> %s", p1, p2, outcome)

        if self._phase is Phase.WON:
            loser = self.name_of(self._winner.other())
            self._notify("record_win_loss", outcome, loser)
        self._notify("record_match", p1, p2, outcome)

    def _notify(self, method: str, *args: str) -> None:
        """Invoke a recorder operation; failures never reach the game state."""
        if self.recorder is None:
            return
        try:
            getattr(self.recorder, method)(*args)
        except Exception:
            self.record_failed = True
            logger.exception("Failed to record result via %s", method)
