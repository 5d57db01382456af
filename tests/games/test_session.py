"""
Tests for connect_four.games.session

Tests the turn order / phase state machine and what it reports to the
results recorder.
"""

import logging

import numpy as np
import pytest

from connect_four.core.errors import InvalidPlayerName
from connect_four.core.types import Cell, DRAW_OUTCOME, MatchRecord, Phase, RejectReason
from connect_four.games.session import GameSession
from connect_four.utils.config import BoardConfig

# Columns are filled in pairs (0,1), (2,3), (4,5) and then column 6, giving
# bands of alternating colours that never line up four.
DRAW_SEQUENCE = (
    [0, 1] * 3 + [1, 0] * 3
    + [2, 3] * 3 + [3, 2] * 3
    + [4, 5] * 3 + [5, 4] * 3
    + [6] * 6
)

# Column 0 for A, column 1 for B, four times over: A's 4th disc wins
VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]

# Full board except the top-right cell; A dropping into column 6 completes
# cols 3-6 of the top row. No run exists anywhere before that move.
LAST_CELL_WIN = [
    "ABBAAA.",
    "ABABABB",
    "ABABABA",
    "BABABAB",
    "BABABAA",
    "BABABAB",
]


def play_moves(session: GameSession, cols) -> None:
    """Submit a sequence of columns, asserting each is accepted."""
    for col in cols:
        result = session.submit_move(col)
        assert result.accepted, f"move {col} rejected: {result.reason}"


def _load(session: GameSession, rows) -> None:
    codes = {".": Cell.EMPTY, "A": Cell.PLAYER_A, "B": Cell.PLAYER_B}
    session.board.grid[:] = np.array([[codes[ch] for ch in row] for row in rows], dtype=np.int8)


class TestInitialization:
    """Fresh session tests."""

    def test_initial_state(self, session: GameSession):
        """Session starts in progress with A to move on an empty board."""
        assert session.phase is Phase.IN_PROGRESS
        assert session.current_player is Cell.PLAYER_A
        assert session.winner is None
        assert session.is_over() is False
        assert not session.board.grid.any()
        assert session.move_count == 0

    def test_names_bound_to_players(self, session: GameSession):
        a, b = session.players
        assert (a.name, a.cell) == ("Alice", Cell.PLAYER_A)
        assert (b.name, b.cell) == ("Bob", Cell.PLAYER_B)
        assert session.current_name == "Alice"

    def test_registers_players(self, spy, session: GameSession):
        """Each player is registered with the recorder before play."""
        assert spy.calls == [("ensure_player", ("Alice",)), ("ensure_player", ("Bob",))]

    def test_same_name_registered_once(self, spy):
        GameSession("Sam", "Sam", recorder=spy)
        assert spy.calls == [("ensure_player", ("Sam",))]

    def test_names_are_stripped(self):
        session = GameSession("  Alice ", "Bob")
        assert session.name_of(Cell.PLAYER_A) == "Alice"

    @pytest.mark.parametrize("bad", ["", "   ", "x" * 16, "tab\there", "Zoë"])
    def test_invalid_name_rejected(self, bad):
        with pytest.raises(InvalidPlayerName):
            GameSession(bad, "Bob")

    def test_fifteen_characters_allowed(self):
        session = GameSession("x" * 15, "Bob")
        assert session.players[0].name == "x" * 15

    def test_configured_first_player(self):
        session = GameSession("Alice", "Bob", first_player=Cell.PLAYER_B)
        assert session.current_player is Cell.PLAYER_B
        assert session.status_text == "Bob's Turn"

    def test_empty_first_player_rejected(self):
        with pytest.raises(ValueError):
            GameSession("Alice", "Bob", first_player=Cell.EMPTY)

    def test_works_without_recorder(self):
        session = GameSession("Alice", "Bob")
        play_moves(session, VERTICAL_WIN)
        assert session.phase is Phase.WON
        assert session.record_failed is False


class TestTurnOrder:
    """Alternation and rejection."""

    def test_alternates_on_legal_moves(self, session: GameSession):
        session.submit_move(3)
        assert session.current_player is Cell.PLAYER_B
        session.submit_move(3)
        assert session.current_player is Cell.PLAYER_A
        assert session.board.cell_at(5, 3) is Cell.PLAYER_A
        assert session.board.cell_at(4, 3) is Cell.PLAYER_B
        assert session.move_count == 2

    @pytest.mark.parametrize("col", [-1, 7])
    def test_out_of_range_keeps_turn(self, spy, session: GameSession, col):
        """Rejected moves do not switch players or report anything."""
        calls_before = list(spy.calls)
        result = session.submit_move(col)
        assert result.reason is RejectReason.OUT_OF_RANGE
        assert session.current_player is Cell.PLAYER_A
        assert session.move_count == 0
        assert spy.calls == calls_before

    def test_full_column_keeps_turn(self, session: GameSession):
        play_moves(session, [2] * 6)
        before = session.board.grid.copy()
        result = session.submit_move(2)
        assert result.reason is RejectReason.COLUMN_FULL
        assert session.current_player is Cell.PLAYER_A
        assert (session.board.grid == before).all()

    def test_status_follows_turn(self, session: GameSession):
        assert session.status_text == "Alice's Turn"
        session.submit_move(0)
        assert session.status_text == "Bob's Turn"


class TestWin:
    """Transitions into WON."""

    def test_vertical_win_scenario(self, spy, session: GameSession):
        """A stacking column 0 against B in column 1 wins on A's 4th disc."""
        play_moves(session, VERTICAL_WIN[:-1])
        assert session.phase is Phase.IN_PROGRESS

        session.submit_move(0)

        assert session.phase is Phase.WON
        assert session.winner is Cell.PLAYER_A
        assert session.current_player is Cell.PLAYER_A  # not switched
        assert session.status_text == "Alice Wins!"
        assert session.winner_name == "Alice"
        assert spy.calls[2:] == [
            ("record_win_loss", ("Alice", "Bob")),
            ("record_match", ("Alice", "Bob", "Alice")),
        ]
        assert session.last_match == MatchRecord("Alice", "Bob", "Alice")

    def test_player_b_win_reports_b(self, spy, session: GameSession):
        play_moves(session, [6, 0, 6, 0, 6, 0, 5, 0])
        assert session.winner is Cell.PLAYER_B
        assert ("record_win_loss", ("Bob", "Alice")) in spy.calls
        assert spy.calls[-1] == ("record_match", ("Alice", "Bob", "Bob"))

    def test_moves_after_win_ignored(self, spy, session: GameSession):
        """Terminal phase accepts no further moves."""
        play_moves(session, VERTICAL_WIN)
        before = session.board.grid.copy()
        calls_before = list(spy.calls)

        result = session.submit_move(4)

        assert result.reason is RejectReason.GAME_OVER
        assert (session.board.grid == before).all()
        assert session.phase is Phase.WON
        assert spy.calls == calls_before

    def test_last_cell_win_is_not_draw(self, spy, session: GameSession):
        """Filling the final cell with a completing disc is a win."""
        _load(session, LAST_CELL_WIN)
        assert not session.board.is_full()

        result = session.submit_move(6)

        assert result.accepted and result.row == 0
        assert session.board.is_full()
        assert session.phase is Phase.WON
        assert session.winner is Cell.PLAYER_A
        assert spy.methods()[-2:] == ["record_win_loss", "record_match"]

    def test_state_snapshot_has_winning_line(self, session: GameSession):
        play_moves(session, VERTICAL_WIN)
        state = session.get_state()
        assert state.is_over
        assert state.winner is Cell.PLAYER_A
        assert sorted(state.winning_line) == [(2, 0), (3, 0), (4, 0), (5, 0)]
        assert state.status == "Alice Wins!"


class TestDraw:
    """Transitions into DRAW."""

    def test_full_board_scenario(self, spy, session: GameSession):
        """42 alternating drops with no run end in a draw."""
        play_moves(session, DRAW_SEQUENCE)

        assert session.move_count == 42
        assert session.phase is Phase.DRAW
        assert session.winner is None
        assert session.status_text == "It's a Draw!"
        assert "record_win_loss" not in spy.methods()
        assert spy.calls[-1] == ("record_match", ("Alice", "Bob", DRAW_OUTCOME))
        assert session.last_match.is_draw

    def test_no_moves_after_draw(self, session: GameSession):
        play_moves(session, DRAW_SEQUENCE)
        assert session.submit_move(0).reason is RejectReason.GAME_OVER


class TestReset:
    """reset() tests."""

    @pytest.mark.parametrize("moves", [VERTICAL_WIN, DRAW_SEQUENCE, [3, 4]])
    def test_restores_initial_state(self, session: GameSession, moves):
        play_moves(session, moves)
        session.reset()

        assert session.phase is Phase.IN_PROGRESS
        assert session.current_player is Cell.PLAYER_A
        assert session.winner is None
        assert session.last_match is None
        assert session.move_count == 0
        assert not session.board.grid.any()

    def test_restores_configured_first_player(self):
        session = GameSession("Alice", "Bob", first_player=Cell.PLAYER_B)
        session.submit_move(0)
        session.reset()
        assert session.current_player is Cell.PLAYER_B

    def test_keeps_names_and_skips_reregistration(self, spy, session: GameSession):
        play_moves(session, VERTICAL_WIN)
        session.reset()
        assert session.current_name == "Alice"
        assert spy.methods().count("ensure_player") == 2

    def test_second_match_is_recorded(self, spy, session: GameSession):
        play_moves(session, VERTICAL_WIN)
        session.reset()
        play_moves(session, VERTICAL_WIN)
        assert spy.methods().count("record_match") == 2

    def test_keeps_board_dimensions(self):
        session = GameSession("Alice", "Bob", config=BoardConfig(rows=4, cols=5))
        session.submit_move(4)
        session.reset()
        assert session.board.grid.shape == (4, 5)


class TestRecorderFailure:
    """A broken recorder never affects the game."""

    def test_failures_are_flagged_not_raised(self, failing_recorder, caplog):
        with caplog.at_level(logging.ERROR, logger="connect_four.games.session"):
            session = GameSession("Alice", "Bob", recorder=failing_recorder)
            play_moves(session, VERTICAL_WIN)

        assert session.phase is Phase.WON
        assert session.record_failed is True
        assert "Failed to record result" in caplog.text

    def test_every_operation_still_attempted(self, failing_recorder):
        """One failing call does not skip the next one."""
        session = GameSession("Alice", "Bob", recorder=failing_recorder)
        play_moves(session, VERTICAL_WIN)
        assert failing_recorder.methods() == [
            "ensure_player", "ensure_player", "record_win_loss", "record_match",
        ]

    def test_reset_after_failure(self, failing_recorder):
        session = GameSession("Alice", "Bob", recorder=failing_recorder)
        play_moves(session, VERTICAL_WIN)
        session.reset()
        assert session.phase is Phase.IN_PROGRESS
        assert session.record_failed is False
        assert session.submit_move(0).accepted
