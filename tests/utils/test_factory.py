"""
Tests for connect_four.utils.factory

Tests factory functions for creating sessions and recorders.
"""

import pytest

from connect_four.core.types import Cell, Phase
from connect_four.games.session import GameSession
from connect_four.memory import NullRecorder, ResultsMemory
from connect_four.utils.config import Config
from connect_four.utils.factory import create_recorder, create_session


class TestCreateSession:
    """create_session tests."""

    def test_creates_session(self):
        session = create_session(("Ann", "Ben"))
        assert isinstance(session, GameSession)
        assert session.phase is Phase.IN_PROGRESS
        assert [p.name for p in session.players] == ["Ann", "Ben"]

    def test_uses_config(self):
        config = Config(rows=5, cols=8, first_player=Cell.PLAYER_B, record_results=False)
        session = create_session(("Ann", "Ben"), config)
        assert session.board.grid.shape == (5, 8)
        assert session.current_player is Cell.PLAYER_B

    def test_passes_recorder(self, spy):
        create_session(("Ann", "Ben"), recorder=spy)
        assert spy.methods() == ["ensure_player", "ensure_player"]

    @pytest.mark.parametrize("names", [(), ("Ann",), ("Ann", "Ben", "Cat")])
    def test_wrong_player_count(self, names):
        with pytest.raises(ValueError):
            create_session(names)


class TestCreateRecorder:
    """create_recorder tests."""

    def test_database(self, temp_db_path):
        rec = create_recorder(Config(db_path=temp_db_path))
        try:
            assert isinstance(rec, ResultsMemory)
        finally:
            rec.close()

    def test_disabled(self, temp_db_path):
        rec = create_recorder(Config(db_path=temp_db_path, record_results=False))
        assert isinstance(rec, NullRecorder)
