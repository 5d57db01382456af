"""
Shared test fixtures for connect_four tests.

Design principles:
- Engine fixtures never touch the database
- Recorder doubles capture calls instead of mocking the session
- Minimal, focused fixtures
"""

import tempfile
from pathlib import Path
from typing import Generator, List, Tuple

import pytest

from connect_four.games.board import Board
from connect_four.games.session import GameSession
from connect_four.memory.results_memory import ResultsMemory
from connect_four.utils.config import BoardConfig


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def temp_db_path() -> Generator[Path, None, None]:
    """Temporary database file with cleanup."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    for suffix in ["", "-wal", "-shm"]:
        p = Path(str(path) + suffix)
        if p.exists():
            p.unlink()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Temporary directory with cleanup."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


# =============================================================================
# Recorder Doubles
# =============================================================================

class SpyRecorder:
    """Records every call as (method, args)."""

    def __init__(self):
        self.calls: List[Tuple[str, tuple]] = []
        self.closed = False

    def ensure_player(self, name):
        self.calls.append(("ensure_player", (name,)))

    def record_win_loss(self, winner, loser):
        self.calls.append(("record_win_loss", (winner, loser)))

    def record_match(self, player1, player2, outcome):
        self.calls.append(("record_match", (player1, player2, outcome)))

    def close(self):
        self.closed = True

    def methods(self) -> List[str]:
        return [name for name, _ in self.calls]


class FailingRecorder(SpyRecorder):
    """Logs the attempt, then fails like a lost database connection."""

    def ensure_player(self, name):
        super().ensure_player(name)
        raise ConnectionError("database went away")

    def record_win_loss(self, winner, loser):
        super().record_win_loss(winner, loser)
        raise ConnectionError("database went away")

    def record_match(self, player1, player2, outcome):
        super().record_match(player1, player2, outcome)
        raise ConnectionError("database went away")


@pytest.fixture
def spy() -> SpyRecorder:
    return SpyRecorder()


@pytest.fixture
def failing_recorder() -> FailingRecorder:
    return FailingRecorder()


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Empty standard 6x7 board."""
    return Board(BoardConfig())


@pytest.fixture
def session(spy: SpyRecorder) -> GameSession:
    """Fresh session between Alice (A) and Bob (B) reporting to a spy."""
    return GameSession("Alice", "Bob", recorder=spy)


@pytest.fixture
def memory(temp_db_path: Path) -> Generator[ResultsMemory, None, None]:
    """ResultsMemory instance with temporary database."""
    mem = ResultsMemory(temp_db_path)
    yield mem
    mem.close()

