"""
SQLite-backed results store.

Keeps running win/loss totals per player name and a history of finished
matches. Every write commits immediately; a failed write is rolled back
and re-raised as RecorderError.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional

from connect_four.core.errors import RecorderError
from connect_four.core.types import DRAW_OUTCOME
from connect_four.memory.schema import SCHEMA

logger = logging.getLogger(__name__)


class PlayerRecord(NamedTuple):
    """Win/loss totals for one player."""

    name: str
    wins: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        """Decided games only; draws are not counted per player."""
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        return self.wins / self.games if self.games else 0.0


class MatchResult(NamedTuple):
    """One stored row of game_results."""

    player1: str
    player2: str
    winner: str
    played_at: str

    @property
    def is_draw(self) -> bool:
        return self.winner == DRAW_OUTCOME


class ResultsMemory:
    """Results recorder on a local SQLite database."""

    def __init__(self, db_path: str | Path, read_only: bool = False):
        self.db_path = Path(db_path).resolve()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.read_only = read_only
        self._closed = False

        self.conn = sqlite3.connect(str(self.db_path))
        self.conn.execute("PRAGMA journal_mode=WAL")
        self.conn.execute("PRAGMA synchronous=NORMAL")

        if not read_only:
            self.conn.executescript(SCHEMA)
            self.conn.commit()

        logger.info("ResultsMemory (%s): %s", "read-only" if read_only else "read-write", self.db_path)

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def _write(self, statements: List[tuple]) -> None:
        """Run (sql, params) pairs in a single transaction."""
        if self.read_only:
            raise RuntimeError("Cannot record in read-only mode")

        cur = self.conn.cursor()
        try:
            for sql, params in statements:
                cur.execute(sql, params)
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            raise RecorderError(f"Failed to write to {self.db_path}: {e}") from e

    def ensure_player(self, name: str) -> None:
        self._write([
            ("INSERT OR IGNORE INTO players (name, wins, losses) VALUES (?, 0, 0)", (name,)),
        ])

    def record_win_loss(self, winner: str, loser: str) -> None:
        """Increment both totals atomically, creating missing players."""
        self._write([
            ("INSERT OR IGNORE INTO players (name, wins, losses) VALUES (?, 0, 0)", (winner,)),
            ("INSERT OR IGNORE INTO players (name, wins, losses) VALUES (?, 0, 0)", (loser,)),
            ("UPDATE players SET wins = wins + 1 WHERE name = ?", (winner,)),
            ("UPDATE players SET losses = losses + 1 WHERE name = ?", (loser,)),
        ])

    def record_match(self, player1: str, player2: str, outcome: str) -> None:
        self._write([
            (
                "INSERT INTO game_results (player1, player2, winner) VALUES (?, ?, ?)",
                (player1, player2, outcome),
            ),
        ])

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _read(self, sql: str, params: tuple = ()) -> List[tuple]:
        try:
            return self.conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise RecorderError(f"Failed to read from {self.db_path}: {e}") from e

    def get_player(self, name: str) -> Optional[PlayerRecord]:
        rows = self._read("SELECT name, wins, losses FROM players WHERE name = ?", (name,))
        return PlayerRecord(*rows[0]) if rows else None

    def leaderboard(self, limit: int = 10) -> List[PlayerRecord]:
        """Players ordered by wins, then fewest losses, then name."""
        rows = self._read(
            "SELECT name, wins, losses FROM players "
            "ORDER BY wins DESC, losses ASC, name ASC LIMIT ?",
            (limit,),
        )
        return [PlayerRecord(*row) for row in rows]

    def recent_matches(self, limit: int = 10) -> List[MatchResult]:
        """Most recent matches first."""
        rows = self._read(
            "SELECT player1, player2, winner, played_at FROM game_results "
            "ORDER BY id DESC LIMIT ?",
            (limit,),
        )
        return [MatchResult(*row) for row in rows]

    def get_info(self) -> Dict[str, Any]:
        """Get summary statistics."""
        players = self._read("SELECT COUNT(*) FROM players")[0][0]
        matches, draws = self._read(
            "SELECT COUNT(*), COALESCE(SUM(winner = ?), 0) FROM game_results",
            (DRAW_OUTCOME,),
        )[0]
        return {"players": players, "matches": matches, "draws": draws}

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close the database connection."""
        if self._closed:
            return
        self._closed = True

        try:
            self.conn.execute("PRAGMA wal_checkpoint(TRUNCATE)")
        except sqlite3.Error:
            logger.debug("WAL checkpoint failed for %s", self.db_path, exc_info=True)
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()
