"""
Results memory - persistence of player records and match history.

Two recorder implementations:
- ResultsMemory: SQLite database with players and game_results tables
- NullRecorder: accepts everything, stores nothing

Use `open_recorder()` to get whichever one is usable.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from connect_four.memory.recorder import ResultsRecorder, NullRecorder
from connect_four.memory.results_memory import ResultsMemory, PlayerRecord, MatchResult

logger = logging.getLogger(__name__)


def open_recorder(db_path: str | Path, enabled: bool = True) -> ResultsRecorder:
    """
    Open the results database, falling back to a NullRecorder.

    Args:
        db_path: Path to the SQLite file (created with its schema if missing)
        enabled: If False, skip the database entirely

    Returns:
        ResultsMemory, or NullRecorder when disabled or the database
        cannot be opened. The game stays playable either way.
    """
    if not enabled:
        return NullRecorder()
    try:
        return ResultsMemory(db_path)
    except (sqlite3.Error, OSError):
        logger.exception("Results database unavailable (%s); results will not be saved", db_path)
        return NullRecorder()


def open_readonly(db_path: str | Path) -> ResultsMemory:
    """Open an existing database for queries only."""
    return ResultsMemory(db_path, read_only=True)


__all__ = [
    "ResultsRecorder",
    "NullRecorder",
    "ResultsMemory",
    "PlayerRecord",
    "MatchResult",
    "open_recorder",
    "open_readonly",
]
