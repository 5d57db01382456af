"""
Factory functions for creating sessions and recorders from a Config.
"""

from typing import Optional, Tuple

from connect_four.games.session import GameSession
from connect_four.memory import ResultsRecorder, open_recorder
from connect_four.utils.config import Config, DEFAULT_CONFIG


def create_recorder(config: Config = DEFAULT_CONFIG) -> ResultsRecorder:
    """
    Open the results recorder described by `config`.

    Returns a NullRecorder when recording is disabled or the database
    cannot be opened.
    """
    return open_recorder(config.db_path, enabled=config.record_results)


def create_session(
    names: Tuple[str, str],
    config: Config = DEFAULT_CONFIG,
    recorder: Optional[ResultsRecorder] = None,
) -> GameSession:
    """
    Create a session for two named players.

    Args:
        names: (player 1 name, player 2 name) as entered
        config: Board dimensions and first mover
        recorder: Where finished matches are reported (optional)

    Returns:
        A GameSession ready for its first move
    """
    if len(names) != 2:
        raise ValueError(f"Connect Four needs exactly 2 players, got {len(names)}")

    player1, player2 = names
    return GameSession(
        player1,
        player2,
        config=config.board,
        recorder=recorder,
        first_player=config.first_player,
    )
