"""
Play loop: name entry → session → matches, until the players quit.

Restarting with the same names is handled inside the presenter's match
loop through GameSession.reset(); asking for new players comes back here
and builds a fresh session.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Tuple

from connect_four.games.session import GameSession
from connect_four.ui.layout import Intent
from connect_four.utils.config import Config, DEFAULT_CONFIG
from connect_four.utils.factory import create_recorder, create_session

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    def prompt_names(self) -> Optional[Tuple[str, str]]: ...

    def run_match(self, session: GameSession) -> Intent: ...

    def close(self) -> None: ...


def play(config: Config = DEFAULT_CONFIG, app: Optional[Presenter] = None) -> int:
    """
    Run the game until the window is closed or a player quits.

    Args:
        config: Board, display and persistence settings
        app: Presenter to drive; defaults to the pygame app

    Returns:
        Number of player pairings (sessions) played.
    """
    recorder = create_recorder(config)
    if app is None:
        from connect_four.ui.app import PygameApp
        app = PygameApp(config)

    sessions = 0
    try:
        while True:
            names = app.prompt_names()
            if names is None:
                break

            session = create_session(names, config, recorder)
            sessions += 1
            logger.info("New session: %s vs %s", *names)

            if app.run_match(session) is Intent.QUIT:
                break
    except KeyboardInterrupt:
        logger.info("Interrupted - shutting down")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise
    finally:
        app.close()
        recorder.close()

    return sessions


__all__ = [
    "play",
    "Presenter",
]
