"""
ResultsRecorder - the persistence boundary of a GameSession.

The session calls these operations when players register and when a
match ends. It never retries or checks the outcome; implementations own
their own error policy.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResultsRecorder(Protocol):

    def ensure_player(self, name: str) -> None:
        """Create the player's record if it does not exist yet."""
        ...

    def record_win_loss(self, winner: str, loser: str) -> None:
        """Add one win to `winner` and one loss to `loser`."""
        ...

    def record_match(self, player1: str, player2: str, outcome: str) -> None:
        """Store a finished match; outcome is the winner name or 'Draw'."""
        ...

    def close(self) -> None:
        ...


class NullRecorder:
    """Recorder used when persistence is disabled or unavailable."""

    def ensure_player(self, name: str) -> None:
        pass

    def record_win_loss(self, winner: str, loser: str) -> None:
        pass

    def record_match(self, player1: str, player2: str, outcome: str) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()
