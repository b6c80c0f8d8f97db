from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Tuple

PlayerList = Tuple[str, ...]


class Action(str, Enum):
    PLAY = "play"
    PAUSE = "pause"
    TOGGLE = "toggle"
    NEXT = "next"
    PREVIOUS = "previous"
    STATUS = "status"  # No-op used to make a player current

    @property
    def verb(self) -> str:
        if self is Action.TOGGLE:
            return "play-pause"
        return self.value


class ExternalServiceError(RuntimeError):
    """Raised when playerctl is missing, cannot start, or exits non-zero."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


class UnknownPlayerError(LookupError):
    def __init__(self, player: str, players: Sequence[str]):
        self.player = player
        self.players = tuple(players)
        available = ", ".join(self.players) or "none"
        super().__init__(f"Player {player!r} is not active (available: {available})")
