from __future__ import annotations

import subprocess
from typing import Optional

from .common import Action, ExternalServiceError, PlayerList

NO_PLAYERS_MARKER = "No players found"


class PlayerctlService:
    """Thin adapter over the ``playerctl`` command-line client.

    Every call spawns one ``playerctl`` process and blocks until it exits.
    Nothing is cached: the player list is read fresh each time, and the
    "current player" is whatever playerctl itself reports first.
    """

    def __init__(self, executable: str):
        self._playerctl = executable

    @property
    def executable(self) -> str:
        return self._playerctl

    def _run_playerctl(self, *args: str) -> subprocess.CompletedProcess:
        cmd = [self._playerctl, *args]
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise ExternalServiceError(
                f"Failed to execute {self._playerctl}", command=cmd, stderr=str(exc)
            ) from exc

    def _check(self, result: subprocess.CompletedProcess) -> str:
        if result.returncode != 0:
            raise ExternalServiceError(
                f"playerctl exited with status {result.returncode}",
                command=result.args,
                returncode=result.returncode,
                stderr=result.stderr or "",
            )
        return result.stdout

    def list_players(self) -> PlayerList:
        """Return active player identifiers, most recently used first.

        playerctl exits non-zero when no player is running; that case is an
        empty list rather than an error.
        """

        result = self._run_playerctl("--list-all")
        if result.returncode != 0 and NO_PLAYERS_MARKER in (result.stderr or ""):
            return ()
        out = self._check(result)
        return tuple(line.strip() for line in out.splitlines() if line.strip())

    def command(self, target: Optional[str], action: Action, *args: str) -> str:
        """Run ``action`` against ``target``, or the current player if ``None``."""

        argv = []
        if target is not None:
            argv.append(f"--player={target}")
        argv.append(Action(action).verb)
        argv.extend(args)
        return self._check(self._run_playerctl(*argv))

    def query(self, verb: str, *args: str) -> str:
        # volume/position/status/metadata on the current player
        return self._check(self._run_playerctl(verb, *args))
