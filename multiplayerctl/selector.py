from __future__ import annotations

from typing import Optional, Sequence

from .common import Action, UnknownPlayerError


def pick_player(
    players: Sequence[str], target: Optional[str] = None, back: bool = False
) -> Optional[str]:
    """Choose the player a switch should select.

    ``players`` is ordered most recently used first, so ``players[0]`` is the
    current player. Moving forward selects ``players[1]``; moving back wraps
    around to ``players[-1]``. The sequence itself is never modified.
    """

    if target is not None:
        if target not in players:
            raise UnknownPlayerError(target, players)
        return target
    if not players:
        return None
    if len(players) == 1:
        return players[0]
    return players[-1] if back else players[1]


def switch(service, target: Optional[str] = None, back: bool = False) -> Optional[str]:
    """Make the next player current; return it, or ``None`` if none is active.

    Selection works by sending a harmless ``status`` call to the chosen
    player, after which playerctl reports it first.
    """

    chosen = pick_player(service.list_players(), target=target, back=back)
    if chosen is None:
        return None
    service.command(chosen, Action.STATUS)
    return chosen
