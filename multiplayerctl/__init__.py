from .backend import build_player_service
from .common import Action, ExternalServiceError, PlayerList, UnknownPlayerError
from .selector import pick_player, switch

__all__ = [
    "Action",
    "ExternalServiceError",
    "PlayerList",
    "UnknownPlayerError",
    "build_player_service",
    "pick_player",
    "switch",
]
