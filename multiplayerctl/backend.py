from __future__ import annotations

import shutil
import sys
from typing import Optional

from .common import ExternalServiceError

PLAYERCTL_NAME = "playerctl"


def build_player_service(executable: Optional[str] = None):
    """Locate playerctl and return a service bound to it.

    ``executable`` overrides discovery on ``PATH``; it may be a bare name or a
    path.
    """

    if sys.platform == "win32":
        raise ExternalServiceError("playerctl (MPRIS) is not available on Windows")

    from .playerctl import PlayerctlService

    resolved = shutil.which(executable or PLAYERCTL_NAME)
    if not resolved:
        raise ExternalServiceError(
            f"{executable or PLAYERCTL_NAME} not found. Are you sure it is installed?"
        )
    return PlayerctlService(resolved)
