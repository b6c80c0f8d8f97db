#!/usr/bin/env python3
"""Switch focus between media players and control the current one via playerctl."""
from __future__ import annotations

import sys

from multiplayerctl.cli import main


if __name__ == "__main__":
    sys.exit(main())
