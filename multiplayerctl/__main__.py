import sys

from multiplayerctl.cli import main

sys.exit(main())
