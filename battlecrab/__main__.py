"""Command-line entry for ``python -m battlecrab``."""

import sys

from battlecrab.main import main

sys.exit(main())
