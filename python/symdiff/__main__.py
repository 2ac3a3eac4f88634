"""Entry point for ``python -m symdiff``."""

import sys

from .demo import main

sys.exit(main())
