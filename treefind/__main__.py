"""Allow ``python -m treefind``."""

import sys

from .cli import main

sys.exit(main())
