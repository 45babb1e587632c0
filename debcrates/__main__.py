"""Allow running as ``python -m debcrates``."""

import sys

from .cli.main import main

sys.exit(main())
