"""Allow running as ``python -m dev_statusline``."""

import sys

from dev_statusline.cli.main import main

sys.exit(main())
