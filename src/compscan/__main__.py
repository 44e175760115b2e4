"""Entry point for ``python -m compscan``."""

import sys

from compscan.presentation.cli import main

sys.exit(main())
