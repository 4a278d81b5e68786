"""Entry point for ``python -m model_maker``."""

import sys

from model_maker.cli import main

sys.exit(main())
