"""Allow ``python -m artist_credits``."""

import sys

from artist_credits.ui.cli.cli import main

sys.exit(main())
