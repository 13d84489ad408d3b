"""Entry point for ``python -m hn_client``."""

import sys

from hn_client.cli import main

sys.exit(main())
