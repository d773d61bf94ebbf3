"""Allow ``python -m hocrverse``."""

import sys

from hocrverse.cli import main

sys.exit(main())
