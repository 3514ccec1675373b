"""Allow ``python -m nsdebug``."""

import sys

from nsdebug.cli import main

sys.exit(main())
