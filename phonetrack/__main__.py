"""Allow ``python -m phonetrack``."""

import sys

from phonetrack.cli import main

sys.exit(main())
