"""Allow ``python -m newline_converter``."""

import sys

from .cli import main

sys.exit(main())
