"""Allow ``python -m pyinp``."""

from __future__ import annotations

import sys

from pyinp.cli import main

if __name__ == "__main__":
    sys.exit(main())
