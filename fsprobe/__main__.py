"""Entry point for ``python -m fsprobe``."""

import sys

from fsprobe.cli import main

if __name__ == "__main__":
    sys.exit(main())
