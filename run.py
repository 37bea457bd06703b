"""Entry point for the shelf reader."""

import sys

from shelfreader.cli import main

if __name__ == "__main__":
    sys.exit(main())
