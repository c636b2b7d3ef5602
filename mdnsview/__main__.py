"""Entry point for running mdnsview as a module: ``python -m mdnsview``."""

import sys

from mdnsview.cli import main

if __name__ == "__main__":
    sys.exit(main())
