"""Entry point for running the simulator as a module.

Usage:
    python -m clubsimulator day.txt
"""

import sys

from clubsimulator.cli import main

if __name__ == "__main__":
    sys.exit(main())
