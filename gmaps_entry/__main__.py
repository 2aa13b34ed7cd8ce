"""
Package entry point.

Allows running: python -m gmaps_entry place.json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
