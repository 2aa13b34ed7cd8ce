#!/usr/bin/env python
"""
Google Maps Place Entry Extractor - CLI

Parse saved place responses into entries.

Usage:
    python extract.py place.json
    python extract.py responses/*.json --csv output/places.csv --skip-invalid
"""

import sys
from gmaps_entry.cli import main

if __name__ == "__main__":
    sys.exit(main())
