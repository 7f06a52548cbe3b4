"""
Entry point for running schedule_pdf as a module.

Usage:
    python -m schedule_pdf export turni-2026-10.json --output out/
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
