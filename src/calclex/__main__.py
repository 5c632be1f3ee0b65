"""
Entry point for running calclex as a module.

Usage:
    python -m calclex "34+ 6 + 99"
"""

import sys

from calclex.cli import main

if __name__ == "__main__":
    sys.exit(main())
