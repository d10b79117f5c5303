"""
Main entry point for running rlayout as a module.

Usage:
    python -m rlayout LAYOUT VIEWS WIDTH HEIGHT [options]
"""

from .cli import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
