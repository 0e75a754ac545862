"""
Main entry point for running Materialist as a UCI engine.

Usage:
    python -m materialist.uci [--depth N] [--log-file PATH] [--no-log] [--debug]
"""

import sys

from materialist.uci.interface import main

if __name__ == "__main__":
    sys.exit(main())
