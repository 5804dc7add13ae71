#!/usr/bin/env python3
"""
run.py - Main entry point for two-player Connect Four

Usage:
    python run.py                 # play a game
    python run.py check --rows ...
    python run.py --debug benchmark --iterations 500

See ``python run.py --help`` for every option.
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
