"""
connectfour - Two-player Connect Four for the terminal

This package provides the board model, move rules and win detection for
Connect Four, plus a small command-line front end for two players sharing
one terminal.
"""

# Version number
__version__ = '1.0.0'
