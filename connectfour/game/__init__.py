"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the drop errors and the
game state / turn management.
"""

from connectfour.game.board import Board, Placement
from connectfour.game.errors import DropError, InvalidColumn, ColumnFull, GameAlreadyOver
from connectfour.game.rules import GameState, new_game, drop, current_outcome

__all__ = ['Board', 'Placement', 'DropError', 'InvalidColumn', 'ColumnFull',
           'GameAlreadyOver', 'GameState', 'new_game', 'drop', 'current_outcome']
