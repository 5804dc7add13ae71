"""
errors.py - Exceptions raised when a drop is rejected

Every rejection happens before the board is touched, so callers can catch
DropError, report it and simply ask for another move.
"""

from connectfour.utils import COLS, GameResult


class DropError(ValueError):
    """Base class for rejected drops."""


class InvalidColumn(DropError):
    """The column index is not an integer in [0, COLS)."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"Column {column!r} is out of range (0-{COLS - 1})")


class ColumnFull(DropError):
    """The column has no empty cell left."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameAlreadyOver(DropError):
    """A move was attempted after the game reached a win or a draw."""

    def __init__(self, result: GameResult):
        self.result = result
        super().__init__(f"The game is already over ({result.name})")
