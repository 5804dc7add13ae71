"""
utils.py - Constants, enumerations and board helpers for Connect Four

The grid is a numpy array indexed (row, column) with row 0 at the bottom,
so discs "fall" towards lower row indices.
"""

from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a line needed to win
MAX_MOVES = ROWS * COLS

Coord = Tuple[int, int]  # (row, column)


class Cell(Enum):
    """The three states a grid cell can be in."""
    EMPTY = 0
    RED = 1
    YELLOW = 2

    @property
    def glyph(self) -> str:
        return CELL_GLYPHS[self]


CELL_GLYPHS = {
    Cell.EMPTY: ".",
    Cell.RED: "X",
    Cell.YELLOW: "O",
}


class Player(Enum):
    """The two players. Red always moves first."""
    RED = 1
    YELLOW = 2

    def other(self) -> 'Player':
        """Get the opponent."""
        return Player.YELLOW if self is Player.RED else Player.RED

    @property
    def cell(self) -> Cell:
        return Cell(self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.cell.glyph


class GameResult(Enum):
    """Outcome of a game: still running, won by one player, or drawn."""
    IN_PROGRESS = auto()
    RED_WIN = auto()
    YELLOW_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self is not GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self is GameResult.RED_WIN:
            return Player.RED
        if self is GameResult.YELLOW_WIN:
            return Player.YELLOW
        return None

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        return cls.RED_WIN if player is Player.RED else cls.YELLOW_WIN


class Direction(Enum):
    """The four axes a line of discs can lie on."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


# (row, col) step for each axis; the opposite step is walked as well
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1),
}


def is_valid_position(row: int, col: int) -> bool:
    """Check if (row, col) lies on the board."""
    return 0 <= row < ROWS and 0 <= col < COLS


def _run_along(grid: np.ndarray, row: int, col: int, dr: int, dc: int) -> List[Coord]:
    """Cells matching grid[row, col] walking away from it in one direction."""
    value = grid[row, col]
    cells = []
    r, c = row + dr, col + dc
    while is_valid_position(r, c) and grid[r, c] == value:
        cells.append((r, c))
        r += dr
        c += dc
    return cells


def get_winning_line(grid: np.ndarray, row: int, col: int) -> List[Coord]:
    """
    Find a line of CONNECT_N or more discs passing through (row, col).

    Only lines through the given cell are considered, which is enough after
    each move because earlier positions were already checked.

    Args:
        grid: The game grid
        row: Row of the disc just placed
        col: Column of the disc just placed

    Returns:
        Sorted (row, col) positions of the first winning axis, or an empty list
    """
    if grid[row, col] == Cell.EMPTY.value:
        return []

    for dr, dc in DIRECTION_VECTORS.values():
        line = [(row, col)]
        line += _run_along(grid, row, col, dr, dc)
        line += _run_along(grid, row, col, -dr, -dc)
        if len(line) >= CONNECT_N:
            return sorted(line)

    return []


def check_win_at_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if the disc at (row, col) is part of a winning line.

    Args:
        grid: The game grid
        row: Row index where the disc was placed
        col: Column index where the disc was placed

    Returns:
        True if the disc completes CONNECT_N in a row on any axis
    """
    return bool(get_winning_line(grid, row, col))


def find_winners(grid: np.ndarray) -> List[Player]:
    """List the players owning at least one winning line anywhere on the grid."""
    winners = []
    for player in Player:
        rows, cols = np.nonzero(grid == player.value)
        if any(check_win_at_position(grid, int(r), int(c)) for r, c in zip(rows, cols)):
            winners.append(player)
    return winners


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the grid as ASCII art, top row first.

    Args:
        grid: The game grid

    Returns:
        Multi-line string with a column index footer
    """
    border = "+" + "-" * (COLS * 2 + 1) + "+"
    lines = [border]
    for row in range(ROWS - 1, -1, -1):
        glyphs = " ".join(Cell(int(value)).glyph for value in grid[row])
        lines.append(f"| {glyphs} |")
    lines.append(border)
    lines.append("  " + " ".join(str(col) for col in range(COLS)))
    return "\n".join(lines)


if __name__ == "__main__":
    test_grid = np.zeros((ROWS, COLS), dtype=np.int8)
    for col in range(3, 7):
        test_grid[0, col] = Player.RED.value
    test_grid[1, 3] = Player.YELLOW.value

    print(render_board_ascii(test_grid))
    print("\nWin at (0, 3):", check_win_at_position(test_grid, 0, 3))
    print("Winning line:", get_winning_line(test_grid, 0, 3))
