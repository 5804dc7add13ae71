"""
board.py - Board representation for Connect Four

This module implements the Board class: a 6x7 numpy grid that accepts
gravity drops and answers questions about its columns. Turn order and
outcomes are handled one level up, in rules.py.
"""

from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from connectfour.debug import debug, DebugLevel
from connectfour.game.errors import ColumnFull, InvalidColumn
from connectfour.utils import (ROWS, COLS, Cell, Player, CELL_GLYPHS,
                               render_board_ascii)


class Placement(NamedTuple):
    """Where a drop landed."""
    row: int
    column: int
    player: Player


def _check_column(column) -> int:
    # bool is an int subclass but never a sensible column
    if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
        raise InvalidColumn(column)
    if not 0 <= column < COLS:
        raise InvalidColumn(column)
    return int(column)


class Board:
    """
    A Connect Four grid with row 0 at the bottom.

    drop() is the only way discs get onto the board, which keeps every
    column gap-free from the bottom up.
    """

    def __init__(self):
        self.grid = np.zeros((ROWS, COLS), dtype=np.int8)

    def reset(self) -> None:
        """Remove every disc."""
        debug.debug("Clearing board", "board")
        self.grid.fill(Cell.EMPTY.value)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from text rows listed top to bottom.

        Each row has one character per column: '.' for empty, 'X' for Red
        and 'O' for Yellow (case-insensitive).

        Raises:
            ValueError: wrong dimensions, unknown characters or floating discs
        """
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        values = {glyph: cell.value for cell, glyph in CELL_GLYPHS.items()}
        board = cls()
        for index, text in enumerate(rows):
            text = text.strip().upper()
            if len(text) != COLS:
                raise ValueError(f"Row {index + 1} must have {COLS} cells, got {len(text)}")
            row = ROWS - 1 - index
            for col, char in enumerate(text):
                if char not in values:
                    raise ValueError(f"Unknown cell {char!r} in row {index + 1}")
                board.grid[row, col] = values[char]

        for col in range(COLS):
            height = board.column_height(col)
            if np.any(board.grid[height:, col] != Cell.EMPTY.value):
                raise ValueError(f"Column {col} has a disc floating above an empty cell")
        return board

    def copy(self) -> 'Board':
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def cell(self, row: int, column: int) -> Cell:
        return Cell(int(self.grid[row, column]))

    def column_height(self, column: int) -> int:
        """Number of discs stacked in a column."""
        column = _check_column(column)
        height = 0
        while height < ROWS and self.grid[height, column] != Cell.EMPTY.value:
            height += 1
        return height

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Row a disc dropped into ``column`` would land on.

        Returns:
            The row index, or None when the column is full
        """
        height = self.column_height(column)
        return height if height < ROWS else None

    def is_column_full(self, column: int) -> bool:
        column = _check_column(column)
        return bool(self.grid[ROWS - 1, column] != Cell.EMPTY.value)

    def valid_columns(self) -> List[int]:
        return [col for col in range(COLS) if not self.is_column_full(col)]

    def is_full(self) -> bool:
        return bool(np.all(self.grid[ROWS - 1] != Cell.EMPTY.value))

    def count_discs(self) -> int:
        return int(np.count_nonzero(self.grid))

    def drop(self, column: int, player: Player) -> Placement:
        """
        Drop a disc for ``player`` into ``column``.

        Args:
            column: The column to play (0-indexed)
            player: Whose disc it is

        Returns:
            The Placement the disc landed on

        Raises:
            InvalidColumn: column is not in [0, COLS)
            ColumnFull: column has no empty cell
        """
        column = _check_column(column)
        row = self.lowest_empty_row(column)
        if row is None:
            raise ColumnFull(column)

        self.grid[row, column] = player.value
        debug.trace(f"{player.label} disc lands at ({row}, {column})", "board")
        return Placement(row, column, player)

    def get_state(self) -> np.ndarray:
        """Copy of the grid, safe for callers to modify."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    debug.configure(level=DebugLevel.TRACE)

    board = Board()
    for col, player in [(3, Player.RED), (3, Player.YELLOW), (4, Player.RED)]:
        print(f"Dropping {player.label} into column {col}: {board.drop(col, player)}")
    print(board)
    print(f"Lowest empty row in column 3: {board.lowest_empty_row(3)}")
