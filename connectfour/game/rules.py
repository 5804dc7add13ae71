"""
rules.py - Game state and turn management for Connect Four

This module provides:
1. GameState, which owns a Board and applies moves in turn order
2. The module-level engine API (new_game, drop, current_outcome) used by
   the command line
"""

from typing import List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board, Placement
from connectfour.game.errors import GameAlreadyOver
from connectfour.utils import MAX_MOVES, GameResult, Player, Coord, get_winning_line


class GameState:
    """
    One linear game of Connect Four.

    Red moves first. After every accepted drop the new disc is checked for a
    four-in-a-row, then the board for a draw, and only then does the turn
    pass to the other player. Once the game is won or drawn every further
    drop raises GameAlreadyOver.
    """

    def __init__(self):
        debug.debug("Starting new game", "game")
        self.board = Board()
        self.current_player = Player.RED
        self.move_count = 0
        self.game_result = GameResult.IN_PROGRESS
        self.last_move: Optional[Placement] = None
        self.moves_made: List[int] = []

    def reset(self) -> None:
        """Throw the current game away and start over."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self.current_player = Player.RED
        self.move_count = 0
        self.game_result = GameResult.IN_PROGRESS
        self.last_move = None
        self.moves_made = []

    @property
    def outcome(self) -> GameResult:
        return self.game_result

    @property
    def winner(self) -> Optional[Player]:
        return self.game_result.winner

    def is_game_over(self) -> bool:
        return self.game_result.is_game_over()

    def get_valid_moves(self) -> List[int]:
        """Columns that would currently accept a drop."""
        if self.is_game_over():
            return []
        return self.board.valid_columns()

    def drop(self, column: int) -> Placement:
        """
        Drop the current player's disc into a column.

        Args:
            column: The column to play (0-indexed)

        Returns:
            The Placement of the new disc

        Raises:
            GameAlreadyOver: the game is already won or drawn
            InvalidColumn: column is not in [0, COLS)
            ColumnFull: column has no empty cell
        """
        if self.is_game_over():
            debug.debug(f"Rejecting column {column}: game is over ({self.game_result.name})", "game")
            raise GameAlreadyOver(self.game_result)

        mover = self.current_player
        placement = self.board.drop(column, mover)
        self.move_count += 1
        self.last_move = placement
        self.moves_made.append(placement.column)
        debug.debug(f"Move {self.move_count}: {mover.label} plays column {placement.column} "
                    f"(row {placement.row})", "game")

        debug.start_timer("win_check")
        won = bool(get_winning_line(self.board.grid, placement.row, placement.column))
        debug.end_timer("win_check", "game")

        if won:
            self.game_result = GameResult.win_for(mover)
            debug.info(f"{mover.label} wins after move at ({placement.row}, {placement.column})", "game")
        elif self.move_count == MAX_MOVES:
            self.game_result = GameResult.DRAW
            debug.info("Game ends in a draw", "game")
        else:
            self.current_player = mover.other()

        return placement

    def get_winning_line(self) -> List[Coord]:
        """Cells of the winning four, or an empty list if nobody has won."""
        if self.winner is None or self.last_move is None:
            return []
        return get_winning_line(self.board.grid, self.last_move.row, self.last_move.column)

    def render(self) -> str:
        return self.board.render()


def new_game() -> GameState:
    """Create an empty game with Red to move."""
    return GameState()


def drop(state: GameState, column: int) -> Placement:
    """Play ``column`` for whoever is to move in ``state``; see GameState.drop."""
    return state.drop(column)


def current_outcome(state: GameState) -> GameResult:
    return state.outcome


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    game = new_game()
    print(game.render())

    for col in [3, 2, 4, 2, 5, 2, 6]:
        print(f"\n{game.current_player.label} plays column {col}")
        drop(game, col)
        print(game.render())

    print(f"\nOutcome: {current_outcome(game).name}")
    print(f"Winning line: {game.get_winning_line()}")
