"""
cli.py - Command-line interface for Connect Four

Two players take turns at one terminal. The CLI also offers a position
checker for hand-written boards and a small benchmark of the engine.
"""

import argparse
import random
import sys
from typing import List, Optional

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.errors import DropError
from connectfour.game.rules import GameState, new_game, drop, current_outcome
from connectfour.utils import ROWS, COLS, GameResult, Player, find_winners

QUIT_COMMANDS = ('q', 'quit', 'exit')
DEBUG_LEVELS = ['none', 'error', 'warning', 'info', 'debug', 'trace']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='connectfour',
        description='Two-player Connect Four in the terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Play a game (the default command)
    connectfour play

    # Check a position, rows listed top to bottom
    connectfour check --rows ....... ....... ....... ....... ...O... ..XXXX.

    # Time 500 random games with timing output
    connectfour --debug benchmark --iterations 500
""")
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging (same as --debug_level debug)')
    parser.add_argument('--debug_level', choices=DEBUG_LEVELS, default='warning',
                        help='Logging verbosity (default: warning)')
    parser.add_argument('--log_file', type=str, default=None,
                        help='Also write log records to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', help='Play a two-player game interactively')

    check_parser = subparsers.add_parser('check', help='Analyse a board position')
    check_parser.add_argument('--rows', nargs='+', required=True, metavar='ROW',
                              help=f"{ROWS} rows of {COLS} cells, top row first, "
                                   "using '.', 'X' (Red) and 'O' (Yellow)")

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of random games to play')
    return parser


class SimpleCLI:
    """Command-line front end around a GameState."""

    def __init__(self, args: Optional[argparse.Namespace] = None):
        self.game = new_game()
        self.args = args

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging from them."""
        self.args = build_parser().parse_args(argv)

        if self.args.debug:
            debug.set_from_string('debug')
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the selected command and return the process exit status."""
        if not self.args:
            self.parse_args(argv)

        command = self.args.command or 'play'
        if command == 'play':
            return self.play_game()
        if command == 'check':
            return self.check_position()
        return self.benchmark()

    def play_game(self) -> int:
        """Play one game between two people at this terminal."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLS - 1}) to drop a disc, or 'q' to quit.")

        while not self.game.is_game_over():
            print(self.game.render())
            column = self.get_human_move(self.game.current_player)
            if column is None:
                print("Game abandoned.")
                return 0

            try:
                drop(self.game, column)
            except DropError as e:
                debug.debug(f"Rejected move: {e}", "cli")
                print(f"{e}. Try again.")

        print(self.game.render())
        self.announce_result()
        return 0

    def get_human_move(self, player: Player) -> Optional[int]:
        """
        Prompt ``player`` until they type a number or quit.

        Range and full-column checks are left to the engine.

        Returns:
            The column typed, or None if the player quit or input ended
        """
        while True:
            try:
                user_input = input(f"Player {player} ({player.label}), "
                                   f"choose a column (0-{COLS - 1}): ")
            except EOFError:
                print()
                return None

            user_input = user_input.strip().lower()
            if user_input in QUIT_COMMANDS:
                return None

            try:
                return int(user_input)
            except ValueError:
                print(f"'{user_input}' is not a column number.")

    def announce_result(self) -> None:
        outcome = current_outcome(self.game)
        winner = outcome.winner
        if winner is not None:
            print(f"Player {winner} ({winner.label}) wins!")
            debug.info(f"Winning line: {self.game.get_winning_line()}", "cli")
        elif outcome == GameResult.DRAW:
            print("Draw!")

    def check_position(self) -> int:
        """Report on the position passed with --rows."""
        try:
            board = Board.from_rows(self.args.rows)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 2

        print("Loaded position:")
        print(board.render())

        winners = find_winners(board.grid)
        if winners:
            for player in winners:
                print(f"Four in a row for Player {player} ({player.label})")
        else:
            print("No four in a row")

        print(f"Discs on board: {board.count_discs()}")
        if board.is_full():
            print("Board is full")
        else:
            print(f"Playable columns: {board.valid_columns()}")
        return 0

    def benchmark(self) -> int:
        """Play random games through the engine and report the timings."""
        iterations = self.args.iterations
        if iterations < 1:
            print("--iterations must be at least 1")
            return 2

        print(f"Running benchmark with {iterations} random games...")
        results = {result: 0 for result in GameResult if result.is_game_over()}
        total_moves = 0

        debug.start_timer("benchmark")
        for _ in range(iterations):
            game = GameState()
            while not game.is_game_over():
                drop(game, random.choice(game.get_valid_moves()))
            results[game.outcome] += 1
            total_moves += game.move_count
        elapsed = debug.end_timer("benchmark", "cli")

        print(f"Played {iterations} games with {total_moves} moves in {elapsed:.4f} seconds "
              f"({elapsed / total_moves * 1000:.4f} ms per move)")
        for result, count in results.items():
            print(f"  {result.name}: {count}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
