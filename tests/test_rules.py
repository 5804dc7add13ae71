import random

import numpy as np
import pytest

from connectfour.game.errors import ColumnFull, GameAlreadyOver, InvalidColumn
from connectfour.game.rules import GameState, new_game, drop, current_outcome
from connectfour.utils import ROWS, COLS, MAX_MOVES, Cell, GameResult, Player

# Discs follow the row patterns "XXXOOOX" / "OOOXXXO" (row 0 first), which
# contain no four anywhere, so the 42nd move is a draw.
DRAW_SEQUENCE = (
    [0, 3, 3, 0, 0, 3, 3, 0, 0, 3, 3, 0]
    + [1, 4, 4, 1, 1, 4, 4, 1, 1, 4, 4, 1]
    + [2, 5, 5, 2, 2, 5, 5, 2, 2, 5, 5, 2]
    + [6] * 6
)

# Same shape, but Yellow's 42nd disc lands on (5, 3) and makes "OOOO"
# across the top row.
WIN_ON_LAST_MOVE_SEQUENCE = (
    [1, 4, 4, 1, 1, 4, 4, 1, 1, 4, 4, 1]
    + [2, 5, 5, 2, 2, 5, 5, 2, 2, 5, 5, 2]
    + [6, 3, 3, 3, 3, 3]
    + [0, 6, 6, 0, 0, 6, 6]
    + [0, 0, 0, 6, 3]
)

# Red's final disc at (3, 3) completes row 3 and column 3 together.
MULTI_AXIS_SEQUENCE = [0, 1, 1, 2, 3, 0, 3, 2, 3, 0, 0, 1, 1, 2, 2, 6, 3]


def play(state, columns):
    for column in columns:
        drop(state, column)
    return state


def snapshot(state):
    return (state.board.get_state(), state.move_count, state.current_player,
            state.game_result, state.last_move, list(state.moves_made))


def assert_unchanged(state, before):
    grid, move_count, player, result, last_move, moves = before
    assert np.array_equal(state.board.grid, grid)
    assert state.move_count == move_count
    assert state.current_player is player
    assert state.game_result is result
    assert state.last_move == last_move
    assert state.moves_made == moves


def test_new_game_starts_with_red(game):
    assert game.current_player is Player.RED
    assert game.move_count == 0
    assert current_outcome(game) is GameResult.IN_PROGRESS
    assert game.last_move is None
    assert game.get_valid_moves() == list(range(COLS))


def test_new_game_returns_independent_states():
    first, second = new_game(), new_game()
    drop(first, 0)
    assert second.move_count == 0
    assert second.board.count_discs() == 0


def test_drop_returns_placement_and_switches_player(game):
    placement = drop(game, 4)
    assert (placement.row, placement.column, placement.player) == (0, 4, Player.RED)
    assert game.current_player is Player.YELLOW
    assert game.move_count == 1
    assert game.last_move == placement
    assert game.moves_made == [4]


def test_column_three_fills_then_rejects(game):
    play(game, [3] * ROWS)
    assert game.board.is_column_full(3)
    assert current_outcome(game) is GameResult.IN_PROGRESS

    before = snapshot(game)
    with pytest.raises(ColumnFull):
        drop(game, 3)
    assert_unchanged(game, before)


def test_horizontal_win_on_bottom_row(game):
    play(game, [0, 6, 1, 6, 2, 6, 3])
    assert current_outcome(game) is GameResult.RED_WIN
    assert game.winner is Player.RED
    assert game.get_winning_line() == [(0, 0), (0, 1), (0, 2), (0, 3)]


def test_vertical_win(game):
    play(game, [0, 1, 0, 1, 0, 1, 0])
    assert current_outcome(game) is GameResult.RED_WIN
    assert game.get_winning_line() == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_diagonal_up_win(game):
    play(game, [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3])
    assert current_outcome(game) is GameResult.RED_WIN
    assert game.get_winning_line() == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_diagonal_down_win(game):
    play(game, [6, 5, 5, 4, 4, 3, 4, 3, 3, 0, 3])
    assert current_outcome(game) is GameResult.RED_WIN
    assert game.get_winning_line() == [(0, 6), (1, 5), (2, 4), (3, 3)]


def test_yellow_can_win(game):
    play(game, [0, 1, 0, 1, 0, 1, 6, 1])
    assert current_outcome(game) is GameResult.YELLOW_WIN
    assert game.winner is Player.YELLOW
    # the mover stays recorded as current player once the game is over
    assert game.current_player is Player.YELLOW


def test_multi_axis_win_is_a_single_win(game):
    play(game, MULTI_AXIS_SEQUENCE[:-1])
    assert current_outcome(game) is GameResult.IN_PROGRESS

    drop(game, MULTI_AXIS_SEQUENCE[-1])
    assert current_outcome(game) is GameResult.RED_WIN
    assert game.last_move.row == 3


def test_full_game_without_four_is_a_draw(game):
    play(game, DRAW_SEQUENCE[:-1])
    assert current_outcome(game) is GameResult.IN_PROGRESS
    assert game.move_count == MAX_MOVES - 1

    drop(game, DRAW_SEQUENCE[-1])
    assert current_outcome(game) is GameResult.DRAW
    assert game.winner is None
    assert game.board.is_full()
    assert game.get_winning_line() == []


def test_win_on_last_cell_beats_draw(game):
    play(game, WIN_ON_LAST_MOVE_SEQUENCE[:-1])
    assert current_outcome(game) is GameResult.IN_PROGRESS

    drop(game, WIN_ON_LAST_MOVE_SEQUENCE[-1])
    assert game.move_count == MAX_MOVES
    assert current_outcome(game) is GameResult.YELLOW_WIN
    assert game.get_winning_line() == [(5, 0), (5, 1), (5, 2), (5, 3)]


@pytest.mark.parametrize("column", [7, -1])
def test_invalid_column_is_rejected_without_change(game, column):
    drop(game, 2)
    before = snapshot(game)
    with pytest.raises(InvalidColumn):
        drop(game, column)
    assert_unchanged(game, before)


@pytest.mark.parametrize("column", [0, 3, 6, 42])
def test_drop_after_win_raises_game_already_over(game, column):
    play(game, [0, 6, 1, 6, 2, 6, 3])
    before = snapshot(game)

    with pytest.raises(GameAlreadyOver) as excinfo:
        drop(game, column)

    assert excinfo.value.result is GameResult.RED_WIN
    assert_unchanged(game, before)
    assert game.get_valid_moves() == []


def test_drop_after_draw_raises_game_already_over(game):
    play(game, DRAW_SEQUENCE)
    with pytest.raises(GameAlreadyOver):
        drop(game, 0)
    assert current_outcome(game) is GameResult.DRAW


def test_game_state_method_matches_module_api(game):
    placement = game.drop(5)
    assert placement.column == 5
    assert game.outcome is current_outcome(game)
    assert not game.is_game_over()


def test_reset_starts_over(game):
    play(game, [0, 6, 1, 6, 2, 6, 3])
    game.reset()
    assert game.board.count_discs() == 0
    assert game.current_player is Player.RED
    assert game.move_count == 0
    assert game.moves_made == []
    assert current_outcome(game) is GameResult.IN_PROGRESS


@pytest.mark.parametrize("seed", range(25))
def test_random_games_keep_invariants(seed):
    rng = random.Random(seed)
    state = GameState()

    while not state.is_game_over():
        mover = state.current_player
        drop(state, rng.choice(state.get_valid_moves()))

        # gravity: no empty cell below a disc in any column
        for col in range(COLS):
            column = state.board.grid[:, col]
            filled = column != Cell.EMPTY.value
            height = int(filled.sum())
            assert filled[:height].all()
            assert not filled[height:].any()

        assert state.move_count == state.board.count_discs()
        assert state.move_count <= MAX_MOVES
        if not state.is_game_over():
            assert state.current_player is mover.other()

    if state.game_result is GameResult.DRAW:
        assert state.move_count == MAX_MOVES
    else:
        assert state.winner is state.current_player


def test_rejections_are_logged(game, caplog):
    from connectfour.debug import debug, DebugLevel

    debug.configure(level=DebugLevel.DEBUG)
    play(game, [0, 6, 1, 6, 2, 6, 3])
    with caplog.at_level("DEBUG", logger="connectfour"):
        with pytest.raises(GameAlreadyOver):
            drop(game, 1)
    assert any("game is over" in record.getMessage() for record in caplog.records)
