"""
Tests for win and tie detection.
"""

import pytest

from logic.game_state import Board, Cell, GameState, Player
from logic.win_checker import WINNING_LINES, GameOutcome, OutcomeStatus, WinChecker


@pytest.fixture
def checker():
    return WinChecker()


def board_with_line(line, player):
    cells = [Cell.EMPTY] * 9
    for index in line:
        cells[index] = player.mark
    return Board(cells)


def test_winning_lines_order():
    assert WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_empty_board_in_progress(checker):
    outcome = checker.evaluate(Board())
    assert outcome == GameOutcome.in_progress()
    assert not outcome.is_over
    assert outcome.winner is None


@pytest.mark.parametrize("player", list(Player))
@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(checker, line, player):
    board = board_with_line(line, player)
    assert checker.evaluate(board) == GameOutcome.win(player)
    assert checker.get_winning_line(board) == line


def test_win_with_other_cells_filled(checker):
    # O holds the bottom row, X is scattered without a line
    board = Board.from_string("XX.X.XOOO")
    assert checker.check_winner(board) == Player.O


def test_tie(checker):
    board = Board.from_string("XOXOXOOXO")
    outcome = checker.evaluate(board)
    assert outcome == GameOutcome.tie()
    assert outcome.is_over
    assert checker.get_winning_line(board) is None


def test_win_on_last_cell_is_not_a_tie(checker):
    board = Board.from_string("XOXOXOXOX")
    assert checker.evaluate(board) == GameOutcome.win(Player.X)


def test_evaluate_is_repeatable(checker):
    board = Board.from_string("XX.OO....")
    first = checker.evaluate(board)
    assert checker.evaluate(board) == first
    assert board == Board.from_string("XX.OO....")


def test_in_progress_until_line_completed(checker):
    game = GameState()
    # X takes the top row, O answers in the middle row
    for index in (0, 3, 1, 4):
        game.make_move(index)
        assert checker.evaluate(game.board).status == OutcomeStatus.IN_PROGRESS

    game.make_move(2)
    assert checker.evaluate(game.board) == GameOutcome.win(Player.X)


def test_in_progress_until_board_full(checker):
    game = GameState()
    sequence = [0, 1, 2, 4, 3, 5, 7, 6, 8]
    for index in sequence[:-1]:
        game.make_move(index)
        assert not checker.evaluate(game.board).is_over

    game.make_move(sequence[-1])
    assert checker.evaluate(game.board) == GameOutcome.tie()


def test_outcome_str():
    assert str(GameOutcome.win(Player.O)) == "O wins"
    assert str(GameOutcome.tie()) == "tie"
    assert str(GameOutcome.in_progress()) == "in progress"
