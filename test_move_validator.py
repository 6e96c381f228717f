"""
Tests for key translation and move validation.
"""

import pytest

from logic.config import GameConfig
from logic.errors import InvalidKeyError
from logic.game_state import Board, GameState, Player
from logic.move_validator import MoveValidator


@pytest.fixture
def validator():
    return MoveValidator()


def test_key_map_covers_every_cell_once():
    indices = list(GameConfig.KEY_MAP.values())
    assert len(GameConfig.KEY_MAP) == 9
    assert sorted(indices) == list(range(9))


@pytest.mark.parametrize("key, index", [
    ("e", 0), ("R", 1), ("t", 2),
    ("D", 3), ("f", 4), ("G", 5),
    ("c", 6), ("V", 7), ("b", 8),
])
def test_resolve_key(validator, key, index):
    assert validator.resolve_key(key) == index
    assert validator.index_to_key(index) == key.lower()


@pytest.mark.parametrize("key", ["z", "", "ee", "1", "exit"])
def test_resolve_unknown_key(validator, key):
    with pytest.raises(InvalidKeyError) as excinfo:
        validator.resolve_key(key)
    assert excinfo.value.key == key
    assert str(excinfo.value) == "Invalid input. Choose from: E, R, T, D, F, G, C, V, B"


def test_index_to_key_unknown(validator):
    with pytest.raises(ValueError):
        validator.index_to_key(9)


def test_is_move_legal(validator):
    board = Board.from_string("X...O....")
    assert validator.is_move_legal(board, 1)
    assert not validator.is_move_legal(board, 0)
    assert not validator.is_move_legal(board, 4)
    assert not validator.is_move_legal(board, 9)
    assert not validator.is_move_legal(board, -1)


def test_validate_move(validator):
    game = GameState()
    assert validator.validate_move(game, 4).is_valid

    game.make_move(4)
    result = validator.validate_move(game, 4)
    assert not result.is_valid
    assert result.error_message == "You can't mark a used space!! Try another key"

    result = validator.validate_move(game, 12)
    assert not result.is_valid
    assert "Invalid position" in result.error_message

    result = validator.validate_move(game, 0, Player.X)
    assert not result.is_valid
    assert result.error_message == "It's not X's turn!"


def test_no_moves_after_win(validator):
    game = GameState(board=Board.from_string("XXXOO...."), current_player=Player.O)

    result = validator.validate_move(game, 5)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
    assert validator.get_valid_moves(game) == []


def test_get_valid_moves(validator):
    game = GameState(board=Board.from_string("XO..X...."))
    assert validator.get_valid_moves(game) == [2, 3, 5, 6, 7, 8]
