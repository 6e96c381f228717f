"""
Errors raised by the TicTacToe rules engine.
"""

from typing import Iterable, Optional


class GameError(Exception):
    """Base class for every error the game engine raises."""


class InvalidKeyError(GameError):
    """
    The raw input does not match any of the recognized board keys.
    Recoverable: the same player should be prompted again.
    """

    def __init__(self, key: str, valid_keys: Iterable[str]):
        self.key = key
        self.valid_keys = list(valid_keys)
        choices = ", ".join(k.upper() for k in self.valid_keys)
        super().__init__(f"Invalid input. Choose from: {choices}")


class IllegalMoveError(GameError):
    """
    A recognized key points at a cell that can't be played.
    Recoverable: board and turn are left untouched.
    """

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        super().__init__(message)


class NoMoveAvailable(GameError):
    """
    The computer was asked for a move on a full board.
    This is a caller bug, not something to show the player.
    """

    def __init__(self, message: str = "No empty cells left on the board"):
        super().__init__(message)
