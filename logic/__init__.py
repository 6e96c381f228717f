"""
Logic module for terminal TicTacToe.
Handles game state, rules, and the computer opponent.
"""

from .config import GameConfig
from .errors import GameError, InvalidKeyError, IllegalMoveError, NoMoveAvailable
from .game_state import Board, Cell, GameMode, GameState, Move, Player
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WINNING_LINES, GameOutcome, OutcomeStatus, WinChecker
from .ai_player import AIPlayer
from .session import GameSession

__version__ = "1.0.0"
