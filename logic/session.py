"""
Game session for terminal TicTacToe.
One object owns the board, the turn and the mode for a single game,
and is the only thing the console shell talks to.
"""

import random
from typing import Optional

from .config import GameConfig
from .errors import IllegalMoveError
from .game_state import Board, GameMode, GameState, Move, Player
from .move_validator import MoveValidator
from .win_checker import GameOutcome, WinChecker
from .ai_player import AIPlayer


class GameSession:
    """
    Rules engine for one game, from empty board to a final outcome.

    Game flow:
    1. Shell picks a mode with select_mode()
    2. Human moves go through submit_move() with the typed key
    3. On the computer's turn the shell asks request_computer_move()
    4. Repeat until the outcome is a win or a tie
    """

    def __init__(
        self,
        mode: GameMode = GameMode.SINGLE_PLAYER,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Start a fresh game.

        Args:
            mode: Single player (computer is O) or multiplayer.
            config: Game configuration.
            rng: Random source for the computer player.
        """
        self.config = config or GameConfig()
        self.mode = mode

        self.state = GameState()
        self.validator = MoveValidator(self.config)
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Player.O, self.config, rng)

    @staticmethod
    def select_mode(raw: Optional[str]) -> GameMode:
        """Map the menu answer to a mode. Unknown answers mean single player."""
        return GameMode.from_input(raw)

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def is_over(self) -> bool:
        return self.evaluate_outcome().is_over

    def is_computer_turn(self) -> bool:
        """True when the computer should supply the next move."""
        return (
            self.mode == GameMode.SINGLE_PLAYER
            and self.current_player == self.ai.player
            and not self.is_over
        )

    # ==================== ENGINE ====================

    def is_move_legal(self, index: int) -> bool:
        return self.validator.is_move_legal(self.board, index)

    def apply_move(self, index: int, player: Optional[Player] = None) -> Move:
        """
        Mark a cell and hand the turn over.

        Args:
            index: Cell index (0-8).
            player: Who is moving. Defaults to the current player.

        Returns:
            The recorded Move.

        Raises:
            IllegalMoveError: Cell taken, off the board, wrong turn or game
                over. Board and turn are unchanged.
        """
        result = self.validator.validate_move(self.state, index, player)
        if not result.is_valid:
            raise IllegalMoveError(result.error_message, index=index)

        move = self.state.make_move(index, player)

        if self.config.DEBUG_MODE:
            print(f"Move {move.move_number}: {move.player.value} -> cell {move.index}")

        return move

    def evaluate_outcome(self) -> GameOutcome:
        return self.win_checker.evaluate(self.board)

    # ==================== SHELL INTERFACE ====================

    def submit_move(self, raw_key: str, player: Optional[Player] = None) -> GameOutcome:
        """
        Play a typed key for a player.

        Args:
            raw_key: The key as typed (case-insensitive).
            player: Who is moving. Defaults to the current player.

        Returns:
            The outcome after the move.

        Raises:
            InvalidKeyError: The key isn't one of the nine board keys.
            IllegalMoveError: The key points at a cell that can't be played.
        """
        index = self.validator.resolve_key(raw_key)
        self.apply_move(index, player)
        return self.evaluate_outcome()

    def request_computer_move(self) -> int:
        """
        Ask the computer where it wants to play. Does not apply the move.

        Raises:
            NoMoveAvailable: The board is already full.
        """
        return self.ai.choose_move(self.board)

    def key_for(self, index: int) -> str:
        return self.validator.index_to_key(index)
