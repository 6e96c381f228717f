"""
Move validator for terminal TicTacToe.
Translates keys to cells and checks that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .errors import InvalidKeyError
from .game_state import Board, GameState, Player
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Key must be one of the nine board keys
    2. Can only place on empty cells
    3. Players alternate, X first
    4. Game must not be over
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

    # ==================== KEYS ====================

    def resolve_key(self, raw_key: str) -> int:
        """
        Turn a typed key into a cell index. Case-insensitive.

        Args:
            raw_key: What the player typed, e.g. "E" or "f".

        Returns:
            The cell index (0-8).

        Raises:
            InvalidKeyError: If the key isn't on the board.
        """
        key = raw_key.strip().lower()
        if key not in self.config.KEY_MAP:
            raise InvalidKeyError(raw_key, self.config.KEY_MAP.keys())
        return self.config.KEY_MAP[key]

    def index_to_key(self, index: int) -> str:
        """Reverse lookup: the key that selects a cell."""
        for key, value in self.config.KEY_MAP.items():
            if value == index:
                return key
        raise ValueError(f"No key maps to cell {index}")

    # ==================== MOVES ====================

    def is_move_legal(self, board: Board, index: int) -> bool:
        """True if index is on the board and the cell is empty. No side effects."""
        return board.is_valid_index(index) and board.is_empty(index)

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        player: Optional[Player] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to mark (0-8).
            player: Who wants to move. Defaults to the current player.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if self.win_checker.evaluate(game_state.board).is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not game_state.board.is_valid_index(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{self.config.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        if not game_state.board.is_empty(index):
            return ValidationResult(
                is_valid=False,
                error_message="You can't mark a used space!! Try another key"
            )

        # Check turn order
        if player is not None and player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {player.value}'s turn!"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of playable cell indices, empty once the game is over.
        """
        if self.win_checker.evaluate(game_state.board).is_over:
            return []

        return game_state.board.empty_cells()


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    game = GameState()
    validator = MoveValidator()

    # Test valid move
    result = validator.validate_move(game, validator.resolve_key("F"))
    print(f"Move F: valid={result.is_valid}, error={result.error_message}")

    # Make the move
    game.make_move(4)

    # Test invalid move (same cell)
    result = validator.validate_move(game, 4)
    print(f"Move F again: valid={result.is_valid}, error={result.error_message}")

    # Test out of range
    result = validator.validate_move(game, 12)
    print(f"Move 12: valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
