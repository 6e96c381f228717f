"""
Computer player for terminal TicTacToe.
Uses a one-ply heuristic: block, then win, then anything free.
"""

import random
from typing import Optional

from .config import GameConfig
from .errors import NoMoveAvailable
from .game_state import Board, Cell, Player
from .win_checker import WINNING_LINES


class AIPlayer:
    """
    A simple TicTacToe opponent.

    Every call walks three tiers in strict order:
    1. Block: complete-able opponent line -> take its empty cell
    2. Win: complete-able own line -> take its empty cell
    3. Random empty cell

    Only the first threatened line (in WINNING_LINES order) is blocked,
    so a double threat beats it. That's the price of looking one move ahead.
    """

    TIER_BLOCK = "block"
    TIER_WIN = "win"
    TIER_RANDOM = "random"

    def __init__(
        self,
        player: Player = Player.O,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            config: Game configuration.
            rng: Random source for tier 3. Pass a seeded one for repeatable games.
        """
        self.player = player
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

        # Which tier produced the last move (for debugging)
        self.last_tier: Optional[str] = None

    def choose_move(self, board: Board, player: Optional[Player] = None) -> int:
        """
        Pick a cell for the computer.

        Args:
            board: Current board.
            player: Player to move for. Defaults to self.player.

        Returns:
            Index of the chosen empty cell.

        Raises:
            NoMoveAvailable: If the board is full.
        """
        player = player or self.player

        empty_cells = board.empty_cells()
        if not empty_cells:
            raise NoMoveAvailable()

        move = self.find_completing_cell(board, player.opposite())
        if move is not None:
            return self._chose(move, self.TIER_BLOCK)

        move = self.find_completing_cell(board, player)
        if move is not None:
            return self._chose(move, self.TIER_WIN)

        return self._chose(self.rng.choice(empty_cells), self.TIER_RANDOM)

    @staticmethod
    def find_completing_cell(board: Board, player: Player) -> Optional[int]:
        """
        Find the first line where player has two marks and the third cell is empty.

        Returns:
            Index of that empty cell, or None.
        """
        mark = player.mark
        for line in WINNING_LINES:
            cells = [board[i] for i in line]
            if cells.count(mark) == 2 and cells.count(Cell.EMPTY) == 1:
                return line[cells.index(Cell.EMPTY)]
        return None

    def _chose(self, index: int, tier: str) -> int:
        self.last_tier = tier
        if self.config.DEBUG_MODE:
            print(f"AI ({self.player.value}) picked cell {index} via {tier} tier")
        return index


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Player.O)

    # Test 1: AI should block a winning move
    board = Board.from_string("XX.......")
    print("\nAI is O. X is about to win with 2!")
    move = ai.choose_move(board)
    print(f"AI's move: {move} ({ai.last_tier})")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_string("OO..X...X")
    print("\nAI is O. Can win with 2!")
    move = ai.choose_move(board)
    print(f"AI's move: {move} ({ai.last_tier})")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
