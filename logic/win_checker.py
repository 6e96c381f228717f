"""
Win checker for terminal TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .game_state import Board, Cell, Player


# All possible winning lines as cell indices.
# Order matters: rows first, then columns, then diagonals.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class OutcomeStatus(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True)
class GameOutcome:
    """Result of evaluating a board. Only WIN carries a winner."""
    status: OutcomeStatus
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameOutcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def tie(cls) -> "GameOutcome":
        return cls(OutcomeStatus.TIE)

    @classmethod
    def win(cls, player: Player) -> "GameOutcome":
        return cls(OutcomeStatus.WIN, player)

    @property
    def is_over(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS

    def __str__(self) -> str:
        if self.status == OutcomeStatus.WIN:
            return f"{self.winner.value} wins"
        if self.status == OutcomeStatus.TIE:
            return "tie"
        return "in progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The current board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: Board,
        line: Tuple[int, int, int]
    ) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The winning Player if all 3 cells hold the same mark, None otherwise.
        """
        a, b, c = line
        if board[a] == Cell.EMPTY:
            return None  # Empty cell, no winner on this line

        if board[a] == board[b] == board[c]:
            return Player(board[a].value)

        return None

    def evaluate(self, board: Board) -> GameOutcome:
        """
        Work out where the game stands. Pure, safe to call any number of times.

        Args:
            board: The board to evaluate.

        Returns:
            Win(player), Tie, or InProgress.
        """
        winner = self.check_winner(board)

        if winner is not None:
            return GameOutcome.win(winner)
        if board.is_full():
            return GameOutcome.tie()

        return GameOutcome.in_progress()

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a triple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    outcome = checker.evaluate(Board.from_string("XXXO.O..."))
    print(f"Test 1 (horizontal): {outcome}")
    assert outcome == GameOutcome.win(Player.X)

    # Test 2: Vertical win
    outcome = checker.evaluate(Board.from_string("OX.OX.O.X"))
    print(f"Test 2 (vertical): {outcome}")
    assert outcome == GameOutcome.win(Player.O)

    # Test 3: Tie (full board, no winner)
    outcome = checker.evaluate(Board.from_string("XOXOXOOXO"))
    print(f"Test 3 (tie): {outcome}")
    assert outcome == GameOutcome.tie()

    print("\nWinChecker test done!")
