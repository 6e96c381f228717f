"""
Game state management for terminal TicTacToe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence
from dataclasses import dataclass, field

from .config import GameConfig
from .errors import IllegalMoveError


class Cell(Enum):
    """State of a single board cell."""
    EMPTY = " "
    X = "X"
    O = "O"


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> Cell:
        """The cell state this player leaves on the board."""
        return Cell(self.value)


class GameMode(Enum):
    """Who supplies the moves for O. Picked once at startup."""
    SINGLE_PLAYER = "1"
    MULTIPLAYER = "2"

    @classmethod
    def from_input(cls, raw: Optional[str]) -> "GameMode":
        """
        Parse the startup menu answer.

        Args:
            raw: What the user typed ("1" or "2").

        Returns:
            The matching mode. Anything unrecognized means SINGLE_PLAYER.
        """
        choice = (raw or "").strip()
        for mode in cls:
            if mode.value == choice:
                return mode
        return cls.SINGLE_PLAYER


# Characters accepted by Board.from_string for an empty cell
_EMPTY_CHARS = " ._-"


class Board:
    """
    The 9-cell TicTacToe board, indexed 0-8 in row-major order:

         0 | 1 | 2
         3 | 4 | 5
         6 | 7 | 8
    """

    def __init__(self, cells: Optional[Sequence[Cell]] = None):
        """
        Create a board.

        Args:
            cells: Initial cell states. Defaults to an empty board.

        Raises:
            ValueError: If not exactly 9 cells are given.
        """
        if cells is None:
            cells = [Cell.EMPTY] * GameConfig.CELL_COUNT

        if len(cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"A board needs exactly {GameConfig.CELL_COUNT} cells, got {len(cells)}"
            )
        for cell in cells:
            if not isinstance(cell, Cell):
                raise ValueError(f"Not a cell state: {cell!r}")

        self._cells: List[Cell] = list(cells)

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """
        Build a board from a 9 character string like "XX.O.....".
        'X' and 'O' are marks; space, '.', '_' or '-' are empty cells.
        """
        cells = []
        for char in layout:
            if char.upper() in ("X", "O"):
                cells.append(Cell(char.upper()))
            elif char in _EMPTY_CHARS:
                cells.append(Cell.EMPTY)
            else:
                raise ValueError(f"Unknown cell character: {char!r}")
        return cls(cells)

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({''.join(cell.value for cell in self._cells)!r})"

    def is_valid_index(self, index: int) -> bool:
        """True if index addresses a cell on this board. Booleans are not indices."""
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._cells)

    def is_empty(self, index: int) -> bool:
        return self._cells[index] == Cell.EMPTY

    def place(self, index: int, player: Player) -> None:
        """
        Put a player's mark on an empty cell.

        Args:
            index: Cell index (0-8).
            player: Whose mark to place.

        Raises:
            IllegalMoveError: If the index is off the board or the cell is taken.
        """
        if not self.is_valid_index(index):
            raise IllegalMoveError(
                f"Invalid position {index}. Must be 0-{len(self._cells) - 1}.",
                index=index
            )
        if not self.is_empty(index):
            raise IllegalMoveError(
                "You can't mark a used space!! Try another key",
                index=index
            )
        self._cells[index] = player.mark

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [i for i, cell in enumerate(self._cells) if cell == Cell.EMPTY]

    def is_full(self) -> bool:
        return Cell.EMPTY not in self._cells

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self._cells)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player      # Who made the move
    index: int          # Cell (0-8)
    move_number: int    # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board
    - Current player
    - Move history

    The outcome is not stored here. Ask WinChecker for it after every move.
    """

    board: Board = field(default_factory=Board)

    # Current player's turn
    current_player: Player = Player.X

    # Move history (in memory only)
    moves: List[Move] = field(default_factory=list)

    def make_move(self, index: int, player: Optional[Player] = None) -> Move:
        """
        Place the current player's mark and pass the turn.

        Args:
            index: Cell index (0-8).
            player: Who is moving. Must be the current player if given.

        Returns:
            The recorded Move.

        Raises:
            IllegalMoveError: If the game is over, it is not the player's
                turn, or the cell can't be marked. Nothing changes in that case.
        """
        # win_checker imports this module, so import here
        from .win_checker import WinChecker

        # Check if game is over
        if WinChecker().evaluate(self.board).is_over:
            raise IllegalMoveError("Game is already over!", index=index)

        player = player or self.current_player
        if player != self.current_player:
            raise IllegalMoveError(
                f"It's not {player.value}'s turn!",
                index=index
            )

        self.board.place(index, player)

        move = Move(player=player, index=index, move_number=len(self.moves))
        self.moves.append(move)

        # Outcome is checked by WinChecker, just switch turns here
        self.current_player = player.opposite()

        return move


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    for index in (4, 0, 2, 6, 3):
        print(f"{game.current_player.value} moves to {index}")
        game.make_move(index)

    print(game.board)
    print(f"Next turn: {game.current_player.value}")

    print("\nGame state test done!")
