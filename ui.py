"""
TicTacToe console UI
Draws the key map and the game board to a text terminal.

Shows:
- Key map (which key marks which cell)
- Live board state
- Prompts and game messages
"""

import sys
from typing import Callable, Optional, Sequence, TextIO

from logic.config import GameConfig
from logic.game_state import Board, Cell


# ESC[2J clears the screen, ESC[0f moves the cursor to the top left
CLEAR_SCREEN = "\x1B[2J\x1B[0f"


def build_board(
    cells: Sequence[str],
    title: str,
    divider: str = GameConfig.ROW_DIVIDER
) -> str:
    """
    Draw a board from 9 single-character strings.

    Args:
        cells: What to show in each cell, row-major.
        title: Heading printed above the grid.
        divider: Line between rows.

    Returns:
        The rendered board followed by a blank line.

    Raises:
        ValueError: If not exactly 9 cells are given.
    """
    if len(cells) != GameConfig.CELL_COUNT:
        raise ValueError(
            f"A board needs exactly {GameConfig.CELL_COUNT} cells, got {len(cells)}"
        )

    size = GameConfig.BOARD_SIZE
    rows = [
        "| " + " | ".join(cells[start:start + size]) + " |"
        for start in range(0, len(cells), size)
    ]
    return f"{title}\n" + f"\n{divider}\n".join(rows) + "\n\n"


def board_glyphs(board: Board, empty_glyph: str = GameConfig.EMPTY_GLYPH) -> list:
    """Display characters for each cell of a board."""
    return [empty_glyph if cell == Cell.EMPTY else cell.value for cell in board]


def key_map_glyphs(config: GameConfig) -> list:
    """The board keys in upper case, laid out by the cell they select."""
    glyphs = [""] * config.CELL_COUNT
    for key, index in config.KEY_MAP.items():
        glyphs[index] = key.upper()
    return glyphs


class ConsoleUI:
    """
    Text UI for the game.
    Output goes to a stream and input comes from a callable, so both can be swapped out.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        out: Optional[TextIO] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        self.config = config or GameConfig()
        self.out = out or sys.stdout
        self.input_func = input_func or input

        self.key_map = build_board(key_map_glyphs(self.config), "KEY MAP", self.config.ROW_DIVIDER)

    def clear_screen(self):
        if self.config.CLEAR_SCREEN:
            self.out.write(CLEAR_SCREEN)

    def draw_key_map(self):
        self.out.write(self.key_map)

    def draw_board(self, board: Board) -> str:
        """Write the game board and return what was written."""
        rendered = build_board(
            board_glyphs(board, self.config.EMPTY_GLYPH),
            "GAME BOARD",
            self.config.ROW_DIVIDER
        )
        self.out.write(rendered)
        return rendered

    def display(self, board: Board):
        """Redraw everything: clear, key map, board."""
        self.clear_screen()
        self.draw_key_map()
        self.draw_board(board)

    def show(self, message: str):
        print(message, file=self.out)

    def ask(self, prompt: str) -> str:
        return self.input_func(prompt)
