"""
Game configuration for terminal TicTacToe.
All the settings for the board, key layout, pacing and debug output.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the console game!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored row-major as 9 cells
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== KEY LAYOUT ====================
    # Keys mirror a 3x3 block on a QWERTY keyboard:
    #   E R T
    #   D F G
    #   C V B
    KEY_MAP = {
        "e": 0,
        "r": 1,
        "t": 2,
        "d": 3,
        "f": 4,
        "g": 5,
        "c": 6,
        "v": 7,
        "b": 8,
    }

    # Typing this instead of a key ends the program
    EXIT_COMMAND = "exit"

    # ==================== PACING ====================
    # Pause (seconds) before the computer plays and after each turn,
    # so the player can read the last message before the screen clears
    MOVE_DELAY = 0.7

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_GLYPH = " "
    ROW_DIVIDER = "-------------"
    CLEAR_SCREEN = True

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
