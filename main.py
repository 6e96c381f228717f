"""
Main script for terminal TicTacToe.

This script ties together:
- Logic (game session, rules, computer opponent)
- UI (console drawing and prompts)

Run this script to play TicTacToe in your terminal!
"""

import random
import time
from typing import List, Optional

# Logic imports
from logic.config import GameConfig
from logic.errors import IllegalMoveError, InvalidKeyError
from logic.game_state import GameMode
from logic.session import GameSession
from logic.win_checker import GameOutcome, OutcomeStatus

# UI imports
from ui import ConsoleUI


MODE_PROMPT = (
    "Select game mode:\n\n"
    "- 1. Single player (vs. computer)\n\n"
    "- 2. Multiplayer\n\n"
    "> "
)


class TicTacToeGame:
    """
    Main controller for a console game.

    Game flow:
    1. Pick a mode (single player vs. computer, or two humans)
    2. Current player types a key from the key map
    3. Board is redrawn and checked for a win or tie
    4. In single player mode the computer answers as O
    5. Repeat until someone wins, it's a tie, or a player types 'exit'
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        ui: Optional[ConsoleUI] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the game.

        Args:
            config: Game configuration.
            ui: Console UI. A stdout/input one is made if not provided.
            rng: Random source for the computer player.
        """
        self.config = config or GameConfig()
        self.ui = ui or ConsoleUI(self.config)
        self.rng = rng

        self.session: Optional[GameSession] = None
        self.is_running = False

    def start(self, mode: Optional[GameMode] = None) -> Optional[GameOutcome]:
        """
        Start the game.

        Args:
            mode: Skip the mode prompt and use this mode.

        Returns:
            The final outcome, or None if a player quit early.
        """
        self.ui.clear_screen()

        if mode is None:
            mode = self._choose_mode()
        self._announce_mode(mode)

        self.session = GameSession(mode, self.config, self.rng)
        self.is_running = True

        # Give the player a moment to read the mode message
        self._pause()

        return self._game_loop()

    def _choose_mode(self) -> GameMode:
        answer = self.ui.ask(MODE_PROMPT)
        mode = GameSession.select_mode(answer)

        if answer.strip() not in [m.value for m in GameMode]:
            self.ui.show("\nInvalid mode selection. Defaulting to Single player.")

        return mode

    def _announce_mode(self, mode: GameMode):
        if mode == GameMode.SINGLE_PLAYER:
            self.ui.show("\nSingle Player mode! You're X and computer is O.")
        else:
            self.ui.show("\nMultiplayer mode!")

    def _game_loop(self) -> Optional[GameOutcome]:
        """Main game loop. One iteration per turn attempt."""
        while self.is_running:
            self.ui.display(self.session.board)

            if self.session.is_computer_turn():
                self._pause()
                index = self.session.request_computer_move()
                raw_key = self.session.key_for(index)
            else:
                self.ui.show(
                    f"\n{self.session.current_player.value}'s turn. "
                    f"Enter your move from the key map above "
                    f"(or '{self.config.EXIT_COMMAND}' to quit):"
                )
                raw_key = self.ui.ask("> ")

            outcome = self._handle_turn(raw_key)

            if outcome is not None and outcome.is_over:
                return outcome

            if self.is_running:
                self._pause()

        return None

    def _handle_turn(self, raw_key: str) -> Optional[GameOutcome]:
        """
        Process one typed (or computer-chosen) key.

        Returns:
            Outcome after the move, or None if nothing was played.
        """
        if raw_key.strip().lower() == self.config.EXIT_COMMAND:
            self.ui.show("Bye!")
            self.is_running = False
            return None

        player = self.session.current_player

        try:
            outcome = self.session.submit_move(raw_key, player)
        except (InvalidKeyError, IllegalMoveError) as e:
            # Same player goes again
            self.ui.show(str(e))
            return None

        self.ui.display(self.session.board)

        if outcome.is_over:
            self._show_game_result(outcome)
            self.is_running = False
            return outcome

        self.ui.show(f"\n{player.value} entered: {raw_key}")
        return outcome

    def _show_game_result(self, outcome: GameOutcome):
        """Show the final game result."""
        if outcome.status == OutcomeStatus.WIN:
            self.ui.show(f"\n{outcome.winner.value} wins! Congrats.\n")
        else:
            self.ui.show("TIE GAME! No winner.\n")

    def _pause(self):
        if self.config.MOVE_DELAY > 0:
            time.sleep(self.config.MOVE_DELAY)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Terminal TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        help="1 = single player (vs. computer), 2 = multiplayer. Prompts if omitted."
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.MOVE_DELAY,
        help="Seconds to pause between turns and before the computer moves"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between turns"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine diagnostics"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    config.MOVE_DELAY = max(args.delay, 0.0)
    config.CLEAR_SCREEN = not args.no_clear
    config.DEBUG_MODE = args.debug

    mode = GameMode(args.mode) if args.mode else None

    game = TicTacToeGame(config)

    try:
        game.start(mode)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        print("Bye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
