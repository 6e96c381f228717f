"""
Shared fixtures for the TicTacToe tests.
"""

import io

import pytest

from logic.config import GameConfig
from logic.game_state import GameMode
from logic.session import GameSession
from ui import ConsoleUI


class FirstChoice:
    """Stand-in random source: always picks the first candidate."""

    def __init__(self):
        self.calls = []

    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[0]


@pytest.fixture
def config():
    """Config with no pauses and no screen clearing."""
    cfg = GameConfig()
    cfg.MOVE_DELAY = 0
    cfg.CLEAR_SCREEN = False
    return cfg


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def session(config):
    return GameSession(GameMode.MULTIPLAYER, config)


@pytest.fixture
def single_session(config, first_choice):
    return GameSession(GameMode.SINGLE_PLAYER, config, first_choice)


@pytest.fixture
def scripted_ui(config):
    """
    Build a ConsoleUI fed from a list of answers.
    Returns (ui, output buffer).
    """
    def _make(answers):
        remaining = iter(answers)
        out = io.StringIO()
        return ConsoleUI(config, out=out, input_func=lambda prompt: next(remaining)), out

    return _make
