import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game.rules import new_game


@pytest.fixture(autouse=True)
def reset_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def game():
    return new_game()
