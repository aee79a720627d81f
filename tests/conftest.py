import pytest

from squarefour.debug import debug, DebugLevel
from squarefour.game.board import Board


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.WARNING, components=[])
    yield


@pytest.fixture
def board():
    return Board(6)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted list of answers; EOF once exhausted."""
    def _feed(answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
    return _feed
