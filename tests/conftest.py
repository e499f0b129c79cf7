import pytest

from gridsnake.config import Config
from gridsnake.game import Game, GameState
from gridsnake.geometry import Point


@pytest.fixture
def config():
    # one snake step per frame keeps the tests short
    return Config(tick_delay=1, seed=7)


@pytest.fixture
def game(config):
    g = Game(config)
    g.choose(GameState.RUN)
    # park the apple in a corner the tests never walk through
    g.apple = Point(0, 0)
    return g
