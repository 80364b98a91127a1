"""Shared fixtures for Brickfall tests."""

import os
import random

# pygame must not open a window or an audio device during tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from brickfall.config import GameConfig
from brickfall.game import SessionState, SimulationEngine
from brickfall.game.board import make_brick
from brickfall.game.entities import Ball, BrickKind


@pytest.fixture
def config():
    """Default config with random drops turned off."""
    return GameConfig(multiball_chance=0.0, power_up_chance=0.0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def engine(config, rng):
    return SimulationEngine(config, rng)


@pytest.fixture
def state(config, engine):
    """A started game (level 1, PLAYING)."""
    s = SessionState.create(config)
    engine.new_game(s)
    return s


@pytest.fixture
def brick_factory(config):
    """Build a level-1 brick at a grid cell."""
    def factory(col=0, row=0, kind=BrickKind.NORMAL):
        return make_brick(col, row, kind, 1, config)
    return factory


@pytest.fixture
def ball_in(config):
    """Build a ball whose center sits inside a brick, moving up."""
    def factory(brick, dx=0.0, dy=-3.0):
        return Ball(brick.center_x, brick.center_y, dx=dx, dy=dy, radius=config.ball_radius)
    return factory
