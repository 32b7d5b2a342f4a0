import os
import random
from dataclasses import replace

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_arcade.config import GameConfig  # noqa: E402
from flappy_arcade.game_engine import GameSession  # noqa: E402


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def hover_config():
    """Bird hangs still at y=125 and every gap is [100, 280], so it always fits."""
    return replace(
        GameConfig(),
        gravity=0.0,
        start_velocity=0.0,
        pipe_margin_top=100,
        pipe_margin_bottom=140,
        initial_pipe_delay=0,
        pipe_spacing=100,
        pipe_speed=3.0,
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(config, rng):
    return GameSession(config, rng=rng)
