import os

import pytest

# headless pygame for the host-side tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from dustvacuum.config import DEFAULT_CONFIG
from dustvacuum.state import GameState, Paddle, Particle


class ScriptedRng:
    """stand-in for random.Random that replays fixed draws in [0, 1)."""

    def __init__(self, *draws):
        self.draws = list(draws)

    def random(self):
        return self.draws.pop(0)

    def uniform(self, a, b):
        return a + (b - a) * self.random()


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def make_state():
    def _make(paddle_x=235.0, particles=(), lives=DEFAULT_CONFIG.lives, now=0.0):
        state = GameState(
            paddle=Paddle(x=paddle_x),
            spawn_prob=DEFAULT_CONFIG.spawn_prob,
            last_spawn_at=now,
            ramp_started_at=now,
            lives=lives,
        )
        state.particles = [Particle(x=x, y=y, speed=speed) for x, y, speed in particles]
        return state
    return _make
