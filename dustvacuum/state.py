"""plain data for one game: dust particles, the vacuum, and the running tallies."""

from dataclasses import dataclass, field
from typing import List, NamedTuple


@dataclass
class Particle:
    x: float
    speed: float
    y: float = 0.0
    removed: bool = False


@dataclass
class Paddle:
    x: float
    momentum: float = 0.0
    held_left: bool = False
    held_right: bool = False


@dataclass
class GameState:
    paddle: Paddle
    spawn_prob: float
    last_spawn_at: float
    ramp_started_at: float
    lives: int
    score: int = 0
    particles: List[Particle] = field(default_factory=list)
    ticks: int = 0

    # session tallies (only feed the hud and the csv log)
    spawned: int = 0
    caught: int = 0
    missed: int = 0

    @property
    def game_over(self):
        return self.lives <= 0


class Event(NamedTuple):
    """something the host may want to hear about; detail is json-friendly."""

    kind: str
    detail: dict


SPAWN, CATCH, MISS, RAMP, GAME_OVER = "spawn", "catch", "miss", "ramp", "game_over"


def clamp(x, lo, hi):
    return lo if x < lo else hi if x > hi else x
