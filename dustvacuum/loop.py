"""the per-frame simulation step and the driver that keeps rescheduling it."""

import enum
import logging
from typing import List, NamedTuple

from .config import DEFAULT_CONFIG
from .controls import apply_commands, integrate
from .judge import judge
from .spawner import make_particle, maybe_spawn, ramp
from .state import RAMP, SPAWN, Event, GameState, Paddle, clamp

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class StepResult(NamedTuple):
    state: GameState
    status: Status
    events: List[Event]


def new_game(rng, now, config=DEFAULT_CONFIG):
    """fresh state at time ``now``, with one dust already falling."""
    state = GameState(
        paddle=Paddle(x=clamp(config.width / 2, 0.0, config.paddle_max_x)),
        spawn_prob=config.spawn_prob,
        last_spawn_at=now,
        ramp_started_at=now,
        lives=config.lives,
    )
    state.particles.append(make_particle(rng, config))
    state.spawned = 1
    return state


def step(state, commands, now, rng, config=DEFAULT_CONFIG):
    """run one frame of the game at time ``now`` (ms).

    a finished game is returned untouched; otherwise input is applied, the
    vacuum moves, survival adds a point, dust may spawn, every particle falls
    and gets judged, and settled particles are dropped.
    """
    if state.game_over:
        return StepResult(state, Status.GAME_OVER, [])

    events = []
    apply_commands(state.paddle, commands, config)
    integrate(state.paddle, config)

    state.ticks += 1
    state.score += 1

    steps = ramp(state, now, config)
    if steps:
        events.append(Event(RAMP, {"steps": steps, "spawn_prob": round(state.spawn_prob, 4)}))

    particle = maybe_spawn(state, now, rng, config)
    if particle is not None:
        events.append(Event(SPAWN, {"x": round(particle.x, 1), "speed": round(particle.speed, 3)}))

    events.extend(judge(state, config))
    state.particles = [p for p in state.particles if not p.removed]

    status = Status.GAME_OVER if state.game_over else Status.RUNNING
    return StepResult(state, status, events)


class FrameLoop:
    """self-rescheduling driver around ``step``.

    ``schedule`` is the host's next-frame hook: it receives ``self.tick`` and
    must call it with the frame time once the next frame comes around. the
    loop stops by simply not scheduling itself again after game over.
    """

    def __init__(self, state, commands, rng, schedule, config=DEFAULT_CONFIG, on_event=None):
        self.state = state
        self.commands = commands
        self.rng = rng
        self.schedule = schedule
        self.config = config
        self.on_event = on_event
        self.status = Status.GAME_OVER if state.game_over else Status.RUNNING

    def start(self):
        if self.status is Status.RUNNING:
            self.schedule(self.tick)

    def tick(self, now):
        result = step(self.state, self.commands.drain(), now, self.rng, self.config)
        self.state, self.status = result.state, result.status
        if self.on_event is not None:
            for event in result.events:
                self.on_event(event)
        if self.status is Status.RUNNING:
            self.schedule(self.tick)
        else:
            logger.info("game over after %d ticks, score %d", self.state.ticks, self.state.score)
        return result
