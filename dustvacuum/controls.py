"""vacuum movement: impulses feed a momentum accumulator that decays every tick.

input handlers never touch the paddle directly. they push commands onto a
``CommandQueue`` and the frame step drains it, so the order in which key
presses and button touches arrived is the order they are applied.
"""

from collections import deque
from typing import NamedTuple

from .config import DEFAULT_CONFIG
from .state import clamp

LEFT, RIGHT = -1, 1

# command kinds
IMPULSE, PRESS, RELEASE = "impulse", "press", "release"


class Command(NamedTuple):
    kind: str
    direction: int


class CommandQueue:
    """fifo of pending input, filled by event handlers and drained once per frame."""

    def __init__(self):
        self._pending = deque()

    def __len__(self):
        return len(self._pending)

    def push_impulse(self, direction):
        self._pending.append(Command(IMPULSE, _check_direction(direction)))

    def press(self, direction):
        self._pending.append(Command(PRESS, _check_direction(direction)))

    def release(self, direction):
        self._pending.append(Command(RELEASE, _check_direction(direction)))

    def drain(self):
        commands = list(self._pending)
        self._pending.clear()
        return commands


def _check_direction(direction):
    if direction not in (LEFT, RIGHT):
        raise ValueError(f"direction must be LEFT or RIGHT, got {direction!r}")
    return direction


def apply_impulse(paddle, magnitude, config=DEFAULT_CONFIG):
    paddle.momentum += magnitude
    paddle.momentum *= config.impulse_gain


def _set_held(paddle, direction, held):
    if direction == LEFT:
        paddle.held_left = held
    else:
        paddle.held_right = held


def apply_commands(paddle, commands, config=DEFAULT_CONFIG):
    for cmd in commands:
        if cmd.kind == IMPULSE:
            apply_impulse(paddle, cmd.direction * config.key_impulse, config)
        elif cmd.kind == PRESS:
            _set_held(paddle, cmd.direction, True)
        elif cmd.kind == RELEASE:
            _set_held(paddle, cmd.direction, False)
        else:
            raise ValueError(f"unknown command {cmd.kind!r}")


def integrate(paddle, config=DEFAULT_CONFIG):
    """one tick of movement: held buttons push, position clamps, momentum decays."""
    if paddle.held_left:
        apply_impulse(paddle, -config.held_impulse, config)
    if paddle.held_right:
        apply_impulse(paddle, config.held_impulse, config)
    paddle.x = clamp(paddle.x + paddle.momentum, 0.0, config.paddle_max_x)
    paddle.momentum *= config.friction
