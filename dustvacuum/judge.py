"""catch / miss rules for falling dust."""

import logging

from .config import DEFAULT_CONFIG
from .state import CATCH, GAME_OVER, MISS, Event

logger = logging.getLogger(__name__)


def paddle_center(paddle, config=DEFAULT_CONFIG):
    return paddle.x + config.brush_size / 2


def in_reach(particle, paddle, config=DEFAULT_CONFIG):
    center = particle.x + config.dust_size / 2
    brush_center = paddle_center(paddle, config)
    return brush_center - config.brush_range <= center <= brush_center + config.brush_range


def judge(state, config=DEFAULT_CONFIG):
    """advance every live particle one tick and settle those in the bottom zones.

    a particle in the catch zone is tested against the vacuum first; only if
    it is out of reach can it count as a miss, and only once it hits the miss
    line. judging stops as soon as the last life is lost.
    """
    events = []
    for particle in state.particles:
        if particle.removed:
            continue
        particle.y += particle.speed
        if particle.y < config.catch_line:
            continue

        if in_reach(particle, state.paddle, config):
            state.score += config.catch_bonus
            state.caught += 1
            particle.removed = True
            events.append(Event(CATCH, {"x": round(particle.x, 1), "score": state.score}))
            logger.debug("caught dust at x=%.1f, score %d", particle.x, state.score)
        elif particle.y >= config.miss_line:
            state.lives = max(0, state.lives - 1)
            state.missed += 1
            particle.removed = True
            events.append(Event(MISS, {"x": round(particle.x, 1), "lives_after": state.lives}))
            logger.debug("missed dust at x=%.1f, %d lives left", particle.x, state.lives)
            if state.lives == 0:
                events.append(Event(GAME_OVER, {"score": state.score, "ticks": state.ticks}))
                break
    return events
