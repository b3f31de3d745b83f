"""dust generation: a coin flip per second, with odds that grow every ramp interval."""

import logging

from .config import DEFAULT_CONFIG
from .state import Particle

logger = logging.getLogger(__name__)


def generate_speed(rng, config=DEFAULT_CONFIG):
    return rng.uniform(config.min_speed, config.max_speed)


def make_particle(rng, config=DEFAULT_CONFIG):
    """new dust at the top edge; x can land as far right as width - dust_size."""
    x = max(0.0, rng.random() * config.width - config.dust_size)
    return Particle(x=x, speed=generate_speed(rng, config))


def ramp(state, now, config=DEFAULT_CONFIG):
    """apply one growth step per full ramp interval elapsed; returns the step count."""
    steps = 0
    while now - state.ramp_started_at >= config.ramp_interval_ms:
        state.ramp_started_at += config.ramp_interval_ms
        state.spawn_prob *= config.growth
        steps += 1
    if steps and config.spawn_prob_cap is not None:
        state.spawn_prob = min(state.spawn_prob, config.spawn_prob_cap)
    if steps:
        logger.debug("spawn probability now %.3f", state.spawn_prob)
    return steps


def maybe_spawn(state, now, rng, config=DEFAULT_CONFIG):
    """roll for a new particle at most once per spawn bucket.

    the bucket is consumed whether or not the roll succeeds. returns the new
    particle (already appended to ``state.particles``) or None.
    """
    if now - state.last_spawn_at <= config.spawn_bucket_ms:
        return None
    state.last_spawn_at = now
    if rng.random() >= state.spawn_prob:
        return None
    particle = make_particle(rng, config)
    state.particles.append(particle)
    state.spawned += 1
    return particle
