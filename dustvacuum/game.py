# dust vacuum: catch the falling dust before it reaches the floor

import dataclasses
import logging
import random
import time
from collections import deque

import pygame

from .config import (CAPTION, DEFAULT_CONFIG, FPS, KEY_REPEAT_DELAY_MS,
                     KEY_REPEAT_INTERVAL_MS, LOG_DIR, MISS_SOUND)
from .controls import LEFT, RIGHT, CommandQueue
from .logging_config import setup_logging
from .loop import FrameLoop, Status, new_game
from .render import button_rects, draw_frame, load_font, window_size
from .session_log import SessionLog, new_session_id
from .sfx import init_mixer, load_sound, play
from .state import MISS

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {pygame.K_LEFT: LEFT, pygame.K_RIGHT: RIGHT}

# what the event pump asks of the session
QUIT, RESTART = "quit", "restart"


def button_at(pos, config=DEFAULT_CONFIG):
    for direction, rect in button_rects(config).items():
        if rect.collidepoint(pos):
            return direction
    return None


def _pointer_down(pointer, pos, commands, held_by, config):
    direction = button_at(pos, config)
    if direction is not None:
        held_by[pointer] = direction
        commands.press(direction)


def _pointer_up(pointer, commands, held_by):
    # release whatever this pointer pressed, even if it slid off the button
    direction = held_by.pop(pointer, None)
    if direction is not None and direction not in held_by.values():
        commands.release(direction)


def handle_event(event, commands, held_by, config=DEFAULT_CONFIG):
    """turn one pygame event into queued commands.

    ``held_by`` maps each pointer (the mouse, or a finger id) to the button
    it is holding down. returns QUIT, RESTART or None.
    """
    if event.type == pygame.QUIT:
        return QUIT

    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return QUIT
        if event.key == pygame.K_r:
            return RESTART
        if event.key in KEY_DIRECTIONS:
            commands.push_impulse(KEY_DIRECTIONS[event.key])
        return None

    # touches also arrive as synthetic mouse events; take them from the finger stream only
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
        _pointer_down("mouse", event.pos, commands, held_by, config)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and not getattr(event, "touch", False):
        _pointer_up("mouse", commands, held_by)
    elif event.type == pygame.FINGERDOWN:
        w, h = window_size(config)
        _pointer_down(("finger", event.finger_id), (event.x * w, event.y * h), commands, held_by, config)
    elif event.type == pygame.FINGERUP:
        _pointer_up(("finger", event.finger_id), commands, held_by)
    return None


def event_sink(session_log, session_id, miss_sfx):
    """callback for FrameLoop: plays the miss cue and logs every event to csv.

    the csv log is never read back, so a failed write is logged and dropped
    instead of ending the game mid-frame.
    """
    def on_event(event):
        if event.kind == MISS:
            play(miss_sfx)
        try:
            session_log.write_event(session_id, event)
        except OSError as e:
            logger.warning("could not log %s event: %s", event.kind, e)

    return on_event


def run_game(window, clock, font, miss_sfx, session_log, rng, config=DEFAULT_CONFIG):
    """one full playable session; returns false to exit app, true to restart."""
    session_id = new_session_id()
    session_log.write_session_start(session_id, dataclasses.asdict(config))
    t0 = time.time()

    commands = CommandQueue()
    held_by = {}
    # next-frame callbacks: the host half of FrameLoop's self-rescheduling
    frames = deque()

    on_event = event_sink(session_log, session_id, miss_sfx)
    state = new_game(rng, pygame.time.get_ticks(), config)
    loop = FrameLoop(state, commands, rng, frames.append, config, on_event=on_event)
    loop.start()

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            action = handle_event(event, commands, held_by, config)
            if action == QUIT:
                session_log.write_session_end(session_id, time.time() - t0, loop.state)
                return False
            if action == RESTART and loop.status is Status.GAME_OVER:
                session_log.write_session_end(session_id, time.time() - t0, loop.state)
                return True

        # after game over nothing is scheduled and the last frame stays up
        if frames:
            frames.popleft()(pygame.time.get_ticks())

        draw_frame(window, loop.state, font, config)
        pygame.display.update()


def main(log_level=logging.INFO):
    """open the window, then run game sessions until the player quits."""
    setup_logging(log_level)
    pygame.init()
    miss_sfx = load_sound(MISS_SOUND, volume=0.9) if init_mixer() else None

    config = DEFAULT_CONFIG
    window = pygame.display.set_mode(window_size(config))
    pygame.display.set_caption(CAPTION)
    pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
    font = load_font(18)
    clock = pygame.time.Clock()
    session_log = SessionLog(LOG_DIR)
    rng = random.Random()

    try:
        while run_game(window, clock, font, miss_sfx, session_log, rng, config):
            logger.info("restarting")
    finally:
        pygame.quit()