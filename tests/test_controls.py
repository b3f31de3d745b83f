import random

import pytest

from dustvacuum.config import DEFAULT_CONFIG, GameConfig
from dustvacuum.controls import (IMPULSE, LEFT, PRESS, RELEASE, RIGHT, Command,
                                 CommandQueue, apply_commands, apply_impulse, integrate)
from dustvacuum.state import Paddle


def test_impulse_adds_then_amplifies():
    paddle = Paddle(x=100.0)
    apply_impulse(paddle, 2.0)
    assert paddle.momentum == pytest.approx(2.2)
    apply_impulse(paddle, 2.0)
    assert paddle.momentum == pytest.approx((2.2 + 2.0) * 1.1)


def test_integrate_moves_then_decays():
    paddle = Paddle(x=100.0, momentum=5.0)
    integrate(paddle)
    assert paddle.x == pytest.approx(105.0)
    assert paddle.momentum == pytest.approx(4.5)


def test_held_button_pushes_every_tick():
    paddle = Paddle(x=100.0, held_right=True)
    integrate(paddle)
    assert paddle.x == pytest.approx(100.0 + 0.495)
    assert paddle.momentum == pytest.approx(0.4455)
    integrate(paddle)
    assert paddle.momentum == pytest.approx((0.4455 + 0.45) * 1.1 * 0.9)


def test_both_buttons_held_roughly_cancel():
    paddle = Paddle(x=100.0, held_left=True, held_right=True)
    integrate(paddle)
    assert abs(paddle.x - 100.0) < 0.1


def test_paddle_stays_inside_the_room():
    rng = random.Random(7)
    paddle = Paddle(x=DEFAULT_CONFIG.width / 2)
    for _ in range(5000):
        for _ in range(rng.randint(0, 3)):
            apply_impulse(paddle, rng.choice((-2.0, 2.0)))
        paddle.held_left = rng.random() < 0.2
        paddle.held_right = rng.random() < 0.2
        integrate(paddle)
        assert 0.0 <= paddle.x <= DEFAULT_CONFIG.paddle_max_x


def test_clamps_on_a_wide_vacuum():
    config = GameConfig(paddle_width=120)
    paddle = Paddle(x=370.0, momentum=50.0)
    integrate(paddle, config)
    assert paddle.x == 380.0


def test_queue_drains_in_arrival_order():
    queue = CommandQueue()
    queue.push_impulse(LEFT)
    queue.press(RIGHT)
    queue.release(RIGHT)
    assert len(queue) == 3
    assert queue.drain() == [Command(IMPULSE, LEFT), Command(PRESS, RIGHT), Command(RELEASE, RIGHT)]
    assert len(queue) == 0
    assert queue.drain() == []


def test_queue_rejects_bad_direction():
    with pytest.raises(ValueError):
        CommandQueue().push_impulse(0)


def test_apply_commands():
    paddle = Paddle(x=100.0)
    apply_commands(paddle, [Command(PRESS, LEFT), Command(IMPULSE, RIGHT)])
    assert paddle.held_left
    assert paddle.momentum == pytest.approx(2.2)
    apply_commands(paddle, [Command(RELEASE, LEFT)])
    assert not paddle.held_left


def test_apply_commands_rejects_unknown_kind():
    with pytest.raises(ValueError):
        apply_commands(Paddle(x=0.0), [Command("jump", LEFT)])
