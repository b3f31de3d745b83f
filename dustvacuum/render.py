"""drawing. reads game state, never changes it."""

import pygame

from .config import BUTTON_BAR_H, DEFAULT_CONFIG, VACUUM_HEIGHT
from .controls import LEFT, RIGHT
from .judge import paddle_center

BG = (245, 240, 228)
FLOOR = (214, 200, 176)
DUST = (120, 104, 92)
DUST_EDGE = (84, 72, 64)
VACUUM = (200, 48, 56)
SUCTION = (200, 48, 56, 40)
BUTTON = (238, 238, 238)
BUTTON_HELD = (204, 204, 204)
BUTTON_EDGE = (150, 150, 150)
TEXT = (40, 40, 40)
SHADOW = (255, 255, 255)


def load_font(size=18):
    return pygame.font.SysFont("couriernew", size, bold=True)


def window_size(config=DEFAULT_CONFIG):
    return int(config.width), int(config.height) + BUTTON_BAR_H


def button_rects(config=DEFAULT_CONFIG):
    """the two on-screen touch buttons, keyed by direction."""
    half = int(config.width) // 2
    top = int(config.height)
    return {
        LEFT: pygame.Rect(0, top, half, BUTTON_BAR_H),
        RIGHT: pygame.Rect(half, top, int(config.width) - half, BUTTON_BAR_H),
    }


def text_with_shadow(surf, font, msg, x, y, color=TEXT, shadow=SHADOW):
    """draw a 1px shadow then the text, for readability over dust."""
    surf.blit(font.render(msg, True, shadow), (x + 1, y + 1))
    surf.blit(font.render(msg, True, color), (x, y))


def vacuum_rect(paddle, config=DEFAULT_CONFIG):
    top = config.height - VACUUM_HEIGHT
    return pygame.Rect(int(paddle.x), int(top), int(config.paddle_width), VACUUM_HEIGHT)


def draw_playfield(surf, state, config=DEFAULT_CONFIG):
    surf.fill(BG)
    floor = pygame.Rect(0, int(config.miss_line), int(config.width), int(config.dust_size))
    pygame.draw.rect(surf, FLOOR, floor)

    # suction band: where a falling dust's center counts as caught
    reach = pygame.Surface((int(2 * config.brush_range), int(config.miss_line - config.catch_line)),
                           pygame.SRCALPHA)
    reach.fill(SUCTION)
    center = paddle_center(state.paddle, config)
    surf.blit(reach, (int(center - config.brush_range), int(config.catch_line)))

    r = int(config.dust_size) // 2
    for p in state.particles:
        c = (int(p.x) + r, int(p.y) + r)
        pygame.draw.circle(surf, DUST, c, r)
        pygame.draw.circle(surf, DUST_EDGE, c, r, 2)

    pygame.draw.rect(surf, VACUUM, vacuum_rect(state.paddle, config), border_radius=6)


def draw_buttons(surf, paddle, font, config=DEFAULT_CONFIG):
    held = {LEFT: paddle.held_left, RIGHT: paddle.held_right}
    labels = {LEFT: "<", RIGHT: ">"}
    for direction, rect in button_rects(config).items():
        pygame.draw.rect(surf, BUTTON_HELD if held[direction] else BUTTON, rect)
        pygame.draw.rect(surf, BUTTON_EDGE, rect, 1)
        label = font.render(labels[direction], True, TEXT)
        surf.blit(label, label.get_rect(center=rect.center))


def draw_hud(surf, state, font):
    """score top-left, lives top-right; lives reads THE END once the game is lost."""
    text_with_shadow(surf, font, f"SCORE {state.score}", 10, 10)
    lives = "THE END" if state.game_over else str(state.lives)
    msg = f"LIVES {lives}"
    text_with_shadow(surf, font, msg, surf.get_width() - font.size(msg)[0] - 10, 10)


def draw_game_over_overlay(surf, state, font, config=DEFAULT_CONFIG):
    """centered card with the final tally."""
    w = int(config.width)
    panel = pygame.Surface((w, 110), pygame.SRCALPHA)
    panel.fill((0, 0, 0, 170))
    top = int(config.height) // 2 - 55
    surf.blit(panel, (0, top))
    title = "R = RESTART  ESC = QUIT"
    stats = f"SCORE {state.score}  CAUGHT {state.caught}  MISSED {state.missed}"
    for i, msg in enumerate((title, stats)):
        text_with_shadow(surf, font, msg, w // 2 - font.size(msg)[0] // 2, top + 28 + i * 34,
                         color=(255, 255, 255), shadow=(0, 0, 0))


def draw_frame(surf, state, font, config=DEFAULT_CONFIG):
    draw_playfield(surf, state, config)
    draw_buttons(surf, state.paddle, font, config)
    draw_hud(surf, state, font)
    if state.game_over:
        draw_game_over_overlay(surf, state, font, config)
