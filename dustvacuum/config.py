"""tunables for dust vacuum; all distances in pixels, all times in milliseconds."""

from dataclasses import dataclass
from typing import Optional

# --- window / playfield ---
WIDTH, HEIGHT = 500, 500
BUTTON_BAR_H = 80
FPS = 60
CAPTION = "Dust Vacuum"

# --- dust ---
DUST_SIZE = 30
DUST_MIN_SPEED, DUST_MAX_SPEED = 1.0, 5.0

# --- vacuum (paddle) ---
# brush size sets where the catch center sits; vacuum width only bounds movement
BRUSH_SIZE = 30
BRUSH_RANGE = 40
VACUUM_WIDTH = 30
VACUUM_HEIGHT = 20

# momentum integrator
KEY_IMPULSE = 2.0
HELD_IMPULSE = 0.45
IMPULSE_GAIN = 1.1
FRICTION = 0.9

# key repeat keeps a held arrow key sending impulses
KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS = 200, 30

# --- scoring / lives ---
LIVES_START = 5
CATCH_BONUS = 1000

# --- spawning ---
SPAWN_PROB_START = 0.3
SPAWN_BUCKET_MS = 1000
RAMP_INTERVAL_MS = 10000
RAMP_GROWTH = 1.3
SPAWN_PROB_CAP = None

# --- files ---
FX_DIR = "fx"
MISS_SOUND = "submarine.wav"
LOG_DIR = "logs"


@dataclass(frozen=True)
class GameConfig:
    """every constant the simulation reads, bundled so tests can bend them."""

    width: float = WIDTH
    height: float = HEIGHT
    dust_size: float = DUST_SIZE
    min_speed: float = DUST_MIN_SPEED
    max_speed: float = DUST_MAX_SPEED
    brush_size: float = BRUSH_SIZE
    brush_range: float = BRUSH_RANGE
    paddle_width: float = VACUUM_WIDTH
    key_impulse: float = KEY_IMPULSE
    held_impulse: float = HELD_IMPULSE
    impulse_gain: float = IMPULSE_GAIN
    friction: float = FRICTION
    lives: int = LIVES_START
    catch_bonus: int = CATCH_BONUS
    spawn_prob: float = SPAWN_PROB_START
    spawn_bucket_ms: float = SPAWN_BUCKET_MS
    ramp_interval_ms: float = RAMP_INTERVAL_MS
    growth: float = RAMP_GROWTH
    spawn_prob_cap: Optional[float] = SPAWN_PROB_CAP

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0 or self.dust_size <= 0:
            raise ValueError("playfield and dust sizes must be positive")
        if not 0 < self.paddle_width <= self.width:
            raise ValueError(
                f"paddle width {self.paddle_width} does not fit a {self.width}px field")
        if self.catch_line < 0:
            raise ValueError(
                f"dust size {self.dust_size} leaves no catch zone in a {self.height}px field")
        if not 0 < self.friction < 1:
            raise ValueError(f"friction must be in (0, 1), got {self.friction}")
        if self.min_speed < 0:
            raise ValueError(f"dust must fall, got min_speed {self.min_speed}")
        if self.min_speed > self.max_speed:
            raise ValueError("min_speed is above max_speed")
        if self.brush_range < 0:
            raise ValueError(f"brush_range must not be negative, got {self.brush_range}")
        if self.lives < 1:
            raise ValueError("a game needs at least one life")
        if self.spawn_bucket_ms <= 0 or self.ramp_interval_ms <= 0:
            raise ValueError("spawn bucket and ramp interval must be positive")

    @property
    def catch_line(self):
        return self.height - 3 * self.dust_size

    @property
    def miss_line(self):
        return self.height - self.dust_size

    @property
    def paddle_max_x(self):
        return self.width - self.paddle_width


DEFAULT_CONFIG = GameConfig()
