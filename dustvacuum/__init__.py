"""dust vacuum, a one-screen catch-the-dust arcade game."""

from .config import DEFAULT_CONFIG, GameConfig
from .controls import LEFT, RIGHT, CommandQueue
from .loop import FrameLoop, Status, StepResult, new_game, step
from .state import Event, GameState, Paddle, Particle

__version__ = "0.1.0"
