"""
Gravity Flip: a single-button arcade game with a deterministic simulation step.
"""

from .config import ConfigError, GameConfig
from .data_models import (
    CollisionEvent, FlipEvent, GameState, Obstacle, PlayerState, RoundState,
    ScoreEvent, TickInput
)
from .engine import SimulationEngine

__version__ = "0.1.0"
