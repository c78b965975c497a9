"""
data_models.py: Data structures for the game state and the events a step emits.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .constants import ROTATION_PER_VELOCITY, MAX_ROTATION

GRAVITY_DOWN = 1
GRAVITY_UP = -1


@dataclass
class PlayerState:
    """Vertical state of the player square. y is the top edge, growing downward."""
    y: float
    velocity: float = 0.0
    gravity: int = GRAVITY_DOWN


@dataclass
class Obstacle:
    """A full-height column with one passable gap."""
    x: float
    gap_y: float
    gap_height: float
    gap_top: bool

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap_height


@dataclass
class RoundState:
    score: int = 0
    score_elapsed_ms: float = 0.0
    terminal: bool = False
    best_score: int = 0


@dataclass
class GameState:
    """The single aggregate passed into and returned from the simulation step."""
    player: PlayerState
    obstacles: List[Obstacle] = field(default_factory=list)
    spawn_timer: int = 0                  # Ticks since the last spawn
    next_gap_top: bool = True             # Placement of the next spawned gap
    tick: int = 0                         # Live ticks elapsed this round
    round_state: RoundState = field(default_factory=RoundState)

    def snapshot(self) -> "RenderSnapshot":
        """Prepares a read-only view of the state for the renderer."""
        rotation = self.player.velocity * ROTATION_PER_VELOCITY
        rotation = max(-MAX_ROTATION, min(rotation, MAX_ROTATION))
        return RenderSnapshot(
            player_y=self.player.y,
            rotation=rotation,
            obstacles=tuple((o.x, o.gap_y, o.gap_height) for o in self.obstacles),
            score=self.round_state.score,
            best_score=self.round_state.best_score,
            terminal=self.round_state.terminal,
        )


@dataclass(frozen=True)
class RenderSnapshot:
    player_y: float
    rotation: float
    obstacles: Tuple[Tuple[float, float, float], ...]   # (x, gap_y, gap_height)
    score: int
    best_score: int
    terminal: bool


@dataclass(frozen=True)
class TickInput:
    """Inputs consumed at the start of one step."""
    flip: bool = False
    restart: bool = False


# -------- Events --------

@dataclass(frozen=True)
class FlipEvent:
    direction: int                        # New gravity sign


@dataclass(frozen=True)
class CollisionEvent:
    score: int
    new_best: bool


@dataclass(frozen=True)
class ScoreEvent:
    score: int


Event = Union[FlipEvent, CollisionEvent, ScoreEvent]
