"""
physics_core.py: Deterministic flip integration and collision logic.
"""

from typing import List, Optional

from .config import GameConfig
from .data_models import PlayerState, Obstacle, FlipEvent, GRAVITY_DOWN


class PhysicsCore:
    """
    Per-tick kinematics for the player and the player/obstacle overlap test.
    All quantities are in units and ticks; nothing here reads the clock.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def flip(self, gravity: int) -> tuple[int, float]:
        """Returns the inverted gravity sign and the velocity right after a flip."""
        gravity = -gravity
        return gravity, self.config.flip_impulse * gravity

    def apply_gravity_and_movement(self, y: float, velocity: float,
                                   gravity: int) -> tuple[float, float]:
        """
        Calculates new position and velocity after one tick.
        Hitting a rail stops the player until the next flip.
        """
        cfg = self.config
        velocity += gravity * cfg.gravity_accel
        velocity = max(-cfg.terminal_velocity, min(velocity, cfg.terminal_velocity))
        y += velocity

        clamped = max(0.0, min(y, cfg.max_player_y))
        if clamped != y:
            y = clamped
            velocity = 0.0

        return y, velocity

    def integrate(self, player: PlayerState, flip: bool) -> Optional[FlipEvent]:
        """Advances the player one tick in place. Returns the flip event, if any."""
        event = None

        # 1. Flip: reset velocity toward the new gravity, not an added impulse
        if flip:
            player.gravity, player.velocity = self.flip(player.gravity)
            event = FlipEvent(direction=player.gravity)

        # 2. Gravity and movement
        player.y, player.velocity = self.apply_gravity_and_movement(
            player.y, player.velocity, player.gravity)

        return event

    def overlaps_horizontally(self, obstacle: Obstacle) -> bool:
        cfg = self.config
        return (cfg.player_x < obstacle.x + cfg.obstacle_width
                and cfg.player_x + cfg.player_size > obstacle.x)

    def inside_gap(self, y: float, obstacle: Obstacle) -> bool:
        """Inclusive containment: flush with a gap edge still counts as inside."""
        return obstacle.gap_y <= y and y + self.config.player_size <= obstacle.gap_bottom

    def check_collision(self, y: float, obstacles: List[Obstacle]) -> Optional[Obstacle]:
        """Returns the first obstacle whose solid bars the player touches."""
        for obstacle in obstacles:
            if self.overlaps_horizontally(obstacle) and not self.inside_gap(y, obstacle):
                return obstacle
        return None

    def spawn_player(self) -> PlayerState:
        """Fresh player centered vertically, at rest, gravity pulling down."""
        return PlayerState(y=self.config.max_player_y / 2, velocity=0.0, gravity=GRAVITY_DOWN)
