"""
config.py: Tunable game configuration with startup validation.
"""

from dataclasses import dataclass

from .constants import (
    FPS, MAX_FRAME_MS, SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_X, PLAYER_SIZE,
    GRAVITY_ACCEL, FLIP_IMPULSE, TERMINAL_VELOCITY, OBSTACLE_WIDTH,
    OBSTACLE_SPEED, SPAWN_INTERVAL_TICKS, BASE_GAP, GAP_DECAY, MIN_GAP,
    SCORE_INTERVAL_MS
)


class ConfigError(ValueError):
    """Raised when a configuration cannot produce a playable round."""


@dataclass(frozen=True)
class GameConfig:
    """Every number the simulation step reads. Defaults come from constants.py."""
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    player_x: int = PLAYER_X
    player_size: int = PLAYER_SIZE

    gravity_accel: float = GRAVITY_ACCEL
    flip_impulse: float = FLIP_IMPULSE
    terminal_velocity: float = TERMINAL_VELOCITY

    obstacle_width: int = OBSTACLE_WIDTH
    obstacle_speed: float = OBSTACLE_SPEED
    spawn_interval: int = SPAWN_INTERVAL_TICKS
    base_gap: float = BASE_GAP
    gap_decay: float = GAP_DECAY
    min_gap: float = MIN_GAP

    score_interval_ms: float = SCORE_INTERVAL_MS
    fps: int = FPS
    max_frame_ms: float = MAX_FRAME_MS

    @property
    def max_player_y(self) -> float:
        """Lowest allowed top edge for the player."""
        return self.height - self.player_size

    def validate(self) -> "GameConfig":
        """Checks the startup invariants and returns self so calls can chain."""
        positive = {
            "player_size": self.player_size,
            "terminal_velocity": self.terminal_velocity,
            "obstacle_width": self.obstacle_width,
            "obstacle_speed": self.obstacle_speed,
            "spawn_interval": self.spawn_interval,
            "score_interval_ms": self.score_interval_ms,
            "fps": self.fps,
            "max_frame_ms": self.max_frame_ms,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")

        if self.gravity_accel < 0 or self.flip_impulse < 0:
            raise ConfigError("gravity_accel and flip_impulse are magnitudes and must be >= 0")
        if self.gap_decay < 0:
            raise ConfigError(f"gap_decay must be >= 0, got {self.gap_decay}")

        # A gap narrower than the player can never be passed.
        if self.min_gap <= self.player_size:
            raise ConfigError(
                f"min_gap ({self.min_gap}) must be larger than player_size ({self.player_size})")
        if self.min_gap > self.base_gap:
            raise ConfigError(f"min_gap ({self.min_gap}) exceeds base_gap ({self.base_gap})")
        if self.base_gap > self.height:
            raise ConfigError(f"base_gap ({self.base_gap}) exceeds playfield height ({self.height})")

        if self.player_size >= self.height:
            raise ConfigError("player does not fit inside the playfield height")
        if not 0 <= self.player_x <= self.width - self.player_size:
            raise ConfigError("player_x puts the player outside the playfield")
        return self
