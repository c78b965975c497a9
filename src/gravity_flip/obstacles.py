"""
obstacles.py: Obstacle lifecycle. Gap sizing, alternating spawn, scroll and cull.
"""

from typing import List

from .config import GameConfig
from .data_models import GameState, Obstacle


def gap_height_for_score(config: GameConfig, score: int) -> float:
    """Narrowing gap: the only difficulty lever. Floored at min_gap."""
    return max(config.base_gap - config.gap_decay * score, config.min_gap)


def make_obstacle(config: GameConfig, score: int, gap_top: bool) -> Obstacle:
    """A new obstacle at the right boundary with its gap flush to one rail."""
    gap_height = gap_height_for_score(config, score)
    gap_y = 0.0 if gap_top else config.height - gap_height
    return Obstacle(x=float(config.width), gap_y=gap_y,
                    gap_height=gap_height, gap_top=gap_top)


def scroll_obstacles(config: GameConfig, obstacles: List[Obstacle]) -> List[Obstacle]:
    """Moves every obstacle left and drops the ones fully past the left edge."""
    for obstacle in obstacles:
        obstacle.x -= config.obstacle_speed
    return [o for o in obstacles if o.x + config.obstacle_width > 0]


def step_obstacles(config: GameConfig, state: GameState):
    """
    One tick of the lifecycle. Mutates state.
    A freshly spawned obstacle is not scrolled on its spawn tick.
    """
    # 1. Scroll and cull
    state.obstacles = scroll_obstacles(config, state.obstacles)

    # 2. Spawn on a fixed tick interval, independent of obstacle count
    if state.spawn_timer >= config.spawn_interval:
        state.obstacles.append(
            make_obstacle(config, state.round_state.score, state.next_gap_top))
        state.next_gap_top = not state.next_gap_top
        state.spawn_timer = 0

    state.spawn_timer += 1
