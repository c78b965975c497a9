"""
engine.py: The deterministic per-frame simulation step.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .config import GameConfig
from .data_models import GameState, RoundState, TickInput, CollisionEvent, Event
from .obstacles import step_obstacles
from .physics_core import PhysicsCore
from .scoring import accumulate

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """
    Runs one step per display frame. Combines physics, obstacle lifecycle,
    collision and scoring. The state passed in is never mutated.
    """
    config: GameConfig = field(default_factory=GameConfig)

    def __post_init__(self):
        self.config.validate()
        self.core = PhysicsCore(self.config)

    def new_game(self, best_score: int = 0) -> GameState:
        """Initial state of a round. best_score is carried in from storage."""
        logger.debug("New round (best score %d)", best_score)
        return GameState(
            player=self.core.spawn_player(),
            spawn_timer=self.config.spawn_interval,
            round_state=RoundState(best_score=best_score),
        )

    def restart(self, state: GameState) -> GameState:
        logger.debug("Restarting round; best score %d", state.round_state.best_score)
        return self.new_game(best_score=state.round_state.best_score)

    def step(self, state: GameState, tick_input: TickInput,
             dt_ms: float) -> Tuple[GameState, List[Event]]:
        """
        Advances the simulation by one tick and dt_ms of wall time.
        Returns the new state and the events emitted during the step.
        """
        if state.round_state.terminal:
            if tick_input.restart:
                return self.restart(state), []
            return state, []

        state = copy.deepcopy(state)
        events: List[Event] = []
        state.tick += 1

        # 1. Player physics (flip input consumed here)
        flip_event = self.core.integrate(state.player, tick_input.flip)
        if flip_event:
            events.append(flip_event)

        # 2. Scroll, cull and spawn obstacles
        step_obstacles(self.config, state)

        # 3. Collision ends the round; no score on the terminal tick
        if self.core.check_collision(state.player.y, state.obstacles) is not None:
            events.append(self._end_round(state.round_state))
            return state, events

        # 4. Time-based score
        events.extend(accumulate(self.config, state.round_state, dt_ms))

        return state, events

    def _end_round(self, round_state: RoundState) -> CollisionEvent:
        """The single transition to terminal. Updates the best score once."""
        round_state.terminal = True
        new_best = round_state.score > round_state.best_score
        if new_best:
            round_state.best_score = round_state.score
        logger.info("Game over: score %d (best %d)", round_state.score, round_state.best_score)
        return CollisionEvent(score=round_state.score, new_best=new_best)
