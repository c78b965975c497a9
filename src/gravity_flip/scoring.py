"""
scoring.py: Wall-clock score accumulator.
"""

from typing import List

from .config import GameConfig
from .data_models import RoundState, ScoreEvent

# Float sums of fractional frame times land a hair under the exact total.
EPSILON_MS = 1e-6


def accumulate(config: GameConfig, round_state: RoundState, dt_ms: float) -> List[ScoreEvent]:
    """
    Adds dt_ms to the accumulator and awards one point per full interval.
    The remainder is kept so the score depends on elapsed time, not tick count.
    """
    if round_state.terminal:
        return []

    events = []
    round_state.score_elapsed_ms += dt_ms
    while round_state.score_elapsed_ms >= config.score_interval_ms - EPSILON_MS:
        round_state.score_elapsed_ms = max(
            round_state.score_elapsed_ms - config.score_interval_ms, 0.0)
        round_state.score += 1
        events.append(ScoreEvent(score=round_state.score))
    return events
