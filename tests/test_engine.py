import logging

import pytest

from gravity_flip.config import ConfigError, GameConfig
from gravity_flip.data_models import (
    CollisionEvent, FlipEvent, GRAVITY_DOWN, GRAVITY_UP, Obstacle, ScoreEvent, TickInput
)
from gravity_flip.engine import SimulationEngine
from gravity_flip.input import InputLatch


def _doomed_state(engine, config, score=0, best=0):
    """Player resting on the floor with a top-anchored gap right on top of it."""
    state = engine.new_game(best_score=best)
    state.player.y = config.max_player_y
    state.obstacles = [Obstacle(x=config.player_x, gap_y=0.0, gap_height=150.0, gap_top=True)]
    state.spawn_timer = 1
    state.round_state.score = score
    return state


def test_new_game(engine, config):
    state = engine.new_game(best_score=12)
    assert state.obstacles == []
    assert state.round_state.score == 0
    assert state.round_state.best_score == 12
    assert not state.round_state.terminal
    assert state.spawn_timer == config.spawn_interval
    assert state.next_gap_top is True


def test_step_does_not_mutate_input_state(engine):
    state = engine.new_game()
    new_state, _ = engine.step(state, TickInput(flip=True), 16)
    assert state.player.gravity == GRAVITY_DOWN
    assert state.obstacles == []
    assert state.tick == 0
    assert new_state.player.gravity == GRAVITY_UP
    assert len(new_state.obstacles) == 1
    assert new_state.tick == 1


def test_step_emits_flip_and_score_events(engine):
    state = engine.new_game()
    _, events = engine.step(state, TickInput(flip=True), 100)
    assert events == [FlipEvent(direction=GRAVITY_UP), ScoreEvent(score=1)]


def test_collision_ends_round_and_records_best(engine, config):
    state = _doomed_state(engine, config, score=42, best=10)
    state, events = engine.step(state, TickInput(), 500)

    assert state.round_state.terminal
    assert events == [CollisionEvent(score=42, new_best=True)]
    assert state.round_state.best_score == 42
    # No score is awarded on the terminal tick
    assert state.round_state.score == 42


def test_collision_without_new_best(engine, config):
    state = _doomed_state(engine, config, score=5, best=10)
    state, events = engine.step(state, TickInput(), 16)
    assert events == [CollisionEvent(score=5, new_best=False)]
    assert state.round_state.best_score == 10


def test_passing_through_gap_is_safe(engine, config):
    state = _doomed_state(engine, config)
    state.player.y = 0.0
    state.player.gravity = GRAVITY_UP
    state, events = engine.step(state, TickInput(), 16)
    assert not state.round_state.terminal
    assert not any(isinstance(e, CollisionEvent) for e in events)


def test_terminal_state_is_idle(engine, config):
    state, _ = engine.step(_doomed_state(engine, config, score=3), TickInput(), 16)
    frozen_x = state.obstacles[0].x

    for _ in range(50):
        state, events = engine.step(state, TickInput(flip=True), 100)
        assert events == []

    assert state.round_state.terminal
    assert state.round_state.score == 3
    assert state.player.gravity == GRAVITY_DOWN
    assert state.obstacles[0].x == frozen_x


def test_restart_resets_round_and_keeps_best(engine, config):
    state, _ = engine.step(_doomed_state(engine, config, score=30, best=20), TickInput(), 16)
    assert state.round_state.best_score == 30

    state, events = engine.step(state, TickInput(restart=True), 16)
    assert events == []
    assert not state.round_state.terminal
    assert state.obstacles == []
    assert state.round_state.score == 0
    assert state.round_state.score_elapsed_ms == 0
    assert state.round_state.best_score == 30
    assert state.player == engine.core.spawn_player()
    assert state.spawn_timer == config.spawn_interval
    assert state.tick == 0


def test_restart_ignored_while_alive(engine):
    state = engine.new_game()
    state, _ = engine.step(state, TickInput(), 16)
    state, _ = engine.step(state, TickInput(restart=True), 16)
    assert state.tick == 2


def test_repeated_requests_flip_once(engine):
    latch = InputLatch()
    state = engine.new_game()
    for _ in range(5):
        latch.request_flip()

    state, events = engine.step(state, latch.poll(), 16)
    assert state.player.gravity == GRAVITY_UP
    assert [e for e in events if isinstance(e, FlipEvent)] == [FlipEvent(GRAVITY_UP)]

    state, events = engine.step(state, latch.poll(), 16)
    assert state.player.gravity == GRAVITY_UP
    assert not any(isinstance(e, FlipEvent) for e in events)


def test_clamp_invariant_over_long_run(engine, config):
    state = engine.new_game()
    for tick in range(3000):
        if state.round_state.terminal:
            state, _ = engine.step(state, TickInput(restart=True), 16)
            continue
        state, _ = engine.step(state, TickInput(flip=tick % 37 == 0), 16)
        assert 0.0 <= state.player.y <= config.max_player_y


def test_snapshot(engine, config):
    state = engine.new_game(best_score=4)
    state.player.velocity = 100.0
    state.obstacles = [Obstacle(x=300.0, gap_y=0.0, gap_height=150.0, gap_top=True)]
    snapshot = state.snapshot()
    assert snapshot.rotation == pytest.approx(45.0)
    assert snapshot.obstacles == ((300.0, 0.0, 150.0),)
    assert snapshot.best_score == 4
    assert snapshot.terminal is False


def test_engine_validates_config():
    with pytest.raises(ConfigError):
        SimulationEngine(GameConfig(min_gap=20.0))


def test_round_start_is_logged(engine, caplog):
    caplog.set_level(logging.DEBUG, logger="gravity_flip.engine")
    engine.new_game(best_score=8)
    assert "New round (best score 8)" in caplog.text
