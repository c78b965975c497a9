#!/usr/bin/env python3
"""
app.py

Gravity Flip game client: pygame window, input, audio, storage and the frame loop.
"""

import argparse
import logging
from typing import List, Optional

import pygame

from .config import ConfigError, GameConfig
from .constants import DB_FILE, SAMPLE_RATE
from .data_models import CollisionEvent, Event
from .engine import SimulationEngine
from .input import InputLatch, QUIT_KEY
from .audio import ToneSynth
from .render import Renderer
from .storage import ScoreStore

logger = logging.getLogger(__name__)


class GravityFlipGame:
    def __init__(self, config: GameConfig, store: ScoreStore, sound: bool = True):
        self.config = config
        self.engine = SimulationEngine(config)
        self.store = store

        # The mixer must be configured before pygame.init() starts it
        pygame.mixer.pre_init(SAMPLE_RATE, -16, 1)
        pygame.init()
        self.screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption("Gravity Flip")

        self.synth = ToneSynth(enabled=sound)
        self.renderer = Renderer(self.screen, config)
        self.latch = InputLatch()
        self.clock = pygame.time.Clock()

        # --- Game Logic ---
        self.state = self.engine.new_game(best_score=self.store.get_best_score())
        self.started = False

    def run(self):
        """The main execution loop: one simulation step per display frame."""
        logger.info("Starting Gravity Flip (best score %d)", self.state.round_state.best_score)
        while self.frame():
            pass

        self.store.close()
        pygame.quit()

    def frame(self) -> bool:
        """Runs one display frame. Returns False once the player quits."""
        running = True
        dt_ms = min(self.clock.tick(self.config.fps), self.config.max_frame_ms)

        # Handle Pygame Events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == QUIT_KEY:
                running = False
            else:
                self.latch.handle_event(event, terminal=self.state.round_state.terminal)

        if not self.started:
            # The press that dismisses the intro is not a flip
            self.started = self.latch.poll().flip
        else:
            self.state, events = self.engine.step(self.state, self.latch.poll(), dt_ms)
            self._dispatch(events)

        self.renderer.draw(self.state.snapshot(), started=self.started)
        pygame.display.flip()
        return running

    def _dispatch(self, events: List[Event]):
        """Hands step events to audio and persistence."""
        self.synth.handle(events)
        for event in events:
            if isinstance(event, CollisionEvent) and event.new_best:
                self.store.set_best_score(event.score)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gravity-flip", description="Single-button gravity flipping arcade game.")
    parser.add_argument("--db", default=DB_FILE,
                        help=f"SQLite file for the best score (default: {DB_FILE})")
    parser.add_argument("--fps", type=int, default=GameConfig.fps,
                        help="frames (and simulation steps) per second")
    parser.add_argument("--mute", action="store_true", help="disable sound")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig(fps=args.fps).validate()
    except ConfigError as e:
        parser.error(str(e))

    game = GravityFlipGame(config, ScoreStore(args.db), sound=not args.mute)
    game.run()


if __name__ == "__main__":
    main()
