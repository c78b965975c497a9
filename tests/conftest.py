import os

# Headless pygame for display, font and mixer backed tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from gravity_flip.config import GameConfig  # noqa: E402
from gravity_flip.engine import SimulationEngine  # noqa: E402


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def engine(config: GameConfig) -> SimulationEngine:
    return SimulationEngine(config)
