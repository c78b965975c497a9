"""
audio.py: Best-effort procedural tones for flip and collision events.
A missing or broken mixer leaves the game silent, never crashed.
"""

import array
import logging
import math
import random
from typing import Dict, Iterable, Optional

import pygame

from .constants import (
    SAMPLE_RATE, FLIP_UP_FREQ, FLIP_DOWN_FREQ, FLIP_TONE_MS,
    CRASH_FREQ, CRASH_TONE_MS, VOLUME
)
from .data_models import Event, FlipEvent, CollisionEvent, GRAVITY_UP

logger = logging.getLogger(__name__)

AMPLITUDE = 12000


def tone_samples(freq: float, duration_ms: int, sample_rate: int,
                 channels: int = 1, noise: float = 0.0,
                 rng: Optional[random.Random] = None) -> array.array:
    """Signed 16-bit sine tone with a linear fade-out, optionally mixed with noise."""
    rng = rng or random.Random(0)
    n_samples = int(sample_rate * duration_ms / 1000)
    buf = array.array("h")
    for i in range(n_samples):
        fade = 1.0 - i / n_samples
        s = math.sin(2 * math.pi * freq * i / sample_rate)
        if noise:
            s = (1.0 - noise) * s + noise * rng.uniform(-1.0, 1.0)
        value = int(AMPLITUDE * fade * s)
        buf.extend([value] * channels)
    return buf


class ToneSynth:
    """Plays a short tone per event. Disables itself if the mixer cannot start."""

    def __init__(self, enabled: bool = True):
        self.enabled = False
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        if not enabled:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self._build_sounds()
            self.enabled = True
        except (pygame.error, ValueError) as e:
            logger.warning("Audio disabled: %s", e)
            self.sounds = {}

    def _build_sounds(self):
        freq, _size, channels = pygame.mixer.get_init()
        specs = {
            "flip_up": tone_samples(FLIP_UP_FREQ, FLIP_TONE_MS, freq, channels),
            "flip_down": tone_samples(FLIP_DOWN_FREQ, FLIP_TONE_MS, freq, channels),
            "crash": tone_samples(CRASH_FREQ, CRASH_TONE_MS, freq, channels, noise=0.6),
        }
        for name, samples in specs.items():
            sound = pygame.mixer.Sound(buffer=samples.tobytes())
            sound.set_volume(VOLUME)
            self.sounds[name] = sound

    def play(self, name: str):
        if not self.enabled or name not in self.sounds:
            return
        try:
            self.sounds[name].play()
        except pygame.error as e:
            logger.warning("Could not play %s: %s", name, e)

    def handle(self, events: Iterable[Event]):
        """Fire-and-forget reaction to the events of one step."""
        for event in events:
            if isinstance(event, FlipEvent):
                self.play("flip_up" if event.direction == GRAVITY_UP else "flip_down")
            elif isinstance(event, CollisionEvent):
                self.play("crash")
