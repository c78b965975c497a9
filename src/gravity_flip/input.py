"""
input.py: Single-slot, edge-triggered input buffer between pygame events and the step.
"""

import pygame

from .data_models import TickInput

QUIT_KEY = pygame.K_ESCAPE


class InputLatch:
    """
    Holds at most one pending flip and one pending restart.
    Any number of presses between two polls count as one.
    """

    def __init__(self):
        self.pending_flip = False
        self.pending_restart = False

    def request_flip(self):
        self.pending_flip = True

    def request_restart(self):
        self.pending_restart = True

    def poll(self) -> TickInput:
        """Consumes and clears both slots."""
        tick_input = TickInput(flip=self.pending_flip, restart=self.pending_restart)
        self.pending_flip = False
        self.pending_restart = False
        return tick_input

    def handle_event(self, event: pygame.event.Event, terminal: bool) -> bool:
        """
        Records a press from a KEYDOWN or MOUSEBUTTONDOWN event.
        A press restarts a finished round and flips gravity otherwise.
        Returns True if the event was a press.
        """
        is_key = event.type == pygame.KEYDOWN and event.key != QUIT_KEY
        if not (is_key or event.type == pygame.MOUSEBUTTONDOWN):
            return False

        if terminal:
            self.request_restart()
        else:
            self.request_flip()
        return True
