import pygame

from gravity_flip.data_models import TickInput
from gravity_flip.input import InputLatch


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_poll_consumes_and_clears():
    latch = InputLatch()
    latch.request_flip()
    latch.request_flip()
    assert latch.poll() == TickInput(flip=True)
    assert latch.poll() == TickInput()


def test_any_key_or_click_flips():
    latch = InputLatch()
    for event in (_key(pygame.K_SPACE), _key(pygame.K_a),
                  pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5))):
        assert latch.handle_event(event, terminal=False)
        assert latch.poll() == TickInput(flip=True)


def test_press_while_terminal_requests_restart():
    latch = InputLatch()
    assert latch.handle_event(_key(pygame.K_SPACE), terminal=True)
    assert latch.poll() == TickInput(restart=True)


def test_non_press_events_are_ignored():
    latch = InputLatch()
    assert not latch.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE), False)
    assert not latch.handle_event(_key(pygame.K_ESCAPE), False)
    assert not latch.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1)), False)
    assert latch.poll() == TickInput()
