"""Tick source backed by a pygame timer"""
import logging
import pygame
from tetris_game import tick_interval_ms

log = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickClock:
    """Posts TICK_EVENT periodically. Re-arming cancels the running timer first."""
    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.interval_ms = 0

    def arm(self, interval_ms: float):
        self.cancel()
        self.interval_ms = max(1, int(round(interval_ms)))
        pygame.time.set_timer(self.event_type, self.interval_ms)
        log.debug("tick clock armed at %d ms", self.interval_ms)

    def start(self):
        self.arm(tick_interval_ms(False))

    def cancel(self):
        pygame.time.set_timer(self.event_type, 0)
        self.interval_ms = 0
