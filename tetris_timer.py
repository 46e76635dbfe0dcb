
"""Periodic tick scheduler backed by pygame's timer events"""
import pygame

TICK_EVENT = pygame.USEREVENT + 1

class TickTimer:
    """Posts TICK_EVENT every `period_ms` while running."""
    def __init__(self, period_ms: int, event_type: int = TICK_EVENT):
        self.period_ms = int(period_ms)
        self.event_type = event_type
        self.running = False

    def start(self):
        pygame.time.set_timer(self.event_type, self.period_ms)
        self.running = True

    def stop(self):
        pygame.time.set_timer(self.event_type, 0)
        self.running = False
