"""Millisecond clocks for event timestamps and countdown pacing."""
from abc import ABC, abstractmethod
import pygame


class TimeProvider(ABC):
    """Source of the `now_ms` stamped on every game event."""

    @abstractmethod
    def get_ticks(self) -> int:
        """Milliseconds since the clock started."""

    def elapsed_ms(self, since_ms: int) -> int:
        return max(0, self.get_ticks() - since_ms)


class SystemTimeProvider(TimeProvider):
    """pygame's tick counter; starts at pygame.init()."""

    def get_ticks(self) -> int:
        return pygame.time.get_ticks()


class MockTimeProvider(TimeProvider):
    """Frozen clock that tests move by hand."""

    def __init__(self, initial_ms: int = 0):
        self.now_ms = initial_ms

    def get_ticks(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        if ms < 0:
            raise ValueError("time only moves forward")
        self.now_ms += ms
