"""Cancellable periodic countdown driving the game clocks."""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from wordrush.game.time_provider import TimeProvider
from wordrush.utils.pygameasync import Clock

logger = logging.getLogger(__name__)


class Countdown:
    """Counts `duration` ticks down to zero, one tick per `interval_s`.

    tick() can also be awaited directly, which is how tests drive time. Once
    the countdown has expired or been cancelled every further tick is a no-op,
    so expiry fires at most once.
    """

    def __init__(self,
                 duration: int,
                 on_tick: Callable[[int], Awaitable[None]],
                 on_expire: Callable[[], Awaitable[None]],
                 interval_s: float,
                 time_provider: TimeProvider,
                 name: str = "countdown",
                 start_delay_s: float = 0.0) -> None:
        self.remaining = duration
        self.interval_s = interval_s
        self.start_delay_s = start_delay_s
        self.name = name
        self.paused = False
        self.expired = False
        self.cancelled = False
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._time_provider = time_provider
        self.started_ms = time_provider.get_ticks()
        self._task: Optional[asyncio.Task] = None

    @property
    def finished(self) -> bool:
        return self.expired or self.cancelled

    def start(self) -> None:
        if self._task is not None:
            raise RuntimeError(f"{self.name} already started")
        self.started_ms = self._time_provider.get_ticks()
        self._task = asyncio.create_task(self._run(), name=self.name)

    def pause(self) -> None:
        if not self.paused:
            logger.debug(f"{self.name}: paused at {self.remaining}")
        self.paused = True

    def cancel(self) -> None:
        self.cancelled = True
        task = self._task
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()

    async def tick(self) -> None:
        if self.finished or self.paused:
            return
        self.remaining -= 1
        if self.remaining <= 0:
            self.remaining = 0
            self.expired = True
        await self._on_tick(self.remaining)
        if self.expired:
            logger.info(f"{self.name}: expired after {self._time_provider.elapsed_ms(self.started_ms)}ms")
            await self._on_expire()

    async def _run(self) -> None:
        try:
            if self.start_delay_s > 0:
                await asyncio.sleep(self.start_delay_s)
            clock = Clock(self._time_provider.get_ticks)
            while not self.finished:
                await clock.tick(1.0 / self.interval_s)
                await self.tick()
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception(f"{self.name}: clock stopped at {self.remaining}")
