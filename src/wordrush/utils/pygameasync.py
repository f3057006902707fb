import asyncio
import logging
import pygame
from typing import Any, Callable, Union
from collections import defaultdict
from dataclasses import fields
from enum import Enum

logger = logging.getLogger(__name__)


class Clock:
    """Sleeps until the next frame of a fixed rate, measured on pygame ticks."""
    def __init__(self, time_func: Callable[[], int] = pygame.time.get_ticks) -> None:
        self.time_func = time_func
        self.last_tick = time_func() or 0

    async def tick(self, fps: float = 0) -> None:
        if fps <= 0:
            return
        frame_ms = 1000.0 / fps
        spent_ms = self.time_func() - self.last_tick
        await asyncio.sleep(max(0.0, frame_ms - spent_ms) / 1000)
        self.last_tick = self.time_func()


def event_name(event_type: Union[Enum, str]) -> str:
    return event_type.value if isinstance(event_type, Enum) else str(event_type)


def event_args(event: Any) -> tuple:
    """Positional listener arguments for a typed event: every field but event_type."""
    return tuple(getattr(event, f.name) for f in fields(event) if f.name != 'event_type')


class EventEngine:
    """Queue-backed dispatcher from the game engine to its listeners.

    Each game session owns one engine. Listeners are coroutines registered per
    event type and awaited in registration order with the event's fields, so a
    slow presenter never blocks the state machine that triggered the event.
    """
    def __init__(self) -> None:
        self.listeners: dict[str, list[Callable]] = defaultdict(list)
        self.queue: asyncio.Queue = asyncio.Queue()
        self.running = False
        self._worker_task = None

    def on(self, event_type: Union[Enum, str]) -> Callable:
        def wrapper(func: Callable) -> Callable:
            self.listeners[event_name(event_type)].append(func)
            return func
        return wrapper

    def trigger(self, event: Any) -> None:
        """Queue a typed event; dropped unless the engine is running."""
        if not self.running:
            logger.debug(f"trigger: engine stopped, dropping {event_name(event.event_type)}")
            return
        self.queue.put_nowait(event)

    async def start(self) -> None:
        self.running = True
        self._worker_task = asyncio.create_task(self._worker(), name="event_worker")

    async def stop(self) -> None:
        try:
            await asyncio.wait_for(self.queue.join(), timeout=2.0)
        except asyncio.TimeoutError:
            logger.warning("stop: event queue join timed out, undelivered events dropped")
        self.running = False
        if self._worker_task:
            self._worker_task.cancel()
            self._worker_task = None

    async def drain(self) -> None:
        """Wait until every queued event has been delivered."""
        await self.queue.join()

    async def _dispatch(self, event: Any) -> None:
        name = event_name(event.event_type)
        args = event_args(event)
        for func in self.listeners[name]:
            try:
                await func(*args)
            except Exception as e:
                logger.error(f"_dispatch: {name} handler {getattr(func, '__name__', func)} failed: {e}")

    async def _worker(self) -> None:
        while self.running:
            try:
                event = await self.queue.get()
            except asyncio.CancelledError:
                break
            try:
                await self._dispatch(event)
            finally:
                self.queue.task_done()
