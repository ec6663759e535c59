"""Repeating callbacks on a single-threaded event loop."""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class RepeatingTask(Protocol):
    """Handle to a scheduled repeating callback."""

    @property
    def cancelled(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Something that can run a callback every ``interval`` seconds."""

    def call_repeating(self, interval: float, callback: Callable[[], None]) -> RepeatingTask: ...


class AsyncioRepeatingTask:
    """Repeating callback re-armed with ``loop.call_later`` after every run.

    Runs never overlap: the next run is scheduled only after the current
    callback returns, and not at all if the callback cancelled the task.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: Callable[[], None],
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        self._handle: asyncio.TimerHandle | None = loop.call_later(interval, self._run)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _run(self) -> None:
        self._handle = None
        if self._cancelled:
            return
        try:
            self._callback()
        except Exception:
            logger.exception("Repeating callback failed; retrying on next tick")
        if not self._cancelled:
            self._handle = self._loop.call_later(self._interval, self._run)


class AsyncioScheduler:
    """Scheduler bound to one asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_repeating(
        self, interval: float, callback: Callable[[], None]
    ) -> AsyncioRepeatingTask:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        return AsyncioRepeatingTask(self.loop, interval, callback)
