"""Live timer for the tracked source file.

The controller owns the only repeating refresh task and the only status
surface. Every refresh reloads the metadata store, so a build recorded by
another process shows up on the next tick.
"""

import logging
from enum import Enum
from pathlib import Path
from types import TracebackType
from typing import Self

from ..constants import DONE_MARKER, REFRESH_INTERVAL, STOPPED_MARKER
from ..services.scheduler import RepeatingTask, Scheduler
from ..services.status_bar import StatusSurface
from .clock import Clock, now_ms
from .duration import format_duration
from .metadata_store import MetadataStore

logger = logging.getLogger(__name__)


class TimerState(str, Enum):
    """Controller states."""

    IDLE = "idle"
    RUNNING = "running"


class TimerController:
    """Start/stop state machine driving the status surface.

    States are ``IDLE`` and ``RUNNING`` (with ``tracked_path`` set). At most
    one repeating task exists; it is always cancelled before a new one is
    scheduled and before the surface is released.
    """

    def __init__(
        self,
        store: MetadataStore,
        surface: StatusSurface,
        scheduler: Scheduler,
        clock: Clock = now_ms,
        interval: float = REFRESH_INTERVAL,
    ) -> None:
        self.store = store
        self.surface = surface
        self.scheduler = scheduler
        self.clock = clock
        self.interval = interval
        self.tracked_path: str | None = None
        self._task: RepeatingTask | None = None
        self._closed = False

    @property
    def state(self) -> TimerState:
        return TimerState.RUNNING if self._task is not None else TimerState.IDLE

    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    def start(self, path: str) -> None:
        """Track path and refresh its status every interval."""
        if self._closed:
            raise RuntimeError("Timer controller is closed")

        self.store.ensure(path, self.clock())
        self._cancel_task()
        self.tracked_path = path

        if self.refresh(path):
            logger.debug(f"{path} already compiled; not starting timer")
            return

        self._task = self.scheduler.call_repeating(self.interval, lambda: self.refresh(path))
        logger.debug(f"Timer started for {path}")

    def stop(self) -> bool:
        """Stop a running timer and mark the display as stopped.

        The stored record is left untouched.

        Returns:
            True if a running timer was stopped
        """
        if self._task is None:
            return False
        self._cancel_task()
        self.surface.text += STOPPED_MARKER
        logger.debug(f"Timer stopped for {self.tracked_path}")
        return True

    def clear(self) -> None:
        """Stop without a stopped marker and blank the display."""
        self._cancel_task()
        self.tracked_path = None
        self.surface.text = ""

    def refresh(self, path: str) -> bool:
        """Recompute and publish the displayed duration for path.

        Returns:
            True if the file has been compiled (the timer is then idle)
        """
        record = self.store.get(path)
        if record is None:
            self.surface.text = ""
            return False

        duration = format_duration(record.elapsed_ms(self.clock()))
        name = Path(path).name
        if record.is_compiled:
            self.surface.text = f"{name}: {duration}{DONE_MARKER}"
            self._cancel_task()
            return True

        self.surface.text = f"{name}: {duration}"
        return False

    def close(self) -> None:
        """Stop the timer, then release the status surface."""
        if self._closed:
            return
        self.stop()
        self.surface.dispose()
        self._closed = True

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _cancel_task(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
