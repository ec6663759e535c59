"""Timer session: the owner of all live timer state.

A session is created when the host starts, receives host events through
``handle`` and is torn down with ``deactivate``. Each event results in at
most one store read, one store write and one display update.
"""

import logging
from pathlib import Path
from types import TracebackType
from typing import Self

from ..config import CppTimerConfig
from ..models import (
    ActiveFileChanged,
    BuildCompleted,
    FilesCreated,
    HostEvent,
    StopRequested,
    TimingRecord,
)
from ..services.build import is_build_success, resolve_build_source
from ..services.scheduler import Scheduler
from ..services.status_bar import StatusSurface
from .clock import Clock, now_ms
from .compile_marker import CompileMarker, Notifier
from .metadata_store import MetadataStore
from .timer_controller import TimerController

logger = logging.getLogger(__name__)


class TimerSession:
    """Routes host events to the store, the controller and the compile marker."""

    def __init__(
        self,
        workspace_root: Path | None,
        surface: StatusSurface,
        scheduler: Scheduler,
        notify: Notifier,
        config: CppTimerConfig | None = None,
        clock: Clock = now_ms,
    ) -> None:
        self.workspace_root = workspace_root
        self.config = config or CppTimerConfig()
        self.clock = clock
        self.notify = notify
        self.store = MetadataStore(workspace_root)
        self.controller = TimerController(
            self.store,
            surface,
            scheduler,
            clock=clock,
            interval=self.config.timer.refresh_interval,
        )
        self.marker = CompileMarker(self.store, self.controller, notify, clock=clock)

    def activate(self, active_path: str | None = None) -> None:
        """Start up, timing active_path right away if it is a tracked type."""
        if active_path is not None and self.config.timer.is_tracked(active_path):
            self.controller.start(active_path)
        logger.debug(f"Session active in {self.workspace_root or '<no workspace>'}")

    def deactivate(self) -> None:
        """Stop the timer and release the status surface."""
        self.controller.close()

    def handle(self, event: HostEvent) -> None:
        """Apply one host event."""
        if isinstance(event, FilesCreated):
            self._on_files_created(event)
        elif isinstance(event, ActiveFileChanged):
            self._on_active_file_changed(event)
        elif isinstance(event, BuildCompleted):
            self._on_build_completed(event)
        elif isinstance(event, StopRequested):
            self._on_stop_requested()
        else:
            raise TypeError(f"Unknown host event: {event!r}")

    def _on_files_created(self, event: FilesCreated) -> None:
        tracked = [p for p in event.paths if self.config.timer.is_tracked(p)]
        if not tracked:
            return
        records = self.store.load()
        now = self.clock()
        added = [p for p in tracked if p not in records]
        for path in added:
            records[path] = TimingRecord(created_at=now)
        if added:
            self.store.save(records)
            logger.info(f"Tracking {len(added)} new file(s): {', '.join(added)}")

    def _on_active_file_changed(self, event: ActiveFileChanged) -> None:
        if event.path is not None and self.config.timer.is_tracked(event.path):
            self.controller.start(event.path)
        else:
            self.controller.clear()

    def _on_build_completed(self, event: BuildCompleted) -> None:
        if not is_build_success(event, self.config.build.keyword):
            logger.debug(f"Ignoring build event {event.label!r} (exit code {event.exit_code})")
            return

        source = resolve_build_source(
            event,
            self.workspace_root,
            compilers=self.config.build.compilers,
            extensions=self.config.timer.extensions,
            fallback=self.controller.tracked_path,
        )
        if source is None:
            logger.debug("Successful build does not match any tracked file")
            return
        self.marker.mark_compiled(source)

    def _on_stop_requested(self) -> None:
        self.controller.stop()
        self.notify("Timer manually stopped.")

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.deactivate()
