"""Recording of a file's first successful build."""

import logging
from collections.abc import Callable
from pathlib import Path

from .clock import Clock, now_ms
from .duration import format_duration
from .metadata_store import MetadataStore
from .timer_controller import TimerController

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


class CompileMarker:
    """Stamps ``compiled_at`` once and tells the user how long it took."""

    def __init__(
        self,
        store: MetadataStore,
        controller: TimerController | None,
        notify: Notifier,
        clock: Clock = now_ms,
    ) -> None:
        self.store = store
        self.controller = controller
        self.notify = notify
        self.clock = clock

    def mark_compiled(self, path: str) -> bool:
        """Record the first successful build of path.

        Does nothing if path is not tracked or was already compiled.

        Returns:
            True if the completion time was recorded by this call
        """
        records = self.store.load()
        record = records.get(path)
        if record is None:
            logger.debug(f"Build of untracked file {path}; ignoring")
            return False
        if record.is_compiled:
            logger.debug(f"{path} already compiled at {record.compiled_at}; ignoring")
            return False

        record.mark_compiled(self.clock())
        self.store.save(records)

        elapsed = format_duration(record.elapsed_ms(self.clock()))
        logger.info(f"{path} compiled {elapsed} after creation")
        self.notify(f"First successful compilation of {Path(path).name} after {elapsed}")

        if self.controller is not None:
            self.controller.refresh(path)
        return True
