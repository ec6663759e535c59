"""Watch command: live build timer in the terminal."""

import asyncio
import contextlib
import logging
import signal
from pathlib import Path

import typer

from ..config import CppTimerConfig
from ..core import TimerSession
from ..models import ActiveFileChanged, FilesCreated, StopRequested
from ..output import get_output_context
from ..services import AsyncioScheduler, FileScanner, RichStatusBar
from .common import WorkspaceOption, load_workspace_config, open_workspace

logger = logging.getLogger(__name__)


async def run_watch(
    session: TimerSession,
    scanner: FileScanner | None,
    poll_interval: float,
    stop: asyncio.Event,
) -> None:
    """Feed host events to session until stop is set.

    Newly created tracked files are recorded and become the active file,
    the way a freshly created file is opened in an editor.
    """
    while not stop.is_set():
        if scanner is not None:
            created = scanner.poll()
            if created:
                session.handle(FilesCreated(tuple(created)))
                session.handle(ActiveFileChanged(created[-1]))
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(stop.wait(), timeout=poll_interval)
    session.handle(StopRequested())


async def _watch(root: Path | None, active: str | None, config: CppTimerConfig) -> None:
    ctx = get_output_context()
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    with contextlib.suppress(NotImplementedError):
        loop.add_signal_handler(signal.SIGINT, stop.set)
        loop.add_signal_handler(signal.SIGTERM, stop.set)

    surface = RichStatusBar(ctx.console)
    scanner = None
    if root is not None:
        scanner = FileScanner(root, config.timer.extensions, config.watch.ignore)

    with TimerSession(
        root,
        surface,
        AsyncioScheduler(loop),
        ctx.notify,
        config=config,
    ) as session:
        surface.show()
        session.activate(active)
        await run_watch(session, scanner, config.watch.poll_interval, stop)


def watch(
    file: Path | None = typer.Argument(None, help="File to time right away"),
    workspace: WorkspaceOption = None,
) -> None:
    """Show a live timer for the active C++ file until Ctrl+C."""
    ctx = get_output_context()

    root = open_workspace(workspace)
    if root is None:
        logger.warning("No workspace open; timings will not be saved")
    config = load_workspace_config(ctx, root)

    active = str(file.expanduser().resolve()) if file else None
    if active is not None and not config.timer.is_tracked(active):
        ctx.error(f"Not a tracked file type ({', '.join(config.timer.extensions)}): {file}")
        raise typer.Exit(1)

    asyncio.run(_watch(root, active, config))
