"""Track command: start timing a file without a live display."""

from pathlib import Path

import typer

from ..core import MetadataStore, now_ms
from ..output import get_output_context
from .common import WorkspaceOption, load_workspace_config, open_workspace


def track(
    file: Path = typer.Argument(..., help="Source file to time"),
    workspace: WorkspaceOption = None,
) -> None:
    """Record FILE as created now, unless it is already tracked."""
    ctx = get_output_context()

    root = open_workspace(workspace)
    if root is None:
        ctx.error("No workspace open; nothing to record timings in")
        raise typer.Exit(1)

    config = load_workspace_config(ctx, root)
    path = str(file.expanduser().resolve())
    if not config.timer.is_tracked(path):
        ctx.error(f"Not a tracked file type ({', '.join(config.timer.extensions)}): {file}")
        raise typer.Exit(1)

    store = MetadataStore(root)
    existing = store.get(path)
    record = store.ensure(path, now_ms())
    data = {"file": path, "created_at": record.created_at, "new": existing is None}
    if existing is None:
        ctx.success(f"Tracking {file.name}", data)
    else:
        ctx.result(data, f"Already tracking {file.name}")
