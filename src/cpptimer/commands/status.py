"""Status command: overview of every tracked file."""

from datetime import datetime
from pathlib import Path

import typer
from rich.table import Table

from ..core import MetadataStore, format_duration, now_ms
from ..output import get_output_context
from .common import WorkspaceOption, open_workspace


def _display_path(path: str, root: Path) -> str:
    try:
        return str(Path(path).relative_to(root))
    except ValueError:
        return path


def status(workspace: WorkspaceOption = None) -> None:
    """Show how long each tracked file took (or is taking) to build."""
    ctx = get_output_context()

    root = open_workspace(workspace)
    if root is None:
        ctx.error("No workspace open")
        raise typer.Exit(1)

    records = MetadataStore(root).load()
    now = now_ms()

    if not records:
        ctx.result({"files": []}, "No tracked files yet. Start with: cpptimer watch")
        return

    rows = []
    for path, record in sorted(records.items(), key=lambda item: item[1].created_at):
        rows.append(
            {
                "file": path,
                "created_at": record.created_at,
                "compiled_at": record.compiled_at,
                "elapsed_ms": record.elapsed_ms(now),
                "elapsed": format_duration(record.elapsed_ms(now)),
                "state": "done" if record.is_compiled else "running",
            }
        )

    if ctx.json_mode:
        ctx.print_json({"files": rows})
        return

    table = Table(title=f"Build timers in {root}")
    table.add_column("File")
    table.add_column("Created")
    table.add_column("Elapsed", justify="right")
    table.add_column("State")
    for row in rows:
        try:
            created = datetime.fromtimestamp(row["created_at"] / 1000).strftime("%Y-%m-%d %H:%M")
        except (ValueError, OverflowError, OSError):
            created = str(row["created_at"])
        state = "[green]done[/green]" if row["state"] == "done" else "[yellow]running[/yellow]"
        table.add_row(
            _display_path(row["file"], root),
            created,
            row["elapsed"],
            state,
        )
    ctx.console.print(table)
