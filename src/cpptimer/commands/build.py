"""Build command: run a build and record the first success."""

from pathlib import Path

import typer

from ..core import CompileMarker, MetadataStore, now_ms
from ..errors import BuildError
from ..output import get_output_context
from ..services import is_build_success, resolve_build_source, run_build
from .common import WorkspaceOption, load_workspace_config, open_workspace


def build(
    command: list[str] = typer.Argument(..., help="Build command, after --"),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Source file this build compiles (if the command doesn't name one)",
    ),
    label: str | None = typer.Option(
        None,
        "--label",
        "-l",
        help="Task label (defaults to the configured build keyword)",
    ),
    workspace: WorkspaceOption = None,
) -> None:
    """Run COMMAND; on success mark its source file as compiled.

    Example: cpptimer build -- g++ main.cpp -o main
    """
    ctx = get_output_context()

    root = open_workspace(workspace)
    config = load_workspace_config(ctx, root)

    try:
        event = run_build(
            command,
            cwd=root or Path.cwd(),
            timeout=config.build.timeout,
            label=label or config.build.keyword,
        )
    except BuildError as e:
        ctx.error(str(e))
        raise typer.Exit(127) from None

    if not event.succeeded:
        ctx.print(f"[red]Build failed with exit code {event.exit_code}[/red]")
        ctx.result({"exit_code": event.exit_code, "file": None, "marked": False})
        raise typer.Exit(event.exit_code)
    if not is_build_success(event, config.build.keyword):
        ctx.print(f"[dim]'{event.label}' is not a build task; timer not updated[/dim]")
        ctx.result({"exit_code": event.exit_code, "file": None, "marked": False})
        return

    source = resolve_build_source(
        event,
        root,
        compilers=config.build.compilers,
        extensions=config.timer.extensions,
        fallback=str(file.expanduser().resolve()) if file else None,
    )
    marked = False
    if source is not None:
        marker = CompileMarker(MetadataStore(root), None, ctx.notify, clock=now_ms)
        marked = marker.mark_compiled(source)

    ctx.result({"exit_code": event.exit_code, "file": source, "marked": marked})
