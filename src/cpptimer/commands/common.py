"""Helpers shared by cpptimer commands."""

from pathlib import Path
from typing import Annotated

import typer

from ..config import CppTimerConfig, load_config
from ..core import resolve_workspace_root
from ..errors import ConfigError
from ..output import OutputContext

WorkspaceOption = Annotated[
    Path | None,
    typer.Option(
        "--workspace",
        "-w",
        help="Workspace root (defaults to the current directory)",
    ),
]


def open_workspace(workspace: Path | None) -> Path | None:
    """Resolve the workspace root for a command."""
    return resolve_workspace_root([workspace or Path.cwd()])


def load_workspace_config(ctx: OutputContext, root: Path | None) -> CppTimerConfig:
    """Load config, exiting with code 1 if it is invalid."""
    try:
        return load_config(root)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None
