"""Init command: write the configuration template."""

import typer

from ..config import write_config_template
from ..constants import CONFIG_FILE
from ..output import get_output_context
from .common import WorkspaceOption, open_workspace


def init(workspace: WorkspaceOption = None) -> None:
    """Create a .cpp-timer.toml config template in the workspace."""
    ctx = get_output_context()

    root = open_workspace(workspace)
    if root is None:
        ctx.error("Workspace folder does not exist")
        raise typer.Exit(1)

    config_path = root / CONFIG_FILE
    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        ctx.result({"config": str(config_path), "created": False})
        return

    write_config_template(root)
    ctx.success(
        f"Created config template: {config_path}",
        {"config": str(config_path), "created": True},
    )
