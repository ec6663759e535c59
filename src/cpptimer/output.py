"""Output formatting for the cpptimer CLI."""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console


@dataclass
class OutputContext:
    """Where CLI results and user notifications go.

    In JSON mode human-oriented text is suppressed and every result,
    error and notification is emitted as one JSON object per line.
    """

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print message unless in JSON mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data in JSON mode."""
        if self.json_mode:
            print(json.dumps(data, default=str))

    def result(self, data: dict[str, Any], message: str = "") -> None:
        """Print a command result in the appropriate format."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def error(self, message: str) -> None:
        """Print an error in the appropriate format."""
        if self.json_mode:
            self.print_json({"error": message})
        else:
            self.console.print(f"[red]Error: {message}[/red]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print a success message in the appropriate format."""
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{message}[/green]")

    def notify(self, message: str) -> None:
        """Show an informational notification to the user."""
        if self.json_mode:
            self.print_json({"notification": message})
        else:
            self.console.print(f"[bold cyan]ℹ[/bold cyan] {message}")


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
