"""Single-line status indicator rendered in the terminal."""

from typing import Protocol

from rich.console import Console
from rich.live import Live
from rich.text import Text

TIMER_ICON = "⏱"


class StatusSurface(Protocol):
    """The one place the timer writes its status text."""

    text: str

    def dispose(self) -> None: ...


class RichStatusBar:
    """Status indicator backed by a rich Live display.

    The line shows the icon, the status text and a dim hint describing how
    to stop the timer. Setting ``text`` redraws the line immediately.
    """

    def __init__(self, console: Console, hint: str = "Ctrl+C to stop") -> None:
        self.hint = hint
        self._text = ""
        self._live = Live(
            self._render(),
            console=console,
            auto_refresh=False,
            transient=False,
        )
        self._started = False
        self._disposed = False

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        if self._started and not self._disposed:
            self._live.update(self._render(), refresh=True)

    def show(self) -> None:
        """Start drawing the indicator."""
        if self._started or self._disposed:
            return
        self._live.start(refresh=True)
        self._started = True

    def dispose(self) -> None:
        """Stop drawing; the last line stays on screen. Safe to call twice."""
        if self._disposed:
            return
        self._disposed = True
        if self._started:
            self._live.update(self._render(final=True), refresh=True)
            self._live.stop()

    def _render(self, final: bool = False) -> Text:
        if not self._text:
            return Text("")
        line = Text(f"{TIMER_ICON} {self._text}")
        if self.hint and not final:
            line.append(f"  ({self.hint})", style="dim")
        return line
