"""Input events delivered by the host to a timer session.

The host (the watch loop, the build wrapper, the keyboard) translates what
it observes into these events. Each event is handled synchronously.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FilesCreated:
    """New files appeared in the workspace."""

    paths: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ActiveFileChanged:
    """The file the user is working on changed (None when nothing is active)."""

    path: str | None = None


@dataclass(frozen=True)
class BuildCompleted:
    """A build process exited.

    Attributes:
        exit_code: Process exit status
        label: Task name; must contain the build keyword to count as a build
        command: Command line that was run, used to find the source file
    """

    exit_code: int
    label: str
    command: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class StopRequested:
    """The user asked to stop the running timer."""


HostEvent = FilesCreated | ActiveFileChanged | BuildCompleted | StopRequested
