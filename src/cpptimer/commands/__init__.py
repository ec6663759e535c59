"""CLI command implementations for cpptimer.

Each command lives in its own module, separated from the CLI framework
setup in cli.py.
"""

from .build import build
from .init import init
from .status import status
from .track import track
from .watch import watch

__all__ = [
    "build",
    "init",
    "status",
    "track",
    "watch",
]
