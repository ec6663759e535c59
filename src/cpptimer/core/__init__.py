"""Core timer logic for cpptimer.

- duration: elapsed time formatting
- metadata_store: file-backed timing records
- timer_controller: live status state machine
- compile_marker: first-build recording
- session: host event dispatch and lifecycle
"""

from .clock import Clock, now_ms
from .compile_marker import CompileMarker
from .duration import format_duration
from .metadata_store import MetadataStore
from .session import TimerSession
from .timer_controller import TimerController, TimerState
from .workspace import resolve_workspace_root

__all__ = [
    "Clock",
    "CompileMarker",
    "MetadataStore",
    "TimerController",
    "TimerSession",
    "TimerState",
    "format_duration",
    "now_ms",
    "resolve_workspace_root",
]
