"""Data models for cpptimer.

- Persisted timing state (TimingRecord, Metadata)
- Host input events (FilesCreated, ActiveFileChanged, BuildCompleted, StopRequested)
"""

from .events import ActiveFileChanged, BuildCompleted, FilesCreated, HostEvent, StopRequested
from .record import Metadata, TimingRecord

__all__ = [
    "ActiveFileChanged",
    "BuildCompleted",
    "FilesCreated",
    "HostEvent",
    "Metadata",
    "StopRequested",
    "TimingRecord",
]
