"""Host-side services for cpptimer.

- scheduler: repeating callbacks on an asyncio loop
- status_bar: rich Live status indicator
- file_scan: polling detection of new source files
- build: build execution and source correlation
"""

from .build import extract_source_file, is_build_success, resolve_build_source, run_build
from .file_scan import FileScanner
from .scheduler import AsyncioRepeatingTask, AsyncioScheduler, RepeatingTask, Scheduler
from .status_bar import RichStatusBar, StatusSurface

__all__ = [
    "AsyncioRepeatingTask",
    "AsyncioScheduler",
    "FileScanner",
    "RepeatingTask",
    "RichStatusBar",
    "Scheduler",
    "StatusSurface",
    "extract_source_file",
    "is_build_success",
    "resolve_build_source",
    "run_build",
]
