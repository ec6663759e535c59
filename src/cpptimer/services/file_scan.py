"""Polling detection of newly created source files."""

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class FileScanner:
    """Reports tracked files that appeared since the previous poll.

    The first poll records what already exists and reports nothing, so
    only files created while the scanner runs count as new. Hidden
    directories and directories named in ``ignore`` are not descended.
    """

    def __init__(
        self,
        root: Path,
        extensions: Sequence[str] = (".cpp",),
        ignore: Iterable[str] = (),
    ) -> None:
        self.root = root
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.ignore = set(ignore)
        self._known: set[str] | None = None

    def scan(self) -> set[str]:
        """Return absolute paths of every tracked file under root."""
        found: set[str] = set()
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [
                d for d in dirnames if not d.startswith(".") and d not in self.ignore
            ]
            for name in filenames:
                if name.lower().endswith(self.extensions):
                    found.add(str(Path(dirpath, name).resolve()))
        return found

    def poll(self) -> list[str]:
        """Return files created since the last poll, sorted."""
        current = self.scan()
        if self._known is None:
            self._known = current
            logger.debug(f"Baseline: {len(current)} tracked file(s) under {self.root}")
            return []
        created = sorted(current - self._known)
        self._known = current
        return created
