"""File-backed store of per-file timing records.

The whole mapping lives in a single JSON file in the workspace root. It is
read fresh on every load and rewritten in full on every save; there is no
locking, so the last writer wins. Without a workspace root every operation
degrades to an empty result or a no-op.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from ..constants import STORAGE_FILE
from ..models import Metadata, TimingRecord

logger = logging.getLogger(__name__)


class MetadataStore:
    """Durable mapping from absolute file path to TimingRecord."""

    def __init__(self, workspace_root: Path | None) -> None:
        self.workspace_root = workspace_root
        self._last_error: str | None = None

    @property
    def path(self) -> Path | None:
        """Location of the metadata file, or None without a workspace."""
        if self.workspace_root is None:
            return None
        return self.workspace_root / STORAGE_FILE

    def load(self) -> dict[str, TimingRecord]:
        """Read all records.

        Returns an empty mapping when there is no workspace, the file does
        not exist, or the file cannot be read or parsed. A read or parse
        failure is logged as a warning the first time it is seen.
        """
        path = self.path
        if path is None or not path.exists():
            return {}

        try:
            content = path.read_text(encoding="utf-8")
            records = Metadata.model_validate_json(content).root
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            self._report_failure(path, e)
            return {}

        self._last_error = None
        return records

    def save(self, records: dict[str, TimingRecord]) -> None:
        """Overwrite the metadata file with the full mapping.

        Write failures are logged; the next save tries again.
        """
        path = self.path
        if path is None:
            logger.debug("No workspace root; not persisting timing records")
            return
        data = Metadata(records).model_dump_json(indent=2, by_alias=True)
        try:
            path.write_text(data + "\n", encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not write timing metadata {path}: {e}")

    def get(self, file_path: str) -> TimingRecord | None:
        """Load the record for one file."""
        return self.load().get(file_path)

    def ensure(self, file_path: str, now: int) -> TimingRecord:
        """Return the record for file_path, creating it if absent.

        The store is written only when a new record was added.
        """
        records = self.load()
        record = records.get(file_path)
        if record is None:
            record = TimingRecord(created_at=now)
            records[file_path] = record
            self.save(records)
            logger.debug(f"Tracking {file_path} from {now}")
        return record

    def _report_failure(self, path: Path, error: Exception) -> None:
        message = f"{type(error).__name__}: {error}"
        if message != self._last_error:
            logger.warning(f"Ignoring unreadable timing metadata {path}: {error}")
        self._last_error = message
