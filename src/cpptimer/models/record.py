"""Timing record models persisted to .cpp-timer.json.

Each tracked source file maps to one TimingRecord. The file on disk uses
camelCase keys so it stays readable next to other editor metadata:

    {
      "/ws/a.cpp": {
        "createdAt": 1700000000000,
        "compiledAt": null
      }
    }
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from ..errors import RecordAlreadyCompiledError


class TimingRecord(BaseModel):
    """Creation and first-build timestamps for one source file.

    Attributes:
        created_at: When the file was first observed (ms since epoch).
        compiled_at: When the first successful build was seen, or None.
    """

    model_config = ConfigDict(populate_by_name=True)

    created_at: int = Field(alias="createdAt", description="First observation time in ms")
    compiled_at: int | None = Field(
        default=None, alias="compiledAt", description="First successful build time in ms"
    )

    @model_validator(mode="after")
    def validate_compiled_after_created(self) -> Self:
        """Reject records whose build finished before the file existed."""
        if self.compiled_at is not None and self.compiled_at < self.created_at:
            raise ValueError(
                f"compiledAt ({self.compiled_at}) is earlier than createdAt ({self.created_at})"
            )
        return self

    @property
    def is_compiled(self) -> bool:
        """True once the first successful build has been recorded."""
        return self.compiled_at is not None

    def elapsed_ms(self, now: int) -> int:
        """Milliseconds from creation until the first build, or until now."""
        end = self.compiled_at if self.compiled_at is not None else now
        return max(0, end - self.created_at)

    def mark_compiled(self, now: int) -> None:
        """Record the first successful build. Completion is set once."""
        if self.compiled_at is not None:
            raise RecordAlreadyCompiledError(
                f"Record already compiled at {self.compiled_at}; refusing to overwrite"
            )
        self.compiled_at = max(now, self.created_at)


class Metadata(RootModel[dict[str, TimingRecord]]):
    """Whole contents of the metadata file, keyed by absolute path."""

    root: dict[str, TimingRecord] = Field(default_factory=dict)
