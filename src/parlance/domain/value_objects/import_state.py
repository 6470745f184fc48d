"""Import tracking state.

A document records when an import of its source content was last requested
and when the last one finished. Source content may only change once the latest
request has finished. There is no timeout: an unfinished request blocks until a
later finish is recorded.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NoImportInProgress:
    """No import was ever requested."""

    @property
    def blocks_content_update(self) -> bool:
        return False


@dataclass(frozen=True)
class ImportRequested:
    """Latest request has not finished yet."""

    requested_at: datetime
    previous_finished_at: datetime | None = None

    @property
    def blocks_content_update(self) -> bool:
        return True


@dataclass(frozen=True)
class ImportFinished:
    """Latest request has finished."""

    requested_at: datetime
    finished_at: datetime

    @property
    def blocks_content_update(self) -> bool:
        return False


class ImportState:
    """Derive the tagged import state from the two tracking timestamps."""

    @staticmethod
    def of(
        requested_at: datetime | None, finished_at: datetime | None
    ) -> NoImportInProgress | ImportRequested | ImportFinished:
        if requested_at is None:
            return NoImportInProgress()
        if finished_at is None or requested_at > finished_at:
            return ImportRequested(requested_at=requested_at, previous_finished_at=finished_at)
        return ImportFinished(requested_at=requested_at, finished_at=finished_at)
