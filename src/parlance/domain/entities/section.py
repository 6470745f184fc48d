"""Section entity - named content block of a document."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from parlance.domain.value_objects import LifecycleState


@dataclass
class Section:
    """Section - raw source content; one row per (document, name) for the document's lifetime."""

    id: UUID
    document_id: UUID
    name: str
    source_copy: str
    position: int
    created_at: datetime
    updated_at: datetime
    state: LifecycleState = LifecycleState.ACTIVE

    @property
    def active(self) -> bool:
        return self.state == LifecycleState.ACTIVE
