"""Unit entity - atomic, content-addressed translation item ("key")."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from parlance.domain.value_objects import LifecycleState


@dataclass
class Unit:
    """Unit - one paragraph-level chunk of a section.

    ``dormant`` marks units that were active when their section was
    deactivated; they are the pool a reactivated section reconciles against.
    """

    id: UUID
    section_id: UUID
    source_copy: str
    fingerprint: bytes
    position: int
    created_at: datetime
    updated_at: datetime
    state: LifecycleState = LifecycleState.ACTIVE
    ready: bool = False
    dormant: bool = False

    @property
    def active(self) -> bool:
        return self.state == LifecycleState.ACTIVE
