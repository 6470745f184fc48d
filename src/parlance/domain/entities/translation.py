"""Translation entity - a unit's copy in one locale."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from parlance.domain.entities.unit import Unit


@dataclass
class Translation:
    """Translation - exactly one per (unit, locale)."""

    id: UUID
    unit_id: UUID
    locale: str
    source_copy: str
    created_at: datetime
    updated_at: datetime
    copy: str | None = None
    approved: bool = False

    @property
    def complete(self) -> bool:
        return self.copy is not None and self.approved

    def is_stale_for(self, unit: Unit) -> bool:
        """Source changed literally since this copy was written."""
        return self.source_copy != unit.source_copy
