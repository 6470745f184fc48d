"""Document entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from parlance.domain.value_objects import ImportState


@dataclass
class Document:
    """Document - named set of translatable sections with locale settings.

    ``targeted_locales`` maps a locale identifier to whether the locale is
    required for the document to be complete.
    """

    id: UUID
    project_id: UUID
    name: str
    base_locale: str
    created_at: datetime
    updated_at: datetime
    targeted_locales: dict[str, bool] = field(default_factory=dict)
    description: str | None = None
    email: str | None = None
    last_import_requested_at: datetime | None = None
    last_import_finished_at: datetime | None = None

    @property
    def import_state(self):
        return ImportState.of(self.last_import_requested_at, self.last_import_finished_at)
