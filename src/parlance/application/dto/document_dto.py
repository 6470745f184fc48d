"""Document DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class DocumentCreateInput:
    """Input for creating a document. Locale settings default to the project's."""

    project_id: UUID
    name: str | None
    sections: dict[str, str] | None
    base_locale: str | None = None
    targeted_locales: dict[str, bool] | None = None
    description: str | None = None
    email: str | None = None


@dataclass
class DocumentUpdateInput:
    """Input for updating a document. ``None`` means the field is left unchanged."""

    project_id: UUID
    name: str
    sections: dict[str, str] | None = None
    targeted_locales: dict[str, bool] | None = None
    description: str | None = None
    email: str | None = None

    @property
    def touches_content(self) -> bool:
        return self.sections is not None


@dataclass
class DocumentOutput:
    """Output DTO for document: active sections' content plus metadata."""

    id: UUID
    project_id: UUID
    name: str
    base_locale: str
    targeted_locales: dict[str, bool]
    sections: dict[str, str]
    ready: bool
    description: str | None
    email: str | None
    last_import_requested_at: datetime | None
    last_import_finished_at: datetime | None
    created_at: datetime
    updated_at: datetime


@dataclass
class DocumentSummary:
    """Listing entry."""

    name: str
    ready: bool


@dataclass
class ReconciliationSummary:
    """Counts of one content/locale sync, for logging and tests."""

    created_units: int = 0
    reused_units: int = 0
    reactivated_units: int = 0
    deactivated_units: int = 0
    deactivated_sections: list[str] = field(default_factory=list)
    reactivated_sections: list[str] = field(default_factory=list)
    created_translations: int = 0
