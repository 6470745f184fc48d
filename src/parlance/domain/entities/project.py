"""Project entity - owning scope of documents."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class Project:
    """Project - documents are named uniquely within it and inherit its locale settings."""

    id: UUID
    name: str
    base_locale: str
    created_at: datetime
    updated_at: datetime
    targeted_locales: dict[str, bool] = field(default_factory=dict)
