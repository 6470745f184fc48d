"""Repository ports."""

from parlance.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from parlance.application.ports.repositories.project_repository import ProjectRepository
from parlance.application.ports.repositories.section_repository import SectionRepository
from parlance.application.ports.repositories.translation_repository import (
    TranslationRepository,
)
from parlance.application.ports.repositories.unit_repository import UnitRepository

__all__ = [
    "DocumentRepository",
    "ProjectRepository",
    "SectionRepository",
    "TranslationRepository",
    "UnitRepository",
]
