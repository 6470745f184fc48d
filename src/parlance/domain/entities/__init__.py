"""Domain entities."""

from parlance.domain.entities.document import Document
from parlance.domain.entities.project import Project
from parlance.domain.entities.section import Section
from parlance.domain.entities.translation import Translation
from parlance.domain.entities.unit import Unit

__all__ = [
    "Document",
    "Project",
    "Section",
    "Translation",
    "Unit",
]
