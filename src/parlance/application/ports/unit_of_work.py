"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from parlance.application.ports.repositories.document_repository import DocumentRepository
from parlance.application.ports.repositories.project_repository import ProjectRepository
from parlance.application.ports.repositories.section_repository import SectionRepository
from parlance.application.ports.repositories.translation_repository import (
    TranslationRepository,
)
from parlance.application.ports.repositories.unit_repository import UnitRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def projects(self) -> ProjectRepository: ...

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def sections(self) -> SectionRepository: ...

    @property
    def units(self) -> UnitRepository: ...

    @property
    def translations(self) -> TranslationRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
