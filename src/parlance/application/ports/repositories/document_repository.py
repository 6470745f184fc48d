"""Document repository port."""

from typing import Protocol
from uuid import UUID

from parlance.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document persistence."""

    async def get_by_id(self, document_id: UUID) -> Document | None: ...

    async def get_by_name(self, project_id: UUID, name: str) -> Document | None: ...

    async def list_by_project(
        self,
        project_id: UUID,
        *,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Document], str | None]: ...

    async def lock(self, project_id: UUID, name: str) -> None:
        """Serialize writers of one (project, name) until the transaction ends."""
        ...

    async def create(self, document: Document) -> Document: ...

    async def update(self, document: Document) -> Document: ...
