"""Section repository port."""

from typing import Protocol
from uuid import UUID

from parlance.domain.entities import Section


class SectionRepository(Protocol):
    """Port for section persistence. Sections are never deleted."""

    async def get_by_id(self, section_id: UUID) -> Section | None: ...

    async def list_by_document(self, document_id: UUID) -> list[Section]: ...

    async def create_batch(self, sections: list[Section]) -> list[Section]: ...

    async def update_batch(self, sections: list[Section]) -> None: ...
