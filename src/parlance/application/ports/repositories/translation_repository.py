"""Translation repository port."""

from typing import Protocol
from uuid import UUID

from parlance.domain.entities import Translation


class TranslationRepository(Protocol):
    """Port for translation persistence. One row per (unit, locale)."""

    async def get_by_id(self, translation_id: UUID) -> Translation | None: ...

    async def list_by_units(self, unit_ids: list[UUID]) -> list[Translation]: ...

    async def create_batch(self, translations: list[Translation]) -> list[Translation]: ...

    async def update(self, translation: Translation) -> Translation: ...
