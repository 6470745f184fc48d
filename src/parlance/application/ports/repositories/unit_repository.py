"""Unit repository port."""

from typing import Protocol
from uuid import UUID

from parlance.domain.entities import Unit


class UnitRepository(Protocol):
    """Port for unit persistence. Units are never deleted."""

    async def get_by_id(self, unit_id: UUID) -> Unit | None: ...

    async def list_by_sections(self, section_ids: list[UUID]) -> list[Unit]: ...

    async def create_batch(self, units: list[Unit]) -> list[Unit]: ...

    async def update_batch(self, units: list[Unit]) -> None: ...
