"""PostgreSQL section repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from parlance.domain.entities import Section
from parlance.domain.value_objects import LifecycleState

_COLUMNS = "id, document_id, name, source_copy, position, state, created_at, updated_at"


def _row_to_section(r: tuple) -> Section:
    return Section(
        id=r[0],
        document_id=r[1],
        name=r[2],
        source_copy=r[3],
        position=r[4],
        state=LifecycleState(r[5]),
        created_at=r[6],
        updated_at=r[7],
    )


class PostgresSectionRepository:
    """Section repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, section_id: UUID) -> Section | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM section WHERE id = %s", (section_id,)
        )
        r = await cur.fetchone()
        return _row_to_section(r) if r else None

    async def list_by_document(self, document_id: UUID) -> list[Section]:
        """All sections of document, active or not, in position order."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM section WHERE document_id = %s ORDER BY position, name",
            (document_id,),
        )
        return [_row_to_section(r) for r in await cur.fetchall()]

    async def create_batch(self, sections: list[Section]) -> list[Section]:
        """Create sections in batch."""
        for s in sections:
            await self._conn.execute(
                f"INSERT INTO section ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    s.id,
                    s.document_id,
                    s.name,
                    s.source_copy,
                    s.position,
                    s.state.value,
                    s.created_at,
                    s.updated_at,
                ),
            )
        return sections

    async def update_batch(self, sections: list[Section]) -> None:
        """Update sections in batch."""
        for s in sections:
            await self._conn.execute(
                "UPDATE section SET source_copy=%s, position=%s, state=%s, updated_at=%s "
                "WHERE id=%s",
                (s.source_copy, s.position, s.state.value, s.updated_at, s.id),
            )
