"""PostgreSQL unit repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from parlance.domain.entities import Unit
from parlance.domain.value_objects import LifecycleState

_COLUMNS = (
    "id, section_id, source_copy, fingerprint, position, state, ready, dormant, "
    "created_at, updated_at"
)


def _row_to_unit(r: tuple) -> Unit:
    return Unit(
        id=r[0],
        section_id=r[1],
        source_copy=r[2],
        fingerprint=bytes(r[3]),
        position=r[4],
        state=LifecycleState(r[5]),
        ready=r[6],
        dormant=r[7],
        created_at=r[8],
        updated_at=r[9],
    )


class PostgresUnitRepository:
    """Unit repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, unit_id: UUID) -> Unit | None:
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM unit WHERE id = %s", (unit_id,))
        r = await cur.fetchone()
        return _row_to_unit(r) if r else None

    async def list_by_sections(self, section_ids: list[UUID]) -> list[Unit]:
        """All units of the given sections, in position order."""
        if not section_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM unit WHERE section_id = ANY(%s) ORDER BY section_id, position",
            (section_ids,),
        )
        return [_row_to_unit(r) for r in await cur.fetchall()]

    async def create_batch(self, units: list[Unit]) -> list[Unit]:
        """Create units in batch."""
        for u in units:
            await self._conn.execute(
                f"INSERT INTO unit ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    u.id,
                    u.section_id,
                    u.source_copy,
                    u.fingerprint,
                    u.position,
                    u.state.value,
                    u.ready,
                    u.dormant,
                    u.created_at,
                    u.updated_at,
                ),
            )
        return units

    async def update_batch(self, units: list[Unit]) -> None:
        """Update units in batch. Fingerprint and section never change."""
        for u in units:
            await self._conn.execute(
                "UPDATE unit SET source_copy=%s, position=%s, state=%s, ready=%s, dormant=%s, "
                "updated_at=%s WHERE id=%s",
                (u.source_copy, u.position, u.state.value, u.ready, u.dormant, u.updated_at, u.id),
            )
