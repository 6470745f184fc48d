"""PostgreSQL translation repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from parlance.domain.entities import Translation

_COLUMNS = "id, unit_id, locale, source_copy, copy, approved, created_at, updated_at"


def _row_to_translation(r: tuple) -> Translation:
    return Translation(
        id=r[0],
        unit_id=r[1],
        locale=r[2],
        source_copy=r[3],
        copy=r[4],
        approved=r[5],
        created_at=r[6],
        updated_at=r[7],
    )


class PostgresTranslationRepository:
    """Translation repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, translation_id: UUID) -> Translation | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM translation WHERE id = %s", (translation_id,)
        )
        r = await cur.fetchone()
        return _row_to_translation(r) if r else None

    async def list_by_units(self, unit_ids: list[UUID]) -> list[Translation]:
        if not unit_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM translation WHERE unit_id = ANY(%s) ORDER BY unit_id, locale",
            (unit_ids,),
        )
        return [_row_to_translation(r) for r in await cur.fetchall()]

    async def create_batch(self, translations: list[Translation]) -> list[Translation]:
        """Create translations in batch. (unit_id, locale) is unique."""
        for t in translations:
            await self._conn.execute(
                f"INSERT INTO translation ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    t.id,
                    t.unit_id,
                    t.locale,
                    t.source_copy,
                    t.copy,
                    t.approved,
                    t.created_at,
                    t.updated_at,
                ),
            )
        return translations

    async def update(self, translation: Translation) -> Translation:
        await self._conn.execute(
            "UPDATE translation SET source_copy=%s, copy=%s, approved=%s, updated_at=%s "
            "WHERE id=%s",
            (
                translation.source_copy,
                translation.copy,
                translation.approved,
                translation.updated_at,
                translation.id,
            ),
        )
        return translation
