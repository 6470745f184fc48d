"""PostgreSQL document repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from parlance.domain.entities import Document

_COLUMNS = (
    "id, project_id, name, base_locale, targeted_locales, description, email, "
    "last_import_requested_at, last_import_finished_at, created_at, updated_at"
)


def _row_to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        project_id=r[1],
        name=r[2],
        base_locale=r[3],
        targeted_locales=r[4] or {},
        description=r[5],
        email=r[6],
        last_import_requested_at=r[7],
        last_import_finished_at=r[8],
        created_at=r[9],
        updated_at=r[10],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID) -> Document | None:
        """Get document by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE id = %s", (document_id,)
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def get_by_name(self, project_id: UUID, name: str) -> Document | None:
        """Get document by name within project."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE project_id = %s AND name = %s",
            (project_id, name),
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def list_by_project(
        self,
        project_id: UUID,
        *,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Document], str | None]:
        """List project documents by name with cursor pagination."""
        conditions = ["project_id = %s"]
        _params: list[object] = [project_id]
        if cursor:
            conditions.append("name > %s")
            _params.append(cursor)
        where = " AND ".join(conditions)
        params = tuple(_params) + (limit + 1,)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE {where} ORDER BY name LIMIT %s",
            params,
        )
        rows = await cur.fetchall()
        docs = [_row_to_document(r) for r in rows[:limit]]
        next_cursor = docs[-1].name if len(rows) > limit else None
        return docs, next_cursor

    async def lock(self, project_id: UUID, name: str) -> None:
        """Take a transaction-scoped advisory lock on (project, name)."""
        await self._conn.execute(
            "SELECT pg_advisory_xact_lock(hashtextextended(%s, 0))",
            (f"document:{project_id}:{name}",),
        )

    async def create(self, document: Document) -> Document:
        """Create document."""
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.project_id,
                document.name,
                document.base_locale,
                Jsonb(document.targeted_locales),
                document.description,
                document.email,
                document.last_import_requested_at,
                document.last_import_finished_at,
                document.created_at,
                document.updated_at,
            ),
        )
        return document

    async def update(self, document: Document) -> Document:
        """Update document. Name and base locale are immutable."""
        await self._conn.execute(
            "UPDATE document SET targeted_locales=%s, description=%s, email=%s, "
            "last_import_requested_at=%s, last_import_finished_at=%s, updated_at=%s "
            "WHERE id=%s",
            (
                Jsonb(document.targeted_locales),
                document.description,
                document.email,
                document.last_import_requested_at,
                document.last_import_finished_at,
                document.updated_at,
                document.id,
            ),
        )
        return document
