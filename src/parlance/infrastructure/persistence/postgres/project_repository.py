"""PostgreSQL project repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from parlance.domain.entities import Project


class PostgresProjectRepository:
    """Project repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, project_id: UUID) -> Project | None:
        """Get project by id."""
        cur = await self._conn.execute(
            "SELECT id, name, base_locale, targeted_locales, created_at, updated_at "
            "FROM project WHERE id = %s",
            (project_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Project(
            id=r[0],
            name=r[1],
            base_locale=r[2],
            targeted_locales=r[3] or {},
            created_at=r[4],
            updated_at=r[5],
        )

    async def create(self, project: Project) -> Project:
        """Create project."""
        await self._conn.execute(
            "INSERT INTO project (id, name, base_locale, targeted_locales, created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                project.id,
                project.name,
                project.base_locale,
                Jsonb(project.targeted_locales),
                project.created_at,
                project.updated_at,
            ),
        )
        return project
