"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from parlance.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)
from parlance.infrastructure.persistence.postgres.project_repository import (
    PostgresProjectRepository,
)
from parlance.infrastructure.persistence.postgres.section_repository import (
    PostgresSectionRepository,
)
from parlance.infrastructure.persistence.postgres.translation_repository import (
    PostgresTranslationRepository,
)
from parlance.infrastructure.persistence.postgres.unit_repository import (
    PostgresUnitRepository,
)


READ_ONLY_SNAPSHOT = "SET TRANSACTION ISOLATION LEVEL REPEATABLE READ READ ONLY"

class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction.

    A read-only unit of work runs under REPEATABLE READ, so every query in it
    sees the same snapshot.
    """

    def __init__(self, pool: AsyncConnectionPool, read_only: bool = False) -> None:
        self._pool = pool
        self._read_only = read_only
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        if self._read_only:
            await self._conn.execute(READ_ONLY_SNAPSHOT)
        self._projects = PostgresProjectRepository(self._conn)
        self._documents = PostgresDocumentRepository(self._conn)
        self._sections = PostgresSectionRepository(self._conn)
        self._units = PostgresUnitRepository(self._conn)
        self._translations = PostgresTranslationRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def projects(self) -> PostgresProjectRepository:
        return self._projects

    @property
    def documents(self) -> PostgresDocumentRepository:
        return self._documents

    @property
    def sections(self) -> PostgresSectionRepository:
        return self._sections

    @property
    def units(self) -> PostgresUnitRepository:
        return self._units

    @property
    def translations(self) -> PostgresTranslationRepository:
        return self._translations

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool, read_only: bool = False) -> object:
    """Create UnitOfWork factory (async context manager).

    With ``read_only`` every unit of work reads from a single snapshot.

    Commits on success; any exception, including a domain error raised after
    partial writes, rolls the whole transaction back.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool, read_only=read_only)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
