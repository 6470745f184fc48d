"""Pytest fixtures for Parlance tests."""

from __future__ import annotations

import asyncio
import copy
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from parlance.application.services.content_pipeline import ContentPipeline
from parlance.domain.entities import Document, Project, Section, Translation, Unit
from parlance.infrastructure.extraction.paragraph_extractor import ParagraphExtractor


# --- Fake repositories ---
# Entities are copied on the way in and out, so a use case that forgets to
# write a change back is caught the same way it would be against PostgreSQL.


class FakeProjectRepository:
    """In-memory project repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Project] = {}

    async def get_by_id(self, project_id: UUID) -> Project | None:
        project = self._by_id.get(project_id)
        return copy.deepcopy(project) if project else None

    async def create(self, project: Project) -> Project:
        self._by_id[project.id] = copy.deepcopy(project)
        return project


class FakeDocumentRepository:
    """In-memory document repository.

    ``lock`` records every call and blocks other tasks until the holder's
    factory exits, like a transaction-scoped advisory lock.
    """

    def __init__(self) -> None:
        self._by_id: dict[UUID, Document] = {}
        self.locks: list[tuple[UUID, str]] = []
        self._mutexes: dict[tuple[UUID, str], asyncio.Lock] = {}
        self._held: dict[asyncio.Task, list[asyncio.Lock]] = {}

    async def get_by_id(self, document_id: UUID) -> Document | None:
        doc = self._by_id.get(document_id)
        return copy.deepcopy(doc) if doc else None

    async def get_by_name(self, project_id: UUID, name: str) -> Document | None:
        for doc in self._by_id.values():
            if doc.project_id == project_id and doc.name == name:
                return copy.deepcopy(doc)
        return None

    async def list_by_project(
        self,
        project_id: UUID,
        *,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Document], str | None]:
        items = sorted(
            (d for d in self._by_id.values() if d.project_id == project_id),
            key=lambda d: d.name,
        )
        if cursor:
            items = [d for d in items if d.name > cursor]
        page = items[: limit + 1]
        next_cursor = page[limit - 1].name if len(page) > limit else None
        return [copy.deepcopy(d) for d in page[:limit]], next_cursor

    async def lock(self, project_id: UUID, name: str) -> None:
        self.locks.append((project_id, name))
        mutex = self._mutexes.setdefault((project_id, name), asyncio.Lock())
        held = self._held.setdefault(asyncio.current_task(), [])
        if mutex in held:
            return
        await mutex.acquire()
        held.append(mutex)

    def release_locks(self) -> None:
        for mutex in self._held.pop(asyncio.current_task(), []):
            mutex.release()

    async def create(self, document: Document) -> Document:
        if await self.get_by_name(document.project_id, document.name):
            raise AssertionError(f"duplicate document {document.name}")
        self._by_id[document.id] = copy.deepcopy(document)
        return document

    async def update(self, document: Document) -> Document:
        self._by_id[document.id] = copy.deepcopy(document)
        return document


class FakeSectionRepository:
    """In-memory section repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Section] = {}

    async def get_by_id(self, section_id: UUID) -> Section | None:
        section = self._by_id.get(section_id)
        return copy.deepcopy(section) if section else None

    async def list_by_document(self, document_id: UUID) -> list[Section]:
        return [
            copy.deepcopy(s)
            for s in sorted(self._by_id.values(), key=lambda s: (s.position, s.name))
            if s.document_id == document_id
        ]

    async def create_batch(self, sections: list[Section]) -> list[Section]:
        for s in sections:
            self._by_id[s.id] = copy.deepcopy(s)
        return sections

    async def update_batch(self, sections: list[Section]) -> None:
        for s in sections:
            self._by_id[s.id] = copy.deepcopy(s)

    def all(self) -> list[Section]:
        return list(self._by_id.values())


class FakeUnitRepository:
    """In-memory unit repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Unit] = {}

    async def get_by_id(self, unit_id: UUID) -> Unit | None:
        unit = self._by_id.get(unit_id)
        return copy.deepcopy(unit) if unit else None

    async def list_by_sections(self, section_ids: list[UUID]) -> list[Unit]:
        wanted = set(section_ids)
        return [
            copy.deepcopy(u)
            for u in sorted(self._by_id.values(), key=lambda u: u.position)
            if u.section_id in wanted
        ]

    async def create_batch(self, units: list[Unit]) -> list[Unit]:
        for u in units:
            self._by_id[u.id] = copy.deepcopy(u)
        return units

    async def update_batch(self, units: list[Unit]) -> None:
        for u in units:
            self._by_id[u.id] = copy.deepcopy(u)

    def all(self) -> list[Unit]:
        return list(self._by_id.values())


class FakeTranslationRepository:
    """In-memory translation repository. Enforces one row per (unit, locale)."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Translation] = {}

    async def get_by_id(self, translation_id: UUID) -> Translation | None:
        t = self._by_id.get(translation_id)
        return copy.deepcopy(t) if t else None

    async def list_by_units(self, unit_ids: list[UUID]) -> list[Translation]:
        wanted = set(unit_ids)
        return [copy.deepcopy(t) for t in self._by_id.values() if t.unit_id in wanted]

    async def create_batch(self, translations: list[Translation]) -> list[Translation]:
        taken = {(t.unit_id, t.locale) for t in self._by_id.values()}
        for t in translations:
            if (t.unit_id, t.locale) in taken:
                raise AssertionError(f"duplicate translation {t.unit_id}/{t.locale}")
            taken.add((t.unit_id, t.locale))
            self._by_id[t.id] = copy.deepcopy(t)
        return translations

    async def update(self, translation: Translation) -> Translation:
        self._by_id[translation.id] = copy.deepcopy(translation)
        return translation

    def all(self) -> list[Translation]:
        return list(self._by_id.values())


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.projects = FakeProjectRepository()
        self.documents = FakeDocumentRepository()
        self.sections = FakeSectionRepository()
        self.units = FakeUnitRepository()
        self.translations = FakeTranslationRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        try:
            yield uow
            await uow.commit()
        finally:
            uow.documents.release_locks()

    return _factory


def make_project(
    uow: FakeUnitOfWork,
    base_locale: str = "en",
    targeted_locales: dict[str, bool] | None = None,
) -> Project:
    now = datetime.now(UTC)
    project = Project(
        id=uuid4(),
        name="site",
        base_locale=base_locale,
        targeted_locales=targeted_locales if targeted_locales is not None else {},
        created_at=now,
        updated_at=now,
    )
    uow.projects._by_id[project.id] = project
    return project


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the test's FakeUnitOfWork."""
    return make_factory(fake_uow)


@pytest.fixture
def extractor() -> ParagraphExtractor:
    return ParagraphExtractor()


@pytest.fixture
def pipeline(extractor: ParagraphExtractor) -> ContentPipeline:
    return ContentPipeline(extractor)


@pytest.fixture
def project(fake_uow: FakeUnitOfWork) -> Project:
    """Project with fr required and es optional, base en."""
    return make_project(fake_uow, targeted_locales={"fr": True, "es": False})
