"""Project repository port."""

from typing import Protocol
from uuid import UUID

from parlance.domain.entities import Project


class ProjectRepository(Protocol):
    """Port for project persistence."""

    async def get_by_id(self, project_id: UUID) -> Project | None: ...

    async def create(self, project: Project) -> Project: ...
