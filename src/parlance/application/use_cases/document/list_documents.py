"""List documents use case."""

from uuid import UUID

from parlance.application.dto.document_dto import DocumentSummary
from parlance.application.services.content_pipeline import load_document_state
from parlance.application.services.readiness import document_ready
from parlance.domain.exceptions import NotFound


class ListDocumentsUseCase:
    """List a project's documents with their readiness."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        project_id: UUID,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[DocumentSummary], str | None]:
        async with self._uow_factory() as uow:
            project = await uow.projects.get_by_id(project_id)
            if not project:
                raise NotFound("Project", str(project_id))
            documents, next_cursor = await uow.documents.list_by_project(
                project_id, cursor=cursor, limit=limit
            )
            items = []
            for document in documents:
                state = await load_document_state(uow, document)
                items.append(
                    DocumentSummary(
                        name=document.name,
                        ready=document_ready(state.sections, state.units),
                    )
                )
        return items, next_cursor
