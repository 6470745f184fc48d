"""Get document use case."""

from uuid import UUID

from parlance.application.dto.document_dto import DocumentOutput
from parlance.application.services.content_pipeline import DocumentState, load_document_state
from parlance.application.services.readiness import document_ready
from parlance.domain.entities import Document
from parlance.domain.exceptions import NotFound


def build_document_output(document: Document, state: DocumentState) -> DocumentOutput:
    return DocumentOutput(
        id=document.id,
        project_id=document.project_id,
        name=document.name,
        base_locale=document.base_locale,
        targeted_locales=dict(document.targeted_locales),
        sections={s.name: s.source_copy for s in state.active_sections},
        ready=document_ready(state.sections, state.units),
        description=document.description,
        email=document.email,
        last_import_requested_at=document.last_import_requested_at,
        last_import_finished_at=document.last_import_finished_at,
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


class GetDocumentUseCase:
    """Get document by name within its project."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, project_id: UUID, name: str) -> DocumentOutput:
        """Get document with its active sections' content."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_name(project_id, name)
            if not document:
                raise NotFound("Document", name)
            state = await load_document_state(uow, document)
            return build_document_output(document, state)
