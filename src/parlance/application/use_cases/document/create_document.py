"""Create document use case."""

from datetime import UTC, datetime
from uuid import uuid4

from parlance.application.dto.document_dto import DocumentCreateInput, DocumentOutput
from parlance.application.services.content_pipeline import ContentPipeline, DocumentState
from parlance.application.services.import_guard import finish_import, request_import
from parlance.application.services.validation import (
    TAKEN,
    validate_email,
    validate_locale,
    validate_name,
    validate_sections,
    validate_targeted_locales,
)
from parlance.application.use_cases.document.get_document import build_document_output
from parlance.domain.entities import Document
from parlance.domain.exceptions import NotFound, ValidationError


class CreateDocumentUseCase:
    """Create document: validate, split sections into units, provision translations."""

    def __init__(self, unit_of_work_factory: type, pipeline: ContentPipeline) -> None:
        self._uow_factory = unit_of_work_factory
        self._pipeline = pipeline

    async def execute(self, input_data: DocumentCreateInput) -> DocumentOutput:
        """Create document in project. Locale settings default to the project's."""
        errors: dict[str, list[str]] = {}
        name = validate_name(input_data.name, errors)
        sections = validate_sections(input_data.sections, errors)
        base_locale = (
            validate_locale(input_data.base_locale, errors, "base_locale")
            if input_data.base_locale is not None
            else None
        )
        targeted = (
            validate_targeted_locales(input_data.targeted_locales, errors)
            if input_data.targeted_locales is not None
            else None
        )
        email = (
            validate_email(input_data.email, errors)
            if input_data.email is not None
            else None
        )

        async with self._uow_factory() as uow:
            project = await uow.projects.get_by_id(input_data.project_id)
            if not project:
                raise NotFound("Project", str(input_data.project_id))
            if name:
                await uow.documents.lock(project.id, name)
                if await uow.documents.get_by_name(project.id, name):
                    errors.setdefault("name", []).append(TAKEN)
            if errors:
                raise ValidationError(errors)

            now = datetime.now(UTC)
            document = Document(
                id=uuid4(),
                project_id=project.id,
                name=name,
                base_locale=base_locale or project.base_locale,
                targeted_locales=(
                    targeted if targeted is not None else dict(project.targeted_locales)
                ),
                description=input_data.description,
                email=email or None,
                created_at=now,
                updated_at=now,
            )
            request_import(document, now)
            await uow.documents.create(document)

            state = DocumentState()
            await self._pipeline.apply(uow, document, state, now, sections=sections)

            finish_import(document, datetime.now(UTC))
            await uow.documents.update(document)
            return build_document_output(document, state)
