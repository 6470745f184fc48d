"""Update document use case."""

from datetime import UTC, datetime

from parlance.application.dto.document_dto import DocumentOutput, DocumentUpdateInput
from parlance.application.services.content_pipeline import (
    ContentPipeline,
    load_document_state,
)
from parlance.application.services.import_guard import (
    check_content_update,
    finish_import,
    request_import,
)
from parlance.application.services.validation import (
    validate_email,
    validate_sections,
    validate_targeted_locales,
)
from parlance.application.use_cases.document.get_document import build_document_output
from parlance.domain.exceptions import NotFound, ValidationError


class UpdateDocumentUseCase:
    """Update document sections, targeted locales and metadata.

    Section content is refused while an import is unfinished; locale and
    metadata changes are always allowed.
    """

    def __init__(self, unit_of_work_factory: type, pipeline: ContentPipeline) -> None:
        self._uow_factory = unit_of_work_factory
        self._pipeline = pipeline

    async def execute(self, input_data: DocumentUpdateInput) -> DocumentOutput:
        errors: dict[str, list[str]] = {}
        sections = (
            validate_sections(input_data.sections, errors)
            if input_data.sections is not None
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
            await uow.documents.lock(input_data.project_id, input_data.name)
            document = await uow.documents.get_by_name(input_data.project_id, input_data.name)
            if not document:
                raise NotFound("Document", input_data.name)
            if errors:
                raise ValidationError(errors)
            if input_data.touches_content:
                check_content_update(document)

            now = datetime.now(UTC)
            locales_changed = targeted is not None and targeted != document.targeted_locales
            if targeted is not None:
                document.targeted_locales = targeted
            if input_data.description is not None:
                document.description = input_data.description
            if email is not None:
                document.email = email or None

            state = await load_document_state(uow, document)
            if sections is not None or locales_changed:
                if sections is not None:
                    request_import(document, now)
                await self._pipeline.apply(
                    uow,
                    document,
                    state,
                    now,
                    sections=sections,
                    locales_changed=locales_changed,
                )
                if sections is not None:
                    finish_import(document, datetime.now(UTC))

            document.updated_at = now
            await uow.documents.update(document)
            return build_document_output(document, state)
