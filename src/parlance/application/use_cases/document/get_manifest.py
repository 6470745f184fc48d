"""Get manifest use case."""

import logging
from uuid import UUID

from parlance.application.ports import UnitExtractor
from parlance.application.services.content_pipeline import load_document_state
from parlance.application.services.manifest import assemble_manifest
from parlance.domain.exceptions import NotFound, NotReady

logger = logging.getLogger(__name__)


class GetManifestUseCase:
    """Render a document in every required locale. Read only."""

    def __init__(self, unit_of_work_factory: type, extractor: UnitExtractor) -> None:
        self._uow_factory = unit_of_work_factory
        self._extractor = extractor

    async def execute(self, project_id: UUID, name: str) -> dict[str, dict[str, str]]:
        """Return ``{locale: {section name: content}}``; NotReady if anything is untranslated."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_name(project_id, name)
            if not document:
                raise NotFound("Document", name)
            state = await load_document_state(uow, document)
        try:
            return assemble_manifest(
                document, state.sections, state.units, state.translations, self._extractor
            )
        except NotReady as e:
            logger.info("Manifest of %s refused: %s", name, e)
            raise
