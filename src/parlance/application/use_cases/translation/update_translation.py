"""Update translation use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from parlance.application.use_cases.unit.recalculate_ready import (
    lock_owning_document,
    recalculate_unit,
)
from parlance.domain.entities import Translation
from parlance.domain.exceptions import InvariantViolation, NotFound, ValidationError

logger = logging.getLogger(__name__)


class UpdateTranslationUseCase:
    """Edit or approve a translation, then recalculate its unit's readiness."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        translation_id: UUID,
        copy: str | None = None,
        approved: bool | None = None,
    ) -> Translation:
        """Set copy and/or approval. Base-locale translations follow the source and are read only."""
        if copy is None and approved is None:
            raise ValidationError({"base": ["nothing to update"]})
        if approved is not None and not isinstance(approved, bool):
            raise ValidationError({"approved": ["invalid"]})

        async with self._uow_factory() as uow:
            translation = await uow.translations.get_by_id(translation_id)
            if not translation:
                raise NotFound("Translation", str(translation_id))
            unit = await uow.units.get_by_id(translation.unit_id)
            if not unit:
                raise InvariantViolation(f"Translation {translation.id} has no unit")
            document = await lock_owning_document(uow, unit)
            # a content update may have committed while we waited for the lock
            translation = await uow.translations.get_by_id(translation_id)
            unit = await uow.units.get_by_id(translation.unit_id)
            if translation.locale == document.base_locale:
                raise ValidationError({"locale": ["base locale copy follows the source"]})

            now = datetime.now(UTC)
            if copy is not None:
                translation.copy = copy
                translation.source_copy = unit.source_copy
            if approved is not None:
                if approved and translation.is_stale_for(unit):
                    logger.warning(
                        "Approving %s translation %s written for an older source",
                        translation.locale,
                        translation.id,
                    )
                translation.approved = approved
            translation.updated_at = now
            await uow.translations.update(translation)

            if await recalculate_unit(uow, unit, document):
                logger.info("Unit %s of %s is now ready=%s", unit.id, document.name, unit.ready)
            return translation
