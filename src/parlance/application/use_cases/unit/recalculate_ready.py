"""Recalculate unit readiness use case."""

from uuid import UUID

from parlance.application.services.readiness import recalculate_ready
from parlance.domain.entities import Document, Unit
from parlance.domain.exceptions import InvariantViolation, NotFound


async def lock_owning_document(uow, unit: Unit) -> Document:
    """Resolve the unit's document and take its write lock.

    Rows read before this call may be outdated; re-read them afterwards.
    """
    section = await uow.sections.get_by_id(unit.section_id)
    document = await uow.documents.get_by_id(section.document_id) if section else None
    if not document:
        raise InvariantViolation(f"Unit {unit.id} has no owning document")
    await uow.documents.lock(document.project_id, document.name)
    return document


async def recalculate_unit(uow, unit: Unit, document: Document) -> bool:
    """Recompute and persist ``unit.ready``. Caller holds the document lock."""
    translations = {
        t.locale: t for t in await uow.translations.list_by_units([unit.id])
    }
    changed = recalculate_ready(unit, translations, document)
    if changed:
        await uow.units.update_batch([unit])
    return changed


class RecalculateReadyUseCase:
    """Recompute a unit's ready flag after its translations changed."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, unit_id: UUID) -> Unit:
        async with self._uow_factory() as uow:
            unit = await uow.units.get_by_id(unit_id)
            if not unit:
                raise NotFound("Unit", str(unit_id))
            document = await lock_owning_document(uow, unit)
            unit = await uow.units.get_by_id(unit_id)
            await recalculate_unit(uow, unit, document)
            return unit
