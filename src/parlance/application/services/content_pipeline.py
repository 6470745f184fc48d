"""Content pipeline - extraction, reconciliation, provisioning and readiness in one pass.

All changes are computed in memory first and written in one flush at the end,
inside the caller's unit of work.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from parlance.application.dto.document_dto import ReconciliationSummary
from parlance.application.ports import UnitExtractor, UnitOfWork
from parlance.application.services.provisioner import (
    provision_translations,
    sync_base_translation,
)
from parlance.application.services.readiness import recalculate_ready
from parlance.application.services.reconciler import deactivate_section, reconcile_section
from parlance.domain.entities import Document, Section, Translation, Unit

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    """Everything stored for one document: all sections, units and translations."""

    sections: list[Section] = field(default_factory=list)
    units: list[Unit] = field(default_factory=list)
    translations: dict[UUID, dict[str, Translation]] = field(default_factory=dict)

    def units_of(self, section: Section) -> list[Unit]:
        return [u for u in self.units if u.section_id == section.id]

    @property
    def active_sections(self) -> list[Section]:
        return sorted((s for s in self.sections if s.active), key=lambda s: s.position)

    @property
    def active_units(self) -> list[Unit]:
        active_ids = {s.id for s in self.sections if s.active}
        return [u for u in self.units if u.active and u.section_id in active_ids]


async def load_document_state(uow: UnitOfWork, document: Document) -> DocumentState:
    sections = await uow.sections.list_by_document(document.id)
    units = await uow.units.list_by_sections([s.id for s in sections]) if sections else []
    rows = await uow.translations.list_by_units([u.id for u in units]) if units else []
    translations: dict[UUID, dict[str, Translation]] = {}
    for translation in rows:
        translations.setdefault(translation.unit_id, {})[translation.locale] = translation
    return DocumentState(sections=sections, units=units, translations=translations)


class _Changes:
    """Pending writes, keyed by id so an entity is written once."""

    def __init__(self) -> None:
        self.new_sections: dict[UUID, Section] = {}
        self.dirty_sections: dict[UUID, Section] = {}
        self.new_units: dict[UUID, Unit] = {}
        self.dirty_units: dict[UUID, Unit] = {}
        self.new_translations: dict[UUID, Translation] = {}
        self.dirty_translations: dict[UUID, Translation] = {}

    def touch_section(self, section: Section) -> None:
        if section.id not in self.new_sections:
            self.dirty_sections[section.id] = section

    def touch_unit(self, unit: Unit) -> None:
        if unit.id not in self.new_units:
            self.dirty_units[unit.id] = unit

    async def flush(self, uow: UnitOfWork) -> None:
        if self.new_sections:
            await uow.sections.create_batch(list(self.new_sections.values()))
        if self.dirty_sections:
            await uow.sections.update_batch(list(self.dirty_sections.values()))
        if self.new_units:
            await uow.units.create_batch(list(self.new_units.values()))
        if self.dirty_units:
            await uow.units.update_batch(list(self.dirty_units.values()))
        if self.new_translations:
            await uow.translations.create_batch(list(self.new_translations.values()))
        for translation in self.dirty_translations.values():
            await uow.translations.update(translation)


class ContentPipeline:
    """Applies a new section map and/or a new locale map to a stored document."""

    def __init__(self, extractor: UnitExtractor) -> None:
        self._extractor = extractor

    async def apply(
        self,
        uow: UnitOfWork,
        document: Document,
        state: DocumentState,
        now: datetime,
        sections: dict[str, str] | None = None,
        locales_changed: bool = False,
    ) -> ReconciliationSummary:
        """Reconcile ``sections`` (if given) and backfill locales (if changed), then flush."""
        summary = ReconciliationSummary()
        changes = _Changes()
        pending: dict[UUID, Unit] = {}

        if sections is not None:
            self._sync_sections(document, state, sections, now, summary, changes, pending)

        targets = state.active_units if locales_changed else list(pending.values())
        created = provision_translations(document, targets, state.translations, now)
        for translation in created:
            changes.new_translations[translation.id] = translation
        summary.created_translations = len(created)

        for unit in targets:
            if recalculate_ready(unit, state.translations.get(unit.id, {}), document):
                changes.touch_unit(unit)

        await changes.flush(uow)
        logger.info(
            "Synced %s: %d created, %d reused, %d reactivated, %d deactivated units; "
            "%d translations provisioned; sections deactivated=%s reactivated=%s",
            document.name,
            summary.created_units,
            summary.reused_units,
            summary.reactivated_units,
            summary.deactivated_units,
            summary.created_translations,
            summary.deactivated_sections,
            summary.reactivated_sections,
        )
        return summary

    def _sync_sections(
        self,
        document: Document,
        state: DocumentState,
        sections: dict[str, str],
        now: datetime,
        summary: ReconciliationSummary,
        changes: _Changes,
        pending: dict[UUID, Unit],
    ) -> None:
        by_name = {s.name: s for s in state.sections}

        for position, (name, content) in enumerate(sections.items()):
            section = by_name.get(name)
            if section is None:
                section = Section(
                    id=uuid4(),
                    document_id=document.id,
                    name=name,
                    source_copy=content,
                    position=position,
                    created_at=now,
                    updated_at=now,
                )
                state.sections.append(section)
                changes.new_sections[section.id] = section
            elif section.active and section.source_copy == content:
                summary.reused_units += len([u for u in state.units_of(section) if u.active])
                if section.position != position:
                    section.position = position
                    section.updated_at = now
                    changes.touch_section(section)
                continue
            else:
                if not section.active:
                    summary.reactivated_sections.append(name)
                section.source_copy = content
                section.position = position
                section.updated_at = now
                changes.touch_section(section)

            outcome = reconcile_section(
                section,
                state.units_of(section),
                self._extractor.extract(content).units,
                now,
            )
            for unit in outcome.created:
                state.units.append(unit)
                changes.new_units[unit.id] = unit
            for unit in outcome.changed:
                changes.touch_unit(unit)
            for unit in outcome.moved:
                base = sync_base_translation(
                    document, unit, state.translations.get(unit.id, {}), now
                )
                if base is not None:
                    changes.dirty_translations[base.id] = base
            for unit in outcome.needs_provisioning + outcome.moved:
                pending[unit.id] = unit
            summary.created_units += len(outcome.created)
            summary.reused_units += len(outcome.reused)
            summary.reactivated_units += len(outcome.reactivated)
            summary.deactivated_units += len(outcome.deactivated)

        for name, section in by_name.items():
            if name in sections or not section.active:
                continue
            retired = deactivate_section(section, state.units_of(section), now)
            changes.touch_section(section)
            for unit in retired:
                changes.touch_unit(unit)
            summary.deactivated_sections.append(name)
            summary.deactivated_units += len(retired)
