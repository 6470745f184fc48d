"""Readiness aggregator - unit flag plus derived section and document rollups."""

from collections.abc import Iterable
from uuid import UUID

from parlance.domain.entities import Document, Section, Translation, Unit


def required_locales(document: Document) -> list[str]:
    """Base locale plus every targeted locale flagged as required."""
    locales = [document.base_locale]
    locales.extend(
        loc for loc, required in document.targeted_locales.items()
        if required and loc != document.base_locale
    )
    return locales


def manifest_locales(document: Document) -> list[str]:
    """Locales a manifest is rendered for: the required targeted ones."""
    return [
        loc for loc, required in document.targeted_locales.items()
        if required and loc != document.base_locale
    ]


def is_unit_ready(translations: dict[str, Translation], required: Iterable[str]) -> bool:
    for locale in required:
        translation = translations.get(locale)
        if translation is None or not translation.complete:
            return False
    return True


def recalculate_ready(
    unit: Unit, translations: dict[str, Translation], document: Document
) -> bool:
    """Recompute ``unit.ready``. Returns True when the flag changed."""
    ready = is_unit_ready(translations, required_locales(document))
    if ready == unit.ready:
        return False
    unit.ready = ready
    return True


def section_ready(section: Section, units: Iterable[Unit]) -> bool:
    """Derived: every active unit of an active section is ready."""
    return all(u.ready for u in units if u.active and u.section_id == section.id)


def document_ready(sections: Iterable[Section], units: Iterable[Unit]) -> bool:
    """Derived: every active unit in every active section is ready."""
    by_section: dict[UUID, list[Unit]] = {}
    for unit in units:
        by_section.setdefault(unit.section_id, []).append(unit)
    return all(
        section_ready(section, by_section.get(section.id, []))
        for section in sections
        if section.active
    )
