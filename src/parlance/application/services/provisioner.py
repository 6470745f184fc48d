"""Translation provisioner - one translation per (active unit, locale)."""

from datetime import datetime
from uuid import UUID, uuid4

from parlance.domain.entities import Document, Translation, Unit


def document_locales(document: Document) -> list[str]:
    """Base locale first, then targeted locales in declaration order."""
    locales = [document.base_locale]
    locales.extend(loc for loc in document.targeted_locales if loc != document.base_locale)
    return locales


def provision_translations(
    document: Document,
    units: list[Unit],
    existing: dict[UUID, dict[str, Translation]],
    now: datetime,
) -> list[Translation]:
    """Return the translations missing for ``units`` (inactive units are skipped).

    The base-locale translation is approved with the unit's source as copy;
    targeted-locale translations start empty and unapproved. ``existing`` maps
    unit id -> locale -> translation and is updated in place.
    """
    created: list[Translation] = []
    for unit in units:
        if not unit.active:
            continue
        have = existing.setdefault(unit.id, {})
        for locale in document_locales(document):
            if locale in have:
                continue
            is_base = locale == document.base_locale
            translation = Translation(
                id=uuid4(),
                unit_id=unit.id,
                locale=locale,
                source_copy=unit.source_copy,
                created_at=now,
                updated_at=now,
                copy=unit.source_copy if is_base else None,
                approved=is_base,
            )
            have[locale] = translation
            created.append(translation)
    return created


def sync_base_translation(
    document: Document, unit: Unit, translations: dict[str, Translation], now: datetime
) -> Translation | None:
    """Keep the base translation equal to the unit's literal source. Returns it if changed."""
    base = translations.get(document.base_locale)
    if base is None:
        return None
    if base.copy == unit.source_copy and base.source_copy == unit.source_copy and base.approved:
        return None
    base.copy = unit.source_copy
    base.source_copy = unit.source_copy
    base.approved = True
    base.updated_at = now
    return base
