"""Manifest assembler - per-locale rendering from approved translations."""

from uuid import UUID

from parlance.application.ports import UnitExtractor
from parlance.application.services.readiness import manifest_locales
from parlance.domain.entities import Document, Section, Translation, Unit
from parlance.domain.exceptions import InvariantViolation, NotReady


def assemble_manifest(
    document: Document,
    sections: list[Section],
    units: list[Unit],
    translations: dict[UUID, dict[str, Translation]],
    extractor: UnitExtractor,
) -> dict[str, dict[str, str]]:
    """Render ``{locale: {section name: content}}`` for every required targeted locale.

    Raises NotReady when any active unit of an active section is not ready.
    Performs no writes.
    """
    active_sections = sorted((s for s in sections if s.active), key=lambda s: s.position)
    by_section: dict[UUID, list[Unit]] = {s.id: [] for s in active_sections}
    for unit in units:
        if unit.active and unit.section_id in by_section:
            by_section[unit.section_id].append(unit)

    pending = [u for us in by_section.values() for u in us if not u.ready]
    if pending:
        raise NotReady(
            f"Document {document.name} has {len(pending)} unit(s) not ready for manifest"
        )

    layouts = {}
    for section in active_sections:
        section_units = sorted(by_section[section.id], key=lambda u: u.position)
        layout = extractor.extract(section.source_copy)
        slots = layout.units
        if [s.fingerprint.value for s in slots] != [u.fingerprint for u in section_units]:
            raise InvariantViolation(
                f"Section {section.name} of {document.name} is out of sync with its units"
            )
        layouts[section.name] = (layout, section_units)

    manifest: dict[str, dict[str, str]] = {}
    for locale in manifest_locales(document):
        rendered: dict[str, str] = {}
        for name, (layout, section_units) in layouts.items():
            copies = []
            for unit in section_units:
                translation = translations.get(unit.id, {}).get(locale)
                if translation is None or not translation.complete:
                    raise InvariantViolation(
                        f"Unit {unit.id} is ready but has no approved {locale} copy"
                    )
                copies.append(translation.copy)
            rendered[name] = layout.render(copies)
        manifest[locale] = rendered
    return manifest
