"""Unit tests for manifest assembly."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from parlance.application.services.manifest import assemble_manifest
from parlance.application.services.provisioner import provision_translations
from parlance.application.services.readiness import recalculate_ready
from parlance.application.services.reconciler import reconcile_section
from parlance.domain.entities import Document, Section
from parlance.domain.exceptions import InvariantViolation, NotReady
from parlance.infrastructure.extraction.paragraph_extractor import ParagraphExtractor

NOW = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def extractor() -> ParagraphExtractor:
    return ParagraphExtractor()


def _build(extractor, content: str, targeted: dict[str, bool]):
    document = Document(
        id=uuid4(),
        project_id=uuid4(),
        name="home",
        base_locale="en",
        targeted_locales=targeted,
        created_at=NOW,
        updated_at=NOW,
    )
    section = Section(
        id=uuid4(),
        document_id=document.id,
        name="main",
        source_copy=content,
        position=0,
        created_at=NOW,
        updated_at=NOW,
    )
    units = reconcile_section(section, [], extractor.extract(content).units, NOW).units
    translations: dict = {}
    provision_translations(document, units, translations, NOW)
    return document, section, units, translations


def _approve(document, units, translations, locale: str, copies: list[str]) -> None:
    for unit, copy in zip(units, copies):
        translation = translations[unit.id][locale]
        translation.copy = copy
        translation.approved = True
        recalculate_ready(unit, translations[unit.id], document)


def test_manifest_concatenates_copies_in_order(extractor) -> None:
    document, section, units, translations = _build(
        extractor, "<p>a</p><p>b</p>", {"fr": True}
    )
    _approve(document, units, translations, "fr", ["X", "Y"])
    manifest = assemble_manifest(document, [section], units, translations, extractor)
    assert manifest == {"fr": {"main": "XY"}}


def test_manifest_keeps_layout(extractor) -> None:
    document, section, units, translations = _build(
        extractor, "<div>\n<p>a</p>\n<p>b</p>\n</div>", {"fr": True}
    )
    _approve(document, units, translations, "fr", ["<p>A</p>", "<p>B</p>"])
    manifest = assemble_manifest(document, [section], units, translations, extractor)
    assert manifest["fr"]["main"] == "<div>\n<p>A</p>\n<p>B</p>\n</div>"


def test_manifest_not_ready_when_unit_unapproved(extractor) -> None:
    document, section, units, translations = _build(
        extractor, "<p>a</p><p>b</p>", {"fr": True}
    )
    _approve(document, units[:1], translations, "fr", ["X"])
    with pytest.raises(NotReady):
        assemble_manifest(document, [section], units, translations, extractor)


def test_manifest_covers_required_targeted_locales_only(extractor) -> None:
    document, section, units, translations = _build(
        extractor, "<p>a</p>", {"fr": True, "es": False}
    )
    _approve(document, units, translations, "fr", ["X"])
    manifest = assemble_manifest(document, [section], units, translations, extractor)
    assert list(manifest) == ["fr"]


def test_manifest_rejects_section_out_of_sync(extractor) -> None:
    document, section, units, translations = _build(extractor, "<p>a</p>", {"fr": True})
    _approve(document, units, translations, "fr", ["X"])
    section.source_copy = "<p>changed</p>"
    with pytest.raises(InvariantViolation):
        assemble_manifest(document, [section], units, translations, extractor)
