"""Unit tests for translation and readiness use cases."""

import pytest

from parlance.application.dto.document_dto import DocumentCreateInput
from parlance.application.use_cases.document.create_document import CreateDocumentUseCase
from parlance.application.use_cases.project.create_project import CreateProjectUseCase
from parlance.application.use_cases.translation.update_translation import (
    UpdateTranslationUseCase,
)
from parlance.application.use_cases.unit.recalculate_ready import RecalculateReadyUseCase
from parlance.domain.exceptions import NotFound, ValidationError


async def _create_unit(uow_factory, pipeline, project, fake_uow):
    await CreateDocumentUseCase(uow_factory, pipeline).execute(
        DocumentCreateInput(project_id=project.id, name="home", sections={"main": "<p>a</p>"})
    )
    unit = fake_uow.units.all()[0]
    by_locale = {t.locale: t for t in fake_uow.translations.all()}
    return unit, by_locale


@pytest.mark.asyncio
async def test_approving_required_locale_makes_unit_ready(
    uow_factory, fake_uow, pipeline, project
) -> None:
    unit, by_locale = await _create_unit(uow_factory, pipeline, project, fake_uow)
    use_case = UpdateTranslationUseCase(uow_factory)

    translation = await use_case.execute(by_locale["fr"].id, copy="<p>A</p>")
    assert translation.copy == "<p>A</p>"
    assert not translation.approved
    assert not (await fake_uow.units.get_by_id(unit.id)).ready

    await use_case.execute(by_locale["fr"].id, approved=True)
    assert (await fake_uow.units.get_by_id(unit.id)).ready

    await use_case.execute(by_locale["fr"].id, approved=False)
    assert not (await fake_uow.units.get_by_id(unit.id)).ready


@pytest.mark.asyncio
async def test_optional_locale_never_blocks(uow_factory, fake_uow, pipeline, project) -> None:
    unit, by_locale = await _create_unit(uow_factory, pipeline, project, fake_uow)
    await UpdateTranslationUseCase(uow_factory).execute(
        by_locale["fr"].id, copy="<p>A</p>", approved=True
    )
    assert by_locale["es"].copy is None
    assert (await fake_uow.units.get_by_id(unit.id)).ready


@pytest.mark.asyncio
async def test_base_locale_translation_is_read_only(uow_factory, fake_uow, pipeline, project) -> None:
    _, by_locale = await _create_unit(uow_factory, pipeline, project, fake_uow)
    with pytest.raises(ValidationError) as exc_info:
        await UpdateTranslationUseCase(uow_factory).execute(by_locale["en"].id, copy="x")
    assert "locale" in exc_info.value.errors


@pytest.mark.asyncio
async def test_update_translation_requires_a_change(uow_factory, fake_uow, pipeline, project) -> None:
    _, by_locale = await _create_unit(uow_factory, pipeline, project, fake_uow)
    with pytest.raises(ValidationError):
        await UpdateTranslationUseCase(uow_factory).execute(by_locale["fr"].id)


@pytest.mark.asyncio
async def test_update_translation_not_found(uow_factory, project) -> None:
    from uuid import uuid4

    with pytest.raises(NotFound, match="Translation"):
        await UpdateTranslationUseCase(uow_factory).execute(uuid4(), copy="x")


@pytest.mark.asyncio
async def test_recalculate_ready_repairs_stale_flag(
    uow_factory, fake_uow, pipeline, project
) -> None:
    unit, by_locale = await _create_unit(uow_factory, pipeline, project, fake_uow)
    fr = by_locale["fr"]
    fr.copy = "<p>A</p>"
    fr.approved = True
    await fake_uow.translations.update(fr)

    result = await RecalculateReadyUseCase(uow_factory).execute(unit.id)
    assert result.ready
    assert (await fake_uow.units.get_by_id(unit.id)).ready


@pytest.mark.asyncio
async def test_translation_writes_take_the_document_lock(
    uow_factory, fake_uow, pipeline, project
) -> None:
    unit, by_locale = await _create_unit(uow_factory, pipeline, project, fake_uow)
    await UpdateTranslationUseCase(uow_factory).execute(by_locale["fr"].id, copy="<p>A</p>")
    await RecalculateReadyUseCase(uow_factory).execute(unit.id)

    assert fake_uow.documents.locks == [(project.id, "home")] * 3


@pytest.mark.asyncio
async def test_recalculate_ready_unknown_unit(uow_factory, project) -> None:
    from uuid import uuid4

    with pytest.raises(NotFound, match="Unit"):
        await RecalculateReadyUseCase(uow_factory).execute(uuid4())


# --- CreateProjectUseCase ---


@pytest.mark.asyncio
async def test_create_project_defaults_base_locale(uow_factory, fake_uow) -> None:
    project = await CreateProjectUseCase(uow_factory, default_base_locale="en").execute(
        "site", targeted_locales={"FR": True}
    )
    assert project.base_locale == "en"
    assert project.targeted_locales == {"fr": True}
    assert await fake_uow.projects.get_by_id(project.id) == project


@pytest.mark.asyncio
async def test_create_project_validation(uow_factory) -> None:
    with pytest.raises(ValidationError) as exc_info:
        await CreateProjectUseCase(uow_factory).execute("", base_locale="not a locale")
    assert exc_info.value.errors == {"name": ["can't be blank"], "base_locale": ["invalid"]}
