"""Create project use case."""

from datetime import UTC, datetime
from uuid import uuid4

from parlance.application.services.validation import (
    validate_locale,
    validate_name,
    validate_targeted_locales,
)
from parlance.domain.entities import Project
from parlance.domain.exceptions import ValidationError


class CreateProjectUseCase:
    """Create project - owning scope and locale defaults for its documents."""

    def __init__(self, unit_of_work_factory: type, default_base_locale: str = "en") -> None:
        self._uow_factory = unit_of_work_factory
        self._default_base_locale = default_base_locale

    async def execute(
        self,
        name: str | None,
        base_locale: str | None = None,
        targeted_locales: dict[str, bool] | None = None,
    ) -> Project:
        """Create project with validated locale settings."""
        errors: dict[str, list[str]] = {}
        name = validate_name(name, errors)
        base = validate_locale(base_locale or self._default_base_locale, errors, "base_locale")
        targeted = (
            validate_targeted_locales(targeted_locales, errors)
            if targeted_locales is not None
            else {}
        )
        if errors:
            raise ValidationError(errors)

        now = datetime.now(UTC)
        project = Project(
            id=uuid4(),
            name=name,
            base_locale=base,
            targeted_locales=targeted,
            created_at=now,
            updated_at=now,
        )
        async with self._uow_factory() as uow:
            await uow.projects.create(project)
        return project
