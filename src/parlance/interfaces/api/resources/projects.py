"""Project API resources."""

import falcon.asgi

from parlance.application.use_cases.project.create_project import CreateProjectUseCase
from parlance.domain.exceptions import ValidationError
from parlance.interfaces.api.resources.errors import bad_request, read_object, validation_failed


class ProjectsResource:
    """POST /v1/projects - create project."""

    def __init__(self, create_project: CreateProjectUseCase) -> None:
        self._create_project = create_project

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create project with base and targeted locales."""
        body = await read_object(req)
        if body is None:
            bad_request(resp, "Request body must be a JSON object")
            return

        try:
            project = await self._create_project.execute(
                body.get("name"),
                base_locale=body.get("base_locale"),
                targeted_locales=body.get("targeted_locales"),
            )
        except ValidationError as e:
            validation_failed(resp, e)
            return

        resp.media = {
            "id": str(project.id),
            "name": project.name,
            "base_locale": project.base_locale,
            "targeted_locales": project.targeted_locales,
            "created_at": project.created_at.isoformat(),
            "updated_at": project.updated_at.isoformat(),
        }
        resp.status = falcon.HTTP_201
