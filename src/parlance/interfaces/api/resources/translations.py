"""Translation API resources."""

import falcon.asgi

from parlance.application.use_cases.translation.update_translation import (
    UpdateTranslationUseCase,
)
from parlance.domain.exceptions import NotFound, ValidationError
from parlance.interfaces.api.resources.errors import (
    bad_request,
    not_found,
    parse_uuid,
    read_object,
    validation_failed,
)


class TranslationResource:
    """PATCH /v1/translations/{translation_id} - edit or approve a translation."""

    def __init__(self, update_translation: UpdateTranslationUseCase) -> None:
        self._update_translation = update_translation

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        translation_id: str,
    ) -> None:
        tid = parse_uuid(translation_id)
        if tid is None:
            bad_request(resp, "Invalid UUID")
            return
        body = await read_object(req)
        if body is None:
            bad_request(resp, "Request body must be a JSON object")
            return
        copy = body.get("copy")
        if copy is not None and not isinstance(copy, str):
            validation_failed(resp, ValidationError({"copy": ["invalid"]}))
            return

        try:
            t = await self._update_translation.execute(
                tid, copy=copy, approved=body.get("approved")
            )
        except NotFound as e:
            not_found(resp, e)
            return
        except ValidationError as e:
            validation_failed(resp, e)
            return

        resp.media = {
            "id": str(t.id),
            "unit_id": str(t.unit_id),
            "locale": t.locale,
            "copy": t.copy,
            "approved": t.approved,
            "source_copy": t.source_copy,
            "updated_at": t.updated_at.isoformat(),
        }
        resp.status = falcon.HTTP_200
