"""Document API resources."""

import falcon.asgi

from parlance.application.dto.document_dto import (
    DocumentCreateInput,
    DocumentOutput,
    DocumentUpdateInput,
)
from parlance.application.use_cases.document.create_document import CreateDocumentUseCase
from parlance.application.use_cases.document.get_document import GetDocumentUseCase
from parlance.application.use_cases.document.get_manifest import GetManifestUseCase
from parlance.application.use_cases.document.list_documents import ListDocumentsUseCase
from parlance.application.use_cases.document.update_document import UpdateDocumentUseCase
from parlance.domain.exceptions import NotFound, NotReady, ValidationError
from parlance.interfaces.api.resources.errors import (
    bad_request,
    not_found,
    not_ready,
    parse_uuid,
    read_object,
    validation_failed,
)


def _isoformat(value) -> str | None:
    return value.isoformat() if value else None


def _document_to_dict(d: DocumentOutput) -> dict:
    return {
        "id": str(d.id),
        "project_id": str(d.project_id),
        "name": d.name,
        "base_locale": d.base_locale,
        "targeted_locales": d.targeted_locales,
        "sections": d.sections,
        "ready": d.ready,
        "description": d.description,
        "email": d.email,
        "last_import_requested_at": _isoformat(d.last_import_requested_at),
        "last_import_finished_at": _isoformat(d.last_import_finished_at),
        "created_at": d.created_at.isoformat(),
        "updated_at": d.updated_at.isoformat(),
    }


class DocumentsResource:
    """GET/POST /v1/projects/{project_id}/documents - list and create documents."""

    def __init__(
        self,
        list_documents: ListDocumentsUseCase,
        create_document: CreateDocumentUseCase,
    ) -> None:
        self._list_documents = list_documents
        self._create_document = create_document

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str
    ) -> None:
        """List documents of project with readiness."""
        pid = parse_uuid(project_id)
        if pid is None:
            bad_request(resp, "Invalid UUID")
            return

        cursor = req.get_param("cursor")
        limit = req.get_param_as_int("limit") or 20
        limit = min(max(limit, 1), 100)

        try:
            items, next_cursor = await self._list_documents.execute(
                pid, cursor=cursor, limit=limit
            )
        except NotFound as e:
            not_found(resp, e)
            return

        resp.media = {
            "items": [{"name": i.name, "ready": i.ready} for i in items],
            "next_cursor": next_cursor,
        }
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str
    ) -> None:
        """Create document from its section map."""
        pid = parse_uuid(project_id)
        if pid is None:
            bad_request(resp, "Invalid UUID")
            return
        body = await read_object(req)
        if body is None:
            bad_request(resp, "Request body must be a JSON object")
            return

        try:
            result = await self._create_document.execute(
                DocumentCreateInput(
                    project_id=pid,
                    name=body.get("name"),
                    sections=body.get("sections"),
                    base_locale=body.get("base_locale"),
                    targeted_locales=body.get("targeted_locales"),
                    description=body.get("description"),
                    email=body.get("email"),
                )
            )
        except NotFound as e:
            not_found(resp, e)
            return
        except ValidationError as e:
            validation_failed(resp, e)
            return

        resp.media = _document_to_dict(result)
        resp.status = falcon.HTTP_201


class DocumentResource:
    """GET/PATCH /v1/projects/{project_id}/documents/{name} - show and update document."""

    def __init__(
        self,
        get_document: GetDocumentUseCase,
        update_document: UpdateDocumentUseCase,
    ) -> None:
        self._get_document = get_document
        self._update_document = update_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        project_id: str,
        name: str,
    ) -> None:
        """Get document by name."""
        pid = parse_uuid(project_id)
        if pid is None:
            bad_request(resp, "Invalid UUID")
            return

        try:
            result = await self._get_document.execute(pid, name)
        except NotFound as e:
            not_found(resp, e)
            return

        resp.media = _document_to_dict(result)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        project_id: str,
        name: str,
    ) -> None:
        """Update sections, targeted locales or metadata. Absent keys are left unchanged."""
        pid = parse_uuid(project_id)
        if pid is None:
            bad_request(resp, "Invalid UUID")
            return
        body = await read_object(req)
        if body is None:
            bad_request(resp, "Request body must be a JSON object")
            return

        try:
            result = await self._update_document.execute(
                DocumentUpdateInput(
                    project_id=pid,
                    name=name,
                    sections=body.get("sections"),
                    targeted_locales=body.get("targeted_locales"),
                    description=body.get("description"),
                    email=body.get("email"),
                )
            )
        except NotFound as e:
            not_found(resp, e)
            return
        except ValidationError as e:
            validation_failed(resp, e)
            return

        resp.media = _document_to_dict(result)
        resp.status = falcon.HTTP_200


class ManifestResource:
    """GET /v1/projects/{project_id}/documents/{name}/manifest - translated document."""

    def __init__(self, get_manifest: GetManifestUseCase) -> None:
        self._get_manifest = get_manifest

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        project_id: str,
        name: str,
    ) -> None:
        pid = parse_uuid(project_id)
        if pid is None:
            bad_request(resp, "Invalid UUID")
            return

        try:
            resp.media = await self._get_manifest.execute(pid, name)
        except NotFound as e:
            not_found(resp, e)
            return
        except NotReady as e:
            not_ready(resp, e)
            return
        resp.status = falcon.HTTP_200
