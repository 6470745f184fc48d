"""Domain error -> HTTP response mapping shared by resources."""

from uuid import UUID

import falcon.asgi

from parlance.domain.exceptions import NotFound, NotReady, ValidationError


def validation_failed(resp: falcon.asgi.Response, error: ValidationError) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": {"errors": error.errors}}


def not_ready(resp: falcon.asgi.Response, error: NotReady) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": {"errors": [{"message": str(error)}]}}


def not_found(resp: falcon.asgi.Response, error: NotFound) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": f"{error.entity} not found"}


def bad_request(resp: falcon.asgi.Response, message: str) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": message}


def parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        return None


async def read_object(req: falcon.asgi.Request) -> dict | None:
    """JSON object body, or None when the body is malformed or not an object."""
    try:
        body = await req.get_media()
    except (falcon.MediaMalformedError, falcon.MediaNotFoundError):
        return None
    return body if isinstance(body, dict) else None
