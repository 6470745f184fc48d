"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from parlance import __version__
from parlance.application.services.content_pipeline import ContentPipeline
from parlance.application.use_cases.document.create_document import CreateDocumentUseCase
from parlance.application.use_cases.document.get_document import GetDocumentUseCase
from parlance.application.use_cases.document.get_manifest import GetManifestUseCase
from parlance.application.use_cases.document.list_documents import ListDocumentsUseCase
from parlance.application.use_cases.document.update_document import UpdateDocumentUseCase
from parlance.application.use_cases.project.create_project import CreateProjectUseCase
from parlance.application.use_cases.translation.update_translation import (
    UpdateTranslationUseCase,
)
from parlance.config import get_settings
from parlance.infrastructure.extraction.paragraph_extractor import ParagraphExtractor
from parlance.infrastructure.persistence.postgres.connection import create_pool
from parlance.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from parlance.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from parlance.interfaces.api.resources.documents import (
    DocumentResource,
    DocumentsResource,
    ManifestResource,
)
from parlance.interfaces.api.resources.health import HealthResource
from parlance.interfaces.api.resources.projects import ProjectsResource
from parlance.interfaces.api.resources.translations import TranslationResource

logger = logging.getLogger(__name__)


def create_app(
    uow_factory: object,
    middleware: list | None = None,
    default_base_locale: str = "en",
    read_uow_factory: object | None = None,
) -> falcon.asgi.App:
    """Wire use cases and resources around a unit of work factory.

    Document reads use ``read_uow_factory`` when given, else ``uow_factory``.
    """
    read_uow_factory = read_uow_factory or uow_factory
    extractor = ParagraphExtractor()
    pipeline = ContentPipeline(extractor)

    create_project = CreateProjectUseCase(uow_factory, default_base_locale=default_base_locale)
    create_document = CreateDocumentUseCase(uow_factory, pipeline)
    update_document = UpdateDocumentUseCase(uow_factory, pipeline)
    get_document = GetDocumentUseCase(read_uow_factory)
    list_documents = ListDocumentsUseCase(read_uow_factory)
    get_manifest = GetManifestUseCase(read_uow_factory, extractor)
    update_translation = UpdateTranslationUseCase(uow_factory)

    app = falcon.asgi.App(middleware=middleware or [])

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)

    health_resource = HealthResource(uow_factory)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/projects", ProjectsResource(create_project))
    app.add_route(
        "/v1/projects/{project_id}/documents",
        DocumentsResource(list_documents, create_document),
    )
    app.add_route(
        "/v1/projects/{project_id}/documents/{name}",
        DocumentResource(get_document, update_document),
    )
    app.add_route(
        "/v1/projects/{project_id}/documents/{name}/manifest",
        ManifestResource(get_manifest),
    )
    app.add_route(
        "/v1/translations/{translation_id}",
        TranslationResource(update_translation),
    )
    return app


def create_parlance_app() -> falcon.asgi.App:
    """Composition root - build Falcon app backed by PostgreSQL."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    uow_factory = create_uow_factory(pool)
    logger.info("Parlance v%s starting (%s)", __version__, settings.environment)
    return create_app(
        uow_factory,
        middleware=[PoolLifespanMiddleware(pool)],
        default_base_locale=settings.default_base_locale,
        read_uow_factory=create_uow_factory(pool, read_only=True),
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_parlance_app()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main() -> None:
    """CLI entry point."""
    run_server()
