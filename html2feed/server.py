"""HTTP front end: one GET endpoint that turns query parameters into a feed."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from html2feed import __version__
from html2feed.config import Settings
from html2feed.exceptions import ExtractionError, SerializationError, SpecificationError, UpstreamError
from html2feed.service import FeedService

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, service: FeedService | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Service settings. Defaults to Settings.from_env().
        service: Feed service. Defaults to one built from settings.

    Returns:
        The configured app.

    """
    settings = settings or Settings.from_env()
    feed_service = service or FeedService(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        feed_service.close()

    app = FastAPI(title='html2feed', version=__version__, lifespan=lifespan)
    app.state.service = feed_service

    @app.exception_handler(SpecificationError)
    async def specification_error_handler(_request: Request, exc: SpecificationError) -> PlainTextResponse:
        log.info(f'Rejected request: {exc}')
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(ExtractionError)
    async def extraction_error_handler(_request: Request, exc: ExtractionError) -> PlainTextResponse:
        logfire.warn('Extraction failed', error=str(exc))
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(_request: Request, exc: UpstreamError) -> PlainTextResponse:
        logfire.error('Upstream failure', url=exc.url, error=str(exc))
        return PlainTextResponse(str(exc), status_code=502)

    @app.exception_handler(SerializationError)
    async def serialization_error_handler(_request: Request, exc: SerializationError) -> PlainTextResponse:
        logfire.error('Serialization failed', error=str(exc))
        return PlainTextResponse(str(exc), status_code=500)

    @app.get('/')
    def feed(request: Request) -> Response:
        if not request.query_params:
            return PlainTextResponse('html2feed is running')
        rendered = request.app.state.service.build(request.query_params)
        return Response(content=rendered.body, media_type=rendered.media_type)

    @app.get('/healthz')
    def healthz() -> dict[str, str]:
        return {'status': 'ok', 'version': __version__}

    return app
