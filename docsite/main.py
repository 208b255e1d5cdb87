import logging
import logging.config
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from docsite.config import Settings, load_settings
from docsite.routers.pages import limiter, router as pages_router
from docsite.services.composer import TemplateComposer
from docsite.services.renderer import MarkdownRenderer
from docsite.services.store import ContentStore, build_store

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
        }
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ContentStore] = None,
    composer: Optional[TemplateComposer] = None,
) -> FastAPI:
    """Build the site application.

    The content store, markdown renderer and page templates are created once
    here and shared read-only by every request.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Docsite",
        description="Renders markdown documents from a content store into HTML pages.",
        version="1.0.0",
        # /docs belongs to the documentation pages
        docs_url=None,
        redoc_url=None,
    )

    app.state.store = store or build_store(settings)
    app.state.renderer = MarkdownRenderer()
    app.state.composer = composer or TemplateComposer.from_directory(settings.content_root)

    # Rate-limiting state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception for %s", request.url)
        return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})

    app.include_router(pages_router)

    @app.get("/health", response_class=PlainTextResponse, summary="Health check")
    async def health() -> str:
        return "OK"

    return app


app = create_app()
