"""Cloud Mock API: FastAPI application entry point.

Invariants:
    - create_app(settings) is the only place routes and handlers are attached
    - Mock routes mounted only when settings.mock_enabled; health always mounted
    - Global error handlers map every failure to the {"error": ...} envelope
    - Settings are stored on app.state for routes that need them
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cloud_mock import __version__
from cloud_mock.api.error_handlers import register_error_handlers
from cloud_mock.api.mock_router import create_mock_router
from cloud_mock.api.routes import health
from cloud_mock.config import Settings, get_settings
from cloud_mock.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings (defaults to env)."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if settings.mock_enabled:
            logger.info("Cloud Mock API started in mock mode")
        else:
            logger.info(
                f"Mock disabled; clients should target {settings.upstream_url}",
            )
        yield
        logger.info("Cloud Mock API shutting down")

    app = FastAPI(
        title="Cloud Mock API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    if settings.mock_enabled:
        app.include_router(create_mock_router())

    register_error_handlers(app)
    return app


app = create_app()


def serve() -> None:
    """Run the API under uvicorn, bound to settings.host:settings.port."""
    settings = get_settings()
    uvicorn.run(
        "cloud_mock.main:app", host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
