"""FastAPI application for GaussVAD Server."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from gaussvad import __version__
from gaussvad.engine.exceptions import (
    ConfigurationError,
    DecodeError,
    InputSizeMismatchError,
    InsufficientDataError,
)

from .detector_loader import get_detector_loader
from .exception_handlers import bad_parameters_handler, unprocessable_audio_handler
from .settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(levelname)s:     %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Builds shared detectors on startup.
    """
    if settings.preload_detectors:
        get_detector_loader().load_all()
        logger.info("Detectors loaded")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="GaussVAD Server",
        description="Gaussian likelihood ratio voice activity detection",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_exception_handler(DecodeError, unprocessable_audio_handler)
    app.add_exception_handler(InsufficientDataError, unprocessable_audio_handler)
    app.add_exception_handler(ConfigurationError, bad_parameters_handler)
    app.add_exception_handler(InputSizeMismatchError, bad_parameters_handler)

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Check server health status."""
        return {"status": "healthy", "version": __version__}

    from .routers.detect import router as detect_router

    app.include_router(detect_router)

    return app


def run_server() -> None:
    """Run the server using uvicorn."""
    app = create_app()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


# Application instance for ASGI servers
app = create_app()
