"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agilecore import __version__
from agilecore.api.models import APIResponse
from agilecore.api.routes import burndown, grouping, health, ordering, stats, validation
from agilecore.config import get_settings
from agilecore.domain.exceptions import AgileCoreError, InputShapeError
from agilecore.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from agilecore.config import Settings

logger = get_logger("api")


def _request_error_message(exc: RequestValidationError) -> str:
    fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
    return f"Malformed request ({fields})"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    settings: Settings = app.state.settings
    if settings.log_dir is not None:
        setup_logging(settings)
    logger.info("agilecore API %s started", __version__)
    yield
    # Shutdown
    logger.info("agilecore API stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings served to the routes. When settings.log_dir is
            set, file logging is configured on startup. Defaults to
            get_settings().
    """
    app = FastAPI(
        title="agilecore API",
        description="Board & sprint analytics and ordering engine",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = get_settings() if settings is None else settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=APIResponse[None](data=None, error=_request_error_message(exc)).model_dump(),
        )

    @app.exception_handler(InputShapeError)
    async def input_shape_handler(_request: Request, exc: InputShapeError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=APIResponse[None](data=None, error=str(exc)).model_dump(),
        )

    @app.exception_handler(AgileCoreError)
    async def agilecore_error_handler(_request: Request, exc: AgileCoreError) -> JSONResponse:
        logger.error("Unhandled engine error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )

    # Include routers
    app.include_router(health.router, prefix="/api/v1")
    app.include_router(stats.router, prefix="/api/v1")
    app.include_router(grouping.router, prefix="/api/v1")
    app.include_router(ordering.router, prefix="/api/v1")
    app.include_router(burndown.router, prefix="/api/v1")
    app.include_router(validation.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
