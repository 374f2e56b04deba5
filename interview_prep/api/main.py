"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers, exception handlers and
middleware, and configures the uvicorn server.

Dependencies: fastapi, interview_prep.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from interview_prep import __version__
from interview_prep.api.deps.dependencies import get_service_cache
from interview_prep.api.routers.router_utils import error_response
from interview_prep.boundary.db.create_tables import create_all_tables
from interview_prep.configs import get_settings
from interview_prep.core.exceptions import InterviewPrepException, ValidationError
from interview_prep.observability import configure_logging
from interview_prep.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

from .routers import (
    ai_router,
    health_router,
    questions_router,
    sessions_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    # Startup
    if settings.database.auto_create_tables:
        await create_all_tables()
    logger.info("Interview prep API started", extra={"environment": settings.environment})

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info("Service cache cleared")


async def interview_prep_exception_handler(
    request: Request, exc: InterviewPrepException
) -> JSONResponse:
    """Render domain errors raised outside endpoint bodies (e.g. auth)."""
    logger.warning(
        exc.message,
        extra={"path": request.url.path, "status_code": exc.status_code},
    )
    return error_response(exc)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 Invalid input data."""
    logger.warning(
        "Invalid request body",
        extra={"path": request.url.path, "errors": str(exc.errors())},
    )
    return error_response(ValidationError("Invalid input data"))


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Interview Prep API",
        description="Generate, store and review interview question sets",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_exception_handler(InterviewPrepException, interview_prep_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router)
    app.include_router(ai_router, prefix="/api")
    app.include_router(sessions_router, prefix="/api")
    app.include_router(questions_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    server = get_settings().server
    uvicorn.run(
        "interview_prep.api.main:app",
        host=server.host,
        port=server.port,
    )
