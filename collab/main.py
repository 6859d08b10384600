"""FastAPI application entry point.

Main application setup with middleware, routing, and lifecycle management.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from collab import __version__
from collab.api import ROUTERS
from collab.api.handlers import describe_validation_errors
from collab.api.schemas import ErrorResponse
from collab.core.config import Settings, get_settings
from collab.core.errors import CollabError, ConfigurationError, OperationError
from collab.core.logging_config import setup_logging
from collab.db.session import Database

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Handles startup and shutdown events for proper resource management.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info("Starting Creator Collaboration API...")

    if settings.create_tables_on_startup:
        try:
            await app.state.database.create_all_tables()
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}", exc_info=True)
            raise

    yield

    # Shutdown
    logger.info("Shutting down Creator Collaboration API...")

    for database in (app.state.database, app.state.service_database):
        if database is None:
            continue
        try:
            await database.close()
        except Exception as e:
            logger.error(f"Error closing database: {e}", exc_info=True)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Creator Collaboration API",
        description="Messaging, posts, profiles, verification, and NDA generation for brands and creators",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Configuration is read once here and handed to everything that needs it
    app.state.settings = settings
    app.state.database = Database.from_settings(settings)
    try:
        app.state.service_database = Database.service_role(settings)
    except ConfigurationError as e:
        logger.warning(f"{e}; admin routes will fail until it is configured")
        app.state.service_database = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)
    logger.info(f"Registered {len(ROUTERS)} routers under {API_PREFIX}")

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "service": "creator-collab-api",
            "version": __version__,
        }

    @app.exception_handler(CollabError)
    async def collab_exception_handler(request: Request, exc: CollabError):
        """Map validation and operation errors to ``{"error": ...}`` responses."""
        if isinstance(exc, OperationError):
            logger.error(
                f"{request.method} {request.url.path} failed ({exc.failure.value}): {exc.message}"
            )
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return _error(exc.status_code, exc.message or "Request failed")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request parsing errors as 400s."""
        logger.warning(f"Validation error: {exc.errors()}")
        return _error(status.HTTP_400_BAD_REQUEST, describe_validation_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Keep the error envelope for routing errors (404, 405)."""
        logger.warning(f"{request.method} {request.url.path}: {exc.status_code} {exc.detail}")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    logger.info("FastAPI application created successfully")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Starting uvicorn server on port 8000...")
    uvicorn.run(
        "collab.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
