"""
FastAPI Application Setup

Main entry point for the Submission Service API.

Responsibility:
    - FastAPI app initialization from an explicit Settings object
    - Service context on app.state (settings, repository, attachment storage)
    - MongoDB connection lifecycle (connect at startup, fail fast, close on shutdown)
    - Router registration (submissions, diagnostics)
    - CORS middleware configuration (exact origins + wildcard subdomains)
    - Global exception handlers
    - Request logging middleware
    - Root page and /uploads static files

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn, see src/api/server.py)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration

Contains:
    - create_app() factory function
    - Global exception handlers
    - Request logging middleware
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import routers
from src.api.routers import diagnostics, submissions

# Import shared schemas
from src.api.schemas.common import ErrorResponse

# Import domain exceptions for global handling
from src.domain.shared.exceptions import (
    DomainException,
    SubmissionPersistenceError,
    SubmissionStoreValidationError,
    SubmissionValidationError,
)

from src.application.ports.attachment_storage import AttachmentStorageProtocol
from src.domain.submission.repositories.submission_repository import (
    SubmissionRepositoryProtocol,
)
from src.infrastructure.file_storage.attachment_storage import (
    UPLOADS_URL_PREFIX,
    DiskAttachmentStorage,
    build_attachment_storage,
)
from src.infrastructure.persistence.mongo.connection import MongoConnection
from src.infrastructure.persistence.repositories.submission_repository import (
    MongoSubmissionRepository,
)
from src.shared.config import Settings, split_origins

SERVICE_NAME = "Submission Service"
SERVICE_VERSION = "1.0.0"

# Configure logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# HELPERS
# ============================================================================


def _is_development(request: Request) -> bool:
    settings: Optional[Settings] = getattr(request.app.state, "settings", None)
    return settings is not None and settings.is_development


def _error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.to_content())


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs every request with method, path, origin and content type, then the
    status code and duration once the response is ready.

    Logging Format:
        INFO: "Incoming request: POST /api/submit (origin=..., content-type=...)"
        INFO: "Request completed: POST /api/submit - 201 - 0.123s"
    """
    logger.info(
        f"Incoming request: {request.method} {request.url.path} "
        f"(origin={request.headers.get('origin')}, "
        f"content-type={request.headers.get('content-type')})"
    )

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


async def submission_validation_exception_handler(
    request: Request, exc: SubmissionValidationError
):
    """
    Missing/empty name or email, malformed email, oversized resume -> 400.

    Examples:
        >>> # POST /api/submit with name=""
        >>> # Returns: 400 {"error": "Validation failed",
        >>> #               "details": "Name is required and cannot be empty",
        >>> #               "field": "name"}
    """
    logger.warning(
        f"Validation failed: field={exc.field} - {exc.message} - "
        f"Request: {request.method} {request.url.path}"
    )

    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error="Validation failed", details=exc.message, field=exc.field),
    )


async def store_validation_exception_handler(
    request: Request, exc: SubmissionStoreValidationError
):
    """Document rejected by the store validator -> 400 with the field list."""
    logger.warning(
        f"Store validation failed: fields={exc.fields} - "
        f"Request: {request.method} {request.url.path}"
    )

    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error="Validation failed", details=exc.fields, fields=exc.fields),
    )


async def persistence_exception_handler(
    request: Request, exc: SubmissionPersistenceError
):
    """Store connectivity or write failure -> 500, detail only in development."""
    logger.error(
        f"Persistence error: {exc.message} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=exc,
    )

    details = exc.message if _is_development(request) else None
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error="Failed to save submission", details=details),
    )


async def domain_exception_handler(request: Request, exc: DomainException):
    """Any other domain exception -> 400."""
    logger.warning(
        f"Domain exception: {exc.__class__.__name__} - {exc.message} - "
        f"Request: {request.method} {request.url.path}"
    )

    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error="Bad request", details=exc.message),
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    """Malformed request body (e.g. resume sent as text) -> 400."""
    logger.warning(
        f"Invalid request: {request.method} {request.url.path} - {exc.errors()}"
    )

    fields = [
        str(error["loc"][-1]) for error in exc.errors() if error.get("loc")
    ]
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(
            error="Validation failed",
            details="Invalid request data",
            fields=fields or None,
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Framework HTTP errors.

    Unmatched routes -> 404 {"error": "Route not found", "details": "Cannot GET /x"}.
    A known path with the wrong method (405) is reported the same way.
    Other status codes keep their framework detail.
    """
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return _error_response(
            status.HTTP_404_NOT_FOUND,
            ErrorResponse(
                error="Route not found",
                details=f"Cannot {request.method} {request.url.path}",
            ),
        )

    error = ErrorResponse(error=str(exc.detail))

    return JSONResponse(
        status_code=exc.status_code,
        content=error.to_content(),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions -> 500.

    Logs full stack trace; the response carries the error text only in
    development mode.
    """
    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    details: Any = None
    if _is_development(request):
        details = f"{exc.__class__.__name__}: {exc}"

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error="Internal server error", details=details),
    )


# ============================================================================
# LIFESPAN
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Prepare resume storage and connect to MongoDB at startup; close the
    client on shutdown.

    The MongoDB connection is skipped when a repository was injected into
    create_app() (tests).

    Raises:
        OSError: Upload directory cannot be created
        ConfigurationError: MONGO_URI missing
        StoreConnectionError: Initial connection failed (server exits)
    """
    # /uploads is served from this directory
    storage = app.state.attachment_storage
    if isinstance(storage, DiskAttachmentStorage):
        storage.prepare()

    connection: Optional[MongoConnection] = None

    if app.state.repository is None:
        settings: Settings = app.state.settings
        connection = MongoConnection(
            uri=settings.require_mongo_uri(),
            database_name=settings.mongo_db_name,
            collection_name=settings.mongo_collection,
            timeout_ms=settings.mongo_timeout_ms,
        )
        await connection.connect()

        repository = MongoSubmissionRepository(connection.collection)
        try:
            await repository.ensure_indexes()
        except PyMongoError as e:
            logger.warning(f"Could not create submission indexes: {e}")

        app.state.mongo = connection
        app.state.repository = repository

    try:
        yield
    finally:
        if connection is not None:
            connection.close()
            app.state.repository = None
            app.state.mongo = None


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[SubmissionRepositoryProtocol] = None,
    attachment_storage: Optional[AttachmentStorageProtocol] = None,
) -> FastAPI:
    """
    FastAPI application factory.

    Args:
        settings: Configuration (default: Settings.from_env())
        repository: Submission store; when None, a MongoDB repository is
            created at startup from settings.mongo_uri
        attachment_storage: Resume storage strategy (default: chosen by
            settings.resume_storage)

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app()
        >>> # Run with uvicorn:
        >>> # python -m src.api.server
        >>> # uvicorn --factory src.api.main:create_app
    """
    settings = settings or Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)

    attachment_storage = attachment_storage or build_attachment_storage(settings)

    app = FastAPI(
        title="Submission Service API",
        version=SERVICE_VERSION,
        description=(
            "Accepts job-application forms (name, email, mobile, message, "
            "optional resume) and stores them in MongoDB."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Service context
    app.state.settings = settings
    app.state.repository = repository
    app.state.attachment_storage = attachment_storage
    app.state.mongo = None

    # CORS: exact origins + one regex for wildcard subdomains
    exact_origins, origin_regex = split_origins(settings.allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=exact_origins,
        allow_origin_regex=origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Add request logging middleware
    app.middleware("http")(request_logging_middleware)

    # Register global exception handlers
    app.add_exception_handler(
        SubmissionValidationError, submission_validation_exception_handler
    )
    app.add_exception_handler(
        SubmissionStoreValidationError, store_validation_exception_handler
    )
    app.add_exception_handler(SubmissionPersistenceError, persistence_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Register routers with /api prefix
    app.include_router(submissions.router, prefix="/api")
    app.include_router(diagnostics.router, prefix="/api")

    # Uploaded resumes are served back only when they live on disk
    if isinstance(attachment_storage, DiskAttachmentStorage):
        app.mount(
            f"/{UPLOADS_URL_PREFIX}",
            StaticFiles(directory=str(attachment_storage.upload_dir), check_dir=False),
            name=UPLOADS_URL_PREFIX,
        )

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def root() -> str:
        """Static informational page."""
        return (
            "<!DOCTYPE html>"
            f"<html><head><title>{SERVICE_NAME}</title></head>"
            f"<body><h1>{SERVICE_NAME}</h1><p>Status: running</p>"
            "<p>POST /api/submit to send an application.</p></body></html>"
        )

    logger.info(
        f"FastAPI application created: environment={settings.environment}, "
        f"resume_storage={settings.resume_storage}"
    )
    logger.info(f"Allowed origins: {settings.allowed_origins}")

    return app

