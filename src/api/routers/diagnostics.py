"""
API Router for Diagnostics

Responsibility:
    Liveness and CORS diagnostics. No persistence writes.

Contains:
    - GET /health - Store connectivity, timestamp, allowed origins
    - GET /test - Echo request headers and origin
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from src.api.schemas.submission import EchoResponse, HealthResponse

# Configure logger
logger = logging.getLogger(__name__)

router = APIRouter(tags=["diagnostics"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Reports document store connectivity and the configured CORS origins",
    responses={503: {"model": HealthResponse, "description": "Store unreachable"}},
)
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns:
        200 with status "healthy" when the store answers a ping,
        503 with status "unhealthy" otherwise

    Examples:
        >>> curl http://localhost:5000/api/health
        {
          "status": "healthy",
          "database": "connected",
          "timestamp": "2024-01-15T10:30:00.123456+00:00",
          "allowedOrigins": ["http://localhost:3000", ...]
        }
    """
    repository = getattr(request.app.state, "repository", None)
    connected = repository is not None and await repository.ping()

    response = HealthResponse(
        status="healthy" if connected else "unhealthy",
        database="connected" if connected else "disconnected",
        timestamp=datetime.now(timezone.utc).isoformat(),
        allowed_origins=request.app.state.settings.allowed_origins,
    )

    if not connected:
        logger.warning("Health check: document store disconnected")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump(by_alias=True),
        )

    return response


@router.get(
    "/test",
    response_model=EchoResponse,
    summary="CORS diagnostic endpoint",
    description="Echoes request headers and the Origin header",
)
async def echo_request(request: Request) -> EchoResponse:
    """Echo request headers and origin; no side effects."""
    return EchoResponse(
        origin=request.headers.get("origin"),
        headers=dict(request.headers),
    )
