"""
API Schemas Package

Contains shared Pydantic models for API Layer.
"""

from src.api.schemas.common import ErrorResponse
from src.api.schemas.submission import EchoResponse, HealthResponse, SubmitResponse

__all__ = ["ErrorResponse", "EchoResponse", "HealthResponse", "SubmitResponse"]
