"""
Submission API Schemas

Response models for the submission and diagnostics endpoints.
Field aliases keep the camelCase wire format expected by the frontend.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class SubmitResponse(BaseModel):
    """
    Response for a saved submission (HTTP 201).

    Attributes:
        success: Always True
        message: Human-readable success message
        submission_id: Identifier assigned by the store (JSON: "submissionId")
    """

    success: bool = True
    message: str = "Submission saved successfully"
    submission_id: str = Field(alias="submissionId")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "success": True,
                "message": "Submission saved successfully",
                "submissionId": "65a1f0c2e4b0a1b2c3d4e5f6",
            }
        },
    }


class HealthResponse(BaseModel):
    """
    Health check response.

    Attributes:
        status: "healthy" when the store answers a ping, "unhealthy" otherwise
        database: "connected" or "disconnected"
        timestamp: ISO 8601 timestamp of the check
        allowed_origins: Configured CORS origins (JSON: "allowedOrigins")
    """

    status: str
    database: str
    timestamp: str
    allowed_origins: list[str] = Field(alias="allowedOrigins")

    model_config = {"populate_by_name": True}


class EchoResponse(BaseModel):
    """Diagnostic echo of request headers and origin."""

    message: str = "CORS test successful"
    origin: Optional[str] = None
    headers: dict[str, Any] = Field(default_factory=dict)
