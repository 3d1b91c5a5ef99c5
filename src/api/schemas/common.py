"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for all API errors.

    Provides consistent error structure across all endpoints.
    Unset optional attributes are omitted from the JSON body.

    Attributes:
        error: Short error category (e.g., "Validation failed", "Route not found")
        details: Human-readable detail, a field list, or None when suppressed
        field: Offending form field for single-field validation errors
        fields: Offending fields reported by the document store
    """

    error: str = Field(description="Short error category")
    details: Optional[Any] = Field(
        default=None, description="Error detail (suppressed outside development)"
    )
    field: Optional[str] = Field(default=None, description="Offending form field")
    fields: Optional[list[str]] = Field(
        default=None, description="Offending fields reported by the store"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "Validation failed",
                "details": "Name is required and cannot be empty",
                "field": "name",
            }
        }
    }

    def to_content(self) -> dict[str, Any]:
        """JSON body without unset optional attributes."""
        return self.model_dump(exclude_none=True)
