"""
PhotoStudio Backend — Shared Response Schemas
===============================================

What:  Bodies that are not entity rows: errors, acknowledgements, upload and
       email results, and the health report.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Invalid input data",
            "details": {"errors": [{"field": "email", "message": "Field required"}]},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class AckResponse(BaseModel):
    """Returned by deletes and by the email relay."""
    message: str


class ImageUploadResponse(BaseModel):
    image_url: str = Field(description="Durable HTTPS URL on the image host")


class ContactEmail(BaseModel):
    """Payload relayed by POST /api/send-email (same fields as a contact)."""

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=300)
    message: str = Field(min_length=1)


class HealthResponse(BaseModel):
    """
    Health check response showing service and dependency status.

    status: healthy (everything up), degraded (an optional integration is not
    configured), unhealthy (database unreachable).
    """
    status: str = Field(description="Overall service status: healthy, degraded, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    image_host: str = Field(description="Image host: configured, not_configured")
    email: str = Field(description="Email relay: configured, not_configured")
    uptime_seconds: float = Field(description="Seconds since service started")
