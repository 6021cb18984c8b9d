"""
API response models.

Pydantic models for JSON endpoint serialization and OpenAPI schema generation.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
