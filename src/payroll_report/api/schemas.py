"""Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Response envelope
# ============================================================================


class StatusResponse(BaseModel):
    """Envelope for upload results and client errors."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    status_text: str = Field(alias="statusText")
    error: str | None = None
    message: str | None = None


# ============================================================================
# Health schemas
# ============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    database: str
