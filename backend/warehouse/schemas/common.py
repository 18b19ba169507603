"""
Warehouse Backend — Shared Response Schemas
=============================================

What:  Response models reused by several routes: success acknowledgement,
       error body and health report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Acknowledgement returned by inserts that do not echo the row."""
    success: bool = Field(default=True)


class ErrorResponse(BaseModel):
    """
    Error body shared by every 4xx/5xx response.

    Example:
        {"error": "Failed to fetch schedule", "request_id": "a1b2c3d4"}
    """
    error: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
