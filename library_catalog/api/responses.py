"""
Pydantic models for API responses.

Catalog pages are HTML; this file only holds the models for the few JSON
endpoints.
"""

from datetime import datetime

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Response for health check endpoint."""

    status: str
    version: str
    timestamp: datetime
