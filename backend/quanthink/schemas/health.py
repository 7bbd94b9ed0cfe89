"""
QuanThink Backend: Health Check Schema
=======================================
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Returned by GET /health for monitoring and load balancer checks.

    A backend that can't reach its database is reported as unhealthy.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
