"""
Storefront API — Pydantic Response Schemas
============================================

The resource routes answer in plain text; only the health check returns JSON.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    routes: int = Field(description="Number of registered resource routes")
    uptime_seconds: float = Field(description="Seconds since service started")
