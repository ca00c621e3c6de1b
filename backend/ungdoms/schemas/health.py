"""Health check response schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class ServiceHealth(BaseModel):
    """Health status for an individual component."""

    status: HealthStatus = Field(description="Component health status")
    response_time_ms: float | None = Field(
        default=None, description="Response time in milliseconds"
    )
    details: dict[str, str | int | float | bool] | None = Field(
        default=None, description="Additional component details"
    )
    error: str | None = Field(default=None, description="Error message if unhealthy")


class HealthCheckResponse(BaseModel):
    """Complete health check response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2026-01-12T08:00:00Z",
                "version": "1.0.0",
                "services": {
                    "store": {
                        "status": "healthy",
                        "response_time_ms": 0.4,
                        "details": {"path": "server/data/store.json", "clients": 12},
                    },
                },
            }
        }
    )

    status: HealthStatus = Field(description="Overall system health status")
    timestamp: datetime = Field(description="Health check timestamp")
    version: str = Field(description="Application version")
    services: dict[str, ServiceHealth] = Field(
        description="Health status of individual components"
    )
