"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready."""

    status: str = Field(default="ok", description="Readiness status")
    logo_cache: bool = Field(..., description="Logo cache wired by the lifespan")
    sweeper_running: bool = Field(..., description="Expired-entry sweeper active")
