"""API schemas (pydantic request/response models)."""

from teamlogos.schemas.health import HealthResponse, ReadinessResponse
from teamlogos.schemas.logo import (
    CacheStatsResponse,
    LogoDisplayResponse,
    PreloadRequest,
    PreloadResponse,
    SweepResponse,
    TeamLogoSchema,
)

__all__ = [
    "CacheStatsResponse",
    "HealthResponse",
    "LogoDisplayResponse",
    "PreloadRequest",
    "PreloadResponse",
    "ReadinessResponse",
    "SweepResponse",
    "TeamLogoSchema",
]
