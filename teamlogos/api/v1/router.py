"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from teamlogos.api.v1.dependencies.
"""

from fastapi import APIRouter

from teamlogos.api.v1.endpoints import health, logos

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(logos.router, prefix="/logos", tags=["logos"])
