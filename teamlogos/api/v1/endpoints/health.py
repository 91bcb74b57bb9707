"""Health check endpoints. Used for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from teamlogos.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Logo cache not wired", "model": ReadinessResponse}},
)
def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when the logo cache is wired; 503 otherwise."""
    sweeper = getattr(request.app.state, "cache_sweeper", None)
    body = ReadinessResponse(
        logo_cache=getattr(request.app.state, "logo_cache", None) is not None,
        sweeper_running=bool(sweeper and sweeper.running),
    )
    if body.logo_cache:
        return body
    body.status = "not_ready"
    return JSONResponse(status_code=503, content=body.model_dump())
