"""Team logo endpoints: display lookup, preload, and cache maintenance.

Lookups never fail because of the upstream API: a missing logo is
returned as state "initials" (or "empty") with no image sources.
"""

from fastapi import APIRouter, Query, Request, Response, status

from teamlogos.api.v1.dependencies import LogoCacheDep, SettingsDep
from teamlogos.application.services.logo_display import LogoDisplay
from teamlogos.core.limiter import limit_cache_admin, limit_preload
from teamlogos.domain.enums import LogoSize
from teamlogos.domain.exceptions import ValidationException
from teamlogos.schemas.logo import (
    CacheStatsResponse,
    LogoDisplayResponse,
    PreloadRequest,
    PreloadResponse,
    SweepResponse,
    TeamLogoSchema,
)
from teamlogos.shared.utils.datetime import utc_now

router = APIRouter()


@router.get("/cache/stats", response_model=CacheStatsResponse)
def get_cache_stats(cache: LogoCacheDep) -> CacheStatsResponse:
    """Snapshot of cache, failure markers, and preload queue."""
    return CacheStatsResponse.from_stats(cache.get_cache_stats(), utc_now())


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
@limit_cache_admin
def clear_cache(request: Request, cache: LogoCacheDep) -> Response:
    """Drop every cached logo, failure marker, and queued preload."""
    cache.clear_cache()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/cache/sweep", response_model=SweepResponse)
@limit_cache_admin
def sweep_cache(request: Request, cache: LogoCacheDep) -> SweepResponse:
    """Evict expired entries now instead of waiting for the sweeper."""
    return SweepResponse(removed=cache.clear_expired_cache())


@router.post(
    "/preload",
    response_model=PreloadResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@limit_preload
async def preload_logos(
    request: Request,
    body: PreloadRequest,
    cache: LogoCacheDep,
    settings: SettingsDep,
) -> PreloadResponse:
    """Queue logos for background lookup; returns before they are fetched."""
    if len(body.team_ids) > settings.logo_preload_max_batch:
        raise ValidationException(
            f"At most {settings.logo_preload_max_batch} team ids per preload",
            field="team_ids",
        )
    cache.preload_logos(body.team_ids, body.size, body.prefer_webp)
    return PreloadResponse(
        accepted=sum(1 for team_id in body.team_ids if team_id),
        stats=CacheStatsResponse.from_stats(cache.get_cache_stats(), utc_now()),
    )


@router.get("/{team_id}", response_model=LogoDisplayResponse)
async def get_team_logo(
    team_id: str,
    cache: LogoCacheDep,
    size: LogoSize = LogoSize.MEDIUM,
    prefer_webp: bool = True,
    team_name: str | None = Query(default=None, max_length=200),
    show_fallback: bool = True,
) -> LogoDisplayResponse:
    """Logo for one team plus what to render if the images fail to load."""
    logo = await cache.get_logo(team_id, size, prefer_webp)
    display = LogoDisplay(logo, team_name=team_name, show_fallback=show_fallback)
    return LogoDisplayResponse(
        team_id=team_id,
        size=size,
        pixels=size.pixels,
        state=display.state,
        logo=TeamLogoSchema.from_entity(logo) if logo else None,
        sources=display.sources,
        initials=display.initials,
    )
